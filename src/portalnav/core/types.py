"""Core type definitions."""

# Display strings keyed by locale code (e.g., {"en": "Home", "ne": "गृह"})
LocalizedText = dict[str, str]
