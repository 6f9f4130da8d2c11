"""Pure navigation resolution: records, tree building, path matching."""
