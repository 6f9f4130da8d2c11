"""Locale selection for per-locale text maps."""

from collections.abc import Mapping

DEFAULT_LOCALE = "en"


def get_localized_text(
    entity: object,
    locale: str,
    default_locale: str = DEFAULT_LOCALE,
) -> str:
    """Pick the display string for a locale.

    Falls back to the default locale, then to the first non-empty value.

    Args:
        entity: Mapping of locale code to text (anything else yields "")
        locale: Requested locale code
        default_locale: Locale tried when the requested one is missing

    Returns:
        Localized text, or an empty string when nothing usable exists
    """
    if not isinstance(entity, Mapping):
        return ""

    for key in (locale, default_locale):
        value = entity.get(key)
        if isinstance(value, str) and value:
            return value

    for value in entity.values():
        if isinstance(value, str) and value:
            return value
    return ""
