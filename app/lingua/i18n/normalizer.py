"""Locale code normalization."""


def normalize_locale(locale: str) -> str:
    """Normalize a raw locale string to ``language`` or ``language_REGION``.

    Handles common variations:
    - Trims surrounding whitespace
    - Converts hyphens to underscores (en-US -> en_US)
    - Lowercases the language, uppercases everything after the first
      underscore (EN-us -> en_US, zh-hant-tw -> zh_HANT_TW)

    The result is not validated; use the supported-locale check for that.

    Args:
        locale: Raw locale string from any external source.

    Returns:
        Normalized locale code.
    """
    locale = locale.strip().replace("-", "_")

    if "_" in locale:
        language, region = locale.split("_", 1)
        return f"{language.lower()}_{region.upper()}"

    return locale.lower()


def base_language(locale: str) -> str:
    """Return the language part of a locale (``ar_SA`` -> ``ar``)."""
    return normalize_locale(locale).split("_", 1)[0]
