"""Exceptions raised by the i18n package."""

from typing import Sequence


class LinguaError(Exception):
    """Base class for lingua errors."""


class UnsupportedLocaleError(LinguaError, ValueError):
    """Raised when a locale is not in the supported-locale list.

    Attributes:
        locale: The rejected (normalized) locale code.
        supported_locales: The configured supported locales.
    """

    def __init__(self, locale: str, supported_locales: Sequence[str]):
        self.locale = locale
        self.supported_locales = list(supported_locales)
        super().__init__(
            f'Locale "{locale}" is not supported. '
            f"Supported locales: {', '.join(self.supported_locales)}"
        )
