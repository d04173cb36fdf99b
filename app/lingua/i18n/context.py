"""Ambient (request-scoped) active locale.

The host application reads the active locale from here after the locale
service has resolved or set it. Backed by a ContextVar so concurrent
requests in an async server do not see each other's locale.
"""

from contextvars import ContextVar
from typing import Optional

_active_locale: ContextVar[Optional[str]] = ContextVar("lingua_active_locale", default=None)


def set_active_locale(locale: str) -> None:
    _active_locale.set(locale)


def get_active_locale(default: Optional[str] = None) -> Optional[str]:
    """Return the active locale, or ``default`` when none has been set."""
    locale = _active_locale.get()
    return locale if locale is not None else default


def reset_active_locale() -> None:
    _active_locale.set(None)
