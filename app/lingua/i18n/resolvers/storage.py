"""Resolvers reading a single stored value: session, cookie, query string."""

from typing import Optional

from lingua.configuration import LinguaSettings
from lingua.i18n.models import LocaleContext
from lingua.i18n.resolvers.base import SingleCandidateResolver


class SessionResolver(SingleCandidateResolver):
    """Reads the locale from the user's session."""

    def __init__(self, key: str):
        self.key = key

    @classmethod
    def from_settings(cls, settings: LinguaSettings) -> "SessionResolver":
        return cls(key=settings.effective_session_key)

    def candidate(self, context: LocaleContext) -> Optional[str]:
        value = context.session.get(self.key)
        return value if isinstance(value, str) else None


class CookieResolver(SingleCandidateResolver):
    """Reads the locale from a cookie."""

    def __init__(self, key: str):
        self.key = key

    @classmethod
    def from_settings(cls, settings: LinguaSettings) -> "CookieResolver":
        return cls(key=settings.resolvers.cookie.key)

    def candidate(self, context: LocaleContext) -> Optional[str]:
        return context.cookies.get(self.key)


class QueryResolver(SingleCandidateResolver):
    """Reads the locale from a query-string parameter (e.g. ``?locale=fr``)."""

    def __init__(self, key: str):
        self.key = key

    @classmethod
    def from_settings(cls, settings: LinguaSettings) -> "QueryResolver":
        return cls(key=settings.resolvers.query.key)

    def candidate(self, context: LocaleContext) -> Optional[str]:
        return context.query.get(self.key)
