"""Locale resolver contract.

A resolver extracts zero or more locale candidates from one signal source
(session, cookie, query string, header, URL, domain). Resolvers only read
the context; normalization and the supported-locale check happen in the
resolver manager.
"""

import re
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Protocol, runtime_checkable

from lingua.i18n.models import LocaleContext


@runtime_checkable
class LocaleResolver(Protocol):
    """Anything that can produce locale candidates from a context."""

    def resolve(self, context: LocaleContext) -> Optional[str]:
        """Return the preferred candidate, or None."""
        ...

    def resolve_all(self, context: LocaleContext) -> list[str]:
        """Return all candidates ordered by preference (possibly empty)."""
        ...


class SingleCandidateResolver(ABC):
    """Base for resolvers that read at most one value.

    Empty strings are treated as absent.
    """

    @abstractmethod
    def candidate(self, context: LocaleContext) -> Optional[str]:
        """Read the raw value from the context."""

    def resolve_all(self, context: LocaleContext) -> list[str]:
        value = self.candidate(context)
        return [value] if value else []

    def resolve(self, context: LocaleContext) -> Optional[str]:
        candidates = self.resolve_all(context)
        return candidates[0] if candidates else None


def matches_any(value: str, patterns: Iterable[str]) -> bool:
    """Check whether ``value`` matches at least one regex pattern."""
    return any(re.search(pattern, value) for pattern in patterns)
