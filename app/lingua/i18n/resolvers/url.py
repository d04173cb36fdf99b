"""Resolvers reading the locale from a URL path segment."""

from typing import Iterable, Optional

from lingua.configuration import DEFAULT_LOCALE_PATTERNS, LinguaSettings
from lingua.i18n.models import LocaleContext
from lingua.i18n.resolvers.base import SingleCandidateResolver, matches_any


def segment_at(context: LocaleContext, position: int) -> Optional[str]:
    """Return the path segment at a 1-based position, or None."""
    index = position - 1
    if index < 0:
        return None

    segments = context.segments
    if index >= len(segments):
        return None
    return segments[index]


class UrlSegmentResolver(SingleCandidateResolver):
    """Returns the path segment at the configured position verbatim.

    No format validation is done; ``/dashboard`` yields ``dashboard`` and the
    supported-locale check is left to the caller. Use UrlPrefixResolver to
    filter such false positives.
    """

    def __init__(self, position: int = 1):
        self.position = position

    @classmethod
    def from_settings(cls, settings: LinguaSettings) -> "UrlSegmentResolver":
        return cls(position=settings.resolvers.url_segment.position)

    def candidate(self, context: LocaleContext) -> Optional[str]:
        return segment_at(context, self.position)


class UrlPrefixResolver(SingleCandidateResolver):
    """Path segment resolver that only accepts locale-shaped segments."""

    def __init__(
        self,
        segment: int = 1,
        patterns: Iterable[str] = DEFAULT_LOCALE_PATTERNS,
    ):
        self.segment = segment
        self.patterns = tuple(patterns)

    @classmethod
    def from_settings(cls, settings: LinguaSettings) -> "UrlPrefixResolver":
        config = settings.resolvers.url_prefix
        return cls(segment=config.segment, patterns=config.patterns)

    def candidate(self, context: LocaleContext) -> Optional[str]:
        value = segment_at(context, self.segment)
        if value is None or not matches_any(value, self.patterns):
            return None
        return value
