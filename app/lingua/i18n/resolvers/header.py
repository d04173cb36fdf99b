"""Accept-Language header resolver."""

import math
from typing import Optional

from lingua.configuration import LinguaSettings
from lingua.i18n.models import LocaleContext


def _parse_quality(raw: str) -> float:
    try:
        quality = float(raw.strip())
    except ValueError:
        return 0.0
    if not math.isfinite(quality):
        return 0.0
    return max(0.0, min(1.0, quality))


def parse_accept_language(header: str) -> list[tuple[str, float]]:
    """Parse an Accept-Language header into ``(tag, quality)`` pairs.

    Quality defaults to 1.0 and is clamped to [0.0, 1.0]. Unparsable or
    non-finite values (nan, inf) become 0.0. Blank segments are skipped. A
    repeated tag keeps its first position and the last quality seen.

    Example:
        "en-US,en;q=0.9,fr;q=0.8" -> [("en-US", 1.0), ("en", 0.9), ("fr", 0.8)]
    """
    preferences: dict[str, float] = {}

    for part in header.split(","):
        part = part.strip()
        if not part:
            continue

        segments = part.split(";")
        tag = segments[0].strip()
        if not tag:
            continue

        quality = 1.0
        if len(segments) > 1:
            quality_part = segments[1].strip()
            if quality_part.startswith("q="):
                quality = _parse_quality(quality_part[2:])

        preferences[tag] = quality

    return list(preferences.items())


class HeaderResolver:
    """Resolves locale candidates from the Accept-Language header.

    With ``use_quality`` the candidates are ordered by quality (descending,
    ties keep header order); otherwise header order is kept as-is.
    """

    HEADER = "accept-language"

    def __init__(self, use_quality: bool = True):
        self.use_quality = use_quality

    @classmethod
    def from_settings(cls, settings: LinguaSettings) -> "HeaderResolver":
        return cls(use_quality=settings.resolvers.header.use_quality)

    def resolve(self, context: LocaleContext) -> Optional[str]:
        candidates = self.resolve_all(context)
        return candidates[0] if candidates else None

    def resolve_all(self, context: LocaleContext) -> list[str]:
        header = context.header(self.HEADER)
        if not header:
            return []

        if self.use_quality:
            preferences = parse_accept_language(header)
            ordered = sorted(preferences, key=lambda pref: pref[1], reverse=True)
            return [tag for tag, _ in ordered]

        return self._parse_simple(header)

    @staticmethod
    def _parse_simple(header: str) -> list[str]:
        locales = []
        for part in header.split(","):
            tag = part.split(";")[0].strip()
            if tag:
                locales.append(tag)
        return locales
