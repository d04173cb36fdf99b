"""Locale resolver settings.

One section per built-in resolver. Every section carries an ``enabled`` flag
that defaults to ``True`` so configurations written before resolvers could be
switched off keep working, and an optional ``factory`` import path that
replaces the built-in resolver for that slot in the resolution order.
"""

from typing import Optional

from pydantic import ConfigDict, Field

from lingua.configuration.base import ConfigSection

DEFAULT_SESSION_KEY = "lingua.locale"
DEFAULT_COOKIE_KEY = "lingua_locale"
DEFAULT_LOCALE_PATTERNS = ("^[a-z]{2}([_-][A-Za-z]{2})?$",)


class ResolverSettings(ConfigSection):
    """Settings shared by every resolver slot."""

    enabled: bool = True
    factory: Optional[str] = Field(
        default=None,
        description="Import path of a callable taking LinguaSettings and returning a resolver",
    )


class CustomResolverSettings(ResolverSettings):
    """Settings for resolver names that are not built in.

    Extra keys are kept so custom factories can read their own options.
    """

    model_config = ConfigDict(frozen=True, extra="allow")


class SessionResolverSettings(ResolverSettings):
    key: Optional[str] = DEFAULT_SESSION_KEY


class CookieResolverSettings(ResolverSettings):
    key: str = DEFAULT_COOKIE_KEY
    persist_on_set: bool = False
    ttl_minutes: int = 60 * 24 * 365


class QueryResolverSettings(ResolverSettings):
    key: str = "locale"


class HeaderResolverSettings(ResolverSettings):
    use_quality: bool = True


class UrlSegmentResolverSettings(ResolverSettings):
    position: int = 1


class UrlPrefixResolverSettings(ResolverSettings):
    segment: int = 1
    patterns: tuple[str, ...] = DEFAULT_LOCALE_PATTERNS


class SubdomainSettings(ConfigSection):
    enabled: bool = True
    label: int = 1
    patterns: tuple[str, ...] = DEFAULT_LOCALE_PATTERNS
    base_domains: tuple[str, ...] = ()


class DomainResolverSettings(ResolverSettings):
    """Domain resolver settings.

    ``order`` decides whether the exact host map (``full``) or subdomain
    extraction (``subdomain``) is evaluated first.
    """

    order: tuple[str, ...] = ("full", "subdomain")
    full_map: dict[str, str] = Field(default_factory=dict)
    subdomain: SubdomainSettings = Field(default_factory=SubdomainSettings)


class ResolversSettings(ConfigSection):
    """Per-resolver configuration keyed by resolver name."""

    session: SessionResolverSettings = Field(default_factory=SessionResolverSettings)
    cookie: CookieResolverSettings = Field(default_factory=CookieResolverSettings)
    query: QueryResolverSettings = Field(default_factory=QueryResolverSettings)
    header: HeaderResolverSettings = Field(default_factory=HeaderResolverSettings)
    url_segment: UrlSegmentResolverSettings = Field(
        default_factory=UrlSegmentResolverSettings
    )
    url_prefix: UrlPrefixResolverSettings = Field(
        default_factory=UrlPrefixResolverSettings
    )
    domain: DomainResolverSettings = Field(default_factory=DomainResolverSettings)
    custom: dict[str, CustomResolverSettings] = Field(default_factory=dict)

    def for_name(self, name: str) -> Optional[ResolverSettings]:
        """Return the settings section for a resolver name, if any."""
        if name != "custom" and name in type(self).model_fields:
            return getattr(self, name)
        return self.custom.get(name)
