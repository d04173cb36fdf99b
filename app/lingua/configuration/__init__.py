"""Configuration package.

Exposes the settings singleton and the settings classes.

Example:
    from lingua.configuration import settings, LinguaSettings

    supported = settings.lingua.locales
    custom = LinguaSettings(locales=["en", "fr"], default="en")
"""

from lingua.configuration.lingua import (
    DEFAULT_RTL_LOCALES,
    CacheSettings,
    LazyLoadingSettings,
    LinguaSettings,
    RoutesSettings,
    UrlSettings,
)
from lingua.configuration.resolvers import (
    DEFAULT_COOKIE_KEY,
    DEFAULT_LOCALE_PATTERNS,
    DEFAULT_SESSION_KEY,
    CookieResolverSettings,
    CustomResolverSettings,
    DomainResolverSettings,
    HeaderResolverSettings,
    QueryResolverSettings,
    ResolverSettings,
    ResolversSettings,
    SessionResolverSettings,
    SubdomainSettings,
    UrlPrefixResolverSettings,
    UrlSegmentResolverSettings,
)
from lingua.configuration.settings import Settings, settings

__all__ = [
    "settings",
    "Settings",
    "LinguaSettings",
    "LazyLoadingSettings",
    "CacheSettings",
    "UrlSettings",
    "RoutesSettings",
    "ResolversSettings",
    "ResolverSettings",
    "CustomResolverSettings",
    "SessionResolverSettings",
    "CookieResolverSettings",
    "QueryResolverSettings",
    "HeaderResolverSettings",
    "UrlSegmentResolverSettings",
    "UrlPrefixResolverSettings",
    "DomainResolverSettings",
    "SubdomainSettings",
    "DEFAULT_SESSION_KEY",
    "DEFAULT_COOKIE_KEY",
    "DEFAULT_LOCALE_PATTERNS",
    "DEFAULT_RTL_LOCALES",
]
