"""Locale resolvers and the resolver chain manager."""

from lingua.i18n.resolvers.base import LocaleResolver, SingleCandidateResolver
from lingua.i18n.resolvers.domain import DomainResolver
from lingua.i18n.resolvers.header import HeaderResolver, parse_accept_language
from lingua.i18n.resolvers.manager import (
    RESOLVER_REGISTRY,
    LocaleResolverManager,
    ResolverFactory,
)
from lingua.i18n.resolvers.storage import CookieResolver, QueryResolver, SessionResolver
from lingua.i18n.resolvers.url import UrlPrefixResolver, UrlSegmentResolver

__all__ = [
    "LocaleResolver",
    "SingleCandidateResolver",
    "SessionResolver",
    "CookieResolver",
    "QueryResolver",
    "HeaderResolver",
    "UrlSegmentResolver",
    "UrlPrefixResolver",
    "DomainResolver",
    "LocaleResolverManager",
    "ResolverFactory",
    "RESOLVER_REGISTRY",
    "parse_accept_language",
]
