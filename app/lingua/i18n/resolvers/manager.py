"""Resolver chain orchestration."""

from typing import Callable, Mapping, Optional

from lingua.configuration import LinguaSettings
from lingua.i18n.imports import import_string
from lingua.i18n.models import LocaleContext
from lingua.i18n.resolvers.base import LocaleResolver
from lingua.i18n.resolvers.domain import DomainResolver
from lingua.i18n.resolvers.header import HeaderResolver
from lingua.i18n.resolvers.storage import CookieResolver, QueryResolver, SessionResolver
from lingua.i18n.resolvers.url import UrlPrefixResolver, UrlSegmentResolver
from lingua.logging import get_module_logger

logger = get_module_logger()

ResolverFactory = Callable[[LinguaSettings], LocaleResolver]

RESOLVER_REGISTRY: dict[str, ResolverFactory] = {
    "session": SessionResolver.from_settings,
    "cookie": CookieResolver.from_settings,
    "query": QueryResolver.from_settings,
    "header": HeaderResolver.from_settings,
    "url_segment": UrlSegmentResolver.from_settings,
    "url_prefix": UrlPrefixResolver.from_settings,
    "domain": DomainResolver.from_settings,
}


class LocaleResolverManager:
    """Runs the configured resolver chain against a request context.

    Resolvers are consulted in ``resolution_order``. Disabled resolvers and
    names with no factory are skipped. The first candidate that normalizes
    to a supported locale wins.

    Attributes:
        settings: Lingua settings the chain is built from.
    """

    def __init__(
        self,
        settings: LinguaSettings,
        factories: Optional[Mapping[str, ResolverFactory]] = None,
    ):
        """Initialize the manager.

        Args:
            settings: Lingua settings.
            factories: Optional name -> factory overrides, applied on top of
                the built-in registry. A factory configured in the settings
                (``resolvers.<name>.factory``) takes precedence over both.
        """
        self.settings = settings
        self._factories: dict[str, ResolverFactory] = dict(RESOLVER_REGISTRY)
        if factories:
            self._factories.update(factories)
        self._instances: dict[str, Optional[LocaleResolver]] = {}

    @property
    def resolution_order(self) -> list[str]:
        return list(self.settings.resolution_order)

    def available_resolvers(self) -> list[str]:
        return list(self._factories)

    def is_resolver_enabled(self, name: str) -> bool:
        """Check the ``enabled`` flag; resolvers without settings are enabled."""
        config = self.settings.resolvers.for_name(name)
        return config.enabled if config is not None else True

    def enabled_resolvers(self) -> list[str]:
        return [name for name in self.resolution_order if self.is_resolver_enabled(name)]

    def create_resolver(self, name: str) -> Optional[LocaleResolver]:
        """Build the resolver for a name, or None if disabled or unknown."""
        if not self.is_resolver_enabled(name):
            return None

        if name not in self._instances:
            factory = self._factory_for(name)
            self._instances[name] = factory(self.settings) if factory else None

        return self._instances[name]

    def resolve(
        self,
        context: LocaleContext,
        is_supported: Callable[[str], bool],
        normalize: Callable[[str], str],
    ) -> Optional[str]:
        """Resolve the locale for a request.

        Args:
            context: Request context.
            is_supported: Predicate on a normalized locale.
            normalize: Locale normalizer.

        Returns:
            The first supported normalized candidate, or None.
        """
        for name in self.resolution_order:
            resolver = self.create_resolver(name)
            if resolver is None:
                continue

            for candidate in resolver.resolve_all(context):
                if candidate == "":
                    continue

                locale = normalize(candidate)
                if is_supported(locale):
                    logger.debug("locale_resolved", resolver=name, locale=locale)
                    return locale

                logger.debug(
                    "locale_candidate_rejected",
                    resolver=name,
                    candidate=candidate,
                    normalized=locale,
                )

        logger.debug("locale_not_resolved", resolution_order=self.resolution_order)
        return None

    def _factory_for(self, name: str) -> Optional[ResolverFactory]:
        config = self.settings.resolvers.for_name(name)
        if config is not None and config.factory:
            try:
                return import_string(config.factory)
            except ImportError as e:
                logger.warning(
                    "resolver_factory_import_failed",
                    resolver=name,
                    factory=config.factory,
                    error=str(e),
                )

        return self._factories.get(name)
