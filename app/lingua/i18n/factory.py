"""Factory functions for creating i18n components.

The translation cache is process-scoped: every request-scoped Lingua built
through ``create_lingua`` shares it.
"""

from typing import Any, MutableMapping, Optional

from lingua.configuration import LinguaSettings, settings as app_settings
from lingua.i18n.cache import (
    InMemoryTranslationStore,
    TieredTranslationCache,
    TranslationCache,
)
from lingua.i18n.models import LocaleContext
from lingua.i18n.service import Lingua
from lingua.logging import get_module_logger

logger = get_module_logger()

# Singleton cache instance
_cache_instance: Optional[TieredTranslationCache] = None


def get_translation_cache(
    settings: Optional[LinguaSettings] = None,
) -> TieredTranslationCache:
    """Get the process-wide translation cache singleton.

    The persistent tier is attached only when ``cache.enabled`` is set. The
    settings passed on the first call decide the configuration.

    Returns:
        TieredTranslationCache shared by all Lingua instances.
    """
    global _cache_instance

    if _cache_instance is not None:
        return _cache_instance

    settings = settings or app_settings.lingua
    store = InMemoryTranslationStore() if settings.cache.enabled else None
    _cache_instance = TieredTranslationCache(
        memory=TranslationCache(),
        store=store,
        ttl_seconds=settings.cache.ttl_seconds,
        prefix=settings.cache.prefix,
    )
    logger.info(
        "initialized_translation_cache",
        persistent=store is not None,
        ttl_seconds=settings.cache.ttl_seconds,
    )

    return _cache_instance


def reset_translation_cache() -> None:
    """Reset the cache singleton (for testing only)."""
    global _cache_instance
    _cache_instance = None
    logger.debug("reset_translation_cache_singleton")


def create_lingua(
    settings: Optional[LinguaSettings] = None,
    context: Optional[LocaleContext] = None,
    session: Optional[MutableMapping[str, Any]] = None,
    cache: Optional[TieredTranslationCache] = None,
) -> Lingua:
    """Create a Lingua instance bound to the shared translation cache.

    Args:
        settings: Lingua settings (default: application settings).
        context: Request context to resolve the locale from.
        session: Session mapping; defaults to the context's session.
        cache: Translation cache (default: the process singleton).

    Usage:
        lingua = create_lingua(context=LocaleContext.from_request(request))
        lingua.get_locale()
    """
    settings = settings or app_settings.lingua
    return Lingua(
        settings,
        context=context,
        session=session,
        cache=cache if cache is not None else get_translation_cache(settings),
    )
