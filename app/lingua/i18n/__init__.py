"""i18n system - locale resolution and translation lifecycle.

Main components:
- normalizer: normalize_locale, base_language
- models: LocaleContext, QueuedCookie
- resolvers: LocaleResolver implementations and LocaleResolverManager
- loader: YAML group and single-file JSON translation loaders
- cache: TranslationCache and the two-tier TieredTranslationCache
- pages: PageGroupResolver for lazy loading
- urls: LocalizedUrlGenerator
- service: Lingua facade
- factory: create_lingua and the process-wide cache singleton
"""

from lingua.i18n.cache import (
    InMemoryTranslationStore,
    PersistentTranslationStore,
    TieredTranslationCache,
    TranslationCache,
)
from lingua.i18n.context import get_active_locale, reset_active_locale, set_active_locale
from lingua.i18n.exceptions import LinguaError, UnsupportedLocaleError
from lingua.i18n.loader import (
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
    deep_merge,
)
from lingua.i18n.models import LocaleContext, QueuedCookie
from lingua.i18n.normalizer import base_language, normalize_locale
from lingua.i18n.pages import PageGroupResolver
from lingua.i18n.resolvers import LocaleResolver, LocaleResolverManager
from lingua.i18n.urls import LocalizedUrlGenerator
from lingua.i18n.service import Lingua
from lingua.i18n.factory import create_lingua, get_translation_cache, reset_translation_cache

__all__ = [
    "Lingua",
    "create_lingua",
    "get_translation_cache",
    "reset_translation_cache",
    "LocaleContext",
    "QueuedCookie",
    "LocaleResolver",
    "LocaleResolverManager",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "JSONTranslationLoader",
    "TranslationCache",
    "PersistentTranslationStore",
    "InMemoryTranslationStore",
    "TieredTranslationCache",
    "PageGroupResolver",
    "LocalizedUrlGenerator",
    "LinguaError",
    "UnsupportedLocaleError",
    "normalize_locale",
    "base_language",
    "deep_merge",
    "set_active_locale",
    "get_active_locale",
    "reset_active_locale",
]
