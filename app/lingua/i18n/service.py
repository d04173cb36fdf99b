"""Locale service: current locale, translation loading, direction, URLs.

The Lingua class is the single entry point hosts use. It is cheap to build
and meant to be created per request (see ``lingua.i18n.factory``); the
translation cache it receives is usually shared by the whole process.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Iterable, MutableMapping, Optional

from lingua.configuration import LinguaSettings
from lingua.i18n.cache import TieredTranslationCache
from lingua.i18n.context import set_active_locale
from lingua.i18n.exceptions import UnsupportedLocaleError
from lingua.i18n.loader import (
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
    deep_merge,
)
from lingua.i18n.models import LocaleContext, QueuedCookie
from lingua.i18n.normalizer import base_language, normalize_locale
from lingua.i18n.pages import PageGroupResolver
from lingua.i18n.resolvers import LocaleResolverManager
from lingua.i18n.urls import LocalizedUrlGenerator
from lingua.logging import get_module_logger

logger = get_module_logger()


class Lingua:
    """Locale resolution and translation lifecycle facade.

    Attributes:
        settings: Lingua settings.
        context: Request context bound to this instance, if any.
        session: Session storage the current locale is read from and
            written to.
        cache: Two-tier translation cache.
        resolver_manager: Resolver chain used when a context is available.
        page_resolver: Page to group mapping for lazy loading.
        queued_cookies: Cookies the host must write on its response.

    Usage:
        lingua = Lingua(settings, context=LocaleContext.from_request(request))
        locale = lingua.get_locale()
        payload = lingua.payload(page="Pages/Users/Index")
    """

    def __init__(
        self,
        settings: LinguaSettings,
        context: Optional[LocaleContext] = None,
        session: Optional[MutableMapping[str, Any]] = None,
        cache: Optional[TieredTranslationCache] = None,
        resolver_manager: Optional[LocaleResolverManager] = None,
        page_resolver: Optional[PageGroupResolver] = None,
        loader: Optional[TranslationLoader] = None,
    ):
        self.settings = settings
        self.context = context
        if session is not None:
            self.session = session
        elif context is not None:
            self.session = context.session
        else:
            self.session = {}
        self.cache = cache if cache is not None else TieredTranslationCache()
        self.resolver_manager = resolver_manager or LocaleResolverManager(settings)
        self.page_resolver = page_resolver or PageGroupResolver.from_settings(settings)
        self.loader = loader or YAMLTranslationLoader(Path(settings.lang_path))
        self.json_loader = JSONTranslationLoader(Path(settings.lang_path))
        self.urls = LocalizedUrlGenerator(settings, self)
        self.queued_cookies: list[QueuedCookie] = []

    # ------------------------------------------------------------------
    # Locale
    # ------------------------------------------------------------------

    def get_locale(self, context: Optional[LocaleContext] = None) -> str:
        """Return the current locale.

        With a context (passed in or bound to the instance) the resolver
        chain decides, falling back to the default locale. Without one only
        the session is read.
        """
        context = context if context is not None else self.context

        if context is not None:
            resolved = self.resolver_manager.resolve(
                context,
                is_supported=self._is_normalized_supported,
                normalize=normalize_locale,
            )
            return resolved if resolved is not None else self.default_locale()

        stored = self.session.get(self.settings.effective_session_key)
        if isinstance(stored, str) and stored:
            return normalize_locale(stored)
        return self.default_locale()

    def set_locale(self, locale: str) -> None:
        """Persist a new current locale.

        Raises:
            UnsupportedLocaleError: If the locale is not supported. Nothing
                is written in that case.
        """
        normalized = normalize_locale(locale)
        self.validate_locale(normalized)

        self.session[self.settings.effective_session_key] = normalized
        set_active_locale(normalized)

        cookie = self.settings.resolvers.cookie
        if cookie.persist_on_set:
            self.queued_cookies.append(
                QueuedCookie(
                    name=cookie.key,
                    value=normalized,
                    max_age=cookie.ttl_minutes * 60,
                )
            )

        logger.info("locale_set", locale=normalized, cookie_queued=cookie.persist_on_set)

    def normalize_locale(self, locale: str) -> str:
        return normalize_locale(locale)

    def validate_locale(self, locale: str) -> None:
        """Validate a locale against the supported list (normalized on both sides).

        Raises:
            UnsupportedLocaleError: When the locale is not supported.
        """
        normalized = normalize_locale(locale)
        if not self._is_normalized_supported(normalized):
            logger.warning("unsupported_locale", locale=normalized)
            raise UnsupportedLocaleError(normalized, self.supported_locales())

    def is_locale_supported(self, locale: str) -> bool:
        return self._is_normalized_supported(normalize_locale(locale))

    def supported_locales(self) -> list[str]:
        return list(self.settings.locales)

    def default_locale(self) -> str:
        """Explicit default locale, else the host application locale."""
        return normalize_locale(self.settings.default or self.settings.app_locale)

    def _is_normalized_supported(self, locale: str) -> bool:
        return locale in {normalize_locale(code) for code in self.settings.locales}

    # ------------------------------------------------------------------
    # Translations
    # ------------------------------------------------------------------

    def translations(self) -> Dict[str, Any]:
        """Translations for the current locale, merged over the default locale.

        The JSON driver always loads the whole file. The groups driver loads
        every group, or only the default groups when lazy loading is on.
        """
        locale = self.get_locale()
        default = self.default_locale()

        if self.settings.translation_driver == "json":
            current = self.json_loader.load(locale)
            if locale == default:
                return current
            return deep_merge(self.json_loader.load(default), current)

        if self.settings.lazy_loading.enabled:
            return self.translations_for(self.settings.lazy_loading.default_groups)

        current = self._load_all(locale)
        if locale == default:
            return current
        return deep_merge(self._load_all(default), current)

    def translation_group(self, group: str) -> Dict[str, Any]:
        """One group for the current locale, merged over the default locale."""
        locale = self.get_locale()
        current = self._load_group(locale, group)

        default = self.default_locale()
        if locale == default:
            return current

        fallback = self._load_group(default, group)
        if not fallback:
            return current
        return deep_merge(fallback, current)

    def translations_for(self, groups: Iterable[str]) -> Dict[str, Dict[str, Any]]:
        """Several groups keyed by name; empty groups are left out."""
        result = {}
        for group in groups:
            translations = self.translation_group(group)
            if translations:
                result[group] = translations
        return result

    def available_groups(self) -> list[str]:
        return self.loader.groups(self.get_locale())

    def get_groups_for_page(self, page: str) -> list[str]:
        """Default groups followed by the page's groups, without duplicates."""
        groups = list(self.settings.lazy_loading.default_groups)
        for group in self.page_resolver.resolve(page):
            if group not in groups:
                groups.append(group)
        return groups

    def translations_for_page(self, page: str) -> Dict[str, Dict[str, Any]]:
        return self.translations_for(self.get_groups_for_page(page))

    def clear_translation_cache(self, locale: Optional[str] = None) -> None:
        """Clear cached groups for one locale, or for every supported locale."""
        if locale is not None:
            locales = [normalize_locale(locale)]
        else:
            locales = [normalize_locale(code) for code in self.settings.locales]
            self.cache.memory.flush()

        for code in locales:
            self.cache.clear_locale(code, self.loader.groups(code))

    def _load_group(self, locale: str, group: str) -> Dict[str, Any]:
        return self.cache.remember(
            locale, group, lambda: self.loader.load_group(locale, group)
        )

    def _load_all(self, locale: str) -> Dict[str, Dict[str, Any]]:
        result = {}
        for group in self.loader.groups(locale):
            translations = self._load_group(locale, group)
            if translations:
                result[group] = translations
        return result

    # ------------------------------------------------------------------
    # Direction
    # ------------------------------------------------------------------

    def get_rtl_locales(self) -> list[str]:
        return list(self.settings.rtl_locales)

    def is_rtl(self, locale: Optional[str] = None) -> bool:
        """Check whether the locale's base language is written right-to-left."""
        if locale is None:
            locale = self.get_locale()
        rtl = {code.lower() for code in self.settings.rtl_locales}
        return base_language(locale) in rtl

    def get_direction(self, locale: Optional[str] = None) -> str:
        return "rtl" if self.is_rtl(locale) else "ltr"

    # ------------------------------------------------------------------
    # URLs and payload
    # ------------------------------------------------------------------

    def localized_url(self, url: str, locale: Optional[str] = None) -> str:
        return self.urls.localized_url(url, locale)

    def localized_route(
        self,
        url_for: Callable[..., Any],
        name: str,
        locale: Optional[str] = None,
        **path_params: Any,
    ) -> str:
        return self.urls.localized_route(url_for, name, locale, **path_params)

    def payload(
        self,
        groups: Optional[Iterable[str]] = None,
        page: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Build the data shared with the frontend for the current request.

        Args:
            groups: Explicit groups to load.
            page: Page identifier; used when lazy loading with page
                detection is enabled and no explicit groups are given.
        """
        lazy = self.settings.lazy_loading
        groups = list(groups) if groups else []

        if groups:
            translations = self.translations_for(groups)
        elif page and lazy.enabled and lazy.auto_detect_page:
            translations = self.translations_for_page(page)
        else:
            translations = self.translations()

        locale = self.get_locale()
        return {
            "locale": locale,
            "locales": self.supported_locales(),
            "translations": translations,
            "direction": self.get_direction(locale),
            "isRtl": self.is_rtl(locale),
        }
