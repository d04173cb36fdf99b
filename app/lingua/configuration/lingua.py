"""Lingua settings: supported locales, resolution chain, loading and URLs."""

from typing import Any, Literal, Optional

from pydantic import Field

from lingua.configuration.base import ConfigSection, LinguaBaseSettings
from lingua.configuration.resolvers import DEFAULT_SESSION_KEY, ResolversSettings

DEFAULT_RTL_LOCALES = (
    "ar",
    "he",
    "fa",
    "ur",
    "ps",
    "sd",
    "ku",
    "ug",
    "yi",
    "prs",
    "dv",
)


class LazyLoadingSettings(ConfigSection):
    """Lazy translation loading.

    Attributes:
        enabled: Load only ``default_groups`` (plus requested groups) instead
            of every group of the locale.
        auto_detect_page: Derive groups from the page identifier.
        default_groups: Groups that are always loaded.
        page_group_resolver: Callable, object with ``resolve`` or import path
            replacing the built-in page to group mapping.
    """

    enabled: bool = False
    auto_detect_page: bool = False
    default_groups: tuple[str, ...] = ()
    page_group_resolver: Optional[Any] = None


class CacheSettings(ConfigSection):
    """Persistent translation cache tier."""

    enabled: bool = False
    ttl_seconds: int = 3600
    prefix: str = "lingua"


class UrlPrefixSettings(ConfigSection):
    segment: int = 1


class UrlDomainSettings(ConfigSection):
    hosts: dict[str, str] = Field(default_factory=dict)


class UrlSettings(ConfigSection):
    """Localized URL generation."""

    strategy: Optional[Literal["prefix", "domain"]] = None
    prefix: UrlPrefixSettings = Field(default_factory=UrlPrefixSettings)
    domain: UrlDomainSettings = Field(default_factory=UrlDomainSettings)


class RoutesSettings(ConfigSection):
    enabled: bool = True
    prefix: str = ""


class LinguaSettings(LinguaBaseSettings):
    """Locale resolution and translation loading configuration.

    Environment Variables:
        LINGUA_LOCALES: JSON list of supported locales (default: ["en"])
        LINGUA_DEFAULT: Default locale, falls back to LINGUA_APP_LOCALE
        LINGUA_APP_LOCALE: Host application locale (default: en)
        LINGUA_RESOLUTION_ORDER: JSON list of resolver names
        LINGUA_LANG_PATH: Directory holding translation files (default: lang)
        LINGUA_TRANSLATION_DRIVER: ``groups`` (one YAML file per group) or ``json``

    Example:
        ```python
        from lingua.configuration import settings

        if settings.lingua.lazy_loading.enabled:
            groups = settings.lingua.lazy_loading.default_groups
        ```
    """

    locales: list[str] = Field(default_factory=lambda: ["en"])
    default: Optional[str] = None
    app_locale: str = "en"
    session_key: str = DEFAULT_SESSION_KEY
    resolution_order: list[str] = Field(default_factory=lambda: ["session", "cookie"])
    resolvers: ResolversSettings = Field(default_factory=ResolversSettings)
    lang_path: str = "lang"
    translation_driver: Literal["groups", "json"] = "groups"
    lazy_loading: LazyLoadingSettings = Field(default_factory=LazyLoadingSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    rtl_locales: list[str] = Field(default_factory=lambda: list(DEFAULT_RTL_LOCALES))
    url: UrlSettings = Field(default_factory=UrlSettings)
    routes: RoutesSettings = Field(default_factory=RoutesSettings)

    @property
    def effective_session_key(self) -> str:
        """Session key used to read and write the current locale.

        The legacy ``session_key`` only wins when it was customized and the
        structured ``resolvers.session.key`` was left at its default.
        """
        structured = self.resolvers.session.key
        if self.session_key != DEFAULT_SESSION_KEY and structured in (
            None,
            DEFAULT_SESSION_KEY,
        ):
            return self.session_key
        return structured or DEFAULT_SESSION_KEY
