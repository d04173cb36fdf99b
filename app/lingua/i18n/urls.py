"""Localized URL generation.

Supports two strategies:
- prefix: insert or replace a locale segment in the path (/fr/dashboard)
- domain: replace the host from a locale -> host map (fr.example.com)
"""

import re
from typing import TYPE_CHECKING, Any, Callable, Optional
from urllib.parse import SplitResult, urlsplit, urlunsplit

from lingua.configuration import LinguaSettings
from lingua.i18n.models import LocaleContext

if TYPE_CHECKING:
    from lingua.i18n.service import Lingua

LOCALE_PATTERN = r"[a-z]{2}([_-][A-Za-z]{2})?"

_LOCALE_SEGMENT = re.compile(rf"^{LOCALE_PATTERN}$")


def looks_like_locale(segment: str) -> bool:
    return _LOCALE_SEGMENT.match(segment) is not None


class LocalizedUrlGenerator:
    """Rewrites URLs for a target locale.

    Attributes:
        settings: Lingua settings (``url`` section).
        lingua: Locale service used when no locale is passed explicitly.
    """

    def __init__(self, settings: LinguaSettings, lingua: "Lingua"):
        self.settings = settings
        self.lingua = lingua

    @property
    def strategy(self) -> Optional[str]:
        return self.settings.url.strategy

    def localized_url(
        self,
        url: str,
        locale: Optional[str] = None,
        context: Optional[LocaleContext] = None,
    ) -> str:
        """Localize a URL.

        Args:
            url: Absolute or relative URL.
            locale: Target locale (defaults to the current locale).
            context: Optional request context used to resolve the locale.

        Returns:
            The rewritten URL; the input unchanged when no strategy is
            configured or the URL cannot be parsed.
        """
        if locale is None:
            locale = self.lingua.get_locale(context)

        if self.strategy == "prefix":
            return self.apply_prefix(url, locale)
        if self.strategy == "domain":
            return self.apply_domain(url, locale)
        return url

    def localized_route(
        self,
        url_for: Callable[..., Any],
        name: str,
        locale: Optional[str] = None,
        **path_params: Any,
    ) -> str:
        """URL of a named route for a locale.

        With the prefix strategy the locale is passed as the ``locale`` path
        parameter; with the domain strategy the host is swapped afterwards.

        Args:
            url_for: Route URL builder, usually ``request.url_for``.
            name: Route name.
            locale: Target locale (defaults to the current locale).
            **path_params: Path parameters of the route.
        """
        if locale is None:
            locale = self.lingua.get_locale()

        if self.strategy == "prefix":
            path_params["locale"] = locale

        url = str(url_for(name, **path_params))

        if self.strategy == "domain":
            return self.apply_domain(url, locale)
        return url

    def switch_locale_url(self, locale: str, context: LocaleContext) -> str:
        """URL of the current page in another locale."""
        return self.localized_url(context.full_url, locale, context)

    def apply_prefix(self, url: str, locale: str) -> str:
        try:
            parts = urlsplit(url)
        except ValueError:
            return url

        segments = [segment for segment in (parts.path or "/").split("/") if segment]
        index = max(self.settings.url.prefix.segment - 1, 0)

        if index < len(segments) and looks_like_locale(segments[index]):
            segments[index] = locale
        else:
            segments.insert(index, locale)

        return self._rebuild(parts, path="/" + "/".join(segments))

    def apply_domain(self, url: str, locale: str) -> str:
        """Swap the host; unmapped locales leave the URL unchanged."""
        host = self.settings.url.domain.hosts.get(locale)
        if host is None:
            return url

        try:
            parts = urlsplit(url)
            port = parts.port
        except ValueError:
            return url

        netloc = host
        if port is not None:
            netloc = f"{netloc}:{port}"
        if parts.username is not None:
            userinfo = parts.username
            if parts.password is not None:
                userinfo = f"{userinfo}:{parts.password}"
            netloc = f"{userinfo}@{netloc}"

        return self._rebuild(parts, netloc=netloc)

    @staticmethod
    def _rebuild(
        parts: SplitResult,
        path: Optional[str] = None,
        netloc: Optional[str] = None,
    ) -> str:
        return urlunsplit(
            (
                parts.scheme,
                parts.netloc if netloc is None else netloc,
                parts.path if path is None else path,
                parts.query,
                parts.fragment,
            )
        )
