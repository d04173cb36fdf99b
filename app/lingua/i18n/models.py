"""Data structures shared by the i18n components.

Defines the request abstraction consumed by locale resolvers and the cookie
instruction produced when a locale is persisted.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, MutableMapping, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit

if TYPE_CHECKING:
    from starlette.requests import Request


@dataclass
class LocaleContext:
    """Request-like context locale resolvers read from.

    Resolvers never write to the context. The session mapping is the only
    mutable part and is written by the locale service when a locale is set.

    Attributes:
        path: URL path (e.g. "/fr/dashboard").
        query: Query parameters, one value per name.
        headers: Request headers; names are stored lowercased.
        cookies: Request cookies.
        host: Host name without port.
        url: Full request URL, when known.
        session: Session storage for the current user.
    """

    path: str = "/"
    query: Mapping[str, str] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    cookies: Mapping[str, str] = field(default_factory=dict)
    host: str = ""
    url: str = ""
    session: MutableMapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.headers = {name.lower(): value for name, value in self.headers.items()}

    @property
    def segments(self) -> list[str]:
        """Non-empty path segments in order."""
        return [segment for segment in self.path.split("/") if segment]

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower(), default)

    @property
    def full_url(self) -> str:
        if self.url:
            return self.url
        if self.query:
            return f"{self.path}?{urlencode(dict(self.query))}"
        return self.path

    @classmethod
    def from_url(
        cls,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        cookies: Optional[Mapping[str, str]] = None,
        session: Optional[MutableMapping[str, Any]] = None,
    ) -> "LocaleContext":
        """Build a context from a URL string plus optional request parts.

        Example:
            context = LocaleContext.from_url(
                "https://fr.example.com/fr/dashboard?locale=de",
                headers={"Accept-Language": "fr-FR,fr;q=0.9"},
            )
        """
        parts = urlsplit(url)
        return cls(
            path=parts.path or "/",
            query=dict(parse_qsl(parts.query, keep_blank_values=True)),
            headers=headers or {},
            cookies=cookies or {},
            host=parts.hostname or "",
            url=url,
            session=session if session is not None else {},
        )

    @classmethod
    def from_request(cls, request: "Request") -> "LocaleContext":
        """Adapt a Starlette request.

        The session is only available when SessionMiddleware is installed;
        otherwise an empty, request-local mapping is used.
        """
        session = request.session if "session" in request.scope else {}
        return cls(
            path=request.url.path,
            query=dict(request.query_params),
            headers=dict(request.headers),
            cookies=dict(request.cookies),
            host=request.url.hostname or "",
            url=str(request.url),
            session=session,
        )


@dataclass(frozen=True)
class QueuedCookie:
    """Cookie to be written on the outgoing response.

    Attributes:
        name: Cookie name.
        value: Cookie value (the normalized locale).
        max_age: Lifetime in seconds.
    """

    name: str
    value: str
    max_age: int
