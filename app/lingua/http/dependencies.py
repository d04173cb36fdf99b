"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for the request-scoped locale service and the
data shared with the frontend.
"""

from typing import Annotated, Any, Callable

from fastapi import Depends, Request

from lingua.i18n.factory import create_lingua
from lingua.i18n.models import LocaleContext
from lingua.i18n.service import Lingua


def get_lingua(request: Request) -> Lingua:
    """
    Get the Lingua instance for the current request.

    Uses the instance built by LinguaMiddleware when it is installed,
    otherwise builds one from the request.

    Usage:
        @router.get("/dashboard")
        def dashboard(lingua: LinguaDep):
            return lingua.payload(page="Dashboard")
    """
    lingua = getattr(request.state, "lingua", None)
    if lingua is None:
        lingua = create_lingua(context=LocaleContext.from_request(request))
        request.state.lingua = lingua
    return lingua


# Locale service dependency
LinguaDep = Annotated[Lingua, Depends(get_lingua)]


def lingua_groups(*groups: str) -> Callable[[Request], None]:
    """
    Build a route dependency that limits shared translations to ``groups``.

    Overrides any groups set on LinguaMiddleware for the routes it is
    attached to.

    Usage:
        @router.get(
            "/dashboard",
            dependencies=[Depends(lingua_groups("dashboard", "common"))],
        )
        def dashboard(lingua_payload: LinguaPayloadDep):
            return {"lingua": lingua_payload}
    """

    def set_lingua_groups(request: Request) -> None:
        request.state.lingua_groups = list(groups)
        # A payload built before the groups were known is stale.
        request.state.lingua_payload = None

    return set_lingua_groups


def get_lingua_payload(request: Request, lingua: LinguaDep) -> dict[str, Any]:
    """
    Get the shared ``{locale, locales, translations, direction, isRtl}`` data.

    Built once per request on first use and kept on
    ``request.state.lingua_payload``. Translations are limited to the
    request's groups when any were declared, otherwise every translation
    for the current locale is loaded.
    """
    payload = getattr(request.state, "lingua_payload", None)
    if payload is None:
        groups = getattr(request.state, "lingua_groups", None) or None
        payload = lingua.payload(groups=groups)
        request.state.lingua_payload = payload
    return payload


# Shared frontend data dependency
LinguaPayloadDep = Annotated[dict[str, Any], Depends(get_lingua_payload)]

__all__ = [
    "get_lingua",
    "LinguaDep",
    "lingua_groups",
    "get_lingua_payload",
    "LinguaPayloadDep",
]
