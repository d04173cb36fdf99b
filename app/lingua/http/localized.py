"""Locale-aware route mounting and named route URLs.

``include_localized_routes`` mounts a router the way ``settings.url``
describes:

- prefix: under ``/{locale}``, the segment restricted to locale-shaped values
- domain: once per configured host
- neither (or no hosts): as plain routes
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request

from lingua.configuration import LinguaSettings, settings as app_settings
from lingua.http.dependencies import get_lingua
from lingua.i18n.urls import looks_like_locale
from lingua.logging import get_module_logger

logger = get_module_logger()

LOCALE_PREFIX = "/{locale}"


def require_locale_segment(request: Request) -> None:
    """Reject ``/{locale}`` values that are not shaped like a locale (404)."""
    if not looks_like_locale(request.path_params.get("locale", "")):
        raise HTTPException(status_code=404, detail="Not Found")


def include_localized_routes(
    app: FastAPI,
    router: APIRouter,
    settings: Optional[LinguaSettings] = None,
    **options: Any,
) -> Optional[str]:
    """Mount ``router`` on ``app`` using the configured URL strategy.

    Args:
        app: Application to mount on.
        router: Routes to localize.
        settings: Lingua settings (default: application settings).
        **options: Passed to ``include_router`` (prefix, dependencies, tags...).
            A prefix is placed after the locale segment.

    Returns:
        The strategy applied ("prefix" or "domain"), or None when the routes
        were mounted unchanged.
    """
    settings = settings or app_settings.lingua
    strategy = settings.url.strategy

    if strategy == "prefix":
        dependencies = list(options.pop("dependencies", None) or [])
        dependencies.append(Depends(require_locale_segment))
        prefix = LOCALE_PREFIX + options.pop("prefix", "")
        app.include_router(router, prefix=prefix, dependencies=dependencies, **options)
        logger.info("localized_routes_registered", strategy=strategy, prefix=prefix)
        return strategy

    hosts = settings.url.domain.hosts
    if strategy == "domain" and hosts:
        for host in hosts.values():
            host_router = APIRouter()
            host_router.include_router(router, **options)
            app.host(host, app=host_router)
        logger.info("localized_routes_registered", strategy=strategy, hosts=list(hosts.values()))
        return strategy

    if strategy == "domain":
        logger.warning("localized_routes_no_hosts", strategy=strategy)

    app.include_router(router, **options)
    return None


def localized_route(
    request: Request,
    name: str,
    locale: Optional[str] = None,
    **path_params: Any,
) -> str:
    """Absolute URL of a named route for a locale.

    Usage:
        @router.get("/switch/{target}")
        def switch(request: Request, target: str):
            return RedirectResponse(localized_route(request, "dashboard", target))
    """
    lingua = get_lingua(request)
    return lingua.urls.localized_route(request.url_for, name, locale, **path_params)
