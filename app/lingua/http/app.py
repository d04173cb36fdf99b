"""FastAPI application wiring for lingua."""

from typing import Optional, Sequence

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from lingua.configuration import LinguaSettings, settings as app_settings
from lingua.http.middleware import LinguaMiddleware
from lingua.http.routes import include_lingua_routes
from lingua.logging import get_module_logger

logger = get_module_logger()


def create_app(
    settings: Optional[LinguaSettings] = None,
    session_secret: Optional[str] = None,
    groups: Sequence[str] = (),
) -> FastAPI:
    """Build a FastAPI app with sessions, locale middleware and lingua routes.

    Args:
        settings: Lingua settings (default: application settings).
        session_secret: Session signing key (default: SESSION_SECRET_KEY).
            Without one the session middleware is not installed and the
            session resolver sees an empty session on every request.
        groups: Translation groups shared on every request (default: all).
    """
    settings = settings or app_settings.lingua
    session_secret = session_secret or app_settings.SESSION_SECRET_KEY

    handler = FastAPI()

    # Starlette runs the last added middleware first; the session must be
    # loaded before LinguaMiddleware reads it.
    handler.add_middleware(LinguaMiddleware, settings=settings, groups=groups)
    if session_secret:
        handler.add_middleware(SessionMiddleware, secret_key=session_secret)
    else:
        logger.warning("session_middleware_disabled", reason="no SESSION_SECRET_KEY")

    include_lingua_routes(handler, settings)

    logger.info(
        "lingua_app_created",
        locales=settings.locales,
        resolution_order=settings.resolution_order,
    )
    return handler
