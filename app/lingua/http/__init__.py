"""HTTP integration: middleware, dependencies and routes for FastAPI/Starlette."""

from lingua.http.app import create_app
from lingua.http.dependencies import (
    LinguaDep,
    LinguaPayloadDep,
    get_lingua,
    get_lingua_payload,
    lingua_groups,
)
from lingua.http.localized import include_localized_routes, localized_route
from lingua.http.middleware import LinguaMiddleware
from lingua.http.routes import include_lingua_routes, router

__all__ = [
    "create_app",
    "LinguaMiddleware",
    "LinguaDep",
    "LinguaPayloadDep",
    "get_lingua",
    "get_lingua_payload",
    "lingua_groups",
    "router",
    "include_lingua_routes",
    "include_localized_routes",
    "localized_route",
]
