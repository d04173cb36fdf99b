"""Fixtures for lingua HTTP integration tests."""

import pytest
from fastapi import Request
from fastapi.testclient import TestClient

from lingua.http import LinguaDep, create_app
from lingua.i18n.context import get_active_locale
from tests.factories.i18n import make_settings

SESSION_SECRET = "test-session-secret"


@pytest.fixture
def make_client(lang_dir):
    """Build a TestClient for an app configured with the given overrides.

    The app gets an extra ``/whoami`` route exposing what the middleware
    resolved for the request.
    """

    def _make_client(session_secret: str = SESSION_SECRET, **overrides) -> TestClient:
        settings = make_settings(lang_dir, **overrides)
        app = create_app(settings, session_secret=session_secret)

        @app.get("/whoami")
        async def whoami(request: Request, lingua: LinguaDep):
            return {
                "locale": request.state.locale,
                "active": get_active_locale(),
                "direction": lingua.get_direction(),
            }

        return TestClient(app)

    return _make_client


@pytest.fixture
def client(make_client):
    """Client with session, cookie, query and header resolution."""
    return make_client(resolution_order=["query", "session", "cookie", "header"])
