"""Shared fixtures for lingua tests."""

import pytest

from lingua.i18n.context import reset_active_locale
from lingua.i18n.factory import reset_translation_cache
from tests.factories.i18n import write_group, write_json


@pytest.fixture(autouse=True)
def reset_lingua_state():
    """Reset process-wide state (cache singleton, ambient locale) between tests."""
    reset_translation_cache()
    reset_active_locale()
    yield
    reset_translation_cache()
    reset_active_locale()


@pytest.fixture
def lang_dir(tmp_path):
    """Create a translation tree with YAML groups.

    Returns a directory structure like:
    - en/messages.yml, en/auth.yml, en/users.yml, en/admin-users.yml
    - fr/messages.yml, fr/users.yml
    - ar/messages.yml
    """
    root = tmp_path / "lang"

    write_group(
        root,
        "en",
        "messages",
        {"welcome": "Welcome", "nav": {"home": "Home", "about": "About"}},
    )
    write_group(root, "en", "auth", {"login": "Log in", "logout": "Log out"})
    write_group(root, "en", "users", {"title": "Users", "actions": {"edit": "Edit"}})
    write_group(root, "en", "admin-users", {"title": "Manage users"})

    write_group(root, "fr", "messages", {"welcome": "Bienvenue", "nav": {"home": "Accueil"}})
    write_group(root, "fr", "users", {"title": "Utilisateurs"})

    write_group(root, "ar", "messages", {"welcome": "مرحبا"})

    return root


@pytest.fixture
def json_lang_dir(tmp_path):
    """Create single-file JSON translations for en and fr."""
    root = tmp_path / "json-lang"
    write_json(root, "en", {"Hello": "Hello", "Goodbye": "Goodbye"})
    write_json(root, "fr", {"Hello": "Bonjour"})
    return root
