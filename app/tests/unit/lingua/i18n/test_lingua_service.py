"""Tests for lingua.i18n.service module."""

import pytest

from lingua.i18n.cache import InMemoryTranslationStore, TieredTranslationCache
from lingua.i18n.context import get_active_locale
from lingua.i18n.exceptions import LinguaError, UnsupportedLocaleError
from lingua.i18n.models import QueuedCookie
from lingua.i18n.service import Lingua
from tests.factories.i18n import make_context, make_settings, write_group


@pytest.mark.unit
class TestLocaleLifecycle:
    """Tests for reading, validating and setting the current locale."""

    def test_default_locale_when_session_empty(self):
        """Without a stored locale the default is returned."""
        assert Lingua(make_settings()).get_locale() == "en"

    def test_default_prefers_explicit_default(self):
        """default wins over app_locale, and is normalized."""
        assert Lingua(make_settings(default="FR")).default_locale() == "fr"
        assert Lingua(make_settings(app_locale="ar")).default_locale() == "ar"

    def test_reads_session_without_context(self):
        """The context-free read uses the session only."""
        lingua = Lingua(make_settings(), session={"lingua.locale": "FR"})
        assert lingua.get_locale() == "fr"

    def test_context_uses_resolver_chain(self):
        """With a context the resolver chain decides."""
        settings = make_settings(resolution_order=["query", "session"])
        context = make_context(query={"locale": "ar"}, session={"lingua.locale": "fr"})
        assert Lingua(settings, context=context).get_locale() == "ar"

    def test_context_falls_back_to_default(self):
        """A resolution miss yields the default locale."""
        settings = make_settings(resolution_order=["query"], default="fr")
        context = make_context(query={"locale": "de"})
        assert Lingua(settings).get_locale(context) == "fr"

    def test_session_defaults_to_context_session(self):
        """The context's session is used when none is passed."""
        session = {}
        lingua = Lingua(make_settings(), context=make_context(session=session))
        lingua.set_locale("fr")
        assert session == {"lingua.locale": "fr"}

    def test_set_locale_persists(self):
        """set_locale() writes the session and the ambient locale."""
        session = {}
        lingua = Lingua(make_settings(), session=session)
        lingua.set_locale("FR")

        assert session["lingua.locale"] == "fr"
        assert get_active_locale() == "fr"
        assert lingua.get_locale() == "fr"
        assert lingua.queued_cookies == []

    def test_set_locale_queues_cookie(self):
        """A cookie is queued when persist_on_set is enabled."""
        settings = make_settings(
            resolvers={"cookie": {"persist_on_set": True, "key": "lang", "ttl_minutes": 10}}
        )
        lingua = Lingua(settings)
        lingua.set_locale("ar")

        assert lingua.queued_cookies == [QueuedCookie(name="lang", value="ar", max_age=600)]

    def test_set_unsupported_locale_raises_without_side_effects(self):
        """An unsupported locale raises and changes nothing."""
        session = {"lingua.locale": "fr"}
        settings = make_settings(resolvers={"cookie": {"persist_on_set": True}})
        lingua = Lingua(settings, session=session)

        with pytest.raises(UnsupportedLocaleError) as exc_info:
            lingua.set_locale("de")

        assert exc_info.value.locale == "de"
        assert exc_info.value.supported_locales == ["en", "fr", "ar"]
        assert str(exc_info.value) == 'Locale "de" is not supported. Supported locales: en, fr, ar'
        assert session == {"lingua.locale": "fr"}
        assert get_active_locale() is None
        assert lingua.queued_cookies == []

    def test_unsupported_locale_error_is_value_error(self):
        """UnsupportedLocaleError can be caught as ValueError or LinguaError."""
        with pytest.raises(ValueError):
            Lingua(make_settings()).validate_locale("de")
        with pytest.raises(LinguaError):
            Lingua(make_settings()).validate_locale("de")

    def test_support_check_normalizes_both_sides(self):
        """'en-us' matches a configured 'en_US' and vice versa."""
        lingua = Lingua(make_settings(locales=["en_US", "fr-ca"]))
        assert lingua.is_locale_supported("en-us") is True
        assert lingua.is_locale_supported("FR_CA") is True
        assert lingua.is_locale_supported("en") is False
        lingua.validate_locale("EN-US")

    def test_supported_locales(self):
        """supported_locales() returns the configured list."""
        assert Lingua(make_settings()).supported_locales() == ["en", "fr", "ar"]

    def test_normalize_locale(self):
        """normalize_locale() delegates to the normalizer."""
        assert Lingua(make_settings()).normalize_locale("pt-br") == "pt_BR"


@pytest.mark.unit
class TestSessionKeyPrecedence:
    """Tests for the legacy session key rule."""

    def test_default_key(self):
        """The default key is lingua.locale."""
        session = {}
        Lingua(make_settings(), session=session).set_locale("fr")
        assert session == {"lingua.locale": "fr"}

    def test_customized_legacy_key_wins_over_default_structured_key(self):
        """A customized legacy key is used when the structured key is default."""
        session = {}
        lingua = Lingua(make_settings(session_key="app_locale"), session=session)
        lingua.set_locale("fr")

        assert session == {"app_locale": "fr"}
        assert Lingua(make_settings(session_key="app_locale"), session=session).get_locale() == "fr"

    def test_customized_legacy_key_with_unset_structured_key(self):
        """An unset structured key also lets the legacy key win."""
        settings = make_settings(session_key="app_locale", resolvers={"session": {"key": None}})
        assert settings.effective_session_key == "app_locale"

    def test_structured_key_wins_when_customized(self):
        """A customized structured key beats the legacy key."""
        settings = make_settings(session_key="app_locale", resolvers={"session": {"key": "custom"}})
        session = {}
        Lingua(settings, session=session).set_locale("fr")
        assert session == {"custom": "fr"}

    def test_unset_structured_key_without_legacy(self):
        """Both default: lingua.locale."""
        settings = make_settings(resolvers={"session": {"key": None}})
        assert settings.effective_session_key == "lingua.locale"


@pytest.mark.unit
class TestTranslations:
    """Tests for translation loading with fallback."""

    def test_default_locale_translations(self, lang_dir):
        """The default locale gets its own groups unmerged."""
        lingua = Lingua(make_settings(lang_dir))
        translations = lingua.translations()

        assert set(translations) == {"admin-users", "auth", "messages", "users"}
        assert translations["messages"]["welcome"] == "Welcome"

    def test_fallback_merge(self, lang_dir):
        """Missing keys and groups come from the default locale."""
        lingua = Lingua(make_settings(lang_dir), session={"lingua.locale": "fr"})
        translations = lingua.translations()

        assert translations["messages"] == {
            "welcome": "Bienvenue",
            "nav": {"home": "Accueil", "about": "About"},
        }
        assert translations["auth"] == {"login": "Log in", "logout": "Log out"}
        assert translations["users"] == {"title": "Utilisateurs", "actions": {"edit": "Edit"}}

    def test_translation_group_fallback(self, lang_dir):
        """A single group is merged over the default locale's group."""
        lingua = Lingua(make_settings(lang_dir), session={"lingua.locale": "fr"})
        assert lingua.translation_group("messages")["nav"] == {"home": "Accueil", "about": "About"}
        assert lingua.translation_group("auth") == {"login": "Log in", "logout": "Log out"}

    def test_missing_group_is_empty(self, lang_dir):
        """A group missing in every locale is empty."""
        assert Lingua(make_settings(lang_dir)).translation_group("missing") == {}

    def test_translations_for_omits_empty_groups(self, lang_dir):
        """translations_for() skips groups with no data."""
        lingua = Lingua(make_settings(lang_dir), session={"lingua.locale": "fr"})
        result = lingua.translations_for(["messages", "missing"])
        assert list(result) == ["messages"]

    def test_lazy_loading_limits_to_default_groups(self, lang_dir):
        """With lazy loading only default groups are loaded."""
        settings = make_settings(
            lang_dir,
            lazy_loading={"enabled": True, "default_groups": ["messages"]},
        )
        assert list(Lingua(settings).translations()) == ["messages"]

    def test_json_driver(self, json_lang_dir):
        """The JSON driver merges flat mappings."""
        settings = make_settings(json_lang_dir, translation_driver="json")
        lingua = Lingua(settings, session={"lingua.locale": "fr"})
        assert lingua.translations() == {"Hello": "Bonjour", "Goodbye": "Goodbye"}

    def test_json_driver_ignores_lazy_loading(self, json_lang_dir):
        """Lazy loading has no effect on the JSON driver."""
        settings = make_settings(
            json_lang_dir,
            translation_driver="json",
            lazy_loading={"enabled": True, "default_groups": ["messages"]},
        )
        assert Lingua(settings).translations() == {"Hello": "Hello", "Goodbye": "Goodbye"}

    def test_available_groups(self, lang_dir):
        """available_groups() lists the current locale's groups."""
        assert Lingua(make_settings(lang_dir), session={"lingua.locale": "fr"}).available_groups() == [
            "messages",
            "users",
        ]

    def test_available_groups_without_directory(self):
        """No translation directory means no groups."""
        assert Lingua(make_settings()).available_groups() == []

    def test_missing_lang_path(self):
        """A missing translation directory loads nothing."""
        assert Lingua(make_settings()).translations() == {}


@pytest.mark.unit
class TestPageGroups:
    """Tests for page based lazy loading."""

    def test_groups_for_page_default_groups_first(self, lang_dir):
        """Default groups come first, page groups follow."""
        settings = make_settings(lang_dir, lazy_loading={"default_groups": ["messages"]})
        lingua = Lingua(settings)
        assert lingua.get_groups_for_page("Pages/Users/Index") == ["messages", "users"]

    def test_groups_for_page_without_duplicates(self, lang_dir):
        """A page group already in the defaults is not repeated."""
        settings = make_settings(lang_dir, lazy_loading={"default_groups": ["messages", "users"]})
        assert Lingua(settings).get_groups_for_page("Users/Index") == ["messages", "users"]

    def test_translations_for_page(self, lang_dir):
        """translations_for_page() loads the page's groups."""
        settings = make_settings(lang_dir, lazy_loading={"default_groups": ["auth"]})
        lingua = Lingua(settings, session={"lingua.locale": "fr"})
        result = lingua.translations_for_page("Admin/Users/Index")

        assert list(result) == ["auth", "admin-users"]
        assert result["admin-users"] == {"title": "Manage users"}


@pytest.mark.unit
class TestDirection:
    """Tests for right-to-left detection."""

    @pytest.mark.parametrize("locale", ["ar", "ar-SA", "HE", "fa_IR", "prs", "dv"])
    def test_rtl_locales(self, locale):
        """RTL detection uses the base language."""
        lingua = Lingua(make_settings())
        assert lingua.is_rtl(locale) is True
        assert lingua.get_direction(locale) == "rtl"

    @pytest.mark.parametrize("locale", ["en", "fr-CA", "de"])
    def test_ltr_locales(self, locale):
        lingua = Lingua(make_settings())
        assert lingua.is_rtl(locale) is False
        assert lingua.get_direction(locale) == "ltr"

    def test_defaults_to_current_locale(self):
        """Without an argument the current locale is checked."""
        lingua = Lingua(make_settings(), session={"lingua.locale": "ar"})
        assert lingua.is_rtl() is True
        assert lingua.get_direction() == "rtl"

    def test_configured_rtl_locales(self):
        """rtl_locales can be overridden."""
        lingua = Lingua(make_settings(rtl_locales=["en"]))
        assert lingua.get_rtl_locales() == ["en"]
        assert lingua.is_rtl("en_GB") is True
        assert lingua.is_rtl("ar") is False


@pytest.mark.unit
class TestTranslationCaching:
    """Tests for the cache integration."""

    def test_groups_are_cached(self, lang_dir):
        """A cached group is served even after the file changes."""
        lingua = Lingua(make_settings(lang_dir))
        assert lingua.translation_group("auth")["login"] == "Log in"

        write_group(lang_dir, "en", "auth", {"login": "Sign in"})
        assert lingua.translation_group("auth")["login"] == "Log in"

    def test_clear_translation_cache_for_locale(self, lang_dir):
        """Clearing one locale reloads its groups."""
        lingua = Lingua(make_settings(lang_dir))
        lingua.translation_group("auth")

        write_group(lang_dir, "en", "auth", {"login": "Sign in"})
        lingua.clear_translation_cache("en")

        assert lingua.translation_group("auth")["login"] == "Sign in"

    def test_clear_translation_cache_all_locales(self, lang_dir):
        """Clearing without a locale flushes every supported locale."""
        store = InMemoryTranslationStore()
        cache = TieredTranslationCache(store=store)
        lingua = Lingua(make_settings(lang_dir), session={"lingua.locale": "fr"}, cache=cache)
        lingua.translation_group("messages")
        assert store.get("lingua.fr.messages") is not None
        assert store.get("lingua.en.messages") is not None

        lingua.clear_translation_cache()

        assert cache.memory.get_all_for_locale("fr") == {}
        assert cache.memory.get_all_for_locale("en") == {}
        assert store.get("lingua.fr.messages") is None
        assert store.get("lingua.en.messages") is None

    def test_persistent_tier_serves_other_instances(self, lang_dir):
        """A shared store feeds a fresh in-memory tier."""
        store = InMemoryTranslationStore()
        first = Lingua(make_settings(lang_dir), cache=TieredTranslationCache(store=store))
        first.translation_group("auth")

        write_group(lang_dir, "en", "auth", {"login": "Sign in"})
        second = Lingua(make_settings(lang_dir), cache=TieredTranslationCache(store=store))
        assert second.translation_group("auth")["login"] == "Log in"

    def test_returned_group_does_not_alias_cache(self, lang_dir):
        """Editing a returned group leaves the shared cache untouched."""
        cache = TieredTranslationCache()
        first = Lingua(make_settings(lang_dir), cache=cache)
        first.translation_group("auth")["login"] = "Changed"

        second = Lingua(make_settings(lang_dir), cache=cache)
        assert second.translation_group("auth")["login"] == "Log in"

    def test_nested_fallback_does_not_alias_cache(self, lang_dir):
        """Nested mappings merged in from the default locale are copies."""
        cache = TieredTranslationCache()
        fr = Lingua(make_settings(lang_dir), session={"lingua.locale": "fr"}, cache=cache)
        fr.translation_group("users")["actions"]["edit"] = "Modifier"

        en = Lingua(make_settings(lang_dir), cache=cache)
        assert en.translation_group("users")["actions"] == {"edit": "Edit"}
        assert cache.memory.get("en", "users")["actions"] == {"edit": "Edit"}

    def test_payload_edits_do_not_leak(self, lang_dir):
        """Mutating a payload does not change later payloads."""
        cache = TieredTranslationCache(store=InMemoryTranslationStore())
        payload = Lingua(make_settings(lang_dir), cache=cache).payload()
        payload["translations"]["messages"]["nav"]["home"] = "Start"

        again = Lingua(make_settings(lang_dir), cache=cache).payload()
        assert again["translations"]["messages"]["nav"]["home"] == "Home"


@pytest.mark.unit
class TestPayload:
    """Tests for Lingua.payload()."""

    def test_payload_shape(self, lang_dir):
        """The payload carries locale, locales, translations and direction."""
        lingua = Lingua(make_settings(lang_dir), session={"lingua.locale": "ar"})
        payload = lingua.payload(groups=["messages"])

        assert payload == {
            "locale": "ar",
            "locales": ["en", "fr", "ar"],
            "translations": {
                "messages": {"welcome": "مرحبا", "nav": {"home": "Home", "about": "About"}}
            },
            "direction": "rtl",
            "isRtl": True,
        }

    def test_payload_uses_page_when_auto_detecting(self, lang_dir):
        """Page detection applies when lazy loading is on."""
        settings = make_settings(
            lang_dir,
            lazy_loading={"enabled": True, "auto_detect_page": True, "default_groups": ["auth"]},
        )
        payload = Lingua(settings).payload(page="Pages/Users/Index")
        assert list(payload["translations"]) == ["auth", "users"]

    def test_payload_ignores_page_without_auto_detect(self, lang_dir):
        """Without page detection the default groups are used."""
        settings = make_settings(
            lang_dir,
            lazy_loading={"enabled": True, "default_groups": ["auth"]},
        )
        payload = Lingua(settings).payload(page="Pages/Users/Index")
        assert list(payload["translations"]) == ["auth"]
