"""Tests for the Translator façade: normalization, lookup and fallback."""

from __future__ import annotations

import logging

import pytest

from tests.helpers.text import BrokenText, StringClass
from transcatalog.diagnostics import (
    DiagnosticCode,
    InvalidTranslationError,
    MissingTranslationError,
    UnknownLocaleError,
)
from transcatalog.localization import (
    FallbackInfo,
    LocaleRegistry,
    MessageCatalog,
    Translation,
    Translator,
)
from transcatalog.runtime import PluralRules, PluralSelector

INVALID_INPUTS = [None, 0, 1, True, False, {}, ["foo", "bar"], [[]], ""]


class TestConstruction:
    """Test collaborator wiring."""

    def test_defaults(self, registry: LocaleRegistry) -> None:
        translator = Translator(registry)

        assert translator.registry is registry
        assert isinstance(translator.catalog, MessageCatalog)
        assert isinstance(translator.selector, PluralSelector)

    def test_explicit_collaborators(self, registry: LocaleRegistry) -> None:
        catalog = MessageCatalog()
        selector = PluralSelector()
        translator = Translator(registry, catalog, selector=selector)

        assert translator.catalog is catalog
        assert translator.selector is selector

    def test_plural_rules_feed_default_selector(self, registry: LocaleRegistry) -> None:
        rules = PluralRules()
        translator = Translator(registry, plural_rules=rules)

        assert translator.selector.plural_rules is rules

    def test_selector_and_plural_rules_are_exclusive(self, registry: LocaleRegistry) -> None:
        with pytest.raises(ValueError, match="either selector or plural_rules"):
            Translator(registry, selector=PluralSelector(), plural_rules=PluralRules())


class TestLocales:
    """Test locale delegation to the registry."""

    def test_set_locale_updates_registry(self, translator: Translator, registry: LocaleRegistry) -> None:
        translator.set_locale("fr")

        assert registry.current_locale == "fr"
        assert translator.locale == "fr"

    def test_set_unknown_locale(self, translator: Translator) -> None:
        with pytest.raises(UnknownLocaleError):
            translator.set_locale("jp")

        assert translator.locale == "en"

    def test_locales(self, translator: Translator) -> None:
        locales = translator.locales()

        assert "en" in locales
        assert "fr" in locales
        assert "jp" not in locales

    def test_available_locales(self, translator: Translator) -> None:
        assert translator.available_locales() == ("en", "fr")

    def test_available_domains(self, translator: Translator) -> None:
        assert translator.available_domains() == ("messages",)


class TestResources:
    """Test loader registration and resource merging."""

    def test_add_resource_array(self, translator: Translator) -> None:
        translator.add_resource("array", {"foo": "OOF"}, "fr")

        assert translator.catalog.lookup("messages", "fr", "foo") == "OOF"

    def test_add_resource_with_domain(self, translator: Translator) -> None:
        translator.add_resource("array", {"foo": "OOF"}, "fr", "validation")

        assert translator.available_domains() == ("messages", "validation")
        assert translator.translate("foo", domain="validation", locale="fr") == "OOF"
        assert translator.translate("foo", locale="fr") == "foo"

    def test_add_resource_unknown_format(self, translator: Translator) -> None:
        with pytest.raises(ValueError, match="No loader registered for format 'yaml'"):
            translator.add_resource("yaml", "messages.yaml", "fr")

    def test_add_resource_unknown_locale(self, translator: Translator) -> None:
        with pytest.raises(UnknownLocaleError):
            translator.add_resource("array", {"foo": "bar"}, "jp")

    def test_custom_loader(self, translator: Translator) -> None:
        class PairLoader:
            def load(self, resource: object, locale: str, domain: str) -> dict[str, str]:
                return dict(line.split("=", 1) for line in str(resource).splitlines())

        translator.add_loader("pairs", PairLoader())
        translator.add_resource("pairs", "foo=OOF\nbar=RAB", "fr")

        assert translator.translate("bar", locale="fr") == "RAB"


class TestTranslation:
    """Test the normalizing constructor."""

    def test_from_text(self, translator: Translator) -> None:
        result = translator.translation("foo")

        assert isinstance(result, Translation)
        assert str(result) == "foo"

    def test_from_translation_clone(self, translator: Translator) -> None:
        original = translator.translation("foo")
        result = translator.translation(original)

        assert isinstance(result, Translation)
        assert str(result) == "foo"
        assert result is not original

    def test_from_mapping(self, translator: Translator) -> None:
        result = translator.translation({"en": "foobar", "fr": "barfoo"})

        assert isinstance(result, Translation)
        assert str(result) == "foobar"

    def test_explicit_locale(self, translator: Translator) -> None:
        result = translator.translation("foo", locale="fr")

        assert result is not None
        assert result.to_dict() == {"fr": "foo"}

    def test_explicit_unknown_locale_raises(self, translator: Translator) -> None:
        with pytest.raises(UnknownLocaleError):
            translator.translation("foo", locale="jp")

    @pytest.mark.parametrize("value", INVALID_INPUTS)
    def test_invalid_values_return_none(self, translator: Translator, value: object) -> None:
        assert translator.translation(value) is None

    def test_invalid_array_translation(self, translator: Translator) -> None:
        assert not translator.is_valid_translation({0: "foo"})
        assert not translator.is_valid_translation({"foo": 0})
        assert translator.is_valid_translation({"en": "foo"})


class TestTranslate:
    """Test translate() over every admissible input shape."""

    @pytest.mark.parametrize(
        ("expected", "identifier", "message", "parameters", "locale"),
        [
            ("Charcoal est super !", "Charcoal is great!", "Charcoal est super !", {}, "fr"),
            (
                "Charcoal est awesome !",
                "Charcoal is %what%!",
                "Charcoal est %what% !",
                {"%what%": "awesome"},
                "fr",
            ),
            (
                "Charcoal est super !",
                StringClass("Charcoal is great!"),
                "Charcoal est super !",
                {},
                "fr",
            ),
        ],
    )
    def test_catalog_keys(
        self,
        translator: Translator,
        expected: str,
        identifier: object,
        message: str,
        parameters: dict[str, str],
        locale: str,
    ) -> None:
        translator.add_resource("array", {str(identifier): message}, locale, "")

        assert translator.translate(identifier, parameters, "", locale) == expected

    def test_mapping_uses_current_locale(self, translator: Translator) -> None:
        identifier = {"en": "Charcoal is great!", "fr": "Charcoal est super !"}

        assert translator.translate(identifier, {}, "", None) == "Charcoal is great!"

    def test_translation_with_explicit_locale(
        self, translator: Translator, registry: LocaleRegistry
    ) -> None:
        identifier = Translation.from_mapping(
            {"en": "Charcoal is great!", "fr": "Charcoal est super !"}, registry
        )

        assert translator.translate(identifier, {}, "", "fr") == "Charcoal est super !"

    def test_mapping_placeholders(self, translator: Translator) -> None:
        result = translator.translate({"en": "Hello %name%"}, {"%name%": "Ada"})

        assert result == "Hello Ada"

    def test_missing_key_returns_identifier(self, translator: Translator) -> None:
        assert translator.translate("cart.title", locale="fr") == "cart.title"

    def test_missing_key_still_substitutes(self, translator: Translator) -> None:
        assert translator.translate("Hi %name%", {"%name%": "Bo"}) == "Hi Bo"

    def test_key_falls_back_through_chain(self, translator: Translator) -> None:
        translator.add_resource("array", {"cart.title": "Cart"}, "en")

        assert translator.translate("cart.title", locale="fr") == "Cart"

    def test_requested_locale_preferred_over_fallback(self, translator: Translator) -> None:
        translator.add_resource("array", {"cart.title": "Cart"}, "en")
        translator.add_resource("array", {"cart.title": "Panier"}, "fr")

        assert translator.translate("cart.title", locale="fr") == "Panier"

    def test_current_locale_used_by_default(self, translator: Translator) -> None:
        translator.add_resource("array", {"cart.title": "Panier"}, "fr")
        translator.set_locale("fr")

        assert translator.translate("cart.title") == "Panier"

    def test_mapping_ignores_catalog(self, translator: Translator) -> None:
        translator.add_resource("array", {"Hello": "Bonjour"}, "fr")

        assert translator.translate({"en": "Hello"}, locale="fr") == "Hello"

    def test_translation_from_other_registry(self, translator: Translator) -> None:
        foreign = Translation.from_mapping({"en": "Hello"}, LocaleRegistry(["en"]))

        assert translator.translate(foreign, locale="fr") == "Hello"

    def test_string_like_with_failing_str(self, translator: Translator) -> None:
        assert translator.translate(BrokenText()) == ""
        assert translator.translation(BrokenText()) is None
        assert translator.translate({"en": BrokenText()}) == ""

    def test_explicit_unknown_locale_raises(self, translator: Translator) -> None:
        with pytest.raises(UnknownLocaleError):
            translator.translate("foo", locale="jp")

    @pytest.mark.parametrize("value", INVALID_INPUTS)
    def test_invalid_values_return_empty_string(self, translator: Translator, value: object) -> None:
        assert translator.translate(value) == ""


class TestResolveErrors:
    """Test error collection alongside safe defaults."""

    def test_success_has_no_errors(self, translator: Translator) -> None:
        translator.add_resource("array", {"foo": "OOF"}, "fr")

        assert translator.resolve("foo", locale="fr") == ("OOF", ())

    def test_missing_key(self, translator: Translator) -> None:
        text, errors = translator.resolve("cart.title", locale="fr")

        assert text == "cart.title"
        assert len(errors) == 1
        error = errors[0]
        assert isinstance(error, MissingTranslationError)
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.MESSAGE_NOT_FOUND
        assert error.diagnostic.locale == "fr"
        assert error.diagnostic.domain == "messages"
        assert error.diagnostic.key == "cart.title"

    def test_invalid_input(self, translator: Translator) -> None:
        text, errors = translator.resolve(42)

        assert text == ""
        assert len(errors) == 1
        assert isinstance(errors[0], InvalidTranslationError)
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code == DiagnosticCode.INPUT_INVALID_TYPE


class TestFallbackObservability:
    """Test fallback callback and logging."""

    def test_on_fallback_called_for_fallback_hit(self, registry: LocaleRegistry) -> None:
        seen: list[FallbackInfo] = []
        translator = Translator(registry, on_fallback=seen.append)
        translator.add_resource("array", {"cart.title": "Cart"}, "en")

        translator.translate("cart.title", locale="fr")

        assert seen == [
            FallbackInfo(
                requested_locale="fr",
                resolved_locale="en",
                domain="messages",
                message_id="cart.title",
            )
        ]

    def test_on_fallback_not_called_for_direct_hit(self, registry: LocaleRegistry) -> None:
        seen: list[FallbackInfo] = []
        translator = Translator(registry, on_fallback=seen.append)
        translator.add_resource("array", {"cart.title": "Panier"}, "fr")

        translator.translate("cart.title", locale="fr")
        translator.translate("missing", locale="fr")

        assert seen == []

    def test_fallback_logged_at_debug(
        self, translator: Translator, caplog: pytest.LogCaptureFixture
    ) -> None:
        translator.add_resource("array", {"cart.title": "Cart"}, "en")

        with caplog.at_level(logging.DEBUG, logger="transcatalog.localization.translator"):
            translator.translate("cart.title", locale="fr")

        assert "resolved from fallback locale en" in caplog.text


class TestLocaleBoundTranslator:
    """Test per-request resolvers."""

    def test_bound_locale_ignores_current_locale(self, translator: Translator) -> None:
        translator.add_resource("array", {"foo": "OOF"}, "fr")
        bound = translator.for_locale("fr")

        assert bound.locale == "fr"
        assert bound.translator is translator
        assert bound.translate("foo") == "OOF"
        assert translator.locale == "en"

    def test_bound_translation_and_render(self, translator: Translator) -> None:
        bound = translator.for_locale("fr")
        translation = bound.translation("foo")

        assert translation is not None
        assert translation.to_dict() == {"fr": "foo"}
        assert bound.render(Translation.from_mapping({"en": "a", "fr": "b"}, translator.registry)) == "b"

    def test_bound_choice(self, translator: Translator) -> None:
        bound = translator.for_locale("fr")

        assert bound.translate_choice("one: %count% pomme|more: %count% pommes", 0) == "0 pomme"
        choice = bound.translation_choice("%count% pomme|%count% pommes", 3)
        assert choice is not None
        assert bound.render(choice) == "3 pommes"

    def test_unknown_locale(self, translator: Translator) -> None:
        with pytest.raises(UnknownLocaleError):
            translator.for_locale("jp")
