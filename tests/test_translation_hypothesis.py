"""Hypothesis property-based tests for translation normalization.

Tests universal properties of Translator.translation() and translate():
idempotent normalization, current-locale resolution, and safe defaults
for invalid input.

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import given

from tests.strategies import invalid_inputs, plural_counts, translation_mappings
from transcatalog.localization import LocaleInfo, LocaleRegistry, Translator


def _translator() -> Translator:
    # Built per example: the current locale is mutated inside properties.
    registry = LocaleRegistry(
        {"en": LocaleInfo("en", "en_US.UTF8"), "fr": LocaleInfo("fr", "fr_FR.UTF8")},
        default_locale="en",
        fallback_locales=["en"],
    )
    return Translator(registry)


class TestNormalizationProperties:
    """Properties of the normalizing constructor."""

    @given(mapping=translation_mappings())
    def test_str_equals_current_locale_entry(self, mapping: dict[str, str]) -> None:
        translator = _translator()
        for locale, text in mapping.items():
            translator.set_locale(locale)
            translation = translator.translation(mapping)

            assert translation is not None
            assert str(translation) == text

    @given(mapping=translation_mappings())
    def test_normalization_is_idempotent(self, mapping: dict[str, str]) -> None:
        translator = _translator()
        once = translator.translation(mapping)
        twice = translator.translation(once)

        assert once is not None
        assert twice == once
        assert twice is not once

    @given(mapping=translation_mappings())
    def test_translate_mapping_never_uses_catalog(self, mapping: dict[str, str]) -> None:
        translator = _translator()
        for text in mapping.values():
            translator.add_resource("array", {text: "from catalog"}, "en")

        # Chain for en is ("en",): a mapping without en resolves to "".
        assert translator.translate(mapping) == mapping.get("en", "")

    @given(value=invalid_inputs())
    def test_invalid_input_yields_safe_defaults(self, value: object) -> None:
        translator = _translator()

        assert translator.translation(value) is None
        assert translator.translation_choice(value, 1) is None
        assert translator.translate(value) == ""
        assert translator.translate_choice(value, 1) == ""


class TestPluralProperties:
    """Properties of plural selection through the façade."""

    @given(count=plural_counts)
    def test_binary_english_forms(self, count: int) -> None:
        translator = _translator()
        result = translator.translate_choice("There is one apple|There is %count% apples", count)

        expected = "There is one apple" if count == 1 else f"There is {count} apples"
        assert result == expected

    @given(count=plural_counts)
    def test_count_override_always_wins(self, count: int) -> None:
        translator = _translator()
        result = translator.translate_choice(
            "{0} none %count%|]0,Inf] many %count%", count, {"%count%": "some"}
        )

        assert "some" in result
        assert str(count) not in result.replace("some", "")
