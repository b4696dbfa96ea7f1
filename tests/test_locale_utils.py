"""Tests for locale code helpers and Babel access."""

from __future__ import annotations

import pytest
from babel.core import UnknownLocaleError as BabelUnknownLocaleError

from transcatalog.locale_utils import (
    get_babel_locale,
    get_display_name,
    language_of,
    normalize_locale,
    strip_encoding,
)


class TestNormalization:
    @pytest.mark.parametrize(
        ("code", "expected"), [("en-US", "en_US"), ("en", "en"), ("zh-Hant-TW", "zh_Hant_TW")]
    )
    def test_normalize_locale(self, code: str, expected: str) -> None:
        assert normalize_locale(code) == expected

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [("en_US.UTF8", "en_US"), ("sr_RS@latin", "sr_RS"), ("fr", "fr"), ("de_DE.UTF-8@euro", "de_DE")],
    )
    def test_strip_encoding(self, tag: str, expected: str) -> None:
        assert strip_encoding(tag) == expected

    @pytest.mark.parametrize(("code", "expected"), [("fr-CA", "fr"), ("fr_CA", "fr"), ("fr", "fr")])
    def test_language_of(self, code: str, expected: str) -> None:
        assert language_of(code) == expected


class TestBabelAccess:
    def test_get_babel_locale_accepts_system_tag(self) -> None:
        locale = get_babel_locale("fr_FR.UTF8")

        assert locale.language == "fr"
        assert locale.territory == "FR"

    def test_get_babel_locale_cached(self) -> None:
        assert get_babel_locale("en-US") is get_babel_locale("en-US")

    def test_unknown_locale_raises(self) -> None:
        with pytest.raises(BabelUnknownLocaleError):
            get_babel_locale("xx")

    def test_display_name(self) -> None:
        assert get_display_name("en") == "English"

    def test_display_name_unknown(self) -> None:
        assert get_display_name("xx") is None
