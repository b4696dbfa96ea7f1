"""transcatalog - multi-locale message resolution with fallback and pluralization.

Resolves human-readable strings for a runtime locale from a multi-locale
catalog. Accepts plain strings, per-locale mappings, Translation objects
and string-like objects; applies a deterministic locale fallback chain;
selects plural forms from ``{0}``/``]1,Inf]`` intervals and positional
``one:``/``more:`` alternatives using CLDR plural rules.

Public API:
    Translator - Façade: translate, translate_choice, translation, translation_choice
    LocaleRegistry - Configured locales, default, fallback chain, current locale
    Translation - Immutable locale -> text value
    MessageCatalog - Domain/locale message storage
    PluralSelector - Plural alternative selection
    PluralRules - Pluggable per-locale plural index strategy
    TranslatorConfig - Configuration from a plain mapping

Exceptions:
    TranslatorError - Base exception class
    UnknownLocaleError - Unconfigured locale (the only error that propagates)
    InvalidTranslationError - Input is not a valid translation
    MissingTranslationError - Key absent from every fallback locale
    PluralRuleMismatchError - No plural alternative matches the count
"""

from .diagnostics import (
    InvalidTranslationError,
    MissingTranslationError,
    PluralRuleMismatchError,
    TranslatorError,
    UnknownLocaleError,
)
from .localization import (
    LocaleInfo,
    LocaleRegistry,
    LocalesConfig,
    MessageCatalog,
    Translation,
    Translator,
    TranslatorConfig,
)
from .runtime import PluralRules, PluralSelector

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("transcatalog")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "InvalidTranslationError",
    "LocaleInfo",
    "LocaleRegistry",
    "LocalesConfig",
    "MessageCatalog",
    "MissingTranslationError",
    "PluralRuleMismatchError",
    "PluralRules",
    "PluralSelector",
    "Translation",
    "Translator",
    "TranslatorConfig",
    "TranslatorError",
    "UnknownLocaleError",
    "__version__",
]
