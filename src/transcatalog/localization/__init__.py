"""Multi-locale translation package.

Provides the full translation stack: type aliases, locale registry,
the Translation value object, message catalog, loading seam,
configuration and the Translator façade.

Submodules:
    types       - PEP 695 type aliases (LocaleCode, Domain, MessageKey, Count, Parameters)
    registry    - LocaleRegistry, LocaleInfo
    translation - Translation, PluralChoice, validity predicate and input classification
    catalog     - MessageCatalog, ResourceRecord
    loading     - ResourceLoader protocol, ArrayLoader
    config      - LocalesConfig, TranslatorConfig
    translator  - Translator, LocaleBoundTranslator, FallbackInfo

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from transcatalog.localization.catalog import MessageCatalog, ResourceRecord
from transcatalog.localization.config import LocalesConfig, TranslatorConfig
from transcatalog.localization.loading import ArrayLoader, ResourceLoader
from transcatalog.localization.registry import LocaleInfo, LocaleRegistry
from transcatalog.localization.translation import (
    PluralChoice,
    Translation,
    classify_input,
    is_string_like,
    is_valid_translation,
)
from transcatalog.localization.translator import (
    FallbackInfo,
    LocaleBoundTranslator,
    Translator,
)
from transcatalog.localization.types import Count, Domain, LocaleCode, MessageKey, Parameters

__all__ = [
    # Façade
    "Translator",
    "LocaleBoundTranslator",
    # Locales
    "LocaleRegistry",
    "LocaleInfo",
    # Value object
    "Translation",
    "PluralChoice",
    "classify_input",
    "is_string_like",
    "is_valid_translation",
    # Catalog and loaders
    "MessageCatalog",
    "ResourceRecord",
    "ResourceLoader",
    "ArrayLoader",
    # Configuration
    "LocalesConfig",
    "TranslatorConfig",
    # Fallback observability
    "FallbackInfo",
    # Type aliases for user code type annotations
    "Count",
    "Domain",
    "LocaleCode",
    "MessageKey",
    "Parameters",
]
