"""Diagnostic system for translator errors.

Provides structured error diagnostics with codes, context and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InvalidTranslationError,
    MissingTranslationError,
    PluralRuleMismatchError,
    TranslatorError,
    UnknownLocaleError,
)

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "InvalidTranslationError",
    "MissingTranslationError",
    "PluralRuleMismatchError",
    "TranslatorError",
    "UnknownLocaleError",
]
