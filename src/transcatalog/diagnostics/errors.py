"""Translator exception hierarchy with structured diagnostics.

All exceptions store an optional Diagnostic object for rich error
information. Only UnknownLocaleError is raised across the public API;
the other types are collected by Translator.resolve() and
Translator.resolve_choice() and returned alongside a safe default.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class TranslatorError(Exception):
    """Base exception for all translator errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TranslatorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnknownLocaleError(TranslatorError):
    """Locale code is not configured in the LocaleRegistry.

    Raised by set_locale(), by registry construction and by any call
    that names an unconfigured locale explicitly. The current locale is
    never changed when this is raised.
    """


class InvalidTranslationError(TranslatorError):
    """Value cannot be normalized into a Translation.

    Raised by Translation.from_value().
    Fallback: Translator.translation() returns None, translate() returns "".
    """


class MissingTranslationError(TranslatorError):
    """Bare key absent from every locale of the resolution chain.

    Never raised; collected by Translator.resolve().
    Fallback: return the identifier as its own display text.
    """


class PluralRuleMismatchError(TranslatorError):
    """Count matches no explicit rule and no positional alternative exists.

    Never raised; collected by Translator.resolve_choice().
    Fallback: return the raw, unselected message.
    """
