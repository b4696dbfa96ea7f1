"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic record carried by
every TranslatorError.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale errors (unknown or misconfigured locales)
        2000-2999: Input errors (values that are not valid translations)
        3000-3999: Lookup errors (missing catalog entries)
        4000-4999: Plural errors (selection failures)
    """

    # Locale errors (1000-1999)
    LOCALE_UNKNOWN = 1001
    LOCALE_DEFAULT_UNKNOWN = 1002
    LOCALE_FALLBACK_UNKNOWN = 1003

    # Input errors (2000-2999)
    INPUT_INVALID_TYPE = 2001
    INPUT_EMPTY = 2002
    INPUT_INVALID_MAPPING = 2003

    # Lookup errors (3000-3999)
    MESSAGE_NOT_FOUND = 3001

    # Plural errors (4000-4999)
    PLURAL_NO_MATCH = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale: Locale involved in the failure
        domain: Catalog domain involved in the failure
        key: Message key or identifier involved in the failure
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale: str | None = None
    domain: str | None = None
    key: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic with its context lines.

        Example output:
            error[MESSAGE_NOT_FOUND]: Message 'cart.title' not found
              = locale: fr
              = domain: messages
              = help: Add the key to a resource for this locale

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.locale is not None:
            lines.append(f"  = locale: {self.locale}")
        if self.domain is not None:
            lines.append(f"  = domain: {self.domain}")
        if self.key is not None:
            lines.append(f"  = key: {self.key!r}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
