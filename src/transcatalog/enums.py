"""Enumerations for transcatalog type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class InputShape(StrEnum):
    """Admissible shape of a value passed to Translator.translation().

    Each shape has exactly one normalizing constructor on Translation.

    StrEnum provides automatic string conversion: str(InputShape.TEXT) == "text"
    """

    TEXT = "text"
    """Non-empty plain string: 'Hello'"""

    STRING_LIKE = "string_like"
    """Object defining its own __str__ (not a number, container or bool)"""

    MAPPING = "mapping"
    """Locale code to text mapping: {'en': 'Hello', 'fr': 'Bonjour'}"""

    TRANSLATION = "translation"
    """Existing Translation value object"""


class RuleKind(StrEnum):
    """How a plural alternative was chosen.

    StrEnum provides automatic string conversion: str(RuleKind.EXPLICIT) == "explicit"
    """

    EXPLICIT = "explicit"
    """Matched an interval or set prefix: {0}, ]1,Inf]"""

    POSITIONAL = "positional"
    """Chosen by plural index among labeled or unprefixed alternatives"""


__all__ = [
    "InputShape",
    "RuleKind",
]
