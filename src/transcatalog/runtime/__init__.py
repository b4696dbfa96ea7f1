"""Runtime plural selection and placeholder substitution.

Submodules:
    plural_rules - PluralRules strategy (custom -> CLDR via Babel -> binary)
    selector     - PluralSelector, interval grammar and alternative parsing
    substitution - Single-pass %token% replacement

Python 3.13+.
"""

from .plural_rules import PluralRule, PluralRules, binary_plural_index, cldr_plural_index
from .selector import (
    Interval,
    PluralAlternative,
    PluralSelection,
    PluralSelector,
    parse_alternatives,
)
from .substitution import substitute

__all__ = [
    "Interval",
    "PluralAlternative",
    "PluralRule",
    "PluralRules",
    "PluralSelection",
    "PluralSelector",
    "binary_plural_index",
    "cldr_plural_index",
    "parse_alternatives",
    "substitute",
]
