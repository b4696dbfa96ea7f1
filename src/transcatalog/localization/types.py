"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating Translator call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from decimal import Decimal

__all__ = [
    "Count",
    "Domain",
    "LocaleCode",
    "MessageKey",
    "Parameters",
]

type LocaleCode = str
"""Short locale code used as a catalog and fallback key (e.g., 'en', 'fr')."""

type Domain = str
"""Catalog namespace (e.g., 'messages', 'validation')."""

type MessageKey = str
"""Message identifier within a domain (e.g., 'cart.title')."""

type Count = int | float | Decimal
"""Number driving plural selection."""

type Parameters = Mapping[str, object]
"""Placeholder tokens mapped to replacement values (e.g., {'%name%': 'Anna'})."""
