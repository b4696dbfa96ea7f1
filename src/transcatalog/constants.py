"""Shared constants for transcatalog.

Centralizes defaults used across the localization and runtime packages.
Placing constants here avoids circular imports and provides a single
source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Catalog defaults
    "DEFAULT_DOMAIN",
    "DEFAULT_FORMAT",
    # Placeholders
    "COUNT_PLACEHOLDER",
    # Plural categories
    "PLURAL_CATEGORY_ORDER",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Fallback strings
    "FALLBACK_EMPTY",
    # Key flattening
    "KEY_SEPARATOR",
]

# ============================================================================
# CATALOG DEFAULTS
# ============================================================================

# Domain used when callers pass None or "" for the domain argument.
DEFAULT_DOMAIN: str = "messages"

# Loader format registered on every Translator.
DEFAULT_FORMAT: str = "array"

# ============================================================================
# PLACEHOLDERS
# ============================================================================

# Token replaced with the plural count unless the caller overrides it.
COUNT_PLACEHOLDER: str = "%count%"

# ============================================================================
# PLURAL CATEGORIES
# ============================================================================

# CLDR category order. A locale's positional plural index is the position of
# its category among the categories that locale actually defines.
PLURAL_CATEGORY_ORDER: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of parsed Babel locales and plural orderings kept in memory.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Result of resolving invalid input or a Translation with no usable entry.
FALLBACK_EMPTY: str = ""

# ============================================================================
# KEY FLATTENING
# ============================================================================

# Joins nested mapping keys when ArrayLoader flattens a resource.
KEY_SEPARATOR: str = "."
