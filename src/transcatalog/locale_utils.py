"""Locale utilities for code normalization and Babel access.

Centralizes locale format normalization used throughout the codebase.
Registry codes are short identifiers ("en", "fr"); system tags carry an
encoding suffix ("en_US.UTF8"); Babel expects POSIX form ("en_US").

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError as BabelUnknownLocaleError

from transcatalog.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_display_name",
    "language_of",
    "normalize_locale",
    "strip_encoding",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def strip_encoding(system_locale: str) -> str:
    """Drop the encoding and modifier suffix from a system locale tag.

    Example:
        >>> strip_encoding("en_US.UTF8")
        'en_US'
        >>> strip_encoding("sr_RS@latin")
        'sr_RS'
    """
    return system_locale.split(".", 1)[0].split("@", 1)[0]


def language_of(locale_code: str) -> str:
    """Return the language part of a locale code.

    Example:
        >>> language_of("fr-CA")
        'fr'
    """
    return normalize_locale(locale_code).split("_", 1)[0]


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. This avoids repeated
    parsing overhead in hot paths like plural rule selection.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47, POSIX or system tag accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(strip_encoding(normalize_locale(locale_code)))


def get_display_name(locale_code: str) -> str | None:
    """Return the native display name of a locale, or None if Babel lacks it.

    Example:
        >>> get_display_name("en")
        'English'
        >>> get_display_name("xx") is None
        True
    """
    try:
        locale = get_babel_locale(locale_code)
    except (BabelUnknownLocaleError, ValueError):
        return None
    return locale.get_display_name()
