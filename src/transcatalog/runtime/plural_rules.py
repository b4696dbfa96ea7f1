"""Per-locale plural index selection.

Maps a count to the positional index of a plural alternative. Three
sources are consulted in order:

1. Custom rules registered with PluralRules.register()
2. CLDR plural rules from Babel, ordered zero/one/two/few/many/other
3. The binary one/other rule, for locales Babel does not know

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from decimal import Decimal
from threading import RLock

from babel.core import UnknownLocaleError as BabelUnknownLocaleError

from transcatalog.constants import MAX_LOCALE_CACHE_SIZE, PLURAL_CATEGORY_ORDER
from transcatalog.locale_utils import get_babel_locale, language_of, normalize_locale

__all__ = [
    "PluralRule",
    "PluralRules",
    "binary_plural_index",
    "cldr_plural_index",
]

logger = logging.getLogger(__name__)

type PluralRule = Callable[[int | float | Decimal], int]
"""Callable mapping a count to a positional plural index."""


def binary_plural_index(count: int | float | Decimal) -> int:
    """Select the singular (0) or plural (1) position.

    Examples:
        >>> binary_plural_index(1)
        0
        >>> binary_plural_index(0)
        1
        >>> binary_plural_index(-1)
        0
    """
    # Magnitude, as CLDR operands do: -1 is singular like 1.
    return 0 if abs(count) == 1 else 1


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _category_order(locale: str) -> tuple[str, ...]:
    """Categories defined by a locale, in canonical CLDR order.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Babel reports only explicit tags; "other" is always implied.
    tags = set(get_babel_locale(locale).plural_form.tags) | {"other"}
    return tuple(category for category in PLURAL_CATEGORY_ORDER if category in tags)


def cldr_plural_index(count: int | float | Decimal, locale: str) -> int:
    """Select the positional index of the CLDR category for count.

    Examples:
        >>> cldr_plural_index(1, "en")
        0
        >>> cldr_plural_index(0, "fr")
        0
        >>> cldr_plural_index(5, "ru")
        2
        >>> cldr_plural_index(42, "ja")
        0

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    order = _category_order(locale)
    category = get_babel_locale(locale).plural_form(count)
    return order.index(category)


class PluralRules:
    """Pluggable plural index strategy keyed by locale.

    Example:
        >>> rules = PluralRules()
        >>> rules.index(2, "en")
        1
        >>> rules.register("x-robot", lambda n: 0)
        >>> rules.index(99, "x-robot")
        0
    """

    __slots__ = ("_lock", "_rules")

    def __init__(self, rules: dict[str, PluralRule] | None = None) -> None:
        self._rules: dict[str, PluralRule] = {}
        self._lock = RLock()
        for locale, rule in (rules or {}).items():
            self.register(locale, rule)

    def register(self, locale: str, rule: PluralRule) -> None:
        """Register a custom rule, overriding CLDR data for locale."""
        if not callable(rule):
            msg = f"Plural rule for '{locale}' must be callable"
            raise TypeError(msg)
        with self._lock:
            self._rules[normalize_locale(locale)] = rule
        logger.debug("Registered custom plural rule for locale: %s", locale)

    def has_custom_rule(self, locale: str) -> bool:
        return self._custom_rule(locale) is not None

    def _custom_rule(self, locale: str) -> PluralRule | None:
        normalized = normalize_locale(locale)
        with self._lock:
            rule = self._rules.get(normalized)
            if rule is None:
                rule = self._rules.get(language_of(normalized))
        return rule

    def index(self, count: int | float | Decimal, locale: str) -> int:
        """Return the positional plural index of count for locale.

        Never negative. Callers clamp the result to the number of
        alternatives they actually have.
        """
        rule = self._custom_rule(locale)
        if rule is not None:
            return max(0, int(rule(count)))
        try:
            return cldr_plural_index(count, locale)
        except (BabelUnknownLocaleError, ValueError):
            # Most common pattern: n == 1 -> singular, else -> plural
            return binary_plural_index(count)
