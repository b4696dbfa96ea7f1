"""Immutable multi-locale translation value.

A Translation maps configured locale codes to text. It is built from one
of four admissible input shapes (see InputShape), each with its own
normalizing constructor, and validated by a single public predicate,
is_valid_translation().

Rendering order for str(translation):
    current locale -> fallback locales in order -> default locale -> ""

Python 3.13+.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Collection, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeIs

from transcatalog.constants import FALLBACK_EMPTY
from transcatalog.diagnostics import Diagnostic, DiagnosticCode, InvalidTranslationError
from transcatalog.enums import InputShape
from transcatalog.localization.types import Count, LocaleCode, Parameters

if TYPE_CHECKING:
    from transcatalog.localization.registry import LocaleRegistry
    from transcatalog.runtime.selector import PluralSelector

__all__ = [
    "PluralChoice",
    "Translation",
    "classify_input",
    "is_string_like",
    "is_text_value",
    "is_valid_translation",
    "render_text",
]

_NON_TEXT_TYPES = (bytes, bytearray, memoryview, Mapping, list, tuple, set, frozenset)

logger = logging.getLogger(__name__)


def is_string_like(value: object) -> bool:
    """Return True for objects that define their own __str__.

    Numbers, booleans, None, bytes and containers are never string-like,
    even though every Python object is technically convertible with str().
    """
    if value is None or isinstance(value, (str, numbers.Number, *_NON_TEXT_TYPES)):
        return False
    return type(value).__str__ is not object.__str__


def render_text(value: object) -> str | None:
    """Return str(value), or None if its __str__ raises."""
    try:
        return str(value)
    except Exception as e:  # noqa: BLE001 - user-defined __str__
        logger.debug("__str__ of %s raised %s", type(value).__name__, e)
        return None


def is_text_value(value: object) -> bool:
    """Return True if value may be stored as the text of a locale entry."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, numbers.Number)) or (
        is_string_like(value) and render_text(value) is not None
    )


def is_valid_translation(value: object, locales: Collection[LocaleCode]) -> TypeIs[Mapping[str, object]]:
    """Check the validity rule for mapping-shaped translation input.

    A mapping is valid iff it is non-empty, every key is a non-empty string
    naming one of locales, and every value is text (not a container).

    Examples:
        >>> is_valid_translation({"en": "Hello", "fr": "Bonjour"}, ["en", "fr"])
        True
        >>> is_valid_translation({0: "foo"}, ["en"])
        False
        >>> is_valid_translation({"en": ["nested"]}, ["en"])
        False
    """
    if not isinstance(value, Mapping) or not value:
        return False
    for key, text in value.items():
        if not isinstance(key, str) or not key or key not in locales:
            return False
        if not is_text_value(text):
            return False
    return True


def classify_input(value: object, locales: Collection[LocaleCode]) -> InputShape | None:
    """Return the InputShape of value, or None if it is not a valid translation input.

    Examples:
        >>> classify_input("Hello", ["en"])
        <InputShape.TEXT: 'text'>
        >>> classify_input({"en": "Hello"}, ["en"])
        <InputShape.MAPPING: 'mapping'>
        >>> classify_input(["foo", "bar"], ["en"]) is None
        True
    """
    match value:
        case Translation():
            return InputShape.TRANSLATION
        case bool() | None:
            return None
        case str():
            return InputShape.TEXT if value else None
        case Mapping():
            return InputShape.MAPPING if is_valid_translation(value, locales) else None
        case _ if is_string_like(value):
            return InputShape.STRING_LIKE if render_text(value) else None
        case _:
            return None


@dataclass(frozen=True, slots=True)
class PluralChoice:
    """Pending plural selection applied when a Translation is rendered.

    Attributes:
        count: Number driving selection
        parameters: Placeholder values applied after selection
        selector: Selector performing the choice
    """

    count: Count
    parameters: Parameters = field(default_factory=dict)
    selector: PluralSelector | None = field(default=None, compare=False)

    def apply(self, text: str, locale: LocaleCode) -> str:
        if self.selector is None:
            # Lazy import: selector pulls in Babel-backed plural rules
            from transcatalog.runtime.selector import PluralSelector  # noqa: PLC0415

            selector = PluralSelector()
        else:
            selector = self.selector
        return selector.format(text, self.count, locale, self.parameters)


def _invalid(code: DiagnosticCode, message: str) -> InvalidTranslationError:
    return InvalidTranslationError(Diagnostic(code=code, message=message))


class Translation(Mapping[LocaleCode, str]):
    """Immutable mapping from locale code to text.

    Use the from_* constructors; each accepts exactly one input shape.

    Example:
        >>> registry = LocaleRegistry(["en", "fr"], fallback_locales=["en"])
        >>> t = Translation.from_mapping({"en": "Hello", "fr": "Bonjour"}, registry)
        >>> str(t)
        'Hello'
        >>> registry.set_current_locale("fr")
        >>> str(t)
        'Bonjour'
        >>> t["en"]
        'Hello'
    """

    __slots__ = ("_choice", "_entries", "_registry")

    def __init__(
        self,
        entries: Mapping[LocaleCode, str],
        registry: LocaleRegistry,
        choice: PluralChoice | None = None,
    ) -> None:
        # Only configured locales are retained
        self._entries: Mapping[LocaleCode, str] = MappingProxyType(
            {code: str(text) for code, text in entries.items() if registry.is_known(code)}
        )
        self._registry = registry
        self._choice = choice

    # -- constructors, one per InputShape ---------------------------------

    @classmethod
    def from_text(
        cls,
        text: object,
        registry: LocaleRegistry,
        locale: LocaleCode | None = None,
    ) -> Translation:
        """Wrap a plain or string-like value under one locale.

        Args:
            text: Non-empty str or string-like object
            registry: Locale registry
            locale: Target locale (defaults to the current locale)

        Raises:
            InvalidTranslationError: If text is empty or not string-like
            UnknownLocaleError: If locale is not configured
        """
        if not isinstance(text, str) and not is_string_like(text):
            raise _invalid(
                DiagnosticCode.INPUT_INVALID_TYPE,
                f"Expected text, got {type(text).__name__}",
            )
        rendered = render_text(text)
        if rendered is None:
            raise _invalid(
                DiagnosticCode.INPUT_INVALID_TYPE,
                f"{type(text).__name__}.__str__ failed",
            )
        if not rendered:
            raise _invalid(DiagnosticCode.INPUT_EMPTY, "Translation text cannot be empty")
        target = registry.current_locale if locale is None else registry.require(locale)
        return cls({target: rendered}, registry)

    @classmethod
    def from_mapping(cls, mapping: object, registry: LocaleRegistry) -> Translation:
        """Copy a locale -> text mapping.

        Raises:
            InvalidTranslationError: If mapping fails is_valid_translation()
        """
        if not is_valid_translation(mapping, registry.locales()):
            raise _invalid(
                DiagnosticCode.INPUT_INVALID_MAPPING,
                "Mapping must be non-empty with configured locale keys and text values",
            )
        return cls(mapping, registry)  # type: ignore[arg-type]

    @classmethod
    def from_translation(
        cls, other: Translation, registry: LocaleRegistry | None = None
    ) -> Translation:
        """Copy another Translation by value.

        With registry, the copy is bound to it and entries for locales it
        does not configure are dropped.
        """
        target = other._registry if registry is None else registry
        return cls(dict(other._entries), target, other._choice)

    @classmethod
    def from_value(
        cls,
        value: object,
        registry: LocaleRegistry,
        locale: LocaleCode | None = None,
    ) -> Translation:
        """Normalize any admissible input shape into a Translation.

        Raises:
            InvalidTranslationError: If value has no admissible shape
            UnknownLocaleError: If locale is given and not configured
        """
        match classify_input(value, registry.locales()):
            case InputShape.TRANSLATION:
                return cls.from_translation(value, registry)  # type: ignore[arg-type]
            case InputShape.MAPPING:
                return cls.from_mapping(value, registry)
            case InputShape.TEXT | InputShape.STRING_LIKE:
                return cls.from_text(value, registry, locale)
            case _:
                raise _invalid(
                    DiagnosticCode.INPUT_INVALID_TYPE,
                    f"Value of type {type(value).__name__} is not a valid translation",
                )

    def with_choice(self, choice: PluralChoice | None) -> Translation:
        """Return a copy rendering through choice."""
        return Translation(dict(self._entries), self._registry, choice)

    # -- Mapping protocol -------------------------------------------------

    def __getitem__(self, locale: LocaleCode) -> str:
        return self._entries[locale]

    def __iter__(self) -> Iterator[LocaleCode]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Translation):
            return dict(self._entries) == dict(other._entries) and self._choice == other._choice
        if isinstance(other, Mapping):
            return self._choice is None and dict(self._entries) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        choice_key = None if self._choice is None else self._choice.count
        return hash((frozenset(self._entries.items()), choice_key))

    def __copy__(self) -> Translation:
        return Translation.from_translation(self)

    def __deepcopy__(self, memo: dict[int, object]) -> Translation:
        return Translation.from_translation(self)

    def __repr__(self) -> str:
        return f"Translation({dict(self._entries)!r})"

    # -- resolution -------------------------------------------------------

    @property
    def registry(self) -> LocaleRegistry:
        return self._registry

    @property
    def choice(self) -> PluralChoice | None:
        return self._choice

    def to_dict(self) -> dict[LocaleCode, str]:
        return dict(self._entries)

    def resolved_locale(self, locale: LocaleCode | None = None) -> LocaleCode | None:
        """Locale whose entry resolution would use, or None if none applies."""
        for code in self._registry.resolution_chain(locale):
            if code in self._entries:
                return code
        return None

    def resolve(self, locale: LocaleCode | None = None) -> str:
        """Raw text for locale, following the fallback chain.

        Order: locale (or current) -> fallback locales -> default -> "".
        """
        code = self.resolved_locale(locale)
        return FALLBACK_EMPTY if code is None else self._entries[code]

    def render(self, locale: LocaleCode | None = None) -> str:
        """Text for locale with any pending plural choice applied."""
        code = self.resolved_locale(locale)
        if code is None:
            return FALLBACK_EMPTY
        text = self._entries[code]
        return text if self._choice is None else self._choice.apply(text, code)

    def __str__(self) -> str:
        return self.render()
