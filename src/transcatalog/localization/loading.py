"""Resource loading seam for the Translator.

Loaders turn a resource of some format into a flat key -> text mapping.
File formats are out of scope for this library; applications register
their own loaders with Translator.add_loader(). ArrayLoader handles
in-memory mappings and is registered under the "array" format by default.

Components:
    ResourceLoader - Protocol for loaders (structural typing)
    ArrayLoader - Flattens nested mappings into dotted keys

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from transcatalog.constants import KEY_SEPARATOR
from transcatalog.localization.types import Domain, LocaleCode, MessageKey

__all__ = ["ArrayLoader", "ResourceLoader"]


class ResourceLoader(Protocol):
    """Protocol for converting a resource into catalog messages.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom loaders.

    Example:
        >>> class CsvLoader:
        ...     def load(self, resource, locale, domain):
        ...         with open(resource, encoding="utf-8") as f:
        ...             return dict(line.rstrip("\\n").split(";", 1) for line in f)
        ...
        >>> translator.add_loader("csv", CsvLoader())
        >>> translator.add_resource("csv", "messages.fr.csv", "fr")
    """

    def load(self, resource: object, locale: LocaleCode, domain: Domain) -> Mapping[MessageKey, str]:
        """Load messages for given locale and domain.

        Args:
            resource: Format-specific resource (path, mapping, stream, ...)
            locale: Locale code the messages belong to
            domain: Domain the messages belong to

        Returns:
            Flat key -> text mapping
        """
        ...


@dataclass(frozen=True, slots=True)
class ArrayLoader:
    """Loader for in-memory mappings.

    Nested mappings are flattened into dotted keys and values are
    converted to strings.

    Example:
        >>> ArrayLoader().load({"cart": {"title": "Cart"}, "ok": "OK"}, "en", "messages")
        {'cart.title': 'Cart', 'ok': 'OK'}

    Attributes:
        separator: String joining nested keys
    """

    separator: str = KEY_SEPARATOR

    def load(self, resource: object, locale: LocaleCode, domain: Domain) -> dict[MessageKey, str]:
        """Flatten resource.

        Raises:
            TypeError: If resource is not a mapping
        """
        if not isinstance(resource, Mapping):
            msg = f"ArrayLoader expects a mapping, got {type(resource).__name__}"
            raise TypeError(msg)
        messages: dict[MessageKey, str] = {}
        self._flatten(resource, "", messages)
        return messages

    def _flatten(self, data: Mapping[object, object], prefix: str, out: dict[MessageKey, str]) -> None:
        for key, value in data.items():
            full_key = f"{prefix}{self.separator}{key}" if prefix else str(key)
            if isinstance(value, Mapping):
                self._flatten(value, full_key, out)
            else:
                out[full_key] = str(value)
