"""Message catalog keyed by domain and locale.

The catalog stores already-loaded messages; it never parses files and
never applies fallback. Fallback policy belongs to the Translator, which
walks the registry's resolution chain and calls lookup() per locale.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType

from transcatalog.constants import DEFAULT_DOMAIN
from transcatalog.localization.types import Domain, LocaleCode, MessageKey

__all__ = ["MessageCatalog", "ResourceRecord"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResourceRecord:
    """Immutable record of one merged resource.

    Attributes:
        format: Loader format name the resource came from (metadata only)
        locale: Locale the messages were merged into
        domain: Domain the messages were merged into
        size: Number of keys merged
    """

    format: str
    locale: LocaleCode
    domain: Domain
    size: int


class MessageCatalog:
    """Mapping of domain -> locale -> key -> text.

    Example:
        >>> catalog = MessageCatalog()
        >>> catalog.add_resource("array", {"foo": "FOO"}, "en")
        >>> catalog.lookup("messages", "en", "foo")
        'FOO'
        >>> catalog.lookup("messages", "fr", "foo") is None
        True
    """

    __slots__ = ("_default_domain", "_lock", "_messages", "_resources")

    def __init__(self, default_domain: Domain = DEFAULT_DOMAIN) -> None:
        if not default_domain:
            msg = "default_domain must be a non-empty string"
            raise ValueError(msg)
        self._default_domain = default_domain
        self._messages: dict[Domain, dict[LocaleCode, dict[MessageKey, str]]] = {
            default_domain: {}
        }
        self._resources: list[ResourceRecord] = []
        self._lock = RLock()

    @property
    def default_domain(self) -> Domain:
        return self._default_domain

    def _domain(self, domain: Domain | None) -> Domain:
        return domain or self._default_domain

    def add_resource(
        self,
        format: str,  # noqa: A002 - mirrors the loader format name
        data: Mapping[MessageKey, object],
        locale: LocaleCode,
        domain: Domain | None = None,
    ) -> None:
        """Merge data into messages[domain][locale].

        Existing keys are overwritten (last write wins); other keys are kept.

        Args:
            format: Loader format the data came from (recorded, not interpreted)
            data: Flat key -> text mapping
            locale: Locale code
            domain: Domain name (None or "" selects the default domain)

        Raises:
            TypeError: If data is not a mapping
        """
        if not isinstance(data, Mapping):
            msg = f"Resource data must be a mapping, got {type(data).__name__}"
            raise TypeError(msg)
        target_domain = self._domain(domain)
        with self._lock:
            messages = self._messages.setdefault(target_domain, {}).setdefault(locale, {})
            messages.update({str(key): str(text) for key, text in data.items()})
            self._resources.append(
                ResourceRecord(format=format, locale=locale, domain=target_domain, size=len(data))
            )
        logger.debug(
            "Merged %d messages (%s) into %s/%s", len(data), format, target_domain, locale
        )

    def available_domains(self) -> tuple[Domain, ...]:
        with self._lock:
            return tuple(self._messages)

    def lookup(self, domain: Domain | None, locale: LocaleCode, key: MessageKey) -> str | None:
        """Return the text for exactly (domain, locale, key), or None."""
        with self._lock:
            return self._messages.get(self._domain(domain), {}).get(locale, {}).get(key)

    def has(self, domain: Domain | None, locale: LocaleCode, key: MessageKey) -> bool:
        return self.lookup(domain, locale, key) is not None

    def messages(self, domain: Domain | None, locale: LocaleCode) -> Mapping[MessageKey, str]:
        """Read-only snapshot of one domain/locale message table."""
        with self._lock:
            return MappingProxyType(
                dict(self._messages.get(self._domain(domain), {}).get(locale, {}))
            )

    def resources(self) -> tuple[ResourceRecord, ...]:
        """Records of every merged resource, in merge order."""
        with self._lock:
            return tuple(self._resources)
