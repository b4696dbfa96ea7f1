"""Locale registry with default locale, fallback chain and current locale.

The registry is the single owner of the "current locale" pointer. Every
other component reads it; only set_current_locale(), reset() and
using_locale() change it.

Thread Safety:
    The current locale is the only mutable state. It is guarded by an
    RLock, and using_locale() holds that lock for the whole block so a
    locale switch plus the resolutions inside it form one unit of work.
    Passing ``locale=`` explicitly to each call avoids the lock entirely.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterable, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING

from transcatalog.diagnostics import Diagnostic, DiagnosticCode, UnknownLocaleError
from transcatalog.locale_utils import get_display_name
from transcatalog.localization.types import LocaleCode

if TYPE_CHECKING:
    from transcatalog.localization.config import LocalesConfig

__all__ = ["LocaleInfo", "LocaleRegistry"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleInfo:
    """Metadata for one configured locale.

    Attributes:
        code: Short locale code used for lookups (e.g., 'en')
        system_locale: System locale tag for external use (e.g., 'en_US.UTF8').
            Defaults to code.
        name: Display name. Defaults to Babel's native name for code,
            or code itself when Babel does not know it.
    """

    code: LocaleCode
    system_locale: str = ""
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code:
            msg = "Locale code must be a non-empty string"
            raise ValueError(msg)
        if not self.system_locale:
            object.__setattr__(self, "system_locale", self.code)
        if not self.name:
            object.__setattr__(self, "name", get_display_name(self.code) or self.code)


class LocaleRegistry:
    """Known locales, default locale, fallback chain and current locale.

    Example:
        >>> registry = LocaleRegistry(
        ...     {"en": LocaleInfo("en", "en_US.UTF8"), "fr": LocaleInfo("fr", "fr_FR.UTF8")},
        ...     default_locale="en",
        ...     fallback_locales=["en"],
        ... )
        >>> registry.current_locale
        'en'
        >>> registry.set_current_locale("fr")
        >>> registry.resolution_chain()
        ('fr', 'en')

    Attributes:
        default_locale: Locale used when nothing else matches
        fallback_locales: Immutable fallback chain
    """

    __slots__ = ("_current", "_default", "_fallbacks", "_locales", "_lock")

    def __init__(
        self,
        locales: Mapping[LocaleCode, LocaleInfo] | Iterable[LocaleCode | LocaleInfo],
        default_locale: LocaleCode | None = None,
        fallback_locales: Iterable[LocaleCode] = (),
    ) -> None:
        """Initialize registry.

        Args:
            locales: Locale codes, LocaleInfo records, or a code -> LocaleInfo mapping
            default_locale: Default locale (defaults to the first locale)
            fallback_locales: Locale codes in fallback order

        Raises:
            ValueError: If locales is empty
            UnknownLocaleError: If default or fallback locales are not configured
        """
        entries: dict[LocaleCode, LocaleInfo] = {}
        items = locales.values() if isinstance(locales, Mapping) else locales
        for item in items:
            info = item if isinstance(item, LocaleInfo) else LocaleInfo(item)
            entries[info.code] = info
        if not entries:
            msg = "At least one locale is required"
            raise ValueError(msg)

        self._locales: Mapping[LocaleCode, LocaleInfo] = MappingProxyType(entries)
        self._lock = RLock()

        default = default_locale if default_locale is not None else next(iter(entries))
        if default not in entries:
            raise UnknownLocaleError(
                Diagnostic(
                    code=DiagnosticCode.LOCALE_DEFAULT_UNKNOWN,
                    message=f"Default locale '{default}' is not configured",
                    hint=f"Configured locales: {', '.join(entries)}",
                    locale=default,
                )
            )
        self._default: LocaleCode = default

        # dict.fromkeys() removes duplicates while maintaining insertion order
        fallbacks = tuple(dict.fromkeys(fallback_locales))
        for code in fallbacks:
            if code not in entries:
                raise UnknownLocaleError(
                    Diagnostic(
                        code=DiagnosticCode.LOCALE_FALLBACK_UNKNOWN,
                        message=f"Fallback locale '{code}' is not configured",
                        hint=f"Configured locales: {', '.join(entries)}",
                        locale=code,
                    )
                )
        self._fallbacks: tuple[LocaleCode, ...] = fallbacks
        self._current: LocaleCode = default

    @classmethod
    def from_config(cls, config: LocalesConfig) -> LocaleRegistry:
        """Build a registry from a LocalesConfig."""
        return cls(
            config.languages,
            default_locale=config.default_language,
            fallback_locales=config.fallback_languages,
        )

    def __repr__(self) -> str:
        return (
            f"LocaleRegistry(locales={list(self._locales)!r}, "
            f"default_locale={self._default!r}, current_locale={self.current_locale!r})"
        )

    def locales(self) -> Mapping[LocaleCode, LocaleInfo]:
        """Get read-only mapping of configured locale codes to metadata."""
        return self._locales

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Get configured locale codes in configuration order."""
        return tuple(self._locales)

    def is_known(self, code: object) -> bool:
        return isinstance(code, str) and code in self._locales

    def system_locale(self, code: LocaleCode) -> str:
        """Get the system locale tag of a configured locale.

        Raises:
            UnknownLocaleError: If code is not configured
        """
        return self._locales[self.require(code)].system_locale

    def require(self, code: LocaleCode) -> LocaleCode:
        """Return code if configured.

        Raises:
            UnknownLocaleError: If code is not configured
        """
        if not self.is_known(code):
            raise UnknownLocaleError(
                Diagnostic(
                    code=DiagnosticCode.LOCALE_UNKNOWN,
                    message=f"Locale '{code}' is not configured",
                    hint=f"Configured locales: {', '.join(self._locales)}",
                    locale=str(code),
                )
            )
        return code

    @property
    def default_locale(self) -> LocaleCode:
        return self._default

    @property
    def fallback_locales(self) -> tuple[LocaleCode, ...]:
        return self._fallbacks

    @property
    def current_locale(self) -> LocaleCode:
        with self._lock:
            return self._current

    def set_current_locale(self, code: LocaleCode) -> None:
        """Switch the current locale.

        Raises:
            UnknownLocaleError: If code is not configured. The current
                locale is left unchanged.
        """
        self.require(code)
        with self._lock:
            previous, self._current = self._current, code
        if previous != code:
            logger.debug("Current locale changed: %s -> %s", previous, code)

    def reset(self) -> None:
        """Restore the current locale to the default locale."""
        self.set_current_locale(self._default)

    @contextmanager
    def using_locale(self, code: LocaleCode) -> Generator[LocaleRegistry]:
        """Temporarily switch the current locale.

        The previous locale is restored on exit, including on error. The
        registry lock is held for the duration of the block.

        Raises:
            UnknownLocaleError: If code is not configured
        """
        self.require(code)
        with self._lock:
            previous = self._current
            self.set_current_locale(code)
            try:
                yield self
            finally:
                self.set_current_locale(previous)

    def resolution_chain(self, locale: LocaleCode | None = None) -> tuple[LocaleCode, ...]:
        """Locales to try in order: requested, fallbacks, default.

        Args:
            locale: Requested locale (defaults to the current locale)

        Returns:
            Deduplicated tuple preserving priority order

        Raises:
            UnknownLocaleError: If locale is given and not configured
        """
        first = self.current_locale if locale is None else self.require(locale)
        return tuple(dict.fromkeys((first, *self._fallbacks, self._default)))
