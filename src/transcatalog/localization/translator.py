"""Translator façade: normalization, catalog fallback and plural selection.

Orchestrates LocaleRegistry (locales and fallback chain), MessageCatalog
(domain/locale messages), Translation (input normalization) and
PluralSelector (plural forms).

Resolution of translate(identifier, ...):
    1. Normalize identifier into a Translation. Invalid input -> "".
    2. Bare keys (str / string-like) are looked up in the catalog along
       the resolution chain: requested locale, fallbacks, default. The
       first hit wins; no hit returns the identifier itself.
       Mappings and Translations use their own entries and never touch
       the catalog.
    3. Substitute %placeholders% and return.

Error Handling:
    Only UnknownLocaleError propagates. Invalid input, missing messages
    and plural mismatches degrade to "", the identifier, or the raw
    message. resolve() and resolve_choice() return the same text together
    with the collected errors for callers that want to observe them.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from transcatalog.constants import DEFAULT_FORMAT, FALLBACK_EMPTY
from transcatalog.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    InvalidTranslationError,
    MissingTranslationError,
    PluralRuleMismatchError,
    TranslatorError,
)
from transcatalog.enums import InputShape
from transcatalog.localization.catalog import MessageCatalog
from transcatalog.localization.loading import ArrayLoader, ResourceLoader
from transcatalog.localization.registry import LocaleInfo, LocaleRegistry
from transcatalog.localization.translation import (
    PluralChoice,
    Translation,
    classify_input,
    is_valid_translation,
    render_text,
)
from transcatalog.localization.types import Count, Domain, LocaleCode, Parameters
from transcatalog.runtime.selector import PluralSelector
from transcatalog.runtime.substitution import substitute

if TYPE_CHECKING:
    from transcatalog.localization.config import TranslatorConfig
    from transcatalog.runtime.plural_rules import PluralRules

__all__ = ["FallbackInfo", "LocaleBoundTranslator", "Translator"]

logger = logging.getLogger(__name__)

type ResolveResult = tuple[str, tuple[TranslatorError, ...]]


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Record of a catalog message resolved from a non-requested locale.

    Attributes:
        requested_locale: Locale the caller asked for
        resolved_locale: Locale the message was found in
        domain: Catalog domain
        message_id: Message key
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    domain: Domain
    message_id: str


@dataclass(frozen=True, slots=True)
class _RawMessage:
    text: str
    locale: LocaleCode
    errors: tuple[TranslatorError, ...] = ()


class Translator:
    """Multi-locale message resolution with fallback and pluralization.

    Example:
        >>> registry = LocaleRegistry(["en", "fr"], default_locale="en", fallback_locales=["en"])
        >>> translator = Translator(registry)
        >>> translator.add_resource("array", {"Charcoal is great!": "Charcoal est super !"}, "fr")
        >>> translator.translate("Charcoal is great!", locale="fr")
        'Charcoal est super !'
        >>> translator.translate({"en": "Hello", "fr": "Bonjour"})
        'Hello'
        >>> translator.translate_choice("There is one apple|There is %count% apples", 2)
        'There is 2 apples'
        >>> translator.translate("")
        ''

    Attributes:
        registry: Locale registry owning the current locale
        catalog: Message catalog
        selector: Plural selector
    """

    __slots__ = ("_catalog", "_loaders", "_on_fallback", "_registry", "_selector")

    def __init__(
        self,
        registry: LocaleRegistry,
        catalog: MessageCatalog | None = None,
        *,
        selector: PluralSelector | None = None,
        plural_rules: PluralRules | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize translator.

        Args:
            registry: Locale registry
            catalog: Message catalog (a new empty catalog by default)
            selector: Plural selector (built from plural_rules by default)
            plural_rules: Plural rules for the default selector
            on_fallback: Optional callback invoked when a catalog message is
                resolved from a locale other than the requested one.

        Raises:
            ValueError: If both selector and plural_rules are given
        """
        if selector is not None and plural_rules is not None:
            msg = "Pass either selector or plural_rules, not both"
            raise ValueError(msg)
        self._registry = registry
        self._catalog = catalog if catalog is not None else MessageCatalog()
        self._selector = selector if selector is not None else PluralSelector(plural_rules)
        self._on_fallback = on_fallback
        self._loaders: dict[str, ResourceLoader] = {DEFAULT_FORMAT: ArrayLoader()}

    @classmethod
    def from_config(
        cls,
        config: TranslatorConfig,
        *,
        plural_rules: PluralRules | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> Translator:
        """Build a translator with registry, catalog and inline translations.

        Example:
            >>> config = TranslatorConfig.from_mapping({
            ...     "locales": {"languages": {"en": {}, "fr": {}}, "fallback_languages": ["en"]},
            ...     "translator": {"translations": {"messages": {"fr": {"foo": "OOF"}}}},
            ... })
            >>> Translator.from_config(config).translate("foo", locale="fr")
            'OOF'
        """
        translator = cls(
            LocaleRegistry.from_config(config.locales),
            MessageCatalog(config.default_domain),
            plural_rules=plural_rules,
            on_fallback=on_fallback,
        )
        for domain, by_locale in config.translations.items():
            for locale, messages in by_locale.items():
                translator.add_resource(DEFAULT_FORMAT, messages, locale, domain)
        return translator

    # -- collaborators ----------------------------------------------------

    @property
    def registry(self) -> LocaleRegistry:
        return self._registry

    @property
    def catalog(self) -> MessageCatalog:
        return self._catalog

    @property
    def selector(self) -> PluralSelector:
        return self._selector

    # -- locales ----------------------------------------------------------

    @property
    def locale(self) -> LocaleCode:
        """Current locale of the registry."""
        return self._registry.current_locale

    def set_locale(self, code: LocaleCode) -> None:
        """Set the current locale.

        Raises:
            UnknownLocaleError: If code is not configured
        """
        self._registry.set_current_locale(code)

    def locales(self) -> Mapping[LocaleCode, LocaleInfo]:
        return self._registry.locales()

    def available_locales(self) -> tuple[LocaleCode, ...]:
        return self._registry.available_locales()

    def for_locale(self, code: LocaleCode) -> LocaleBoundTranslator:
        """Return a resolver fixed to code, independent of the current locale.

        Raises:
            UnknownLocaleError: If code is not configured
        """
        return LocaleBoundTranslator(self, self._registry.require(code))

    # -- resources --------------------------------------------------------

    def available_domains(self) -> tuple[Domain, ...]:
        return self._catalog.available_domains()

    def add_loader(self, format: str, loader: ResourceLoader) -> None:  # noqa: A002
        """Register a loader for a resource format."""
        self._loaders[format] = loader
        logger.debug("Registered loader for format: %s", format)

    def add_resource(
        self,
        format: str,  # noqa: A002 - mirrors the loader format name
        resource: object,
        locale: LocaleCode,
        domain: Domain | None = None,
    ) -> None:
        """Load resource with the loader for format and merge it into the catalog.

        Raises:
            ValueError: If no loader is registered for format
            UnknownLocaleError: If locale is not configured
        """
        self._registry.require(locale)
        loader = self._loaders.get(format)
        if loader is None:
            msg = f"No loader registered for format '{format}'"
            raise ValueError(msg)
        target_domain = domain or self._catalog.default_domain
        messages = loader.load(resource, locale, target_domain)
        self._catalog.add_resource(format, messages, locale, target_domain)

    # -- normalization ----------------------------------------------------

    def is_valid_translation(self, value: object) -> bool:
        """Check value against the mapping validity rule for configured locales."""
        return is_valid_translation(value, self._registry.locales())

    def translation(self, identifier: object, *, locale: LocaleCode | None = None) -> Translation | None:
        """Normalize identifier into a Translation, or None if invalid.

        Strings and string-like objects are wrapped under locale (or the
        current locale); mappings are validated and copied; Translations
        are cloned.

        Raises:
            UnknownLocaleError: If locale is given and not configured
        """
        try:
            return self._normalize(identifier, locale)
        except InvalidTranslationError as e:
            logger.debug("Invalid translation input: %s", e)
            return None

    def translation_choice(
        self,
        identifier: object,
        count: Count,
        parameters: Parameters | None = None,
        *,
        locale: LocaleCode | None = None,
    ) -> Translation | None:
        """Normalize identifier and attach a plural choice applied at render time.

        Entries keep the full pipe-delimited text; str() selects the
        form for count in the locale of the rendered entry.

        Raises:
            UnknownLocaleError: If locale is given and not configured
        """
        translation = self.translation(identifier, locale=locale)
        if translation is None:
            return None
        choice = PluralChoice(count=count, parameters=dict(parameters or {}), selector=self._selector)
        return translation.with_choice(choice)

    def _normalize(self, identifier: object, locale: LocaleCode | None) -> Translation:
        return Translation.from_value(identifier, self._registry, locale)

    # -- resolution -------------------------------------------------------

    def translate(
        self,
        identifier: object,
        parameters: Parameters | None = None,
        domain: Domain | None = None,
        locale: LocaleCode | None = None,
    ) -> str:
        """Resolve identifier to text for locale (or the current locale).

        Returns "" for invalid input and the identifier itself for bare
        keys missing from every locale of the resolution chain.

        Raises:
            UnknownLocaleError: If locale is given and not configured
        """
        text, _errors = self.resolve(identifier, parameters, domain, locale)
        return text

    def translate_choice(
        self,
        identifier: object,
        count: Count,
        parameters: Parameters | None = None,
        domain: Domain | None = None,
        locale: LocaleCode | None = None,
    ) -> str:
        """Resolve identifier, select the plural form for count, substitute.

        ``%count%`` renders as count unless parameters provide ``%count%``.

        Raises:
            UnknownLocaleError: If locale is given and not configured
        """
        text, _errors = self.resolve_choice(identifier, count, parameters, domain, locale)
        return text

    def resolve(
        self,
        identifier: object,
        parameters: Parameters | None = None,
        domain: Domain | None = None,
        locale: LocaleCode | None = None,
    ) -> ResolveResult:
        """Resolve like translate() and return collected errors alongside.

        Returns:
            Tuple of (text, errors)

        Raises:
            UnknownLocaleError: If locale is given and not configured
        """
        raw = self._raw_message(identifier, domain, locale)
        if raw is None:
            return FALLBACK_EMPTY, (self._invalid_input_error(identifier),)
        return substitute(raw.text, parameters), raw.errors

    def resolve_choice(
        self,
        identifier: object,
        count: Count,
        parameters: Parameters | None = None,
        domain: Domain | None = None,
        locale: LocaleCode | None = None,
    ) -> ResolveResult:
        """Resolve like translate_choice() and return collected errors alongside.

        Returns:
            Tuple of (text, errors)

        Raises:
            UnknownLocaleError: If locale is given and not configured
        """
        raw = self._raw_message(identifier, domain, locale)
        if raw is None:
            return FALLBACK_EMPTY, (self._invalid_input_error(identifier),)

        selection = self._selector.select(raw.text, count, raw.locale)
        errors = raw.errors
        if not selection.matched:
            errors = (
                *errors,
                PluralRuleMismatchError(
                    Diagnostic(
                        code=DiagnosticCode.PLURAL_NO_MATCH,
                        message=f"No plural alternative matches count {count}",
                        hint="Add a positional alternative or an interval covering the count",
                        locale=raw.locale,
                        domain=domain or self._catalog.default_domain,
                        key=raw.text,
                    )
                ),
            )
        return self._selector.render(selection, count, parameters), errors

    def _raw_message(
        self,
        identifier: object,
        domain: Domain | None,
        locale: LocaleCode | None,
    ) -> _RawMessage | None:
        """Find the unsubstituted message and the locale it belongs to."""
        requested = self._registry.current_locale if locale is None else self._registry.require(locale)
        match classify_input(identifier, self._registry.locales()):
            case None:
                logger.debug("Invalid translation input of type %s", type(identifier).__name__)
                return None
            case InputShape.TEXT | InputShape.STRING_LIKE:
                key = render_text(identifier)
                if key is None:
                    return None
                return self._lookup(key, domain or self._catalog.default_domain, requested)
            case _:
                translation = self._normalize(identifier, requested)

        resolved = translation.resolved_locale(requested)
        if resolved is None:
            return _RawMessage(FALLBACK_EMPTY, requested)
        return _RawMessage(translation[resolved], resolved)

    def _lookup(self, key: str, domain: Domain, requested: LocaleCode) -> _RawMessage:
        for code in self._registry.resolution_chain(requested):
            text = self._catalog.lookup(domain, code, key)
            if text is None:
                continue
            if code != requested:
                logger.debug(
                    "Message '%s' resolved from fallback locale %s (requested %s)",
                    key,
                    code,
                    requested,
                )
                if self._on_fallback is not None:
                    self._on_fallback(
                        FallbackInfo(
                            requested_locale=requested,
                            resolved_locale=code,
                            domain=domain,
                            message_id=key,
                        )
                    )
            return _RawMessage(text, code)

        logger.debug("Message '%s' not found in domain %s for %s", key, domain, requested)
        missing = MissingTranslationError(
            Diagnostic(
                code=DiagnosticCode.MESSAGE_NOT_FOUND,
                message=f"Message '{key}' not found",
                hint="Add the key to a resource for this locale or a fallback locale",
                locale=requested,
                domain=domain,
                key=key,
            )
        )
        return _RawMessage(key, requested, (missing,))

    @staticmethod
    def _invalid_input_error(identifier: object) -> InvalidTranslationError:
        return InvalidTranslationError(
            Diagnostic(
                code=DiagnosticCode.INPUT_INVALID_TYPE,
                message=f"Value of type {type(identifier).__name__} is not a valid translation",
            )
        )


class LocaleBoundTranslator:
    """Resolver fixed to one locale for the duration of a logical request.

    Reads never consult or change the registry's current locale, so
    concurrent requests holding different bound translators cannot
    interfere with each other.

    Example:
        >>> fr = translator.for_locale("fr")
        >>> fr.translate_choice("one: %count% pomme|more: %count% pommes", 0)
        '0 pomme'
    """

    __slots__ = ("_locale", "_translator")

    def __init__(self, translator: Translator, locale: LocaleCode) -> None:
        self._translator = translator
        self._locale = translator.registry.require(locale)

    @property
    def locale(self) -> LocaleCode:
        return self._locale

    @property
    def translator(self) -> Translator:
        return self._translator

    def translation(self, identifier: object) -> Translation | None:
        return self._translator.translation(identifier, locale=self._locale)

    def translation_choice(
        self, identifier: object, count: Count, parameters: Parameters | None = None
    ) -> Translation | None:
        return self._translator.translation_choice(
            identifier, count, parameters, locale=self._locale
        )

    def translate(
        self,
        identifier: object,
        parameters: Parameters | None = None,
        domain: Domain | None = None,
    ) -> str:
        return self._translator.translate(identifier, parameters, domain, self._locale)

    def translate_choice(
        self,
        identifier: object,
        count: Count,
        parameters: Parameters | None = None,
        domain: Domain | None = None,
    ) -> str:
        return self._translator.translate_choice(
            identifier, count, parameters, domain, self._locale
        )

    def render(self, translation: Translation) -> str:
        """Render a Translation for the bound locale."""
        return translation.render(self._locale)
