"""Configuration objects for the locale registry and translator.

Frozen dataclasses validated at construction. Each has a from_mapping()
factory accepting the plain-dict configuration shape applications keep
in their settings files:

    {
        "locales": {
            "languages": {"en": {"locale": "en_US.UTF8"}, "fr": {"locale": "fr_FR.UTF8"}},
            "default_language": "en",
            "fallback_languages": ["en"],
        },
        "translator": {
            "translations": {"messages": {"en": {"foo": "FOO"}, "fr": {"foo": "OOF"}}},
        },
    }

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from transcatalog.constants import DEFAULT_DOMAIN
from transcatalog.localization.registry import LocaleInfo
from transcatalog.localization.types import Domain, LocaleCode, MessageKey

__all__ = ["LocalesConfig", "TranslatorConfig"]

type TranslationTable = Mapping[Domain, Mapping[LocaleCode, Mapping[MessageKey, object]]]


def _section(data: Mapping[str, object], name: str) -> Mapping[str, object]:
    value = data.get(name, {})
    if not isinstance(value, Mapping):
        msg = f"Config section '{name}' must be a mapping, got {type(value).__name__}"
        raise ValueError(msg)
    return value


def _locale_info(code: object, entry: object) -> LocaleInfo:
    if not isinstance(code, str) or not code:
        msg = f"Language code must be a non-empty string, got {code!r}"
        raise ValueError(msg)
    match entry:
        case None:
            return LocaleInfo(code)
        case str():
            return LocaleInfo(code, system_locale=entry)
        case Mapping():
            return LocaleInfo(
                code,
                system_locale=str(entry.get("locale") or ""),
                name=str(entry.get("name") or ""),
            )
        case _:
            msg = f"Language '{code}' must map to a string or mapping, got {type(entry).__name__}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class LocalesConfig:
    """Immutable locale configuration.

    Attributes:
        languages: Locale code -> LocaleInfo, in configured order
        default_language: Default locale code (None selects the first language)
        fallback_languages: Fallback chain
    """

    languages: Mapping[LocaleCode, LocaleInfo]
    default_language: LocaleCode | None = None
    fallback_languages: tuple[LocaleCode, ...] = ()

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If no languages are configured, or the default or a
                fallback language is not among them.
        """
        if not self.languages:
            msg = "At least one language must be configured"
            raise ValueError(msg)
        object.__setattr__(self, "languages", MappingProxyType(dict(self.languages)))
        object.__setattr__(self, "fallback_languages", tuple(self.fallback_languages))
        if self.default_language is not None and self.default_language not in self.languages:
            msg = f"default_language '{self.default_language}' is not a configured language"
            raise ValueError(msg)
        for code in self.fallback_languages:
            if code not in self.languages:
                msg = f"fallback language '{code}' is not a configured language"
                raise ValueError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> LocalesConfig:
        """Build from a plain mapping.

        ``languages`` (or ``locales``) may be a mapping of code to entry,
        where an entry is None, a system locale string, or a mapping with
        optional ``locale`` and ``name`` keys; or a list of codes.

        Raises:
            ValueError: If the mapping is malformed
        """
        raw = data.get("languages", data.get("locales"))
        match raw:
            case Mapping():
                languages = {code: _locale_info(code, entry) for code, entry in raw.items()}
            case list() | tuple():
                languages = {code: _locale_info(code, None) for code in raw}
            case _:
                msg = "Config must define 'languages' as a mapping or list"
                raise ValueError(msg)

        fallbacks = data.get("fallback_languages", ())
        if isinstance(fallbacks, str) or not isinstance(fallbacks, (list, tuple)):
            msg = "'fallback_languages' must be a list of language codes"
            raise ValueError(msg)

        default = data.get("default_language")
        if default is not None and not isinstance(default, str):
            msg = "'default_language' must be a language code"
            raise ValueError(msg)

        return cls(
            languages=languages,
            default_language=default,
            fallback_languages=tuple(fallbacks),
        )


@dataclass(frozen=True, slots=True)
class TranslatorConfig:
    """Immutable translator configuration.

    Attributes:
        locales: Locale configuration
        translations: Inline messages, domain -> locale -> key -> text
        default_domain: Domain used when callers omit one
    """

    locales: LocalesConfig
    translations: TranslationTable = field(default_factory=dict)
    default_domain: Domain = DEFAULT_DOMAIN

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If default_domain is empty or translations is malformed
        """
        if not self.default_domain:
            msg = "default_domain must be a non-empty string"
            raise ValueError(msg)
        if not isinstance(self.translations, Mapping):
            msg = "translations must be a mapping of domain -> locale -> messages"
            raise ValueError(msg)
        for domain, by_locale in self.translations.items():
            if not isinstance(by_locale, Mapping):
                msg = f"translations['{domain}'] must be a mapping of locale -> messages"
                raise ValueError(msg)
            for locale, messages in by_locale.items():
                if locale not in self.locales.languages:
                    msg = f"translations['{domain}'] uses unconfigured locale '{locale}'"
                    raise ValueError(msg)
                if not isinstance(messages, Mapping):
                    msg = f"translations['{domain}']['{locale}'] must be a mapping"
                    raise ValueError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> TranslatorConfig:
        """Build from a mapping with ``locales`` and optional ``translator`` sections.

        Raises:
            ValueError: If the mapping is malformed
        """
        translator = _section(data, "translator")
        translations = translator.get("translations", {})
        default_domain = translator.get("default_domain", DEFAULT_DOMAIN)
        if not isinstance(default_domain, str):
            msg = "'default_domain' must be a string"
            raise ValueError(msg)
        return cls(
            locales=LocalesConfig.from_mapping(_section(data, "locales")),
            translations=translations,  # type: ignore[arg-type]
            default_domain=default_domain,
        )
