"""Plural alternative parsing and selection.

A pluralizable message is a list of alternatives separated by ``|``
(``||`` is an escaped literal pipe). Each alternative may carry a rule:

    {0} There are no apples                 explicit set
    ]1,Inf] There are %count% apples        explicit interval
    one: There is one apple                 labeled (positional)
    There is one apple                      unprefixed (positional)

Explicit rules are tried left to right; the first match wins. Otherwise
the locale's plural index picks among the positional alternatives in
their original order, clamped to the last one.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from transcatalog.constants import COUNT_PLACEHOLDER
from transcatalog.enums import RuleKind
from transcatalog.runtime.plural_rules import PluralRules
from transcatalog.runtime.substitution import substitute

__all__ = [
    "Interval",
    "PluralAlternative",
    "PluralSelection",
    "PluralSelector",
    "parse_alternatives",
]

logger = logging.getLogger(__name__)

_NUMBER = r"-?\d+(?:\.\d+)?"
_SET = rf"\{{\s*{_NUMBER}(?:\s*,\s*{_NUMBER})*\s*\}}"
_RANGE = rf"[\[\]]\s*(?:-Inf|{_NUMBER})\s*,\s*(?:\+?Inf|{_NUMBER})\s*[\[\]]"

_EXPLICIT_RE = re.compile(rf"^(?P<rule>{_SET}|{_RANGE})\s*(?P<text>.*)$", re.DOTALL)
_LABELED_RE = re.compile(r"^\w+:\s*(?P<text>.*)$", re.DOTALL)
# An alternative is a run of escaped "||" pairs or non-pipe characters.
_ALTERNATIVE_RE = re.compile(r"(?:\|\||[^|])+")

_INFINITY = Decimal("Infinity")


def _to_decimal(value: int | float | Decimal | str) -> Decimal:
    match value:
        case "-Inf":
            return -_INFINITY
        case "Inf" | "+Inf":
            return _INFINITY
        case float():
            return Decimal(repr(value))
        case _:
            return Decimal(value)


@dataclass(frozen=True, slots=True)
class Interval:
    """Explicit selection rule: an exact set or a bounded range.

    Attributes:
        members: Exact values for ``{a,b,...}`` sets (empty for ranges)
        lower: Lower bound for ranges
        upper: Upper bound for ranges
        lower_inclusive: ``[`` on the left
        upper_inclusive: ``]`` on the right
    """

    members: tuple[Decimal, ...] = ()
    lower: Decimal = -_INFINITY
    upper: Decimal = _INFINITY
    lower_inclusive: bool = True
    upper_inclusive: bool = True

    @classmethod
    def parse(cls, rule: str) -> Interval:
        """Parse ``{0}``, ``{1,2}``, ``[0,1]``, ``]1,Inf]`` style rules.

        Raises:
            ValueError: If rule is not a set or interval
        """
        rule = rule.strip()
        try:
            if rule.startswith("{") and rule.endswith("}"):
                members = tuple(_to_decimal(part.strip()) for part in rule[1:-1].split(","))
                return cls(members=members)
            if len(rule) >= 2 and rule[0] in "[]" and rule[-1] in "[]" and "," in rule:
                left, right = rule[1:-1].split(",", 1)
                return cls(
                    lower=_to_decimal(left.strip()),
                    upper=_to_decimal(right.strip()),
                    lower_inclusive=rule[0] == "[",
                    upper_inclusive=rule[-1] == "]",
                )
        except InvalidOperation as e:
            msg = f"Invalid interval bounds: {rule!r}"
            raise ValueError(msg) from e
        msg = f"Not an interval or set: {rule!r}"
        raise ValueError(msg)

    def contains(self, count: int | float | Decimal) -> bool:
        number = _to_decimal(count)
        if self.members:
            return number in self.members
        above = number >= self.lower if self.lower_inclusive else number > self.lower
        below = number <= self.upper if self.upper_inclusive else number < self.upper
        return above and below


@dataclass(frozen=True, slots=True)
class PluralAlternative:
    """One ``|``-delimited segment with its rule tag stripped.

    Attributes:
        text: Alternative text without prefix
        interval: Explicit rule, or None for positional alternatives
        label: Label text of a ``label:`` prefix, if any
    """

    text: str
    interval: Interval | None = None
    label: str | None = None


@dataclass(frozen=True, slots=True)
class PluralSelection:
    """Outcome of selecting an alternative.

    Attributes:
        text: Selected text, or the raw message on mismatch
        kind: How the alternative was chosen; None on mismatch
        index: Position among all alternatives; None on mismatch
    """

    text: str
    kind: RuleKind | None
    index: int | None

    @property
    def matched(self) -> bool:
        return self.kind is not None


def parse_alternatives(message: str) -> tuple[PluralAlternative, ...]:
    """Split a pluralizable message into tagged alternatives.

    Examples:
        >>> [a.text for a in parse_alternatives("{0} none|one: one|%count% many")]
        ['none', 'one', '%count% many']
        >>> parse_alternatives("a||b")[0].text
        'a|b'
        >>> [a.text for a in parse_alternatives("a|||b")]
        ['a|', 'b']
    """
    alternatives: list[PluralAlternative] = []
    for raw in _ALTERNATIVE_RE.findall(message) or [message]:
        part = raw.replace("||", "|").strip()
        if (explicit := _EXPLICIT_RE.match(part)) is not None:
            alternatives.append(
                PluralAlternative(
                    text=explicit.group("text"),
                    interval=Interval.parse(explicit.group("rule")),
                )
            )
        elif (labeled := _LABELED_RE.match(part)) is not None:
            label = part.split(":", 1)[0]
            alternatives.append(PluralAlternative(text=labeled.group("text"), label=label))
        else:
            alternatives.append(PluralAlternative(text=part))
    return tuple(alternatives)


class PluralSelector:
    """Selects and renders the alternative of a message matching a count.

    Example:
        >>> selector = PluralSelector()
        >>> selector.format("There is one apple|There is %count% apples", 2, "en")
        'There is 2 apples'
        >>> selector.format("{0} None|]0,Inf] %count% items", 0, "en")
        'None'
    """

    __slots__ = ("_plural_rules",)

    def __init__(self, plural_rules: PluralRules | None = None) -> None:
        self._plural_rules = plural_rules if plural_rules is not None else PluralRules()

    @property
    def plural_rules(self) -> PluralRules:
        return self._plural_rules

    def select(self, message: str, count: int | float | Decimal, locale: str) -> PluralSelection:
        """Select the alternative of message for count under locale's rules.

        Never raises for malformed or unmatched messages; a mismatch is
        reported as a PluralSelection with kind None and the raw text.
        """
        alternatives = parse_alternatives(message)

        for index, alternative in enumerate(alternatives):
            if alternative.interval is not None and alternative.interval.contains(count):
                return PluralSelection(alternative.text, RuleKind.EXPLICIT, index)

        positional = [
            (index, alternative)
            for index, alternative in enumerate(alternatives)
            if alternative.interval is None
        ]
        if not positional:
            logger.warning(
                "No plural alternative matches count %s for locale '%s': %r",
                count,
                locale,
                message,
            )
            return PluralSelection(message, None, None)

        position = min(self._plural_rules.index(count, locale), len(positional) - 1)
        index, alternative = positional[position]
        return PluralSelection(alternative.text, RuleKind.POSITIONAL, index)

    def choose(self, message: str, count: int | float | Decimal, locale: str) -> str:
        return self.select(message, count, locale).text

    def format(
        self,
        message: str,
        count: int | float | Decimal,
        locale: str,
        parameters: Mapping[str, object] | None = None,
    ) -> str:
        """Select the alternative for count and substitute placeholders.

        ``%count%`` is replaced with count unless parameters supply their
        own ``%count%`` value, which takes precedence.
        """
        return self.render(self.select(message, count, locale), count, parameters)

    @staticmethod
    def render(
        selection: PluralSelection,
        count: int | float | Decimal,
        parameters: Mapping[str, object] | None = None,
    ) -> str:
        return substitute(selection.text, {COUNT_PLACEHOLDER: count, **(parameters or {})})
