"""Rule grammar, parsing, and constraint predicates.

Annotation grammar::

    annotation := rule-name ":" argument
    rule-name  := "len" | "in" | "min" | "max" | "minmax"
    argument   := integer                  ; len, min, max
                | literal ("," literal)*   ; in
                | integer "," integer      ; minmax

Only the first ``:`` separates name from argument, so ``min:0:max:10``
is the ``min`` rule with the (unparseable) argument ``0:max:10``.

Parsing yields one of a closed set of frozen rule variants; :func:`check`
dispatches over them exhaustively and never raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar

from fieldcheck.domain.errors import (
    EmptyInError,
    InvalidMaxError,
    InvalidMinError,
    InvalidMinMaxError,
    InvalidValidatorSyntaxError,
    MinMaxArityError,
    RuleSyntaxError,
)

SEPARATOR = ":"
LIST_SEPARATOR = ","

# Optional sign, then ASCII digits only (no whitespace, underscores, or
# non-ASCII digits, all of which int() would otherwise accept).
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class RuleName(StrEnum):
    LEN = "len"
    IN = "in"
    MIN = "min"
    MAX = "max"
    MINMAX = "minmax"


@dataclass(frozen=True)
class LenRule:
    name: ClassVar[RuleName] = RuleName.LEN
    length: int


@dataclass(frozen=True)
class InRule:
    name: ClassVar[RuleName] = RuleName.IN
    options: tuple[str, ...]


@dataclass(frozen=True)
class MinRule:
    name: ClassVar[RuleName] = RuleName.MIN
    bound: int


@dataclass(frozen=True)
class MaxRule:
    name: ClassVar[RuleName] = RuleName.MAX
    bound: int


@dataclass(frozen=True)
class MinMaxRule:
    name: ClassVar[RuleName] = RuleName.MINMAX
    low: int
    high: int


Rule = LenRule | InRule | MinRule | MaxRule | MinMaxRule


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_int(text: str) -> int:
    """Parse a base-10 integer with an optional leading sign.

    Examples:
        >>> parse_int("-12")
        -12
        >>> parse_int("+7")
        7

    Raises:
        ValueError: On any other character, including surrounding spaces.
    """
    if not _INT_PATTERN.fullmatch(text):
        msg = f"invalid integer literal: {text!r}"
        raise ValueError(msg)
    return int(text)


def _parse_bound(argument: str, error: type[RuleSyntaxError]) -> int:
    try:
        return parse_int(argument)
    except ValueError as exc:
        raise error from exc


def split_annotation(annotation: str) -> tuple[str, str]:
    """Split *annotation* into ``(rule_name, argument)`` on the first ``:``.

    Raises:
        InvalidValidatorSyntaxError: If there is no separator.
    """
    name, sep, argument = annotation.partition(SEPARATOR)
    if not sep:
        raise InvalidValidatorSyntaxError
    return name, argument


def parse_rule(annotation: str) -> Rule:
    """Parse a field annotation into a typed rule.

    Raises:
        InvalidValidatorSyntaxError: Missing separator, unknown rule name,
            or a non-integer ``len`` argument.
        EmptyInError: ``in`` with an empty argument.
        InvalidMinError: Non-integer ``min`` argument.
        InvalidMaxError: Non-integer ``max`` argument.
        MinMaxArityError: ``minmax`` argument without exactly two parts.
        InvalidMinMaxError: ``minmax`` part that is not an integer.
    """
    name, argument = split_annotation(annotation)
    match name:
        case RuleName.LEN:
            return LenRule(length=_parse_bound(argument, InvalidValidatorSyntaxError))
        case RuleName.IN:
            if argument == "":
                raise EmptyInError
            return InRule(options=tuple(argument.split(LIST_SEPARATOR)))
        case RuleName.MIN:
            return MinRule(bound=_parse_bound(argument, InvalidMinError))
        case RuleName.MAX:
            return MaxRule(bound=_parse_bound(argument, InvalidMaxError))
        case RuleName.MINMAX:
            parts = argument.split(LIST_SEPARATOR)
            if len(parts) != 2:
                raise MinMaxArityError
            low, high = (_parse_bound(p, InvalidMinMaxError) for p in parts)
            return MinMaxRule(low=low, high=high)
        case _:
            raise InvalidValidatorSyntaxError


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _measure(value: Any) -> int | None:
    """Integers measure as themselves, text by length, anything else not at all."""
    if _is_int(value):
        return value
    if isinstance(value, str):
        return len(value)
    return None


def _contains(options: tuple[str, ...], value: Any) -> bool:
    if _is_int(value):
        # One unparseable option fails the whole check.
        try:
            return value in [parse_int(o) for o in options]
        except ValueError:
            return False
    if isinstance(value, str):
        return value in options
    return False


def check(rule: Rule, value: Any) -> bool:
    """Return whether *value* satisfies *rule*."""
    match rule:
        case LenRule(length=length):
            return isinstance(value, str) and len(value) == length
        case InRule(options=options):
            return _contains(options, value)
        case MinRule(bound=bound):
            size = _measure(value)
            return size is not None and size >= bound
        case MaxRule(bound=bound):
            size = _measure(value)
            return size is not None and size <= bound
        case MinMaxRule(low=low, high=high):
            size = _measure(value)
            return size is not None and low <= size <= high
    return False
