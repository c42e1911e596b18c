"""Error taxonomy for record validation.

Three kinds of cause, each a concrete exception class:

- Structural: the input is not a record, or an internal field carries a rule.
- Syntax: a rule's argument does not parse for that rule's grammar.
- Value: the field's current value fails the rule's predicate.

Causes are wrapped per field in :class:`ValidationError` and collected, in
field declaration order, into :class:`ValidationErrors`.  The collection is
itself an exception so callers may raise it, but the engine never does.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, overload

MESSAGE_DELIMITER = ", "


class ErrorKind(StrEnum):
    """Broad category of a validation failure."""

    STRUCTURAL = "structural"
    SYNTAX = "syntax"
    VALUE = "value"


class ErrorCode(StrEnum):
    """Stable machine-readable identifiers, one per cause class."""

    NOT_STRUCT = "not_struct"
    UNEXPORTED_FIELD = "unexported_field"
    INVALID_SYNTAX = "invalid_syntax"
    EMPTY_IN = "empty_in"
    INVALID_MIN = "invalid_min"
    INVALID_MAX = "invalid_max"
    INVALID_MINMAX = "invalid_minmax"
    WRONG_VALUE = "wrong_value"


# ---------------------------------------------------------------------------
# Causes
# ---------------------------------------------------------------------------


class FieldCheckError(Exception):
    """Base class for every error produced by fieldcheck."""

    code: ClassVar[ErrorCode]
    kind: ClassVar[ErrorKind]
    default_message: ClassVar[str] = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args  # type: ignore[union-attr]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class StructuralError(FieldCheckError):
    kind = ErrorKind.STRUCTURAL


class NotAStructError(StructuralError):
    code = ErrorCode.NOT_STRUCT
    default_message = "wrong argument given, should be a struct"


class UnexportedFieldError(StructuralError):
    code = ErrorCode.UNEXPORTED_FIELD
    default_message = "validation for unexported field is not allowed"


class RuleSyntaxError(FieldCheckError):
    """A rule annotation whose argument does not match the rule grammar."""

    kind = ErrorKind.SYNTAX


class InvalidValidatorSyntaxError(RuleSyntaxError):
    code = ErrorCode.INVALID_SYNTAX
    default_message = "invalid validator syntax"


class EmptyInError(RuleSyntaxError):
    code = ErrorCode.EMPTY_IN
    default_message = "'in' is empty"


class InvalidMinError(RuleSyntaxError):
    code = ErrorCode.INVALID_MIN
    default_message = "min tag is incorrect"


class InvalidMaxError(RuleSyntaxError):
    code = ErrorCode.INVALID_MAX
    default_message = "max tag is incorrect"


class InvalidMinMaxError(RuleSyntaxError):
    code = ErrorCode.INVALID_MINMAX
    default_message = "minmax tag is incorrect"


class MinMaxArityError(InvalidMinMaxError):
    """``minmax`` argument without exactly two comma-separated parts.

    Unlike every other syntax error this one ends the whole validation call
    unless the validator is configured otherwise.
    """


class WrongValueError(FieldCheckError):
    code = ErrorCode.WRONG_VALUE
    kind = ErrorKind.VALUE
    default_message = "Variable value not validated"


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ValidationError:
    """One failure cause attributed to the field that produced it."""

    field: str
    cause: FieldCheckError

    @property
    def code(self) -> ErrorCode:
        return self.cause.code

    @property
    def kind(self) -> ErrorKind:
        return self.cause.kind

    def __str__(self) -> str:
        return str(self.cause)


class ValidationErrors(FieldCheckError, Sequence[ValidationError]):
    """Ordered, immutable collection of per-field validation errors.

    Order matches field declaration order.  ``str()`` joins every cause
    message with ``", "``; individual entries stay reachable by index or
    iteration.
    """

    def __init__(self, errors: Sequence[ValidationError]) -> None:
        self._errors: tuple[ValidationError, ...] = tuple(errors)
        super().__init__(MESSAGE_DELIMITER.join(str(e) for e in self._errors))

    @overload
    def __getitem__(self, index: int) -> ValidationError: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[ValidationError, ...]: ...

    def __getitem__(self, index: int | slice) -> ValidationError | tuple[ValidationError, ...]:
        return self._errors[index]

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationErrors):
            return NotImplemented
        return self._errors == other._errors

    def __hash__(self) -> int:
        return hash(self._errors)

    def __repr__(self) -> str:
        return f"ValidationErrors({list(self._errors)!r})"

    @property
    def causes(self) -> list[FieldCheckError]:
        return [e.cause for e in self._errors]

