"""Tests for error types and the error collection."""

from __future__ import annotations

import pytest

from fieldcheck.domain.errors import (
    EmptyInError,
    ErrorCode,
    ErrorKind,
    FieldCheckError,
    InvalidMaxError,
    InvalidMinMaxError,
    InvalidValidatorSyntaxError,
    MinMaxArityError,
    NotAStructError,
    RuleSyntaxError,
    StructuralError,
    UnexportedFieldError,
    ValidationError,
    ValidationErrors,
    WrongValueError,
)


class TestCauses:
    @pytest.mark.parametrize(
        ("cls", "message", "code", "kind"),
        [
            (
                NotAStructError,
                "wrong argument given, should be a struct",
                ErrorCode.NOT_STRUCT,
                ErrorKind.STRUCTURAL,
            ),
            (
                UnexportedFieldError,
                "validation for unexported field is not allowed",
                ErrorCode.UNEXPORTED_FIELD,
                ErrorKind.STRUCTURAL,
            ),
            (
                InvalidValidatorSyntaxError,
                "invalid validator syntax",
                ErrorCode.INVALID_SYNTAX,
                ErrorKind.SYNTAX,
            ),
            (EmptyInError, "'in' is empty", ErrorCode.EMPTY_IN, ErrorKind.SYNTAX),
            (InvalidMaxError, "max tag is incorrect", ErrorCode.INVALID_MAX, ErrorKind.SYNTAX),
            (
                MinMaxArityError,
                "minmax tag is incorrect",
                ErrorCode.INVALID_MINMAX,
                ErrorKind.SYNTAX,
            ),
            (
                WrongValueError,
                "Variable value not validated",
                ErrorCode.WRONG_VALUE,
                ErrorKind.VALUE,
            ),
        ],
    )
    def test_message_code_kind(
        self, cls: type[FieldCheckError], message: str, code: ErrorCode, kind: ErrorKind
    ) -> None:
        err = cls()
        assert str(err) == message
        assert err.message == message
        assert err.code is code
        assert err.kind is kind

    def test_hierarchy(self) -> None:
        assert issubclass(NotAStructError, StructuralError)
        assert issubclass(MinMaxArityError, InvalidMinMaxError)
        assert issubclass(InvalidMinMaxError, RuleSyntaxError)
        assert issubclass(WrongValueError, FieldCheckError)

    def test_value_equality(self) -> None:
        assert WrongValueError() == WrongValueError()
        assert WrongValueError() != EmptyInError()
        assert InvalidMinMaxError() != MinMaxArityError()


class TestValidationErrors:
    def _errors(self) -> ValidationErrors:
        return ValidationErrors(
            [
                ValidationError(field="a", cause=WrongValueError()),
                ValidationError(field="b", cause=EmptyInError()),
            ]
        )

    def test_is_sequence(self) -> None:
        errs = self._errors()
        assert len(errs) == 2
        assert errs[0].field == "a"
        assert [e.code for e in errs] == [ErrorCode.WRONG_VALUE, ErrorCode.EMPTY_IN]
        assert errs.causes == [WrongValueError(), EmptyInError()]

    def test_rendering_joins_messages(self) -> None:
        assert str(self._errors()) == "Variable value not validated, 'in' is empty"

    def test_equality(self) -> None:
        assert self._errors() == self._errors()

    def test_is_raisable(self) -> None:
        with pytest.raises(ValidationErrors) as exc_info:
            raise self._errors()
        assert len(exc_info.value) == 2

    def test_entry_is_frozen(self) -> None:
        entry = ValidationError(field="a", cause=WrongValueError())
        with pytest.raises(AttributeError):
            entry.field = "b"  # type: ignore[misc]
        assert str(entry) == "Variable value not validated"
        assert entry.kind is ErrorKind.VALUE
