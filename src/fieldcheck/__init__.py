"""fieldcheck — declarative field validation for dataclasses and pydantic models."""

from fieldcheck.config.settings import FieldCheckSettings
from fieldcheck.domain.errors import (
    EmptyInError,
    ErrorCode,
    ErrorKind,
    FieldCheckError,
    InvalidMaxError,
    InvalidMinError,
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
from fieldcheck.domain.introspect import FieldDescriptor, rule_field, rule_model_field
from fieldcheck.services.result import ErrorDetail, ValidationReport
from fieldcheck.services.validate import Validator, assert_valid, validate

__all__ = [
    "EmptyInError",
    "ErrorCode",
    "ErrorDetail",
    "ErrorKind",
    "FieldCheckError",
    "FieldCheckSettings",
    "FieldDescriptor",
    "InvalidMaxError",
    "InvalidMinError",
    "InvalidMinMaxError",
    "InvalidValidatorSyntaxError",
    "MinMaxArityError",
    "NotAStructError",
    "RuleSyntaxError",
    "StructuralError",
    "UnexportedFieldError",
    "ValidationError",
    "ValidationErrors",
    "ValidationReport",
    "Validator",
    "WrongValueError",
    "assert_valid",
    "rule_field",
    "rule_model_field",
    "validate",
]
