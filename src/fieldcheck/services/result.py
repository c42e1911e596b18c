"""ValidationReport and ErrorDetail — serialisable view of a validation call.

``validate()`` hands back exception values; consumers that want JSON, or
that prefer a flat record over an exception hierarchy, ask for a report.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from fieldcheck.domain.errors import (
    MESSAGE_DELIMITER,
    ErrorCode,
    ErrorKind,
    FieldCheckError,
    ValidationErrors,
)


class ErrorDetail(BaseModel):
    """One failure within a ValidationReport."""

    model_config = {"frozen": True}

    field: str | None = None
    code: ErrorCode
    kind: ErrorKind
    message: str


class ValidationReport(BaseModel):
    """Outcome of validating one record.

    Attributes:
        ok: Whether the record passed every rule.
        record: Type name of the validated value.
        errors: Failures in field declaration order.  A non-record input
            yields a single entry with ``field=None``.
    """

    model_config = {"frozen": True}

    ok: bool
    record: str = ""
    errors: list[ErrorDetail] = Field(default_factory=list)

    @property
    def message(self) -> str:
        return MESSAGE_DELIMITER.join(e.message for e in self.errors)

    @classmethod
    def from_error(cls, error: FieldCheckError | None, record: str = "") -> ValidationReport:
        """Build a report from the value ``validate()`` returned."""
        if error is None:
            return cls(ok=True, record=record)
        if isinstance(error, ValidationErrors):
            details = [
                ErrorDetail(field=e.field, code=e.code, kind=e.kind, message=str(e))
                for e in error
            ]
        else:
            details = [ErrorDetail(code=error.code, kind=error.kind, message=str(error))]
        return cls(ok=False, record=record, errors=details)
