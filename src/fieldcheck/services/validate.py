"""Validator — checks every annotated field of a record against its rule.

Field-level problems are collected, never raised.  The call ends early in
exactly two cases:

- the input is not a record (single ``NotAStructError``, no fields visited);
- a ``minmax`` argument has the wrong number of parts, while
  ``abort_on_malformed_range`` is set (single ``MinMaxArityError``; errors
  from every other field are dropped).
"""

from __future__ import annotations

import logging
from typing import Any

from fieldcheck.config.settings import FieldCheckSettings
from fieldcheck.domain.errors import (
    FieldCheckError,
    MinMaxArityError,
    NotAStructError,
    RuleSyntaxError,
    UnexportedFieldError,
    ValidationError,
    ValidationErrors,
    WrongValueError,
)
from fieldcheck.domain.introspect import FieldDescriptor, describe, get_value, is_record
from fieldcheck.domain.rules import check, parse_rule
from fieldcheck.services.result import ValidationReport

logger = logging.getLogger(__name__)


class Validator:
    """Validates records using one immutable set of settings.

    Holds no per-call state, so one instance may be shared freely.

    Usage::

        validator = Validator(FieldCheckSettings(tag_key="check"))
        if (err := validator.validate(user)) is not None:
            print(err)
    """

    def __init__(self, settings: FieldCheckSettings | None = None) -> None:
        self._settings = settings if settings is not None else FieldCheckSettings()

    @property
    def settings(self) -> FieldCheckSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, record: Any) -> NotAStructError | ValidationErrors | None:
        """Return ``None`` if *record* passes, else the failure value.

        The failure value is ``NotAStructError`` for non-records and a
        :class:`ValidationErrors` otherwise.
        """
        record_type = type(record).__name__
        if not is_record(record):
            logger.debug("validate.rejected", extra={"record": record_type})
            return NotAStructError()

        errors: list[ValidationError] = []
        for descriptor in describe(record, tag_key=self._settings.tag_key):
            cause = self._check_field(record, descriptor)
            if cause is None:
                continue
            error = ValidationError(field=descriptor.name, cause=cause)
            logger.debug(
                "validate.field_error",
                extra={"record": record_type, "field": descriptor.name, "code": cause.code.value},
            )
            if isinstance(cause, MinMaxArityError) and self._settings.abort_on_malformed_range:
                logger.debug(
                    "validate.aborted", extra={"record": record_type, "field": descriptor.name}
                )
                return ValidationErrors([error])
            errors.append(error)

        logger.debug("validate.complete", extra={"record": record_type, "errors": len(errors)})
        if not errors:
            return None
        return ValidationErrors(errors)

    def assert_valid(self, record: Any) -> None:
        """Raise the failure value of :meth:`validate`, if any."""
        error = self.validate(record)
        if error is not None:
            raise error

    def report(self, record: Any) -> ValidationReport:
        """Validate *record* and return a serialisable report."""
        return ValidationReport.from_error(self.validate(record), record=type(record).__name__)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_field(self, record: Any, descriptor: FieldDescriptor) -> FieldCheckError | None:
        """Zero or one failure cause for a single field."""
        if not descriptor.annotation:
            return None
        if not descriptor.exported:
            return UnexportedFieldError()
        try:
            rule = parse_rule(descriptor.annotation)
        except RuleSyntaxError as exc:
            return exc.with_traceback(None)
        try:
            value = get_value(record, descriptor.name)
        except AttributeError:
            # Declared but never assigned (e.g. init=False with no default).
            return WrongValueError()
        if not check(rule, value):
            return WrongValueError()
        return None


def validate(
    record: Any, *, settings: FieldCheckSettings | None = None
) -> NotAStructError | ValidationErrors | None:
    """Validate *record* with *settings* (or the environment defaults)."""
    return Validator(settings).validate(record)


def assert_valid(record: Any, *, settings: FieldCheckSettings | None = None) -> None:
    """Like :func:`validate` but raises the failure value."""
    Validator(settings).assert_valid(record)
