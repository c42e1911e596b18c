"""Shared pytest fixtures for fieldcheck tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator

import pytest

from fieldcheck.config.settings import FieldCheckSettings
from fieldcheck.services.validate import Validator


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ambient FIELDCHECK_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("FIELDCHECK_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handlers, level, and propagation set on the package logger."""
    pkg = logging.getLogger("fieldcheck")
    handlers, level, propagate = pkg.handlers[:], pkg.level, pkg.propagate
    yield
    pkg.handlers = handlers
    pkg.setLevel(level)
    pkg.propagate = propagate


@pytest.fixture
def validator() -> Validator:
    """Validator with default settings."""
    return Validator(FieldCheckSettings())


@pytest.fixture
def lenient_validator() -> Validator:
    """Validator that records a malformed minmax instead of aborting."""
    return Validator(FieldCheckSettings(abort_on_malformed_range=False))
