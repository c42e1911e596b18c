"""Tests for FieldCheckSettings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fieldcheck.config.settings import FieldCheckSettings


class TestDefaults:
    def test_all_defaults(self) -> None:
        settings = FieldCheckSettings()
        assert settings.tag_key == "validate"
        assert settings.abort_on_malformed_range is True
        assert settings.verbose is False
        assert settings.log_json is False

    def test_frozen(self) -> None:
        settings = FieldCheckSettings()
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]

    def test_empty_tag_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FieldCheckSettings(tag_key="")


class TestEnvVars:
    def test_env_overrides_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIELDCHECK_TAG_KEY", "check")
        monkeypatch.setenv("FIELDCHECK_VERBOSE", "true")
        settings = FieldCheckSettings()
        assert settings.tag_key == "check"
        assert settings.verbose is True

    def test_init_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIELDCHECK_ABORT_ON_MALFORMED_RANGE", "false")
        settings = FieldCheckSettings(abort_on_malformed_range=True)
        assert settings.abort_on_malformed_range is True

    def test_invalid_env_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIELDCHECK_LOG_JSON", "sometimes")
        with pytest.raises(ValidationError):
            FieldCheckSettings()
