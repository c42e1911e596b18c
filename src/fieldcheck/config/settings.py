"""Validator settings — init kwargs and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the caller
  2. Env vars     — ``FIELDCHECK_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from fieldcheck.domain.introspect import DEFAULT_TAG_KEY


class FieldCheckSettings(BaseSettings):
    """Settings shared by every :class:`~fieldcheck.services.validate.Validator`.

    Attributes:
        tag_key: Metadata key holding a field's rule annotation.
        abort_on_malformed_range: When True, a ``minmax`` argument without
            exactly two parts ends the call with that single error.  When
            False it is recorded like any other syntax error.
        verbose: Enable DEBUG-level logging for the ``fieldcheck`` logger.
        log_json: Render log lines as JSON.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FIELDCHECK_",
    }

    tag_key: str = Field(default=DEFAULT_TAG_KEY, min_length=1)
    abort_on_malformed_range: bool = True
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """No dotenv or secrets files; init kwargs beat env vars."""
        return (init_settings, env_settings)
