"""Unified settings — CLI flags and env vars in one frozen object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``OPTICA_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class OpticaSettings(BaseSettings):
    """Settings for the optica CLI, stored on the Click context."""

    model_config = {
        "frozen": True,
        "env_prefix": "OPTICA_",
    }

    json_output: bool = False
    quiet: bool = False
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
        """Only CLI flags and env vars; no dotenv or secrets files."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> OpticaSettings:
        """Construct settings from a CLI invocation.

        Flags left at their Click default (False) are dropped so that an
        ``OPTICA_*`` env var can still switch them on.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        return cls(**overrides)
