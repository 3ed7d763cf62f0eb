"""TVDB client settings model.

Main Settings class that consolidates all configuration domains.
"""

from __future__ import annotations

from pathlib import Path

import toml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tvdb.config.models.api_settings import APISettings
from tvdb.config.models.app_settings import LoggingSettings


class Settings(BaseSettings):
    """Unified configuration for the client.

    Values come from keyword arguments, then ``TVDB_``-prefixed environment
    variables with ``__`` as the nested delimiter, e.g.
    ``TVDB_API__TVDB__API_KEY`` or ``TVDB_LOGGING__LEVEL``.
    """

    model_config = SettingsConfigDict(
        env_prefix="TVDB_",
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    api: APISettings = Field(default_factory=APISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from a TOML file; keys it leaves out fall back to the environment."""
        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = toml.load(file_path)
        return cls(**raw_config)

    def to_toml_file(self, file_path: str | Path) -> None:
        """Save settings to TOML file.

        API keys ARE written: a config file without them is useless. Logs
        mask them via the settings' __repr__.
        """
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self.model_dump(exclude_none=True)

        with open(file_path, "w", encoding="utf-8") as f:
            toml.dump(config_dict, f)


__all__ = ["Settings"]
