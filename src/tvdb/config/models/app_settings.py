"""Logging configuration model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tvdb.shared.constants import LogConfig


class LoggingSettings(BaseModel):
    """Logging configuration.

    Controls the level, optional JSON log file, and whether console output
    goes through rich or is written as JSON lines.
    """

    level: str = Field(default=LogConfig.DEFAULT_LEVEL, description="Logging level")
    file: str | None = Field(default=None, description="Optional JSON log file path")
    use_rich_console: bool = Field(
        default=True,
        description="Pretty console output via rich (JSON lines otherwise)",
    )


__all__ = ["LoggingSettings"]
