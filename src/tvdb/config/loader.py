"""Settings loader and singleton manager.

This module handles:
- Environment variable loading from .env files
- Configuration file loading from TOML
- Thread-safe singleton pattern for the Settings instance
- Applying the logging settings to the package logger
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

import toml
from dotenv import load_dotenv
from pydantic import ValidationError

from tvdb.config.models.settings import Settings
from tvdb.shared.constants import LogConfig
from tvdb.shared.errors import (
    ApplicationError,
    ErrorCode,
    ErrorContext,
    SecurityError,
    create_config_error,
)
from tvdb.shared.logging import setup_structured_logger

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATHS: tuple[Path, ...] = (
    Path("config/tvdb.toml"),
    Path("tvdb.toml"),
    Path.home() / ".config" / "tvdb" / "config.toml",
)


def _load_env_file(env_file: str | Path = ".env") -> None:
    """Load a .env file into the process environment, if it exists.

    Variables already set in the environment take precedence.
    """
    env_path = Path(env_file)
    if env_path.exists():
        load_dotenv(env_path, override=False)
        logger.debug("Loaded environment from %s", env_path)


def _load_toml(config_path: str | Path) -> Settings:
    try:
        return Settings.from_toml_file(config_path)
    except FileNotFoundError as e:
        raise create_config_error(
            str(e),
            config_key="config_path",
            operation="load_settings",
            original_error=e,
        ) from e
    except (toml.TomlDecodeError, ValidationError) as e:
        raise ApplicationError(
            ErrorCode.INVALID_CONFIG,
            f"Invalid configuration file {config_path}: {e}",
            ErrorContext(
                operation="load_settings",
                additional_data={"config_path": str(config_path)},
            ),
            e,
        ) from e


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from a TOML configuration file or the environment.

    Args:
        config_path: Optional path to a TOML file. If None, the default
            locations are tried before falling back to environment variables.

    Returns:
        Settings instance loaded from the first available source

    Raises:
        ApplicationError: If an explicitly given config file does not exist,
            or a config file cannot be parsed or validated
    """
    _load_env_file()

    if config_path is not None:
        return _load_toml(config_path)

    for default_path in DEFAULT_CONFIG_PATHS:
        if default_path.exists():
            logger.debug("Loading settings from %s", default_path)
            return _load_toml(default_path)

    return Settings()


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Configure the package logger from the logging settings."""
    log_settings = (settings or get_config()).logging
    return setup_structured_logger(
        LogConfig.LOGGER_NAME,
        log_settings.level,
        log_settings.file,
        use_rich_console=log_settings.use_rich_console,
    )


class SettingsLoader:
    """Thread-safe singleton manager for Settings.

    Uses double-checked locking so the common path takes no lock.
    """

    _instance: Settings | None = None
    _lock: threading.RLock = threading.RLock()

    @classmethod
    def get_config(cls) -> Settings:
        """Get the global settings instance, loading it if necessary."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = load_settings()
        return cls._instance

    @classmethod
    def reload_config(cls, config_path: str | Path | None = None) -> Settings:
        """Reload the global settings instance."""
        with cls._lock:
            cls._instance = load_settings(config_path)
        return cls._instance


def get_config() -> Settings:
    """Get the global settings instance (thread-safe)."""
    return SettingsLoader.get_config()


def reload_config(config_path: str | Path | None = None) -> Settings:
    """Reload the global settings instance from its sources."""
    return SettingsLoader.reload_config(config_path)


def require_api_key(settings: Settings) -> str:
    """Return the configured API key.

    Raises:
        SecurityError: If no API key is configured
    """
    api_key = settings.api.tvdb.api_key.strip()
    if not api_key:
        raise SecurityError(
            ErrorCode.MISSING_CONFIG,
            "TVDB API key not configured. Set TVDB_API__TVDB__API_KEY or api.tvdb.api_key.",
            ErrorContext(
                operation="require_api_key",
                additional_data={"config_key": "api.tvdb.api_key"},
            ),
        )
    return api_key


__all__ = [
    "DEFAULT_CONFIG_PATHS",
    "SettingsLoader",
    "get_config",
    "load_settings",
    "reload_config",
    "require_api_key",
    "setup_logging",
]
