"""Configuration package for the TVDB client."""

from tvdb.config.loader import (
    SettingsLoader,
    get_config,
    load_settings,
    reload_config,
    require_api_key,
    setup_logging,
)
from tvdb.config.models import APISettings, LoggingSettings, Settings, TVDBSettings

__all__ = [
    "APISettings",
    "LoggingSettings",
    "Settings",
    "SettingsLoader",
    "TVDBSettings",
    "get_config",
    "load_settings",
    "reload_config",
    "require_api_key",
    "setup_logging",
]
