"""Configuration models."""

from .api_settings import APISettings, TVDBSettings
from .app_settings import LoggingSettings
from .settings import Settings

__all__ = [
    "APISettings",
    "LoggingSettings",
    "Settings",
    "TVDBSettings",
]
