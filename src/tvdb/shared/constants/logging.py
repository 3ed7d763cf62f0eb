"""
Logging Configuration Constants

This module contains constants related to logging configuration.
"""


class LogConfig:
    """Log configuration constants."""

    LOGGER_NAME = "tvdb"
    DEFAULT_LEVEL = "INFO"
    DEFAULT_ENCODING = "utf-8"
    RICH_TIME_FORMAT = "[%H:%M:%S]"
