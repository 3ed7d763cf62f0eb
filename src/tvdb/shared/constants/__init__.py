"""
TVDB Constants Module

This module provides centralized constants for the TVDB client.
All magic values and configuration constants are defined here to ensure
consistency across the codebase.
"""

from .api import Application, TVDBConfig, TVDBRoutes
from .http_codes import ContentTypes, HTTPHeaders, HTTPStatusCodes
from .logging import LogConfig

__all__ = [
    "Application",
    "ContentTypes",
    "HTTPHeaders",
    "HTTPStatusCodes",
    "LogConfig",
    "TVDBConfig",
    "TVDBRoutes",
]
