"""API configuration models.

This module contains the configuration model for the TVDB v4 API.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from tvdb.shared.constants import TVDBConfig


class TVDBSettings(BaseModel):
    """TVDB API configuration.

    Security: api_key and pin are masked in __repr__ to prevent accidental
    exposure in logs.
    """

    api_key: str = Field(
        default="",
        repr=False,
        description="TVDB API key (required for API access)",
    )
    pin: str | None = Field(
        default=None,
        repr=False,
        description="Subscriber PIN sent with the login request",
    )
    base_url: str = Field(
        default=TVDBConfig.BASE_URL,
        description="API root all routes are resolved against",
    )
    timeout: float = Field(
        default=TVDBConfig.REQUEST_TIMEOUT,
        gt=0,
        description="Request timeout in seconds",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Verify the server's TLS certificate",
    )
    auto_relogin: bool = Field(
        default=True,
        description="Re-authentication flag kept on the session",
    )
    user_agent: str = Field(
        default=TVDBConfig.USER_AGENT,
        description="User-Agent header sent with every request",
    )

    def __repr__(self) -> str:
        masked_key = "****" if self.api_key else "[empty]"
        return (
            f"TVDBSettings("
            f"api_key={masked_key}, "
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}, "
            f"auto_relogin={self.auto_relogin})"
        )


class APISettings(BaseModel):
    """API configuration container."""

    tvdb: TVDBSettings = Field(
        default_factory=TVDBSettings,
        description="TVDB API configuration",
    )


__all__ = [
    "APISettings",
    "TVDBSettings",
]
