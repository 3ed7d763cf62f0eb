"""Authentication state for the TVDB API.

A :class:`TVDBSession` owns the API key, the last PIN used to log in and
the current bearer token. Requests read :attr:`TVDBSession.token` when they
are dispatched, so a login completed while other requests are pending only
affects requests dispatched afterwards.
"""

from __future__ import annotations

import asyncio
import logging
import time

from tvdb.shared.constants import TVDBRoutes
from tvdb.shared.errors import DecodeError, ErrorContext, StatusError
from tvdb.shared.logging import (
    log_operation_error,
    log_operation_start,
    log_operation_success,
)

from .request_manager import RequestManager

logger = logging.getLogger(__name__)


class TVDBSession:
    """Holds credentials and the bearer token obtained from ``/login``.

    Args:
        api_key: The TVDB API key
        request_manager: Dispatcher used for the login call
        pin: Subscriber PIN used when login is called without one
        auto_relogin: Stored for callers; no request is retried automatically
    """

    def __init__(
        self,
        api_key: str,
        request_manager: RequestManager,
        *,
        pin: str | None = None,
        auto_relogin: bool = True,
    ) -> None:
        self._api_key = api_key
        self._pin = pin
        self._token: str | None = None
        self.auto_relogin = auto_relogin
        self.request_manager = request_manager
        self._login_lock = asyncio.Lock()

    def __repr__(self) -> str:
        return (
            f"TVDBSession(api_key=****, "
            f"authenticated={self.is_authenticated}, "
            f"auto_relogin={self.auto_relogin})"
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def pin(self) -> str | None:
        """The PIN passed to the most recent login attempt."""
        return self._pin

    @property
    def token(self) -> str | None:
        """The current bearer token, or None before the first login."""
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    async def login(self, pin: str | None = None) -> None:
        """Exchange the API key (and optional PIN) for a bearer token.

        The login request itself is sent without a token. On failure the
        error propagates and any previously obtained token is kept.

        Args:
            pin: Optional subscriber PIN

        Raises:
            StatusError: If the API rejects the credentials
            DecodeError: If the response carries no token
        """
        async with self._login_lock:
            self._pin = pin
            body: dict[str, str] = {"apikey": self._api_key}
            if pin:
                body["pin"] = pin

            log_operation_start(logger, "login", {"with_pin": bool(pin)})
            start_time = time.perf_counter()
            try:
                data = await self.request_manager.post(TVDBRoutes.LOGIN, body=body)
            except StatusError as e:
                log_operation_error(logger, e, operation="login")
                raise

            token = data.get("token") if isinstance(data, dict) else None
            if not token:
                raise DecodeError(
                    str(data),
                    ErrorContext(operation="login"),
                )

            self._token = token
            log_operation_success(
                logger,
                "login",
                (time.perf_counter() - start_time) * 1000,
                result_info={"with_pin": bool(pin)},
            )


__all__ = ["TVDBSession"]
