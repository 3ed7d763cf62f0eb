"""TVDB Error Handling Module

This module defines the error handling system for the TVDB client, providing
structured error classes with context information.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Proper Exception Chaining: Original exceptions are preserved
- One taxonomy for every failure the transport can produce (status,
  transport, timeout, decode)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Union

from tvdb.shared.constants import HTTPStatusCodes

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]


class ErrorCode(str, Enum):
    """Error codes for the TVDB client.

    This enum serves as the single source of truth for all error codes
    used throughout the package.
    """

    # Network and API Errors
    NETWORK_ERROR = "NETWORK_ERROR"
    API_AUTHENTICATION_FAILED = "API_AUTHENTICATION_FAILED"
    API_NOT_FOUND = "API_NOT_FOUND"
    API_REQUEST_FAILED = "API_REQUEST_FAILED"
    API_TIMEOUT = "API_TIMEOUT"
    API_SERVER_ERROR = "API_SERVER_ERROR"
    API_INVALID_RESPONSE = "API_INVALID_RESPONSE"

    # Data Processing Errors
    DATA_PROCESSING_ERROR = "DATA_PROCESSING_ERROR"
    INVALID_DATE = "INVALID_DATE"
    INVALID_NUMBER = "INVALID_NUMBER"

    # Configuration Errors
    CONFIG_ERROR = "CONFIG_ERROR"
    MISSING_CONFIG = "MISSING_CONFIG"
    INVALID_CONFIG = "INVALID_CONFIG"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Converts Path, Enum, Decimal to primitive types.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        elif isinstance(val, Decimal):
            coerced[key] = float(val)
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum, Decimal are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are allowed in
    additional_data to ensure safe serialization and to keep credentials
    and payloads out of log records.

    Attributes:
        operation: Optional operation name that caused the error
        additional_data: Optional dict with primitive values only
    """

    operation: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self) -> dict[str, Any]:
        """Export context as dict; additional_data is never None."""
        data: dict[str, Any] = {}
        if self.operation is not None:
            data["operation"] = self.operation
        data["additional_data"] = dict(self.additional_data or {})
        return data


class TVDBError(Exception):
    """Base exception class for all TVDB client errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        """Initialize TVDBError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error

        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(TVDBError):
    """Domain-specific errors.

    Examples:
    - A response body that is not a JSON envelope
    - A record field that cannot be normalized
    """


class InfrastructureError(TVDBError):
    """Infrastructure-related errors.

    These errors occur when talking to the remote API.

    Examples:
    - Non-200 responses
    - Connection failures
    - Request timeouts
    """


class ApplicationError(TVDBError):
    """Application-level errors, typically configuration problems."""


class SecurityError(TVDBError):
    """Missing or invalid credentials in the configuration."""


class DataProcessingError(TVDBError):
    """A raw record field could not be converted to its parsed type."""


def _status_error_code(status_code: int | None) -> ErrorCode:
    if status_code == HTTPStatusCodes.UNAUTHORIZED:
        return ErrorCode.API_AUTHENTICATION_FAILED
    if status_code == HTTPStatusCodes.NOT_FOUND:
        return ErrorCode.API_NOT_FOUND
    if status_code is not None and HTTPStatusCodes.is_server_error(status_code):
        return ErrorCode.API_SERVER_ERROR
    return ErrorCode.API_REQUEST_FAILED


class StatusError(InfrastructureError):
    """A response with a status code other than 200.

    The classification is purely numeric: the error reports whatever status
    code it was built with, independent of the response body.

    Attributes:
        response: The decoded error envelope, or the raw body text when it
            was not valid JSON.
        status_code: The HTTP status code of the response.
    """

    def __init__(
        self,
        response: Any = None,
        status_code: int | None = None,
        message: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        self.response = response
        self.status_code = status_code
        super().__init__(
            _status_error_code(status_code),
            message or f"Request failed with status {status_code}",
            context,
        )

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["status_code"] = self.status_code
        return data


class TransportError(InfrastructureError):
    """A connection-level failure; the underlying error is in original_error."""

    def __init__(
        self,
        original_error: BaseException,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            ErrorCode.NETWORK_ERROR,
            f"Transport failure: {original_error}",
            context,
            original_error,
        )


class RequestTimeoutError(InfrastructureError):
    """The configured request timeout elapsed before a response arrived."""

    def __init__(
        self,
        timeout: float | None,
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        self.timeout = timeout
        super().__init__(
            ErrorCode.API_TIMEOUT,
            f"Request timed out after {timeout}s",
            context,
            original_error,
        )


class DecodeError(DomainError):
    """A successful response whose body is not valid JSON."""

    def __init__(
        self,
        body: str,
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        self.body = body
        super().__init__(
            ErrorCode.API_INVALID_RESPONSE,
            "Response body is not a valid JSON envelope",
            context,
            original_error,
        )


def create_data_processing_error(
    message: str,
    field: str | None = None,
    code: ErrorCode = ErrorCode.DATA_PROCESSING_ERROR,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> DataProcessingError:
    """Create a data processing error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"field": field} if field else None
    )
    context = ErrorContext(
        operation=operation,
        additional_data=additional_data,
    )
    return DataProcessingError(
        code,
        message,
        context,
        original_error,
    )


def create_config_error(
    message: str,
    config_key: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> ApplicationError:
    """Create a configuration error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"config_key": config_key} if config_key else None
    )
    context = ErrorContext(
        operation=operation,
        additional_data=additional_data,
    )
    return ApplicationError(
        ErrorCode.CONFIG_ERROR,
        message,
        context,
        original_error,
    )


__all__ = [
    "ApplicationError",
    "DataProcessingError",
    "DecodeError",
    "DomainError",
    "ErrorCode",
    "ErrorContext",
    "InfrastructureError",
    "PrimitiveContextValue",
    "RequestTimeoutError",
    "SecurityError",
    "StatusError",
    "TVDBError",
    "TransportError",
    "create_config_error",
    "create_data_processing_error",
]
