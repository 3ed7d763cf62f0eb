"""HTTP Status Code Constants.

This module contains HTTP status code constants for clear and
type-safe handling of API responses.
"""


class HTTPStatusCodes:
    """HTTP status code constants."""

    OK = 200

    UNAUTHORIZED = 401
    NOT_FOUND = 404

    @staticmethod
    def is_server_error(code: int) -> bool:
        """Check if status code indicates server error (5xx)."""
        return 500 <= code < 600


class HTTPHeaders:
    """Common HTTP header names."""

    CONTENT_TYPE = "Content-Type"
    CONTENT_LENGTH = "Content-Length"
    ACCEPT = "Accept"
    AUTHORIZATION = "Authorization"
    USER_AGENT = "User-Agent"


class ContentTypes:
    """Common content type values."""

    JSON = "application/json"
