"""Typed async client for TheTVDB v4 API."""

from tvdb.services import TVDB, RequestManager, TVDBClient, TVDBSession
from tvdb.shared.constants import Application
from tvdb.shared.errors import (
    DataProcessingError,
    DecodeError,
    ErrorCode,
    RequestTimeoutError,
    StatusError,
    TransportError,
    TVDBError,
)

__version__ = Application.VERSION

__all__ = [
    "TVDB",
    "DataProcessingError",
    "DecodeError",
    "ErrorCode",
    "RequestManager",
    "RequestTimeoutError",
    "StatusError",
    "TVDBClient",
    "TVDBError",
    "TVDBSession",
    "TransportError",
    "__version__",
]
