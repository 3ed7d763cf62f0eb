"""Services: request dispatch, authentication, normalization and the API facade."""

from .request_manager import RequestManager
from .session import TVDBSession
from .tvdb_client import TVDB, TVDBClient

__all__ = [
    "TVDB",
    "RequestManager",
    "TVDBClient",
    "TVDBSession",
]
