"""ssh_bookmarker middleware components."""

from ssh_bookmarker.middleware.base import BookmarkerMiddleware
from ssh_bookmarker.middleware.errors import ErrorHandlingMiddleware
from ssh_bookmarker.middleware.logging import LoggingMiddleware

__all__ = [
    "BookmarkerMiddleware",
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
]
