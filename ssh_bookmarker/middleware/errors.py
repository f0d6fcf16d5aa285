"""Error logging middleware for MCP requests."""

import logging
from collections import Counter
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from ssh_bookmarker.errors import BookmarkerError
from ssh_bookmarker.middleware.base import BookmarkerMiddleware


class ErrorHandlingMiddleware(BookmarkerMiddleware):
    """Logs failed requests and re-raises them.

    Bookmarker errors (bad condition specs, unwritable bookmark names) are
    user input problems and log at WARNING with just the message. Anything
    else logs at ERROR, with the traceback when ``include_traceback`` is set.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
    ) -> None:
        """Initialize error middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Attach tracebacks to unexpected errors.
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback
        self._failures: Counter[tuple[str, str]] = Counter()

    def get_error_stats(self) -> dict[str, int]:
        """Failure counts by exception type."""
        stats: Counter[str] = Counter()
        for (_, error_type), count in self._failures.items():
            stats[error_type] += count
        return dict(stats)

    def get_method_stats(self) -> dict[str, int]:
        """Failure counts by MCP method (``tools/call``, ``resources/read``)."""
        stats: Counter[str] = Counter()
        for (method, _), count in self._failures.items():
            stats[method] += count
        return dict(stats)

    def reset_stats(self) -> None:
        self._failures.clear()

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        try:
            return await call_next(context)
        except BookmarkerError as e:
            self._failures[(context.method, type(e).__name__)] += 1
            self.logger.warning("Rejected %s: %s", context.method, e)
            raise
        except Exception as e:
            self._failures[(context.method, type(e).__name__)] += 1
            self.logger.error(
                "Error in %s: %s: %s",
                context.method,
                type(e).__name__,
                e,
                exc_info=self.include_traceback,
            )
            raise
