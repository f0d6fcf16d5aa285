"""ssh_bookmarker FastMCP server.

Thin wrapper wiring the MCP server to the search tool and hosts resource.
All discovery logic lives in services/.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from ssh_bookmarker.config import Config, Settings
from ssh_bookmarker.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from ssh_bookmarker.resources import list_hosts_resource
from ssh_bookmarker.services.discovery import HostDiscovery
from ssh_bookmarker.services.state import get_config, set_config
from ssh_bookmarker.tools import search_hosts

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Log the discovered host sources at startup.

    Args:
        server: The FastMCP server instance

    Yields:
        Dict with the number of endpoints discovered at startup
    """
    logger.info("ssh_bookmarker server starting up")
    config = get_config()
    index = HostDiscovery.from_config(config).discover()
    logger.info(
        "Discovered %d endpoint(s) from %d config and %d known_hosts file(s)",
        len(index),
        len(config.config_files),
        len(config.known_hosts_files),
    )
    try:
        yield {"endpoints": len(index)}
    finally:
        logger.info("ssh_bookmarker server shutdown complete")


def configure_middleware(server: FastMCP, settings: Settings | None = None) -> None:
    """Configure middleware stack for the server.

    Args:
        server: The FastMCP server to configure.
        settings: Middleware settings (default: from environment). See
            SSH_BOOKMARKER_SLOW_THRESHOLD_MS and SSH_BOOKMARKER_INCLUDE_TRACEBACK.
    """
    settings = settings or Settings.from_env()

    # First added = innermost
    server.add_middleware(ErrorHandlingMiddleware(include_traceback=settings.include_traceback))
    server.add_middleware(LoggingMiddleware(slow_threshold_ms=settings.slow_threshold_ms))


def create_server() -> FastMCP:
    """Create and configure the MCP server.

    Returns:
        Configured FastMCP server instance
    """
    server = FastMCP("ssh_bookmarker", lifespan=app_lifespan)

    configure_middleware(server)

    server.tool()(search_hosts)
    server.resource("hosts://list")(list_hosts_resource)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server


# Default server instance
mcp = create_server()


def run_server(config: Config | None = None) -> None:
    """Run the MCP server with the configured transport.

    Args:
        config: Config to serve (default: from environment)
    """
    if config is not None:
        set_config(config)
    config = get_config()

    if config.transport == "stdio":
        logger.info("Starting ssh_bookmarker server (transport=stdio)")
        mcp.run(transport="stdio")
    else:
        logger.info(
            "Starting ssh_bookmarker server (transport=http, host=%s, port=%d)",
            config.http_host,
            config.http_port,
        )
        mcp.run(
            transport="http",
            host=config.http_host,
            port=config.http_port,
        )
