"""MCP tools for ssh_bookmarker."""

from ssh_bookmarker.tools.search import search_hosts

__all__ = ["search_hosts"]
