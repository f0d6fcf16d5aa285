"""MCP resources for ssh_bookmarker."""

from ssh_bookmarker.resources.hosts import list_hosts_resource

__all__ = ["list_hosts_resource"]
