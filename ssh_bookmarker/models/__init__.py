"""Data models for ssh_bookmarker."""

from ssh_bookmarker.models.endpoint import (
    Bookmark,
    Endpoint,
    HostBlock,
    KnownHostsEntry,
    RankedEntry,
)

__all__ = [
    "Bookmark",
    "Endpoint",
    "HostBlock",
    "KnownHostsEntry",
    "RankedEntry",
]
