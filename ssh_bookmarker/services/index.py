"""Deduplicating store of discovered bookmarks."""

from collections.abc import Iterator

from ssh_bookmarker.models import Bookmark, Endpoint


class HostIndex:
    """Set of bookmarks keyed by (host, scheme), in first-seen order.

    The first bookmark added for an endpoint wins; later ones (even with a
    different port) are ignored.
    """

    def __init__(self) -> None:
        self._entries: dict[Endpoint, Bookmark] = {}

    def add(self, host: str, scheme: str = "ssh", port: str | None = None) -> bool:
        """Add a bookmark.

        Returns:
            True if the (host, scheme) pair was new
        """
        endpoint = Endpoint(host, scheme)
        if endpoint in self._entries:
            return False
        self._entries[endpoint] = Bookmark(host, scheme, port)
        return True

    def add_bookmark(self, bookmark: Bookmark) -> bool:
        return self.add(bookmark.host, bookmark.scheme, bookmark.port)

    def endpoints(self) -> set[Endpoint]:
        return set(self._entries)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Bookmark):
            item = item.endpoint
        if isinstance(item, tuple):
            item = Endpoint(*item)
        return item in self._entries

    def __iter__(self) -> Iterator[Bookmark]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
