"""Substring-ranked host suggestions."""

import logging
from collections.abc import Sequence
from operator import attrgetter
from pathlib import Path

from ssh_bookmarker.models import Endpoint, RankedEntry
from ssh_bookmarker.services.discovery import HostDiscovery

logger = logging.getLogger(__name__)


class RankedSuggester:
    """Ranks discovered endpoints against a search substring.

    Hosts not containing the query are omitted. The rest sort by the index
    of the first occurrence of the query, then by discovery order.
    """

    def __init__(self, discovery: HostDiscovery) -> None:
        self.discovery = discovery

    def rank(self, query: str) -> list[RankedEntry]:
        """Rank endpoints matching ``query``.

        Args:
            query: Case-sensitive substring to look for in hostnames

        Returns:
            Matching entries, best first
        """
        seen: dict[Endpoint, RankedEntry] = {}
        position = 0
        for bookmark in self.discovery.iter_bookmarks():
            endpoint = bookmark.endpoint
            if endpoint in seen:
                continue
            precision = bookmark.host.find(query)
            if precision < 0:
                continue
            seen[endpoint] = RankedEntry(endpoint, precision, position)
            position += 1

        ranked = sorted(seen.values(), key=attrgetter("relevance"))
        logger.debug("Ranked %d host(s) for %r", len(ranked), query)
        return ranked

    def search(self, query: str, limit: int | None = None) -> list[dict[str, str]]:
        """Get presentation records for ``query``.

        Args:
            query: Substring to look for
            limit: Maximum number of records (None for all)

        Returns:
            ``{title, label, badge}`` records, best first
        """
        ranked = self.rank(query)
        if limit is not None:
            ranked = ranked[: max(limit, 0)]
        return [entry.to_dict() for entry in ranked]


def search(
    query: str,
    config_files: Sequence[Path | str],
    known_hosts_files: Sequence[Path | str],
    limit: int | None = None,
) -> list[dict[str, str]]:
    """Rank hosts from the given files against ``query``.

    Convenience wrapper building a default driver without overrides.
    """
    discovery = HostDiscovery(config_files, known_hosts_files)
    return RankedSuggester(discovery).search(query, limit=limit)
