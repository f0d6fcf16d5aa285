"""Host search tool."""

import logging

from ssh_bookmarker.services.discovery import HostDiscovery
from ssh_bookmarker.services.state import get_config
from ssh_bookmarker.services.suggest import RankedSuggester

logger = logging.getLogger(__name__)


async def search_hosts(query: str, limit: int | None = None) -> list[dict[str, str]]:
    """Find SSH hosts whose name contains a substring.

    Hosts come from the configured ssh_config and known_hosts files. Hosts
    where the substring occurs earlier rank first; ties keep discovery order.

    Args:
        query: Substring to look for in host names (case-sensitive)
        limit: Maximum results (default: configured max_results)

    Returns:
        List of {title: "scheme://host", label: host, badge: scheme}
    """
    config = get_config()
    if limit is None:
        limit = config.max_results

    suggester = RankedSuggester(HostDiscovery.from_config(config))
    results = suggester.search(query, limit=limit)
    logger.debug("search_hosts(%r) -> %d result(s)", query, len(results))
    return results
