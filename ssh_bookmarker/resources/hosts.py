"""Hosts resource for listing discovered SSH bookmarks."""

from ssh_bookmarker.services.discovery import HostDiscovery
from ssh_bookmarker.services.state import get_config


async def list_hosts_resource() -> str:
    """List every discovered bookmark URL, grouped by scheme.

    Returns:
        Formatted list of bookmark URLs
    """
    config = get_config()
    index = HostDiscovery.from_config(config).discover()

    if not index:
        return "No SSH hosts discovered."

    by_scheme: dict[str, list[str]] = {}
    for bookmark in index:
        by_scheme.setdefault(bookmark.scheme, []).append(bookmark.url)

    lines = ["Discovered SSH Hosts", "=" * 40, ""]
    for scheme in sorted(by_scheme):
        lines.append(f"{scheme} ({len(by_scheme[scheme])})")
        lines.extend(f"    {url}" for url in by_scheme[scheme])
        lines.append("")

    lines.append(f"{len(index)} endpoint(s) total")
    return "\n".join(lines)
