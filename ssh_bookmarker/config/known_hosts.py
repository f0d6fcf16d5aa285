"""known_hosts file parser.

Extracts nameable hosts from known_hosts files. IP literals and hashed
entries are dropped, never decoded.
"""

import logging
import re
from collections.abc import Iterator
from pathlib import Path

from ssh_bookmarker.models import KnownHostsEntry
from ssh_bookmarker.utils.lines import scan_lines

logger = logging.getLogger(__name__)

PORTED_HOST = re.compile(r"\[(\S*[a-zA-Z]+\S*)\]:([0-9]+)")
IPV4_LITERAL = re.compile(r"^[0-9.]+$")
# Heuristic: also matches names made only of hex letters, e.g. "cafe".
IPV6_LITERAL = re.compile(r"^[a-f0-9:]+(%.*)?$")


def _is_ip_literal(host: str) -> bool:
    return bool(IPV4_LITERAL.match(host) or IPV6_LITERAL.match(host))


def _is_nameable(token: str) -> bool:
    return not (
        " " in token
        or token.startswith(("[", "|"))
        or "*" in token
        or "?" in token
        or _is_ip_literal(token)
    )


def parse_known_hosts_line(line: str) -> list[KnownHostsEntry]:
    """Extract the nameable hosts of one known_hosts line.

    Args:
        line: A known_hosts line

    Returns:
        Entries in the order their tokens appear
    """
    fields = line.split()
    if not fields or fields[0].startswith("#"):
        return []

    host_list = fields[0]
    if host_list.startswith("@"):
        # Marker lines (@revoked, @cert-authority) carry the hosts next
        if len(fields) < 2:
            return []
        host_list = fields[1]
    if host_list.startswith("|"):
        return []

    entries: list[KnownHostsEntry] = []
    for token in host_list.split(","):
        if not token:
            continue
        ported = PORTED_HOST.fullmatch(token)
        if ported and _is_nameable(ported.group(1)):
            entries.append(KnownHostsEntry(ported.group(1), ported.group(2)))
        elif not ported and _is_nameable(token):
            entries.append(KnownHostsEntry(token, None))
    return entries


class KnownHostsParser:
    """Parser for known_hosts files."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize known_hosts parser.

        Args:
            logger: Diagnostic sink (default: module logger)
        """
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, path: Path | str) -> Iterator[KnownHostsEntry]:
        """Lazily parse a known_hosts file.

        Args:
            path: known_hosts file. A missing file yields nothing.

        Yields:
            KnownHostsEntry per nameable host token

        Raises:
            OSError: If ``path`` exists but cannot be read
        """
        known_hosts = Path(path).expanduser()
        self.logger.debug("Parsing known_hosts %s", known_hosts)
        for line in scan_lines(known_hosts, self.logger):
            yield from parse_known_hosts_line(line)
