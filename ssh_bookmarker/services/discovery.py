"""Host discovery across SSH config and known_hosts files."""

import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from ssh_bookmarker.config.known_hosts import KnownHostsParser
from ssh_bookmarker.config.parser import SSHConfigParser
from ssh_bookmarker.models import Bookmark
from ssh_bookmarker.services.conditions import Conditions
from ssh_bookmarker.services.index import HostIndex
from ssh_bookmarker.services.protocol import MoshOverride, ProtocolResolver

if TYPE_CHECKING:
    from ssh_bookmarker.config import Config

logger = logging.getLogger(__name__)


class HostDiscovery:
    """Feeds every configured file to its parser and streams bookmarks.

    Config files are read before known_hosts files, each list in the order
    given. One include-visited set is shared by all config files of a run.
    A file that cannot be read is logged and skipped; the run continues
    with the next file.
    """

    def __init__(
        self,
        config_files: Sequence[Path | str] = (),
        known_hosts_files: Sequence[Path | str] = (),
        resolver: ProtocolResolver | None = None,
        conditions: Conditions | None = None,
        config_parser: SSHConfigParser | None = None,
        known_hosts_parser: KnownHostsParser | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the discovery driver.

        Args:
            config_files: SSH config files, read in order
            known_hosts_files: known_hosts files, read in order
            resolver: Scheme resolver for config Host blocks
            conditions: Per-source host eligibility rules
            config_parser: Parser for SSH config files
            known_hosts_parser: Parser for known_hosts files
            logger: Diagnostic sink (default: module logger)
        """
        self.logger = logger or logging.getLogger(__name__)
        self.config_files = [Path(p) for p in config_files]
        self.known_hosts_files = [Path(p) for p in known_hosts_files]
        self.resolver = resolver or ProtocolResolver()
        self.conditions = conditions or Conditions()
        self.config_parser = config_parser or SSHConfigParser(logger=self.logger)
        self.known_hosts_parser = known_hosts_parser or KnownHostsParser(logger=self.logger)

    @classmethod
    def from_config(
        cls,
        config: "Config",
        logger: logging.Logger | None = None,
    ) -> "HostDiscovery":
        """Build a driver from application config.

        Args:
            config: Application configuration
            logger: Optional diagnostic sink

        Returns:
            Driver with the configured files, mosh policy and conditions
        """
        settings = config.settings
        override = None
        if settings.mosh_patterns:
            override = MoshOverride(
                settings.mosh_patterns,
                settings.prevent_mosh_patterns,
                keep_ssh=settings.mosh_also,
            )
        return cls(
            config_files=settings.config_files,
            known_hosts_files=settings.known_hosts_files,
            resolver=ProtocolResolver(override),
            conditions=Conditions.from_specs(
                settings.include_conditions, settings.exclude_conditions
            ),
            config_parser=config.parser,
            known_hosts_parser=config.known_hosts,
            logger=logger,
        )

    def iter_bookmarks(self) -> Iterator[Bookmark]:
        """Lazily stream bookmarks from all sources, duplicates included.

        Yields:
            Bookmark per (host, scheme) occurrence, in discovery order
        """
        visited: set[Path] = set()
        for path in self.config_files:
            yield from self._config_bookmarks(path, visited)
        for path in self.known_hosts_files:
            yield from self._known_hosts_bookmarks(path)

    def discover(self) -> HostIndex:
        """Run a full discovery and deduplicate by (host, scheme).

        Returns:
            HostIndex with one bookmark per endpoint
        """
        index = HostIndex()
        for bookmark in self.iter_bookmarks():
            index.add_bookmark(bookmark)
        self.logger.info("Discovered %d unique endpoint(s)", len(index))
        return index

    def _expand(self, path: Path) -> Path | None:
        try:
            return path.expanduser()
        except RuntimeError as e:
            self.logger.warning("Cannot expand path %s: %s", path, e)
            return None

    def _config_bookmarks(self, path: Path, visited: set[Path]) -> Iterator[Bookmark]:
        expanded = self._expand(path)
        if expanded is None:
            return
        path = expanded
        if not path.exists():
            self.logger.info("Skipping missing SSH config file %s", path)
            return
        if Path(os.path.abspath(path)) in visited:
            self.logger.debug("SSH config file %s was already included", path)
            return

        self.logger.info("Parsing SSH config file %s", path)
        try:
            for block in self.config_parser.parse(path, visited=visited):
                schemes = self.resolver.resolve(block.hosts, block.scheme)
                for scheme in schemes:
                    for host in block.hosts:
                        if self.conditions.eligible(host, path):
                            yield Bookmark(host, scheme)
        except OSError as e:
            self.logger.warning("Cannot read SSH config file %s: %s", path, e)

    def _known_hosts_bookmarks(self, path: Path) -> Iterator[Bookmark]:
        expanded = self._expand(path)
        if expanded is None:
            return
        path = expanded
        if not path.exists():
            self.logger.info("Skipping missing known_hosts file %s", path)
            return

        self.logger.info("Parsing known_hosts file %s", path)
        try:
            for entry in self.known_hosts_parser.parse(path):
                if self.conditions.eligible(entry.host, path):
                    yield Bookmark(entry.host, "ssh", entry.port)
        except OSError as e:
            self.logger.warning("Cannot read known_hosts file %s: %s", path, e)
