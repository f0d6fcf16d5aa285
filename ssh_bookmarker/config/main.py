"""Application configuration.

Delegates to specialized components:
- SSHConfigParser: Reads ssh_config files
- KnownHostsParser: Reads known_hosts files
- Settings: Environment variables
"""

import logging
from dataclasses import dataclass, field

from ssh_bookmarker.config.known_hosts import KnownHostsParser
from ssh_bookmarker.config.parser import SSHConfigParser
from ssh_bookmarker.config.settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Application configuration.

    Aggregates settings and the parsers used to read host sources.
    """

    settings: Settings = field(default_factory=Settings)
    parser: SSHConfigParser = field(default_factory=SSHConfigParser)
    known_hosts: KnownHostsParser = field(default_factory=KnownHostsParser)

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment.

        Returns:
            Configured instance with all components initialized
        """
        settings = Settings.from_env()
        logger.debug(
            "Config files: %s; known_hosts files: %s",
            settings.config_files,
            settings.known_hosts_files,
        )
        return cls(settings=settings)

    def add_config_files(self, paths: list[str]) -> None:
        """Append SSH config files after the configured ones."""
        self.settings.config_files.extend(paths)

    def add_known_hosts_files(self, paths: list[str]) -> None:
        """Append known_hosts files after the configured ones."""
        self.settings.known_hosts_files.extend(paths)

    # Delegate to settings for convenience
    @property
    def config_files(self) -> list[str]:
        """SSH config files, in read order."""
        return self.settings.config_files

    @property
    def known_hosts_files(self) -> list[str]:
        """known_hosts files, in read order."""
        return self.settings.known_hosts_files

    @property
    def max_results(self) -> int:
        """Maximum suggestions returned by a search."""
        return self.settings.max_results

    @property
    def transport(self) -> str:
        """Transport type (http or stdio)."""
        return self.settings.transport

    @property
    def http_host(self) -> str:
        """HTTP server bind address."""
        return self.settings.http_host

    @property
    def http_port(self) -> int:
        """HTTP server port."""
        return self.settings.http_port
