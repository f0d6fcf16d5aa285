"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILES = ["/etc/ssh/ssh_config", "~/.ssh/config"]
DEFAULT_KNOWN_HOSTS_FILES = ["/etc/ssh/known_hosts", "~/.ssh/known_hosts"]


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Sources, in the order they are read
    config_files: list[str] = field(default_factory=lambda: list(DEFAULT_CONFIG_FILES))
    known_hosts_files: list[str] = field(
        default_factory=lambda: list(DEFAULT_KNOWN_HOSTS_FILES)
    )

    # Protocol override
    mosh_patterns: list[str] = field(default_factory=list)
    prevent_mosh_patterns: list[str] = field(default_factory=list)
    mosh_also: bool = field(default=False)

    # Host eligibility (FILE,REGEX specs; set from the command line)
    include_conditions: list[str] = field(default_factory=list)
    exclude_conditions: list[str] = field(default_factory=list)

    # Suggestions
    max_results: int = field(default=50)

    # Transport
    transport: str = field(default="stdio")
    http_host: str = field(default="127.0.0.1")
    http_port: int = field(default=8000)

    # Logging
    log_level: str = field(default="WARNING")
    log_colors: bool = field(default=True)

    # Server middleware
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from SSH_BOOKMARKER_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            config_files=cls._get_list("SSH_BOOKMARKER_CONFIG_FILES", DEFAULT_CONFIG_FILES),
            known_hosts_files=cls._get_list(
                "SSH_BOOKMARKER_KNOWN_HOSTS_FILES", DEFAULT_KNOWN_HOSTS_FILES
            ),
            mosh_patterns=cls._get_list("SSH_BOOKMARKER_MOSH_PATTERNS", []),
            prevent_mosh_patterns=cls._get_list("SSH_BOOKMARKER_PREVENT_MOSH_PATTERNS", []),
            mosh_also=cls._get_bool("SSH_BOOKMARKER_MOSH_ALSO", False),
            max_results=cls._get_int("SSH_BOOKMARKER_MAX_RESULTS", 50),
            transport=cls._get_transport(),
            http_host=os.getenv("SSH_BOOKMARKER_HTTP_HOST", "127.0.0.1"),
            http_port=cls._get_int("SSH_BOOKMARKER_HTTP_PORT", 8000),
            log_level=os.getenv("SSH_BOOKMARKER_LOG_LEVEL", "WARNING").upper(),
            log_colors=cls._get_bool("SSH_BOOKMARKER_LOG_COLORS", True),
            slow_threshold_ms=cls._get_int("SSH_BOOKMARKER_SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("SSH_BOOKMARKER_INCLUDE_TRACEBACK", False),
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_list(key: str, default: list[str]) -> list[str]:
        """Get comma-separated list from environment.

        Returns:
            List of non-empty items, or a copy of default if not set
        """
        value = os.getenv(key)
        if value is None:
            return list(default)
        return [item.strip() for item in value.split(",") if item.strip()]

    @staticmethod
    def _get_transport() -> str:
        """Get transport from environment with validation.

        Returns:
            Transport type ("http" or "stdio")
        """
        transport = os.getenv("SSH_BOOKMARKER_TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            return transport
        return "stdio"
