"""Configuration module for ssh_bookmarker.

Provides focused classes for different configuration concerns:
- Config: Main configuration class (aggregates all components)
- SSHConfigParser: Parses ssh_config files and their Includes
- KnownHostsParser: Parses known_hosts files
- Settings: Environment variable configuration
"""

from ssh_bookmarker.config.known_hosts import KnownHostsParser
from ssh_bookmarker.config.main import Config
from ssh_bookmarker.config.parser import SSHConfigParser, extract_url_schemes
from ssh_bookmarker.config.settings import Settings

__all__ = [
    "Config",
    "KnownHostsParser",
    "SSHConfigParser",
    "Settings",
    "extract_url_schemes",
]
