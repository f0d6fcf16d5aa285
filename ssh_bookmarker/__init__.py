"""ssh_bookmarker - bookmarks and suggestions for SSH hosts.

Discovers hosts from ssh_config and known_hosts files and turns them into
deduplicated, ranked ssh:// (or mosh://) endpoints.
"""

__version__ = "0.3.0"
