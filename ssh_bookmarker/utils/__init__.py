"""Utilities for ssh_bookmarker."""

from ssh_bookmarker.utils.console import ColorfulFormatter, configure_logging
from ssh_bookmarker.utils.lines import scan_lines

__all__ = [
    "ColorfulFormatter",
    "configure_logging",
    "scan_lines",
]
