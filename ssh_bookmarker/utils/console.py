"""Colorful console logging."""

import logging
import re
import sys
from datetime import datetime

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "white": "\033[37m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bright_cyan": "\033[96m",
    "bg_red": "\033[41m",
}

# Log level colors
LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Component colors for logger names
COMPONENT_COLORS = {
    "ssh_bookmarker.config": COLORS["green"],
    "ssh_bookmarker.services": COLORS["bright_magenta"],
    "ssh_bookmarker.emitters": COLORS["cyan"],
    "ssh_bookmarker.middleware": COLORS["yellow"],
    "ssh_bookmarker.server": COLORS["bright_cyan"],
    "default": COLORS["white"],
}

URL_PATTERN = re.compile(r"(\w+://[^\s]+)")

NOISY_LOGGERS = [
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "fastmcp",
    "mcp",
    "starlette",
    "anyio",
]


class ColorfulFormatter(logging.Formatter):
    """Colorful log formatter with component highlighting."""

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
        """
        super().__init__()
        self.use_colors = use_colors

    def _colorize(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _get_component_color(self, name: str) -> str:
        for prefix, color in COMPONENT_COLORS.items():
            if prefix != "default" and name.startswith(prefix):
                return color
        return COMPONENT_COLORS["default"]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created)
        return f"{dt.strftime('%H:%M:%S')}.{int(record.msecs):03d}"

    def _format_component(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith("ssh_bookmarker."):
            name = name[len("ssh_bookmarker."):]
        return self._colorize(f"{name:<22}", self._get_component_color(record.name))

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as ``time | level | component | message``."""
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._colorize(
            f"{record.levelname:<8}",
            LEVEL_COLORS.get(record.levelname, COLORS["white"]),
        )
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])

        message = record.getMessage()
        if self.use_colors and "://" in message:
            # Highlight bookmark URLs like mosh://host
            message = URL_PATTERN.sub(
                f"{COLORS['bright_blue']}\\1{COLORS['reset']}", message
            )
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        return f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"


def configure_logging(level: str = "WARNING", use_colors: bool = True) -> logging.Logger:
    """Configure logging for the ssh_bookmarker package.

    Replaces existing handlers so repeated calls do not duplicate output.
    Colors are disabled when stderr is not a TTY.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_colors: Whether to use ANSI colors

    Returns:
        The package logger
    """
    if not sys.stderr.isatty():
        use_colors = False

    package_logger = logging.getLogger("ssh_bookmarker")
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
    package_logger.addHandler(handler)
    package_logger.propagate = False

    # Suppress noisy third-party loggers
    for noisy_logger in NOISY_LOGGERS:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    return package_logger
