"""Line-oriented file reading."""

import logging
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


def scan_lines(
    path: Path | str,
    log: logging.Logger | None = None,
) -> Iterator[str]:
    """Yield lines of a text file without their line endings.

    A missing file yields nothing. Other I/O errors propagate to the caller.
    Undecodable bytes are replaced rather than raised.

    Args:
        path: File to read
        log: Logger for diagnostics (default: module logger)

    Yields:
        Each line with trailing newline characters removed
    """
    log = log or logger
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except FileNotFoundError:
        log.info("Skipping missing file %s", path)
        return

    with handle:
        for line in handle:
            yield line.rstrip("\r\n")
