"""Bookmark files (.webloc property lists) for discovered hosts."""

import logging
import os
import plistlib
from collections.abc import Iterable
from pathlib import Path

from ssh_bookmarker.errors import BookmarkNameError
from ssh_bookmarker.models import Bookmark

logger = logging.getLogger(__name__)

SUFFIX = ".webloc"


def bookmark_filename(bookmark: Bookmark) -> str:
    """Get the file name for a bookmark, e.g. ``web1 (mosh).webloc``.

    Raises:
        BookmarkNameError: If the name would escape the output directory
    """
    name = f"{bookmark.host} ({bookmark.scheme}){SUFFIX}"
    separators = [os.sep] + ([os.altsep] if os.altsep else [])
    if any(sep in name for sep in separators) or Path(name).is_absolute():
        raise BookmarkNameError(bookmark.host, bookmark.scheme)
    return name


class WeblocWriter:
    """Writes one .webloc file per bookmark into an output directory.

    The directory is rebuilt from scratch on every run.
    """

    def __init__(self, output_dir: Path | str, logger: logging.Logger | None = None) -> None:
        self.output_dir = Path(output_dir).expanduser()
        self.logger = logger or logging.getLogger(__name__)

    def prepare(self) -> int:
        """Create the output directory and remove stale bookmarks.

        Returns:
            Number of bookmark files removed
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        removed = 0
        for stale in self.output_dir.glob(f"*{SUFFIX}"):
            stale.unlink()
            removed += 1
        self.logger.debug("Removed %d stale bookmark(s) from %s", removed, self.output_dir)
        return removed

    def write(self, bookmark: Bookmark) -> Path:
        """Write a single bookmark file.

        Returns:
            Path of the written file

        Raises:
            BookmarkNameError: If the host or scheme makes a bad file name
            OSError: If the file cannot be written
        """
        path = self.output_dir / bookmark_filename(bookmark)
        self.logger.debug("Making host entry for %s", bookmark.url)
        with open(path, "wb") as fh:
            plistlib.dump({"URL": bookmark.url}, fh, fmt=plistlib.FMT_XML)
        return path

    def write_all(self, bookmarks: Iterable[Bookmark]) -> int:
        """Write bookmarks, logging and skipping the ones that fail.

        Returns:
            Number of files written
        """
        written = 0
        for bookmark in bookmarks:
            try:
                self.write(bookmark)
            except (BookmarkNameError, OSError) as e:
                self.logger.error(
                    "Can't write bookmark for host %s: %s", bookmark.host, e
                )
                continue
            written += 1
        self.logger.info("Wrote %d bookmark(s) to %s", written, self.output_dir)
        return written
