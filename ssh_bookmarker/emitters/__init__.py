"""Output emitters for discovered hosts."""

from ssh_bookmarker.emitters.suggestions import to_json
from ssh_bookmarker.emitters.webloc import WeblocWriter, bookmark_filename

__all__ = ["WeblocWriter", "bookmark_filename", "to_json"]
