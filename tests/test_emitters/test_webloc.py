"""Tests for the .webloc bookmark writer."""

import plistlib
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from ssh_bookmarker.emitters.webloc import WeblocWriter, bookmark_filename
from ssh_bookmarker.errors import BookmarkNameError
from ssh_bookmarker.models import Bookmark


def test_bookmark_filename() -> None:
    assert bookmark_filename(Bookmark("web1", "mosh")) == "web1 (mosh).webloc"


def test_bookmark_filename_rejects_separators() -> None:
    with pytest.raises(BookmarkNameError, match="bad filename"):
        bookmark_filename(Bookmark("../etc/passwd"))


def test_write_creates_plist(tmp_path: Path) -> None:
    writer = WeblocWriter(tmp_path)

    path = writer.write(Bookmark("git.example.org", "ssh", "7999"))

    assert path == tmp_path / "git.example.org (ssh).webloc"
    with open(path, "rb") as fh:
        assert plistlib.load(fh) == {"URL": "ssh://git.example.org:7999"}


def test_prepare_removes_stale_bookmarks(tmp_path: Path) -> None:
    out = tmp_path / "bookmarks"
    out.mkdir()
    (out / "old (ssh).webloc").write_text("stale")
    (out / "notes.txt").write_text("keep")

    removed = WeblocWriter(out).prepare()

    assert removed == 1
    assert [p.name for p in out.iterdir()] == ["notes.txt"]


def test_prepare_creates_directory(tmp_path: Path) -> None:
    out = tmp_path / "nested" / "bookmarks"

    assert WeblocWriter(out).prepare() == 0
    assert out.is_dir()


def test_write_all_skips_bad_names(tmp_path: Path) -> None:
    log = MagicMock()
    writer = WeblocWriter(tmp_path, logger=log)

    written = writer.write_all(
        [Bookmark("web1"), Bookmark("bad/host"), Bookmark("web1", "mosh")]
    )

    assert written == 2
    assert sorted(p.name for p in tmp_path.iterdir()) == [
        "web1 (mosh).webloc",
        "web1 (ssh).webloc",
    ]
    log.error.assert_called_once()
