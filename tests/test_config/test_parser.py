"""Tests for SSHConfigParser."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from ssh_bookmarker.config.parser import SSHConfigParser, extract_url_schemes
from ssh_bookmarker.models import HostBlock


@pytest.fixture
def parser() -> SSHConfigParser:
    return SSHConfigParser()


def test_parse_yields_one_block_per_scheme(tmp_path: Path, parser: SSHConfigParser) -> None:
    """Hosts on one line travel together, once per declared scheme."""
    config = tmp_path / "config"
    config.write_text("Host web1 web2 #:ssh,mosh\n    HostName 10.0.0.1\n")

    blocks = list(parser.parse(config))

    assert blocks == [(["web1", "web2"], "ssh"), (["web1", "web2"], "mosh")]
    assert all(isinstance(b, HostBlock) for b in blocks)


def test_parse_defaults_to_ssh_scheme(tmp_path: Path, parser: SSHConfigParser) -> None:
    config = tmp_path / "config"
    config.write_text("Host alpha\n  User root\nHost beta gamma # just a comment\n")

    assert list(parser.parse(config)) == [
        (["alpha"], "ssh"),
        (["beta", "gamma"], "ssh"),
    ]


def test_parse_keyword_is_case_insensitive(tmp_path: Path, parser: SSHConfigParser) -> None:
    config = tmp_path / "config"
    config.write_text("  host lower\nHOST upper\n")

    assert [b.hosts for b in parser.parse(config)] == [["lower"], ["upper"]]


def test_parse_ignores_hostname_and_other_directives(
    tmp_path: Path, parser: SSHConfigParser
) -> None:
    config = tmp_path / "config"
    config.write_text(
        "Host real\n"
        "    Hostname not-a-host.example.com\n"
        "    HostKeyAlias alias\n"
        "Match host foo\n"
        "# Host commented-out\n"
    )

    assert list(parser.parse(config)) == [(["real"], "ssh")]


def test_parse_suppresses_whole_line_with_wildcard(
    tmp_path: Path, parser: SSHConfigParser
) -> None:
    """A wildcard anywhere on a Host line suppresses every host on it."""
    config = tmp_path / "config"
    config.write_text("Host foo.* bar\nHost *\nHost sibling\n")

    assert list(parser.parse(config)) == [(["sibling"], "ssh")]


def test_parse_missing_file_yields_nothing(tmp_path: Path, parser: SSHConfigParser) -> None:
    assert list(parser.parse(tmp_path / "nonexistent")) == []


def test_parse_is_lazy(tmp_path: Path, parser: SSHConfigParser) -> None:
    """Consumers can stop after the first block."""
    config = tmp_path / "config"
    config.write_text("".join(f"Host h{i}\n" for i in range(100)))

    blocks = parser.parse(config)

    assert next(blocks) == (["h0"], "ssh")
    blocks.close()


def test_include_relative_to_base_dir(tmp_path: Path, parser: SSHConfigParser) -> None:
    """Own Host lines come first, then includes in the order they appear."""
    (tmp_path / "conf.d").mkdir()
    (tmp_path / "conf.d" / "work").write_text("Host work1\n")
    (tmp_path / "personal").write_text("Host home1 #:mosh\n")
    config = tmp_path / "config"
    config.write_text(
        "Include conf.d/work\n"
        "Host top\n"
        "Include personal # trailing comment\n"
    )

    assert list(parser.parse(config)) == [
        (["top"], "ssh"),
        (["work1"], "ssh"),
        (["home1"], "mosh"),
    ]


def test_include_uses_same_base_dir_for_nested_includes(
    tmp_path: Path, parser: SSHConfigParser
) -> None:
    """Relative includes in included files resolve against the traversal base dir."""
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "first").write_text("Host first\nInclude second\n")
    (tmp_path / "second").write_text("Host second\n")
    config = tmp_path / "config"
    config.write_text("Include sub/first\n")

    assert [b.hosts[0] for b in parser.parse(config)] == ["first", "second"]


def test_include_explicit_base_dir(tmp_path: Path, parser: SSHConfigParser) -> None:
    base = tmp_path / "base"
    base.mkdir()
    (base / "extra").write_text("Host extra\n")
    config = tmp_path / "config"
    config.write_text("Include extra\n")

    assert list(parser.parse(config, include_base_dir=base)) == [(["extra"], "ssh")]


def test_include_absolute_path(tmp_path: Path, parser: SSHConfigParser) -> None:
    other = tmp_path / "elsewhere" / "hosts"
    other.parent.mkdir()
    other.write_text("Host abs\n")
    config = tmp_path / "config"
    config.write_text(f"Include {other}\n")

    assert list(parser.parse(config)) == [(["abs"], "ssh")]


def test_include_glob_in_sorted_order(tmp_path: Path, parser: SSHConfigParser) -> None:
    (tmp_path / "conf.d").mkdir()
    (tmp_path / "conf.d" / "b.conf").write_text("Host bee\n")
    (tmp_path / "conf.d" / "a.conf").write_text("Host ay\n")
    config = tmp_path / "config"
    config.write_text("Include conf.d/*.conf\n")

    assert [b.hosts[0] for b in parser.parse(config)] == ["ay", "bee"]


def test_mutual_includes_terminate(tmp_path: Path, parser: SSHConfigParser) -> None:
    """Each Host line is emitted exactly once for circular includes."""
    (tmp_path / "a").write_text("Host a-host\nInclude b\n")
    (tmp_path / "b").write_text("Host b-host\nInclude a\n")

    blocks = list(parser.parse(tmp_path / "a"))

    assert blocks == [(["a-host"], "ssh"), (["b-host"], "ssh")]


def test_self_include_terminates(tmp_path: Path, parser: SSHConfigParser) -> None:
    config = tmp_path / "config"
    config.write_text("Include config\nHost once\n")

    assert list(parser.parse(config)) == [(["once"], "ssh")]


def test_duplicate_include_lines_traversed_once(
    tmp_path: Path, parser: SSHConfigParser
) -> None:
    (tmp_path / "shared").write_text("Host shared\n")
    config = tmp_path / "config"
    config.write_text("Include shared\nInclude shared\n")

    assert list(parser.parse(config)) == [(["shared"], "ssh")]


def test_visited_set_is_shared_with_caller(tmp_path: Path, parser: SSHConfigParser) -> None:
    """A file visited by one parse call is not traversed again by the next."""
    (tmp_path / "shared").write_text("Host shared\n")
    (tmp_path / "one").write_text("Include shared\n")
    (tmp_path / "two").write_text("Include shared\n")
    visited: set[Path] = set()

    first = list(parser.parse(tmp_path / "one", visited=visited))
    second = list(parser.parse(tmp_path / "two", visited=visited))

    assert first == [(["shared"], "ssh")]
    assert second == []
    assert (tmp_path / "shared").resolve() in {p.resolve() for p in visited}


def test_missing_include_is_skipped(tmp_path: Path) -> None:
    log = MagicMock()
    config = tmp_path / "config"
    config.write_text("Include missing\nHost still-here\n")

    blocks = list(SSHConfigParser(logger=log).parse(config))

    assert blocks == [(["still-here"], "ssh")]
    assert log.info.called


def test_unreadable_include_ends_only_that_branch(tmp_path: Path) -> None:
    """An include that cannot be read is logged; sibling includes still load."""
    log = MagicMock()
    (tmp_path / "is-a-dir").mkdir()
    (tmp_path / "good").write_text("Host good\n")
    config = tmp_path / "config"
    config.write_text("Include is-a-dir\nInclude good\n")

    blocks = list(SSHConfigParser(logger=log).parse(config))

    assert blocks == [(["good"], "ssh")]
    assert log.warning.called


def test_unreadable_top_level_file_raises(tmp_path: Path, parser: SSHConfigParser) -> None:
    with pytest.raises(OSError):
        list(parser.parse(tmp_path))


def test_undecodable_bytes_do_not_abort(tmp_path: Path, parser: SSHConfigParser) -> None:
    config = tmp_path / "config"
    config.write_bytes(b"Host ok\n\xff\xfe garbage\nHost also-ok\n")

    assert [b.hosts[0] for b in parser.parse(config)] == ["ok", "also-ok"]


def test_include_expands_home(
    tmp_path: Path, parser: SSHConfigParser, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / "extra").write_text("Host from-home\n")
    config = tmp_path / "etc" / "config"
    config.parent.mkdir()
    config.write_text("Include ~/extra\n")

    assert list(parser.parse(config)) == [(["from-home"], "ssh")]


def test_include_several_paths_on_one_line(tmp_path: Path, parser: SSHConfigParser) -> None:
    """Every path on an Include line is traversed, in the order written."""
    (tmp_path / "a").write_text("Host from-a\n")
    (tmp_path / "b").write_text("Host from-b\n")
    config = tmp_path / "config"
    config.write_text("Include b a\nHost local\n")

    assert [b.hosts for b in parser.parse(config)] == [["local"], ["from-b"], ["from-a"]]


def test_include_unknown_user_home_is_skipped(tmp_path: Path) -> None:
    """A ~user path that cannot be expanded drops only that Include path."""
    (tmp_path / "good").write_text("Host included\n")
    config = tmp_path / "config"
    config.write_text("Host before\nInclude ~nosuchuser_zz/extra good\nHost after\n")
    log = MagicMock()

    blocks = list(SSHConfigParser(logger=log).parse(config))

    assert [b.hosts for b in blocks] == [["before"], ["after"], ["included"]]
    assert "Skipping Include path" in str(log.debug.call_args_list)


def test_parse_skips_host_line_without_hosts(tmp_path: Path, parser: SSHConfigParser) -> None:
    config = tmp_path / "config"
    config.write_text("Host   \nHost #:mosh\nHost real\n")

    assert list(parser.parse(config)) == [(["real"], "ssh")]


class TestExtractUrlSchemes:
    """Tests for scheme annotations."""

    def test_no_comment_defaults_to_ssh(self) -> None:
        assert extract_url_schemes(None) == ["ssh"]

    def test_plain_comment_defaults_to_ssh(self) -> None:
        assert extract_url_schemes("# staging box") == ["ssh"]

    def test_single_scheme(self) -> None:
        assert extract_url_schemes("#:mosh") == ["mosh"]

    def test_multiple_schemes_in_order(self) -> None:
        assert extract_url_schemes("#:mosh,ssh") == ["mosh", "ssh"]

    def test_whitespace_and_empty_names_dropped(self) -> None:
        assert extract_url_schemes("#: ssh , ,mosh ") == ["ssh", "mosh"]

    def test_empty_annotation_defaults_to_ssh(self) -> None:
        assert extract_url_schemes("#:") == ["ssh"]
