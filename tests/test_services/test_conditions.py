"""Tests for per-source host conditions."""

from pathlib import Path

import pytest

from ssh_bookmarker.errors import ConditionFormatError
from ssh_bookmarker.services.conditions import Conditions, parse_condition


def test_no_conditions_everything_eligible(tmp_path: Path) -> None:
    conditions = Conditions()

    assert conditions.eligible("anything", tmp_path / "config")
    assert len(conditions) == 0


def test_include_restricts_source(tmp_path: Path) -> None:
    source = tmp_path / "known_hosts"
    conditions = Conditions.from_specs(include=[f"{source},\\.example\\.com$"])

    assert conditions.eligible("web.example.com", source)
    assert not conditions.eligible("web.example.org", source)
    # Other sources are unaffected
    assert conditions.eligible("web.example.org", tmp_path / "config")


def test_exclude_drops_matches(tmp_path: Path) -> None:
    source = tmp_path / "config"
    conditions = Conditions.from_specs(exclude=[f"{source},^db"])

    assert not conditions.eligible("db1", source)
    assert conditions.eligible("web1", source)


def test_include_checked_before_exclude(tmp_path: Path) -> None:
    source = tmp_path / "config"
    conditions = Conditions.from_specs(
        include=[f"{source},example"],
        exclude=[f"{source},^db"],
    )

    assert conditions.eligible("db.example.com", source)
    assert not conditions.eligible("db.other", source)


def test_source_paths_are_normalized(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    conditions = Conditions.from_specs(exclude=["config,^db"])

    assert not conditions.eligible("db1", tmp_path / "config")


@pytest.mark.parametrize("spec", ["no-comma", ",regex", "file,[unclosed"])
def test_bad_spec_raises(spec: str) -> None:
    with pytest.raises(ConditionFormatError):
        parse_condition(spec, "include")


def test_parse_condition_unexpandable_path() -> None:
    with pytest.raises(ConditionFormatError, match="could not expand"):
        parse_condition("~nosuchuser_zz/known_hosts,^web", "include")
