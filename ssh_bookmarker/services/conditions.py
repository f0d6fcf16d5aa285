"""Per-source host eligibility conditions.

A condition spec has the form ``FILE,REGEX``. Include conditions restrict
hosts from FILE to those matching REGEX; exclude conditions drop matches.
"""

import os
import re
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ssh_bookmarker.errors import ConditionFormatError


@dataclass(frozen=True)
class Condition:
    """One include/exclude rule."""

    kind: Literal["include", "exclude"]
    pattern: re.Pattern[str]


def _source_key(path: Path | str) -> Path:
    return Path(os.path.abspath(Path(path).expanduser()))


def parse_condition(spec: str, kind: Literal["include", "exclude"]) -> tuple[Path, Condition]:
    """Parse a ``FILE,REGEX`` spec.

    Raises:
        ConditionFormatError: If there is no FILE before the comma or the regex is invalid
    """
    path, sep, regex = spec.partition(",")
    if not sep or not path:
        raise ConditionFormatError(spec)
    try:
        pattern = re.compile(regex)
    except re.error as e:
        raise ConditionFormatError(spec, f"could not parse the host regex: {e}") from e
    try:
        source = _source_key(path)
    except RuntimeError as e:
        raise ConditionFormatError(spec, f"could not expand the file path: {e}") from e
    return source, Condition(kind, pattern)


class Conditions:
    """Eligibility rules keyed by source file."""

    def __init__(self) -> None:
        self._rules: dict[Path, list[Condition]] = defaultdict(list)

    @classmethod
    def from_specs(
        cls,
        include: list[str] | None = None,
        exclude: list[str] | None = None,
    ) -> "Conditions":
        """Build conditions from include and exclude spec strings."""
        conditions = cls()
        for spec in include or []:
            conditions.add(*parse_condition(spec, "include"))
        for spec in exclude or []:
            conditions.add(*parse_condition(spec, "exclude"))
        return conditions

    def add(self, path: Path | str, condition: Condition) -> None:
        self._rules[_source_key(path)].append(condition)

    def eligible(self, host: str, source: Path | str) -> bool:
        """Check whether a host read from ``source`` may be emitted.

        Rules apply in order: a matching include admits the host, an
        unmatched include makes the default a rejection, a matching exclude
        rejects it.
        """
        rules = self._rules.get(_source_key(source))
        if not rules:
            return True

        default = True
        for rule in rules:
            hit = rule.pattern.search(host) is not None
            if rule.kind == "include":
                if hit:
                    return True
                default = False
            elif hit:
                return False
        return default

    def __len__(self) -> int:
        return sum(len(rules) for rules in self._rules.values())
