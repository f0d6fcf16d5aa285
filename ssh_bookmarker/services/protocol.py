"""URL scheme selection for Host blocks."""

import logging
import re
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

MatchExpr = str | re.Pattern[str]


@runtime_checkable
class ProtocolOverride(Protocol):
    """Policy deciding the schemes for one Host block.

    Returns the schemes to emit, or None (or an empty list) to keep the
    default scheme.
    """

    def __call__(self, hosts: Sequence[str], scheme: str) -> list[str] | None: ...


def to_match_expr(pattern: str) -> MatchExpr:
    """Turn ``/regex/`` into a compiled pattern; anything else stays a substring."""
    if len(pattern) >= 2 and pattern.startswith("/") and pattern.endswith("/"):
        return re.compile(pattern[1:-1])
    return pattern


def matches(expr: MatchExpr, host: str) -> bool:
    """Check a host against a substring or compiled regex."""
    if isinstance(expr, re.Pattern):
        return expr.search(host) is not None
    return expr in host


class MoshOverride:
    """Emit mosh for Host blocks matching a pattern, unless excluded.

    Example:
        >>> override = MoshOverride(["example.com"], ["/^db/"])
        >>> override(["web.example.com"], "ssh")
        ['mosh']
        >>> override(["db.example.com"], "ssh") is None
        True
    """

    def __init__(
        self,
        include_patterns: Sequence[str],
        exclude_patterns: Sequence[str] = (),
        keep_ssh: bool = False,
    ) -> None:
        """Initialize the override.

        Args:
            include_patterns: Host patterns that get a mosh bookmark
            exclude_patterns: Host patterns that never get one
            keep_ssh: Emit mosh as well as ssh instead of replacing it
        """
        self.include = [to_match_expr(p) for p in include_patterns]
        self.exclude = [to_match_expr(p) for p in exclude_patterns]
        self.keep_ssh = keep_ssh

    def _any_match(self, exprs: list[MatchExpr], hosts: Sequence[str]) -> bool:
        return any(matches(expr, host) for expr in exprs for host in hosts)

    def __call__(self, hosts: Sequence[str], scheme: str) -> list[str] | None:
        if not self._any_match(self.include, hosts):
            return None
        if self._any_match(self.exclude, hosts):
            return None
        if self.keep_ssh:
            return [scheme, "mosh"] if scheme != "mosh" else ["mosh"]
        return ["mosh"]


class ProtocolResolver:
    """Resolves the final schemes for a Host block.

    The override, when configured, is called exactly once per block.
    """

    def __init__(self, override: ProtocolOverride | None = None) -> None:
        self.override = override

    def resolve(self, hosts: Sequence[str], default_scheme: str) -> list[str]:
        """Get schemes to emit for a block.

        Args:
            hosts: All hosts of the block
            default_scheme: Scheme from the block's annotation

        Returns:
            Override result if non-empty, else ``[default_scheme]``
        """
        if self.override is None:
            return [default_scheme]

        schemes = self.override(list(hosts), default_scheme)
        if schemes:
            logger.debug("Override picked %s for %s", schemes, hosts)
            return list(schemes)
        return [default_scheme]
