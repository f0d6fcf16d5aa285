"""SSH config file parser.

Extracts ``Host`` declarations (with optional ``#:scheme`` annotations) from
ssh_config(5) files and follows ``Include`` directives.
"""

import glob
import logging
import os
import re
from collections.abc import Iterator
from pathlib import Path

from ssh_bookmarker.models import HostBlock
from ssh_bookmarker.utils.lines import scan_lines

logger = logging.getLogger(__name__)

HOST_LINE = re.compile(r"^\s*Host\s+([^#]+?)\s*(#.*)?$", re.IGNORECASE)
INCLUDE_LINE = re.compile(r"^\s*Include\s+([^#]+)", re.IGNORECASE)
SCHEME_ANNOTATION = re.compile(r"^#:(.*)$")
GLOB_CHARS = re.compile(r"[*?[]")

DEFAULT_SCHEME = "ssh"


def extract_url_schemes(comment: str | None) -> list[str]:
    """Get URL schemes from a trailing ``#:scheme1,scheme2`` comment.

    Args:
        comment: Trailing comment of a Host line, or None

    Returns:
        Declared schemes in order, or ``["ssh"]`` if none are declared
    """
    if comment:
        match = SCHEME_ANNOTATION.match(comment.strip())
        if match:
            schemes = [s.strip() for s in match.group(1).split(",")]
            schemes = [s for s in schemes if s]
            if schemes:
                return schemes
    return [DEFAULT_SCHEME]


def _absolute(path: Path) -> Path:
    return Path(os.path.abspath(path))


class SSHConfigParser:
    """Parser for SSH config files.

    Yields one ``HostBlock`` per (Host line, scheme). Host lines carrying any
    wildcard pattern are skipped whole. Included files are traversed after
    the including file's own Host lines, each at most once per traversal.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize SSH config parser.

        Args:
            logger: Diagnostic sink (default: module logger)
        """
        self.logger = logger or logging.getLogger(__name__)

    def parse(
        self,
        path: Path | str,
        include_base_dir: Path | str | None = None,
        visited: set[Path] | None = None,
    ) -> Iterator[HostBlock]:
        """Lazily parse an SSH config file and its includes.

        Args:
            path: Config file to read. A missing file yields nothing.
            include_base_dir: Directory that relative Include paths are
                resolved against (default: directory of ``path``). It is
                passed unchanged to every included file.
            visited: Absolute paths already traversed. Owned by the caller
                for the duration of one traversal; a fresh set is used if
                omitted.

        Yields:
            HostBlock for each concrete Host line and scheme

        Raises:
            OSError: If ``path`` exists but cannot be read
        """
        config_path = Path(path).expanduser()
        base_dir = (
            Path(include_base_dir).expanduser()
            if include_base_dir is not None
            else config_path.parent
        )
        if visited is None:
            visited = set()
        visited.add(_absolute(config_path))

        self.logger.debug("Parsing %s", config_path)
        includes: list[Path] = []

        for line in scan_lines(config_path, self.logger):
            host_match = HOST_LINE.match(line)
            if host_match:
                hosts = host_match.group(1).split()
                if not hosts:
                    continue
                if any("*" in host for host in hosts):
                    self.logger.debug("Skipping wildcard Host line: %s", line.strip())
                    continue
                self.logger.debug("Got hosts %s", hosts)
                for scheme in extract_url_schemes(host_match.group(2)):
                    yield HostBlock(list(hosts), scheme)
                continue

            include_match = INCLUDE_LINE.match(line)
            if include_match:
                for included in self._resolve_include(include_match.group(1), base_dir):
                    if included not in includes:
                        includes.append(included)

        for included in includes:
            if included in visited:
                self.logger.debug("Already traversed %s, not including again", included)
                continue
            visited.add(included)
            self.logger.debug("Found & will traverse included file %s", included)
            try:
                yield from self.parse(included, base_dir, visited)
            except OSError as e:
                self.logger.warning("Cannot read included file %s: %s", included, e)

    def _resolve_include(self, value: str, base_dir: Path) -> list[Path]:
        """Resolve the paths named by one Include directive.

        Args:
            value: Everything after the Include keyword
            base_dir: Directory for relative paths

        Returns:
            Absolute paths, glob patterns expanded in sorted order
        """
        paths: list[Path] = []
        for token in value.split():
            try:
                candidate = Path(token).expanduser()
            except RuntimeError as e:
                # ~user with no resolvable home directory
                self.logger.debug("Skipping Include path %s: %s", token, e)
                continue
            if not candidate.is_absolute():
                candidate = base_dir / candidate
            candidate = _absolute(candidate)

            if GLOB_CHARS.search(str(candidate)):
                matches = sorted(glob.glob(str(candidate)))
                if not matches:
                    self.logger.debug("Include pattern %s matched nothing", candidate)
                paths.extend(_absolute(m) for m in matches)
            else:
                paths.append(candidate)
        return paths
