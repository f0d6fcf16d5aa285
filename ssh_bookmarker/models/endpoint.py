"""Host discovery data models."""

from dataclasses import dataclass
from typing import NamedTuple


class HostBlock(NamedTuple):
    """Hosts declared on one ``Host`` line, paired with one URL scheme."""

    hosts: list[str]
    scheme: str


class KnownHostsEntry(NamedTuple):
    """A nameable host from a known_hosts file.

    ``port`` is set only when the entry used ``[host]:port`` notation.
    """

    host: str
    port: str | None = None


@dataclass(frozen=True)
class Endpoint:
    """A connectable (host, scheme) pair. Equality is exactly this pair."""

    host: str
    scheme: str = "ssh"

    @property
    def url(self) -> str:
        """URL without a port, e.g. ``ssh://example.com``."""
        return f"{self.scheme}://{self.host}"


@dataclass(frozen=True)
class Bookmark:
    """The (host, scheme, port) triple handed to bookmark emitters."""

    host: str
    scheme: str = "ssh"
    port: str | None = None

    @property
    def endpoint(self) -> Endpoint:
        """Dedup identity of this bookmark."""
        return Endpoint(self.host, self.scheme)

    @property
    def url(self) -> str:
        """Bookmark URL, including the port when one is known."""
        if self.port:
            return f"{self.scheme}://{self.host}:{self.port}"
        return f"{self.scheme}://{self.host}"


@dataclass(frozen=True)
class RankedEntry:
    """A suggestion candidate with its ranking data."""

    endpoint: Endpoint
    precision: int
    position: int

    @property
    def host(self) -> str:
        return self.endpoint.host

    @property
    def scheme(self) -> str:
        return self.endpoint.scheme

    @property
    def relevance(self) -> tuple[int, int]:
        """Sort key: earliest substring match first, then discovery order."""
        return (self.precision, self.position)

    def to_dict(self) -> dict[str, str]:
        """Presentation record for suggestion output."""
        return {
            "title": self.endpoint.url,
            "label": self.host,
            "badge": self.scheme,
        }
