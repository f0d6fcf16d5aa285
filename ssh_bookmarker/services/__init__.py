"""Services for ssh_bookmarker."""

from ssh_bookmarker.services.conditions import Condition, Conditions, parse_condition
from ssh_bookmarker.services.discovery import HostDiscovery
from ssh_bookmarker.services.index import HostIndex
from ssh_bookmarker.services.protocol import (
    MoshOverride,
    ProtocolOverride,
    ProtocolResolver,
    to_match_expr,
)
from ssh_bookmarker.services.suggest import RankedSuggester, search

__all__ = [
    "Condition",
    "Conditions",
    "HostDiscovery",
    "HostIndex",
    "MoshOverride",
    "ProtocolOverride",
    "ProtocolResolver",
    "RankedSuggester",
    "parse_condition",
    "search",
    "to_match_expr",
]
