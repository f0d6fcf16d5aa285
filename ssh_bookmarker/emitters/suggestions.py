"""JSON output for host suggestions."""

import json
from collections.abc import Iterable

from ssh_bookmarker.models import RankedEntry


def to_json(entries: Iterable[RankedEntry | dict[str, str]]) -> str:
    """Serialize suggestions as a JSON array of ``{title, label, badge}``."""
    records = [e.to_dict() if isinstance(e, RankedEntry) else e for e in entries]
    return json.dumps(records)
