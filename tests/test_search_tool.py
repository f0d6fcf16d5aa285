"""Tests for the search_hosts tool."""

import pytest

from ssh_bookmarker.config import Config
from ssh_bookmarker.tools.search import search_hosts


@pytest.mark.asyncio
async def test_search_hosts_ranks_results(app_config: Config) -> None:
    results = await search_hosts("oo")

    assert results == [
        {"title": "ssh://tootie", "label": "tootie", "badge": "ssh"},
        {"title": "mosh://dookie", "label": "dookie", "badge": "mosh"},
    ]


@pytest.mark.asyncio
async def test_search_hosts_limit(app_config: Config) -> None:
    results = await search_hosts("", limit=1)

    assert [r["label"] for r in results] == ["tootie"]


@pytest.mark.asyncio
async def test_search_hosts_default_limit_from_config(app_config: Config) -> None:
    app_config.settings.max_results = 2

    results = await search_hosts("")

    assert len(results) == 2


@pytest.mark.asyncio
async def test_search_hosts_applies_mosh_override(app_config: Config) -> None:
    app_config.settings.mosh_patterns = ["squirts"]

    results = await search_hosts("squirts")

    # Override sees the whole Host line, so both hosts of the block switch
    assert results == [{"title": "mosh://squirts", "label": "squirts", "badge": "mosh"}]
