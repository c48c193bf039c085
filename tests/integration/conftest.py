"""Integration test fixtures.

Provides a fully wired AppState (real PageCache, real Fetcher, httpx client
that respx can intercept) and a helper that mocks the site's index pages.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import httpx
import pytest

from folkcontext.cache import PageCache
from folkcontext.config import Settings
from folkcontext.fetcher import Fetcher
from folkcontext.state import AppState

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator
    from pathlib import Path


@pytest.fixture()
def subprocess_env(tmp_path: Path) -> dict[str, str]:
    """Baseline env dict for subprocess-based MCP integration tests.

    Runs from an empty directory so that no local folkcontext.yaml is picked up.
    """
    env = os.environ.copy()
    env["FOLKCONTEXT__LOGGING__LEVEL"] = "WARNING"
    env["HOME"] = str(tmp_path)
    return env


@pytest.fixture()
async def app_state() -> AsyncGenerator[AppState, None]:
    """Full AppState wired the same way the server lifespan wires it."""
    async with httpx.AsyncClient() as client:
        cache = PageCache(max_entries=32)
        state = AppState(
            settings=Settings(),
            http_client=client,
            cache=cache,
            fetcher=Fetcher(client, cache),
        )
        yield state
