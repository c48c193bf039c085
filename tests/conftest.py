"""Shared test fixtures for the folkcontext test suite."""

from __future__ import annotations

import pytest

from folkcontext.cache import PageCache
from tests.fixtures import FakeClock


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def cache(clock: FakeClock) -> PageCache:
    """Small page cache driven by the fake clock."""
    return PageCache(max_entries=8, clock=clock)
