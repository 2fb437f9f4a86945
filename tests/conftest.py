"""Shared pytest fixtures for test modules."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from cricket_tracker import cache


@pytest.fixture(autouse=True)
def reset_report_cache() -> Generator[None]:
    cache.clear()
    yield
    cache.clear()
