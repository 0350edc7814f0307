"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Iterator

import pytest

from rangepath.log import reset_logging


@pytest.fixture(autouse=True)
def clean_logging() -> Iterator[None]:
    """Drop handlers installed by CLI runs so later tests start clean."""
    yield
    reset_logging()


@pytest.fixture
def small_ranges() -> list[tuple[int, int]]:
    """Assorted small ranges, including negative and one-element ones."""
    return [(0, 1), (0, 2), (0, 3), (0, 10), (5, 6), (-10, 10), (-7, -2), (100, 133)]
