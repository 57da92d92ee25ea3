"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

_TESTS_PATH = Path(__file__).resolve().parent
_SRC_PATH = _TESTS_PATH.parent / "src"
for _path in (_SRC_PATH, _TESTS_PATH):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

from core.types import Transaction  # noqa: E402
from market_fixtures import REFERENCE_TIME, days_ago, months_ago  # noqa: E402


@pytest.fixture
def reference_time() -> datetime:
    """Fixed reference instant used as ``now``."""
    return REFERENCE_TIME


@pytest.fixture
def market_history() -> list[Transaction]:
    """Unordered sales of four collectibles spanning two years."""
    return [
        Transaction(asset_id="Lavender", price=500, timestamp=days_ago(3)),
        Transaction(asset_id="Hyacinth", price=700, timestamp=months_ago(1)),
        Transaction(asset_id="Mars", price=1200, timestamp=days_ago(2)),
        Transaction(asset_id="Nyx", price=612, timestamp=months_ago(24)),
        Transaction(asset_id="Hyacinth", price=400, timestamp=days_ago(3)),
        Transaction(asset_id="Nyx", price=1200, timestamp=days_ago(1)),
        Transaction(asset_id="Mars", price=612, timestamp=days_ago(42)),
    ]


@pytest.fixture
def liquid_history() -> list[Transaction]:
    """Ordered Hyacinth and Mars sales that survive the liquidity filter."""
    return [
        Transaction(asset_id="Mars", price=612, timestamp=days_ago(42)),
        Transaction(asset_id="Hyacinth", price=700, timestamp=months_ago(1)),
        Transaction(asset_id="Hyacinth", price=400, timestamp=days_ago(3)),
        Transaction(asset_id="Mars", price=1200, timestamp=days_ago(2)),
    ]
