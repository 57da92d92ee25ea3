"""Time-adjusted market index aggregation.

This module rescales each asset's last price-to-index ratio by the
current index level and sums across assets.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from core.constants import EMPTY_INDEX_VALUE
from core.types import IndexValueRecord, RatioRecord


def latest_index_value(index_history: Sequence[IndexValueRecord]) -> float:
    """Return the level of the last index record, 0 for empty history."""
    if not index_history:
        return EMPTY_INDEX_VALUE
    return index_history[-1].index_value


def aggregate_tami(current_index_value: float, ratios: Iterable[RatioRecord]) -> float:
    """Sum the time-adjusted value of every asset.

    Args:
        current_index_value: Level of the most recent index record.
        ratios: One ratio record per asset.

    Returns:
        Time-adjusted market index, 0 when there are no assets.
    """
    total = EMPTY_INDEX_VALUE
    for ratio in ratios:
        total += current_index_value * ratio.index_ratio
    return total
