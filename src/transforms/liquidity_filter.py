"""Liquidity filter for sporadically traded assets.

This module keeps only assets with enough recent trading activity.
Once an asset qualifies, its whole sale history is retained.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from core.config import TamiConfig
from core.time_windows import build_liquidity_window
from core.types import AssetId, LiquidityWindow, Transaction


@dataclass
class _AssetLiquidity:
    """Per-asset counters accumulated during the filter pass."""

    past_year_sale_count: int = 0
    has_recent_sale: bool = False
    is_valid: bool = False


def filter_liquid_transactions(
    transactions: Sequence[Transaction],
    now: datetime,
    config: TamiConfig | None = None,
) -> list[Transaction]:
    """Keep transactions of assets that trade often enough.

    An asset qualifies when it has at least ``min_past_year_sales`` sales
    inside the trailing window and the qualifying sale falls inside the
    recency window. Sales older than the trailing window are not counted
    but are still returned for qualifying assets.

    Args:
        transactions: Chronologically ordered transactions.
        now: Reference instant, sampled once by the caller.
        config: Optional window configuration, read from the environment
            when omitted.

    Returns:
        Transactions of qualifying assets in input order.

    Raises:
        TamiValidationError: If ``now`` is naive.
    """
    settings = config or TamiConfig.from_env()
    window = build_liquidity_window(
        reference_time=now,
        trailing_months=settings.trailing_window_months,
        recent_months=settings.recent_window_months,
        min_sale_count=settings.min_past_year_sales,
    )
    liquidity = _scan_liquidity(transactions, window)
    return [
        transaction
        for transaction in transactions
        if liquidity[transaction.asset_id].is_valid
    ]


def _scan_liquidity(
    transactions: Sequence[Transaction],
    window: LiquidityWindow,
) -> dict[AssetId, _AssetLiquidity]:
    """Run the forward pass that marks each asset valid or not."""
    liquidity: dict[AssetId, _AssetLiquidity] = {}
    for transaction in transactions:
        state = liquidity.setdefault(transaction.asset_id, _AssetLiquidity())
        if state.is_valid:
            continue
        if transaction.timestamp < window.one_year_ago:
            continue
        state.past_year_sale_count += 1
        if transaction.timestamp < window.six_months_ago:
            continue
        state.has_recent_sale = True
        if state.past_year_sale_count >= window.min_sale_count:
            state.is_valid = True
    return liquidity
