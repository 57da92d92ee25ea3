"""Shared typed models.

This module defines immutable data models passed between the ordering,
filtering, index and aggregation stages to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Hashable

AssetId = Hashable


@dataclass(frozen=True)
class Transaction:
    """One observed sale of an asset.

    Attributes:
        price: Non-negative sale price.
        asset_id: Opaque hashable asset identifier.
        timestamp: Timezone-aware instant of the sale.
    """

    price: float
    asset_id: AssetId
    timestamp: datetime


@dataclass(frozen=True)
class IndexValueRecord:
    """Chain index level right after incorporating one transaction.

    Attributes:
        price: Sale price of the transaction.
        asset_id: Asset identifier of the transaction.
        index_value: Chain index level after this transaction.
        transaction: Originating transaction.
    """

    price: float
    asset_id: AssetId
    index_value: float
    transaction: Transaction


@dataclass(frozen=True)
class RatioRecord:
    """Last index record of one asset with its price-to-index ratio.

    Attributes:
        record: Most recent index record for the asset.
        index_ratio: ``record.price / record.index_value``.
    """

    record: IndexValueRecord
    index_ratio: float

    @property
    def asset_id(self) -> AssetId:
        """Asset identifier of the underlying record."""
        return self.record.asset_id


@dataclass(frozen=True)
class LiquidityWindow:
    """Trailing windows resolved once per filter invocation.

    Attributes:
        reference_time: Instant the windows are measured back from.
        one_year_ago: Start of the trailing sale-count window.
        six_months_ago: Start of the recency window.
        min_sale_count: Trailing-window sales needed to qualify.
    """

    reference_time: datetime
    one_year_ago: datetime
    six_months_ago: datetime
    min_sale_count: int


@dataclass(frozen=True)
class TamiResult:
    """Output artifacts of one pipeline run.

    Attributes:
        reference_time: Instant used by the liquidity filter.
        ordered_transactions: Input sorted chronologically.
        filtered_transactions: Transactions of liquid assets.
        index_history: One index record per filtered transaction.
        index_value: Level of the last index record, 0 when empty.
        ratios: One ratio record per retained asset.
        tami: Time-adjusted market index scalar.
    """

    reference_time: datetime
    ordered_transactions: tuple[Transaction, ...]
    filtered_transactions: tuple[Transaction, ...]
    index_history: tuple[IndexValueRecord, ...]
    index_value: float
    ratios: tuple[RatioRecord, ...]
    tami: float
