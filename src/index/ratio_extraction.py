"""Per-asset price-to-index ratios.

This module keeps the last index record of every asset and relates
its sale price to the index level at that moment.
"""

from __future__ import annotations

from typing import Iterable

from core.errors import TamiComputationError
from core.types import AssetId, IndexValueRecord, RatioRecord


def extract_index_ratios(index_history: Iterable[IndexValueRecord]) -> list[RatioRecord]:
    """Build one ratio record per distinct asset.

    Later records overwrite earlier ones for the same asset, so the
    history must be in the order produced by the chain index builder.
    Assets appear in order of their first record.

    Args:
        index_history: Chain index records in processing order.

    Returns:
        Ratio records, one per asset.

    Raises:
        TamiComputationError: If an asset's last index value is zero.
    """
    last_records: dict[AssetId, IndexValueRecord] = {}
    for record in index_history:
        last_records[record.asset_id] = record
    return [_build_ratio(record) for record in last_records.values()]


def _build_ratio(record: IndexValueRecord) -> RatioRecord:
    if record.index_value == 0:
        raise TamiComputationError(
            f"Cannot compute index ratio for asset {record.asset_id!r}: "
            "index value at its last sale is zero."
        )
    return RatioRecord(record=record, index_ratio=record.price / record.index_value)
