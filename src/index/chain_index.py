"""Chained index construction with divisor re-basing.

This module walks filtered transactions and emits one index level per
transaction. When a new asset joins the basket the divisor absorbs the
jump in aggregate value, so composition changes alone never move the
reported level.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from core.constants import INITIAL_DIVISOR
from core.errors import TamiComputationError
from core.types import AssetId, IndexValueRecord, Transaction


@dataclass
class ChainIndexState:
    """Running state carried from one transaction to the next.

    Attributes:
        latest_prices: Most recent observed price per asset.
        aggregate_value: Exact sum of ``latest_prices`` values.
        last_index_value: Level emitted for the previous transaction.
        divisor: Current re-basing divisor.
    """

    latest_prices: dict[AssetId, float] = field(default_factory=dict)
    aggregate_value: float = 0.0
    last_index_value: float | None = None
    divisor: float = INITIAL_DIVISOR


def build_index_history(transactions: Iterable[Transaction]) -> list[IndexValueRecord]:
    """Build the chain index history for ordered transactions.

    Args:
        transactions: Filtered transactions in chronological order.

    Returns:
        One index record per transaction, in processing order.

    Raises:
        TamiComputationError: If re-basing divides by a zero index level.
    """
    state = ChainIndexState()
    history: list[IndexValueRecord] = []
    for transaction in transactions:
        history.append(advance_chain_index(state, transaction))
    return history


def advance_chain_index(state: ChainIndexState, transaction: Transaction) -> IndexValueRecord:
    """Incorporate one transaction into the chain state.

    Args:
        state: Running chain state, updated in place.
        transaction: Next transaction in chronological order.

    Returns:
        Index record for this transaction.

    Raises:
        TamiComputationError: If re-basing divides by a zero index level.
    """
    is_first_sale = transaction.asset_id not in state.latest_prices
    state.latest_prices[transaction.asset_id] = transaction.price
    state.aggregate_value = math.fsum(state.latest_prices.values())
    asset_count = len(state.latest_prices)
    raw_index_value = state.aggregate_value / (asset_count * state.divisor)
    if state.last_index_value is None:
        state.last_index_value = raw_index_value
        return _build_record(transaction, raw_index_value)
    next_divisor = state.divisor
    if is_first_sale:
        next_divisor = _rebase_divisor(state, raw_index_value, transaction)
    weighted_index_value = state.aggregate_value / (asset_count * next_divisor)
    state.last_index_value = weighted_index_value
    state.divisor = next_divisor
    return _build_record(transaction, weighted_index_value)


def _rebase_divisor(
    state: ChainIndexState,
    raw_index_value: float,
    transaction: Transaction,
) -> float:
    """Scale the divisor so the new basket reproduces the previous level."""
    if not state.last_index_value:
        raise TamiComputationError(
            f"Cannot re-base index for new asset {transaction.asset_id!r}: "
            "previous index value is zero. Check for zero-priced sales."
        )
    return state.divisor * (raw_index_value / state.last_index_value)


def _build_record(transaction: Transaction, index_value: float) -> IndexValueRecord:
    return IndexValueRecord(
        price=transaction.price,
        asset_id=transaction.asset_id,
        index_value=index_value,
        transaction=transaction,
    )
