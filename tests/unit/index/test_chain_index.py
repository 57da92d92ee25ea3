"""Unit tests for chain index construction."""

from __future__ import annotations

import pytest

from core.errors import TamiComputationError
from core.types import Transaction
from index.chain_index import ChainIndexState, advance_chain_index, build_index_history
from market_fixtures import days_ago


def test_build_index_history_matches_traced_values(liquid_history) -> None:
    """Index levels should match a hand trace of the re-based chain."""
    history = build_index_history(liquid_history)

    assert [record.index_value for record in history] == pytest.approx(
        [612.0, 612.0, 472.0609756097561, 746.3414634146342]
    )


def test_build_index_history_keeps_transaction_fields(liquid_history) -> None:
    """Each record should carry its originating transaction."""
    history = build_index_history(liquid_history)

    assert [(record.asset_id, record.price, record.transaction) for record in history] == [
        (transaction.asset_id, transaction.price, transaction) for transaction in liquid_history
    ]


def test_single_asset_index_tracks_its_price() -> None:
    """A one-constituent index equals the asset price at every step."""
    transactions = [
        Transaction(asset_id="Mars", price=price, timestamp=days_ago(10 - offset))
        for offset, price in enumerate([612, 500, 999, 1200])
    ]

    history = build_index_history(transactions)

    assert [record.index_value for record in history] == pytest.approx([612, 500, 999, 1200])


def test_new_asset_does_not_move_index_level() -> None:
    """Re-basing keeps the level unchanged when a new asset joins."""
    transactions = [
        Transaction(asset_id="Mars", price=612, timestamp=days_ago(5)),
        Transaction(asset_id="Mars", price=800, timestamp=days_ago(4)),
        Transaction(asset_id=42, price=5000, timestamp=days_ago(3)),
    ]

    history = build_index_history(transactions)

    assert history[2].index_value == pytest.approx(history[1].index_value)


def test_advance_chain_index_rebases_divisor_only_for_new_assets() -> None:
    """Repeat sales leave the divisor unchanged."""
    state = ChainIndexState()
    advance_chain_index(state, Transaction(asset_id="Mars", price=612, timestamp=days_ago(5)))
    advance_chain_index(state, Transaction(asset_id="Hyacinth", price=700, timestamp=days_ago(4)))
    rebased_divisor = state.divisor

    advance_chain_index(state, Transaction(asset_id="Hyacinth", price=400, timestamp=days_ago(3)))

    assert state.divisor == rebased_divisor and rebased_divisor == pytest.approx(656 / 612)


def test_advance_chain_index_tracks_aggregate_value() -> None:
    """Aggregate value replaces an asset's superseded price."""
    state = ChainIndexState()
    for asset_id, price in [("Mars", 612), ("Hyacinth", 700), ("Mars", 1200)]:
        advance_chain_index(state, Transaction(asset_id=asset_id, price=price, timestamp=days_ago(1)))

    assert state.aggregate_value == pytest.approx(1900)


def test_rebasing_against_zero_level_raises() -> None:
    """A zero-priced first sale makes re-basing undefined."""
    transactions = [
        Transaction(asset_id="Mars", price=0, timestamp=days_ago(5)),
        Transaction(asset_id="Hyacinth", price=700, timestamp=days_ago(4)),
    ]

    with pytest.raises(TamiComputationError):
        build_index_history(transactions)


def test_build_index_history_accepts_empty_input() -> None:
    """No transactions produce no records."""
    assert build_index_history([]) == []


def test_single_asset_index_survives_large_price_drop() -> None:
    """A huge sale followed by a small one still tracks the small price."""
    transactions = [
        Transaction(asset_id="Mars", price=1e16, timestamp=days_ago(3)),
        Transaction(asset_id="Mars", price=1.0, timestamp=days_ago(2)),
    ]

    history = build_index_history(transactions)

    assert [record.index_value for record in history] == [1e16, 1.0]


def test_single_asset_index_tracks_fractional_prices_exactly() -> None:
    """Fractional prices are carried without accumulated rounding."""
    prices = [0.1, 0.7, 0.3, 0.9, 0.2]
    transactions = [
        Transaction(asset_id="Mars", price=price, timestamp=days_ago(10 - offset))
        for offset, price in enumerate(prices)
    ]

    history = build_index_history(transactions)

    assert [record.index_value for record in history] == prices


def test_rebasing_after_price_drops_to_zero_raises() -> None:
    """A zero level reached by a repeat sale still blocks re-basing."""
    transactions = [
        Transaction(asset_id="Mars", price=0.3, timestamp=days_ago(5)),
        Transaction(asset_id="Mars", price=0.0, timestamp=days_ago(4)),
        Transaction(asset_id="Hyacinth", price=700, timestamp=days_ago(3)),
    ]

    with pytest.raises(TamiComputationError):
        build_index_history(transactions)
