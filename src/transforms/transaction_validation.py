"""Transaction validation run before ordering.

This module rejects transactions the index cannot price.
Prices are never clamped or interpolated.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Hashable, Iterable

from core.errors import TamiValidationError
from core.types import Transaction


def validate_transactions(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Validate every transaction and return them as a list.

    Args:
        transactions: Candidate transactions.

    Returns:
        The same transactions in input order.

    Raises:
        TamiValidationError: If any transaction is invalid.
    """
    validated: list[Transaction] = []
    for position, transaction in enumerate(transactions):
        _validate_transaction(transaction, position)
        validated.append(transaction)
    return validated


def _validate_transaction(transaction: Transaction, position: int) -> None:
    """Check price, asset id and timestamp of one transaction."""
    if not isinstance(transaction.asset_id, Hashable):
        raise TamiValidationError(
            f"Transaction {position} has unhashable asset id "
            f"{transaction.asset_id!r}. Use a string or integer identifier."
        )
    price = transaction.price
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise TamiValidationError(
            f"Transaction {position} for asset {transaction.asset_id!r} has "
            f"non-numeric price {price!r}."
        )
    if not math.isfinite(price):
        raise TamiValidationError(
            f"Transaction {position} for asset {transaction.asset_id!r} has "
            f"non-finite price {price!r}."
        )
    if price < 0:
        raise TamiValidationError(
            f"Transaction {position} for asset {transaction.asset_id!r} has "
            f"negative price {price}. Prices must be zero or greater."
        )
    if not isinstance(transaction.timestamp, datetime):
        raise TamiValidationError(
            f"Transaction {position} for asset {transaction.asset_id!r} has "
            f"timestamp {transaction.timestamp!r}; expected a datetime."
        )
    if transaction.timestamp.tzinfo is None:
        raise TamiValidationError(
            f"Transaction {position} for asset {transaction.asset_id!r} has a "
            "naive timestamp. Attach a timezone, e.g. timezone.utc."
        )
