"""Chronological transaction ordering.

This module is the first stage of the index pipeline.
Equal timestamps keep their input order.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from core.types import Transaction


def order_transactions(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Sort transactions by ascending timestamp.

    Args:
        transactions: Transactions in any order.

    Returns:
        New list sorted chronologically with a stable sort.
    """
    return sorted(transactions, key=_timestamp_key)


def _timestamp_key(transaction: Transaction) -> datetime:
    return transaction.timestamp
