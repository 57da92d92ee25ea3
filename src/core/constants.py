"""Core constants used across TAMI modules.

This module centralizes window defaults and source field names.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_MIN_PAST_YEAR_SALES = 2
DEFAULT_TRAILING_WINDOW_MONTHS = 12
DEFAULT_RECENT_WINDOW_MONTHS = 6
INITIAL_DIVISOR = 1.0
EMPTY_INDEX_VALUE = 0.0
ASSET_ID_FIELD = "asset_id"
PRICE_FIELD = "price"
TIMESTAMP_FIELD = "timestamp"
TRANSACTION_FIELDS = (ASSET_ID_FIELD, PRICE_FIELD, TIMESTAMP_FIELD)
SUPPORTED_SOURCE_EXTENSIONS = (".jsonl", ".csv")
