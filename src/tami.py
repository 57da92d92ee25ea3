"""Public SDK surface for TAMI.

This module provides a stable import path for index users.
It re-exports the pipeline stages and typed models.
"""

from __future__ import annotations

from core.config import TamiConfig
from core.errors import (
    TamiComputationError,
    TamiConfigError,
    TamiError,
    TamiIngestError,
    TamiValidationError,
)
from core.types import IndexValueRecord, RatioRecord, TamiResult, Transaction
from index.chain_index import build_index_history
from index.ratio_extraction import extract_index_ratios
from index.tami_aggregation import aggregate_tami, latest_index_value
from ingest.input_reader import read_transactions
from ingest.pipeline import compute_tami, run_tami_pipeline
from transforms.liquidity_filter import filter_liquid_transactions
from transforms.transaction_ordering import order_transactions
from transforms.transaction_validation import validate_transactions

__all__ = [
    "IndexValueRecord",
    "RatioRecord",
    "TamiComputationError",
    "TamiConfig",
    "TamiConfigError",
    "TamiError",
    "TamiIngestError",
    "TamiResult",
    "TamiValidationError",
    "Transaction",
    "aggregate_tami",
    "build_index_history",
    "compute_tami",
    "extract_index_ratios",
    "filter_liquid_transactions",
    "latest_index_value",
    "order_transactions",
    "read_transactions",
    "run_tami_pipeline",
    "validate_transactions",
]
