"""TAMI pipeline orchestration.

This module coordinates validation, ordering, liquidity filtering,
chain index construction, ratio extraction and aggregation.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from core.config import TamiConfig
from core.logging_config import get_logger
from core.types import TamiResult, Transaction
from index.chain_index import build_index_history
from index.ratio_extraction import extract_index_ratios
from index.tami_aggregation import aggregate_tami, latest_index_value
from transforms.liquidity_filter import filter_liquid_transactions
from transforms.transaction_ordering import order_transactions
from transforms.transaction_validation import validate_transactions

_LOGGER = get_logger(__name__)


class TamiPipelineRunner:
    """Runner for one end-to-end TAMI computation."""

    def __init__(self, config: TamiConfig, now: datetime | None = None) -> None:
        self._config = config
        self._reference_time = _resolve_reference_time(now, config)

    def run(self, transactions: Iterable[Transaction]) -> TamiResult:
        """Execute every stage and return all intermediate artifacts."""
        validated = validate_transactions(transactions)
        ordered = order_transactions(validated)
        filtered = filter_liquid_transactions(ordered, self._reference_time, self._config)
        _LOGGER.info(
            "liquidity_filter_applied",
            reference_time=self._reference_time.isoformat(),
            input_count=len(ordered),
            retained_count=len(filtered),
        )
        index_history = build_index_history(filtered)
        index_value = latest_index_value(index_history)
        ratios = extract_index_ratios(index_history)
        tami_value = aggregate_tami(index_value, ratios)
        result = TamiResult(
            reference_time=self._reference_time,
            ordered_transactions=tuple(ordered),
            filtered_transactions=tuple(filtered),
            index_history=tuple(index_history),
            index_value=index_value,
            ratios=tuple(ratios),
            tami=tami_value,
        )
        _log_pipeline_completion(result)
        return result


def run_tami_pipeline(
    transactions: Iterable[Transaction],
    now: datetime | None = None,
    config: TamiConfig | None = None,
) -> TamiResult:
    """Run the TAMI pipeline and keep every intermediate artifact.

    Args:
        transactions: Sale transactions in any order.
        now: Optional reference instant for the liquidity filter.
        config: Optional runtime configuration, read from the environment
            when omitted.

    Returns:
        Pipeline result including the TAMI scalar.

    Raises:
        TamiValidationError: If any transaction or the reference time is invalid.
        TamiConfigError: If environment configuration is invalid.
        TamiComputationError: If the index chain divides by zero.
    """
    runner = TamiPipelineRunner(config or TamiConfig.from_env(), now)
    return runner.run(transactions)


def compute_tami(
    transactions: Iterable[Transaction],
    now: datetime | None = None,
    config: TamiConfig | None = None,
) -> float:
    """Compute the time-adjusted market index for transactions.

    Returns:
        TAMI scalar, 0 when no asset is liquid enough.
    """
    return run_tami_pipeline(transactions, now, config).tami


def _resolve_reference_time(now: datetime | None, config: TamiConfig) -> datetime:
    """Pick the explicit instant, then config override, then wall clock."""
    if now is not None:
        return now
    if config.reference_time is not None:
        return config.reference_time
    return datetime.now(timezone.utc)


def _log_pipeline_completion(result: TamiResult) -> None:
    """Log pipeline completion with contextual metadata."""
    _LOGGER.info(
        "tami_pipeline_completed",
        reference_time=result.reference_time.isoformat(),
        input_count=len(result.ordered_transactions),
        retained_count=len(result.filtered_transactions),
        asset_count=len(result.ratios),
        index_value=result.index_value,
        tami=result.tami,
    )
