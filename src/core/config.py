"""Runtime configuration model for TAMI.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from datetime import datetime

from core.constants import (
    DEFAULT_MIN_PAST_YEAR_SALES,
    DEFAULT_RECENT_WINDOW_MONTHS,
    DEFAULT_TRAILING_WINDOW_MONTHS,
)
from core.errors import TamiConfigError
from core.time_windows import parse_instant


@dataclass(frozen=True)
class TamiConfig:
    """Validated runtime configuration.

    Attributes:
        reference_time: Optional fixed instant replacing wall-clock now.
        min_past_year_sales: Trailing-window sales an asset needs to qualify.
        trailing_window_months: Length of the sale-count window.
        recent_window_months: Length of the recency window.
    """

    reference_time: datetime | None = None
    min_past_year_sales: int = DEFAULT_MIN_PAST_YEAR_SALES
    trailing_window_months: int = DEFAULT_TRAILING_WINDOW_MONTHS
    recent_window_months: int = DEFAULT_RECENT_WINDOW_MONTHS

    @classmethod
    def from_env(cls) -> "TamiConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            TamiConfigError: If environment values are invalid.
        """
        reference_time = _parse_reference_time(os.getenv("TAMI_REFERENCE_TIME"))
        min_sales = _parse_positive_int(
            "TAMI_MIN_PAST_YEAR_SALES",
            os.getenv("TAMI_MIN_PAST_YEAR_SALES", str(DEFAULT_MIN_PAST_YEAR_SALES)),
        )
        trailing_months = _parse_positive_int(
            "TAMI_TRAILING_WINDOW_MONTHS",
            os.getenv("TAMI_TRAILING_WINDOW_MONTHS", str(DEFAULT_TRAILING_WINDOW_MONTHS)),
        )
        recent_months = _parse_positive_int(
            "TAMI_RECENT_WINDOW_MONTHS",
            os.getenv("TAMI_RECENT_WINDOW_MONTHS", str(DEFAULT_RECENT_WINDOW_MONTHS)),
        )
        if recent_months > trailing_months:
            raise TamiConfigError(
                "Invalid TAMI_RECENT_WINDOW_MONTHS value: "
                f"{recent_months} exceeds the trailing window of {trailing_months} months. "
                "Use a recency window no longer than the trailing window."
            )
        return cls(
            reference_time=reference_time,
            min_past_year_sales=min_sales,
            trailing_window_months=trailing_months,
            recent_window_months=recent_months,
        )


def _parse_reference_time(raw_value: str | None) -> datetime | None:
    """Parse the optional reference time override.

    Args:
        raw_value: Raw string from environment, if set.

    Returns:
        Timezone-aware instant or None when unset.

    Raises:
        TamiConfigError: If value is not ISO-8601.
    """
    if raw_value is None or not raw_value.strip():
        return None
    try:
        return parse_instant(raw_value)
    except ValueError as error:
        raise TamiConfigError(
            "Invalid TAMI_REFERENCE_TIME value: "
            f"expected ISO-8601 instant, got '{raw_value}'. "
            "Use a value like 2024-05-01T00:00:00+00:00."
        ) from error


def _parse_positive_int(name: str, raw_value: str) -> int:
    """Parse a positive integer environment value.

    Args:
        name: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        Parsed integer.

    Raises:
        TamiConfigError: If value is not a positive integer.
    """
    try:
        value = int(raw_value)
    except ValueError as error:
        raise TamiConfigError(
            f"Invalid {name} value: expected integer, got '{raw_value}'. "
            f"Set {name} to a positive whole number."
        ) from error
    if value < 1:
        raise TamiConfigError(
            f"Invalid {name} value: expected positive integer, got {value}."
        )
    return value
