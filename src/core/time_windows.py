"""Calendar window helpers.

This module resolves trailing calendar windows and parses instants.
Month offsets overflow into the next month instead of clamping.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from core.errors import TamiValidationError
from core.types import LiquidityWindow


def shift_months(instant: datetime, months: int) -> datetime:
    """Shift an instant by whole calendar months.

    Days past the end of the target month roll into the following
    month, so Aug 31 shifted back six months lands on Mar 3 (Mar 2 in
    leap years) and Feb 29 shifted back a year lands on Mar 1.

    Args:
        instant: Instant to shift.
        months: Signed month offset.

    Returns:
        Shifted instant with the same wall-clock time and tzinfo.
    """
    month_index = instant.month - 1 + months
    year = instant.year + month_index // 12
    month = month_index % 12 + 1
    first_of_month = instant.replace(year=year, month=month, day=1)
    return first_of_month + timedelta(days=instant.day - 1)


def build_liquidity_window(
    reference_time: datetime,
    trailing_months: int,
    recent_months: int,
    min_sale_count: int,
) -> LiquidityWindow:
    """Resolve both trailing windows from one reference instant.

    Raises:
        TamiValidationError: If the reference instant is naive.
    """
    if reference_time.tzinfo is None:
        raise TamiValidationError(
            "Reference time must be timezone-aware, e.g. datetime.now(timezone.utc)."
        )
    return LiquidityWindow(
        reference_time=reference_time,
        one_year_ago=shift_months(reference_time, -trailing_months),
        six_months_ago=shift_months(reference_time, -recent_months),
        min_sale_count=min_sale_count,
    )


def parse_instant(raw_value: str) -> datetime:
    """Parse an ISO-8601 instant, reading naive values as UTC.

    Raises:
        ValueError: If value is not ISO-8601.
    """
    normalized = raw_value.strip()
    if normalized.endswith("Z"):
        normalized = normalized[:-1] + "+00:00"
    parsed = datetime.fromisoformat(normalized)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed
