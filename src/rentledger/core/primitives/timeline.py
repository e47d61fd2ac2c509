# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calendar-month utilities for contract windows.

Contract dates are normalized to monthly ``pd.Period`` values before any
comparison or stepping. Period arithmetic works on (year, month) ordinals,
so stepping from a January 31st start never drifts into March.
"""

from __future__ import annotations

import re
from datetime import date
from typing import List, Optional, Union

import pandas as pd

from .enums import MONTH_NAMES

DateLike = Union[str, date, pd.Period, None]

# ISO calendar date (or year-month), optionally followed by a time component
_ISO_DATE = re.compile(
    r"^\s*(\d{4})-(\d{2})(?:-(\d{2}))?"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?\s*$"
)


def to_month(value: DateLike) -> Optional[pd.Period]:
    """
    Normalize a date-like value to the calendar month containing it.

    Args:
        value: ISO date string ("2024-01-15", "2024-01"), ``date`` or ``pd.Period``

    Returns:
        Monthly ``pd.Period``, or None when the value is unset or cannot be
        read as a calendar date. Unreadable values never raise.

    Example:
        ```python
        to_month("2024-01-15")  # Period('2024-01', 'M')
        to_month("")            # None
        to_month("not a date")  # None
        ```
    """
    if value is None:
        return None

    # NaT is a datetime subclass, so it must be caught before the date branch
    if value is pd.NaT:
        return None

    if isinstance(value, pd.Period):
        return value.asfreq("M")

    if isinstance(value, date):
        return pd.Period(year=value.year, month=value.month, freq="M")

    if not isinstance(value, str):
        return None

    match = _ISO_DATE.match(value)
    if match is None:
        return None

    year, month, day = match.groups()
    try:
        # Rejects out-of-range months and days (e.g. "2024-02-31")
        date(int(year), int(month), int(day or 1))
    except ValueError:
        return None

    return pd.Period(year=int(year), month=int(month), freq="M")


def month_range(start: pd.Period, end: pd.Period) -> pd.PeriodIndex:
    """
    Inclusive range of calendar months from ``start`` to ``end``.

    An ``end`` before ``start`` yields an empty index rather than a
    backwards range.
    """
    if end < start:
        return pd.PeriodIndex([], freq="M")
    return pd.period_range(start=start, end=end, freq="M")


def month_key(period: pd.Period) -> str:
    """Format a monthly period as a "YYYY-MM" key."""
    return f"{period.year:04d}-{period.month:02d}"


def contract_months(start: DateLike, end: DateLike) -> List[str]:
    """
    Month keys owed for a contract window, in chronological order.

    Every month the window touches counts in full, so a contract running
    from the 15th of January to the 10th of March owes January, February
    and March. Missing or unreadable bounds yield no months.
    """
    start_month = to_month(start)
    end_month = to_month(end)
    if start_month is None or end_month is None:
        return []
    return [month_key(period) for period in month_range(start_month, end_month)]


def month_name(month: Union[int, str]) -> str:
    """
    Receipt month name for a month number (1 = "Enero").

    Names are passed through unchanged.
    """
    if isinstance(month, int):
        if not 1 <= month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {month}")
        return MONTH_NAMES[month - 1]
    return month
