# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reusable Pydantic validation helpers for datastore records.

Rows are written by form screens that do not always enforce types, so
numeric and date columns are normalized here before field validation.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Any, Optional


def coerce_amount(value: Any) -> Any:
    """
    Read a monetary column, falling back to 0 for blanks and garbage.

    Non-numeric and non-finite values become ``0.0``. Numeric values are
    returned unchanged so field constraints (e.g. ``ge=0``) still apply.
    """
    if isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount):
        return 0.0
    return amount


def coerce_date_string(value: Any) -> Optional[Any]:
    """Render ``date`` values as ISO strings; blank strings become None."""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str) and not value.strip():
        return None
    return value
