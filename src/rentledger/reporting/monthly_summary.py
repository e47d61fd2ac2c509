# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Collections summary for one receipt month.

Works from issued receipts rather than the accrual engine: it reports what
was collected and what was left outstanding on the receipts of that month.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Union

import pandas as pd

from ..core.primitives import month_name
from ..models import Receipt


@dataclass(slots=True)
class TenantMonthSummary:
    tenant: str
    paid: float = 0.0
    debt: float = 0.0


@dataclass(frozen=True, slots=True)
class MonthlySummary:
    month: str
    year: int
    rows: List[TenantMonthSummary] = field(default_factory=list)

    @property
    def total_collected(self) -> float:
        return sum((row.paid for row in self.rows), 0.0)

    @property
    def total_debt(self) -> float:
        return sum((row.debt for row in self.rows), 0.0)

    def to_frame(self) -> pd.DataFrame:
        """One row per tenant with ``paid`` and ``debt`` columns, indexed by tenant name."""
        return pd.DataFrame(
            {
                "paid": pd.Series([row.paid for row in self.rows], dtype=float),
                "debt": pd.Series([row.debt for row in self.rows], dtype=float),
            }
        ).set_axis(pd.Index([row.tenant for row in self.rows], name="tenant"))


def summarize_month(
    receipts: Iterable[Receipt], month: Union[int, str], year: int
) -> MonthlySummary:
    """
    Group one month's receipts by tenant.

    Args:
        receipts: Issued receipts
        month: Month number (1-12) or month name as written on receipts;
            names compare case-insensitively
        year: Receipt year

    Returns:
        MonthlySummary with one row per tenant name, in first-seen order.
        ``paid`` sums paid amounts and ``debt`` sums remaining balances.
    """
    name = month_name(month)
    wanted = name.strip().lower()

    grouped: Dict[str, TenantMonthSummary] = {}
    for receipt in receipts:
        if receipt.year != year or receipt.month.strip().lower() != wanted:
            continue
        row = grouped.setdefault(receipt.tenant, TenantMonthSummary(tenant=receipt.tenant))
        row.paid += receipt.paid_amount
        row.debt += receipt.remaining_balance

    return MonthlySummary(month=name, year=year, rows=list(grouped.values()))
