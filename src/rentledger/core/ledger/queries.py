# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Ledger query layer over obligations and payments.

Portfolio-wide views of the same pooled reconciliation the balance
calculator performs per tenant, returned as pandas objects. Monthly
outputs use a monthly ``PeriodIndex``.
"""

from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd

from ..primitives import EntityId
from .converter import RecordFrameConverter
from .records import MonthlyObligation, Payment


class LedgerQueries:
    """
    Aggregations over an obligations/payments snapshot.

    The snapshot is converted to DataFrames once at construction; every
    query is recomputed from those frames.
    """

    def __init__(
        self,
        obligations: Iterable[MonthlyObligation],
        payments: Iterable[Payment] = (),
    ):
        self.obligations = RecordFrameConverter.obligations_to_frame(obligations)
        self.payments = RecordFrameConverter.payments_to_frame(payments)

    def accrued_by_month(self) -> pd.Series:
        """Total rent accrued per calendar month across all tenants, chronological."""
        if self.obligations.empty:
            return pd.Series(
                dtype=float, index=pd.PeriodIndex([], freq="M", name="month"), name="amount"
            )
        return self.obligations.groupby("month", sort=True)["amount"].sum()

    def accrued_by_tenant(self) -> pd.Series:
        """Total rent accrued per tenant, in first-seen tenant order."""
        return self.obligations.groupby("tenant_id", sort=False)["amount"].sum()

    def paid_by_tenant(self) -> pd.Series:
        """Total paid per tenant, in first-seen tenant order."""
        return self.payments.groupby("tenant_id", sort=False)["amount"].sum()

    def months_owed(self, tenant_id: EntityId) -> pd.PeriodIndex:
        """Months a tenant owes rent for, chronological."""
        months = self.obligations.loc[
            self.obligations["tenant_id"] == tenant_id, "month"
        ]
        return pd.PeriodIndex(months.sort_values(), freq="M")

    def balances(self, tenant_ids: Optional[Iterable[EntityId]] = None) -> pd.DataFrame:
        """
        Pooled financial status for each tenant.

        Args:
            tenant_ids: Tenants to report, in order. Defaults to every tenant
                appearing in the obligations, then payments-only tenants.

        Returns:
            DataFrame indexed by ``tenant_id`` with ``total_obligation``,
            ``total_paid``, ``balance`` and ``is_up_to_date`` columns.
            Unknown tenants report zeros and are up to date.
        """
        accrued = self.accrued_by_tenant()
        paid = self.paid_by_tenant()

        if tenant_ids is None:
            index = pd.Index(
                list(dict.fromkeys(list(accrued.index) + list(paid.index))),
                dtype=object,
            )
        else:
            index = pd.Index(list(tenant_ids), dtype=object)
        index.name = "tenant_id"

        total_obligation = [float(accrued.get(t, 0.0)) for t in index]
        total_paid = [float(paid.get(t, 0.0)) for t in index]

        frame = pd.DataFrame(
            {"total_obligation": total_obligation, "total_paid": total_paid},
            index=index,
            dtype=float,
        )
        frame["balance"] = frame["total_obligation"] - frame["total_paid"]
        frame["is_up_to_date"] = frame["balance"] <= 0
        return frame
