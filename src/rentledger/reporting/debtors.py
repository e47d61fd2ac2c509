# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional

import pandas as pd

from ..core.ledger import TenantFinancialStatus
from ..core.primitives import EntityId, GlobalSettings
from ..models import Tenant


@dataclass(frozen=True, slots=True)
class Debtor:
    tenant: Tenant
    debt: float


@dataclass(frozen=True, slots=True)
class DebtorReport:
    """
    Tenants owing rent, largest debt first.

    Attributes:
        debtors: Listed debtors, truncated to the report limit
        debtor_count: Number of tenants with a positive balance
        total_debt: Sum of all positive balances, listed or not
    """

    debtors: List[Debtor] = field(default_factory=list)
    debtor_count: int = 0
    total_debt: float = 0.0

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "tenant_id": pd.Series([d.tenant.id for d in self.debtors], dtype=object),
                "name": [d.tenant.name for d in self.debtors],
                "property": [d.tenant.property for d in self.debtors],
                "debt": pd.Series([d.debt for d in self.debtors], dtype=float),
            }
        )


def find_debtors(
    tenants: Iterable[Tenant],
    statuses: Mapping[EntityId, TenantFinancialStatus],
    settings: Optional[GlobalSettings] = None,
) -> DebtorReport:
    """
    Rank tenants by pooled balance.

    Tenants missing from ``statuses`` owe nothing. Equal debts keep tenant
    order. The listed debtors are capped at
    ``settings.reporting.debtor_limit``; counts and totals are not.
    """
    settings = settings or GlobalSettings()

    debtors = [
        Debtor(tenant=tenant, debt=statuses[tenant.id].balance)
        for tenant in tenants
        if tenant.id in statuses and statuses[tenant.id].balance > 0
    ]
    debtors.sort(key=lambda d: d.debt, reverse=True)

    limit = settings.reporting.debtor_limit
    listed = debtors if limit is None else debtors[:limit]
    return DebtorReport(
        debtors=listed,
        debtor_count=len(debtors),
        total_debt=sum((d.debt for d in debtors), 0.0),
    )
