# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Pooled reconciliation of obligations against payments.

All of a tenant's obligations and all of its payments are summed before the
balance is taken; payments are never matched to specific months here (see
``allocation`` for an oldest-first view).
"""

from __future__ import annotations

from typing import Dict, Iterable, Sequence

from ..core.ledger import MonthlyObligation, Payment, TenantFinancialStatus
from ..core.primitives import EntityId
from ..models import Tenant


def calculate_tenant_financial_status(
    tenant_id: EntityId,
    obligations: Iterable[MonthlyObligation],
    payments: Iterable[Payment],
) -> TenantFinancialStatus:
    """
    Fold a tenant's obligations and payments into a financial status.

    Args:
        tenant_id: Tenant to report on. Ids with no obligations or payments
            (including unknown ids) report zeros and are up to date.
        obligations: Full obligation list; filtered by ``tenant_id`` here
        payments: Full payment list; filtered by ``tenant_id`` here

    Returns:
        TenantFinancialStatus where a negative balance means overpayment.
    """
    total_obligation = sum(
        (o.amount for o in obligations if o.tenant_id == tenant_id), 0.0
    )
    total_paid = sum((p.amount for p in payments if p.tenant_id == tenant_id), 0.0)
    balance = total_obligation - total_paid

    return TenantFinancialStatus(
        tenant_id=tenant_id,
        total_obligation=total_obligation,
        total_paid=total_paid,
        balance=balance,
        is_up_to_date=balance <= 0,
    )


def calculate_portfolio_status(
    tenants: Iterable[Tenant],
    obligations: Sequence[MonthlyObligation],
    payments: Sequence[Payment],
) -> Dict[EntityId, TenantFinancialStatus]:
    """Financial status of every tenant, keyed by tenant id in tenant order."""
    obligations = list(obligations)
    payments = list(payments)
    return {
        tenant.id: calculate_tenant_financial_status(tenant.id, obligations, payments)
        for tenant in tenants
    }
