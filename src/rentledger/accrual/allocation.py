# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Oldest-first allocation of pooled payments to monthly obligations.

This is an opt-in view for callers that want to show which months remain
unpaid. It does not change the pooled status: the outstanding amounts it
reports always add up to the pooled balance (floored at zero), and any
overpayment is left unallocated.
"""

from __future__ import annotations

from typing import Iterable, List

from ..core.ledger import MonthlyObligation, ObligationAllocation, Payment
from ..core.primitives import EntityId


def allocate_payments_oldest_first(
    tenant_id: EntityId,
    obligations: Iterable[MonthlyObligation],
    payments: Iterable[Payment],
) -> List[ObligationAllocation]:
    """
    Apply a tenant's pooled payments to its obligations, oldest month first.

    Args:
        tenant_id: Tenant to allocate for
        obligations: Full obligation list; filtered by ``tenant_id`` here
        payments: Full payment list; filtered by ``tenant_id`` here

    Returns:
        One allocation per tenant obligation, in chronological month order.
    """
    tenant_obligations = sorted(
        (o for o in obligations if o.tenant_id == tenant_id),
        key=lambda o: o.month,
    )
    remaining = sum((p.amount for p in payments if p.tenant_id == tenant_id), 0.0)

    allocations: List[ObligationAllocation] = []
    for obligation in tenant_obligations:
        paid = min(max(remaining, 0.0), obligation.amount)
        remaining -= paid
        allocations.append(
            ObligationAllocation(
                tenant_id=tenant_id,
                month=obligation.month,
                amount=obligation.amount,
                paid=paid,
                outstanding=obligation.amount - paid,
            )
        )
    return allocations
