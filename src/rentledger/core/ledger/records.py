# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Core data records for the rent ledger.

Records are plain frozen dataclasses: they are produced fresh on every
computation and carry no identity beyond their fields.
"""

from __future__ import annotations

from dataclasses import dataclass

from rentledger.core.primitives import EntityId


@dataclass(frozen=True, slots=True)
class MonthlyObligation:
    """
    Rent owed by one tenant for one calendar month.

    Attributes:
        tenant_id: Tenant owing the rent
        month: Calendar month key ("YYYY-MM")
        amount: Linked property's rent at generation time
    """

    tenant_id: EntityId
    month: str
    amount: float


@dataclass(frozen=True, slots=True)
class Payment:
    """A tenant payment. Payments are pooled per tenant, never per month."""

    tenant_id: EntityId
    amount: float


@dataclass(frozen=True, slots=True)
class TenantFinancialStatus:
    """
    Pooled reconciliation of a tenant's obligations against payments.

    Attributes:
        tenant_id: Tenant the status belongs to
        total_obligation: Sum of the tenant's obligation amounts
        total_paid: Sum of the tenant's payment amounts
        balance: total_obligation - total_paid (negative when overpaid)
        is_up_to_date: True when balance <= 0
    """

    tenant_id: EntityId
    total_obligation: float
    total_paid: float
    balance: float
    is_up_to_date: bool


@dataclass(frozen=True, slots=True)
class ObligationAllocation:
    """
    One obligation with the share of pooled payments applied to it.

    Attributes:
        tenant_id: Tenant owing the rent
        month: Calendar month key ("YYYY-MM")
        amount: Obligation amount
        paid: Portion of the tenant's payments applied to this month
        outstanding: amount - paid
    """

    tenant_id: EntityId
    month: str
    amount: float
    paid: float
    outstanding: float
