# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for rentledger testing.

Factories build datastore rows with only the fields a test cares about.
"""

from __future__ import annotations

from typing import Optional

import pytest

from rentledger.core.ledger import Payment
from rentledger.models import Property, Receipt, Tenant


# Row factories
def make_tenant(
    tenant_id: int = 1,
    property_id: Optional[int] = 10,
    contract_start: Optional[str] = "2024-01-15",
    contract_end: Optional[str] = "2024-03-10",
    name: Optional[str] = None,
) -> Tenant:
    """
    Create a tenant linked to a property.

    Example:
        >>> make_tenant(2, property_id=None).property_id is None
        True
    """
    return Tenant(
        id=tenant_id,
        name=name or f"Tenant {tenant_id}",
        property_id=property_id,
        property=f"Unit {property_id}" if property_id is not None else "",
        contract_start=contract_start,
        contract_end=contract_end,
    )


def make_property(property_id: int = 10, rent: float = 1000.0, **kwargs) -> Property:
    """Create a property with the given monthly rent."""
    return Property(id=property_id, rent=rent, **kwargs)


def make_receipt(
    receipt_id: int,
    tenant: str,
    paid_amount: float,
    month: str = "Enero",
    year: int = 2024,
    remaining_balance: float = 0.0,
) -> Receipt:
    """Create an issued receipt for a tenant name."""
    return Receipt(
        id=receipt_id,
        receipt_number=f"R-{receipt_id}",
        tenant=tenant,
        month=month,
        year=year,
        paid_amount=paid_amount,
        remaining_balance=remaining_balance,
    )


@pytest.fixture
def sample_tenant() -> Tenant:
    """Contract from 2024-01-15 to 2024-03-10 on property 10."""
    return make_tenant()


@pytest.fixture
def sample_property() -> Property:
    """Property 10 renting for 1000 a month."""
    return make_property()


@pytest.fixture
def payments_1200() -> list[Payment]:
    return [Payment(tenant_id=1, amount=700.0), Payment(tenant_id=1, amount=500.0)]
