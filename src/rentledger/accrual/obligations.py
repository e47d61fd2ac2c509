# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rent obligation accrual.

Expands each tenant's contract window into one obligation per calendar month
the window touches, priced at the linked property's current rent. Tenants
without contract bounds or a resolvable property are skipped: a newly
created tenant has neither, and that is a normal state rather than an error.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from ..core.ledger import MonthlyObligation
from ..core.primitives import EntityId, contract_months, to_month
from ..models import Property, Tenant

logger = logging.getLogger(__name__)


def _ineligibility_reason(
    tenant: Tenant, rent_by_property: Dict[EntityId, float]
) -> Optional[str]:
    if not tenant.contract_start:
        return "no contract start"
    if not tenant.contract_end:
        return "no contract end"
    if tenant.property_id is None:
        return "not linked to a property"
    if tenant.property_id not in rent_by_property:
        return f"property {tenant.property_id!r} not found"
    if to_month(tenant.contract_start) is None or to_month(tenant.contract_end) is None:
        return "unreadable contract dates"
    return None


def generate_obligations(
    tenants: Iterable[Tenant], properties: Iterable[Property]
) -> List[MonthlyObligation]:
    """
    Generate the monthly rent obligations for every eligible tenant.

    Args:
        tenants: Tenant snapshot, in display order
        properties: Property snapshot

    Returns:
        Obligations in tenant order, chronological within each tenant.
        A contract touching any day of a month owes that whole month; a
        contract ending before it starts owes nothing.

    Example:
        ```python
        tenant = Tenant(id=1, property_id=10,
                        contract_start="2024-01-15", contract_end="2024-03-10")
        generate_obligations([tenant], [Property(id=10, rent=1000)])
        # 2024-01, 2024-02 and 2024-03, each for 1000.0
        ```
    """
    # First match wins when ids repeat, as with a linear search
    rent_by_property: Dict[EntityId, float] = {}
    for prop in properties:
        rent_by_property.setdefault(prop.id, prop.rent)

    obligations: List[MonthlyObligation] = []
    tenant_count = 0
    for tenant in tenants:
        tenant_count += 1
        reason = _ineligibility_reason(tenant, rent_by_property)
        if reason is not None:
            logger.debug(f"Skipping tenant {tenant.id!r}: {reason}")
            continue

        rent = rent_by_property[tenant.property_id]
        obligations.extend(
            MonthlyObligation(tenant_id=tenant.id, month=month, amount=rent)
            for month in contract_months(tenant.contract_start, tenant.contract_end)
        )

    logger.debug(
        f"Generated {len(obligations)} obligations for {tenant_count} tenants"
    )
    return obligations
