# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from ..core.ledger import Payment
from ..core.primitives import EntityId
from ..models import Receipt, Tenant

logger = logging.getLogger(__name__)


def payments_from_receipts(
    receipts: Iterable[Receipt], tenants: Iterable[Tenant]
) -> List[Payment]:
    """
    Extract payments from issued receipts.

    Receipts name their tenant rather than referencing its id, so each
    receipt is matched to the first tenant with that exact name. Receipts
    naming no known tenant are dropped.
    """
    tenant_by_name: Dict[str, EntityId] = {}
    for tenant in tenants:
        tenant_by_name.setdefault(tenant.name, tenant.id)

    payments: List[Payment] = []
    for receipt in receipts:
        tenant_id = tenant_by_name.get(receipt.tenant)
        if tenant_id is None:
            logger.debug(
                f"Dropping receipt {receipt.receipt_number or receipt.id!r}: "
                f"no tenant named {receipt.tenant!r}"
            )
            continue
        payments.append(Payment(tenant_id=tenant_id, amount=receipt.paid_amount))
    return payments
