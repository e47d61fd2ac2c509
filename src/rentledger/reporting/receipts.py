# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from ..core.ledger import TenantFinancialStatus
from ..core.primitives import (
    EntityId,
    GlobalSettings,
    PaymentMethodEnum,
    ReceiptStatusEnum,
    month_name,
)
from ..models import Property, Tenant

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReceiptDraft:
    """
    Amounts for a receipt about to be issued.

    ``total`` is the month's rent and building expenses plus the balance
    carried from before; ``remaining_balance`` is what is left after
    ``paid_amount``. Numbering and issue date are assigned by the caller.
    """

    tenant_id: EntityId
    tenant: str
    property: str
    building: str
    month: str
    year: int
    rent: float
    expenses: float
    previous_balance: float
    total: float
    paid_amount: float
    remaining_balance: float
    currency: str
    payment_method: PaymentMethodEnum
    status: ReceiptStatusEnum


def draft_receipt(
    tenant: Tenant,
    properties: Iterable[Property],
    status: Optional[TenantFinancialStatus],
    paid_amount: float,
    month: Union[int, str],
    year: int,
    settings: Optional[GlobalSettings] = None,
) -> ReceiptDraft:
    """
    Draft a receipt for a tenant's payment.

    Args:
        tenant: Tenant paying
        properties: Property snapshot used to price rent and expenses
        status: Tenant's pooled status; its balance is carried as the
            previous balance (negative when the tenant holds credit).
            None carries nothing.
        paid_amount: Amount received
        month: Month number (1-12) or month name
        year: Receipt year
        settings: Currency, payment method and rounding defaults

    Returns:
        ReceiptDraft marked ``pendiente`` while a balance remains, else ``pagado``.
    """
    settings = settings or GlobalSettings()
    precision = settings.reporting.decimal_precision

    prop = next((p for p in properties if p.id == tenant.property_id), None)
    if prop is None:
        logger.debug(f"Drafting receipt for tenant {tenant.id!r} without a property")

    rent = prop.rent if prop is not None else 0.0
    expenses = prop.expenses if prop is not None else 0.0
    previous_balance = round(status.balance, precision) if status is not None else 0.0
    total = round(rent + expenses + previous_balance, precision)
    remaining = round(total - paid_amount, precision)

    return ReceiptDraft(
        tenant_id=tenant.id,
        tenant=tenant.name,
        property=tenant.property,
        building=prop.building if prop is not None else "",
        month=month_name(month),
        year=year,
        rent=rent,
        expenses=expenses,
        previous_balance=previous_balance,
        total=total,
        paid_amount=paid_amount,
        remaining_balance=remaining,
        currency=settings.receipts.currency,
        payment_method=settings.receipts.payment_method,
        status=ReceiptStatusEnum.PENDING if remaining > 0 else ReceiptStatusEnum.PAID,
    )
