# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cash register.

The register is a flat list of movements. Its balance is not stored: it is
reduced from the movements every time, income adding and every other type
subtracting. Collecting on a receipt posts one income movement.
"""

from __future__ import annotations

import logging
from datetime import date as date_type
from typing import Iterable, Optional, Union

from ..core.primitives import CashMovementTypeEnum
from ..models import CashMovement
from .receipts import ReceiptDraft

logger = logging.getLogger(__name__)


def cash_balance(movements: Iterable[CashMovement]) -> float:
    """
    Current register balance.

    Example:
        ```python
        cash_balance([
            CashMovement(type="income", amount=1000),
            CashMovement(type="expense", amount=250),
        ])
        # 750.0
        ```
    """
    return sum(
        (
            m.amount if m.type == CashMovementTypeEnum.INCOME.value else -m.amount
            for m in movements
        ),
        0.0,
    )


def income_movement(
    draft: ReceiptDraft, date: Union[str, date_type]
) -> Optional[CashMovement]:
    """
    Income movement for the amount collected on a receipt.

    Args:
        draft: Receipt being issued
        date: Collection date, supplied by the caller

    Returns:
        CashMovement for ``draft.paid_amount`` in the receipt's currency,
        or None when nothing was collected.
    """
    if draft.paid_amount <= 0:
        logger.debug(f"No cash collected from tenant {draft.tenant_id!r}")
        return None

    return CashMovement(
        type=CashMovementTypeEnum.INCOME,
        description=f"Cobro {draft.tenant}",
        amount=draft.paid_amount,
        currency=draft.currency,
        date=date,
        tenant=draft.tenant,
        property=draft.property,
    )
