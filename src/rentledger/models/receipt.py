# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

from pydantic import field_validator

from ..core.primitives import EntityId, Record
from ..core.primitives.validation import coerce_amount


class Receipt(Record):
    """
    An issued rent receipt.

    Receipts reference their tenant by name, not by id. ``month`` holds the
    Spanish month name typed on the receipt form ("Enero", "Febrero", ...).
    """

    id: EntityId
    receipt_number: str = ""
    tenant: str = ""
    property: str = ""
    building: str = ""
    month: str = ""
    year: Optional[int] = None
    rent: float = 0.0
    expenses: float = 0.0
    previous_balance: float = 0.0
    total: float = 0.0
    paid_amount: float = 0.0
    remaining_balance: float = 0.0
    currency: str = "ARS"
    payment_method: str = "efectivo"
    status: str = "pendiente"
    created_date: Optional[str] = None

    @field_validator(
        "rent",
        "expenses",
        "previous_balance",
        "total",
        "paid_amount",
        "remaining_balance",
        mode="before",
    )
    @classmethod
    def normalize_amount(cls, v):
        return coerce_amount(v)
