# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from ..core.primitives import CashMovementTypeEnum, EntityId, Record
from ..core.primitives.validation import coerce_amount, coerce_date_string


class CashMovement(Record):
    """
    A cash register entry.

    ``type`` is stored as free text; ``income`` adds to the register
    balance and every other type subtracts. Movements created from a
    receipt name the tenant and property the payment came from.
    """

    id: Optional[EntityId] = None
    type: str = Field(
        default=CashMovementTypeEnum.INCOME.value,
        description="'income' or an outgoing type such as 'expense'",
    )
    description: str = ""
    category: Optional[str] = None
    amount: float = 0.0
    currency: str = "ARS"
    date: Optional[str] = None
    tenant: Optional[str] = None
    property: Optional[str] = None
    comment: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v):
        if isinstance(v, CashMovementTypeEnum):
            return v.value
        return v

    @field_validator("amount", mode="before")
    @classmethod
    def normalize_amount(cls, v):
        return coerce_amount(v)

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, v):
        return coerce_date_string(v)
