# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import field_validator

from ..core.primitives import EntityId, PositiveFloat, PropertyStatusEnum, Record
from ..core.primitives.validation import coerce_amount


class Property(Record):
    """
    A rentable unit.

    ``rent`` is the monthly amount in the property's currency; the accrual
    engine reads it once per tenant when generating obligations. ``expenses``
    (building expenses) only appear on drafted receipts.
    """

    id: EntityId
    name: str = ""
    type: str = ""
    building: str = ""
    address: str = ""
    rent: PositiveFloat = 0.0
    expenses: PositiveFloat = 0.0
    status: PropertyStatusEnum = PropertyStatusEnum.AVAILABLE

    @field_validator("rent", "expenses", mode="before")
    @classmethod
    def normalize_amount(cls, v):
        return coerce_amount(v)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v):
        # Unknown labels read as available
        try:
            return PropertyStatusEnum(v)
        except ValueError:
            return PropertyStatusEnum.AVAILABLE
