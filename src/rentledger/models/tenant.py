# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from ..core.primitives import EntityId, PositiveInt, Record
from ..core.primitives.validation import coerce_amount, coerce_date_string


class Guarantor(Record):
    name: str = ""
    email: str = ""
    phone: str = ""


class Tenant(Record):
    """
    A tenant row as stored by the application.

    Only ``id``, ``property_id`` and the contract bounds feed the accrual
    engine. The remaining columns are carried so a full row can be loaded
    without pre-filtering.

    Attributes:
        id: Tenant identifier
        name: Display name, also used to match receipts to tenants
        property_id: Linked property, or None while the tenant is unlinked
        property: Display label of the linked property
        contract_start: ISO date the contract starts, None if not yet set
        contract_end: ISO date the contract ends, None if not yet set
        update_frequency_months: Rent update cadence (informational only)
        balance: Balance last written to the row by the application
        status: Status label last written to the row by the application
    """

    id: EntityId
    name: str = ""
    email: str = ""
    phone: str = ""
    property_id: Optional[EntityId] = None
    property: str = ""
    contract_start: Optional[str] = None
    contract_end: Optional[str] = None
    update_frequency_months: Optional[PositiveInt] = None
    deposit: float = 0.0
    guarantor: Optional[Guarantor] = None
    balance: float = 0.0
    status: str = Field(default="", description="activo, vencido or pendiente")

    @field_validator("contract_start", "contract_end", mode="before")
    @classmethod
    def normalize_contract_date(cls, v):
        return coerce_date_string(v)

    @field_validator("deposit", "balance", mode="before")
    @classmethod
    def normalize_amount(cls, v):
        return coerce_amount(v)
