# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentledger Core Primitives

Building blocks shared across the library: base models, settings, enums,
constrained types and calendar-month handling.
"""

from .enums import (
    MONTH_NAMES,
    CashMovementTypeEnum,
    PaymentMethodEnum,
    PropertyStatusEnum,
    ReceiptStatusEnum,
)
from .model import Model, Record
from .settings import GlobalSettings, ReceiptSettings, ReportingSettings
from .timeline import (
    contract_months,
    month_key,
    month_name,
    month_range,
    to_month,
)
from .types import EntityId, PositiveFloat, PositiveInt

__all__ = [
    # Core models
    "Model",
    "Record",
    # Settings
    "GlobalSettings",
    "ReceiptSettings",
    "ReportingSettings",
    # Enums
    "MONTH_NAMES",
    "CashMovementTypeEnum",
    "PaymentMethodEnum",
    "PropertyStatusEnum",
    "ReceiptStatusEnum",
    # Month utilities
    "contract_months",
    "month_key",
    "month_name",
    "month_range",
    "to_month",
    # Types
    "EntityId",
    "PositiveFloat",
    "PositiveInt",
]
