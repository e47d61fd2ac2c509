# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .enums import PaymentMethodEnum
from .model import Model
from .types import PositiveInt


class ReportingSettings(Model):
    """Settings related to report generation and display."""

    decimal_precision: PositiveInt = Field(
        default=2, description="Number of decimal places for currency values."
    )
    debtor_limit: Optional[PositiveInt] = Field(
        default=8,
        description="Maximum number of debtors listed in a debtor report. None lists all.",
    )


class ReceiptSettings(Model):
    """Defaults applied when drafting a new receipt."""

    currency: str = Field(
        default="ARS",
        min_length=1,
        description="Currency code printed on receipts (informational, never converted).",
    )
    payment_method: PaymentMethodEnum = Field(
        default=PaymentMethodEnum.CASH,
        description="Payment method recorded on drafted receipts.",
    )


# --- Main Global Settings Class ---


class GlobalSettings(Model):
    """Global ledger settings

    Groups the defaults used by the reporting helpers. The accrual engine
    itself takes no settings: its behavior is fixed.
    """

    reporting: ReportingSettings = Field(default_factory=ReportingSettings)
    receipts: ReceiptSettings = Field(default_factory=ReceiptSettings)
