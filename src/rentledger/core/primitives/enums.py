# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class ReceiptStatusEnum(str, Enum):
    """Settlement status of a receipt once its paid amount is known."""

    PENDING = "pendiente"  # Remaining balance carried forward
    PAID = "pagado"


class PropertyStatusEnum(str, Enum):
    OCCUPIED = "ocupado"
    AVAILABLE = "disponible"
    MAINTENANCE = "mantenimiento"


class PaymentMethodEnum(str, Enum):
    CASH = "efectivo"
    TRANSFER = "transferencia"
    DOLLARS = "dolares"


class CashMovementTypeEnum(str, Enum):
    """Direction of a cash register movement. Only income adds to the balance."""

    INCOME = "income"
    EXPENSE = "expense"


# Receipts carry the month as its Spanish name, as entered on the receipt form.
MONTH_NAMES = (
    "Enero",
    "Febrero",
    "Marzo",
    "Abril",
    "Mayo",
    "Junio",
    "Julio",
    "Agosto",
    "Septiembre",
    "Octubre",
    "Noviembre",
    "Diciembre",
)
