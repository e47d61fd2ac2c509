# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Datastore row models consumed by the ledger.

These are read-only snapshots: the library never writes them back.
"""

from .cash_movement import CashMovement
from .property import Property
from .receipt import Receipt
from .tenant import Guarantor, Tenant

__all__ = [
    "CashMovement",
    "Guarantor",
    "Property",
    "Receipt",
    "Tenant",
]
