# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
In-memory rent ledger: records, DataFrame conversion and queries.

Nothing here is persisted; every view is rebuilt from the snapshot it is
given.
"""

from .converter import RecordFrameConverter, obligations_to_frame, payments_to_frame
from .queries import LedgerQueries
from .records import (
    MonthlyObligation,
    ObligationAllocation,
    Payment,
    TenantFinancialStatus,
)

__all__ = [
    "LedgerQueries",
    "MonthlyObligation",
    "ObligationAllocation",
    "Payment",
    "RecordFrameConverter",
    "TenantFinancialStatus",
    "obligations_to_frame",
    "payments_to_frame",
]
