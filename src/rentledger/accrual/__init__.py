# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentledger Accrual Engine

Pure functions that turn tenant/property snapshots into monthly rent
obligations and reconcile them against payments.

Key Entry Points:
- generate_obligations() - Monthly obligations for every eligible tenant
- calculate_tenant_financial_status() - Pooled balance for one tenant
"""

from .allocation import allocate_payments_oldest_first
from .balance import calculate_portfolio_status, calculate_tenant_financial_status
from .obligations import generate_obligations
from .payments import payments_from_receipts

__all__ = [
    "allocate_payments_oldest_first",
    "calculate_portfolio_status",
    "calculate_tenant_financial_status",
    "generate_obligations",
    "payments_from_receipts",
]
