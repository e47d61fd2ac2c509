# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentledger Reporting

Debtor ranking, portfolio and monthly collection summaries, receipt drafting
and the cash register, built on the accrual engine's outputs.
"""

from .cash import cash_balance, income_movement
from .debtors import Debtor, DebtorReport, find_debtors
from .monthly_summary import MonthlySummary, TenantMonthSummary, summarize_month
from .portfolio import PortfolioSummary, portfolio_summary
from .receipts import ReceiptDraft, draft_receipt

__all__ = [
    "Debtor",
    "DebtorReport",
    "MonthlySummary",
    "PortfolioSummary",
    "ReceiptDraft",
    "TenantMonthSummary",
    "cash_balance",
    "draft_receipt",
    "find_debtors",
    "income_movement",
    "portfolio_summary",
    "summarize_month",
]
