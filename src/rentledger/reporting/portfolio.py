# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from ..core.primitives import PropertyStatusEnum
from ..models import Property, Receipt, Tenant
from .monthly_summary import summarize_month


@dataclass(frozen=True, slots=True)
class PortfolioSummary:
    """
    Headline counts for the portfolio and one month's collections.

    Properties under maintenance count toward ``total_properties`` but are
    neither occupied nor available.
    """

    total_properties: int
    occupied_properties: int
    available_properties: int
    total_tenants: int
    monthly_income: float


def portfolio_summary(
    properties: Iterable[Property],
    tenants: Iterable[Tenant],
    receipts: Iterable[Receipt],
    month: Union[int, str],
    year: int,
) -> PortfolioSummary:
    """
    Summarize the portfolio for a receipt month.

    ``monthly_income`` sums the paid amounts of that month's receipts, the
    month matched as in ``summarize_month``.
    """
    properties = list(properties)
    return PortfolioSummary(
        total_properties=len(properties),
        occupied_properties=sum(
            1 for p in properties if p.status == PropertyStatusEnum.OCCUPIED
        ),
        available_properties=sum(
            1 for p in properties if p.status == PropertyStatusEnum.AVAILABLE
        ),
        total_tenants=sum(1 for _ in tenants),
        monthly_income=summarize_month(receipts, month, year).total_collected,
    )
