# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Conversion of ledger records into pandas DataFrames.

Obligation frames carry a monthly ``PeriodIndex``-compatible ``month``
column so they line up with other monthly series.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from .records import MonthlyObligation, Payment

OBLIGATION_COLUMNS = ["tenant_id", "month", "amount"]
PAYMENT_COLUMNS = ["tenant_id", "amount"]


class RecordFrameConverter:
    """Converts record sequences to DataFrames with a fixed schema."""

    @staticmethod
    def obligations_to_frame(obligations: Iterable[MonthlyObligation]) -> pd.DataFrame:
        """
        Build a DataFrame of obligations in input order.

        Args:
            obligations: Obligations as produced by ``generate_obligations``

        Returns:
            DataFrame with ``tenant_id`` (object), ``month`` (monthly period)
            and ``amount`` (float) columns. Empty input yields an empty frame
            with the same columns and dtypes.
        """
        obligations = list(obligations)
        return pd.DataFrame(
            {
                "tenant_id": pd.Series(
                    [o.tenant_id for o in obligations], dtype=object
                ),
                "month": pd.Series(
                    pd.PeriodIndex([o.month for o in obligations], freq="M")
                ),
                "amount": pd.Series(
                    [o.amount for o in obligations], dtype=float
                ),
            },
            columns=OBLIGATION_COLUMNS,
        )

    @staticmethod
    def payments_to_frame(payments: Iterable[Payment]) -> pd.DataFrame:
        """Build a DataFrame of payments with ``tenant_id`` and ``amount`` columns."""
        payments = list(payments)
        return pd.DataFrame(
            {
                "tenant_id": pd.Series([p.tenant_id for p in payments], dtype=object),
                "amount": pd.Series([p.amount for p in payments], dtype=float),
            },
            columns=PAYMENT_COLUMNS,
        )


obligations_to_frame = RecordFrameConverter.obligations_to_frame
payments_to_frame = RecordFrameConverter.payments_to_frame
