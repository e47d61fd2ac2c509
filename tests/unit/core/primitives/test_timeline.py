# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date, datetime

import pandas as pd
import pytest

from rentledger.core.primitives import (
    contract_months,
    month_key,
    month_name,
    month_range,
    to_month,
)


class TestToMonth:
    @pytest.mark.parametrize(
        "value",
        ["2024-03-01", "2024-03-31", "2024-03", "2024-03-15T10:30:00", " 2024-03-15 "],
    )
    def test_iso_strings_normalize_to_month(self, value):
        assert to_month(value) == pd.Period("2024-03", freq="M")

    def test_dates_and_periods(self):
        assert to_month(date(2024, 1, 31)) == pd.Period("2024-01", freq="M")
        assert to_month(datetime(2024, 12, 1, 8)) == pd.Period("2024-12", freq="M")
        assert to_month(pd.Period("2024-05-20", freq="D")) == pd.Period("2024-05", freq="M")

    @pytest.mark.parametrize(
        "value", [None, "", "   ", "not a date", "15/01/2024", "2024-13-01", "2024-02-31", "2024-03-15 later", pd.NaT, 20240101]
    )
    def test_unset_or_unreadable_values_return_none(self, value):
        """Unreadable dates degrade to None instead of raising."""
        assert to_month(value) is None


class TestMonthRange:
    def test_inclusive_range(self):
        months = month_range(pd.Period("2024-11", freq="M"), pd.Period("2025-02", freq="M"))
        assert [month_key(p) for p in months] == ["2024-11", "2024-12", "2025-01", "2025-02"]

    def test_single_month(self):
        months = month_range(pd.Period("2024-06", freq="M"), pd.Period("2024-06", freq="M"))
        assert len(months) == 1

    def test_end_before_start_is_empty(self):
        months = month_range(pd.Period("2024-06", freq="M"), pd.Period("2024-01", freq="M"))
        assert len(months) == 0


class TestContractMonths:
    def test_partial_months_count_in_full(self):
        assert contract_months("2024-01-15", "2024-03-10") == ["2024-01", "2024-02", "2024-03"]

    def test_month_end_start_does_not_drift(self):
        """Stepping from January 31st visits February rather than skipping to March."""
        assert contract_months("2024-01-31", "2024-03-01") == ["2024-01", "2024-02", "2024-03"]

    def test_same_month_contract(self):
        assert contract_months("2024-02-01", "2024-02-29") == ["2024-02"]

    def test_reversed_contract_is_empty(self):
        assert contract_months("2024-05-01", "2024-02-01") == []

    def test_missing_bound_is_empty(self):
        assert contract_months("2024-05-01", None) == []
        assert contract_months("", "2024-05-01") == []

    def test_count_matches_calendar_months(self):
        months = contract_months("2023-07-10", "2026-02-03")
        assert len(months) == (2026 - 2023) * 12 + (2 - 7) + 1
        assert months[0] == "2023-07"
        assert months[-1] == "2026-02"


def test_month_name():
    assert month_name(1) == "Enero"
    assert month_name(12) == "Diciembre"
    assert month_name("Marzo") == "Marzo"
    with pytest.raises(ValueError, match="between 1 and 12"):
        month_name(13)
