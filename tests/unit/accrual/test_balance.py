# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from rentledger.accrual import (
    calculate_portfolio_status,
    calculate_tenant_financial_status,
    generate_obligations,
)
from rentledger.core.ledger import MonthlyObligation, Payment, TenantFinancialStatus
from tests.conftest import make_property, make_tenant


@pytest.fixture
def obligations(sample_tenant, sample_property):
    return generate_obligations([sample_tenant], [sample_property])


def test_underpaid_tenant_owes_the_difference(obligations, payments_1200):
    status = calculate_tenant_financial_status(1, obligations, payments_1200)
    assert status == TenantFinancialStatus(
        tenant_id=1,
        total_obligation=3000.0,
        total_paid=1200.0,
        balance=1800.0,
        is_up_to_date=False,
    )


def test_overpayment_gives_negative_balance(obligations):
    payments = [Payment(1, 3000.0), Payment(1, 500.0)]
    status = calculate_tenant_financial_status(1, obligations, payments)
    assert status.total_paid == 3500.0
    assert status.balance == -500.0
    assert status.is_up_to_date


def test_exact_payment_is_up_to_date(obligations):
    status = calculate_tenant_financial_status(1, obligations, [Payment(1, 3000.0)])
    assert status.balance == 0.0
    assert status.is_up_to_date


@pytest.mark.parametrize("tenant_id", [1, 42, "unknown"])
def test_tenant_without_data_reports_zeros(tenant_id):
    status = calculate_tenant_financial_status(tenant_id, [], [])
    assert status == TenantFinancialStatus(
        tenant_id=tenant_id,
        total_obligation=0.0,
        total_paid=0.0,
        balance=0.0,
        is_up_to_date=True,
    )


def test_other_tenants_are_ignored(obligations):
    foreign = [MonthlyObligation(2, "2024-01", 5000.0)]
    payments = [Payment(2, 100.0), Payment(1, 300.0)]
    status = calculate_tenant_financial_status(1, obligations + foreign, payments)
    assert status.total_obligation == 3000.0
    assert status.total_paid == 300.0


def test_total_paid_is_additive_over_payment_batches(obligations):
    batch_a = [Payment(1, 250.0), Payment(2, 75.0), Payment(1, 125.0)]
    batch_b = [Payment(1, 1000.0), Payment(3, 10.0)]

    combined = calculate_tenant_financial_status(1, obligations, batch_a + batch_b)
    split_a = calculate_tenant_financial_status(1, obligations, batch_a)
    split_b = calculate_tenant_financial_status(1, obligations, batch_b)

    assert combined.total_paid == split_a.total_paid + split_b.total_paid


def test_accepts_generators(obligations, payments_1200):
    status = calculate_tenant_financial_status(
        1, (o for o in obligations), (p for p in payments_1200)
    )
    assert status.balance == 1800.0


def test_portfolio_status_covers_every_tenant_in_order():
    tenants = [make_tenant(2, property_id=None), make_tenant(1)]
    obligations = generate_obligations(tenants, [make_property()])
    payments = [Payment(1, 1000.0)]

    statuses = calculate_portfolio_status(tenants, obligations, payments)

    assert list(statuses) == [2, 1]
    assert statuses[2].balance == 0.0
    assert statuses[2].is_up_to_date
    assert statuses[1].balance == 2000.0
    assert not statuses[1].is_up_to_date
