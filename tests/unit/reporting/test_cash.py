# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

from rentledger.core.primitives import CashMovementTypeEnum
from rentledger.models import CashMovement
from rentledger.reporting import cash_balance, draft_receipt, income_movement
from tests.conftest import make_property, make_tenant


class TestCashBalance:
    def test_empty_register(self):
        assert cash_balance([]) == 0.0

    def test_income_adds_and_expenses_subtract(self):
        movements = [
            CashMovement(type="income", amount=1000.0),
            CashMovement(type="expense", amount=250.0),
            CashMovement(type=CashMovementTypeEnum.INCOME, amount=300.0),
        ]
        assert cash_balance(movements) == 1050.0

    def test_any_other_type_subtracts(self):
        movements = [
            CashMovement(type="income", amount=100.0),
            CashMovement(type="retiro", amount=40.0),
        ]
        assert cash_balance(movements) == 60.0

    def test_balance_can_go_negative(self):
        assert cash_balance([CashMovement(type="expense", amount=80.0)]) == -80.0


class TestIncomeMovement:
    def draft(self, paid_amount):
        tenant = make_tenant(name="Ana")
        return draft_receipt(
            tenant, [make_property()], None, paid_amount=paid_amount, month=4, year=2024
        )

    def test_payment_posts_income(self):
        movement = income_movement(self.draft(1200.0), date(2024, 4, 5))

        assert movement.type == "income"
        assert movement.description == "Cobro Ana"
        assert movement.amount == 1200.0
        assert movement.currency == "ARS"
        assert movement.date == "2024-04-05"
        assert movement.tenant == "Ana"
        assert movement.property == "Unit 10"
        assert cash_balance([movement]) == 1200.0

    def test_zero_payment_posts_nothing(self):
        assert income_movement(self.draft(0.0), "2024-04-05") is None
