# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentledger - Rent Obligation Accrual and Tenant Balances

Derives monthly rent obligations from tenant contracts and property rents,
and reconciles them against payments into per-tenant balances. Everything
is recomputed from the snapshot passed in; nothing is persisted.

Key Entry Points:
- rentledger.generate_obligations() - Monthly obligations per tenant
- rentledger.calculate_tenant_financial_status() - Pooled tenant balance
- rentledger.reporting.* - Debtors, summaries, receipt drafts, cash register

Example Usage:
    ```python
    from rentledger import (
        Property,
        Tenant,
        calculate_tenant_financial_status,
        generate_obligations,
    )
    from rentledger.core.ledger import Payment

    tenants = [Tenant(id=1, property_id=10,
                      contract_start="2024-01-15", contract_end="2024-03-10")]
    properties = [Property(id=10, rent=1000)]

    obligations = generate_obligations(tenants, properties)
    status = calculate_tenant_financial_status(1, obligations, [Payment(1, 1200)])
    print(status.balance, status.is_up_to_date)  # 1800.0 False
    ```
"""

import logging

# Libraries leave handler configuration to the application.
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .accrual import (  # noqa: E402
    allocate_payments_oldest_first,
    calculate_portfolio_status,
    calculate_tenant_financial_status,
    generate_obligations,
    payments_from_receipts,
)
from .models import Property, Receipt, Tenant  # noqa: E402

__all__ = [
    "Property",
    "Receipt",
    "Tenant",
    "allocate_payments_oldest_first",
    "calculate_portfolio_status",
    "calculate_tenant_financial_status",
    "generate_obligations",
    "payments_from_receipts",
]
