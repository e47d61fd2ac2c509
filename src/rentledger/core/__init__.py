# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentledger Core Framework

Foundational building blocks: primitives (models, settings, months) and the
ledger records and queries built on them.
"""

from . import ledger, primitives

__all__ = [
    "ledger",
    "primitives",
]
