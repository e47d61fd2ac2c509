# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentledger test suite.

Unit tests are organized to mirror the package layout.
"""
