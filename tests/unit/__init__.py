# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for rentledger components.

Every component under test is a pure function over in-memory snapshots, so
no fixtures touch the network or a datastore.
"""
