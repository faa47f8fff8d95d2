# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
devfinance test suite.

Unit tests are organized to mirror the source layout under ``src/devfinance``.
"""
