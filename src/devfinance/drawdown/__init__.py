# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Development finance drawdown engine.

Computes how each funding facility is drawn against a monthly cost schedule,
with interest accrual, capitalisation and utilisation per facility.
"""

from .engine import (
    compute_drawdowns,
    drawdowns_by_facility,
    sort_facilities,
    unassigned_pool,
)
from .results import DrawdownMonth, FacilityDrawdown

__all__ = [
    "compute_drawdowns",
    "drawdowns_by_facility",
    "sort_facilities",
    "unassigned_pool",
    "DrawdownMonth",
    "FacilityDrawdown",
]
