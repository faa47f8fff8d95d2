# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Drawdown reporting.

Presentation-ready pandas views of drawdown schedules and facility
utilisation. Reports only reshape engine output; they never recompute it.
"""

from .drawdown import (
    SCHEDULE_COLUMNS,
    SUMMARY_COLUMNS,
    drawdown_pivot,
    drawdown_schedule_frame,
    utilisation_summary,
    utilisation_totals,
)

__all__ = [
    "SCHEDULE_COLUMNS",
    "SUMMARY_COLUMNS",
    "drawdown_pivot",
    "drawdown_schedule_frame",
    "utilisation_summary",
    "utilisation_totals",
]
