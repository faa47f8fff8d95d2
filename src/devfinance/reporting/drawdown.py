# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
DataFrame views over drawdown engine results.

These functions only reshape what the engine produced; they perform no
financial calculation of their own beyond ratios of reported figures.
"""

from typing import List, Sequence

import numpy as np
import pandas as pd

from ..drawdown import FacilityDrawdown

SCHEDULE_COLUMNS: List[str] = [
    "facility_id",
    "facility_name",
    "priority",
    "month",
    "label",
    "costs_drawn",
    "interest_accrued",
    "capitalised",
    "cumulative_drawn",
    "available_balance",
]

SUMMARY_COLUMNS: List[str] = [
    "facility_id",
    "facility_name",
    "priority",
    "land_loan_type",
    "facility_size",
    "interest_rate",
    "total_drawn",
    "total_interest",
    "total_capitalised",
    "peak_drawn",
    "peak_utilisation",
    "closing_balance",
    "first_draw_month",
]


def drawdown_schedule_frame(results: Sequence[FacilityDrawdown]) -> pd.DataFrame:
    """
    Long-format schedule: one row per facility per month.

    Rows keep the engine's draw sequence, then month order.

    Example:
        >>> frame = drawdown_schedule_frame(results)
        >>> frame.groupby("facility_name")["costs_drawn"].sum()
    """
    rows = [
        {
            "facility_id": result.facility_id,
            "facility_name": result.facility_name,
            "priority": result.priority.value,
            **month.model_dump(),
        }
        for result in results
        for month in result.months
    ]
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def drawdown_pivot(
    results: Sequence[FacilityDrawdown], value: str = "cumulative_drawn"
) -> pd.DataFrame:
    """
    Wide-format schedule: months down, facilities across.

    Args:
        results: Engine output
        value: Month field to tabulate (e.g. ``costs_drawn``, ``interest_accrued``)

    Returns:
        pd.DataFrame indexed by month label with one column per facility name,
        in draw sequence.

    Raises:
        ValueError: If ``value`` is not a month field
    """
    if value not in SCHEDULE_COLUMNS[5:]:
        raise ValueError(
            f"value must be one of {SCHEDULE_COLUMNS[5:]}, got '{value}'"
        )

    if not results:
        return pd.DataFrame(index=pd.Index([], name="label"))

    labels = pd.Index([month.label for month in results[0].months], name="label")
    frame = pd.concat(
        [
            pd.Series(
                [getattr(month, value) for month in result.months],
                index=labels,
                name=result.facility_name or result.facility_id,
            )
            for result in results
        ],
        axis=1,
    )
    frame.columns.name = "facility"
    return frame


def utilisation_summary(results: Sequence[FacilityDrawdown]) -> pd.DataFrame:
    """
    Funding utilisation per facility, in draw sequence.

    ``peak_utilisation`` is peak drawn balance over facility size (0 where
    the facility has no positive limit); ``first_draw_month`` is NaN for
    facilities that never funded a cost.
    """
    frame = pd.DataFrame(
        [
            {
                "facility_id": r.facility_id,
                "facility_name": r.facility_name,
                "priority": r.priority.value,
                "land_loan_type": r.land_loan_type.value,
                "facility_size": r.facility_size,
                "interest_rate": r.interest_rate,
                "total_drawn": r.total_drawn,
                "total_interest": r.total_interest,
                "total_capitalised": r.total_capitalised,
                "peak_drawn": r.peak_drawn,
                "peak_utilisation": r.peak_utilisation,
                "closing_balance": r.closing_balance,
                "first_draw_month": (
                    np.nan if r.first_draw_month is None else r.first_draw_month
                ),
            }
            for r in results
        ],
        columns=SUMMARY_COLUMNS,
    )
    return frame


def utilisation_totals(results: Sequence[FacilityDrawdown]) -> pd.Series:
    """
    Project-level funding totals across all facilities.

    Returns:
        pd.Series with total facility limits, costs funded, interest,
        capitalised interest, the combined peak of summed monthly balances
        and the resulting overall utilisation.
    """
    schedule = drawdown_schedule_frame(results)
    total_size = sum(r.facility_size for r in results)
    combined_peak = (
        schedule.groupby("month")["cumulative_drawn"].sum().max()
        if not schedule.empty
        else 0
    )
    return pd.Series(
        {
            "total_facility_size": total_size,
            "total_drawn": schedule["costs_drawn"].sum(),
            "total_interest": sum(r.total_interest for r in results),
            "total_capitalised": schedule["capitalised"].sum(),
            "combined_peak_drawn": combined_peak,
            "combined_peak_utilisation": (
                combined_peak / total_size if total_size > 0 else 0.0
            ),
        }
    )
