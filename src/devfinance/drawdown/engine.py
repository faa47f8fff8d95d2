# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Drawdown engine: month-by-month drawn balance and interest per facility.

Given a project's facilities and its monthly cost vector, facilities are
drawn in priority order (senior, mezzanine, junior, then unranked; ties by
sort order). Costs pre-assigned to a facility are drawn from it first; the
remaining unassigned costs form a shared pool that each facility consumes up
to its limit before the next facility sees what is left.

Interest accrues monthly on the balance after that month's draw. Provisioned
facilities capitalise it into the balance (never beyond the facility limit);
serviced facilities only track it.

The engine is a pure numeric transform. It performs no validation and raises
no domain errors: callers are responsible for finite, non-negative sizes,
rates and costs.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Union

from ..core.primitives import DrawdownSettings, round_amount
from ..debt.facility import Facility
from .results import DrawdownMonth, FacilityDrawdown

logger = logging.getLogger(__name__)

Amount = Union[int, float]


def sort_facilities(facilities: Sequence[Facility]) -> List[Facility]:
    """Facilities in draw sequence: priority rank, then sort order (stable)."""
    return sorted(facilities, key=lambda f: f.draw_order_key)


def _assigned_for(
    assigned_costs: Mapping[str, Sequence[Amount]], facility_id: str
) -> Sequence[Amount]:
    assigned = assigned_costs.get(facility_id)
    return [] if assigned is None else assigned


def unassigned_pool(
    facilities: Sequence[Facility],
    monthly_costs: Sequence[Amount],
    assigned_costs: Optional[Mapping[str, Sequence[Amount]]] = None,
) -> List[Amount]:
    """
    Monthly costs left for priority drawing once assignments are removed.

    Each listed facility's assigned vector is subtracted over the months it
    shares with ``monthly_costs``; the result is floored at zero. Assignments
    exceeding a month's total cost are absorbed without error.

    Args:
        facilities: Facilities whose assignments apply
        monthly_costs: Total project cost per month
        assigned_costs: Facility id -> monthly costs reserved for it

    Returns:
        List of unassigned amounts, one per month
    """
    pool = list(monthly_costs)
    if assigned_costs is None or len(assigned_costs) == 0:
        return pool

    known_ids = {f.id for f in facilities}
    unknown_ids = [fid for fid in assigned_costs if fid not in known_ids]
    if unknown_ids:
        logger.warning(
            f"Assigned costs reference unknown facilities {unknown_ids}; ignored"
        )

    for facility in facilities:
        assigned = _assigned_for(assigned_costs, facility.id)
        for i in range(min(len(pool), len(assigned))):
            pool[i] -= assigned[i] or 0

    clamped = [i + 1 for i, amount in enumerate(pool) if amount < 0]
    if clamped:
        logger.debug(
            f"Assigned costs exceed total costs in months {clamped}; "
            f"unassigned pool floored at zero"
        )
    return [max(0, amount) for amount in pool]


def _draw_facility(
    facility: Facility,
    pool: List[Amount],
    assigned: Sequence[Amount],
    month_labels: Sequence[Optional[str]],
    settings: DrawdownSettings,
) -> FacilityDrawdown:
    """Simulate one facility across all months, consuming ``pool`` in place."""
    size = facility.size
    monthly_rate = facility.monthly_rate
    cumulative_drawn: Amount = 0
    total_interest: Amount = 0
    peak_drawn: Amount = 0
    months: List[DrawdownMonth] = []

    for i in range(len(pool)):
        available = max(0, size - cumulative_drawn)

        # Reserved costs first, then the shared pool
        from_assigned = min((assigned[i] if i < len(assigned) else 0) or 0, available)
        from_unassigned = min(max(0, pool[i]), available - from_assigned)
        pool[i] -= from_unassigned

        drawn = from_assigned + from_unassigned
        cumulative_drawn += drawn

        # Interest on the balance after this month's draw
        interest = round_amount(cumulative_drawn * monthly_rate, settings.rounding)
        total_interest += interest

        capitalised: Amount = 0
        if facility.is_provisioned and interest > 0:
            cap_room = max(0, size - cumulative_drawn)
            capitalised = min(interest, cap_room)
            cumulative_drawn += capitalised

        peak_drawn = max(peak_drawn, cumulative_drawn)

        label = month_labels[i] if i < len(month_labels) else None
        months.append(
            DrawdownMonth(
                month=i + 1,
                label=label if label is not None else settings.month_label(i),
                costs_drawn=drawn,
                interest_accrued=interest,
                capitalised=capitalised,
                cumulative_drawn=cumulative_drawn,
                available_balance=max(0, size - cumulative_drawn),
            )
        )

    logger.debug(
        f"{facility}: peak drawn {peak_drawn:,.0f} of {size:,.0f}, "
        f"total interest {total_interest:,.0f}"
    )

    return FacilityDrawdown(
        facility_id=facility.id,
        facility_name=facility.name,
        facility_size=size,
        interest_rate=facility.interest_rate,
        land_loan_type=facility.land_loan_type,
        priority=facility.priority,
        months=months,
        total_interest=total_interest,
        peak_drawn=peak_drawn,
    )


def compute_drawdowns(
    facilities: Sequence[Facility],
    monthly_costs: Sequence[Amount],
    month_labels: Optional[Sequence[Optional[str]]] = None,
    assigned_costs: Optional[Mapping[str, Sequence[Amount]]] = None,
    settings: Optional[DrawdownSettings] = None,
) -> List[FacilityDrawdown]:
    """
    Compute the month-by-month drawdown schedule of each facility.

    Args:
        facilities: Facilities in any order (re-sorted into draw sequence)
        monthly_costs: Total project cost per month, index 0 = month 1
        month_labels: Optional display labels parallel to ``monthly_costs``;
            missing entries default to ``"M{n}"``
        assigned_costs: Optional facility id -> monthly costs reserved for
            that facility and drawn from it ahead of the shared pool
        settings: Engine settings (rounding, default label prefix)

    Returns:
        List[FacilityDrawdown]: One schedule per facility, in draw sequence
        (not input order). Empty when there are no facilities or no months.

    Example:
        # Senior exhausted before junior draws the remainder
        senior = Facility(id="s", size=30_000, priority="senior")
        junior = Facility(id="j", size=100_000, priority="junior")
        results = compute_drawdowns([junior, senior], [50_000])
        [r.months[0].costs_drawn for r in results]  # [30_000, 20_000]
    """
    if len(facilities) == 0 or len(monthly_costs) == 0:
        return []

    settings = settings or DrawdownSettings()
    month_labels = [] if month_labels is None else list(month_labels)
    assigned_costs = {} if assigned_costs is None else assigned_costs

    ordered = sort_facilities(facilities)
    pool = unassigned_pool(ordered, monthly_costs, assigned_costs)

    logger.debug(
        f"Drawing {len(ordered)} facilities over {len(pool)} months "
        f"({len(assigned_costs)} with assigned costs)"
    )

    return [
        _draw_facility(
            facility,
            pool,
            _assigned_for(assigned_costs, facility.id),
            month_labels,
            settings,
        )
        for facility in ordered
    ]


def drawdowns_by_facility(
    results: Sequence[FacilityDrawdown],
) -> Dict[str, FacilityDrawdown]:
    """Index engine results by facility id, for callers that need input-order lookups."""
    return {result.facility_id: result for result in results}
