# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Funding Plan - Container for a project's debt facilities and term loans

Resolves facility limits, runs the drawdown engine over the auto-sized
facilities and aggregates total debt interest for the project's funding
costs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import Field

from ..core.primitives import DrawdownSettings, Model, SizingSettings
from .facility import Facility, FacilityTerms
from .loan import TermLoan
from .sizing import FacilitySizingContext, resolve_facility_size

if TYPE_CHECKING:
    from ..drawdown import FacilityDrawdown

logger = logging.getLogger(__name__)

Amount = Union[int, float]


class FundingInterestSummary(Model):
    """
    Debt interest attributable to a project's funding.

    Attributes:
        facility_interest: Facility id -> interest (engine-computed for AUTO
            facilities, flat provision for MANUAL ones)
        loan_interest: Loan id -> simple interest over the loan term
        total_debt_interest: Sum of all facility and loan interest
    """

    facility_interest: Dict[str, Amount] = Field(default_factory=dict)
    loan_interest: Dict[str, Amount] = Field(default_factory=dict)
    total_debt_interest: Amount = 0


class FundingPlan(Model):
    """
    A project's debt facilities and term loans.

    AUTO facilities are sized from an LVR percentage and drawn month by month
    through the drawdown engine; MANUAL facilities carry a stated limit and a
    flat interest provision and are not simulated.

    Example:
        plan = FundingPlan(
            facilities=[senior_terms, mezz_terms],
            loans=[vendor_loan],
        )
        summary = plan.interest_summary(monthly_costs, context)
        summary.total_debt_interest
    """

    facilities: List[FacilityTerms] = Field(default_factory=list)
    loans: List[TermLoan] = Field(default_factory=list)
    sizing: SizingSettings = Field(default_factory=SizingSettings)
    drawdown: DrawdownSettings = Field(default_factory=DrawdownSettings)

    @property
    def auto_facilities(self) -> List[FacilityTerms]:
        return [terms for terms in self.facilities if terms.is_auto]

    def resolve_facilities(self, context: FacilitySizingContext) -> List[Facility]:
        """Engine-ready facilities with resolved limits, in record order."""
        return [
            terms.to_facility(resolve_facility_size(terms, context, self.sizing))
            for terms in self.facilities
        ]

    def total_debt(self, context: FacilitySizingContext) -> Amount:
        """Sum of all resolved facility limits."""
        return sum(f.size for f in self.resolve_facilities(context))

    def compute_drawdowns(
        self,
        monthly_costs: Sequence[Amount],
        context: FacilitySizingContext,
        month_labels: Optional[Sequence[Optional[str]]] = None,
        assigned_costs: Optional[Mapping[str, Sequence[Amount]]] = None,
    ) -> List[FacilityDrawdown]:
        """
        Run the drawdown engine over the AUTO facilities.

        MANUAL facilities are excluded: their interest is a stated provision
        and they do not absorb project costs in the simulation.
        """
        # Import at runtime: the engine imports this package for Facility
        from ..drawdown import compute_drawdowns  # noqa: PLC0415

        facilities = [
            terms.to_facility(resolve_facility_size(terms, context, self.sizing))
            for terms in self.auto_facilities
        ]
        return compute_drawdowns(
            facilities,
            monthly_costs,
            month_labels=month_labels,
            assigned_costs=assigned_costs,
            settings=self.drawdown,
        )

    def interest_summary(
        self,
        monthly_costs: Sequence[Amount],
        context: FacilitySizingContext,
        assigned_costs: Optional[Mapping[str, Sequence[Amount]]] = None,
    ) -> FundingInterestSummary:
        """
        Total debt interest across facilities and term loans.

        Args:
            monthly_costs: Project cost per month (ex funding costs)
            context: Project totals for AUTO facility sizing
            assigned_costs: Optional costs reserved for specific facilities

        Returns:
            FundingInterestSummary: Per-facility, per-loan and total interest
        """
        from ..drawdown import drawdowns_by_facility  # noqa: PLC0415

        drawdowns = drawdowns_by_facility(
            self.compute_drawdowns(
                monthly_costs, context, assigned_costs=assigned_costs
            )
        )

        facility_interest: Dict[str, Amount] = {}
        for terms in self.facilities:
            if terms.is_auto:
                drawdown = drawdowns.get(terms.id)
                facility_interest[terms.id] = (
                    drawdown.total_interest if drawdown is not None else 0
                )
            else:
                facility_interest[terms.id] = terms.interest_provision

        loan_interest = {
            loan.id: loan.total_interest(self.drawdown.rounding) for loan in self.loans
        }

        total = sum(facility_interest.values()) + sum(loan_interest.values())
        logger.debug(
            f"Debt interest {total:,.0f} across {len(facility_interest)} facilities "
            f"and {len(loan_interest)} loans"
        )

        return FundingInterestSummary(
            facility_interest=facility_interest,
            loan_interest=loan_interest,
            total_debt_interest=total,
        )
