# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Result records produced by the drawdown engine."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import Field

from ..core.primitives import FacilityPriority, LandLoanType, Model

Amount = Union[int, float]


class DrawdownMonth(Model):
    """
    One facility's activity in one project month.

    Attributes:
        month: 1-based month number
        label: Display label for the month
        costs_drawn: Project costs funded by this facility this month
        interest_accrued: Interest charged on the post-draw balance
        capitalised: Portion of the interest added to the balance
        cumulative_drawn: Drawn balance after draws and capitalisation
        available_balance: Undrawn room remaining in the facility
    """

    month: int
    label: str
    costs_drawn: Amount
    interest_accrued: Amount
    capitalised: Amount
    cumulative_drawn: Amount
    available_balance: Amount


class FacilityDrawdown(Model):
    """
    Month-by-month drawdown schedule for a single facility.

    Carries the facility's identity alongside its schedule so presentation
    code needs no join back to the input records.
    """

    facility_id: str
    facility_name: str
    facility_size: Amount
    interest_rate: float
    land_loan_type: LandLoanType
    priority: FacilityPriority
    months: List[DrawdownMonth] = Field(default_factory=list)
    total_interest: Amount = 0
    peak_drawn: Amount = 0

    @property
    def total_drawn(self) -> Amount:
        """Project costs funded by this facility over all months."""
        return sum(m.costs_drawn for m in self.months)

    @property
    def total_capitalised(self) -> Amount:
        return sum(m.capitalised for m in self.months)

    @property
    def closing_balance(self) -> Amount:
        """Drawn balance at the end of the final month."""
        return self.months[-1].cumulative_drawn if self.months else 0

    @property
    def peak_utilisation(self) -> float:
        """Peak drawn balance as a fraction of the facility limit (0 for non-positive limits)."""
        if self.facility_size <= 0:
            return 0.0
        return self.peak_drawn / self.facility_size

    @property
    def first_draw_month(self) -> Optional[int]:
        """Month number of the first nonzero cost draw, or None if never drawn."""
        return next((m.month for m in self.months if m.costs_drawn > 0), None)
