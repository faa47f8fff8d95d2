#!/usr/bin/env python3
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Residential Development Drawdown Example

Models an 18-month townhouse development funded by a land loan reserved for
the land settlement, an LVR-sized senior construction facility and a
mezzanine tranche, then prints the monthly balances and facility utilisation.

### Funding Stack

- **Land Loan**: $2.4M provisioned senior, 8.5%, assigned to the settlement payment
- **Senior Construction**: 65% of TDC ex GST, 7.25%, provisioned
- **Mezzanine**: 15% of TDC ex GST, 16%, serviced

Amounts are in cents throughout.
"""

import logging

import pandas as pd

from devfinance.debt import FacilitySizingContext, FacilityTerms, FundingPlan
from devfinance.reporting import drawdown_pivot, utilisation_summary, utilisation_totals

MONTHS = 18
LAND_SETTLEMENT = 3_000_000_00
CONSTRUCTION_PER_MONTH = 450_000_00


def build_costs() -> list:
    """Land settles in month 1; construction spreads evenly over months 3-16."""
    costs = [0] * MONTHS
    costs[0] = LAND_SETTLEMENT
    for month in range(2, 16):
        costs[month] = CONSTRUCTION_PER_MONTH
    return costs


def main():
    logging.basicConfig(level=logging.INFO)

    costs = build_costs()
    land_assignment = [2_400_000_00]

    plan = FundingPlan(
        facilities=[
            FacilityTerms(
                id="land",
                name="Land Loan",
                priority="senior",
                sort_order=0,
                calculation_type="auto",
                lvr_method="tdc_ex_gst",
                lvr_pct=25,
                interest_rate=8.5,
                land_loan_type="provisioned",
            ),
            FacilityTerms(
                id="senior",
                name="Senior Construction",
                priority="senior",
                sort_order=1,
                calculation_type="auto",
                lvr_method="tdc_ex_gst",
                lvr_pct=65,
                interest_rate=7.25,
                land_loan_type="provisioned",
            ),
            FacilityTerms(
                id="mezz",
                name="Mezzanine",
                priority="mezzanine",
                calculation_type="auto",
                lvr_method="tdc_ex_gst",
                lvr_pct=15,
                interest_rate=16.0,
                land_loan_type="serviced",
            ),
        ]
    )
    context = FacilitySizingContext(
        total_revenue_ex_gst=13_500_000_00,
        total_revenue=14_850_000_00,
        total_costs_ex_funding=float(sum(costs)),
        construction_costs=float(CONSTRUCTION_PER_MONTH * 14),
    )

    labels = [p.strftime("%b-%y") for p in pd.period_range("2025-01", periods=MONTHS, freq="M")]
    results = plan.compute_drawdowns(
        costs, context, month_labels=labels, assigned_costs={"land": land_assignment}
    )

    pd.set_option("display.width", 120)
    print("Cumulative drawn balance (cents)")
    print(drawdown_pivot(results))
    print()
    print("Facility utilisation")
    print(utilisation_summary(results).drop(columns=["facility_id"]))
    print()
    print(utilisation_totals(results))

    summary = plan.interest_summary(costs, context, assigned_costs={"land": land_assignment})
    print(f"\nTotal debt interest: ${summary.total_debt_interest / 100:,.2f}")


if __name__ == "__main__":
    main()
