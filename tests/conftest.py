# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for devfinance testing.

This module provides convenient builders for facility records and cost
schedules so tests state only the fields they care about.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np
import pytest

from devfinance.debt import Facility, FacilitySizingContext, FacilityTerms


# Facility Utilities
def make_facility(
    id: str = "f1",
    size: int = 100_000,
    interest_rate: float = 0.0,
    land_loan_type: str = "serviced",
    priority: str = "senior",
    sort_order: int = 0,
    name: Optional[str] = None,
) -> Facility:
    """
    Create a facility for testing with sensible defaults.

    Example:
        >>> senior = make_facility("s", size=30_000, priority="senior")
        >>> senior.priority.rank
        1
    """
    return Facility(
        id=id,
        name=name if name is not None else id.title(),
        size=size,
        interest_rate=interest_rate,
        land_loan_type=land_loan_type,
        priority=priority,
        sort_order=sort_order,
    )


def random_costs(
    rng: np.random.Generator, months: int, high: int = 50_000
) -> List[int]:
    """Random non-negative integer monthly costs, with roughly a third of months idle."""
    costs = rng.integers(0, high, size=months)
    idle = rng.random(months) < 0.3
    return [int(c) for c in np.where(idle, 0, costs)]


def random_facilities(rng: np.random.Generator, count: int) -> List[Facility]:
    """Random mix of priorities, policies, sizes and rates."""
    priorities = ["senior", "mezzanine", "junior", "equity"]
    policies = ["provisioned", "serviced"]
    return [
        make_facility(
            id=f"f{i}",
            size=int(rng.integers(0, 400_000)),
            interest_rate=float(rng.choice([0.0, 4.5, 6.5, 12.0, 18.0])),
            land_loan_type=str(rng.choice(policies)),
            priority=str(rng.choice(priorities)),
            sort_order=int(rng.integers(0, 3)),
        )
        for i in range(count)
    ]


@pytest.fixture
def senior_junior() -> List[Facility]:
    """Zero-rate senior (30k) and junior (100k), supplied junior-first."""
    return [
        make_facility("junior", size=100_000, priority="junior"),
        make_facility("senior", size=30_000, priority="senior"),
    ]


@pytest.fixture
def sizing_context() -> FacilitySizingContext:
    """Project totals for a mid-size residential development (minor units)."""
    return FacilitySizingContext(
        total_revenue_ex_gst=12_000_000_00,
        total_revenue=13_200_000_00,
        total_costs_ex_funding=10_000_000_00,
        construction_costs=6_000_000_00,
        contingency_costs=300_000_00,
    )


@pytest.fixture
def auto_senior_terms() -> FacilityTerms:
    """Auto-sized provisioned senior facility at 65% of TDC ex GST."""
    return FacilityTerms(
        id="senior",
        name="Senior Construction",
        priority="senior",
        calculation_type="auto",
        lvr_method="tdc_ex_gst",
        lvr_pct=65,
        interest_rate=12.0,
        land_loan_type="provisioned",
    )
