# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .facility import Facility, FacilityTerms
from .loan import TermLoan
from .sizing import FacilitySizingContext, lvr_base, resolve_facility_size
from .plan import FundingInterestSummary, FundingPlan

__all__ = [
    # Facility records
    "Facility",
    "FacilityTerms",
    "TermLoan",
    # Sizing
    "FacilitySizingContext",
    "lvr_base",
    "resolve_facility_size",
    # Funding plans
    "FundingPlan",
    "FundingInterestSummary",
]
