# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
devfinance Core Primitives

Essential building blocks: immutable model base, closed enums for facility
attributes, settings and the rounding policy for monetary amounts.
"""

from .enums import (
    FacilityCalculationType,
    FacilityPriority,
    LandLoanType,
    LoanType,
    LvrMethod,
    RoundingMethod,
)
from .model import Model
from .rounding import round_amount
from .settings import DrawdownSettings, SizingSettings

__all__ = [
    # Core models
    "Model",
    # Settings
    "DrawdownSettings",
    "SizingSettings",
    # Enums
    "FacilityCalculationType",
    "FacilityPriority",
    "LandLoanType",
    "LoanType",
    "LvrMethod",
    "RoundingMethod",
    # Rounding
    "round_amount",
]
