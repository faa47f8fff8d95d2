# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
devfinance Core Framework

Foundational building blocks shared by the debt, drawdown and reporting
modules: the immutable model base, enums, settings and rounding helpers.
"""

from . import primitives
from .primitives import (
    DrawdownSettings,
    FacilityCalculationType,
    FacilityPriority,
    LandLoanType,
    LoanType,
    LvrMethod,
    Model,
    RoundingMethod,
    SizingSettings,
    round_amount,
)

__all__ = [
    "primitives",
    "Model",
    "DrawdownSettings",
    "SizingSettings",
    "FacilityPriority",
    "LandLoanType",
    "FacilityCalculationType",
    "LvrMethod",
    "LoanType",
    "RoundingMethod",
    "round_amount",
]
