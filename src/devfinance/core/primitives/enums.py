# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class FacilityPriority(str, Enum):
    """
    Draw order ranking for funding facilities.

    Senior facilities absorb unassigned project costs before mezzanine, and
    mezzanine before junior. Any value outside the known set coerces to
    UNRANKED, which sorts after every ranked facility.

    Attributes:
        SENIOR: First-ranking debt, drawn first
        MEZZANINE: Second-ranking debt
        JUNIOR: Third-ranking debt
        UNRANKED: Unknown or missing priority, drawn last
    """

    SENIOR = "senior"
    MEZZANINE = "mezzanine"
    JUNIOR = "junior"
    UNRANKED = "unranked"

    @classmethod
    def _missing_(cls, value):
        return cls.UNRANKED

    @property
    def rank(self) -> int:
        """Sort key for draw order (lower draws first)."""
        return _PRIORITY_RANKS[self]


_PRIORITY_RANKS = {
    FacilityPriority.SENIOR: 1,
    FacilityPriority.MEZZANINE: 2,
    FacilityPriority.JUNIOR: 3,
    FacilityPriority.UNRANKED: 99,
}


class LandLoanType(str, Enum):
    """
    Interest treatment for a facility.

    PROVISIONED facilities capitalise accrued interest into the drawn balance
    each month (up to the facility limit). SERVICED facilities accrue interest
    that is paid separately and never grows the balance. Unknown values are
    treated as SERVICED.
    """

    PROVISIONED = "provisioned"
    SERVICED = "serviced"

    @classmethod
    def _missing_(cls, value):
        return cls.SERVICED


class FacilityCalculationType(str, Enum):
    """How a facility's limit is determined: a fixed amount or an LVR of a project metric."""

    MANUAL = "manual"
    AUTO = "auto"

    @classmethod
    def _missing_(cls, value):
        return cls.MANUAL


class LvrMethod(str, Enum):
    """
    Project metric an auto-sized facility's LVR percentage applies to.

    GRV = gross realisation value (sales revenue), TDC = total development
    cost excluding funding costs, TCC = total construction cost. The
    _INC_GST variants gross the base up by the configured GST rate, except
    GRV_INC_GST which uses revenue as sold. Unknown methods fall back to
    TDC_EX_GST.
    """

    GRV_EX_GST = "grv_ex_gst"
    GRV_INC_GST = "grv_inc_gst"
    TDC_EX_GST = "tdc_ex_gst"
    TDC_INC_GST = "tdc_inc_gst"
    TCC_EX_GST = "tcc_ex_gst"
    TCC_INC_GST = "tcc_inc_gst"
    TCC_CONT_EX_GST = "tcc_cont_ex_gst"
    TCC_CONT_INC_GST = "tcc_cont_inc_gst"

    @classmethod
    def _missing_(cls, value):
        return cls.TDC_EX_GST


class LoanType(str, Enum):
    """Repayment profile of a term loan. Unknown or missing values are INTEREST_ONLY."""

    INTEREST_ONLY = "interest_only"
    PRINCIPAL_AND_INTEREST = "principal_and_interest"

    @classmethod
    def _missing_(cls, value):
        return cls.INTEREST_ONLY


class RoundingMethod(str, Enum):
    """
    Rounding applied to monthly interest amounts (whole minor units).

    HALF_UP rounds ties toward positive infinity (2.5 -> 3, -2.5 -> -2),
    HALF_EVEN rounds ties to the nearest even unit (banker's rounding).
    """

    HALF_UP = "half_up"
    HALF_EVEN = "half_even"
