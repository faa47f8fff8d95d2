# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Funding facility records.

``Facility`` is the fully-resolved input to the drawdown engine: a limit, a
rate, a capitalisation policy and a draw priority. ``FacilityTerms`` is the
stored funding record a project keeps, whose limit may still need resolving
from an LVR percentage before it can be drawn against.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import Field, field_validator

from ..core.primitives import (
    FacilityCalculationType,
    FacilityPriority,
    LandLoanType,
    LvrMethod,
    Model,
)


class Facility(Model):
    """
    A funding facility (loan or tranche) ready to be drawn against.

    No range validation is applied: the drawdown engine is a pure numeric
    transform and callers own the sanity of sizes and rates. Only types are
    coerced, and the priority and capitalisation policy fall back to their
    permissive defaults for unrecognised values.

    Attributes:
        id: Unique identifier of the facility
        name: Display label
        size: Facility limit in minor currency units
        interest_rate: Nominal annual rate in percent (6.5 means 6.5%/yr)
        land_loan_type: PROVISIONED capitalises interest, SERVICED does not
        priority: Draw order rank (senior first, unranked last)
        sort_order: Tiebreaker within a priority

    Example:
        senior = Facility(
            id="f-senior",
            name="Senior Construction",
            size=8_000_000_00,
            interest_rate=7.25,
            land_loan_type="provisioned",
            priority="senior",
        )
    """

    id: str = Field(..., description="Unique facility identifier")
    name: str = Field("", description="Display label")
    size: Union[int, float] = Field(..., description="Facility limit (minor units)")
    interest_rate: float = Field(
        0.0, description="Nominal annual interest rate in percent"
    )
    land_loan_type: LandLoanType = Field(
        LandLoanType.SERVICED, description="Interest capitalisation policy"
    )
    priority: FacilityPriority = Field(
        FacilityPriority.UNRANKED, description="Draw order ranking"
    )
    sort_order: int = Field(0, description="Tiebreaker within the same priority")

    @field_validator("interest_rate", mode="before")
    @classmethod
    def _missing_rate_is_zero(cls, v):
        return 0.0 if v is None else v

    @field_validator("land_loan_type", mode="before")
    @classmethod
    def _coerce_land_loan_type(cls, v):
        return LandLoanType(v)

    @field_validator("priority", mode="before")
    @classmethod
    def _coerce_priority(cls, v):
        return FacilityPriority(v)

    @field_validator("sort_order", mode="before")
    @classmethod
    def _missing_sort_order_is_zero(cls, v):
        return 0 if v is None else v

    @property
    def monthly_rate(self) -> float:
        """Monthly interest rate as a decimal (annual percent / 100 / 12)."""
        return self.interest_rate / 100 / 12

    @property
    def is_provisioned(self) -> bool:
        return self.land_loan_type == LandLoanType.PROVISIONED

    @property
    def draw_order_key(self) -> tuple:
        """Sort key placing facilities in draw sequence."""
        return (self.priority.rank, self.sort_order)

    def __str__(self) -> str:
        return (
            f"{self.name or self.id} ({self.priority.value}, "
            f"{self.interest_rate:.2f}%, {self.land_loan_type.value})"
        )


_ENUM_FIELDS = {
    "priority": FacilityPriority,
    "calculation_type": FacilityCalculationType,
    "lvr_method": LvrMethod,
    "land_loan_type": LandLoanType,
}


class FacilityTerms(Model):
    """
    Stored funding record for a project's debt facility.

    A MANUAL facility carries its limit in ``total_facility`` and a flat
    ``interest_provision``. An AUTO facility is sized as ``lvr_pct`` percent
    of the project metric selected by ``lvr_method`` and has its interest
    computed by the drawdown engine.

    Example:
        terms = FacilityTerms(
            id="f-senior",
            name="Senior Construction",
            priority="senior",
            calculation_type="auto",
            lvr_method="tdc_ex_gst",
            lvr_pct=65,
            interest_rate=7.25,
            land_loan_type="provisioned",
        )
    """

    id: str = Field(..., description="Unique facility identifier")
    name: str = Field("", description="Display label")
    priority: FacilityPriority = Field(FacilityPriority.UNRANKED)
    calculation_type: FacilityCalculationType = Field(
        FacilityCalculationType.MANUAL,
        description="MANUAL uses total_facility, AUTO sizes from lvr_method/lvr_pct",
    )
    term_months: Optional[int] = Field(None, description="Facility term in months")
    lvr_method: LvrMethod = Field(LvrMethod.TDC_EX_GST)
    lvr_pct: float = Field(0.0, description="LVR percentage for AUTO sizing")
    interest_rate: float = Field(0.0, description="Nominal annual rate in percent")
    total_facility: Union[int, float] = Field(
        0, description="Facility limit for MANUAL sizing (minor units)"
    )
    interest_provision: Union[int, float] = Field(
        0, description="Flat interest allowance for MANUAL facilities (minor units)"
    )
    land_loan_type: LandLoanType = Field(LandLoanType.SERVICED)
    sort_order: int = Field(0)

    @field_validator("lvr_pct", "interest_rate", mode="before")
    @classmethod
    def _missing_number_is_zero(cls, v):
        return 0.0 if v is None else v

    @field_validator(
        "total_facility", "interest_provision", "sort_order", mode="before"
    )
    @classmethod
    def _missing_amount_is_zero(cls, v):
        return 0 if v is None else v

    @field_validator(
        "priority", "calculation_type", "lvr_method", "land_loan_type", mode="before"
    )
    @classmethod
    def _coerce_enum(cls, v, info):
        return _ENUM_FIELDS[info.field_name](v)

    @property
    def is_auto(self) -> bool:
        return self.calculation_type == FacilityCalculationType.AUTO

    def to_facility(self, size: Union[int, float]) -> Facility:
        """
        Build the engine input for this record with a resolved limit.

        Args:
            size: Resolved facility limit (see ``resolve_facility_size``)

        Returns:
            Facility: Engine-ready facility carrying this record's identity
        """
        return Facility(
            id=self.id,
            name=self.name,
            size=size,
            interest_rate=self.interest_rate,
            land_loan_type=self.land_loan_type,
            priority=self.priority,
            sort_order=self.sort_order,
        )
