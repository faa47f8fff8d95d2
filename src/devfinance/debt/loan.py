# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Simple-interest term loans carried alongside drawn facilities."""

from typing import Union

from pydantic import Field, field_validator

from ..core.primitives import LoanType, Model, RoundingMethod, round_amount


class TermLoan(Model):
    """
    A fully-advanced loan with a fixed principal and term.

    Interest is estimated as simple interest on the full principal for the
    whole term, regardless of repayment profile.

    Example:
        loan = TermLoan(id="l1", name="Vendor Finance",
                        principal_amount=500_000_00, interest_rate=9.0,
                        term_months=12)
        loan.total_interest()  # 45_000_00
    """

    id: str = Field(..., description="Unique loan identifier")
    name: str = Field("")
    principal_amount: Union[int, float] = Field(0)
    interest_rate: float = Field(0.0, description="Nominal annual rate in percent")
    term_months: int = Field(0)
    loan_type: LoanType = Field(LoanType.INTEREST_ONLY)
    sort_order: int = Field(0)

    @field_validator(
        "principal_amount", "interest_rate", "term_months", "sort_order", mode="before"
    )
    @classmethod
    def _missing_number_is_zero(cls, v):
        return 0 if v is None else v

    @field_validator("loan_type", mode="before")
    @classmethod
    def _coerce_loan_type(cls, v):
        return LoanType(v)

    @property
    def monthly_rate(self) -> float:
        return self.interest_rate / 100 / 12

    def total_interest(self, rounding: RoundingMethod = RoundingMethod.HALF_UP) -> int:
        """Simple interest over the full term, rounded to whole minor units."""
        return round_amount(
            self.principal_amount * self.monthly_rate * self.term_months, rounding
        )
