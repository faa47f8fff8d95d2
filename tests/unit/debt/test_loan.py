# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for simple-interest term loans."""

from devfinance.core.primitives import LoanType, RoundingMethod
from devfinance.debt import TermLoan


def test_simple_interest_over_term():
    loan = TermLoan(
        id="l1", principal_amount=500_000_00, interest_rate=9.0, term_months=12
    )
    assert loan.total_interest() == 45_000_00


def test_partial_year_term():
    loan = TermLoan(id="l1", principal_amount=120_000, interest_rate=6.0, term_months=7)
    # 120_000 * 0.005 * 7
    assert loan.total_interest() == 4_200


def test_missing_values_accrue_nothing():
    loan = TermLoan(
        id="l1", principal_amount=None, interest_rate=None, term_months=None
    )
    assert loan.total_interest() == 0
    assert loan.loan_type == LoanType.INTEREST_ONLY


def test_rounding_method():
    # 250 * 0.01 * 1 = 2.5
    loan = TermLoan(id="l1", principal_amount=250, interest_rate=12.0, term_months=1)
    assert loan.total_interest() == 3
    assert loan.total_interest(RoundingMethod.HALF_EVEN) == 2


def test_stored_record_with_null_type_and_order():
    loan = TermLoan.model_validate(
        {
            "id": "l1",
            "name": "Vendor Finance",
            "principal_amount": 100_000,
            "interest_rate": 6.0,
            "term_months": 12,
            "loan_type": None,
            "sort_order": None,
        }
    )
    assert loan.loan_type == LoanType.INTEREST_ONLY
    assert loan.sort_order == 0
    assert loan.total_interest() == 6_000


def test_unknown_loan_type_is_interest_only():
    loan = TermLoan(id="l1", loan_type="balloon")
    assert loan.loan_type == LoanType.INTEREST_ONLY
    assert TermLoan(id="l2", loan_type="principal_and_interest").loan_type == (
        LoanType.PRINCIPAL_AND_INTEREST
    )
