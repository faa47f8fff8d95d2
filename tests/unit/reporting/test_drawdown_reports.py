# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for drawdown DataFrame views."""

import numpy as np
import pandas as pd
import pytest

from devfinance.drawdown import compute_drawdowns
from devfinance.reporting import (
    SCHEDULE_COLUMNS,
    SUMMARY_COLUMNS,
    drawdown_pivot,
    drawdown_schedule_frame,
    utilisation_summary,
    utilisation_totals,
)
from tests.conftest import make_facility


@pytest.fixture
def results():
    """Senior 30k provisioned at 12%, junior 100k serviced at 12%, three months."""
    return compute_drawdowns(
        [
            make_facility(
                "junior", size=100_000, interest_rate=12.0, priority="junior"
            ),
            make_facility(
                "senior",
                size=30_000,
                interest_rate=12.0,
                land_loan_type="provisioned",
                priority="senior",
            ),
        ],
        [20_000, 20_000, 0],
        month_labels=["Jan", "Feb", "Mar"],
    )


class TestScheduleFrame:
    def test_long_format(self, results):
        frame = drawdown_schedule_frame(results)

        assert list(frame.columns) == SCHEDULE_COLUMNS
        assert len(frame) == 6
        assert frame["facility_id"].tolist() == ["senior"] * 3 + ["junior"] * 3
        assert frame["label"].tolist() == ["Jan", "Feb", "Mar"] * 2

    def test_costs_funded_in_full(self, results):
        frame = drawdown_schedule_frame(results)
        assert frame.groupby("month")["costs_drawn"].sum().tolist() == [20_000, 20_000, 0]

    def test_empty(self):
        frame = drawdown_schedule_frame([])
        assert frame.empty
        assert list(frame.columns) == SCHEDULE_COLUMNS


class TestPivot:
    def test_cumulative_balance_by_facility(self, results):
        pivot = drawdown_pivot(results)

        assert list(pivot.index) == ["Jan", "Feb", "Mar"]
        assert list(pivot.columns) == ["Senior", "Junior"]
        # Senior: 20_000 + 200 capitalised, then the last 9_800 of room plus 200 interest
        assert pivot["Senior"].tolist() == [20_200, 30_000, 30_000]
        assert pivot["Junior"].tolist() == [0, 10_200, 10_200]

    def test_other_value(self, results):
        pivot = drawdown_pivot(results, value="interest_accrued")
        assert pivot["Junior"].tolist() == [0, 102, 102]

    def test_invalid_value(self, results):
        with pytest.raises(ValueError, match="value must be one of"):
            drawdown_pivot(results, value="facility_size")

    def test_empty(self):
        assert drawdown_pivot([]).empty


class TestUtilisation:
    def test_summary(self, results):
        summary = utilisation_summary(results).set_index("facility_id")

        assert list(summary.reset_index().columns) == SUMMARY_COLUMNS
        senior = summary.loc["senior"]
        assert senior["total_drawn"] == 29_800
        assert senior["total_capitalised"] == 200
        assert senior["total_interest"] == 800
        assert senior["peak_drawn"] == 30_000
        assert senior["peak_utilisation"] == pytest.approx(1.0)
        assert senior["first_draw_month"] == 1
        assert senior["land_loan_type"] == "provisioned"

        junior = summary.loc["junior"]
        assert junior["total_drawn"] == 10_200
        assert junior["total_interest"] == 204
        assert junior["total_capitalised"] == 0
        assert junior["peak_utilisation"] == pytest.approx(0.102)
        assert junior["first_draw_month"] == 2

    def test_never_drawn_facility(self):
        results = compute_drawdowns(
            [make_facility("idle", size=0), make_facility("zero", size=10)], [0]
        )
        summary = utilisation_summary(results)
        assert np.isnan(summary["first_draw_month"]).all()
        assert summary["peak_utilisation"].tolist() == [0.0, 0.0]

    def test_totals(self, results):
        totals = utilisation_totals(results)

        assert isinstance(totals, pd.Series)
        assert totals["total_facility_size"] == 130_000
        assert totals["total_drawn"] == 40_000
        assert totals["total_capitalised"] == 200
        assert totals["combined_peak_drawn"] == 40_200
        assert totals["combined_peak_utilisation"] == pytest.approx(40_200 / 130_000)

    def test_empty(self):
        assert utilisation_summary([]).empty
        assert utilisation_totals([])["total_drawn"] == 0
