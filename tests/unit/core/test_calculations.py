# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for FinancialCalculations."""

import pandas as pd
import pytest

from feasly.core import FinancialCalculations


class TestNPV:
    def test_monthly_discounting(self):
        """First month undiscounted; later months at rate / 12."""
        flows = pd.Series([-1000.0, 0.0, 1100.0])
        expected = -1000.0 + 1100.0 / 1.01**2
        assert FinancialCalculations.calculate_npv(flows, 0.12) == pytest.approx(expected)

    def test_zero_rate_is_sum(self):
        flows = pd.Series([-500.0, 200.0, 400.0])
        assert FinancialCalculations.calculate_npv(flows, 0.0) == pytest.approx(100.0)

    def test_empty(self):
        assert FinancialCalculations.calculate_npv(pd.Series([], dtype=float), 0.1) == 0.0


class TestIRR:
    def test_periodic_irr_annualized(self):
        flows = pd.Series([-100.0, 110.0])
        assert FinancialCalculations.calculate_irr(flows) == pytest.approx(1.1**12 - 1)

    def test_dated_irr_uses_calendar(self):
        """A one-year round trip at +10% on real dates is ~10% a year."""
        index = pd.period_range("2025-01", periods=13, freq="M")
        flows = pd.Series([-100.0] + [0.0] * 11 + [110.0], index=index)
        assert FinancialCalculations.calculate_irr(flows) == pytest.approx(0.10, abs=1e-3)

    @pytest.mark.parametrize(
        "values", [[], [100.0, 50.0], [-100.0, -50.0], [0.0, 0.0]]
    )
    def test_undefined_irr(self, values):
        flows = pd.Series(values, dtype=float)
        assert FinancialCalculations.calculate_irr(flows) is None


class TestFundingMetrics:
    flows = pd.Series([-100.0, 50.0, 110.0])

    def test_equity_multiple(self):
        assert FinancialCalculations.calculate_equity_multiple(self.flows) == pytest.approx(1.6)

    def test_equity_multiple_without_outflows(self):
        assert FinancialCalculations.calculate_equity_multiple(pd.Series([1.0])) is None

    def test_payback_period(self):
        assert FinancialCalculations.calculate_payback_period(self.flows) == 2

    def test_payback_never_reached(self):
        assert FinancialCalculations.calculate_payback_period(pd.Series([-1.0, 0.5])) is None

    def test_peak_funding(self):
        flows = pd.Series([-100.0, -50.0, 120.0, -40.0])
        assert FinancialCalculations.calculate_peak_funding(flows) == 150.0

    def test_peak_funding_never_negative(self):
        assert FinancialCalculations.calculate_peak_funding(pd.Series([5.0, 1.0])) == 0.0
