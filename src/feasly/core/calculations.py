# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial calculation functions.

Pure (math-only) metrics over a monthly net cash flow series. The scenario
analysis delegates here so there is a single source of truth for KPIs.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import pandas as pd
from pyxirr import InvalidPaymentsError, irr, npv, xirr

logger = logging.getLogger(__name__)


def _finite(value: Optional[float]) -> Optional[float]:
    if value is None or not math.isfinite(value):
        return None
    return float(value)


class FinancialCalculations:
    """
    Static methods for project-level financial metrics.

    Cash flow convention: negative values are outflows (costs, debt service),
    positive values are inflows (revenue, loan proceeds).
    """

    @staticmethod
    def calculate_npv(cash_flows: pd.Series, discount_rate: float) -> Optional[float]:
        """
        Net Present Value of a monthly series.

        Month ``i`` is discounted by ``(1 + discount_rate / 12) ** i``; the
        first month is undiscounted.

        Args:
            cash_flows: Monthly cash flows
            discount_rate: Annual discount rate as decimal (e.g. 0.10)

        Returns:
            NPV as float, 0.0 for an empty series, None for an invalid rate

        Example:
            ```python
            flows = pd.Series([-1000.0, 0.0, 1100.0])
            FinancialCalculations.calculate_npv(flows, 0.12)  # ~78.33
            ```
        """
        if cash_flows.empty:
            return 0.0
        if discount_rate <= -12:
            return None
        return float(npv(discount_rate / 12.0, cash_flows.to_numpy(dtype=float)))

    @staticmethod
    def calculate_irr(cash_flows: pd.Series) -> Optional[float]:
        """
        Annual Internal Rate of Return using PyXIRR.

        Series indexed by a monthly PeriodIndex use ``xirr`` on the period
        start dates. Otherwise the periodic monthly IRR is annualized as
        ``(1 + irr_m) ** 12 - 1``.

        Returns:
            IRR as decimal (e.g. 0.15 for 15%) or None when undefined

        Edge Cases Handled:
            - Empty series -> None
            - All flows of one sign (or zero) -> None
            - No solution found -> None
        """
        if cash_flows.empty:
            return None
        if not ((cash_flows < 0).any() and (cash_flows > 0).any()):
            return None

        amounts = cash_flows.to_numpy(dtype=float)
        try:
            if isinstance(cash_flows.index, pd.PeriodIndex):
                dates = [period.to_timestamp().date() for period in cash_flows.index]
                annual = xirr(dates, amounts)
                return _finite(annual)

            monthly = irr(amounts)
        except InvalidPaymentsError as exc:
            logger.debug(f"IRR undefined for cash flows: {exc}")
            return None

        if _finite(monthly) is None:
            return None
        return float((1.0 + monthly) ** 12 - 1.0)

    @staticmethod
    def calculate_equity_multiple(cash_flows: pd.Series) -> Optional[float]:
        """
        Total inflows divided by total outflows.

        Returns:
            Multiple (e.g. 1.6 for 1.6x) or None if there are no outflows
        """
        invested = -cash_flows[cash_flows < 0].sum()
        if invested == 0:
            return None
        returned = cash_flows[cash_flows > 0].sum()
        return float(returned / invested)

    @staticmethod
    def calculate_payback_period(cash_flows: pd.Series) -> Optional[int]:
        """
        First project month (0-based position) at which cumulative cash flow
        turns positive, or None if it never does.
        """
        positive = (cash_flows.cumsum() > 0).to_numpy()
        if not positive.any():
            return None
        return int(positive.argmax())

    @staticmethod
    def calculate_peak_funding(cash_flows: pd.Series) -> float:
        """Largest cumulative deficit, as a positive amount (0.0 if never negative)."""
        if cash_flows.empty:
            return 0.0
        return float(max(0.0, -cash_flows.cumsum().min()))
