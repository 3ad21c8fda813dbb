# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

import pandas as pd

from ..core.calculations import FinancialCalculations
from ..core.primitives import GlobalSettings, Model


class KPIResults(Model):
    """
    Headline project metrics.

    Attributes:
        npv: Net present value at the valuation discount rate
        irr: Annual internal rate of return (None when undefined)
        profit: Sum of net cash flows
        total_revenue: Sum of positive net cash flows
        total_costs: Sum of negative net cash flows, as a positive amount
        equity_multiple: Inflows over outflows (None without outflows)
        payback_month: First month cumulative cash turns positive
        peak_funding: Largest cumulative deficit
    """

    npv: float = 0.0
    irr: Optional[float] = None
    profit: float = 0.0
    total_revenue: float = 0.0
    total_costs: float = 0.0
    equity_multiple: Optional[float] = None
    payback_month: Optional[int] = None
    peak_funding: float = 0.0


def compute_kpis(
    net_cash_flow: pd.Series, settings: Optional[GlobalSettings] = None
) -> KPIResults:
    """
    Compute KPIs from a monthly net cash flow series.

    An empty series yields all-zero KPIs.
    """
    if net_cash_flow.empty:
        return KPIResults()

    settings = settings or GlobalSettings()
    return KPIResults(
        npv=FinancialCalculations.calculate_npv(
            net_cash_flow, settings.valuation.discount_rate
        ),
        irr=FinancialCalculations.calculate_irr(net_cash_flow),
        profit=float(net_cash_flow.sum()),
        total_revenue=float(net_cash_flow[net_cash_flow > 0].sum()),
        total_costs=float(-net_cash_flow[net_cash_flow < 0].sum()),
        equity_multiple=FinancialCalculations.calculate_equity_multiple(net_cash_flow),
        payback_month=FinancialCalculations.calculate_payback_period(net_cash_flow),
        peak_funding=FinancialCalculations.calculate_peak_funding(net_cash_flow),
    )
