# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Scenario cash flow assembly.

Builds every line of a scenario, combines them into a signed monthly cash
flow frame and derives the project KPIs. Costs, interest and repayments are
outflows (negative); revenue and loan draws are inflows (positive).
"""

from __future__ import annotations

import logging
import time
from typing import Optional

import numpy as np
import pandas as pd

from ..core.primitives import CashFlowLineEnum, GlobalSettings, Model
from ..costs import build_construction_row
from ..financing import LoanSchedule, build_loan_schedule
from ..revenue import build_rental_revenue, build_sale_revenue
from .metrics import KPIResults, compute_kpis
from .scenario import Scenario

logger = logging.getLogger(__name__)

_INFLOWS = (CashFlowLineEnum.SALES, CashFlowLineEnum.RENTAL, CashFlowLineEnum.LOAN_DRAW)
_OUTFLOWS = (
    CashFlowLineEnum.CONSTRUCTION,
    CashFlowLineEnum.LOAN_INTEREST,
    CashFlowLineEnum.LOAN_REPAYMENT,
)


class ScenarioResult(Model):
    """
    Output of a scenario run.

    Attributes:
        scenario: The inputs that produced this result
        cash_flow: Signed monthly frame with one column per
            ``CashFlowLineEnum`` value; indexed by project month, or by
            calendar period when the scenario is dated
        kpis: Headline metrics of the ``net`` column
        loan_schedule: Loan activity, when the scenario has a facility
    """

    scenario: Scenario
    cash_flow: pd.DataFrame
    kpis: KPIResults
    loan_schedule: Optional[LoanSchedule] = None

    @property
    def net(self) -> pd.Series:
        return self.cash_flow[CashFlowLineEnum.NET.value]

    def line(self, key: CashFlowLineEnum) -> pd.Series:
        return self.cash_flow[CashFlowLineEnum(key).value]


def _sum_rows(rows, horizon: int) -> np.ndarray:
    total = np.zeros(horizon)
    for row in rows:
        total += row.to_numpy()
    return total


def run_scenario(
    scenario: Scenario, settings: Optional[GlobalSettings] = None
) -> ScenarioResult:
    """
    Compute the cash flow frame and KPIs of a scenario.

    Loan draws fund a share of construction cost incurred (before
    retention); the construction line itself is the cash paid (after
    retention).

    Args:
        scenario: Scenario inputs
        settings: Engine and valuation settings

    Returns:
        ScenarioResult with cash flow frame, KPIs and loan schedule

    Raises:
        ValueError: If any line's window ends before it starts

    Example:
        ```python
        scenario = Scenario(
            horizon=40,
            sale_lines=[SaleLine(units=10, price_per_unit=100_000,
                                 start_period=24, end_period=26)],
        )
        result = run_scenario(scenario)
        result.kpis.total_revenue  # 1000000.0
        ```
    """
    settings = settings or GlobalSettings()
    horizon = scenario.horizon
    started = time.perf_counter()

    construction_paid = _sum_rows(
        (build_construction_row(item, horizon, settings) for item in scenario.construction_items),
        horizon,
    )
    sales = _sum_rows(
        (build_sale_revenue(line, horizon, settings) for line in scenario.sale_lines), horizon
    )
    rental = _sum_rows(
        (build_rental_revenue(line, horizon, settings) for line in scenario.rental_lines), horizon
    )

    loan_schedule = None
    draw = interest = repayment = np.zeros(horizon)
    if scenario.loan_facility is not None:
        cost_incurred = _sum_rows(
            (
                build_construction_row(item, horizon, settings, apply_retention=False)
                for item in scenario.construction_items
            ),
            horizon,
        )
        loan_schedule = build_loan_schedule(
            scenario.loan_facility, pd.Series(cost_incurred), horizon, settings
        )
        draw = loan_schedule.draw.to_numpy()
        interest = loan_schedule.interest.to_numpy()
        repayment = loan_schedule.repayment.to_numpy()

    lines = {
        CashFlowLineEnum.CONSTRUCTION: construction_paid,
        CashFlowLineEnum.SALES: sales,
        CashFlowLineEnum.RENTAL: rental,
        CashFlowLineEnum.LOAN_DRAW: draw,
        CashFlowLineEnum.LOAN_INTEREST: interest,
        CashFlowLineEnum.LOAN_REPAYMENT: repayment,
    }
    frame = pd.DataFrame(
        {
            key.value: (values if key in _INFLOWS else -values)
            for key, values in lines.items()
        },
        index=pd.RangeIndex(horizon),
    )
    # Avoid -0.0 entries in outflow columns
    frame = frame + 0.0
    frame[CashFlowLineEnum.NET.value] = frame[[k.value for k in _INFLOWS + _OUTFLOWS]].sum(axis=1)
    frame[CashFlowLineEnum.CUMULATIVE.value] = frame[CashFlowLineEnum.NET.value].cumsum()

    timeline = scenario.timeline
    if timeline is not None:
        frame = timeline.to_dated(frame)

    kpis = compute_kpis(frame[CashFlowLineEnum.NET.value], settings)
    logger.info(
        f"Scenario '{scenario.name}' computed in {time.perf_counter() - started:.3f}s: "
        f"profit {kpis.profit:,.0f}, NPV {kpis.npv:,.0f}"
    )
    return ScenarioResult(
        scenario=scenario, cash_flow=frame, kpis=kpis, loan_schedule=loan_schedule
    )
