# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Construction loan schedule.

Draws fund a loan-to-cost share of each month's cost until the facility
limit is reached. Interest accrues monthly on the balance after that month's
draw and is paid in cash. The balance is cleared by a bullet at maturity
(interest-only facilities) or by equal principal instalments from the
repayment start through maturity.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pandas as pd

from ..core.primitives import GlobalSettings, Model, validate_horizon
from ..utils.money import round_currency
from .facility import LoanFacility

logger = logging.getLogger(__name__)


class LoanSchedule(Model):
    """
    Monthly loan activity.

    Attributes:
        frame: DataFrame indexed by project month with ``draw``, ``interest``,
            ``repayment`` and closing ``balance`` columns
    """

    frame: pd.DataFrame

    @property
    def draw(self) -> pd.Series:
        return self.frame["draw"]

    @property
    def interest(self) -> pd.Series:
        return self.frame["interest"]

    @property
    def repayment(self) -> pd.Series:
        return self.frame["repayment"]

    @property
    def balance(self) -> pd.Series:
        return self.frame["balance"]

    @property
    def total_drawn(self) -> float:
        return float(self.draw.sum())


def _draws(facility: LoanFacility, costs: np.ndarray, horizon: int) -> np.ndarray:
    draws = np.zeros(horizon)
    headroom = facility.limit
    last = min(facility.maturity_period, horizon - 1)
    for month in range(facility.start_period, last + 1):
        amount = min(max(costs[month], 0.0) * facility.ltc_percent, headroom)
        draws[month] = amount
        headroom -= amount
    return draws


def build_loan_schedule(
    facility: LoanFacility,
    costs: pd.Series,
    horizon: Optional[int] = None,
    settings: Optional[GlobalSettings] = None,
) -> LoanSchedule:
    """
    Build the draw, interest, repayment and balance schedule of a facility.

    Args:
        facility: Loan facility terms
        costs: Monthly cost incurred (positive amounts) that draws fund
        horizon: Number of project months; defaults to ``len(costs)``
        settings: Engine settings (decimal precision)

    Returns:
        LoanSchedule covering ``horizon`` months

    Raises:
        ValueError: If ``costs`` is shorter than the horizon

    Example:
        ```python
        facility = LoanFacility(limit=10_000_000, ltc_percent=0.7,
                                annual_rate=0.08, maturity_period=9)
        costs = pd.Series([1_000_000.0] + [0.0] * 9)
        schedule = build_loan_schedule(facility, costs)
        schedule.draw[0]  # 700000.0
        ```
    """
    horizon = validate_horizon(len(costs) if horizon is None else horizon)
    if len(costs) < horizon:
        raise ValueError(f"costs has {len(costs)} months, horizon is {horizon}")
    places = (settings or GlobalSettings()).engine.decimal_precision

    draws = _draws(facility, costs.to_numpy(dtype=float)[:horizon], horizon)
    drawn_months = np.flatnonzero(draws)
    repayment_start = facility.repayment_start
    if repayment_start is None:
        repayment_start = int(drawn_months[-1]) + 1 if len(drawn_months) else facility.start_period

    interest = np.zeros(horizon)
    repayment = np.zeros(horizon)
    balance = np.zeros(horizon)
    outstanding = 0.0

    for month in range(horizon):
        outstanding += draws[month]
        interest[month] = round_currency(outstanding * facility.monthly_rate, places)

        if outstanding > 0:
            if month == facility.maturity_period:
                repayment[month] = outstanding
            elif not facility.interest_only and repayment_start <= month < facility.maturity_period:
                remaining = facility.maturity_period - month + 1
                repayment[month] = round_currency(outstanding / remaining, places)

        outstanding -= repayment[month]
        balance[month] = outstanding

    if outstanding > 0:
        logger.warning(
            f"Loan '{facility.name or 'loan'}' matures in month {facility.maturity_period}; "
            f"{outstanding:,.2f} remains outstanding at the end of the {horizon}-month horizon"
        )

    frame = pd.DataFrame(
        {"draw": draws, "interest": interest, "repayment": repayment, "balance": balance},
        index=pd.RangeIndex(horizon),
    )
    logger.debug(
        f"Built loan schedule: drawn {draws.sum():,.2f}, interest {interest.sum():,.2f}"
    )
    return LoanSchedule(frame=frame)
