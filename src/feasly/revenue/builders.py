# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Monthly revenue builders for rental and sale lines.

Both builders are pure functions of (line, horizon): they return a series of
``horizon`` floats indexed by project month, zero outside the line's window,
and reject a line whose window ends before it starts.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pandas as pd

from ..core.indexation import escalation_factor, whole_years_elapsed
from ..core.primitives import GlobalSettings, validate_horizon, validate_period_range
from ..core.window import clip_to_horizon
from ..utils.money import even_instalments, round_currency
from .lines import RentalLine, SaleLine

logger = logging.getLogger(__name__)


def _empty_row(horizon: int, name: str) -> pd.Series:
    return pd.Series(np.zeros(horizon), index=pd.RangeIndex(horizon), name=name, dtype=float)


def build_rental_revenue(
    line: RentalLine,
    horizon: int,
    settings: Optional[GlobalSettings] = None,
) -> pd.Series:
    """
    Build the monthly revenue series of a rental line.

    For each active month ``m`` the ADR is escalated by whole years elapsed
    since the line started, then multiplied by occupancy, rooms and the
    days-per-month constant::

        revenue[m] = round(rooms * adr * (1 + esc) ** ((m - start) // 12)
                           * occupancy * days_per_month, 2)

    Args:
        line: Rental line inputs
        horizon: Number of project months in the output
        settings: Engine settings (days per month, decimal precision)

    Returns:
        Series of length ``horizon`` indexed by project month

    Raises:
        ValueError: If ``line.end_period < line.start_period``

    Example:
        ```python
        line = RentalLine(rooms=10, adr=100, occupancy_rate=0.8,
                          start_period=48, end_period=50)
        row = build_rental_revenue(line, horizon=60)
        row[48]  # 24333.36
        ```
    """
    validate_horizon(horizon)
    validate_period_range(line.start_period, line.end_period, label="RentalLine")
    engine = (settings or GlobalSettings()).engine

    row = _empty_row(horizon, line.name or "rental")
    base = line.rooms * line.occupancy_rate * engine.days_per_month

    for month in clip_to_horizon(line.start_period, line.end_period, horizon, "RentalLine"):
        adr = line.adr * escalation_factor(line.annual_escalation, month - line.start_period)
        row.iat[month] = round_currency(base * adr, engine.decimal_precision)

    logger.debug(
        f"Built rental revenue '{row.name}': {line.active_months} months, total {row.sum():,.2f}"
    )
    return row


def build_sale_revenue(
    line: SaleLine,
    horizon: int,
    settings: Optional[GlobalSettings] = None,
) -> pd.Series:
    """
    Build the monthly revenue series of a sale line.

    Total proceeds are escalated once over the whole window by its span in
    whole years::

        total = units * price * (1 + esc) ** ((end - start) // 12)

    and spread evenly over the inclusive window. Each month is rounded to
    the currency precision and the unrounded remainder is pushed into the
    last active month, so the active months sum to ``total`` exactly.

    Args:
        line: Sale line inputs
        horizon: Number of project months in the output
        settings: Engine settings (decimal precision)

    Returns:
        Series of length ``horizon`` indexed by project month

    Raises:
        ValueError: If ``line.end_period < line.start_period``
    """
    validate_horizon(horizon)
    validate_period_range(line.start_period, line.end_period, label="SaleLine")
    engine = (settings or GlobalSettings()).engine

    row = _empty_row(horizon, line.name or "sales")
    span_years = whole_years_elapsed(line.end_period - line.start_period)
    total = line.units * line.price_per_unit * (1.0 + line.escalation) ** span_years
    regular, final = even_instalments(total, line.active_months, engine.decimal_precision)

    for month in clip_to_horizon(line.start_period, line.end_period, horizon, "SaleLine"):
        row.iat[month] = final if month == line.end_period else regular

    logger.debug(
        f"Built sale revenue '{row.name}': total {total:,.2f} over {line.active_months} months"
    )
    return row
