# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cost calculators: construction budget lines and phased capex/opex items.

Costs are returned as positive amounts; the scenario cash flow applies the
outflow sign.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

import numpy as np
import pandas as pd

from ..core.curves import normalize_curve
from ..core.indexation import IndexBucket, bucket_rate, build_index_series, escalation_factor
from ..core.primitives import (
    CurveMeaningEnum,
    GlobalSettings,
    Model,
    validate_horizon,
    validate_period_range,
)
from ..core.window import clip_to_horizon
from ..utils.money import round_currency
from .items import ConstructionItem, CostItem

logger = logging.getLogger(__name__)


def build_construction_row(
    item: ConstructionItem,
    horizon: int,
    settings: Optional[GlobalSettings] = None,
    apply_retention: bool = True,
) -> pd.Series:
    """
    Build the monthly cost series of a construction item.

    The base cost is spread across the window by the item's draw schedule
    and each month is escalated by whole years elapsed since project start.
    With ``apply_retention`` the series is the cash paid: each month withholds
    ``retention_percent`` and the accumulated retention is released in
    ``end_period + retention_release_lag``. Without it the series is the
    cost incurred.

    Args:
        item: Construction item inputs
        horizon: Number of project months in the output
        settings: Engine settings (decimal precision)
        apply_retention: Return cash paid (True) or cost incurred (False)

    Returns:
        Series of length ``horizon`` of positive cost amounts

    Raises:
        ValueError: If ``item.end_period < item.start_period``

    Example:
        ```python
        item = ConstructionItem(base_cost=1_200_000, start_period=1, end_period=3)
        build_construction_row(item, horizon=6).tolist()
        # [0.0, 400000.0, 400000.0, 400000.0, 0.0, 0.0]
        ```
    """
    validate_horizon(horizon)
    validate_period_range(item.start_period, item.end_period, label="ConstructionItem")
    places = (settings or GlobalSettings()).engine.decimal_precision

    name = item.name or "construction"
    row = pd.Series(np.zeros(horizon), index=pd.RangeIndex(horizon), name=name, dtype=float)
    months = clip_to_horizon(item.start_period, item.end_period, horizon, "ConstructionItem")
    spread = []
    if months:
        spread = item.draw_schedule.apply_to_amount(
            item.base_cost,
            item.active_months,
            start=months.start - item.start_period,
            stop=months.stop - item.start_period,
        )

    retained = 0.0
    for month in months:
        cost = spread[month - months.start] * escalation_factor(item.escalation_rate, month)
        cost = round_currency(cost, places)
        if apply_retention:
            held = round_currency(cost * item.retention_percent, places)
            retained += held
            cost -= held
        row.iat[month] = cost

    if retained:
        if item.release_period < horizon:
            row.iat[item.release_period] += round_currency(retained, places)
        else:
            logger.warning(
                f"ConstructionItem '{name}': retention of {retained:,.2f} releases in month "
                f"{item.release_period}, beyond the {horizon}-month horizon"
            )

    logger.debug(f"Built construction row '{name}': total {row.sum():,.2f}")
    return row


class CostsBlock(Model):
    """
    Aggregated phased costs.

    Attributes:
        capex: Monthly capital costs
        opex: Monthly operating costs
        detail: One column per cost item key with its escalated series
    """

    capex: pd.Series
    opex: pd.Series
    detail: pd.DataFrame


def compute_costs(
    cost_items: Iterable[CostItem],
    horizon: int,
    index_buckets: Optional[Iterable[IndexBucket]] = None,
) -> CostsBlock:
    """
    Spread phased cost items over the horizon and escalate them.

    Each item's phasing is normalized to sum to 1 and resampled to the
    horizon, multiplied by its base amount, then escalated by its index
    bucket (monthly compounding).
    """
    validate_horizon(horizon)
    buckets = list(index_buckets or [])
    index = pd.RangeIndex(horizon)

    capex = np.zeros(horizon)
    opex = np.zeros(horizon)
    detail: Dict[str, np.ndarray] = {}

    for item in cost_items:
        phasing = normalize_curve(item.phasing, horizon, CurveMeaningEnum.SELL_THROUGH)
        idx = build_index_series(bucket_rate(buckets, item.index_bucket), horizon)
        series = item.base_amount * phasing * idx

        if item.is_opex:
            opex += series
        else:
            capex += series
        detail[item.key] = series

    return CostsBlock(
        capex=pd.Series(capex, index=index, name="capex"),
        opex=pd.Series(opex, index=index, name="opex"),
        detail=pd.DataFrame(detail, index=index),
    )
