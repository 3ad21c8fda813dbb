# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit-type revenue.

A unit type is a revenue product (apartments, retail units, ...) described by
area, count, an initial sale price or rent per sqm, and a curve. Sell-through
curves distribute sale proceeds over time; occupancy curves scale monthly
rent. Prices and rents escalate through named index buckets that compound
monthly.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

import numpy as np
import pandas as pd
from pydantic import Field

from ..core.curves import normalize_curve
from ..core.indexation import IndexBucket, bucket_rate, build_index_series
from ..core.primitives import (
    CurveMeaningEnum,
    Model,
    PositiveFloat,
    validate_horizon,
)

logger = logging.getLogger(__name__)


class Curve(Model):
    """Raw curve points and how to interpret them."""

    meaning: CurveMeaningEnum = CurveMeaningEnum.SELL_THROUGH
    values: List[float] = Field(default_factory=list)


class UnitType(Model):
    """
    A sellable or lettable product.

    Attributes:
        key: Identifier used in the detail frame
        category: Free-form grouping (residential, retail, ...)
        count: Number of units
        sellable_area_sqm: Area per unit
        initial_price_sqm_sale: Sale price per sqm at project month 0
        initial_rent_sqm_m: Monthly rent per sqm at project month 0
        delivery_month: First month the curve applies to
        curve: Sell-through or occupancy curve
        index_bucket_price: Index bucket key escalating the sale price
        index_bucket_rent: Index bucket key escalating the rent
    """

    key: str
    name: Optional[str] = None
    category: str = "residential"
    count: PositiveFloat = 0.0
    sellable_area_sqm: PositiveFloat = 0.0
    initial_price_sqm_sale: PositiveFloat = 0.0
    initial_rent_sqm_m: PositiveFloat = 0.0
    delivery_month: int = Field(default=0, ge=0)
    curve: Curve = Field(default_factory=Curve)
    index_bucket_price: Optional[str] = None
    index_bucket_rent: Optional[str] = None


class RevenueBlock(Model):
    """
    Aggregated unit-type revenue.

    Attributes:
        sales: Monthly sale proceeds across all unit types
        rental: Monthly rental income across all unit types
        detail: One column per unit type key with its monthly revenue
    """

    sales: pd.Series
    rental: pd.Series
    detail: pd.DataFrame

    @property
    def total(self) -> pd.Series:
        return (self.sales + self.rental).rename("revenue")


def _delivered_curve(unit: UnitType, horizon: int) -> np.ndarray:
    """Normalized curve occupying the months from delivery to the horizon."""
    curve = np.zeros(horizon)
    if unit.delivery_month >= horizon:
        logger.warning(
            f"Unit type '{unit.key}' delivers in month {unit.delivery_month}, "
            f"beyond the {horizon}-month horizon"
        )
        return curve
    curve[unit.delivery_month:] = normalize_curve(
        unit.curve.values, horizon - unit.delivery_month, unit.curve.meaning
    )
    return curve


def compute_revenue(
    unit_types: Iterable[UnitType],
    horizon: int,
    index_buckets: Optional[Iterable[IndexBucket]] = None,
) -> RevenueBlock:
    """
    Compute monthly sale and rental revenue for a set of unit types.

    - Sell-through: ``count * area * price_sqm * index_t * curve_t``
    - Occupancy: ``count * area * rent_sqm_m * index_t * curve_t``

    Args:
        unit_types: Unit types to evaluate
        horizon: Number of project months
        index_buckets: Escalation buckets referenced by unit types

    Returns:
        RevenueBlock with aggregate series and a per-unit-type detail frame
    """
    validate_horizon(horizon)
    buckets = list(index_buckets or [])
    index = pd.RangeIndex(horizon)

    sales = np.zeros(horizon)
    rental = np.zeros(horizon)
    detail: Dict[str, np.ndarray] = {}

    for unit in unit_types:
        curve = _delivered_curve(unit, horizon)
        magnitude = unit.count * unit.sellable_area_sqm

        if unit.curve.meaning is CurveMeaningEnum.SELL_THROUGH:
            idx = build_index_series(bucket_rate(buckets, unit.index_bucket_price), horizon)
            series = magnitude * unit.initial_price_sqm_sale * idx * curve
            sales += series
        else:
            idx = build_index_series(bucket_rate(buckets, unit.index_bucket_rent), horizon)
            series = magnitude * unit.initial_rent_sqm_m * idx * curve
            rental += series

        detail[unit.key] = series
        logger.debug(
            f"Unit type '{unit.key}' ({unit.curve.meaning.value}): total {series.sum():,.2f}"
        )

    return RevenueBlock(
        sales=pd.Series(sales, index=index, name="sales"),
        rental=pd.Series(rental, index=index, name="rental"),
        detail=pd.DataFrame(detail, index=index),
    )
