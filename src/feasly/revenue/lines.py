# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator

from ..core.primitives import (
    AnnualRate,
    FloatBetween0And1,
    Model,
    PositiveFloat,
    ValidationMixin,
)


class RevenueLine(Model, ValidationMixin):
    """Common fields of a revenue line: an inclusive window of project months."""

    name: Optional[str] = None
    start_period: int = Field(ge=0, description="First active project month")
    end_period: int = Field(ge=0, description="Last active project month (inclusive)")

    @model_validator(mode="after")
    def check_period_ordering(self) -> "RevenueLine":
        return self.validate_period_ordering(self)

    @property
    def active_months(self) -> int:
        """Number of months in the inclusive window."""
        return self.end_period - self.start_period + 1


class RentalLine(RevenueLine):
    """
    Hospitality-style rental income: keys x ADR x occupancy x days.

    Attributes:
        rooms: Unit count (or lettable area) earning the daily rate
        adr: Average Daily Rate per unit
        occupancy_rate: Fraction of units occupied (0-1)
        annual_escalation: Compound growth applied to ADR each full year
    """

    rooms: PositiveFloat
    adr: PositiveFloat
    occupancy_rate: FloatBetween0And1
    annual_escalation: AnnualRate = 0.0


class SaleLine(RevenueLine):
    """
    For-sale inventory whose proceeds are recognised evenly over the window.

    Attributes:
        units: Number of units sold
        price_per_unit: Price per unit at the start of the window
        escalation: Compound annual growth of the price over the window
    """

    units: PositiveFloat
    price_per_unit: PositiveFloat
    escalation: AnnualRate = 0.0
