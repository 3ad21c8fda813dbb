# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, model_validator

from ..core.primitives import (
    AnnualRate,
    AnyDrawSchedule,
    FloatBetween0And1,
    Model,
    PositiveFloat,
    PositiveInt,
    UniformDrawSchedule,
    ValidationMixin,
)


class ConstructionItem(Model, ValidationMixin):
    """
    A construction budget line spent over an inclusive window of months.

    Attributes:
        base_cost: Budget in project-month-0 money
        start_period: First month of spend
        end_period: Last month of spend (inclusive)
        escalation_rate: Annual cost escalation, stepped each whole year
            from project start
        retention_percent: Share of each month's cost held back (0-1)
        retention_release_lag: Months after ``end_period`` at which the
            accumulated retention is paid
        draw_schedule: Spend pattern across the window (uniform by default)
    """

    name: Optional[str] = None
    base_cost: PositiveFloat
    start_period: int = Field(ge=0)
    end_period: int = Field(ge=0)
    escalation_rate: AnnualRate = 0.0
    retention_percent: FloatBetween0And1 = 0.0
    retention_release_lag: PositiveInt = 0
    draw_schedule: AnyDrawSchedule = Field(default_factory=UniformDrawSchedule)

    @model_validator(mode="after")
    def check_period_ordering(self) -> "ConstructionItem":
        return self.validate_period_ordering(self)

    @property
    def active_months(self) -> int:
        return self.end_period - self.start_period + 1

    @property
    def release_period(self) -> int:
        """Month in which withheld retention is paid out."""
        return self.end_period + self.retention_release_lag


class CostItem(Model):
    """
    A phased cost (capex or opex) spread over the whole horizon.

    Attributes:
        key: Identifier used in the detail frame
        base_amount: Total cost before indexation
        phasing: Relative weights at any resolution; normalized to sum to 1
            and resampled to the horizon
        is_opex: Book under operating costs instead of capex
        index_bucket: Index bucket key escalating the cost
    """

    key: str
    base_amount: PositiveFloat = 0.0
    phasing: List[float] = Field(default_factory=list)
    is_opex: bool = False
    index_bucket: Optional[str] = None
