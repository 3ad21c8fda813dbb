# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Union

import pandas as pd
from pydantic import field_validator

from .model import Model
from .types import PositiveInt


class Timeline(Model):
    """
    Maps absolute project months (0, 1, 2, ...) onto calendar months.

    The builders work on plain project-month indices; a Timeline is only
    needed to present results against real dates.

    Attributes:
        start_date: Calendar month of project month 0.
        duration_months: Length of the timeline (the scenario horizon).

    Examples:
        >>> from datetime import date
        >>> timeline = Timeline(start_date=date(2025, 1, 1), duration_months=24)
        >>> str(timeline.end_date)
        '2026-12'
        >>> str(timeline.period_for(12))
        '2026-01'
    """

    start_date: pd.Period
    duration_months: PositiveInt

    @field_validator("start_date", mode="before")
    @classmethod
    def normalize_start_date(cls, v: Union[date, str, pd.Period]) -> pd.Period:
        """Ensure start_date is a monthly pd.Period."""
        if isinstance(v, pd.Period):
            if v.freqstr != "M":
                return pd.Period(v.to_timestamp(), freq="M")
            return v
        return pd.Period(v, freq="M")

    @property
    def end_date(self) -> pd.Period:
        """Calendar month of the last project month."""
        return self.start_date + (self.duration_months - 1)

    @property
    def period_index(self) -> pd.PeriodIndex:
        """Monthly PeriodIndex covering the timeline."""
        return pd.period_range(
            start=self.start_date, periods=self.duration_months, freq="M"
        )

    @property
    def years_duration(self) -> float:
        """Duration as fractional years (e.g. 2.5 for 30 months)."""
        return self.duration_months / 12.0

    def period_for(self, month: int) -> pd.Period:
        """Calendar month of a project month."""
        if not 0 <= month < self.duration_months:
            raise ValueError(
                f"Project month {month} is outside the timeline "
                f"(0..{self.duration_months - 1})"
            )
        return self.start_date + month

    def month_of(self, period: Union[pd.Period, date, str]) -> int:
        """Project month of a calendar month (may fall outside the timeline)."""
        target = pd.Period(period, freq="M")
        return (target - self.start_date).n

    def to_dated(self, data: Union[pd.Series, pd.DataFrame]) -> Union[pd.Series, pd.DataFrame]:
        """
        Re-index a project-month series or frame onto this timeline's periods.

        Raises:
            ValueError: If the length differs from the timeline duration
        """
        if len(data) != self.duration_months:
            raise ValueError(
                f"Cannot date {len(data)} periods on a {self.duration_months}-month timeline"
            )
        dated = data.copy()
        dated.index = self.period_index
        return dated

    @classmethod
    def from_dates(
        cls,
        start_date: Union[date, str, pd.Period],
        end_date: Union[date, str, pd.Period],
    ) -> "Timeline":
        """Create a timeline spanning two calendar months (inclusive)."""
        start_period = pd.Period(start_date, freq="M")
        end_period = pd.Period(end_date, freq="M")
        duration = len(pd.period_range(start=start_period, end=end_period, freq="M"))
        return cls(start_date=start_period, duration_months=duration)
