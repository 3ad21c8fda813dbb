# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Draw schedules for spreading a construction budget over its active window.

Uniform spreading is the default; S-curve and manual patterns model the
usual slow-fast-slow spend of a building contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Literal, Optional, Union

import numpy as np
from pydantic import Field, field_validator
from scipy.stats import norm
from typing_extensions import Annotated

from .enums import DrawScheduleKindEnum
from .model import Model


class DrawSchedule(Model, ABC):
    """
    Base class for all draw schedules.

    Subclasses define the distribution pattern; the base class applies it to
    an amount.
    """

    kind: DrawScheduleKindEnum

    def apply_to_amount(
        self,
        amount: float,
        periods: int,
        start: int = 0,
        stop: Optional[int] = None,
    ) -> np.ndarray:
        """
        Distribute an amount over a number of periods.

        Only the periods in ``[start, stop)`` are returned, so callers that
        need a slice of a long window never build the whole pattern.

        Args:
            amount: Total amount to distribute
            periods: Number of periods to distribute over (> 0)
            start: First period to return
            stop: Period after the last one to return (defaults to ``periods``)

        Returns:
            Array of length ``stop - start``; over the full window it sums
            to ``amount``

        Example:
            >>> ManualDrawSchedule(values=[1, 2, 1]).apply_to_amount(400.0, 3).tolist()
            [100.0, 200.0, 100.0]
            >>> UniformDrawSchedule().apply_to_amount(1200.0, 12, start=10).tolist()
            [100.0, 100.0]
        """
        if periods <= 0:
            raise ValueError(f"periods must be positive, got {periods}")
        stop = periods if stop is None else stop
        if not 0 <= start <= stop <= periods:
            raise ValueError(f"Invalid slice [{start}, {stop}) of {periods} periods")

        distribution = self._get_distribution_pattern(periods, start, stop)
        if len(distribution) != stop - start:
            raise ValueError(
                f"Distribution pattern length ({len(distribution)}) does not match "
                f"requested periods ({stop - start})"
            )
        return amount * distribution

    @abstractmethod
    def _get_distribution_pattern(self, periods: int, start: int, stop: int) -> np.ndarray:
        """Weights of periods ``[start, stop)`` of a ``periods``-long pattern summing to 1.0."""


class UniformDrawSchedule(DrawSchedule):
    """Costs spread evenly across all periods."""

    kind: Literal[DrawScheduleKindEnum.UNIFORM] = DrawScheduleKindEnum.UNIFORM

    def _get_distribution_pattern(self, periods: int, start: int, stop: int) -> np.ndarray:
        return np.full(stop - start, 1.0 / periods)


class SCurveDrawSchedule(DrawSchedule):
    """
    S-curve draw schedule based on a normal distribution centred on the
    middle of the window.

    Args:
        sigma: Standard deviation controlling steepness. Lower values
               concentrate spend in the middle of the window.
    """

    kind: Literal[DrawScheduleKindEnum.S_CURVE] = DrawScheduleKindEnum.S_CURVE
    sigma: float = Field(
        default=1.0,
        gt=0,
        description="Standard deviation for S-curve distribution. Lower = steeper curve.",
    )

    def _get_distribution_pattern(self, periods: int, start: int, stop: int) -> np.ndarray:
        centre = periods / 2
        timeline_int = np.arange(start, stop)
        cdf_values = norm.cdf(timeline_int + 1, centre, self.sigma) - norm.cdf(
            timeline_int, centre, self.sigma
        )
        # Mass of the whole window, so a slice keeps its share of the total
        total = norm.cdf(periods, centre, self.sigma) - norm.cdf(0, centre, self.sigma)
        return cdf_values / total


class ManualDrawSchedule(DrawSchedule):
    """
    User-defined relative weights, one per period of the window.

    For example, [1, 2, 3, 2, 1] becomes [11.1%, 22.2%, 33.3%, 22.2%, 11.1%].
    """

    kind: Literal[DrawScheduleKindEnum.MANUAL] = DrawScheduleKindEnum.MANUAL
    values: List[Union[int, float]] = Field(
        min_length=1,
        description="Relative draw amounts for each period. Normalized on use.",
    )

    @field_validator("values")
    @classmethod
    def validate_values(cls, v: List[Union[int, float]]) -> List[Union[int, float]]:
        for i, val in enumerate(v):
            if val < 0:
                raise ValueError(
                    f"All values must be non-negative, but value at index {i} is {val}"
                )
        if sum(v) <= 0:
            raise ValueError("At least one value must be positive")
        return v

    def _get_distribution_pattern(self, periods: int, start: int, stop: int) -> np.ndarray:
        if len(self.values) != periods:
            raise ValueError(
                f"Manual draw schedule has {len(self.values)} values "
                f"but {periods} periods are required."
            )
        weights = np.asarray(self.values, dtype=float)
        return weights[start:stop] / weights.sum()


AnyDrawSchedule = Annotated[
    Union[UniformDrawSchedule, SCurveDrawSchedule, ManualDrawSchedule],
    Field(discriminator="kind"),
]
