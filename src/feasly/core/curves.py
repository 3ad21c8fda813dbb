# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Curve utilities.

Unit-type curves and cost phasings are entered at whatever resolution the
user finds convenient (a handful of points, one per quarter, one per month).
These helpers stretch or compress them onto a fixed number of months and
normalize them according to what they mean.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

import numpy as np

from .primitives import CurveMeaningEnum, validate_horizon

logger = logging.getLogger(__name__)

CurveValues = Optional[Sequence[Optional[float]]]


def _as_array(values: CurveValues) -> np.ndarray:
    """Convert raw curve values to floats, treating missing entries as 0."""
    if values is None:
        return np.zeros(0)
    return np.array([0.0 if v is None else float(v) for v in values], dtype=float)


def resample_curve(values: CurveValues, length: int) -> np.ndarray:
    """
    Linearly resample a curve of any length to ``length`` points.

    The first and last input points map onto the first and last output
    points; intermediate points are interpolated.

    Args:
        values: Input curve (may be empty or None)
        length: Target number of points

    Returns:
        Array of ``length`` floats. Same-length input is returned as a copy,
        a single value is broadcast, and empty input yields zeros.

    Example:
        >>> resample_curve([0.0, 1.0], 5).tolist()
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    validate_horizon(length)
    a = _as_array(values)
    n = len(a)

    if n == 0:
        return np.zeros(length)
    if n == length:
        return a.copy()
    if n == 1:
        return np.full(length, a[0])
    if length == 1:
        return a[:1].copy()

    positions = np.arange(length) * (n - 1) / (length - 1)
    return np.interp(positions, np.arange(n), a)


def normalize_phasing(weights: CurveValues) -> np.ndarray:
    """
    Scale weights so they sum to 1.

    All-zero (or empty) input stays all zero rather than dividing by zero.
    """
    a = _as_array(weights)
    total = a.sum()
    if total == 0:
        return np.zeros_like(a)
    return a / total


def normalize_curve(
    values: CurveValues,
    length: int,
    meaning: Union[CurveMeaningEnum, str] = CurveMeaningEnum.SELL_THROUGH,
) -> np.ndarray:
    """
    Normalize a curve according to its meaning and resample it to ``length``.

    - ``sell_through``: scaled to sum to 1 (all zero if the input sums to 0),
      then resampled. Resampling changes the sum whenever the length changes,
      so the resampled curve is rescaled to 1 again.
    - ``occupancy``: each point clamped to [0, 1], resampled, clamped again.

    Empty or missing input yields an all-zero curve of the target length.

    Example:
        >>> normalize_curve([1, 1, 2], 3, "sell_through").tolist()
        [0.25, 0.25, 0.5]
        >>> normalize_curve([1.4, -0.2], 2, "occupancy").tolist()
        [1.0, 0.0]
    """
    meaning = CurveMeaningEnum(meaning)
    a = _as_array(values)
    if len(a) == 0:
        return np.zeros(validate_horizon(length))

    if meaning is CurveMeaningEnum.SELL_THROUGH:
        return normalize_phasing(resample_curve(normalize_phasing(a), length))

    clamped = np.clip(a, 0.0, 1.0)
    return np.clip(resample_curve(clamped, length), 0.0, 1.0)
