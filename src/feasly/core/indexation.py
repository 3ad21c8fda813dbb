# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Escalation and indexation factors.

Two conventions are used across the engine:

- Line escalation steps once per elapsed whole year: ``(1 + rate) ** years``.
  Used by rental, sale and construction lines.
- Index buckets compound monthly at ``rate / 12``. Used by unit types and
  phased cost items.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import numpy as np

from .primitives import AnnualRate, Model, validate_horizon

logger = logging.getLogger(__name__)


class IndexBucket(Model):
    """A named nominal annual escalation rate, compounded monthly."""

    key: str
    rate_nominal_pa: AnnualRate = 0.0


def bucket_rate(index_buckets: Iterable[IndexBucket], key: Optional[str]) -> float:
    """Annual rate of the bucket named ``key``; 0% if missing or unset."""
    if not key:
        return 0.0
    for bucket in index_buckets:
        if bucket.key == key:
            return bucket.rate_nominal_pa
    logger.warning(f"Index bucket '{key}' not found; escalating at 0%")
    return 0.0


def whole_years_elapsed(months_elapsed: int) -> int:
    """Number of whole years in an elapsed month count."""
    return max(months_elapsed, 0) // 12


def escalation_factor(rate: float, months_elapsed: int) -> float:
    """
    Compound annual escalation factor after ``months_elapsed`` months.

    Example:
        >>> escalation_factor(0.05, 11)
        1.0
        >>> round(escalation_factor(0.05, 24), 4)
        1.1025
    """
    return (1.0 + rate) ** whole_years_elapsed(months_elapsed)


def build_index_series(rate_pa: float, horizon: int) -> np.ndarray:
    """
    Monthly index multipliers for a nominal annual rate.

    Month 0 is 1.0; each later month compounds by ``rate_pa / 12``.

    Example:
        >>> build_index_series(0.12, 3).round(4).tolist()
        [1.0, 1.01, 1.0201]
    """
    validate_horizon(horizon)
    return (1.0 + rate_pa / 12.0) ** np.arange(horizon)
