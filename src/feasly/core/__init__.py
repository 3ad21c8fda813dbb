# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Feasly Core

Primitives plus the pure numeric helpers every calculator builds on:
curves, indexation and financial metrics.
"""

from .calculations import FinancialCalculations
from .curves import normalize_curve, normalize_phasing, resample_curve
from .indexation import (
    IndexBucket,
    bucket_rate,
    build_index_series,
    escalation_factor,
    whole_years_elapsed,
)

__all__ = [
    "FinancialCalculations",
    "IndexBucket",
    "bucket_rate",
    "build_index_series",
    "escalation_factor",
    "normalize_curve",
    "normalize_phasing",
    "resample_curve",
    "whole_years_elapsed",
]
