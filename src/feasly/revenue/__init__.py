# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Revenue calculators: rental and sale lines, and curve-driven unit types.
"""

from ..core.indexation import IndexBucket
from .builders import build_rental_revenue, build_sale_revenue
from .lines import RentalLine, RevenueLine, SaleLine
from .unit_types import Curve, RevenueBlock, UnitType, compute_revenue

__all__ = [
    "Curve",
    "IndexBucket",
    "RentalLine",
    "RevenueBlock",
    "RevenueLine",
    "SaleLine",
    "UnitType",
    "build_rental_revenue",
    "build_sale_revenue",
    "compute_revenue",
]
