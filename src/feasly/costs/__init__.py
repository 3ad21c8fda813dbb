# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cost calculators: construction items with retention, and phased cost items.
"""

from .builders import CostsBlock, build_construction_row, compute_costs
from .items import ConstructionItem, CostItem

__all__ = [
    "ConstructionItem",
    "CostItem",
    "CostsBlock",
    "build_construction_row",
    "compute_costs",
]
