# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Feasly Analysis

Scenario cash flow assembly, KPIs, sensitivity analysis, scenario comparison
and background recalculation.
"""

from .cash_flow import ScenarioResult, run_scenario
from .comparison import compare_scenarios
from .metrics import KPIResults, compute_kpis
from .recalc import BackgroundRecalculator
from .scenario import Scenario
from .sensitivity import (
    SCENARIO_MULTIPLIERS,
    TORNADO_VARIATIONS,
    KPIDeltas,
    ScenarioMultipliers,
    SensitivityResult,
    Variation,
    VariationResult,
    apply_preset,
    apply_variation,
    run_sensitivity,
)

__all__ = [
    # Main API
    "Scenario",
    "ScenarioResult",
    "run_scenario",
    # Metrics
    "KPIResults",
    "compute_kpis",
    # Sensitivity
    "KPIDeltas",
    "SCENARIO_MULTIPLIERS",
    "ScenarioMultipliers",
    "SensitivityResult",
    "TORNADO_VARIATIONS",
    "Variation",
    "VariationResult",
    "apply_preset",
    "apply_variation",
    "run_sensitivity",
    # Comparison
    "compare_scenarios",
    # Background
    "BackgroundRecalculator",
]
