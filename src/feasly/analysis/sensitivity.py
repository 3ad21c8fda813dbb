# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Scenario sensitivity analysis.

A Variation flexes construction cost, sale price and loan interest rate.
``run_sensitivity`` evaluates the base scenario and the standard tornado set
of one-at-a-time shocks, reporting KPI deltas against the base.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Union

from pydantic import Field

from ..core.primitives import GlobalSettings, Model, ScenarioPresetEnum
from .cash_flow import run_scenario
from .metrics import KPIResults
from .scenario import Scenario

logger = logging.getLogger(__name__)


class Variation(Model):
    """
    Percentage and basis-point shocks applied to a scenario.

    Attributes:
        cost_variation_percent: Change in construction base cost (10 = +10%)
        sale_price_variation_percent: Change in sale price per unit
        interest_rate_variation_bps: Change in loan rate (100 = +1.00%)
    """

    cost_variation_percent: float = Field(default=0.0, gt=-100)
    sale_price_variation_percent: float = Field(default=0.0, gt=-100)
    interest_rate_variation_bps: float = 0.0


class ScenarioMultipliers(Model):
    """Cost and sale price multipliers of a named market preset."""

    construction_cost_multiplier: float = Field(default=1.0, gt=0)
    sale_price_multiplier: float = Field(default=1.0, gt=0)

    def to_variation(self) -> Variation:
        return Variation(
            cost_variation_percent=(self.construction_cost_multiplier - 1.0) * 100,
            sale_price_variation_percent=(self.sale_price_multiplier - 1.0) * 100,
        )


SCENARIO_MULTIPLIERS: Dict[ScenarioPresetEnum, ScenarioMultipliers] = {
    ScenarioPresetEnum.BASE: ScenarioMultipliers(),
    ScenarioPresetEnum.OPTIMISTIC: ScenarioMultipliers(
        construction_cost_multiplier=0.9, sale_price_multiplier=1.15
    ),
    ScenarioPresetEnum.PESSIMISTIC: ScenarioMultipliers(
        construction_cost_multiplier=1.2, sale_price_multiplier=0.9
    ),
    ScenarioPresetEnum.CUSTOM: ScenarioMultipliers(
        construction_cost_multiplier=1.05, sale_price_multiplier=0.95
    ),
}

TORNADO_VARIATIONS: List[Variation] = [
    Variation(cost_variation_percent=-10),
    Variation(cost_variation_percent=10),
    Variation(sale_price_variation_percent=-10),
    Variation(sale_price_variation_percent=10),
    Variation(interest_rate_variation_bps=-100),
    Variation(interest_rate_variation_bps=100),
]


def apply_variation(scenario: Scenario, variation: Variation) -> Scenario:
    """
    Return a copy of ``scenario`` with the variation applied.

    Construction base costs and sale prices are scaled; the loan rate is
    shifted (floored at 0). The input scenario is not modified.
    """
    cost_factor = 1.0 + variation.cost_variation_percent / 100.0
    price_factor = 1.0 + variation.sale_price_variation_percent / 100.0

    update = {
        "construction_items": [
            item.model_copy(update={"base_cost": item.base_cost * cost_factor})
            for item in scenario.construction_items
        ],
        "sale_lines": [
            line.model_copy(update={"price_per_unit": line.price_per_unit * price_factor})
            for line in scenario.sale_lines
        ],
    }
    facility = scenario.loan_facility
    if facility is not None:
        rate = max(0.0, facility.annual_rate + variation.interest_rate_variation_bps / 10_000)
        update["loan_facility"] = facility.model_copy(update={"annual_rate": rate})

    return scenario.model_copy(update=update)


def apply_preset(scenario: Scenario, preset: Union[ScenarioPresetEnum, str]) -> Scenario:
    """Apply a named market preset and rename the scenario after it."""
    preset = ScenarioPresetEnum(preset)
    varied = apply_variation(scenario, SCENARIO_MULTIPLIERS[preset].to_variation())
    return varied.model_copy(update={"name": preset.value.capitalize()})


class KPIDeltas(Model):
    """KPI differences of a variation against the base (variation - base)."""

    npv_delta: float
    irr_delta: Optional[float] = None
    profit_delta: float


class VariationResult(Model):
    variation: Variation
    kpis: KPIResults
    deltas: KPIDeltas


class SensitivityResult(Model):
    """Base KPIs and one result per evaluated variation."""

    base_kpis: KPIResults
    variations: List[VariationResult]


def kpi_deltas(base: KPIResults, varied: KPIResults) -> KPIDeltas:
    """KPI deltas; the IRR delta is None if either IRR is undefined."""
    irr_delta = None
    if base.irr is not None and varied.irr is not None:
        irr_delta = varied.irr - base.irr
    return KPIDeltas(
        npv_delta=varied.npv - base.npv,
        irr_delta=irr_delta,
        profit_delta=varied.profit - base.profit,
    )


def run_sensitivity(
    scenario: Scenario,
    variations: Optional[List[Variation]] = None,
    settings: Optional[GlobalSettings] = None,
) -> SensitivityResult:
    """
    Evaluate a scenario under a set of variations.

    Args:
        scenario: Base scenario
        variations: Variations to evaluate; defaults to the tornado set
            (cost +/-10%, sale price +/-10%, interest +/-100 bps)
        settings: Engine and valuation settings

    Returns:
        SensitivityResult with base KPIs and per-variation deltas
    """
    variations = TORNADO_VARIATIONS if variations is None else variations
    base = run_scenario(scenario, settings).kpis

    results = []
    for variation in variations:
        kpis = run_scenario(apply_variation(scenario, variation), settings).kpis
        results.append(
            VariationResult(variation=variation, kpis=kpis, deltas=kpi_deltas(base, kpis))
        )

    logger.info(f"Sensitivity for '{scenario.name}': {len(results)} variations evaluated")
    return SensitivityResult(base_kpis=base, variations=results)
