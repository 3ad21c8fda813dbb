# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Iterable

import pandas as pd

from .cash_flow import ScenarioResult

_COMPARED = ("npv", "irr", "profit", "total_revenue", "total_costs", "peak_funding")


def compare_scenarios(results: Iterable[ScenarioResult]) -> pd.DataFrame:
    """
    Tabulate KPIs side by side, one row per scenario.

    The first result is the reference: ``<kpi>_delta`` columns hold each
    scenario's difference from it (NaN where a KPI is undefined).

    Raises:
        ValueError: If no results are given or scenario names repeat
    """
    results = list(results)
    if not results:
        raise ValueError("At least one scenario result is required")

    names = [result.scenario.name for result in results]
    if len(set(names)) != len(names):
        raise ValueError(f"Scenario names must be unique, got {names}")

    table = pd.DataFrame(
        [result.kpis.model_dump() for result in results],
        index=pd.Index(names, name="scenario"),
    ).astype(float)

    reference = table.iloc[0]
    for column in _COMPARED:
        table[f"{column}_delta"] = table[column] - reference[column]
    return table
