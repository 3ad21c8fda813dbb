# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Feasly - Real Estate Development Feasibility Engine

Pure-function calculators that turn scenario inputs into monthly series and
project KPIs for development feasibility modeling.

Key Entry Points:
- feasly.revenue.build_rental_revenue() / build_sale_revenue() - line builders
- feasly.core.curves - curve resampling and normalization
- feasly.analysis.run_scenario() - full scenario cash flow with KPIs
- feasly.analysis.run_sensitivity() - tornado-style variation analysis

Example Usage:
    ```python
    from feasly.analysis import Scenario, run_scenario
    from feasly.revenue import SaleLine

    scenario = Scenario(
        horizon=36,
        sale_lines=[
            SaleLine(units=10, price_per_unit=100_000, start_period=24, end_period=26)
        ],
    )
    result = run_scenario(scenario)
    print(f"Profit: {result.kpis.profit:,.0f}")
    ```
"""

import importlib
import logging

# Libraries leave handler configuration to the application.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "analysis",
    "core",
    "costs",
    "financing",
    "reporting",
    "revenue",
]


_LAZY_MODULES = {
    "analysis": "feasly.analysis",
    "core": "feasly.core",
    "costs": "feasly.costs",
    "financing": "feasly.financing",
    "reporting": "feasly.reporting",
    "revenue": "feasly.revenue",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'feasly' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
