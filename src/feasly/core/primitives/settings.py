# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .enums import FrequencyEnum
from .model import Model
from .types import AnnualRate, PositiveInt

# Average days in a month (365 / 12), used to turn daily rates into months
DAYS_PER_MONTH = 30.4167


class EngineSettings(Model):
    """Settings controlling the arithmetic of the revenue and cost builders."""

    days_per_month: float = Field(
        default=DAYS_PER_MONTH,
        gt=0,
        description="Days-per-month constant applied to daily rates (ADR).",
    )
    decimal_precision: PositiveInt = Field(
        default=2, description="Number of decimal places for currency values."
    )


class ValuationSettings(Model):
    """Settings for discounting project cash flows."""

    discount_rate: AnnualRate = Field(
        default=0.10,
        description="Annual discount rate for NPV, applied monthly as rate / 12.",
    )


class ReportingSettings(Model):
    """Settings related to report generation and display."""

    reporting_frequency: FrequencyEnum = FrequencyEnum.ANNUAL
    fiscal_year_start_month: PositiveInt = Field(
        default=1, ge=1, le=12, description="Month the fiscal year begins (1=Jan)."
    )


class GlobalSettings(Model):
    """
    Bundle of all engine settings.

    Every builder and analysis entry point takes an optional ``settings``
    argument; passing ``None`` means ``GlobalSettings()`` defaults.

    Example:
        ```python
        settings = GlobalSettings(valuation={"discount_rate": 0.08})
        result = run_scenario(scenario, settings=settings)
        ```
    """

    engine: EngineSettings = Field(default_factory=EngineSettings)
    valuation: ValuationSettings = Field(default_factory=ValuationSettings)
    reporting: ReportingSettings = Field(default_factory=ReportingSettings)
