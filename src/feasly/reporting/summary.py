# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Period summaries of scenario cash flows.

Rolls the monthly cash flow frame of a dated scenario up into quarters or
fiscal years, with periods as rows and cash flow lines as columns.
"""

from __future__ import annotations

import calendar
from typing import Optional, Union

import pandas as pd

from ..analysis import ScenarioResult
from ..core.primitives import CashFlowLineEnum, FrequencyEnum, GlobalSettings


def period_alias(frequency: FrequencyEnum, fiscal_year_start_month: int = 1) -> str:
    """
    Pandas period alias for a reporting frequency.

    Quarters and years are anchored on the month before the fiscal year
    starts, so a fiscal year starting in April maps to ``"Y-MAR"``.
    """
    frequency = FrequencyEnum(frequency)
    if frequency is FrequencyEnum.MONTHLY:
        return "M"
    year_end = (fiscal_year_start_month - 2) % 12 + 1
    anchor = calendar.month_abbr[year_end].upper()
    prefix = "Q" if frequency is FrequencyEnum.QUARTERLY else "Y"
    return f"{prefix}-{anchor}"


def summarize(
    result: ScenarioResult,
    frequency: Optional[Union[FrequencyEnum, str]] = None,
    settings: Optional[GlobalSettings] = None,
) -> pd.DataFrame:
    """
    Aggregate a scenario's monthly cash flow to reporting periods.

    Flow columns are summed per period; the ``cumulative`` column carries
    the closing value of each period.

    Args:
        result: Output of ``run_scenario`` for a dated scenario
        frequency: Target frequency; defaults to the reporting settings
        settings: Reporting settings (frequency, fiscal year start)

    Returns:
        DataFrame indexed by period with one column per cash flow line

    Raises:
        ValueError: If the scenario has no start date

    Example:
        ```python
        result = run_scenario(scenario.model_copy(update={"start_date": date(2025, 1, 1)}))
        summarize(result, "Q")
        ```
    """
    frame = result.cash_flow
    if not isinstance(frame.index, pd.PeriodIndex):
        raise ValueError(
            f"Scenario '{result.scenario.name}' has no start_date; "
            "only dated cash flows can be summarized by period"
        )

    reporting = (settings or GlobalSettings()).reporting
    frequency = FrequencyEnum(frequency or reporting.reporting_frequency)
    if frequency is FrequencyEnum.MONTHLY:
        return frame.copy()

    periods = frame.index.asfreq(period_alias(frequency, reporting.fiscal_year_start_month))
    cumulative = CashFlowLineEnum.CUMULATIVE.value

    grouped = frame.groupby(periods)
    summary = grouped[[c for c in frame.columns if c != cumulative]].sum()
    summary[cumulative] = grouped[cumulative].last()
    summary.index.name = "period"
    return summary
