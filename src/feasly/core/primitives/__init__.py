# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Feasly Core Primitives

Building blocks shared by every calculator: the immutable base model,
constrained types, settings, enums, the project timeline, draw schedules and
period validation.
"""

from .draw_schedule import (
    AnyDrawSchedule,
    DrawSchedule,
    ManualDrawSchedule,
    SCurveDrawSchedule,
    UniformDrawSchedule,
)
from .enums import (
    CashFlowLineEnum,
    CurveMeaningEnum,
    DrawScheduleKindEnum,
    FrequencyEnum,
    ScenarioPresetEnum,
)
from .model import Model
from .settings import (
    DAYS_PER_MONTH,
    EngineSettings,
    GlobalSettings,
    ReportingSettings,
    ValuationSettings,
)
from .timeline import Timeline
from .types import AnnualRate, FloatBetween0And1, PositiveFloat, PositiveInt
from .validation import ValidationMixin, validate_horizon, validate_period_range

__all__ = [
    # Core models
    "Model",
    "Timeline",
    # Settings
    "DAYS_PER_MONTH",
    "EngineSettings",
    "GlobalSettings",
    "ReportingSettings",
    "ValuationSettings",
    # Enums
    "CashFlowLineEnum",
    "CurveMeaningEnum",
    "DrawScheduleKindEnum",
    "FrequencyEnum",
    "ScenarioPresetEnum",
    # Draw schedules
    "AnyDrawSchedule",
    "DrawSchedule",
    "ManualDrawSchedule",
    "SCurveDrawSchedule",
    "UniformDrawSchedule",
    # Types
    "AnnualRate",
    "FloatBetween0And1",
    "PositiveFloat",
    "PositiveInt",
    # Validation
    "ValidationMixin",
    "validate_horizon",
    "validate_period_range",
]
