# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class CurveMeaningEnum(str, Enum):
    """
    How a unit-type curve is interpreted.

    - SELL_THROUGH: distribution of sales over time, normalized to sum to 1
    - OCCUPANCY: fraction of space let in each month, clamped to [0, 1]
    """

    SELL_THROUGH = "sell_through"
    OCCUPANCY = "occupancy"


class DrawScheduleKindEnum(str, Enum):
    """Draw schedule types for spreading construction costs."""

    UNIFORM = "uniform"
    S_CURVE = "s-curve"
    MANUAL = "manual"


class FrequencyEnum(str, Enum):
    """Reporting frequencies supported by cash flow summaries."""

    MONTHLY = "M"
    QUARTERLY = "Q"
    ANNUAL = "A"


class ScenarioPresetEnum(str, Enum):
    """Named market-condition presets for quick scenario variation."""

    BASE = "base"
    OPTIMISTIC = "optimistic"
    PESSIMISTIC = "pessimistic"
    CUSTOM = "custom"


class CashFlowLineEnum(str, Enum):
    """Column keys of the scenario cash flow frame."""

    CONSTRUCTION = "construction"
    SALES = "sales"
    RENTAL = "rental"
    LOAN_DRAW = "loan_draw"
    LOAN_INTEREST = "loan_interest"
    LOAN_REPAYMENT = "loan_repayment"
    NET = "net"
    CUMULATIVE = "cumulative"
