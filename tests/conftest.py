# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Feasly testing.

Helpers build small, hand-checkable scenarios so expected values in tests
can be worked out on paper.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from feasly.analysis import Scenario
from feasly.costs import ConstructionItem
from feasly.financing import LoanFacility
from feasly.revenue import RentalLine, SaleLine


def simple_sale_line(
    units: float = 10,
    price_per_unit: float = 100_000,
    start_period: int = 24,
    end_period: int = 26,
    escalation: float = 0.0,
) -> SaleLine:
    """Ten units at 100k sold over three months: 1,000,000 of proceeds."""
    return SaleLine(
        units=units,
        price_per_unit=price_per_unit,
        start_period=start_period,
        end_period=end_period,
        escalation=escalation,
    )


def simple_rental_line(
    start_period: int = 48, end_period: int = 59, annual_escalation: float = 0.0
) -> RentalLine:
    """Ten keys at 100 ADR and 80% occupancy."""
    return RentalLine(
        rooms=10,
        adr=100,
        occupancy_rate=0.8,
        start_period=start_period,
        end_period=end_period,
        annual_escalation=annual_escalation,
    )


def simple_construction_item(
    base_cost: float = 600_000, start_period: int = 0, end_period: int = 5, **kwargs
) -> ConstructionItem:
    """600,000 spread evenly over months 0-5 (100,000 a month)."""
    return ConstructionItem(
        base_cost=base_cost, start_period=start_period, end_period=end_period, **kwargs
    )


def simple_scenario(
    name: str = "Base",
    horizon: int = 40,
    start_date: Optional[date] = None,
    loan_facility: Optional[LoanFacility] = None,
) -> Scenario:
    """
    A build-and-sell scenario: 600,000 of construction then 1,000,000 of
    sales, for a profit of 400,000 before finance costs.
    """
    return Scenario(
        name=name,
        horizon=horizon,
        start_date=start_date,
        construction_items=[simple_construction_item()],
        sale_lines=[simple_sale_line()],
        loan_facility=loan_facility,
    )


@pytest.fixture
def scenario() -> Scenario:
    return simple_scenario()


@pytest.fixture
def dated_scenario() -> Scenario:
    return simple_scenario(start_date=date(2025, 1, 1))
