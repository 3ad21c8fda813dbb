# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import Field

from ..core.primitives import Model, PositiveInt, Timeline
from ..costs import ConstructionItem
from ..financing import LoanFacility
from ..revenue import RentalLine, SaleLine


class Scenario(Model):
    """
    A complete set of scenario inputs.

    Attributes:
        name: Display name (e.g. "Base", "Downside")
        horizon: Number of project months modelled
        start_date: Calendar month of project month 0; when set, results are
            indexed by calendar period and IRR uses actual dates
        construction_items: Construction budget lines
        sale_lines: For-sale revenue lines
        rental_lines: Rental revenue lines
        loan_facility: Optional construction loan
    """

    name: str = "Base"
    horizon: PositiveInt = 60
    start_date: Optional[date] = None
    construction_items: List[ConstructionItem] = Field(default_factory=list)
    sale_lines: List[SaleLine] = Field(default_factory=list)
    rental_lines: List[RentalLine] = Field(default_factory=list)
    loan_facility: Optional[LoanFacility] = None

    @property
    def timeline(self) -> Optional[Timeline]:
        """Calendar timeline of the scenario, if it is dated."""
        if self.start_date is None:
            return None
        return Timeline(start_date=self.start_date, duration_months=self.horizon)

    @property
    def is_empty(self) -> bool:
        return not (self.construction_items or self.sale_lines or self.rental_lines)
