# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator

from ..core.primitives import (
    AnnualRate,
    FloatBetween0And1,
    Model,
    PositiveFloat,
    ValidationMixin,
)


class LoanFacility(Model, ValidationMixin):
    """
    A construction loan funding a share of monthly costs.

    Attributes:
        limit: Maximum cumulative drawn amount
        ltc_percent: Loan-to-cost share of each month's cost funded by draws
        annual_rate: Nominal annual interest rate, accrued monthly at rate / 12
        start_period: First month draws are allowed
        maturity_period: Month the balance must be repaid in full
        interest_only: Repay the full balance at maturity (bullet) instead of
            amortizing
        repayment_start: First amortization month; defaults to the month
            after the last draw

    Example:
        ```python
        facility = LoanFacility(
            limit=10_000_000, ltc_percent=0.70, annual_rate=0.08,
            start_period=0, maturity_period=9,
        )
        ```
    """

    name: Optional[str] = None
    limit: PositiveFloat
    ltc_percent: FloatBetween0And1 = 0.0
    annual_rate: AnnualRate = 0.0
    start_period: int = Field(default=0, ge=0)
    maturity_period: int = Field(ge=0)
    interest_only: bool = True
    repayment_start: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_period_ordering(self) -> "LoanFacility":
        self.validate_period_ordering(self, end_field="maturity_period")
        if self.repayment_start is not None and self.repayment_start > self.maturity_period:
            raise ValueError(
                f"repayment_start ({self.repayment_start}) must not be after "
                f"maturity_period ({self.maturity_period})"
            )
        return self

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate / 12.0
