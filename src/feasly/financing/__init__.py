# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Debt financing: construction loan facility and its monthly schedule.
"""

from .facility import LoanFacility
from .schedule import LoanSchedule, build_loan_schedule

__all__ = ["LoanFacility", "LoanSchedule", "build_loan_schedule"]
