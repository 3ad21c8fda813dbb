# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Currency rounding helpers.

Amounts are converted to integer minor units (cents at the default precision
of 2) for rounding. Rounding is banker's rounding, as with Python's ``round``.
"""

from typing import Tuple


def to_minor_units(amount: float, places: int = 2) -> int:
    """Convert an amount to integer minor units (e.g. dollars to cents)."""
    return int(round(float(amount) * 10**places))


def from_minor_units(units: int, places: int = 2) -> float:
    """Convert integer minor units back to a float amount."""
    return units / 10**places


def round_currency(value: float, places: int = 2) -> float:
    """Round a currency amount to ``places`` decimals."""
    return from_minor_units(to_minor_units(value, places), places)


def even_instalments(total: float, periods: int, places: int = 2) -> Tuple[float, float]:
    """
    Regular and final instalment of ``total`` split evenly over ``periods``.

    Every instalment but the last is ``total / periods`` rounded to
    ``places`` decimals. The last is the unrounded remainder, so the
    instalments add up to ``total`` itself rather than to ``total`` rounded.

    Example:
        >>> even_instalments(100.0, 4)
        (25.0, 25.0)
        >>> even_instalments(99.9999, 3)[0]
        33.33
    """
    if periods <= 0:
        raise ValueError(f"periods must be positive, got {periods}")
    regular = round_currency(total / periods, places)
    return regular, total - regular * (periods - 1)
