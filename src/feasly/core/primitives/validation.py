# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reusable validation utilities for period-based engine inputs.

Every dated line in a scenario (revenue lines, construction items, loan
facilities) is described by an inclusive window of project months. The one
input error the engine reports is a window whose end precedes its start.
"""

from __future__ import annotations

from typing import Any


def validate_period_range(
    start_period: int,
    end_period: int,
    label: str = "line",
    start_field: str = "start_period",
    end_field: str = "end_period",
) -> None:
    """
    Reject an inclusive period window whose end precedes its start.

    Args:
        start_period: First active project month
        end_period: Last active project month (inclusive)
        label: Name of the input for error messages
        start_field: Name of the start field for error messages
        end_field: Name of the end field for error messages

    Raises:
        ValueError: If end_period < start_period

    Example:
        ```python
        validate_period_range(3, 5)  # OK
        validate_period_range(5, 3, label="SaleLine")  # Raises ValueError
        ```
    """
    if end_period < start_period:
        raise ValueError(
            f"{label}: {end_field} ({end_period}) must not precede "
            f"{start_field} ({start_period})"
        )


def validate_horizon(horizon: int) -> int:
    """Ensure a timeline length is a non-negative integer."""
    if isinstance(horizon, bool) or not isinstance(horizon, int):
        raise TypeError(f"horizon must be an int, got {type(horizon).__name__}")
    if horizon < 0:
        raise ValueError(f"horizon must be non-negative, got {horizon}")
    return horizon


class ValidationMixin:
    """
    Mixin class providing reusable validation methods for Pydantic models.

    Works with both ``mode="before"`` validators (raw dictionaries) and
    ``mode="after"`` validators (model instances).
    """

    @classmethod
    def validate_period_ordering(
        cls,
        data: Any,
        start_field: str = "start_period",
        end_field: str = "end_period",
    ) -> Any:
        """
        Validate that the end period does not precede the start period.

        Args:
            data: Model data dictionary or model instance
            start_field: Name of start period field
            end_field: Name of end period field

        Returns:
            The data, unchanged

        Raises:
            ValueError: If end period < start period
        """
        if isinstance(data, dict):
            start = data.get(start_field)
            end = data.get(end_field)
        else:
            start = getattr(data, start_field, None)
            end = getattr(data, end_field, None)

        if start is None or end is None:
            return data

        validate_period_range(
            start, end, label=cls.__name__, start_field=start_field, end_field=end_field
        )
        return data
