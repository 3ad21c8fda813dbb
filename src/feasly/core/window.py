# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def clip_to_horizon(start_period: int, end_period: int, horizon: int, label: str) -> range:
    """
    Months of an inclusive window that fall inside ``[0, horizon)``.

    Months outside the horizon are dropped with a warning; callers still size
    their amounts on the full window.
    """
    first = max(start_period, 0)
    last = min(end_period, horizon - 1)
    if first != start_period or last != end_period:
        logger.warning(
            f"{label}: window {start_period}..{end_period} exceeds horizon "
            f"0..{horizon - 1}; months outside the horizon are dropped"
        )
    return range(first, last + 1)
