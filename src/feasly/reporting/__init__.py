# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Feasly Reporting

Presentation helpers over scenario results.
"""

from .summary import period_alias, summarize

__all__ = [
    "period_alias",
    "summarize",
]
