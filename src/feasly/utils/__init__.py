# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .money import even_instalments, from_minor_units, round_currency, to_minor_units

__all__ = ["even_instalments", "from_minor_units", "round_currency", "to_minor_units"]
