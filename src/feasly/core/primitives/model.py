# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model shared by every engine input and result.

    Scenario inputs are immutable: an edit produces a new model (see
    ``model_copy(update=...)``) and every series is recomputed from it.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,  # pandas objects on result models
        frozen=True,
        extra="forbid",  # Catches misspelled line fields immediately
    )
