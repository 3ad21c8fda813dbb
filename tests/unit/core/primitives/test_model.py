# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the shared base model."""

import pandas as pd
import pytest
from pydantic import ValidationError

from feasly.core.primitives import Model


class _Sample(Model):
    name: str
    amount: float = 0.0


class _WithSeries(Model):
    values: pd.Series


class TestModel:
    """Tests for Model configuration."""

    def test_model_is_frozen(self):
        """Assigning to a field raises instead of mutating."""
        sample = _Sample(name="a")
        with pytest.raises(ValidationError):
            sample.amount = 5.0

    def test_extra_fields_rejected(self):
        """Misspelled fields are caught at construction."""
        with pytest.raises(ValidationError):
            _Sample(name="a", amout=1.0)

    def test_model_copy_update(self):
        """Edits produce a new instance and leave the original untouched."""
        sample = _Sample(name="a", amount=1.0)
        updated = sample.model_copy(update={"amount": 2.0})
        assert updated.amount == 2.0
        assert sample.amount == 1.0

    def test_arbitrary_types_allowed(self):
        """pandas objects can be carried on models."""
        model = _WithSeries(values=pd.Series([1.0, 2.0]))
        assert model.values.sum() == 3.0
