# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for escalation and index buckets."""

import logging

import pytest

from feasly.core import (
    IndexBucket,
    bucket_rate,
    build_index_series,
    escalation_factor,
    whole_years_elapsed,
)


class TestEscalation:
    @pytest.mark.parametrize(
        "months, years", [(0, 0), (11, 0), (12, 1), (23, 1), (24, 2), (-3, 0)]
    )
    def test_whole_years_elapsed(self, months, years):
        assert whole_years_elapsed(months) == years

    def test_escalation_steps_yearly(self):
        assert escalation_factor(0.05, 11) == 1.0
        assert escalation_factor(0.05, 12) == pytest.approx(1.05)
        assert escalation_factor(0.05, 24) == pytest.approx(1.1025)


class TestIndexSeries:
    def test_monthly_compounding(self):
        result = build_index_series(0.12, 3)
        assert result.tolist() == pytest.approx([1.0, 1.01, 1.0201])

    def test_zero_rate_is_flat(self):
        assert build_index_series(0.0, 4).tolist() == [1.0] * 4

    def test_empty_horizon(self):
        assert len(build_index_series(0.05, 0)) == 0


class TestBucketRate:
    buckets = [IndexBucket(key="cpi", rate_nominal_pa=0.03)]

    def test_known_bucket(self):
        assert bucket_rate(self.buckets, "cpi") == 0.03

    def test_no_bucket_key(self):
        assert bucket_rate(self.buckets, None) == 0.0

    def test_unknown_bucket_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="feasly"):
            assert bucket_rate(self.buckets, "construction") == 0.0
        assert "construction" in caplog.text
