# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for Timeline."""

from datetime import date

import pandas as pd
import pytest

from feasly.core.primitives import Timeline


@pytest.fixture
def timeline() -> Timeline:
    return Timeline(start_date=date(2025, 1, 15), duration_months=24)


class TestTimeline:
    def test_start_date_normalized_to_month(self, timeline):
        """Any date within a month maps to that monthly period."""
        assert timeline.start_date == pd.Period("2025-01", freq="M")

    def test_start_date_from_other_frequency(self):
        timeline = Timeline(start_date=pd.Period("2025-03-10", freq="D"), duration_months=3)
        assert timeline.start_date == pd.Period("2025-03", freq="M")

    def test_end_date_and_index(self, timeline):
        assert str(timeline.end_date) == "2026-12"
        assert len(timeline.period_index) == 24
        assert timeline.period_index[0] == timeline.start_date
        assert timeline.years_duration == 2.0

    def test_period_for_and_month_of(self, timeline):
        """Project months and calendar months convert both ways."""
        assert str(timeline.period_for(12)) == "2026-01"
        assert timeline.month_of("2025-06") == 5
        assert timeline.month_of(timeline.period_for(17)) == 17

    def test_period_for_out_of_range(self, timeline):
        with pytest.raises(ValueError):
            timeline.period_for(24)

    def test_from_dates_is_inclusive(self):
        timeline = Timeline.from_dates("2025-01-01", "2025-12-31")
        assert timeline.duration_months == 12


class TestToDated:
    def test_series_reindexed(self, timeline):
        series = pd.Series(range(24), dtype=float)
        dated = timeline.to_dated(series)
        assert isinstance(dated.index, pd.PeriodIndex)
        assert dated.iloc[5] == 5.0
        # Original is untouched
        assert isinstance(series.index, pd.RangeIndex)

    def test_frame_reindexed(self, timeline):
        frame = pd.DataFrame({"a": [0.0] * 24})
        assert str(timeline.to_dated(frame).index[-1]) == "2026-12"

    def test_length_mismatch(self, timeline):
        with pytest.raises(ValueError, match="24-month timeline"):
            timeline.to_dated(pd.Series([1.0, 2.0]))
