# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for construction items and phased cost items."""

import logging

import pytest
from pydantic import ValidationError

from feasly.core import IndexBucket
from feasly.core.primitives import ManualDrawSchedule, SCurveDrawSchedule
from feasly.costs import ConstructionItem, CostItem, build_construction_row, compute_costs


class TestConstructionRow:
    def test_uniform_spread(self):
        item = ConstructionItem(base_cost=1_200_000, start_period=1, end_period=3)
        row = build_construction_row(item, horizon=6)
        assert row.tolist() == [0.0, 400_000.0, 400_000.0, 400_000.0, 0.0, 0.0]

    def test_escalation_from_project_start(self):
        """Escalation steps at month 12 regardless of the item's own start."""
        item = ConstructionItem(
            base_cost=400_000, start_period=10, end_period=13, escalation_rate=0.10
        )
        row = build_construction_row(item, horizon=14)
        assert row[10:].tolist() == [100_000.0, 100_000.0, 110_000.0, 110_000.0]

    def test_manual_draw_schedule(self):
        item = ConstructionItem(
            base_cost=400, start_period=0, end_period=2,
            draw_schedule=ManualDrawSchedule(values=[1, 2, 1]),
        )
        assert build_construction_row(item, horizon=3).tolist() == [100.0, 200.0, 100.0]

    def test_s_curve_preserves_total(self):
        item = ConstructionItem(
            base_cost=1_000_000, start_period=0, end_period=11,
            draw_schedule=SCurveDrawSchedule(sigma=3.0),
        )
        assert build_construction_row(item, horizon=12).sum() == pytest.approx(1_000_000, abs=0.1)

    def test_window_beyond_horizon_sized_on_full_window(self, caplog):
        item = ConstructionItem(base_cost=2400, start_period=0, end_period=23)
        with caplog.at_level(logging.WARNING, logger="feasly"):
            row = build_construction_row(item, horizon=12)
        assert row.tolist() == [100.0] * 12
        assert "exceeds horizon" in caplog.text

    def test_long_window_only_builds_horizon_months(self):
        item = ConstructionItem(base_cost=1e9, start_period=0, end_period=10**9 - 1)
        row = build_construction_row(item, horizon=12)
        assert row.tolist() == [1.0] * 12

    def test_window_after_horizon(self):
        item = ConstructionItem(base_cost=1000, start_period=20, end_period=29)
        assert build_construction_row(item, horizon=12).sum() == 0.0

    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError):
            ConstructionItem(base_cost=1, start_period=4, end_period=2)


class TestRetention:
    def _item(self, **kwargs) -> ConstructionItem:
        return ConstructionItem(
            base_cost=1_200_000, start_period=1, end_period=3,
            retention_percent=0.10, retention_release_lag=1, **kwargs,
        )

    def test_retention_withheld_and_released(self):
        row = build_construction_row(self._item(), horizon=6)
        assert row.tolist() == [0.0, 360_000.0, 360_000.0, 360_000.0, 120_000.0, 0.0]
        assert row.sum() == 1_200_000.0

    def test_cost_incurred_ignores_retention(self):
        row = build_construction_row(self._item(), horizon=6, apply_retention=False)
        assert row.tolist() == [0.0, 400_000.0, 400_000.0, 400_000.0, 0.0, 0.0]

    def test_release_beyond_horizon_dropped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="feasly"):
            row = build_construction_row(self._item(), horizon=4)
        assert row.sum() == 1_080_000.0
        assert "retention" in caplog.text

    def test_release_period(self):
        assert self._item().release_period == 4


class TestComputeCosts:
    def test_phasing_spread_over_horizon(self):
        block = compute_costs([CostItem(key="hard", base_amount=1200, phasing=[1, 1, 1])], 3)
        assert block.capex.tolist() == pytest.approx([400.0, 400.0, 400.0])
        assert block.opex.sum() == 0.0

    def test_opex_booked_separately(self):
        items = [
            CostItem(key="hard", base_amount=1200, phasing=[1]),
            CostItem(key="fm", base_amount=300, phasing=[1], is_opex=True),
        ]
        block = compute_costs(items, 3)
        assert block.capex.sum() == pytest.approx(1200.0)
        assert block.opex.tolist() == pytest.approx([100.0, 100.0, 100.0])
        assert list(block.detail.columns) == ["hard", "fm"]

    def test_index_bucket_escalation(self):
        item = CostItem(key="hard", base_amount=1200, phasing=[1, 1, 1], index_bucket="cci")
        block = compute_costs([item], 3, index_buckets=[IndexBucket(key="cci", rate_nominal_pa=0.12)])
        assert block.capex.tolist() == pytest.approx([400.0, 404.0, 408.04])

    def test_empty_phasing_costs_nothing(self):
        block = compute_costs([CostItem(key="soft", base_amount=500)], 4)
        assert block.capex.sum() == 0.0
