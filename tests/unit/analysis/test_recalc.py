# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the background recalculator."""

import threading

import pytest

from feasly.analysis import BackgroundRecalculator
from feasly.analysis import recalc as recalc_module

from ...conftest import simple_scenario


class TestBackgroundRecalculator:
    def test_result_delivered(self):
        received = []
        with BackgroundRecalculator(on_result=received.append) as recalc:
            future = recalc.submit(simple_scenario())
            result = future.result(timeout=10)
        assert result.kpis.profit == pytest.approx(400_000.0)
        assert len(received) == 1 and received[0] is result
        assert recalc.latest is result
        assert recalc.generation == 1

    def test_stale_result_discarded(self, monkeypatch):
        """A result superseded by a newer submission is never published."""
        release = threading.Event()
        real_run = recalc_module.run_scenario

        def gated_run(scenario, settings=None):
            if scenario.name == "A":
                release.wait(timeout=10)
            return real_run(scenario, settings)

        monkeypatch.setattr(recalc_module, "run_scenario", gated_run)

        received = []
        with BackgroundRecalculator(on_result=lambda r: received.append(r.scenario.name)) as recalc:
            first = recalc.submit(simple_scenario(name="A"))
            second = recalc.submit(simple_scenario(name="B"))
            release.set()
            assert first.result(timeout=10) is None
            assert second.result(timeout=10).scenario.name == "B"

        assert received == ["B"]
        assert recalc.latest.scenario.name == "B"

    def test_submission_waits_for_running_callback(self):
        """A submission made during a callback cannot supersede the result being delivered."""
        entered = threading.Event()
        submitted = threading.Event()
        seen = []

        def on_result(result):
            if result.scenario.name == "A":
                entered.set()
                submitted.wait(timeout=0.5)
            seen.append((result.scenario.name, recalc.generation))

        with BackgroundRecalculator(on_result=on_result) as recalc:
            recalc.submit(simple_scenario(name="A"))
            assert entered.wait(timeout=10)

            def submit_b():
                recalc.submit(simple_scenario(name="B"))
                submitted.set()

            submitter = threading.Thread(target=submit_b)
            submitter.start()
            submitter.join(timeout=10)
            recalc.wait(timeout=10)

        # A is delivered while still the newest submission, then B
        assert seen == [("A", 1), ("B", 2)]

    def test_wait_returns_latest(self):
        with BackgroundRecalculator() as recalc:
            assert recalc.wait() is None
            recalc.submit(simple_scenario(name="A"))
            recalc.submit(simple_scenario(name="B"))
            assert recalc.wait(timeout=10).scenario.name == "B"

    def test_errors_propagate_through_future(self, monkeypatch):
        def failing_run(scenario, settings=None):
            raise ValueError("bad inputs")

        monkeypatch.setattr(recalc_module, "run_scenario", failing_run)
        with BackgroundRecalculator() as recalc:
            future = recalc.submit(simple_scenario())
            with pytest.raises(ValueError, match="bad inputs"):
                future.result(timeout=10)
        assert recalc.latest is None
