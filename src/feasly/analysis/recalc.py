# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Background recalculation.

Runs ``run_scenario`` on a single worker thread so callers (an interactive
front end) are not blocked while inputs change. Every submission supersedes
the previous ones: a result whose generation is older than the latest
submission is discarded when it completes.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from ..core.primitives import GlobalSettings
from .cash_flow import ScenarioResult, run_scenario
from .scenario import Scenario

logger = logging.getLogger(__name__)

ResultCallback = Callable[[ScenarioResult], None]


class BackgroundRecalculator:
    """
    Latest-input-wins scenario recalculation off the calling thread.

    Example:
        ```python
        with BackgroundRecalculator(on_result=render) as recalc:
            recalc.submit(scenario_v1)
            recalc.submit(scenario_v2)  # v1's result is discarded if late
            recalc.wait()
        ```
    """

    def __init__(
        self,
        on_result: Optional[ResultCallback] = None,
        settings: Optional[GlobalSettings] = None,
    ):
        self._on_result = on_result
        self._settings = settings
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="feasly-recalc")
        # Reentrant so callbacks may read ``latest`` or ``generation``
        self._lock = threading.RLock()
        self._generation = 0
        self._latest: Optional[ScenarioResult] = None
        self._pending: Optional[Future] = None

    @property
    def generation(self) -> int:
        """Generation number of the most recent submission."""
        with self._lock:
            return self._generation

    @property
    def latest(self) -> Optional[ScenarioResult]:
        """Result of the most recent submission, once it has completed."""
        with self._lock:
            return self._latest

    def submit(self, scenario: Scenario) -> Future:
        """
        Queue a recalculation, superseding any earlier submission.

        Waits for a result callback that is already running to return.

        Returns:
            Future resolving to the ScenarioResult, or to None if the result
            was stale by the time it completed. Calculation errors propagate
            through the future.
        """
        with self._lock:
            self._generation += 1
            generation = self._generation
            future = self._executor.submit(self._run, scenario, generation)
            self._pending = future
        return future

    def wait(self, timeout: Optional[float] = None) -> Optional[ScenarioResult]:
        """Block until the most recent submission completes and return its result."""
        with self._lock:
            pending = self._pending
        if pending is not None:
            pending.result(timeout=timeout)
        return self.latest

    def _is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def _run(self, scenario: Scenario, generation: int) -> Optional[ScenarioResult]:
        if not self._is_current(generation):
            logger.debug(f"Skipping superseded recalculation (generation {generation})")
            return None

        result = run_scenario(scenario, self._settings)

        # Submissions wait for the callback, so it never sees a superseded result
        with self._lock:
            if generation != self._generation:
                logger.debug(f"Discarding stale result (generation {generation})")
                return None
            self._latest = result
            if self._on_result is not None:
                self._on_result(result)
        return result

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "BackgroundRecalculator":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()
