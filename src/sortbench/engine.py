# Copyright (c) Syntropy Systems
"""Benchmark orchestration.

``BenchmarkRunner`` drives the whole suite: for every algorithm, every
compatible scenario and every array size in ascending order it measures a
trial, records it, and asks the bail-out policy whether the pair is worth
growing further. Once a pair is abandoned it is never revisited in the run.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from typing_extensions import Self

from sortbench.measure import measure, sample_size_for
from sortbench.models.results import TrialRecord
from sortbench.policy import BailOutPolicy, BailOutReason, PreviousTrial
from sortbench.results import ResultAggregator
from sortbench.scenarios import compatible_scenarios

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence
    from pathlib import Path

    from sortbench.config import BenchmarkSettings
    from sortbench.measure import Measurement
    from sortbench.registry import Algorithm
    from sortbench.scenarios import Scenario

    MeasureFn = Callable[[Algorithm, Scenario, int, int], Measurement]

logger = logging.getLogger(__name__)

RULE = "=" * 48


def pair_key(algorithm_name: str, scenario_name: str) -> str:
    """Key identifying an (algorithm, scenario) pair."""
    return f"{algorithm_name}|{scenario_name}"


@dataclass
class ScenarioProgress:
    """Per-pair state kept across sizes."""

    last_measurement: PreviousTrial | None = None
    abandoned: bool = False
    abandon_reason: BailOutReason | None = None


class BenchmarkRunner:
    """Runs timed trials and applies the bail-out policy.

    Everything the run needs is passed in, so independent runs can be built
    side by side. Sort-function failures surface as ``AlgorithmError`` and
    abort the run.
    """

    algorithms: list[Algorithm]
    scenarios: list[Scenario]
    sizes: list[int]
    policy: BailOutPolicy
    aggregator: ResultAggregator
    _sample_size: Callable[[int], int]
    _measure: MeasureFn
    _progress: dict[str, ScenarioProgress]

    def __init__(  # noqa: PLR0913
        self,
        algorithms: Sequence[Algorithm],
        scenarios: Sequence[Scenario],
        sizes: Iterable[int],
        policy: BailOutPolicy | None = None,
        aggregator: ResultAggregator | None = None,
        sample_size: Callable[[int], int] = sample_size_for,
        measure_fn: MeasureFn = measure,
    ) -> None:
        """Initialize a runner.

        Args:
            algorithms: Algorithms to test, in the order they are run
            scenarios: Scenario catalog; filtered per algorithm
            sizes: Array sizes; sorted and deduplicated, zero is skipped
            policy: Bail-out thresholds (defaults if omitted)
            aggregator: Where trial records go (in-memory if omitted)
            sample_size: Samples per trial as a function of size
            measure_fn: Timing function, replaceable for tests

        """
        self.algorithms = list(algorithms)
        self.scenarios = list(scenarios)
        self.sizes = sorted({size for size in sizes if size != 0})
        self.policy = policy or BailOutPolicy()
        self.aggregator = aggregator or ResultAggregator()
        self._sample_size = sample_size
        self._measure = measure_fn
        self._progress = {}

    @classmethod
    def from_settings(
        cls,
        settings: BenchmarkSettings,
        algorithms: Sequence[Algorithm],
        scenarios: Sequence[Scenario],
        output_path: Path | None = None,
    ) -> Self:
        """Build a runner from loaded configuration."""
        return cls(
            algorithms=algorithms,
            scenarios=scenarios,
            sizes=settings.size_schedule(),
            policy=settings.policy(),
            aggregator=ResultAggregator(output_path or settings.results_path),
            sample_size=settings.sample_size_for,
        )

    @property
    def progress(self) -> dict[str, ScenarioProgress]:
        """Per-pair progress keyed by ``pair_key``."""
        return dict(self._progress)

    def run(self) -> list[TrialRecord]:
        """Run the suite, save the results and return the trial records.

        Each call starts over: progress and previously collected records are
        discarded, so a runner can be reused.
        """
        self._progress = {}
        self.aggregator.clear()

        logger.info(RULE)
        logger.info("STARTING PERFORMANCE BENCHMARK SUITE")
        logger.info(RULE)
        started = time.perf_counter()

        if not self.algorithms or not self.sizes:
            logger.warning("Nothing to benchmark: no algorithms or no array sizes")

        for algorithm in self.algorithms:
            self._run_algorithm(algorithm)

        _ = self.aggregator.save()

        elapsed = time.perf_counter() - started
        logger.info(RULE)
        logger.info("BENCHMARK SUITE COMPLETE")
        logger.info(RULE)
        logger.info(
            "Recorded %d trial(s) in %.2f seconds", len(self.aggregator), elapsed
        )
        return self.aggregator.records

    def _run_algorithm(self, algorithm: Algorithm) -> None:
        logger.info('--- Testing algorithm "%s" ---', algorithm.name)
        for scenario in compatible_scenarios(algorithm, self.scenarios):
            self._run_pair(algorithm, scenario)

    def _run_pair(self, algorithm: Algorithm, scenario: Scenario) -> None:
        key = pair_key(algorithm.name, scenario.name)
        progress = self._progress.setdefault(key, ScenarioProgress())
        logger.info('  Scenario "%s"', scenario.name)

        for size in self.sizes:
            if progress.abandoned:
                break

            measurement = self._measure(
                algorithm, scenario, size, self._sample_size(size)
            )
            logger.info(
                "    Size %9s: %.4f ms (avg of %d runs in %.2f ms)",
                f"{size:,}",
                measurement.average_time_ms,
                measurement.sample_count,
                measurement.total_time_ms,
            )

            self.aggregator.add(
                TrialRecord(
                    algorithm_name=algorithm.name,
                    scenario_name=scenario.name,
                    array_size=size,
                    execution_time_ms=measurement.average_time_ms,
                )
            )

            reason = self.policy.evaluate(
                measurement.average_time_ms, size, progress.last_measurement
            )
            if reason is not None:
                progress.abandoned = True
                progress.abandon_reason = reason
                if reason is BailOutReason.TIME_CAP:
                    logger.warning(
                        "      TIME CAP REACHED for %s. Abandoning scenario.", key
                    )
                else:
                    logger.warning(
                        "      DETECTED QUADRATIC BEHAVIOR for %s. Abandoning scenario.",
                        key,
                    )

            progress.last_measurement = PreviousTrial(
                size=size, time_ms=measurement.average_time_ms
            )
