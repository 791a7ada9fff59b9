# Copyright (c) Syntropy Systems
"""Timing harness for sorting algorithms.

One trial runs an algorithm several times on freshly generated inputs and
averages the wall-clock durations. Small arrays are cheap and noisy, so they
get many samples; large arrays dominate run time, so they get few.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sortbench.errors import AlgorithmError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sortbench.registry import Algorithm
    from sortbench.scenarios import Scenario

NS_PER_MS = 1_000_000.0

# (exclusive upper bound on size, samples); sizes past the last bound use
# DEFAULT_MIN_SAMPLES
DEFAULT_SAMPLE_BREAKPOINTS: tuple[tuple[int, int], ...] = (
    (50, 200),
    (500, 100),
    (1_000, 50),
    (2_000, 40),
    (3_000, 30),
    (6_000, 20),
    (10_000, 10),
)
DEFAULT_MIN_SAMPLES = 5


@dataclass(frozen=True)
class Measurement:
    """Timing of one trial."""

    average_time_ms: float
    total_time_ms: float
    sample_count: int


def sample_size_for(
    size: int,
    breakpoints: Sequence[tuple[int, int]] = DEFAULT_SAMPLE_BREAKPOINTS,
    min_samples: int = DEFAULT_MIN_SAMPLES,
) -> int:
    """Number of samples to take for arrays of ``size`` elements."""
    for upper_bound, samples in breakpoints:
        if size < upper_bound:
            return samples
    return min_samples


def measure(
    algorithm: Algorithm,
    scenario: Scenario,
    size: int,
    samples: int | None = None,
) -> Measurement:
    """Time ``algorithm`` on ``samples`` fresh arrays from ``scenario``.

    Generation and copying happen outside the timed region. Each call gets its
    own copy of the input so a misbehaving algorithm cannot corrupt the next
    sample. The output is discarded; correctness is checked elsewhere.

    Raises:
        AlgorithmError: The sort function raised; the original exception is
            chained.

    """
    if samples is None:
        samples = sample_size_for(size)

    durations_ns: list[int] = []
    for _ in range(samples):
        master = scenario.generate(size)
        working = list(master)

        try:
            start = time.perf_counter_ns()
            _ = algorithm.fn(working)
            end = time.perf_counter_ns()
        except Exception as exc:
            raise AlgorithmError(algorithm.name, scenario.name, size) from exc

        durations_ns.append(end - start)

    total_time_ms = sum(durations_ns) / NS_PER_MS
    average_time_ms = total_time_ms / samples if samples > 0 else 0.0

    return Measurement(
        average_time_ms=average_time_ms,
        total_time_ms=total_time_ms,
        sample_count=samples,
    )
