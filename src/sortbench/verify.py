# Copyright (c) Syntropy Systems
"""Correctness checks for sorting algorithms.

Python's built-in ``sorted()`` is the reference. For every algorithm, every
compatible scenario and a handful of small sizes, an algorithm passes when its
output equals the reference and the input list is unchanged after the call.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sortbench.scenarios import compatible_scenarios

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sortbench.registry import Algorithm
    from sortbench.scenarios import Scenario

# Empty and single-element edge cases plus small non-trivial sizes
CORRECTNESS_TEST_SIZES: tuple[int, ...] = (0, 1, 2, 17, 100)


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of checking one algorithm on one scenario at one size."""

    algorithm_name: str
    scenario_name: str
    size: int
    sorted_ok: bool
    unmutated_ok: bool
    error: str | None = None

    @property
    def passed(self) -> bool:
        """True when both checks hold."""
        return self.sorted_ok and self.unmutated_ok


def reference_sort(values: Sequence[float]) -> list[float]:
    """Ground-truth ascending order; never mutates ``values``."""
    return sorted(values)


def check(algorithm: Algorithm, scenario: Scenario, size: int) -> VerificationResult:
    """Generate one input and check ``algorithm`` against the reference.

    A sort function that raises fails the check; the error text is kept on
    the result.
    """
    values = scenario.generate(size)
    snapshot = list(values)
    expected = reference_sort(values)

    try:
        actual = algorithm.fn(values)
    except Exception as exc:  # noqa: BLE001
        return VerificationResult(
            algorithm_name=algorithm.name,
            scenario_name=scenario.name,
            size=size,
            sorted_ok=False,
            unmutated_ok=values == snapshot,
            error=f"{type(exc).__name__}: {exc}",
        )

    return VerificationResult(
        algorithm_name=algorithm.name,
        scenario_name=scenario.name,
        size=size,
        sorted_ok=list(actual) == expected,
        unmutated_ok=values == snapshot,
    )


def verify_algorithm(
    algorithm: Algorithm,
    scenarios: Sequence[Scenario],
    sizes: Sequence[int] = CORRECTNESS_TEST_SIZES,
) -> list[VerificationResult]:
    """Check ``algorithm`` on each compatible scenario at each size."""
    return [
        check(algorithm, scenario, size)
        for scenario in compatible_scenarios(algorithm, scenarios)
        for size in sizes
    ]


def verify_all(
    algorithms: Sequence[Algorithm],
    scenarios: Sequence[Scenario],
    sizes: Sequence[int] = CORRECTNESS_TEST_SIZES,
) -> list[VerificationResult]:
    """Check every algorithm in registration order."""
    results: list[VerificationResult] = []
    for algorithm in algorithms:
        results.extend(verify_algorithm(algorithm, scenarios, sizes))
    return results
