# Copyright (c) Syntropy Systems
"""Test scenarios and the compatibility filter.

A scenario is a named rule for generating arrays of a given size with a
particular shape. The default catalog covers random, duplicate-heavy, sparse,
sorted, reversed and nearly sorted data in both integer and float flavors.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sortbench.datagen import (
    ElementKind,
    nearly_sorted_array,
    random_array,
    sorted_array,
)
from sortbench.errors import UnknownNameError
from sortbench.registry import AcceptedDomain

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from sortbench.registry import Algorithm


@dataclass(frozen=True)
class Scenario:
    """A named array generator with a declared element kind."""

    name: str
    generator: Callable[[int], list[float]]
    element_kind: ElementKind
    description: str = ""

    def generate(self, size: int) -> list[float]:
        """Produce a fresh array of ``size`` elements."""
        return self.generator(size)


def default_scenarios() -> list[Scenario]:
    """Return the built-in scenario catalog, in reporting order."""
    return [
        Scenario(
            name="random-integers",
            generator=lambda n: random_array(n, n * 2, ElementKind.INTEGER),
            element_kind=ElementKind.INTEGER,
            description="random integers in [0, 2n)",
        ),
        Scenario(
            name="random-floats",
            generator=lambda n: random_array(n, n, ElementKind.FLOAT),
            element_kind=ElementKind.FLOAT,
            description="random floats in [0, n)",
        ),
        Scenario(
            # Low magnitude forces many repeated values
            name="random-duplicates",
            generator=lambda n: random_array(n, math.floor(n / 10), ElementKind.INTEGER),
            element_kind=ElementKind.INTEGER,
            description="random integers in [0, n/10), many duplicates",
        ),
        Scenario(
            # Worst case for counting sort's k-dependent loop
            name="random-sparse",
            generator=lambda n: random_array(n, n * 100, ElementKind.INTEGER),
            element_kind=ElementKind.INTEGER,
            description="random integers in [0, 100n), sparse large values",
        ),
        Scenario(
            name="sorted-ascending",
            generator=lambda n: sorted_array(n, ElementKind.INTEGER, descending=False),
            element_kind=ElementKind.INTEGER,
            description="perfectly sorted ascending integers",
        ),
        Scenario(
            name="sorted-descending",
            generator=lambda n: sorted_array(n, ElementKind.INTEGER, descending=True),
            element_kind=ElementKind.INTEGER,
            description="perfectly sorted descending (reversed) integers",
        ),
        Scenario(
            name="sorted-floats",
            generator=lambda n: sorted_array(n, ElementKind.FLOAT, descending=False),
            element_kind=ElementKind.FLOAT,
            description="perfectly sorted ascending floats",
        ),
        Scenario(
            name="nearly-sorted-ascending",
            generator=lambda n: nearly_sorted_array(
                n, 5, descending=False, kind=ElementKind.INTEGER
            ),
            element_kind=ElementKind.INTEGER,
            description="ascending integers with 5% chaos",
        ),
        Scenario(
            name="nearly-sorted-descending",
            generator=lambda n: nearly_sorted_array(
                n, 5, descending=True, kind=ElementKind.INTEGER
            ),
            element_kind=ElementKind.INTEGER,
            description="descending integers with 5% chaos",
        ),
        Scenario(
            name="shuffled-40",
            generator=lambda n: nearly_sorted_array(
                n, 40, descending=False, kind=ElementKind.INTEGER
            ),
            element_kind=ElementKind.INTEGER,
            description="ascending integers with 40% chaos",
        ),
    ]


def compatible_scenarios(
    algorithm: Algorithm,
    scenarios: Sequence[Scenario],
) -> list[Scenario]:
    """Return the scenarios ``algorithm`` may legally be tested against.

    Algorithms restricted to non-negative integers only see integer scenarios;
    every other algorithm sees the whole catalog. Catalog order is kept.
    """
    if algorithm.accepted_domain is AcceptedDomain.NON_NEGATIVE_INTEGERS:
        return [s for s in scenarios if s.element_kind is ElementKind.INTEGER]
    return list(scenarios)


def select_scenarios(
    scenarios: Sequence[Scenario],
    names: Iterable[str] | None,
) -> list[Scenario]:
    """Narrow ``scenarios`` to ``names``, keeping catalog order.

    ``None`` or an empty selection keeps the whole catalog.
    """
    wanted = list(names or [])
    if not wanted:
        return list(scenarios)

    known = {s.name for s in scenarios}
    for name in wanted:
        if name not in known:
            raise UnknownNameError("scenario", name, [s.name for s in scenarios])

    return [s for s in scenarios if s.name in wanted]
