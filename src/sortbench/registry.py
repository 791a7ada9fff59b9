# Copyright (c) Syntropy Systems
"""Algorithm registry.

The single catalog of sorting algorithms under test: display name, sort
function and the kind of data each one accepts. Both the benchmark engine and
the correctness checks read from it.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from sortbench import algorithms
from sortbench.errors import UnknownNameError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence


class AcceptedDomain(str, Enum):
    """Data an algorithm is able to sort."""

    ALL = "all"
    NON_NEGATIVE_INTEGERS = "non-negative-integers"


@dataclass(frozen=True)
class Algorithm:
    """A registered sorting algorithm."""

    name: str
    fn: Callable[[Sequence[float]], list[float]]
    accepted_domain: AcceptedDomain = AcceptedDomain.ALL


def default_algorithms() -> list[Algorithm]:
    """Return the built-in algorithm catalog in registration order."""
    integers_only = AcceptedDomain.NON_NEGATIVE_INTEGERS
    return [
        # O(n^2)
        Algorithm("Bubble Sort", algorithms.bubble_sort),
        Algorithm("Bubble Sort Smart", algorithms.bubble_sort_smart),
        Algorithm("Insertion Sort", algorithms.insertion_sort),
        Algorithm("Selection Sort", algorithms.selection_sort),
        # O(n log n)
        Algorithm("Merge Sort", algorithms.merge_sort),
        Algorithm("Quick Sort", algorithms.quick_sort),
        Algorithm("Heap Sort", algorithms.heap_sort),
        Algorithm("Shell Sort", algorithms.shell_sort),
        # Linear time, non-negative integers only
        Algorithm("Counting Sort", algorithms.counting_sort, integers_only),
        Algorithm("Radix Sort", algorithms.radix_sort, integers_only),
        Algorithm("Bitwise Radix Sort", algorithms.bitwise_radix_sort, integers_only),
        # Hybrid and distribution based
        Algorithm("Timsort (Native)", algorithms.native_sort),
        Algorithm("Bucket Sort", algorithms.bucket_sort),
    ]


def select_algorithms(
    registry: Sequence[Algorithm],
    names: Iterable[str] | None,
) -> list[Algorithm]:
    """Narrow ``registry`` to ``names``, keeping registration order.

    Names match case-insensitively. ``None`` or an empty selection keeps the
    whole registry.
    """
    requested = list(names or [])
    if not requested:
        return list(registry)

    known = {a.name.lower() for a in registry}
    for name in requested:
        if name.lower() not in known:
            raise UnknownNameError("algorithm", name, [a.name for a in registry])

    wanted = {name.lower() for name in requested}
    return [a for a in registry if a.name.lower() in wanted]
