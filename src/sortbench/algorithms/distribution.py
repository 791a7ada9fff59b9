# Copyright (c) Syntropy Systems
"""Distribution (non-comparison) sorting algorithms.

Counting and radix sorts only handle non-negative integers. Bucket sort works
on any real numbers.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

from sortbench.algorithms.comparison import insertion_sort

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

RADIX_BASE = 10
BYTE_MASK = 0xFF
DEFAULT_BUCKET_WIDTH = 5


def counting_sort(values: Sequence[int]) -> list[int]:
    """Counting sort over ``0..max(values)``."""
    if len(values) <= 1:
        return list(values)

    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1

    result: list[int] = []
    for value, count in enumerate(counts):
        if count:
            result.extend([value] * count)
    return result


def _counting_pass(
    values: list[int],
    key_of: Callable[[int], int],
    buckets: int,
) -> list[int]:
    """Stable counting sort of ``values`` by ``key_of(value)``."""
    counts = [0] * buckets
    keys = [key_of(v) for v in values]
    for key in keys:
        counts[key] += 1

    for i in range(1, buckets):
        counts[i] += counts[i - 1]

    output = [0] * len(values)
    # Walk backwards so equal keys keep their relative order
    for i in range(len(values) - 1, -1, -1):
        counts[keys[i]] -= 1
        output[counts[keys[i]]] = values[i]
    return output


def radix_sort(values: Sequence[int]) -> list[int]:
    """LSD radix sort in base 10."""
    result = list(values)
    if len(result) <= 1:
        return result

    largest = max(result)
    place = 1
    while largest // place > 0:
        result = _counting_pass(
            result, lambda v, p=place: (v // p) % RADIX_BASE, RADIX_BASE
        )
        place *= RADIX_BASE
    return result


def bitwise_radix_sort(values: Sequence[int]) -> list[int]:
    """LSD radix sort on 8-bit digits using shifts and masks."""
    result = list(values)
    if len(result) <= 1:
        return result

    largest = max(result)
    shift = 0
    while largest >> shift > 0:
        result = _counting_pass(
            result, lambda v, s=shift: (v >> s) & BYTE_MASK, BYTE_MASK + 1
        )
        shift += 8
    return result


def bucket_sort(
    values: Sequence[float],
    bucket_width: float = DEFAULT_BUCKET_WIDTH,
) -> list[float]:
    """Bucket sort with fixed-width buckets, each finished by insertion sort."""
    if len(values) <= 1:
        return list(values)

    low = min(values)
    high = max(values)
    bucket_count = math.floor((high - low) / bucket_width) + 1
    buckets: list[list[float]] = [[] for _ in range(bucket_count)]

    for value in values:
        buckets[math.floor((value - low) / bucket_width)].append(value)

    result: list[float] = []
    for bucket in buckets:
        result.extend(insertion_sort(bucket))
    return result
