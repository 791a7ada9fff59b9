# Copyright (c) Syntropy Systems
"""Test array generators.

Each generator produces a fresh list with a particular shape (random, sorted,
nearly sorted). They know nothing about algorithms or the benchmark loop and
draw from the module-level ``random`` source, so repeated runs differ.
"""
from __future__ import annotations

import math
import random
from enum import Enum


class ElementKind(str, Enum):
    """Numeric type of the elements a generator produces."""

    INTEGER = "integer"
    FLOAT = "float"


def _check_size(size: int) -> None:
    if size < 0:
        msg = f"Array size must be non-negative, got {size}"
        raise ValueError(msg)


def random_array(
    size: int,
    max_magnitude: float | None = None,
    kind: ElementKind = ElementKind.INTEGER,
) -> list[float]:
    """Generate ``size`` values drawn uniformly from ``[0, max_magnitude)``.

    ``max_magnitude`` defaults to ``2 * size``. Integer arrays hold whole
    numbers; a zero magnitude yields all zeros.
    """
    _check_size(size)
    if max_magnitude is None:
        max_magnitude = size * 2

    if kind is ElementKind.INTEGER:
        return [math.floor(random.random() * max_magnitude) for _ in range(size)]  # noqa: S311
    return [random.random() * max_magnitude for _ in range(size)]  # noqa: S311


def sorted_array(
    size: int,
    kind: ElementKind = ElementKind.INTEGER,
    descending: bool = False,  # noqa: FBT001, FBT002
) -> list[float]:
    """Generate ``0..size-1`` in ascending (or descending) order.

    Float arrays add a random fraction in ``[0, 1)`` to each base value, which
    breaks ties without disturbing the order.
    """
    _check_size(size)
    bases = range(size - 1, -1, -1) if descending else range(size)

    if kind is ElementKind.INTEGER:
        return list(bases)
    return [base + random.random() for base in bases]  # noqa: S311


def nearly_sorted_array(
    size: int,
    chaos_percent: float = 5,
    descending: bool = False,  # noqa: FBT001, FBT002
    kind: ElementKind = ElementKind.INTEGER,
) -> list[float]:
    """Generate a sorted array disturbed by random index-pair swaps.

    ``floor(size * chaos_percent / 100)`` swaps are made. Swap targets are
    picked independently and may coincide, so the chaos is an upper bound.
    """
    values = sorted_array(size, kind, descending)

    swaps = math.floor(size * (chaos_percent / 100))
    for _ in range(swaps):
        i = random.randrange(size)  # noqa: S311
        j = random.randrange(size)  # noqa: S311
        values[i], values[j] = values[j], values[i]

    return values
