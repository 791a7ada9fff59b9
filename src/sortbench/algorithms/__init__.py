# Copyright (c) Syntropy Systems
"""Sorting algorithm implementations."""

from sortbench.algorithms.comparison import (
    bubble_sort,
    bubble_sort_smart,
    heap_sort,
    insertion_sort,
    merge_sort,
    native_sort,
    quick_sort,
    selection_sort,
    shell_sort,
)
from sortbench.algorithms.distribution import (
    bitwise_radix_sort,
    bucket_sort,
    counting_sort,
    radix_sort,
)

__all__ = [
    "bitwise_radix_sort",
    "bubble_sort",
    "bubble_sort_smart",
    "bucket_sort",
    "counting_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "native_sort",
    "quick_sort",
    "radix_sort",
    "selection_sort",
    "shell_sort",
]
