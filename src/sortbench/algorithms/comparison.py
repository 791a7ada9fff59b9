# Copyright (c) Syntropy Systems
"""Comparison-based sorting algorithms.

Every function takes a sequence and returns a new sorted list; the input is
never modified.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def bubble_sort(values: Sequence[float]) -> list[float]:
    """Plain bubble sort, always making n - 1 passes."""
    result = list(values)
    n = len(result)
    for i in range(n - 1):
        for j in range(n - 1 - i):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def bubble_sort_smart(values: Sequence[float]) -> list[float]:
    """Bubble sort with early exit and a shrinking bound at the last swap."""
    result = list(values)
    end = len(result) - 1

    while end > 0:
        last_swap = 0
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                last_swap = j
        # Everything past the last swap is already in place
        if last_swap == 0:
            break
        end = last_swap

    return result


def insertion_sort(values: Sequence[float]) -> list[float]:
    """Insertion sort."""
    result = list(values)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def selection_sort(values: Sequence[float]) -> list[float]:
    """Selection sort."""
    result = list(values)
    n = len(result)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            if result[j] < result[smallest]:
                smallest = j
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result


def _merge(left: list[float], right: list[float]) -> list[float]:
    merged: list[float] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[float]) -> list[float]:
    """Top-down recursive merge sort."""
    if len(values) <= 1:
        return list(values)

    middle = len(values) // 2
    return _merge(merge_sort(values[:middle]), merge_sort(values[middle:]))


def _partition(result: list[float], low: int, high: int) -> int:
    # Median-of-three: order low/mid/high, then park the median at high
    mid = low + (high - low) // 2
    if result[low] > result[mid]:
        result[low], result[mid] = result[mid], result[low]
    if result[low] > result[high]:
        result[low], result[high] = result[high], result[low]
    if result[mid] > result[high]:
        result[mid], result[high] = result[high], result[mid]
    result[mid], result[high] = result[high], result[mid]

    pivot = result[high]
    i = low - 1
    for j in range(low, high):
        if result[j] <= pivot:
            i += 1
            result[i], result[j] = result[j], result[i]
    result[i + 1], result[high] = result[high], result[i + 1]
    return i + 1


def quick_sort(values: Sequence[float]) -> list[float]:
    """Quicksort with median-of-three pivots.

    Partitions are tracked on an explicit stack rather than by recursion.
    """
    result = list(values)
    stack = [(0, len(result) - 1)]
    while stack:
        low, high = stack.pop()
        if low >= high:
            continue
        pivot = _partition(result, low, high)
        stack.append((low, pivot - 1))
        stack.append((pivot + 1, high))
    return result


def _sift_down(heap: list[float], root: int, size: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Sequence[float]) -> list[float]:
    """Heap sort on a max-heap."""
    heap = list(values)
    n = len(heap)

    for i in range(n // 2 - 1, -1, -1):
        _sift_down(heap, i, n)

    for end in range(n - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, 0, end)

    return heap


def shell_sort(values: Sequence[float]) -> list[float]:
    """Shell sort with Knuth's gap sequence (1, 4, 13, 40, ...)."""
    result = list(values)
    n = len(result)

    gap = 1
    while gap < n / 3:
        gap = gap * 3 + 1

    while gap > 0:
        for i in range(gap, n):
            current = result[i]
            j = i
            while j >= gap and result[j - gap] > current:
                result[j] = result[j - gap]
                j -= gap
            result[j] = current
        gap //= 3

    return result


def native_sort(values: Sequence[float]) -> list[float]:
    """The interpreter's built-in Timsort."""
    return sorted(values)
