"""Classic comparison sorts. Each returns a new sorted list and leaves its input alone."""

from __future__ import annotations

from typing import Iterable, TypeVar

T = TypeVar("T")


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Insert each element into its place within the already sorted prefix."""
    result: list[T] = []
    for item in values:
        position = len(result)
        while position > 0 and item < result[position - 1]:
            position -= 1
        result.insert(position, item)
    return result


def selection_sort(values: Iterable[T]) -> list[T]:
    """Repeatedly move the smallest remaining element to the end of the sorted part."""
    items = list(values)
    for boundary in range(len(items) - 1):
        smallest = min(range(boundary, len(items)), key=items.__getitem__)
        items[boundary], items[smallest] = items[smallest], items[boundary]
    return items


def _partition(items: list[T], low: int, high: int) -> int:
    """Place the last element of ``items[low:high + 1]`` at its final position."""
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] < pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quicksort with the last element of each range as the pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
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


def merge_sort(values: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def shell_sort(values: Iterable[T]) -> list[T]:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    items = list(values)
    gap = len(items) // 2
    while gap >= 1:
        for i in range(gap, len(items)):
            current = items[i]
            j = i - gap
            while j >= 0 and items[j] > current:
                items[j + gap] = items[j]
                j -= gap
            items[j + gap] = current
        gap //= 2
    return items


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Bubble the largest remaining element to the end on every pass."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items