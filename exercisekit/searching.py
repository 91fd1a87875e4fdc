"""Searching a sequence for a value."""

from __future__ import annotations

from typing import Any, Optional, Sequence


def binary_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Index of ``target`` in the ascending sequence ``values``, or None if absent."""
    first, last = 0, len(values) - 1
    while first <= last:
        middle = (first + last) // 2
        if values[middle] == target:
            return middle
        if values[middle] > target:
            last = middle - 1
        else:
            first = middle + 1
    return None


def linear_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Index of the first occurrence of ``target``, or None if absent."""
    return next((i for i, value in enumerate(values) if value == target), None)