"""Dynamic-programming exercises: 0/1 knapsack, subset sum and jolly jumpers."""

from __future__ import annotations

from typing import Sequence


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Largest total value of items whose weights fit within ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(w < 0 for w in weights):
        raise ValueError("weights must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        if weight > capacity:
            continue
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def subset_sum(values: Sequence[int], target: int) -> bool:
    """True if some subset of ``values`` adds up to ``target``."""
    reachable = {0}
    prune = all(v >= 0 for v in values)
    for value in values:
        reachable |= {s + value for s in reachable if not prune or s + value <= target}
    return target in reachable


def is_jolly(sequence: Sequence[int]) -> bool:
    """True if the gaps between neighbours are exactly the numbers 1 .. n-1."""
    n = len(sequence)
    seen: set[int] = set()
    for current, following in zip(sequence, sequence[1:]):
        gap = abs(current - following)
        if gap == 0 or gap > n - 1 or gap in seen:
            return False
        seen.add(gap)
    return True