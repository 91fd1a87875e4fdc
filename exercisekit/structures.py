"""Container types: a bounded min-heap, a priority queue, a bounded FIFO queue and a stack."""

from __future__ import annotations

import bisect
from collections import deque
from typing import Any, Iterator


class MinHeap:
    """Binary min-heap holding at most ``capacity`` keys."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"heap index out of range: {index}")

    def _sift_up(self, index: int, *, to_root: bool = False) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not to_root and not items[index] < items[parent]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] < items[smallest]:
                    smallest = child
            if smallest == index:
                return
            items[smallest], items[index] = items[index], items[smallest]
            index = smallest

    def insert(self, key: Any) -> None:
        if len(self._items) >= self.capacity:
            raise OverflowError("heap is full")
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def decrease_key(self, index: int, value: Any) -> None:
        """Lower the key at ``index`` to ``value`` and restore the heap order."""
        self._check_index(index)
        if self._items[index] < value:
            raise ValueError("new value is larger than the current key")
        self._items[index] = value
        self._sift_up(index)

    def extract_min(self) -> Any:
        if not self._items:
            raise IndexError("extract from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return root

    def delete_key(self, index: int) -> Any:
        """Remove and return the key stored at ``index``."""
        self._check_index(index)
        self._sift_up(index, to_root=True)
        return self.extract_min()

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]


class PriorityQueue:
    """Items kept in ascending order of priority; ``pop`` takes the highest priority."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._entries: list[tuple[Any, int]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def insert(self, item: Any, priority: int) -> None:
        if len(self._entries) >= self.capacity:
            raise OverflowError("priority queue is full")
        bisect.insort(self._entries, (item, priority), key=lambda entry: entry[1])

    def pop(self) -> tuple[Any, int]:
        """Remove and return ``(item, priority)`` with the largest priority."""
        if not self._entries:
            raise IndexError("pop from an empty priority queue")
        return self._entries.pop()

    def items(self) -> list[tuple[Any, int]]:
        """All ``(item, priority)`` pairs, lowest priority first."""
        return list(self._entries)


class BoundedQueue:
    """First-in first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def enqueue(self, item: Any) -> None:
        if len(self._items) >= self.capacity:
            raise OverflowError("queue is full")
        self._items.append(item)

    def dequeue(self) -> Any:
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()


class Stack:
    """Last-in first-out stack; iteration runs from the top down."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return reversed(list(self._items))

    def push(self, item: Any) -> None:
        self._items.append(item)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]