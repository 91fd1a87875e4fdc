"""Undirected graphs: adjacency lists, breadth-first search and tree diameter."""

from __future__ import annotations

from collections import deque
from typing import Iterable


class Graph:
    """Undirected graph on vertices ``0 .. vertices - 1``.

    Each new edge is put at the front of both adjacency lists, so neighbours
    come out newest first.
    """

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must be non-negative")
        self.vertices = vertices
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"no such vertex: {vertex}")

    def add_edge(self, u: int, v: int) -> None:
        self._check(u)
        self._check(v)
        self._adjacency[v].insert(0, u)
        self._adjacency[u].insert(0, v)

    def neighbors(self, vertex: int) -> list[int]:
        self._check(vertex)
        return list(self._adjacency[vertex])

    def bfs(self, start: int) -> list[int]:
        """Vertices in the order breadth-first search from ``start`` visits them."""
        self._check(start)
        visited = {start}
        pending = deque([start])
        order: list[int] = []
        while pending:
            current = pending.popleft()
            order.append(current)
            for neighbor in self._adjacency[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    pending.append(neighbor)
        return order


def _farthest(start: int, adjacency: list[list[int]]) -> tuple[int, int]:
    distance = {start: 0}
    pending = deque([start])
    while pending:
        current = pending.popleft()
        for neighbor in adjacency[current]:
            if neighbor not in distance:
                distance[neighbor] = distance[current] + 1
                pending.append(neighbor)
    n = len(adjacency) - 1
    best = max(range(1, n + 1), key=lambda v: distance.get(v, 0))
    return best, distance.get(best, 0)


def tree_diameter(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of edges on the longest path of a tree with vertices ``1 .. n``."""
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) uses a vertex outside 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    end, _ = _farthest(1, adjacency)
    _, diameter = _farthest(end, adjacency)
    return diameter