"""Directed graphs by adjacency list, breadth-first search and brute-force TSP."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from itertools import permutations


class Graph:
    """A directed graph over vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self.vertices = vertices
        self.adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"no vertex {vertex} in a graph of {self.vertices}")

    def add_edge(self, v: int, w: int) -> None:
        """Add an edge from ``v`` to ``w``."""
        self._check(v)
        self._check(w)
        self.adjacency[v].append(w)

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        order = []
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self.adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order


def travelling_salesman(graph: Sequence[Sequence[int]], start: int) -> int:
    """Cheapest round trip from ``start`` through every vertex of a cost matrix."""
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("cost matrix must be square")
    if not 0 <= start < size:
        raise ValueError(f"no vertex {start} in a graph of {size}")
    others = [vertex for vertex in range(size) if vertex != start]
    best = None
    for route in permutations(others):
        cost = 0
        here = start
        for vertex in route:
            cost += graph[here][vertex]
            here = vertex
        cost += graph[here][start]
        if best is None or cost < best:
            best = cost
    return best