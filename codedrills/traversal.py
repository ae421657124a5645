"""Breadth-first and depth-first traversal of an undirected graph on 0..n-1."""

from __future__ import annotations

from collections import deque


class AdjacencyGraph:
    """An undirected graph on vertices ``0 .. n-1`` stored as adjacency lists."""

    def __init__(self, n: int) -> None:
        self._adj: list[list[int]] = [[] for _ in range(n)]

    def add_edge(self, src: int, dest: int) -> None:
        self._adj[src].append(dest)
        self._adj[dest].append(src)

    def bfs(self, start: int) -> list[int]:
        """Return vertices in breadth-first order from ``start``."""
        visited = [False] * len(self._adj)
        visited[start] = True
        queue = deque([start])
        order: list[int] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in self._adj[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return vertices in depth-first (pre-order) order from ``start``."""
        neighbours_of_start = iter(self._adj[start])
        visited = {start}
        order = [start]
        stack = [neighbours_of_start]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adj[neighbour]))
                    break
            else:
                stack.pop()
        return order