"""An undirected, weighted graph keyed by node name."""

from __future__ import annotations


class NodeNotInGraph(KeyError):
    """Raised when a node that is not in the graph is accessed."""

    def __str__(self) -> str:
        return "accessing a node that is not in the graph"


class UndirectedGraph:
    """An undirected graph stored as an adjacency table of weighted neighbours."""

    def __init__(self) -> None:
        self._adjacency: dict[str, list[tuple[str, int]]] = {}

    def add_node(self, node: str) -> bool:
        """Add ``node``; return True if it was new, False if already present."""
        if node in self._adjacency:
            return False
        self._adjacency[node] = []
        return True

    def add_edge(self, edge: tuple[str, str, int]) -> None:
        """Add an edge ``(node1, node2, weight)`` in both directions."""
        node1, node2, weight = edge
        self.add_node(node1)
        self.add_node(node2)
        self._adjacency[node1].append((node2, weight))
        self._adjacency[node2].append((node1, weight))

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def nodes(self) -> set[str]:
        return set(self._adjacency)

    def edges(self) -> list[tuple[str, str, int]]:
        """Return every directed half of every edge as ``(from, to, weight)``."""
        return [
            (from_node, to_node, weight)
            for from_node, neighbours in self._adjacency.items()
            for to_node, weight in neighbours
        ]