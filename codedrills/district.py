"""Counting provinces: connected groups of cities in batches of a JSON file."""

from __future__ import annotations

import json
from collections import defaultdict
from typing import Any


def count_connected_components(batch: Any) -> int:
    """Return the number of connected groups of cities in ``batch``.

    ``batch`` maps each city to a list of cities it is linked to. Links are
    undirected; a city linked only to itself or to nothing is not counted.
    """
    if not isinstance(batch, dict):
        return 0

    graph: defaultdict[str, set[str]] = defaultdict(set)
    for city, connections in batch.items():
        if not isinstance(connections, list):
            continue
        for other in connections:
            if isinstance(other, str) and other != city:
                graph[city].add(other)
                graph[other].add(city)

    visited: set[str] = set()
    provinces = 0
    for city in graph:
        if city in visited:
            continue
        provinces += 1
        visited.add(city)
        pending = [city]
        while pending:
            for neighbour in graph[pending.pop()]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    pending.append(neighbour)
    return provinces


def count_provinces(path: str = "district.json") -> str:
    """Count provinces in batches ``"1"`` to ``"5"`` of the JSON file at ``path``.

    Batches that are missing or not objects are skipped. The counts are
    joined with commas.
    """
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    counts = [
        count_connected_components(data[key])
        for key in (str(i) for i in range(1, 6))
        if isinstance(data, dict) and isinstance(data.get(key), dict)
    ]
    return ",".join(str(value) for value in counts)