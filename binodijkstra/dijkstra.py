"""Single-source shortest paths using the binomial heap."""

from __future__ import annotations

import math

from .binomial_heap import BinomialHeap
from .graph import Graph


def dijkstra(
    graph: Graph, source: int, heap: BinomialHeap | None = None
) -> tuple[list[float], list[int | None]]:
    """Compute shortest distances and predecessors from ``source``.

    Unreachable vertices have distance ``math.inf`` and predecessor ``None``;
    the source is its own predecessor. The heap passed in, if any, is used so
    that its counters record the work done.
    """
    n = len(graph)
    if not 0 <= source < n:
        raise IndexError(f"source vertex {source} out of range")
    heap = BinomialHeap() if heap is None else heap

    distances = [math.inf] * n
    predecessors: list[int | None] = [None] * n
    distances[source] = 0.0
    predecessors[source] = source
    heap.insert(source, 0.0)

    visited = [False] * n
    while heap:
        u = heap.extract_min()
        if visited[u]:
            continue
        visited[u] = True
        dist_u = distances[u]
        for edge in graph[u]:
            v = edge.target
            candidate = dist_u + edge.weight
            if not visited[v] and candidate < distances[v]:
                distances[v] = candidate
                predecessors[v] = u
                if v in heap:
                    heap.decrease_priority(v, candidate)
                else:
                    heap.insert(v, candidate)
    return distances, predecessors