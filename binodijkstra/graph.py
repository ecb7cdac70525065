"""Random weighted undirected graphs stored as adjacency lists."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An edge to ``target`` carrying ``weight``."""

    target: int
    weight: float


Graph = list[list[Edge]]


def generate(
    n: int, c: float, max_weight: float, rng: random.Random | None = None
) -> tuple[Graph, int]:
    """Build an Erdős–Rényi graph on ``n`` vertices with p = c·ln(n)/n.

    Every pair of vertices is joined independently with probability p by an
    edge whose weight is uniform on [1, max_weight]. The factor ``c`` is
    truncated to an integer. Returns the adjacency lists and the edge count.
    """
    if n < 0:
        raise ValueError("vertex count must not be negative")
    rng = rng if rng is not None else random.Random()
    graph: Graph = [[] for _ in range(n)]
    if n < 2:
        return graph, 0

    p = int(c) * math.log(n) / n
    edge_count = 0
    for i in range(n):
        for j in range(i):
            if rng.random() < p:
                weight = rng.uniform(1.0, max_weight)
                graph[i].append(Edge(j, weight))
                graph[j].append(Edge(i, weight))
                edge_count += 1
    return graph, edge_count