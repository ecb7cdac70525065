"""Repeated Dijkstra runs on random graphs, with summary statistics and CSV output."""

from __future__ import annotations

import csv
import random
import time
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike

from .binomial_heap import BinomialHeap
from .dijkstra import dijkstra
from .graph import Graph, generate

CSV_HEADER: tuple[str, ...] = (
    "n", "c", "M",
    "avg_time", "var_time", "min_time", "max_time",
    "avg_links", "var_links", "min_links", "max_links",
    "avg_swaps", "var_swaps", "min_swaps", "max_swaps",
    "avg_extracts", "var_extracts", "min_extracts", "max_extracts",
    "avg_edges", "var_edges", "min_edges", "max_edges",
    "avg_decrease", "var_decrease", "min_decrease", "max_decrease",
)


def _fmt(value: float | int) -> str:
    """Render a number the way a default-formatted stream would."""
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def is_connected(graph: Graph) -> bool:
    """Return whether every vertex is reachable from vertex 0."""
    if not graph:
        return True
    visited = [False] * len(graph)
    visited[0] = True
    stack = [0]
    while stack:
        u = stack.pop()
        for edge in graph[u]:
            if not visited[edge.target]:
                visited[edge.target] = True
                stack.append(edge.target)
    return all(visited)


@dataclass(frozen=True)
class Summary:
    """Mean, population variance, minimum and maximum of a sample."""

    mean: float
    variance: float
    minimum: float | int
    maximum: float | int

    def fields(self) -> list[str]:
        return [_fmt(self.mean), _fmt(self.variance), _fmt(self.minimum), _fmt(self.maximum)]


def summarize(values: Sequence[float | int]) -> Summary:
    """Summarise a non-empty sample."""
    if not values:
        raise ValueError("cannot summarise an empty sample")
    mean = sum(values) / len(values)
    variance = sum((x - mean) * (x - mean) for x in values) / len(values)
    return Summary(float(mean), float(variance), min(values), max(values))


@dataclass(frozen=True)
class ExperimentResult:
    """Statistics gathered over the accepted trials of one (n, c) setting."""

    n: int
    c: float
    trials: int
    time: Summary
    links: Summary
    swaps: Summary
    extracts: Summary
    edges: Summary
    decreases: Summary

    def csv_row(self) -> list[str]:
        """Return the result as CSV fields in the order of ``CSV_HEADER``."""
        row = [str(self.n), _fmt(float(self.c)), str(self.trials)]
        for summary in (self.time, self.links, self.swaps, self.extracts, self.edges, self.decreases):
            row.extend(summary.fields())
        return row


def run(
    n: int,
    c: float,
    trials: int,
    max_weight: float,
    rng: random.Random | None = None,
) -> ExperimentResult:
    """Run Dijkstra from vertex 0 on ``trials`` connected random graphs.

    Disconnected graphs are drawn again and do not count as trials.
    """
    if trials < 1:
        raise ValueError("at least one trial is required")
    if n < 1:
        raise ValueError("graphs need at least one vertex")
    rng = rng if rng is not None else random.Random()

    times: list[float] = []
    links: list[float] = []
    swaps: list[float] = []
    extracts: list[float] = []
    edge_counts: list[int] = []
    decreases: list[int] = []

    while len(times) < trials:
        graph, edge_count = generate(n, c, max_weight, rng)
        if not is_connected(graph):
            continue
        edge_counts.append(edge_count)

        heap = BinomialHeap()
        start = time.perf_counter()
        dijkstra(graph, 0, heap)
        times.append(time.perf_counter() - start)

        links.append(float(heap.link_count))
        swaps.append(float(heap.swap_count))
        extracts.append(float(heap.extract_count))
        decreases.append(heap.decrease_count)

    return ExperimentResult(
        n=n,
        c=c,
        trials=trials,
        time=summarize(times),
        links=summarize(links),
        swaps=summarize(swaps),
        extracts=summarize(extracts),
        edges=summarize(edge_counts),
        decreases=summarize(decreases),
    )


def write_csv_header(path: str | PathLike[str]) -> None:
    """Truncate ``path`` and write the CSV header line to it."""
    with open(path, "w", newline="") as handle:
        csv.writer(handle, lineterminator="\n").writerow(CSV_HEADER)


def append_result(path: str | PathLike[str], result: ExperimentResult) -> None:
    """Append one result row to the CSV file at ``path``."""
    with open(path, "a", newline="") as handle:
        csv.writer(handle, lineterminator="\n").writerow(result.csv_row())