"""Binomial heap, Dijkstra's algorithm and random-graph experiments."""

__version__ = "0.1.0"
__all__ = ["binomial_heap", "graph", "dijkstra", "experiments", "cli"]