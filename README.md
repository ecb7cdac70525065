# binodijkstra

This package has three parts:

- A binomial min-heap that counts the operations it performs.
- Dijkstra's single-source shortest paths algorithm, built on the heap.
- An experiment runner that measures how the heap behaves on random connected graphs.

## Installation

```
pip install .
```

## Command line

```
binodijkstra [M=<trials>] [n=<sizes>] [c=<factors>]
```

- `M=50` sets how many connected random graphs are measured for each configuration.
- `n=500,750,1000,1250,1500,1750,2000,2250,2500` is a comma-separated list of vertex counts.
- `c=1.5,1.75,2.0` is a comma-separated list of density factors. An edge is present with probability `c * ln(n) / n`. The graph generator truncates `c` to an integer first, so `1.5` and `1.75` both act as `1`.

The values shown above are the defaults. The maximum edge weight is fixed at 1000.

Arguments the command does not recognise are reported on standard error and skipped. A malformed number makes the command exit with status 2.

The command writes to `output.csv` in the current directory. It truncates the file and writes the header line, then runs every pair of `n` and `c`.

Each pair draws random graphs and keeps only the connected ones. Disconnected graphs are drawn again and do not count towards `M`. Dijkstra's algorithm runs from vertex 0 on each graph that is kept.

For each pair the command prints the averages to standard output and appends one row to `output.csv`. The row holds the mean, population variance, minimum and maximum of six measures:

- running time in seconds
- heap links
- swaps during decrease-priority
- extracts
- edge count
- decrease-priority calls

If `output.csv` cannot be opened, the command exits with status 1.

Example:

```
binodijkstra M=10 n=200,400 c=2
```

## Library use

```python
import random

from binodijkstra.binomial_heap import BinomialHeap
from binodijkstra.graph import generate
from binodijkstra.dijkstra import dijkstra

heap = BinomialHeap()
heap.insert(3, 2.5)
heap.insert(7, 1.0)
heap.decrease_priority(3, 0.5)
print(heap.min_key())      # 3
print(heap.extract_min())  # 3
print(len(heap), 7 in heap)

graph, edge_count = generate(100, 2.0, 1000.0, random.Random(1))
distances, predecessors = dijkstra(graph, 0, BinomialHeap())
```

### `BinomialHeap`

The heap supports these operations:

- `insert`
- `min_key`
- `extract_min`, which returns the removed key
- `priority`
- `decrease_priority`
- `meld`
- `len()`, truth testing and `in`

Its counters are `link_count`, `swap_count`, `extract_count`, `insert_count` and `decrease_count`. `reset_counters()` sets them all back to zero.

Errors are reported as follows:

- An empty heap raises `IndexError` from `min_key` and `extract_min`.
- An unknown key raises `KeyError`.
- Raising a priority through `decrease_priority` raises `ValueError`.

### `generate` and `dijkstra`

`generate` returns adjacency lists of `Edge(target, weight)` entries together with the edge count.

`dijkstra` returns a list of distances and a list of predecessors. An unreachable vertex has distance `math.inf` and predecessor `None`. The source vertex is its own predecessor.

### `binodijkstra.experiments`

- `is_connected` tells whether every vertex is reachable from vertex 0.
- `summarize` returns a `Summary` with the mean, variance, minimum and maximum of a non-empty sample.
- `run` returns an `ExperimentResult` for one configuration. `ExperimentResult.csv_row()` gives that result as a list of CSV fields.
- `write_csv_header` truncates a file and writes the header line.
- `append_result` appends one result row.