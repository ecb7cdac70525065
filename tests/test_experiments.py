import random
import statistics

import pytest

from binodijkstra.experiments import (
    CSV_HEADER,
    ExperimentResult,
    append_result,
    is_connected,
    run,
    summarize,
    write_csv_header,
)
from binodijkstra.graph import Edge


def _undirected(n, pairs):
    graph = [[] for _ in range(n)]
    for a, b in pairs:
        graph[a].append(Edge(b, 1.0))
        graph[b].append(Edge(a, 1.0))
    return graph


def test_path_graph_is_connected():
    assert is_connected(_undirected(4, [(0, 1), (1, 2), (2, 3)])) is True


def test_two_components_not_connected():
    assert is_connected(_undirected(4, [(0, 1), (2, 3)])) is False


def test_single_vertex_is_connected():
    assert is_connected([[]]) is True


def test_summarize_matches_statistics():
    values = [3.0, 1.0, 4.0, 1.0, 5.0, 9.0]
    summary = summarize(values)
    assert summary.mean == pytest.approx(statistics.fmean(values))
    assert summary.variance == pytest.approx(statistics.pvariance(values))
    assert summary.minimum == min(values)
    assert summary.maximum == max(values)


def test_summarize_constant_sample_has_zero_variance():
    summary = summarize([7, 7, 7])
    assert summary.variance == 0.0
    assert summary.mean == 7.0


def test_summarize_empty_raises():
    with pytest.raises(ValueError):
        summarize([])


def test_run_on_complete_graphs():
    # with n=4 and c=3 the edge probability exceeds one: every graph is K4
    result = run(4, 3, 3, 10.0, random.Random(1))
    assert isinstance(result, ExperimentResult)
    assert result.trials == 3
    assert result.edges.mean == 6.0
    assert result.edges.minimum == 6 and result.edges.maximum == 6
    assert result.extracts.mean == 4.0
    assert result.time.minimum <= result.time.mean <= result.time.maximum
    assert result.decreases.minimum >= 0


def test_run_is_deterministic_for_seed():
    first = run(12, 3, 4, 100.0, random.Random(42))
    second = run(12, 3, 4, 100.0, random.Random(42))
    assert first.edges == second.edges
    assert first.links == second.links
    assert first.decreases == second.decreases


@pytest.mark.parametrize("trials", [0, -1])
def test_run_rejects_no_trials(trials):
    with pytest.raises(ValueError):
        run(4, 3, trials, 10.0, random.Random(0))


def test_csv_row_layout():
    result = run(4, 3, 2, 10.0, random.Random(3))
    row = result.csv_row()
    assert len(row) == len(CSV_HEADER)
    assert row[:3] == ["4", "3", "2"]
    assert row[CSV_HEADER.index("avg_edges")] == "6"
    assert row[CSV_HEADER.index("min_edges")] == "6"


def test_header_then_append(tmp_path):
    path = tmp_path / "out.csv"
    path.write_text("stale content\nmore\n")
    write_csv_header(path)
    result = run(4, 3, 2, 10.0, random.Random(5))
    append_result(path, result)
    append_result(path, result)
    lines = path.read_text().splitlines()
    assert lines[0] == ",".join(CSV_HEADER)
    assert lines[0].startswith("n,c,M,avg_time")
    assert len(lines) == 3
    assert lines[1] == ",".join(result.csv_row())