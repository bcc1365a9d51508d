"""Command line driver comparing sequential and parallel shortest-path solvers."""

from __future__ import annotations

import random
import sys
import time

from .bellman_ford import bellman_ford, parallel_bellman_ford
from .bidirectional import bidirectional_dijkstra, parallel_bidirectional_dijkstra
from .delta_stepping import delta_stepping, parallel_delta_stepping
from .dijkstra import dijkstra, parallel_dijkstra
from .floyd_warshall import floyd_warshall, parallel_floyd_warshall
from .graph import (
    INF,
    NegativeCycleError,
    generate_graph,
    load_graph,
    to_edge_list,
    to_matrix,
)
from .johnsons import johnsons, parallel_johnsons

GRAPH_FILE = "graph.txt"
SPARSITY_FACTOR = 5
DELTA = 2

_SAME = "Parallel and Sequential versions return the same result"
_DIFFERENT = "Parallel and Sequential versions don't return the same result"


def check_equality(a, b):
    """Describe whether two distance lists agree, naming the first mismatch."""
    if len(a) != len(b):
        return f"Vectors are of different sizes. {_DIFFERENT}."
    for index, (left, right) in enumerate(zip(a, b)):
        if left != right:
            return f"{_DIFFERENT}\nMismatch at index:{index}"
    return _SAME


def check_2d_equality(a, b):
    """Describe whether two distance matrices agree, naming the first mismatch."""
    if len(a) != len(b):
        return f"2D vectors are of different sizes. {_DIFFERENT}."
    for i, (row_a, row_b) in enumerate(zip(a, b)):
        if len(row_a) != len(row_b):
            return f"Row {i} has different sizes in the two 2D vectors.\n{_DIFFERENT}"
        for j, (left, right) in enumerate(zip(row_a, row_b)):
            if left != right:
                return f"Mismatch found at row {i}, column {j}.\n{_DIFFERENT}"
    return _SAME


def _show(value):
    return "INF" if value == INF else str(value)


def _node_lines(dist, separator):
    return "".join(f"Node {i}{separator}{_show(d)}\n" for i, d in enumerate(dist))


def format_distances(dist, source):
    """Render single-source distances, one ``Node i -> d`` line per node."""
    return f"Shortest distances from source node {source}:\n" + _node_lines(dist, " -> ")


def format_matrix(matrix):
    """Render an all-pairs distance matrix with tab-separated cells."""
    rows = "".join("".join(f"{_show(d)}\t" for d in row) + "\n" for row in matrix)
    return "Shortest distances between every pair of vertices:\n" + rows


def _format_johnsons(matrix, mode):
    rows = "".join("".join(f"{_show(d)} " for d in row) + "\n" for row in matrix)
    return f"Johnson\u2019s Algorithm ({mode}) - Shortest Distances:\n" + rows


def _timed(solve, *args):
    start = time.perf_counter()
    result = solve(*args)
    return result, time.perf_counter() - start


def _report_time(elapsed):
    print(f"Time Taken:{elapsed:.8f}")


def _bellman_ford_run(solve, *args):
    try:
        dist = solve(*args)
    except NegativeCycleError as error:
        print("Graph contains a negative weight cycle!")
        return error.distances
    print(format_distances(dist, args[1]), end="")
    return dist


def _johnsons_run(solve, mode, *args):
    try:
        matrix = solve(*args)
    except NegativeCycleError:
        print("Graph contains negative weight cycle!", file=sys.stderr)
        return []
    print(_format_johnsons(matrix, mode), end="")
    return matrix


def _run_bellman_ford(graph, source, target, num_threads):
    print("Running Bellman-Ford Algorithm Sequential")
    first, elapsed = _timed(_bellman_ford_run, bellman_ford, graph, source)
    _report_time(elapsed)
    print("Running Bellman-Ford Algorithm Parallel")
    second, elapsed = _timed(
        _bellman_ford_run, parallel_bellman_ford, graph, source, num_threads
    )
    print(check_equality(first, second))
    _report_time(elapsed)


def _run_floyd_warshall(graph, source, target, num_threads):
    print("Running Floyd-Warshall Algorithm Sequential")
    matrix = to_matrix(graph, len(graph))
    first, elapsed = _timed(floyd_warshall, matrix)
    print(format_matrix(first), end="")
    _report_time(elapsed)
    print("Running Floyd-Warshall Algorithm Parallel")
    second, elapsed = _timed(parallel_floyd_warshall, matrix, num_threads)
    print(format_matrix(second), end="")
    print(check_2d_equality(first, second))
    _report_time(elapsed)


def _run_johnsons(graph, source, target, num_threads):
    print("Running Johnsons Algorithm Sequential")
    edges = to_edge_list(graph)
    nodes = len(graph)
    first, elapsed = _timed(_johnsons_run, johnsons, "Sequential", nodes, edges)
    _report_time(elapsed)
    print("Running Johnsons Algorithm Parallel")
    second, elapsed = _timed(
        _johnsons_run, parallel_johnsons, "Parallel", nodes, edges, num_threads
    )
    print(check_2d_equality(first, second))
    _report_time(elapsed)


def _run_dijkstra(graph, source, target, num_threads):
    print("Running Dijkstra Algorithm Sequential")
    first, elapsed = _timed(dijkstra, graph, source)
    print(f"Sequential Dijkstra shortest distances from node {source}:")
    print(_node_lines(first, " -> "), end="")
    _report_time(elapsed)
    print("Running Dijkstra Algorithm Parallel")
    second, elapsed = _timed(parallel_dijkstra, graph, source, num_threads)
    print(check_equality(first, second))
    _report_time(elapsed)


def _path_report(best, source, target):
    if best == INF:
        return f"No path found between {source} and {target}"
    return f"Shortest path between {source} and {target}: {best}"


def _run_bidirectional(graph, source, target, num_threads):
    print("Running Bidirectional Dijkstra Algorithm Sequential")
    first, elapsed = _timed(bidirectional_dijkstra, graph, source, target)
    print(_path_report(first, source, target))
    _report_time(elapsed)
    print("Running Bidirectional Dijkstra Algorithm Parallel")
    second, elapsed = _timed(
        parallel_bidirectional_dijkstra, graph, source, target, num_threads
    )
    print(_path_report(second, source, target))
    print(_SAME if first == second else _DIFFERENT)
    _report_time(elapsed)


def _run_delta_stepping(graph, source, target, num_threads):
    header = f"Shortest distances from source node {source}:\n"
    print("Running Delta-Stepping Sequential")
    first, elapsed = _timed(delta_stepping, graph, source, DELTA)
    print(header + _node_lines(first, ": "), end="")
    print(f"Time Taken: {elapsed:.8f}")
    print("Running Delta-Stepping Parallel")
    second, elapsed = _timed(parallel_delta_stepping, graph, source, DELTA, num_threads)
    print(header + _node_lines(second, ": "), end="")
    print(check_equality(first, second))
    print(f"Time Taken: {elapsed:.8f}")


_RUNNERS = {
    "B": _run_bellman_ford,
    "F": _run_floyd_warshall,
    "J": _run_johnsons,
    "D": _run_dijkstra,
    "BD": _run_bidirectional,
    "S": _run_delta_stepping,
}


def main(argv=None):
    """Generate a random graph, run one algorithm both ways and compare them."""
    args = sys.argv[1:] if argv is None else list(argv)
    usage = "Usage: shortpaths D/B/F/J/BD/S <num_nodes> <num_threads>"
    if len(args) != 3:
        print(usage, file=sys.stderr)
        return 1
    algorithm, nodes_text, threads_text = args
    try:
        num_nodes = int(nodes_text)
        num_threads = int(threads_text)
    except ValueError:
        print(usage, file=sys.stderr)
        return 1
    if num_threads < 1:
        print("num_threads must be at least 1", file=sys.stderr)
        return 1

    rng = random.Random()
    try:
        generate_graph(num_nodes, GRAPH_FILE, True, SPARSITY_FACTOR, rng)
        graph = load_graph(GRAPH_FILE)
    except (OSError, ValueError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    source = 0
    target = rng.randrange(num_nodes)
    runner = _RUNNERS.get(algorithm)
    if runner is not None:
        runner(graph, source, target, num_threads)
    return 0


if __name__ == "__main__":
    sys.exit(main())