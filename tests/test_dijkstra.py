import random

import pytest

from shortpaths.dijkstra import dijkstra, parallel_dijkstra
from shortpaths.graph import INF


def _random_graph(seed, nodes, density=0.3):
    rng = random.Random(seed)
    graph = [[] for _ in range(nodes)]
    for u in range(nodes):
        for v in range(nodes):
            if u != v and rng.random() < density:
                graph[u].append((v, rng.randint(1, 50)))
    return graph


def test_worked_example():
    graph = [[(1, 4), (2, 1)], [], [(1, 2)]]
    assert dijkstra(graph, 0) == [0, 3, 1]
    assert parallel_dijkstra(graph, 0, 2) == [0, 3, 1]


def test_unreachable_node_is_infinite():
    graph = [[(1, 2)], [], [(0, 1)]]
    for dist in (dijkstra(graph, 0), parallel_dijkstra(graph, 0, 2)):
        assert dist[2] == INF
        assert dist[1] == 2


@pytest.mark.parametrize("seed", range(6))
@pytest.mark.parametrize("threads", [1, 3, 5])
def test_parallel_matches_sequential(seed, threads):
    graph = _random_graph(seed, 14)
    for source in (0, 7):
        assert parallel_dijkstra(graph, source, threads) == dijkstra(graph, source)


@pytest.mark.parametrize("seed", range(5))
def test_distances_are_tight(seed):
    graph = _random_graph(seed, 16)
    dist = dijkstra(graph, 3)
    assert dist[3] == 0
    for u, adjacent in enumerate(graph):
        if dist[u] == INF:
            continue
        for v, w in adjacent:
            assert dist[v] <= dist[u] + w
    for v, d in enumerate(dist):
        if v != 3 and d != INF:
            assert any(
                dist[u] + w == d for u, adjacent in enumerate(graph) for t, w in adjacent if t == v
            )


def test_invalid_thread_count():
    with pytest.raises(ValueError):
        parallel_dijkstra([[]], 0, 0)


def test_source_out_of_range_sequential():
    with pytest.raises(ValueError):
        dijkstra([[]], 1)


def test_source_out_of_range_parallel():
    with pytest.raises(ValueError):
        parallel_dijkstra([[]], 1, 2)