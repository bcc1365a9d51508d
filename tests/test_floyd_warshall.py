import random

import pytest

from shortpaths.floyd_warshall import floyd_warshall, parallel_floyd_warshall
from shortpaths.graph import INF, to_matrix


def _random_matrix(seed, nodes, density=0.3):
    rng = random.Random(seed)
    graph = [[] for _ in range(nodes)]
    for u in range(nodes):
        for v in range(nodes):
            if u != v and rng.random() < density:
                graph[u].append((v, rng.randint(1, 50)))
    return to_matrix(graph, nodes)


@pytest.mark.parametrize(
    "algorithm",
    [floyd_warshall, lambda matrix: parallel_floyd_warshall(matrix, 2)],
)
def test_worked_example(algorithm):
    matrix = [[0, 4, 1], [INF, 0, INF], [INF, 2, 0]]
    assert algorithm(matrix) == [[0, 3, 1], [INF, 0, INF], [INF, 2, 0]]


def test_input_is_not_modified():
    matrix = _random_matrix(1, 8)
    snapshot = [list(row) for row in matrix]
    floyd_warshall(matrix)
    parallel_floyd_warshall(matrix, 3)
    assert matrix == snapshot


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("threads", [1, 2, 4])
def test_parallel_matches_sequential(seed, threads):
    matrix = _random_matrix(seed, 12)
    assert parallel_floyd_warshall(matrix, threads) == floyd_warshall(matrix)


@pytest.mark.parametrize("seed", range(4))
def test_triangle_inequality_and_bounds(seed):
    matrix = _random_matrix(seed, 10)
    dist = floyd_warshall(matrix)
    size = len(dist)
    for i in range(size):
        assert dist[i][i] == 0
        for j in range(size):
            assert dist[i][j] <= matrix[i][j]
            for k in range(size):
                if dist[i][k] != INF and dist[k][j] != INF:
                    assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [2]])
    with pytest.raises(ValueError):
        parallel_floyd_warshall([[0, 1]], 2)


def test_invalid_thread_count():
    with pytest.raises(ValueError):
        parallel_floyd_warshall([[0]], 0)