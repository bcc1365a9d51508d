"""All-pairs shortest paths with the Floyd-Warshall algorithm."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import partial

from .graph import INF


def _square_copy(matrix):
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("distance matrix must be square")
    return rows


def floyd_warshall(matrix):
    """Return a new matrix of shortest distances; ``matrix`` is left untouched."""
    dist = _square_copy(matrix)
    for k, row_k in enumerate(dist):
        for row_i in dist:
            if row_i[k] == INF:
                continue
            for j, dkj in enumerate(row_k):
                if dkj != INF and row_i[k] + dkj < row_i[j]:
                    row_i[j] = row_i[k] + dkj
    return dist


def _relax_rows(dist, k, row_k, stripe):
    for i in stripe:
        row_i = dist[i]
        dik = row_i[k]
        if dik == INF:
            continue
        for j, dkj in enumerate(row_k):
            if dkj != INF and dik + dkj < row_i[j]:
                row_i[j] = dik + dkj


def parallel_floyd_warshall(matrix, num_threads):
    """Floyd-Warshall with the rows of each step shared among worker threads."""
    if num_threads < 1:
        raise ValueError("num_threads must be at least 1")
    dist = _square_copy(matrix)
    size = len(dist)
    stripes = [range(t, size, num_threads) for t in range(num_threads)]

    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        for k in range(size):
            row_k = tuple(dist[k])
            list(pool.map(partial(_relax_rows, dist, k, row_k), stripes))
    return dist