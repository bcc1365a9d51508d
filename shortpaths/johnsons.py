"""All-pairs shortest paths with Johnson's reweighting algorithm."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import partial

from .bellman_ford import bellman_ford, parallel_bellman_ford
from .graph import INF


def _check_edges(nodes, edges):
    if nodes < 0:
        raise ValueError("node count cannot be negative")
    for u, v, _ in edges:
        if not (0 <= u < nodes and 0 <= v < nodes):
            raise ValueError(f"edge {u} -> {v} refers to a missing node")


def _potentials(nodes, edges, solve):
    """Bellman-Ford potentials from a virtual node joined to every node by a 0 edge."""
    graph = [[] for _ in range(nodes + 1)]
    for u, v, weight in edges:
        graph[u].append((v, weight))
    graph[nodes] = [(v, 0) for v in range(nodes)]
    return solve(graph, nodes)[:nodes]


def _shortest_row(adjacency, potentials, source):
    """Distances from ``source`` on the reweighted graph, mapped back to real weights."""
    size = len(adjacency)
    dist = [INF] * size
    dist[source] = 0
    visited = [False] * size

    for _ in range(size):
        unvisited = (v for v in range(size) if not visited[v])
        u = min(unvisited, key=dist.__getitem__, default=None)
        if u is None or dist[u] == INF:
            break
        visited[u] = True
        for v, weight in adjacency[u]:
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight

    return [
        INF if d == INF else d - potentials[source] + potentials[i]
        for i, d in enumerate(dist)
    ]


def johnsons(nodes, edges):
    """Return the all-pairs distance matrix; raise NegativeCycleError on a negative cycle.

    Where the same directed edge is listed twice, the later weight is used.
    """
    _check_edges(nodes, edges)
    h = _potentials(nodes, edges, bellman_ford)

    reweighted = [{} for _ in range(nodes)]
    for u, v, weight in edges:
        reweighted[u][v] = weight + h[u] - h[v]
    adjacency = [list(row.items()) for row in reweighted]

    return [_shortest_row(adjacency, h, source) for source in range(nodes)]


def parallel_johnsons(nodes, edges, num_threads):
    """Johnson's algorithm with the per-source searches spread over worker threads."""
    if num_threads < 1:
        raise ValueError("num_threads must be at least 1")
    _check_edges(nodes, edges)
    h = _potentials(
        nodes, edges, lambda graph, source: parallel_bellman_ford(graph, source, num_threads)
    )

    adjacency = [[] for _ in range(nodes)]
    for u, v, weight in edges:
        adjacency[u].append((v, weight + h[u] - h[v]))

    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        return list(pool.map(partial(_shortest_row, adjacency, h), range(nodes)))