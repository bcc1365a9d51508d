"""Single-source shortest paths with the Bellman-Ford algorithm."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import partial

from .graph import INF, NegativeCycleError


def _check_source(graph, source):
    if not 0 <= source < len(graph):
        raise ValueError(f"source {source} is outside the graph")


def _check_threads(num_threads):
    if num_threads < 1:
        raise ValueError("num_threads must be at least 1")


def _stripe_violates(graph, dist, stripe):
    """Whether any edge leaving the nodes in ``stripe`` can still be relaxed."""
    return any(
        dist[u] != INF and dist[u] + weight < dist[v]
        for u in stripe
        for v, weight in graph[u]
    )


def _relax_stripe(graph, dist, stripe):
    """Best candidate distance per target reachable from the nodes in ``stripe``."""
    best = {}
    for u in stripe:
        du = dist[u]
        if du == INF:
            continue
        for v, weight in graph[u]:
            candidate = du + weight
            if candidate < best.get(v, INF):
                best[v] = candidate
    return best


def bellman_ford(graph, source):
    """Return distances from ``source``; raise NegativeCycleError on a negative cycle."""
    _check_source(graph, source)
    nodes = len(graph)
    dist = [INF] * nodes
    dist[source] = 0

    for _ in range(nodes - 1):
        changed = False
        for u, adjacent in enumerate(graph):
            for v, weight in adjacent:
                if dist[u] != INF and dist[u] + weight < dist[v]:
                    dist[v] = dist[u] + weight
                    changed = True
        if not changed:
            break

    if _stripe_violates(graph, dist, range(nodes)):
        raise NegativeCycleError(dist)
    return dist


def parallel_bellman_ford(graph, source, num_threads):
    """Bellman-Ford with each round's relaxations spread over worker threads.

    Every round relaxes from the previous round's distances, so the result
    does not depend on how the work is divided.
    """
    _check_source(graph, source)
    _check_threads(num_threads)
    nodes = len(graph)
    stripes = [range(t, nodes, num_threads) for t in range(num_threads)]

    dist = [INF] * nodes
    dist[source] = 0
    new_dist = list(dist)

    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        for _ in range(nodes - 1):
            updated = False
            for best in pool.map(partial(_relax_stripe, graph, dist), stripes):
                for v, candidate in best.items():
                    if candidate < new_dist[v]:
                        new_dist[v] = candidate
                        updated = True
            dist = list(new_dist)
            if not updated:
                break

        if any(pool.map(partial(_stripe_violates, graph, dist), stripes)):
            raise NegativeCycleError(dist)
    return dist