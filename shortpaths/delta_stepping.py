"""Single-source shortest paths with the delta-stepping bucket algorithm."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import partial

from .graph import INF


def _check(graph, source, delta):
    if not 0 <= source < len(graph):
        raise ValueError(f"source {source} is outside the graph")
    if delta < 1:
        raise ValueError("delta must be a positive integer")
    if any(weight < 0 for adjacent in graph for _, weight in adjacent):
        raise ValueError("delta-stepping needs non-negative edge weights")


def _file(buckets, node, distance, delta):
    buckets.setdefault(distance // delta, set()).add(node)


def delta_stepping(graph, source, delta):
    """Return distances from ``source``, grouping tentative distances in buckets of width ``delta``."""
    _check(graph, source, delta)
    dist = [INF] * len(graph)
    dist[source] = 0
    buckets = {0: {source}}

    def relax(u, limit):
        for v, weight in graph[u]:
            if weight <= limit and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                _file(buckets, v, dist[v], delta)

    while buckets:
        request = sorted(buckets.pop(min(buckets)))
        for u in request:
            relax(u, delta)
        for u in request:
            relax(u, INF)
    return dist


def _light_candidates(graph, dist, delta, stripe):
    """Best distances reachable over light edges from the nodes in ``stripe``."""
    best = {}
    for u in stripe:
        du = dist[u]
        for v, weight in graph[u]:
            if weight <= delta and du + weight < best.get(v, dist[v]):
                best[v] = du + weight
    return best


def parallel_delta_stepping(graph, source, delta, num_threads):
    """Delta-stepping with each bucket's light edges relaxed by worker threads."""
    _check(graph, source, delta)
    if num_threads < 1:
        raise ValueError("num_threads must be at least 1")
    dist = [INF] * len(graph)
    dist[source] = 0
    buckets = {0: {source}}

    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        while buckets:
            request = sorted(buckets.pop(min(buckets)))
            stripes = [request[t::num_threads] for t in range(num_threads)]

            improved = set()
            light = partial(_light_candidates, graph, dist, delta)
            for best in pool.map(light, stripes):
                for v, candidate in best.items():
                    if candidate < dist[v]:
                        dist[v] = candidate
                        improved.add(v)
            for v in improved:
                _file(buckets, v, dist[v], delta)

            for u in request:
                for v, weight in graph[u]:
                    if weight > delta and dist[u] + weight < dist[v]:
                        dist[v] = dist[u] + weight
                        _file(buckets, v, dist[v], delta)
    return dist