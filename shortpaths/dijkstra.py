"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
from concurrent.futures import ThreadPoolExecutor
from functools import partial

from .graph import INF


def _check_source(graph, source):
    if not 0 <= source < len(graph):
        raise ValueError(f"source {source} is outside the graph")


def dijkstra(graph, source):
    """Return distances from ``source`` using a binary-heap priority queue."""
    _check_source(graph, source)
    dist = [INF] * len(graph)
    dist[source] = 0
    heap = [(0, source)]

    while heap:
        current, u = heapq.heappop(heap)
        if current > dist[u]:
            continue
        for v, weight in graph[u]:
            candidate = dist[u] + weight
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return dist


def _closest_in_stripe(dist, visited, stripe):
    """The unvisited, reachable node with the smallest distance in ``stripe``."""
    best = None
    for v in stripe:
        if not visited[v] and dist[v] < INF and (best is None or dist[v] < dist[best]):
            best = v
    return best


def parallel_dijkstra(graph, source, num_threads):
    """Array-based Dijkstra whose minimum search is shared among worker threads."""
    _check_source(graph, source)
    if num_threads < 1:
        raise ValueError("num_threads must be at least 1")
    nodes = len(graph)
    stripes = [range(t, nodes, num_threads) for t in range(num_threads)]

    dist = [INF] * nodes
    visited = [False] * nodes
    dist[source] = 0

    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        for _ in range(nodes):
            search = partial(_closest_in_stripe, dist, visited)
            candidates = [v for v in pool.map(search, stripes) if v is not None]
            if not candidates:
                break
            u = min(candidates, key=lambda v: (dist[v], v))
            visited[u] = True
            for v, weight in graph[u]:
                candidate = dist[u] + weight
                if not visited[v] and candidate < dist[v]:
                    dist[v] = candidate
    return dist