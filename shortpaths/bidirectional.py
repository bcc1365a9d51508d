"""Point-to-point shortest path with bidirectional Dijkstra search."""

from __future__ import annotations

import heapq
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from .graph import INF


def _check_node(graph, node, role):
    if not 0 <= node < len(graph):
        raise ValueError(f"{role} {node} is outside the graph")


def _check_threads(num_threads):
    if num_threads < 1:
        raise ValueError("num_threads must be at least 1")


def _reverse(graph):
    """Adjacency list with every edge turned around."""
    reverse = [[] for _ in graph]
    for u, adjacent in enumerate(graph):
        for v, weight in adjacent:
            reverse[v].append((u, weight))
    return reverse


@dataclass
class _Frontier:
    """One direction of the search: its distances, settled nodes and queue."""

    adjacency: list
    origin: int
    dist: list = field(init=False)
    visited: list = field(init=False)
    heap: list = field(init=False)

    def __post_init__(self):
        size = len(self.adjacency)
        self.dist = [INF] * size
        self.dist[self.origin] = 0
        self.visited = [False] * size
        self.heap = [(0, self.origin)]

    @property
    def lower_bound(self):
        return self.heap[0][0]


class _Meeting:
    """The best path length found so far where the two searches meet."""

    def __init__(self):
        self.best = INF
        self.lock = threading.RLock()

    def offer(self, length):
        with self.lock:
            if length < self.best:
                self.best = length


def _advance(front, other, meeting):
    """Settle the next node of ``front`` and relax its edges."""
    if not front.heap:
        return
    _, u = heapq.heappop(front.heap)
    with meeting.lock:
        if front.visited[u]:
            return
        front.visited[u] = True
        if other.visited[u]:
            meeting.offer(front.dist[u] + other.dist[u])

    du = front.dist[u]
    for v, weight in front.adjacency[u]:
        candidate = du + weight
        if other.visited[v]:
            meeting.offer(candidate + other.dist[v])
        if not front.visited[v] and candidate < front.dist[v]:
            front.dist[v] = candidate
            heapq.heappush(front.heap, (candidate, v))


def bidirectional_dijkstra(graph, source, target):
    """Length of the shortest path from ``source`` to ``target``, or INF if none."""
    _check_node(graph, source, "source")
    _check_node(graph, target, "target")
    forward = _Frontier(graph, source)
    backward = _Frontier(_reverse(graph), target)
    meeting = _Meeting()

    while forward.heap or backward.heap:
        _advance(forward, backward, meeting)
        _advance(backward, forward, meeting)
    return meeting.best


def parallel_bidirectional_dijkstra(graph, source, target, num_threads):
    """Bidirectional Dijkstra running the forward and backward steps concurrently.

    The search stops as soon as the sum of the two queues' smallest keys can
    no longer improve on the best meeting found.
    """
    _check_node(graph, source, "source")
    _check_node(graph, target, "target")
    _check_threads(num_threads)
    forward = _Frontier(graph, source)
    backward = _Frontier(_reverse(graph), target)
    meeting = _Meeting()

    with ThreadPoolExecutor(max_workers=min(2, num_threads)) as pool:
        while forward.heap and backward.heap:
            if meeting.best <= forward.lower_bound + backward.lower_bound:
                break
            steps = [
                pool.submit(_advance, forward, backward, meeting),
                pool.submit(_advance, backward, forward, meeting),
            ]
            for step in steps:
                step.result()
    return meeting.best