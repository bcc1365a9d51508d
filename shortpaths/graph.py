"""Graph construction, file input/output and representation conversions."""

from __future__ import annotations

import math
import random
from os import PathLike
from typing import Union

INF = math.inf

Edge = tuple[int, int, int]
AdjacencyList = list[list[tuple[int, int]]]
Matrix = list[list[Union[int, float]]]


class NegativeCycleError(ValueError):
    """Raised when a negative weight cycle makes shortest distances undefined."""

    def __init__(self, distances=None):
        super().__init__("Graph contains a negative weight cycle")
        self.distances = distances


def generate_graph(
    nodes: int,
    path: Union[str, PathLike],
    non_negative: bool = False,
    sparsity_factor: int = 2,
    rng: random.Random | None = None,
) -> list[Edge]:
    """Write a random directed graph to ``path`` and return its edges.

    The file holds the node count on its first line, then one ``u v weight``
    line per edge. Self-loops and repeated edges are never produced.
    """
    if nodes < 2:
        raise ValueError("a graph without self-loops needs at least two nodes")
    rng = rng if rng is not None else random.Random()

    max_possible = nodes * (nodes - 1)
    max_allowed = max_possible // max(1, sparsity_factor)
    min_edges = 1
    extra = rng.randrange(max_allowed - min_edges) if max_allowed > min_edges else 0
    num_edges = min_edges + extra

    seen: set[tuple[int, int]] = set()
    edges: list[Edge] = []
    while len(edges) < num_edges:
        u = rng.randrange(nodes)
        v = rng.randrange(nodes)
        if u == v or (u, v) in seen:
            continue
        seen.add((u, v))
        weight = rng.randint(1, 50) if non_negative else rng.randrange(100) - 50
        edges.append((u, v, weight))

    with open(path, "w", encoding="ascii") as out:
        out.write(f"{nodes}\n")
        out.writelines(f"{u} {v} {w}\n" for u, v, w in edges)
    return edges


def load_graph(path: Union[str, PathLike]) -> AdjacencyList:
    """Read a graph file into an adjacency list of ``(target, weight)`` pairs.

    Reading stops at the first token that is not an integer or at an
    incomplete trailing edge.
    """
    with open(path, encoding="ascii") as source:
        tokens = source.read().split()

    values: list[int] = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            break

    if not values:
        raise ValueError(f"{path}: missing node count")
    nodes, *rest = values
    if nodes < 0:
        raise ValueError(f"{path}: negative node count {nodes}")

    graph: AdjacencyList = [[] for _ in range(nodes)]
    numbers = iter(rest)
    for u, v, weight in zip(numbers, numbers, numbers):
        if not (0 <= u < nodes and 0 <= v < nodes):
            raise ValueError(f"{path}: edge {u} -> {v} refers to a missing node")
        graph[u].append((v, weight))
    return graph


def to_matrix(graph: AdjacencyList, nodes: int) -> Matrix:
    """Build an adjacency matrix: 0 on the diagonal, INF where there is no edge."""
    matrix: Matrix = [[0 if i == j else INF for j in range(nodes)] for i in range(nodes)]
    for u, adjacent in enumerate(graph[:nodes]):
        for v, weight in adjacent:
            matrix[u][v] = weight
    return matrix


def to_edge_list(graph: AdjacencyList) -> list[Edge]:
    """Flatten an adjacency list into ``(source, target, weight)`` triples."""
    return [(u, v, weight) for u, adjacent in enumerate(graph) for v, weight in adjacent]


def format_graph(graph: AdjacencyList) -> str:
    """Render an adjacency list, one ``Node i -> (v, w) ...`` line per node."""
    lines = (
        "Node {} -> {}".format(u, "".join(f"({v}, {w}) " for v, w in adjacent))
        for u, adjacent in enumerate(graph)
    )
    return "".join(line + "\n" for line in lines)