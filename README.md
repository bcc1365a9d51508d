# shortpaths

Shortest path algorithms on weighted directed graphs. Each comes in a
sequential form and a threaded form (built on
`concurrent.futures.ThreadPoolExecutor`) that returns the same result.

| Code | Algorithm              | Module                      | Functions                                                     |
|------|------------------------|-----------------------------|---------------------------------------------------------------|
| `B`  | Bellman-Ford           | `shortpaths.bellman_ford`   | `bellman_ford`, `parallel_bellman_ford`                       |
| `D`  | Dijkstra               | `shortpaths.dijkstra`       | `dijkstra`, `parallel_dijkstra`                               |
| `S`  | Delta-stepping         | `shortpaths.delta_stepping` | `delta_stepping`, `parallel_delta_stepping`                   |
| `BD` | Bidirectional Dijkstra | `shortpaths.bidirectional`  | `bidirectional_dijkstra`, `parallel_bidirectional_dijkstra`   |
| `F`  | Floyd-Warshall         | `shortpaths.floyd_warshall` | `floyd_warshall`, `parallel_floyd_warshall`                   |
| `J`  | Johnson's algorithm    | `shortpaths.johnsons`       | `johnsons`, `parallel_johnsons`                               |

Unreachable nodes get the distance `math.inf`, which the command line shows
as `INF`. Every result is a distance, never the path itself.

## Installation

```
pip install .
```

## Command line

```
shortpaths <algorithm> <num_nodes> <num_threads>
```

`<algorithm>` is one of the codes in the table above. The command generates
a random graph with `num_nodes` nodes and edge weights from 1 to 50, writes
it to `graph.txt` in the current directory and loads it back. It then runs
the chosen algorithm first sequentially and then with `num_threads` workers,
and prints the distances, the time each run took and whether the two runs
returned the same result.

The source node is `0`. For `BD` the target is chosen at random.
Delta-stepping uses a bucket width of 2. The command needs at least two
nodes and at least one thread. With the wrong number of arguments, or
arguments that are not integers, it prints a usage line and exits with
status 1.

```
shortpaths D 50 4
shortpaths F 30 2
```

## Library use

A graph is an adjacency list: `graph[u]` is a list of `(v, weight)` pairs.

```python
from shortpaths.dijkstra import dijkstra
from shortpaths.bellman_ford import bellman_ford
from shortpaths.bidirectional import bidirectional_dijkstra
from shortpaths.delta_stepping import delta_stepping
from shortpaths.floyd_warshall import floyd_warshall
from shortpaths.graph import to_matrix, to_edge_list
from shortpaths.johnsons import johnsons

graph = [[(1, 4), (2, 1)], [(3, 1)], [(1, 2)], []]

dijkstra(graph, 0)                    # [0, 3, 1, 4]
bellman_ford(graph, 0)                # [0, 3, 1, 4]
delta_stepping(graph, 0, 2)           # [0, 3, 1, 4]
bidirectional_dijkstra(graph, 0, 3)   # 4
floyd_warshall(to_matrix(graph, 4))   # all-pairs matrix, new list
johnsons(4, to_edge_list(graph))      # the same matrix
```

The threaded forms take the same arguments plus `num_threads`, which must be
at least 1.

Points to know:

- `bellman_ford`, `parallel_bellman_ford`, `johnsons` and
  `parallel_johnsons` raise `shortpaths.graph.NegativeCycleError` (a
  `ValueError`) when a negative weight cycle is reachable; for Bellman-Ford
  its `distances` attribute holds the distances found so far.
- `delta_stepping` needs non-negative weights and a positive `delta`, and
  raises `ValueError` otherwise.
- `floyd_warshall` takes a square matrix and leaves it untouched.
- A source or target outside the graph raises `ValueError`.

### Graph helpers

`shortpaths.graph` provides:

- `generate_graph(nodes, path, non_negative=False, sparsity_factor=2, rng=None)`
  writes a random graph without self-loops or repeated edges and returns its
  edges. Weights are 1 to 50 when `non_negative` is true, otherwise -50 to 49.
- `load_graph(path)` reads such a file into an adjacency list. The file holds
  the node count on its first line, then one `u v weight` edge per line.
- `to_matrix(graph, nodes)` builds an adjacency matrix with 0 on the diagonal
  and `INF` where there is no edge.
- `to_edge_list(graph)` returns `(u, v, weight)` triples.
- `format_graph(graph)` renders the adjacency list as text.

## Tests

```
pip install .[test]
pytest
```