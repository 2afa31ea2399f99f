"""Path algorithms over any `GraphADT` backend."""

from railgraph.algorithms.mst import minimum_spanning_tree, mst_cost
from railgraph.algorithms.path import Path
from railgraph.algorithms.spf import (
    dijkstra_path,
    path_cost,
    shortest_path,
    shortest_path_nodes,
    spf,
)

__all__ = [
    "Path",
    "spf",
    "dijkstra_path",
    "shortest_path",
    "shortest_path_nodes",
    "path_cost",
    "minimum_spanning_tree",
    "mst_cost",
]
