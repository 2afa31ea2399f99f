"""railgraph: weighted directed graphs with shortest paths and spanning trees.

Primary API:
    WeightedDiGraph - Arena-backed weighted directed graph
    NxWeightedDiGraph - Same contract on top of networkx.DiGraph
    shortest_path() - Dijkstra shortest path as (labels, distance)
    mst_cost() - Prim minimum spanning tree cost
    RouteFinder - Route queries over a loaded route file

Example:
    from railgraph import WeightedDiGraph, shortest_path

    g = WeightedDiGraph(vertices=["A", "B", "C"])
    g.insert_edge("A", "B", 15)
    g.insert_edge("B", "C", 2)

    shortest_path(g, "A", "C")  # (["A", "B", "C"], 17)
"""

from __future__ import annotations

from railgraph import cli, logging
from railgraph._version import __version__
from railgraph.algorithms import (
    Path,
    dijkstra_path,
    minimum_spanning_tree,
    mst_cost,
    path_cost,
    shortest_path,
)
from railgraph.backend import RouteFinder
from railgraph.exceptions import (
    DisconnectedGraphError,
    GraphError,
    InvalidArgumentError,
    NotFoundError,
    NullInputError,
)
from railgraph.graph import (
    GraphADT,
    NxWeightedDiGraph,
    WeightedDiGraph,
    from_networkx,
    to_networkx,
)
from railgraph.io import RouteData, RouteEdge, load_routes

__all__ = [
    # Version
    "__version__",
    # Graphs
    "GraphADT",
    "WeightedDiGraph",
    "NxWeightedDiGraph",
    # Algorithms
    "Path",
    "shortest_path",
    "dijkstra_path",
    "path_cost",
    "minimum_spanning_tree",
    "mst_cost",
    # Errors
    "GraphError",
    "InvalidArgumentError",
    "NullInputError",
    "NotFoundError",
    "DisconnectedGraphError",
    # Loading and routing
    "RouteData",
    "RouteEdge",
    "load_routes",
    "RouteFinder",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
