"""Graph conversion utilities between `GraphADT` backends and NetworkX graphs."""

from __future__ import annotations

from typing import Callable, Optional

import networkx as nx

from railgraph.graph.base import GraphADT
from railgraph.graph.weighted_digraph import WeightedDiGraph


def to_networkx(graph: GraphADT, weight_attr: str = "weight") -> nx.DiGraph:
    """Convert any `GraphADT` into a plain NetworkX DiGraph.

    Vertex insertion order and per-vertex edge order are preserved.

    Args:
        graph: The graph to convert.
        weight_attr: Edge attribute that receives the weight.

    Returns:
        A new ``networkx.DiGraph``.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.vertices())
    for source in graph.vertices():
        for target, weight in graph.edges_from(source):
            nx_graph.add_edge(source, target, **{weight_attr: weight})
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph,
    weight_attr: str = "weight",
    default_weight: Optional[float] = None,
    graph_factory: Callable[[], GraphADT] = WeightedDiGraph,
) -> GraphADT:
    """Build a `GraphADT` from a NetworkX graph.

    Undirected input graphs produce one directed edge in each direction.
    Multigraph inputs keep the lowest weight among parallel edges, since the
    target graph stores a single edge per ordered pair.

    Args:
        nx_graph: Source graph (``Graph``, ``DiGraph`` or a multigraph variant).
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight for edges lacking ``weight_attr``. If None,
            such edges raise ``ValueError``.
        graph_factory: Zero-argument callable returning an empty `GraphADT`.

    Returns:
        The populated graph.

    Raises:
        ValueError: If an edge has no weight and no default is given.
    """
    graph = graph_factory()
    for node in nx_graph.nodes:
        graph.insert_vertex(node)

    directed = nx_graph.is_directed()
    for u, v, data in nx_graph.edges(data=True):
        weight = data.get(weight_attr, default_weight)
        if weight is None:
            raise ValueError(f"Edge ({u!r}, {v!r}) has no '{weight_attr}' attribute.")
        pairs = [(u, v)] if directed else [(u, v), (v, u)]
        for src, dst in pairs:
            if graph.contains_edge(src, dst) and graph.get_weight(src, dst) <= weight:
                continue
            graph.insert_edge(src, dst, weight)
    return graph
