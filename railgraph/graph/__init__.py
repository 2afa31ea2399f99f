"""Graph primitives and helpers.

This package provides the abstract `GraphADT` interface, the arena-backed
`WeightedDiGraph`, the NetworkX-backed `NxWeightedDiGraph`, and conversion
helpers (`convert`).
"""

from railgraph.graph.base import GraphADT
from railgraph.graph.convert import from_networkx, to_networkx
from railgraph.graph.nx_digraph import NxWeightedDiGraph
from railgraph.graph.weighted_digraph import WeightedDiGraph

__all__ = [
    "GraphADT",
    "WeightedDiGraph",
    "NxWeightedDiGraph",
    "from_networkx",
    "to_networkx",
]
