"""Tests for NetworkX conversion helpers."""

import networkx as nx
import pytest

from railgraph.algorithms import shortest_path
from railgraph.graph import NxWeightedDiGraph, WeightedDiGraph, from_networkx, to_networkx


def test_to_networkx_preserves_vertices_and_weights(rail_network):
    nx_graph = to_networkx(rail_network)

    assert isinstance(nx_graph, nx.DiGraph)
    assert list(nx_graph.nodes) == list(rail_network.vertices())
    assert nx_graph.number_of_edges() == 15
    assert nx_graph["Chicago"]["Minneapolis"]["weight"] == 6
    assert not nx_graph.has_edge("Minneapolis", "Chicago")


def test_to_networkx_custom_attr(line1):
    nx_graph = to_networkx(line1, weight_attr="cost")
    assert nx_graph["A"]["B"] == {"cost": 15}


def test_round_trip_keeps_shortest_paths(rail_network):
    back = from_networkx(to_networkx(rail_network))
    assert isinstance(back, WeightedDiGraph)
    assert shortest_path(back, "Milwaukee", "LA") == shortest_path(
        rail_network, "Milwaukee", "LA"
    )


def test_from_undirected_graph_adds_both_directions():
    g = nx.Graph()
    g.add_edge("A", "B", weight=3)
    g.add_node("C")

    graph = from_networkx(g)
    assert graph.vertex_count() == 3
    assert graph.edge_count() == 2
    assert graph.get_weight("A", "B") == 3
    assert graph.get_weight("B", "A") == 3


def test_from_multigraph_keeps_lowest_parallel_weight():
    g = nx.MultiDiGraph()
    g.add_edge("A", "B", weight=5)
    g.add_edge("A", "B", weight=2)
    g.add_edge("A", "B", weight=9)

    graph = from_networkx(g)
    assert graph.edge_count() == 1
    assert graph.get_weight("A", "B") == 2


def test_from_networkx_missing_weight():
    g = nx.DiGraph()
    g.add_edge("A", "B")

    with pytest.raises(ValueError, match="no 'weight' attribute"):
        from_networkx(g)

    graph = from_networkx(g, default_weight=1)
    assert graph.get_weight("A", "B") == 1


def test_from_networkx_into_nx_backend():
    g = nx.DiGraph()
    g.add_edge("A", "B", cost=4)

    graph = from_networkx(g, weight_attr="cost", graph_factory=NxWeightedDiGraph)
    assert isinstance(graph, NxWeightedDiGraph)
    assert graph.get_weight("A", "B") == 4
