"""Tests for Dijkstra shortest paths."""

from itertools import permutations

import networkx as nx
import pytest

from railgraph.algorithms import (
    dijkstra_path,
    path_cost,
    shortest_path,
    shortest_path_nodes,
    spf,
)
from railgraph.exceptions import NotFoundError, NullInputError
from railgraph.graph import to_networkx


def test_line(line1):
    assert shortest_path(line1, "A", "C") == (["A", "B", "C"], 17)


def test_start_equals_end(line1):
    assert shortest_path(line1, "B", "B") == (["B"], 0)


def test_square_prefers_cheaper_branch(square1):
    assert shortest_path(square1, "A", "C") == (["A", "B", "C"], 2)


def test_equal_cost_tie_break_by_label(square_tie):
    # D is inserted and linked first; B still wins on the label tie-break
    path, cost = shortest_path(square_tie, "A", "C")
    assert path == ["A", "B", "C"]
    assert cost == 2


def test_rail_network_milwaukee_to_la(rail_network):
    path, cost = shortest_path(rail_network, "Milwaukee", "LA")
    assert path == ["Milwaukee", "Chicago", "Atlanta", "Dallas", "Denver", "LA"]
    assert cost == 62


def test_rail_network_respects_direction(rail_network):
    # Chicago -> Minneapolis is one-way; the way back goes through Milwaukee
    assert shortest_path(rail_network, "Chicago", "Minneapolis") == (
        ["Chicago", "Minneapolis"],
        6,
    )
    assert shortest_path(rail_network, "Minneapolis", "Chicago") == (
        ["Minneapolis", "Milwaukee", "Chicago"],
        6,
    )


def test_helpers_agree(rail_network):
    path = dijkstra_path(rail_network, "Albany", "LA")
    assert shortest_path_nodes(rail_network, "Albany", "LA") == list(path.nodes)
    assert path_cost(rail_network, "Albany", "LA") == path.cost == 75


def test_graph_methods_delegate(rail_network):
    assert rail_network.shortest_path("Milwaukee", "LA")[1] == 62
    assert rail_network.path_cost("Milwaukee", "LA") == 62
    assert rail_network.dijkstra_path("Milwaukee", "LA").dst_node == "LA"


def test_idempotent(rail_network):
    first = shortest_path(rail_network, "Albany", "Minneapolis")
    for _ in range(3):
        assert shortest_path(rail_network, "Albany", "Minneapolis") == first


def test_recomputes_after_mutation(line1):
    assert shortest_path(line1, "A", "C")[1] == 17
    line1.insert_edge("A", "C", 5)
    assert shortest_path(line1, "A", "C") == (["A", "C"], 5)
    line1.remove_edge("A", "C")
    assert shortest_path(line1, "A", "C")[1] == 17


def test_triangle_inequality(rail_network):
    stations = list(rail_network.vertices())
    for a, b, c in permutations(stations, 3):
        ac = path_cost(rail_network, a, c)
        ab = path_cost(rail_network, a, b)
        bc = path_cost(rail_network, b, c)
        assert ac <= ab + bc


def test_matches_networkx(rail_network):
    nx_graph = to_networkx(rail_network)
    for source in rail_network.vertices():
        expected = nx.single_source_dijkstra_path_length(nx_graph, source)
        found = {label: p.cost for label, p in spf(rail_network, source).items()}
        assert found == expected


def test_float_weights(graph_cls):
    g = graph_cls()
    for v in "ABC":
        g.insert_vertex(v)
    g.insert_edge("A", "B", 0.5)
    g.insert_edge("B", "C", 0.25)
    g.insert_edge("A", "C", 1.0)
    assert shortest_path(g, "A", "C") == (["A", "B", "C"], 0.75)


def test_unreachable(line1):
    with pytest.raises(NotFoundError, match="No path"):
        shortest_path(line1, "C", "A")


def test_spf_only_reachable(line1):
    assert set(spf(line1, "B")) == {"B", "C"}


@pytest.mark.parametrize("start,end", [("Z", "A"), ("A", "Z")])
def test_missing_endpoint(line1, start, end):
    with pytest.raises(NotFoundError):
        shortest_path(line1, start, end)


@pytest.mark.parametrize("start,end", [(None, "A"), ("A", None)])
def test_none_endpoint(line1, start, end):
    with pytest.raises(NullInputError):
        shortest_path(line1, start, end)


def test_isolated_vertex(line1):
    line1.insert_vertex("D")
    with pytest.raises(NotFoundError):
        shortest_path(line1, "A", "D")
    assert shortest_path(line1, "D", "D") == (["D"], 0)
