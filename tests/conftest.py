"""Global pytest configuration and shared graph fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from railgraph.graph import NxWeightedDiGraph, WeightedDiGraph

SAMPLE_DATA = Path(__file__).parent / "sample_data"

RAIL_STATIONS = [
    "Albany",
    "Chicago",
    "Milwaukee",
    "Dallas",
    "LA",
    "Atlanta",
    "Denver",
    "Minneapolis",
]

RAIL_ROUTES = [
    ("Albany", "Chicago", 15),
    ("Chicago", "Milwaukee", 2),
    ("Chicago", "Atlanta", 10),
    ("Atlanta", "Dallas", 20),
    ("Dallas", "Denver", 10),
    ("Denver", "LA", 20),
    ("Milwaukee", "Minneapolis", 4),
    ("Chicago", "Minneapolis", 6),
    ("Milwaukee", "Chicago", 2),
    ("Minneapolis", "Milwaukee", 4),
    ("LA", "Denver", 20),
    ("Denver", "Dallas", 10),
    ("Dallas", "Atlanta", 20),
    ("Atlanta", "Chicago", 10),
    ("Chicago", "Albany", 15),
]


@pytest.fixture(params=[WeightedDiGraph, NxWeightedDiGraph], ids=["arena", "nx"])
def graph_cls(request):
    """Each graph backend in turn."""
    return request.param


@pytest.fixture
def rail_routes_file() -> Path:
    return SAMPLE_DATA / "train_routes.gv"


@pytest.fixture
def rail_routes_yaml() -> Path:
    return SAMPLE_DATA / "train_routes.yaml"


@pytest.fixture
def rail_network(graph_cls):
    # 8 stations, 15 directed routes. All routes are paired except
    # Chicago -> Minneapolis.
    #
    #  Albany ──15── Chicago ──10── Atlanta ──20── Dallas ──10── Denver ──20── LA
    #                 │    \
    #                 2     6 (one-way)
    #                 │      \
    #             Milwaukee ──4── Minneapolis
    g = graph_cls()
    for station in RAIL_STATIONS:
        g.insert_vertex(station)
    for source, target, weight in RAIL_ROUTES:
        g.insert_edge(source, target, weight)
    return g


@pytest.fixture
def line1(graph_cls):
    #      [15]      [2]
    #  A ───────► B ───────► C
    g = graph_cls()
    for v in "ABC":
        g.insert_vertex(v)
    g.insert_edge("A", "B", 15)
    g.insert_edge("B", "C", 2)
    return g


@pytest.fixture
def square1(graph_cls):
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►D─────────┘
    g = graph_cls()
    for v in "ABCD":
        g.insert_vertex(v)
    g.insert_edge("A", "B", 1)
    g.insert_edge("B", "C", 1)
    g.insert_edge("A", "D", 2)
    g.insert_edge("D", "C", 2)
    return g


@pytest.fixture
def square_tie(graph_cls):
    # Two equal-cost routes A->C; D is inserted before B so that only the
    # label tie-break can prefer B.
    #
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [1]        [1]  │
    #   └────────►D─────────┘
    g = graph_cls()
    for v in "ADBC":
        g.insert_vertex(v)
    g.insert_edge("A", "D", 1)
    g.insert_edge("A", "B", 1)
    g.insert_edge("D", "C", 1)
    g.insert_edge("B", "C", 1)
    return g


@pytest.fixture
def complete4(graph_cls):
    # Complete graph on 4 vertices, both directions per pair.
    # MST = A-B (1) + B-C (2) + A-D (4) = 7
    weights = {
        ("A", "B"): 1,
        ("A", "C"): 3,
        ("A", "D"): 4,
        ("B", "C"): 2,
        ("B", "D"): 5,
        ("C", "D"): 6,
    }
    g = graph_cls()
    for v in "ABCD":
        g.insert_vertex(v)
    for (u, v), w in weights.items():
        g.insert_edge(u, v, w)
        g.insert_edge(v, u, w)
    return g


@pytest.fixture
def two_islands(graph_cls):
    #  A ◄──1──► B        C ◄──1──► D
    g = graph_cls()
    for v in "ABCD":
        g.insert_vertex(v)
    for u, v in (("A", "B"), ("C", "D")):
        g.insert_edge(u, v, 1)
        g.insert_edge(v, u, 1)
    return g
