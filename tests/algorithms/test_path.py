"""Tests for the immutable Path value."""

import dataclasses
from heapq import heappop, heappush

import pytest

from railgraph.algorithms import Path


def test_start_at():
    p = Path.start_at("A")
    assert p.nodes == ("A",)
    assert p.cost == 0
    assert p.src_node == "A"
    assert p.dst_node == "A"
    assert p.edges == ()
    assert len(p) == 1


def test_extend_returns_new_path():
    p = Path.start_at("A")
    q = p.extend("B", 15)
    r = q.extend("C", 2)

    assert p.nodes == ("A",)
    assert q.nodes == ("A", "B")
    assert r.nodes == ("A", "B", "C")
    assert r.cost == 17
    assert r.src_node == "A"
    assert r.dst_node == "C"
    assert r.edges == (("A", "B"), ("B", "C"))
    assert list(r) == ["A", "B", "C"]
    assert r[1] == "B"


def test_frozen():
    p = Path.start_at("A")
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.cost = 5  # type: ignore[misc]


def test_order_by_cost_then_label():
    a = Path(("S", "B"), 2)
    b = Path(("S", "A"), 2)
    c = Path(("S", "C"), 1)

    assert c < a
    assert b < a
    assert not a < b
    assert sorted([a, b, c]) == [c, b, a]


def test_label_tie_break_uses_string_form():
    # "10" < "9" as strings
    ten = Path((0, 10), 1)
    nine = Path((0, 9), 1)
    assert ten < nine


def test_heap_pops_in_order():
    pq = []
    for p in (Path(("S", "X"), 3), Path(("S", "B"), 1), Path(("S", "A"), 1)):
        heappush(pq, p)
    assert [heappop(pq).dst_node for _ in range(3)] == ["A", "B", "X"]


def test_equality_and_hash():
    assert Path(("A", "B"), 1) == Path.start_at("A").extend("B", 1)
    assert len({Path(("A", "B"), 1), Path(("A", "B"), 1)}) == 1


def test_compare_with_non_path():
    with pytest.raises(TypeError):
        Path.start_at("A") < 3  # noqa: B015


def test_repr():
    assert repr(Path(("A", "B"), 4)) == "Path(['A', 'B'], cost=4)"
