"""Shortest-path-first (SPF) search.

Implements Dijkstra's algorithm over any `GraphADT`. The priority queue holds
whole `Path` candidates and has no decrease-key operation: a vertex may be
queued several times, and stale entries are discarded when popped after the
vertex has been finalized. Non-negative weights are guaranteed by the store.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Set, Tuple

from railgraph.algorithms.path import Path
from railgraph.exceptions import NotFoundError
from railgraph.graph.base import GraphADT, L, W, require_label


def spf(graph: GraphADT[L, W], src_node: L) -> Dict[L, Path[L, W]]:
    """Compute the shortest path from ``src_node`` to every reachable vertex.

    Candidates are popped in ``(cost, str(label))`` order, so among equal-cost
    alternatives the one reaching the lexicographically smaller label first
    wins.

    Args:
        graph: Graph to search.
        src_node: Start vertex.

    Returns:
        Mapping of each reachable label to its finalized shortest `Path`
        (including ``src_node`` itself with cost ``0``).

    Raises:
        NullInputError: If ``src_node`` is None.
        NotFoundError: If ``src_node`` is not a vertex.
    """
    require_label(src_node, "start")
    if not graph.contains_vertex(src_node):
        raise NotFoundError(f"Start vertex '{src_node}' is not in the graph.")

    visited: Set[L] = set()
    shortest: Dict[L, Path[L, W]] = {}
    min_pq: List[Path[L, W]] = [Path.start_at(src_node)]

    while min_pq:
        path = heappop(min_pq)
        node = path.dst_node
        if node in visited:
            continue
        shortest[node] = path
        visited.add(node)
        for neighbor, weight in graph.edges_from(node):
            if neighbor not in visited:
                heappush(min_pq, path.extend(neighbor, weight))

    return shortest


def dijkstra_path(graph: GraphADT[L, W], start: L, end: L) -> Path[L, W]:
    """Return the shortest `Path` from ``start`` to ``end``.

    Raises:
        NullInputError: If ``start`` or ``end`` is None.
        NotFoundError: If either vertex is missing or ``end`` is unreachable.
    """
    require_label(start, "start")
    require_label(end, "end")
    if not graph.contains_vertex(start):
        raise NotFoundError(f"Start vertex '{start}' is not in the graph.")
    if not graph.contains_vertex(end):
        raise NotFoundError(f"End vertex '{end}' is not in the graph.")

    path = spf(graph, start).get(end)
    if path is None:
        raise NotFoundError(f"No path from '{start}' to '{end}'.")
    return path


def shortest_path(graph: GraphADT[L, W], start: L, end: L) -> Tuple[List[L], W]:
    """Return ``(labels, distance)`` for the shortest path from start to end.

    The label list includes both endpoints.
    """
    path = dijkstra_path(graph, start, end)
    return list(path.nodes), path.cost


def shortest_path_nodes(graph: GraphADT[L, W], start: L, end: L) -> List[L]:
    """Return only the labels along the shortest path from start to end."""
    return list(dijkstra_path(graph, start, end).nodes)


def path_cost(graph: GraphADT[L, W], start: L, end: L) -> W:
    """Return only the total weight of the shortest path from start to end."""
    return dijkstra_path(graph, start, end).cost
