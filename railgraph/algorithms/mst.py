"""Minimum spanning tree construction (Prim's algorithm).

The tree grows from a seed vertex one minimum-weight frontier edge at a time.
Edges are followed in their stored direction, so on graphs modelling
bidirectional links (both directions inserted with equal weight) the result is
the usual undirected minimum spanning tree.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import List, Set

from railgraph.algorithms.path import Path
from railgraph.exceptions import DisconnectedGraphError, NotFoundError
from railgraph.graph.base import GraphADT, L, W, require_label


def minimum_spanning_tree(graph: GraphADT[L, W], seed: L) -> List[Path[L, W]]:
    """Return the edges of a minimum spanning tree grown from ``seed``.

    Each accepted edge is returned as a two-vertex `Path` whose ``cost`` is the
    edge weight, in the order the edges were accepted. Candidate edges are
    ordered like shortest-path candidates: by weight, then by the string form
    of the target label.

    Args:
        graph: Graph to span.
        seed: Vertex the tree grows from.

    Returns:
        ``vertex_count - 1`` tree edges (empty for a single-vertex graph).

    Raises:
        NullInputError: If ``seed`` is None.
        NotFoundError: If ``seed`` is not a vertex.
        DisconnectedGraphError: If some vertex cannot be reached from ``seed``.
    """
    require_label(seed, "seed")
    if not graph.contains_vertex(seed):
        raise NotFoundError(f"Seed vertex '{seed}' is not in the graph.")

    target_size = graph.vertex_count() - 1
    visited: Set[L] = set()
    tree: List[Path[L, W]] = []
    min_pq: List[Path[L, W]] = []
    frontier = seed

    while len(tree) < target_size:
        for neighbor, weight in graph.edges_from(frontier):
            if neighbor not in visited:
                heappush(min_pq, Path.start_at(frontier).extend(neighbor, weight))
        visited.add(frontier)

        if not min_pq:
            raise DisconnectedGraphError(
                f"Only {len(visited)} of {target_size + 1} vertices are reachable "
                f"from seed '{seed}'."
            )
        candidate = heappop(min_pq)
        if candidate.dst_node not in visited:
            tree.append(candidate)
            visited.add(candidate.dst_node)
        # The frontier moves to the popped target even when the edge is stale
        frontier = candidate.dst_node

    return tree


def mst_cost(graph: GraphADT[L, W], seed: L) -> W:
    """Return the total weight of a minimum spanning tree grown from ``seed``.

    A single-vertex graph has cost ``0``. See `minimum_spanning_tree` for the
    error contract.
    """
    total = 0
    for edge in minimum_spanning_tree(graph, seed):
        total = total + edge.cost
    return total  # type: ignore[return-value]
