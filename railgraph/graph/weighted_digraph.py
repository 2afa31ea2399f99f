"""Arena-backed weighted directed graph.

`WeightedDiGraph` maps each vertex label to a stable integer handle and keeps
outgoing edges as ``{target_handle: weight}`` per source handle. Edges never
hold references to vertex objects, so removing a vertex is a scan over
handles rather than an identity search.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional, Tuple

from railgraph.exceptions import InvalidArgumentError, NotFoundError
from railgraph.graph.base import GraphADT, L, W, check_weight, require_label

Handle = int


class WeightedDiGraph(GraphADT[L, W]):
    """Weighted directed graph with one edge per ordered vertex pair.

    This class enforces:
      - No automatic creation of missing vertices when adding an edge.
      - Duplicate vertex inserts are reported (False), not raised.
      - Re-inserting an existing edge updates its weight in place.
      - Negative weights are rejected.

    Example:
        >>> g = WeightedDiGraph()
        >>> g.insert_vertex("A"), g.insert_vertex("B")
        (True, True)
        >>> g.insert_edge("A", "B", 15)
        True
        >>> g.get_weight("A", "B")
        15
    """

    def __init__(
        self,
        vertices: Optional[Iterable[L]] = None,
        edges: Optional[Iterable[Tuple[L, L, W]]] = None,
    ) -> None:
        """Initialize the graph, optionally populating it.

        Args:
            vertices: Labels inserted in order.
            edges: ``(source, target, weight)`` triples inserted after vertices.

        Attributes:
            _handles: Map vertex label to its handle.
            _labels: Map handle back to its label.
            _adj: Map source handle to ``{target_handle: weight}``.
        """
        self._handles: Dict[L, Handle] = {}
        self._labels: Dict[Handle, L] = {}
        self._adj: Dict[Handle, Dict[Handle, W]] = {}
        # Handles only advance; removed vertices do not reuse them.
        self._next_handle: Handle = 0

        for label in vertices or ():
            self.insert_vertex(label)
        for source, target, weight in edges or ():
            self.insert_edge(source, target, weight)

    def _endpoints(self, source: L, target: L) -> Tuple[Handle, Handle]:
        """Resolve both endpoint handles, raising if either vertex is missing."""
        require_label(source, "source")
        require_label(target, "target")
        src = self._handles.get(source)
        dst = self._handles.get(target)
        if src is None:
            raise InvalidArgumentError(f"Source vertex '{source}' does not exist.")
        if dst is None:
            raise InvalidArgumentError(f"Target vertex '{target}' does not exist.")
        return src, dst

    #
    # Vertex management
    #
    def insert_vertex(self, label: L) -> bool:
        require_label(label)
        if label in self._handles:
            return False
        handle = self._next_handle
        self._next_handle += 1
        self._handles[label] = handle
        self._labels[handle] = label
        self._adj[handle] = {}
        return True

    def remove_vertex(self, label: L) -> bool:
        require_label(label)
        handle = self._handles.pop(label, None)
        if handle is None:
            return False
        # Drop edges elsewhere that target the removed vertex
        for out_edges in self._adj.values():
            out_edges.pop(handle, None)
        del self._adj[handle]
        del self._labels[handle]
        return True

    #
    # Edge management
    #
    def insert_edge(self, source: L, target: L, weight: W) -> bool:
        src, dst = self._endpoints(source, target)
        check_weight(weight)
        out_edges = self._adj[src]
        if dst in out_edges and out_edges[dst] == weight:
            return False
        out_edges[dst] = weight
        return True

    def remove_edge(self, source: L, target: L) -> bool:
        src, dst = self._endpoints(source, target)
        return self._adj[src].pop(dst, None) is not None

    #
    # Queries
    #
    def contains_vertex(self, label: L) -> bool:
        require_label(label)
        return label in self._handles

    def contains_edge(self, source: L, target: L) -> bool:
        require_label(source, "source")
        require_label(target, "target")
        src = self._handles.get(source)
        dst = self._handles.get(target)
        if src is None or dst is None:
            return False
        return dst in self._adj[src]

    def get_weight(self, source: L, target: L) -> W:
        src, dst = self._endpoints(source, target)
        try:
            return self._adj[src][dst]
        except KeyError:
            raise NotFoundError(
                f"No directed edge from '{source}' to '{target}'."
            ) from None

    def edge_count(self) -> int:
        return sum(len(out_edges) for out_edges in self._adj.values())

    def vertex_count(self) -> int:
        return len(self._handles)

    #
    # Traversal
    #
    def vertices(self) -> Iterator[L]:
        return iter(list(self._handles))

    def edges_from(self, label: L) -> Iterator[Tuple[L, W]]:
        require_label(label)
        handle = self._handles.get(label)
        if handle is None:
            raise InvalidArgumentError(f"Vertex '{label}' does not exist.")
        labels = self._labels
        return iter([(labels[dst], weight) for dst, weight in self._adj[handle].items()])

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.vertex_count()}, "
            f"edges={self.edge_count()})"
        )
