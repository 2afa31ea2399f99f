"""NetworkX-backed implementation of the graph interface.

`NxWeightedDiGraph` extends `networkx.DiGraph` with the strict semantics of
`GraphADT`: explicit vertex management, validated non-negative weights stored
in a single edge attribute, and boolean results instead of exceptions for
duplicate or missing items. Because it is a real ``DiGraph``, NetworkX
algorithms can be applied to it directly.

The inherited NetworkX mutators are strict too: ``add_node`` refuses
duplicates, and ``add_edge`` / ``add_edges_from`` never create vertices and
require a valid weight attribute.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Iterator, Tuple

import networkx as nx

from railgraph.exceptions import InvalidArgumentError, NotFoundError
from railgraph.graph.base import GraphADT, check_weight, require_label


class NxWeightedDiGraph(nx.DiGraph, GraphADT[Hashable, Any]):
    """A ``networkx.DiGraph`` that follows the `GraphADT` contract.

    Inherits from:
        networkx.DiGraph
    """

    #: Edge attribute holding the weight.
    weight_attr: str = "weight"

    def _require_endpoints(self, source: Hashable, target: Hashable) -> None:
        require_label(source, "source")
        require_label(target, "target")
        if source not in self._node:
            raise InvalidArgumentError(f"Source vertex '{source}' does not exist.")
        if target not in self._node:
            raise InvalidArgumentError(f"Target vertex '{target}' does not exist.")

    #
    # NetworkX mutators
    #
    def add_node(self, node_for_adding: Hashable, **attr: Any) -> None:
        """Add a single vertex, disallowing duplicates.

        Raises:
            NullInputError: If ``node_for_adding`` is None.
            InvalidArgumentError: If the vertex already exists.
        """
        require_label(node_for_adding)
        if node_for_adding in self._node:
            raise InvalidArgumentError(
                f"Vertex '{node_for_adding}' already exists in this graph."
            )
        super().add_node(node_for_adding, **attr)

    def add_edge(self, u_of_edge: Hashable, v_of_edge: Hashable, **attr: Any) -> None:
        """Add or update the edge ``u_of_edge -> v_of_edge``.

        Unlike ``networkx.DiGraph.add_edge`` this does not create vertices;
        both endpoints must already exist. ``attr`` must carry a valid weight
        under `weight_attr`.

        Raises:
            NullInputError: If an endpoint or the weight is None.
            InvalidArgumentError: If an endpoint is missing, or the weight is
                not a finite non-negative number.
        """
        self._require_endpoints(u_of_edge, v_of_edge)
        check_weight(attr.get(self.weight_attr))
        super().add_edge(u_of_edge, v_of_edge, **attr)

    def add_edges_from(self, ebunch_to_add: Iterable[tuple], **attr: Any) -> None:
        """Add edges one at a time through `add_edge`.

        Each item is ``(u, v)`` or ``(u, v, data)``; ``data`` overrides
        ``attr``, as in NetworkX.
        """
        for e in ebunch_to_add:
            if len(e) == 3:
                u, v, dd = e
            elif len(e) == 2:
                u, v = e
                dd = {}
            else:
                raise InvalidArgumentError(
                    f"Edge tuple {e} must be a 2-tuple or 3-tuple."
                )
            self.add_edge(u, v, **{**attr, **dd})

    #
    # Vertex management
    #
    def insert_vertex(self, label: Hashable) -> bool:
        require_label(label)
        if label in self._node:
            return False
        self.add_node(label)
        return True

    def remove_vertex(self, label: Hashable) -> bool:
        require_label(label)
        if label not in self._node:
            return False
        # remove_node also drops incoming and outgoing edges
        self.remove_node(label)
        return True

    #
    # Edge management
    #
    def insert_edge(self, source: Hashable, target: Hashable, weight: Any) -> bool:
        self._require_endpoints(source, target)
        check_weight(weight)
        attr = self._succ[source].get(target)
        if attr is not None and attr.get(self.weight_attr) == weight:
            return False
        self.add_edge(source, target, **{self.weight_attr: weight})
        return True

    def remove_edge(self, source: Hashable, target: Hashable) -> bool:  # type: ignore[override]
        """Remove ``source -> target``; return False instead of raising if absent."""
        self._require_endpoints(source, target)
        if target not in self._succ[source]:
            return False
        nx.DiGraph.remove_edge(self, source, target)
        return True

    #
    # Queries
    #
    def contains_vertex(self, label: Hashable) -> bool:
        require_label(label)
        return label in self._node

    def contains_edge(self, source: Hashable, target: Hashable) -> bool:
        require_label(source, "source")
        require_label(target, "target")
        if source not in self._succ:
            return False
        return target in self._succ[source]

    def get_weight(self, source: Hashable, target: Hashable) -> Any:
        self._require_endpoints(source, target)
        if target not in self._succ[source]:
            raise NotFoundError(f"No directed edge from '{source}' to '{target}'.")
        return self._succ[source][target][self.weight_attr]

    def edge_count(self) -> int:
        return self.number_of_edges()

    def vertex_count(self) -> int:
        return self.number_of_nodes()

    #
    # Traversal
    #
    def vertices(self) -> Iterator[Hashable]:
        return iter(list(self._node))

    def edges_from(self, label: Hashable) -> Iterator[Tuple[Hashable, Any]]:
        require_label(label)
        if label not in self._node:
            raise InvalidArgumentError(f"Vertex '{label}' does not exist.")
        attr = self.weight_attr
        return iter([(dst, data[attr]) for dst, data in self._succ[label].items()])
