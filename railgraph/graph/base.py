"""Abstract weighted directed graph interface.

`GraphADT` is the minimal capability surface shared by every graph backend:
vertex and edge mutation, membership, weights, counts, and the read-only
traversal hooks (`vertices`, `edges_from`) the path algorithms consume.
Algorithms in :mod:`railgraph.algorithms` only use this surface, so any
backend implementing it gets shortest paths and spanning trees for free.
"""

from __future__ import annotations

import abc
import math
import numbers
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Generic, Hashable, Iterator, Tuple, TypeVar

from railgraph.exceptions import InvalidArgumentError, NullInputError

if TYPE_CHECKING:
    from railgraph.algorithms.path import Path

#: Vertex label type. Any hashable value other than ``None``.
L = TypeVar("L", bound=Hashable)
#: Edge weight type. Any ordered numeric type supporting addition.
W = TypeVar("W")


def require_label(label: Any, role: str = "vertex") -> None:
    """Raise `NullInputError` if ``label`` is the absent-marker ``None``.

    Args:
        label: Label passed by the caller.
        role: Argument description used in the error message.
    """
    if label is None:
        raise NullInputError(f"{role.capitalize()} label must not be None.")


def is_finite_weight(weight: Any) -> bool:
    """Return True unless ``weight`` is NaN or infinite."""
    if isinstance(weight, Decimal):
        return weight.is_finite()
    if isinstance(weight, numbers.Rational):
        return True
    return math.isfinite(weight)


def check_weight(weight: Any) -> None:
    """Validate an edge weight.

    Accepts finite real numbers (``int``, ``float``, ``Fraction``) and
    ``Decimal``. ``bool`` is rejected even though it subclasses ``int``.
    NaN and infinities are rejected.

    Raises:
        NullInputError: If ``weight`` is None.
        InvalidArgumentError: If ``weight`` is not numeric, not finite, or is
            negative.
    """
    if weight is None:
        raise NullInputError("Edge weight must not be None.")
    if isinstance(weight, bool) or not isinstance(weight, (numbers.Real, Decimal)):
        raise InvalidArgumentError(
            f"Edge weight must be a number, got {type(weight).__name__}."
        )
    if not is_finite_weight(weight):
        raise InvalidArgumentError(f"Edge weight must be finite, got {weight}.")
    if weight < 0:
        raise InvalidArgumentError(f"Edge weight must be >= 0, got {weight}.")


class GraphADT(abc.ABC, Generic[L, W]):
    """Weighted directed graph with at most one edge per ordered vertex pair.

    Every label-accepting method raises `NullInputError` for ``None`` before
    looking anything up.
    """

    #
    # Mutation
    #
    @abc.abstractmethod
    def insert_vertex(self, label: L) -> bool:
        """Insert an isolated vertex.

        Returns:
            True if inserted, False if ``label`` was already present.
        """

    @abc.abstractmethod
    def remove_vertex(self, label: L) -> bool:
        """Remove a vertex, its outgoing edges, and every edge targeting it.

        Returns:
            True if removed, False if ``label`` was not present.
        """

    @abc.abstractmethod
    def insert_edge(self, source: L, target: L, weight: W) -> bool:
        """Insert a directed edge or update the weight of an existing one.

        Returns:
            False if the edge already exists with the same weight, otherwise True.

        Raises:
            NullInputError: If either label is None.
            InvalidArgumentError: If either endpoint is missing or the weight
                is negative or not finite.
        """

    @abc.abstractmethod
    def remove_edge(self, source: L, target: L) -> bool:
        """Remove the edge ``source -> target``.

        Returns:
            True if an edge was removed, False if none existed.

        Raises:
            InvalidArgumentError: If either endpoint is missing.
        """

    #
    # Queries
    #
    @abc.abstractmethod
    def contains_vertex(self, label: L) -> bool:
        """Return True if ``label`` is a vertex."""

    @abc.abstractmethod
    def contains_edge(self, source: L, target: L) -> bool:
        """Return True if an edge ``source -> target`` exists."""

    @abc.abstractmethod
    def get_weight(self, source: L, target: L) -> W:
        """Return the weight of ``source -> target``.

        Raises:
            InvalidArgumentError: If either endpoint is missing.
            NotFoundError: If both endpoints exist but are not connected.
        """

    @abc.abstractmethod
    def edge_count(self) -> int:
        """Return the number of directed edges."""

    @abc.abstractmethod
    def vertex_count(self) -> int:
        """Return the number of vertices."""

    def is_empty(self) -> bool:
        """Return True if the graph has no vertices (and therefore no edges)."""
        return self.vertex_count() == 0

    #
    # Traversal
    #
    @abc.abstractmethod
    def vertices(self) -> Iterator[L]:
        """Iterate over vertex labels in insertion order."""

    @abc.abstractmethod
    def edges_from(self, label: L) -> Iterator[Tuple[L, W]]:
        """Iterate over ``(target, weight)`` for each edge leaving ``label``.

        Edges are yielded in insertion order. Raises `InvalidArgumentError`
        if ``label`` is not a vertex.
        """

    def __len__(self) -> int:
        return self.vertex_count()

    def __contains__(self, label: object) -> bool:
        if label is None:
            return False
        return self.contains_vertex(label)  # type: ignore[arg-type]

    #
    # Path algorithms
    #
    def shortest_path(self, start: L, end: L) -> Tuple[list, W]:
        """Return ``(labels, distance)`` of the shortest path from start to end."""
        # Import here to avoid circular import
        from railgraph.algorithms.spf import shortest_path

        return shortest_path(self, start, end)

    def dijkstra_path(self, start: L, end: L) -> "Path":
        """Return the shortest `Path` from start to end."""
        from railgraph.algorithms.spf import dijkstra_path

        return dijkstra_path(self, start, end)

    def path_cost(self, start: L, end: L) -> W:
        """Return the total weight of the shortest path from start to end."""
        from railgraph.algorithms.spf import path_cost

        return path_cost(self, start, end)

    def mst_cost(self, seed: L) -> W:
        """Return the minimum spanning tree cost grown from ``seed``."""
        from railgraph.algorithms.mst import mst_cost

        return mst_cost(self, seed)
