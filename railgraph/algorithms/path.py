"""Immutable path value used by the path algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Tuple

from railgraph.graph.base import L, W


@dataclass(frozen=True)
class Path(Generic[L, W]):
    """A walk through the graph with its accumulated weight.

    Paths are never mutated; `extend` returns a new path that copies this one
    and appends one edge. Carrying the full label sequence in each candidate
    removes the need for a predecessor table and a backward trace.

    Paths order by ascending ``cost``, then by the string form of the last
    label, which makes heap pops deterministic when costs tie.

    Attributes:
        nodes: Ordered labels from the start vertex to the current end.
        cost: Sum of traversed edge weights (``0`` for a single-vertex path).
    """

    nodes: Tuple[L, ...]
    cost: W = field(default=0)  # type: ignore[assignment]

    @classmethod
    def start_at(cls, label: L) -> Path[L, W]:
        """Return the zero-length path consisting of ``label`` alone."""
        return cls((label,), 0)  # type: ignore[arg-type]

    def extend(self, target: L, weight: W) -> Path[L, W]:
        """Return a new path with one more edge ``dst_node -> target``."""
        return Path(self.nodes + (target,), self.cost + weight)  # type: ignore[operator]

    @property
    def src_node(self) -> L:
        """Return the first label in the path."""
        return self.nodes[0]

    @property
    def dst_node(self) -> L:
        """Return the last label in the path."""
        return self.nodes[-1]

    @property
    def edges(self) -> Tuple[Tuple[L, L], ...]:
        """Return the ``(source, target)`` pairs traversed, in order."""
        return tuple(zip(self.nodes, self.nodes[1:]))

    @property
    def sort_key(self) -> Tuple[W, str]:
        return (self.cost, str(self.dst_node))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __iter__(self) -> Iterator[L]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, idx: int) -> L:
        return self.nodes[idx]

    def __repr__(self) -> str:
        return f"Path({list(self.nodes)}, cost={self.cost})"
