"""Exception hierarchy raised by the graph store and path algorithms.

Errors subclass the built-in exception a caller would expect (``ValueError``
for bad arguments, ``LookupError`` for failed queries), so code that only
knows the standard library types still catches them.
"""

from __future__ import annotations


class GraphError(Exception):
    """Base class for all railgraph errors."""


class InvalidArgumentError(GraphError, ValueError):
    """An operation referenced a missing vertex or supplied a bad weight."""


class NullInputError(InvalidArgumentError):
    """A required vertex label was ``None``."""


class NotFoundError(GraphError, LookupError):
    """No matching edge or path exists between otherwise valid endpoints."""


class DisconnectedGraphError(NotFoundError):
    """A spanning tree cannot reach every vertex from the seed."""
