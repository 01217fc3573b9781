"""Exceptions raised by subway.

Every error derives from ``SubwayError`` so callers can catch the whole family
with one clause. Lookup and validation errors also subclass the matching
builtin (``KeyError``, ``ValueError``) so generic handlers keep working.
"""

from typing import Any, Optional


class SubwayError(Exception):
    """Base class for all subway errors."""


class NoPathFoundError(SubwayError):
    """Raised when no end vertex is reachable from any start vertex.

    This also covers the degenerate case where no start vertex survives
    filtering, since the frontier is then empty before the first pop.

    Attributes:
        settled: Number of vertices finalized before the frontier ran dry.
    """

    def __init__(self, message: str, settled: int = 0) -> None:
        super().__init__(message)
        self.settled = settled


class UnknownVertexError(SubwayError, KeyError):
    """Raised when a vertex is not part of the indexed graph.

    Attributes:
        vertex: The offending vertex reference.
        role: Where it was encountered (``"start"``, ``"end"`` or ``"edge target"``).
    """

    def __init__(self, vertex: Any, role: Optional[str] = None) -> None:
        self.vertex = vertex
        self.role = role
        where = f" ({role})" if role else ""
        super().__init__(f"Vertex {vertex!r}{where} is not in the graph.")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class DuplicateVertexError(SubwayError, ValueError):
    """Raised when two vertex references share one identity.

    Attributes:
        vertex: The later of the two colliding references.
        first_index: Index already assigned to the identity.
        second_index: Index the duplicate would have received.
    """

    def __init__(self, vertex: Any, first_index: int, second_index: int) -> None:
        self.vertex = vertex
        self.first_index = first_index
        self.second_index = second_index
        super().__init__(
            f"Vertex {vertex!r} at position {second_index} duplicates the "
            f"vertex at position {first_index}."
        )
