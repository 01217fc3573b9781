"""Capability contracts for caller-defined graphs.

The engine never inspects concrete vertex or edge classes. Any object works
as a vertex if it is hashable, compares equal by logical identity, and
exposes ``edges()``; any object works as an edge if it has ``target`` and
``weight`` attributes. The graph must stay unchanged while a query runs.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, TypeVar, runtime_checkable

from subway.algorithms.weight import Weight

W_co = TypeVar("W_co", bound=Weight, covariant=True)


@runtime_checkable
class Edge(Protocol[W_co]):
    """Directed arc to ``target`` costing ``weight``."""

    @property
    def target(self) -> Any: ...

    @property
    def weight(self) -> W_co: ...


@runtime_checkable
class Vertex(Protocol):
    """Node with identity-based equality and a restartable edge sequence.

    ``edges()`` is called once per settled vertex and may return a fresh
    iterator or a reusable collection; it must be finite.
    """

    def edges(self) -> Iterable[Edge[Any]]: ...

    def __eq__(self, other: object) -> bool: ...

    def __hash__(self) -> int: ...
