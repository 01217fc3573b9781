"""Multi-source/multi-sink Dijkstra over caller-defined graphs.

``Dijkstra`` indexes a vertex snapshot once and then answers any number of
queries against it. A query treats every start vertex as a zero-weight origin
and stops at the first end vertex popped from the frontier; since the
frontier always yields the smallest unvisited tentative weight, that vertex is
the cheapest end reachable from any start.

Notes:
    The frontier uses lazy deletion: improving a vertex pushes a fresh entry
    and leaves the old one in the heap, where it is skipped once the vertex
    is visited. This keeps the loop O((V + E) log E) without a decrease-key
    structure. Which of several equal-weight paths is returned is not
    specified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Set,
    Tuple,
    Type,
    TypeVar,
)

from subway.algorithms.contracts import Edge
from subway.algorithms.frontier import FrontierEntry, pop_unvisited, push
from subway.algorithms.weight import ScalarWeight, Weight
from subway.config import (
    DEFAULT_ENGINE_CONFIG,
    DuplicateVertexPolicy,
    EngineConfig,
    UnknownVertexPolicy,
)
from subway.exceptions import (
    DuplicateVertexError,
    NoPathFoundError,
    UnknownVertexError,
)
from subway.logging import get_logger

logger = get_logger(__name__)

V = TypeVar("V", bound=Hashable)
W = TypeVar("W", bound=Weight)

# Backpointer value for vertices with no predecessor
NO_PREDECESSOR = -1


class ShortestPath(NamedTuple, Generic[V, W]):
    """Result of a shortest path query.

    Unpacks as ``(path, weight)``.

    Attributes:
        path: Vertices from a start vertex to an end vertex, inclusive.
        weight: Total weight of the path.
    """

    path: Tuple[V, ...]
    weight: W

    @property
    def source(self) -> V:
        return self.path[0]

    @property
    def target(self) -> V:
        return self.path[-1]

    @property
    def hops(self) -> int:
        """Number of edges on the path."""
        return len(self.path) - 1


@dataclass
class _TraversalState(Generic[W]):
    """Per-query mutable state; never shared between calls."""

    weights: List[W]
    visited: List[bool]
    backpointers: List[int]
    frontier: List[FrontierEntry[W]]
    settled: int = 0


class Dijkstra(Generic[V, W]):
    """Shortest path engine over an immutable snapshot of vertices.

    Args:
        vertices: Vertex references; each gets a dense index in iteration
            order. Edges are not inspected until a query runs.
        weight_type: Weight class providing ``zero()`` and ``infinity()``.
            Edge weights must be instances of it; for ``ScalarWeight``, bare
            numbers are accepted as well.
        config: Policies for unknown and duplicate vertices.

    Raises:
        DuplicateVertexError: If two references compare equal and the config
            uses ``DuplicateVertexPolicy.RAISE``.
    """

    def __init__(
        self,
        vertices: Iterable[V],
        weight_type: Type[W] = ScalarWeight,  # type: ignore[assignment]
        config: Optional[EngineConfig] = None,
    ) -> None:
        self._config = config or DEFAULT_ENGINE_CONFIG
        self._weight_type = weight_type
        self._graph: List[V] = list(vertices)
        self._index: Dict[V, int] = {}

        for i, vertex in enumerate(self._graph):
            first = self._index.get(vertex)
            if first is not None:
                if self._config.duplicate_vertex == DuplicateVertexPolicy.RAISE:
                    raise DuplicateVertexError(vertex, first, i)
                logger.warning(
                    "Vertex %r at position %d overrides the equal vertex at "
                    "position %d; the earlier one becomes unreachable.",
                    vertex,
                    i,
                    first,
                )
            self._index[vertex] = i

        logger.debug(
            "Indexed %d vertices (%d distinct)", len(self._graph), len(self._index)
        )

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def weight_type(self) -> Type[W]:
        return self._weight_type

    @property
    def vertices(self) -> Tuple[V, ...]:
        """Vertex references in index order, duplicates included."""
        return tuple(self._graph)

    def __len__(self) -> int:
        return len(self._graph)

    def __contains__(self, vertex: object) -> bool:
        try:
            return vertex in self._index
        except TypeError:
            return False

    def index_of(self, vertex: V) -> int:
        """Return the dense index assigned to ``vertex``.

        Raises:
            UnknownVertexError: If the vertex was not indexed.
        """
        try:
            return self._index[vertex]
        except (KeyError, TypeError):
            raise UnknownVertexError(vertex) from None

    def find_shortest_path(
        self, starts: Iterable[V], ends: Iterable[V]
    ) -> ShortestPath[V, W]:
        """Find the lightest path from any start vertex to any end vertex.

        Args:
            starts: Candidate origins. Unknown vertices are dropped or
                rejected according to the config.
            ends: Acceptable destinations, filtered the same way.

        Returns:
            ShortestPath whose first vertex is a start and last vertex is an
            end. A vertex in both sets yields a one-vertex path of weight
            ``zero()``.

        Raises:
            NoPathFoundError: If no start survives filtering, or no end is
                reachable.
            UnknownVertexError: If a start/end vertex is unknown under
                ``UnknownVertexPolicy.RAISE``, or an edge targets a vertex
                that was never indexed.
        """
        start_set = self._resolve(starts, "start")
        end_set = self._resolve(ends, "end")
        state = self._new_state(start_set)

        for entry in self._settle(state):
            if entry.index in end_set:
                path = self._reconstruct(entry.index, start_set, state.backpointers)
                logger.debug(
                    "Reached %r with weight %r after settling %d vertices",
                    path[-1],
                    entry.weight,
                    state.settled,
                )
                return ShortestPath(path, entry.weight)

        logger.debug("No path found after settling %d vertices", state.settled)
        if not start_set:
            raise NoPathFoundError("No start vertex is part of the graph.")
        raise NoPathFoundError(
            "No end vertex is reachable from the start vertices.",
            settled=state.settled,
        )

    def shortest_weights(self, starts: Iterable[V]) -> Dict[V, W]:
        """Compute the minimal weight from the start set to every reachable vertex.

        Args:
            starts: Candidate origins, filtered like in ``find_shortest_path``.

        Returns:
            Mapping of each reachable vertex to its final weight, in settling
            order. Unreachable vertices are absent.
        """
        start_set = self._resolve(starts, "start")
        state = self._new_state(start_set)
        return {self._graph[entry.index]: entry.weight for entry in self._settle(state)}

    def _resolve(self, vertices: Iterable[V], role: str) -> Set[int]:
        indices: Set[int] = set()
        for vertex in vertices:
            try:
                index = self._index.get(vertex)
            except TypeError:
                # Unhashable values cannot be graph vertices
                index = None
            if index is None:
                if self._config.unknown_vertex == UnknownVertexPolicy.RAISE:
                    raise UnknownVertexError(vertex, role)
                logger.debug("Ignoring unknown %s vertex %r", role, vertex)
                continue
            indices.add(index)
        return indices

    def _new_state(self, start_set: Set[int]) -> _TraversalState[W]:
        size = len(self._graph)
        state = _TraversalState(
            weights=[self._weight_type.infinity() for _ in range(size)],
            visited=[False] * size,
            backpointers=[NO_PREDECESSOR] * size,
            frontier=[],
        )
        zero = self._weight_type.zero()
        for index in start_set:
            state.weights[index] = zero
            push(state.frontier, zero, index)
        return state

    def _settle(self, state: _TraversalState[W]) -> Iterator[FrontierEntry[W]]:
        """Yield vertices in final-weight order, relaxing each after it is yielded.

        A consumer that stops iterating leaves the last yielded vertex
        unexpanded.
        """
        while True:
            entry = pop_unvisited(state.frontier, state.visited)
            if entry is None:
                return
            state.settled += 1
            yield entry

            current = entry.index
            state.visited[current] = True
            for edge in self._graph[current].edges():  # type: ignore[attr-defined]
                target = self._target_index(edge)
                if state.visited[target]:
                    continue
                candidate = entry.weight.add(self._edge_weight(edge))
                if candidate < state.weights[target]:
                    state.weights[target] = candidate
                    state.backpointers[target] = current
                    push(state.frontier, candidate, target)

    def _target_index(self, edge: Edge[W]) -> int:
        target = edge.target
        index = self._index.get(target)
        if index is None:
            raise UnknownVertexError(target, "edge target")
        return index

    def _edge_weight(self, edge: Edge[W]) -> W:
        weight = edge.weight
        if isinstance(weight, self._weight_type):
            return weight
        if self._weight_type is ScalarWeight:
            return ScalarWeight.coerce(weight)  # type: ignore[return-value]
        raise TypeError(
            f"Edge weight {weight!r} is not a {self._weight_type.__name__}."
        )

    def _reconstruct(
        self, terminal: int, start_set: Set[int], backpointers: List[int]
    ) -> Tuple[V, ...]:
        route: List[V] = []
        current = terminal
        while current not in start_set:
            route.append(self._graph[current])
            current = backpointers[current]
        route.append(self._graph[current])
        route.reverse()
        return tuple(route)
