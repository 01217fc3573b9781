"""Arena-backed graph satisfying the engine's vertex/edge contracts.

`VertexArena` keeps every vertex in one stable list and stores each edge as
the index of its destination, so vertices never hold references to each
other. Vertex names must be unique within an arena; adding a duplicate name
or an edge between unknown names raises ``ValueError``, in the same spirit as
a strict graph that never creates nodes implicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    Union,
)

from subway.algorithms.weight import ScalarWeight
from subway.logging import get_logger

if TYPE_CHECKING:
    from subway.algorithms.dijkstra import Dijkstra
    from subway.config import EngineConfig

logger = get_logger(__name__)

VertexName = Hashable


@dataclass(frozen=True)
class ArenaEdge:
    """Directed edge stored as a destination index into its arena.

    Attributes:
        arena: Arena that owns both endpoints.
        target_index: Position of the destination vertex in the arena.
        weight: Cost of traversing the edge.
    """

    arena: VertexArena
    target_index: int
    weight: ScalarWeight

    @property
    def target(self) -> ArenaVertex:
        return self.arena.at(self.target_index)

    def __repr__(self) -> str:
        return f"-{self.weight!r}> {self.target.name!r}"


class ArenaVertex:
    """Named vertex owned by a `VertexArena`.

    Two arena vertices are equal when they belong to the same arena and carry
    the same name.
    """

    __slots__ = ("_arena", "_index", "_name", "_out")

    def __init__(self, arena: VertexArena, index: int, name: VertexName) -> None:
        self._arena = arena
        self._index = index
        self._name = name
        self._out: List[Tuple[int, ScalarWeight]] = []

    @property
    def name(self) -> VertexName:
        return self._name

    @property
    def index(self) -> int:
        return self._index

    @property
    def degree(self) -> int:
        """Number of outgoing edges."""
        return len(self._out)

    def edges(self) -> Iterator[ArenaEdge]:
        for target_index, weight in self._out:
            yield ArenaEdge(self._arena, target_index, weight)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArenaVertex):
            return NotImplemented
        return self._arena is other._arena and self._name == other._name

    def __hash__(self) -> int:
        return hash((id(self._arena), self._name))

    def __repr__(self) -> str:
        return f"ArenaVertex({self._name!r})"


class VertexArena:
    """Stable, indexable store of named vertices and their outgoing edges.

    Example:
        >>> arena = VertexArena()
        >>> s, c = arena.add_vertices(["S", "C"])
        >>> _ = arena.add_edge(s, c, 3)
        >>> arena.engine().find_shortest_path([s], [c]).weight
        ScalarWeight(3)
    """

    def __init__(self) -> None:
        self._vertices: List[ArenaVertex] = []
        self._by_name: Dict[VertexName, int] = {}

    def add_vertex(self, name: VertexName) -> ArenaVertex:
        """Append a new vertex.

        Raises:
            ValueError: If a vertex with this name already exists.
        """
        if name in self._by_name:
            raise ValueError(f"Vertex '{name}' already exists in this arena.")
        vertex = ArenaVertex(self, len(self._vertices), name)
        self._by_name[name] = vertex.index
        self._vertices.append(vertex)
        return vertex

    def add_vertices(self, names: Iterable[VertexName]) -> List[ArenaVertex]:
        return [self.add_vertex(name) for name in names]

    def add_edge(
        self,
        src: Union[ArenaVertex, VertexName],
        dst: Union[ArenaVertex, VertexName],
        weight: Union[ScalarWeight, int, float] = 1,
    ) -> ArenaEdge:
        """Add a directed edge ``src -> dst``.

        Args:
            src: Source vertex or its name.
            dst: Destination vertex or its name.
            weight: Non-negative cost.

        Returns:
            The new edge.

        Raises:
            ValueError: If either endpoint is not in this arena, or the weight
                is negative or NaN.
        """
        source = self._own(src)
        target = self._own(dst)
        cost = ScalarWeight.coerce(weight)
        source._out.append((target.index, cost))
        return ArenaEdge(self, target.index, cost)

    def vertex(self, name: VertexName) -> ArenaVertex:
        """Return the vertex called ``name``.

        Raises:
            KeyError: If no such vertex exists.
        """
        try:
            return self._vertices[self._by_name[name]]
        except KeyError:
            raise KeyError(f"Vertex '{name}' does not exist.") from None

    def at(self, index: int) -> ArenaVertex:
        return self._vertices[index]

    def names(self) -> List[VertexName]:
        return [v.name for v in self._vertices]

    def engine(self, config: Optional[EngineConfig] = None) -> Dijkstra:
        """Build a shortest path engine over the arena's current vertices."""
        from subway.algorithms.dijkstra import Dijkstra

        logger.debug("Building engine over %d arena vertices", len(self))
        return Dijkstra(self._vertices, ScalarWeight, config)

    def _own(self, vertex: Union[ArenaVertex, VertexName]) -> ArenaVertex:
        if isinstance(vertex, ArenaVertex):
            if vertex._arena is not self:
                raise ValueError(f"{vertex!r} belongs to a different arena.")
            return vertex
        if vertex not in self._by_name:
            raise ValueError(f"Vertex '{vertex}' does not exist in this arena.")
        return self._vertices[self._by_name[vertex]]

    def __getitem__(self, name: VertexName) -> ArenaVertex:
        return self.vertex(name)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, ArenaVertex):
            return item._arena is self
        try:
            return item in self._by_name
        except TypeError:
            return False

    def __iter__(self) -> Iterator[ArenaVertex]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)
