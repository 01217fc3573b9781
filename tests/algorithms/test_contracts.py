from dataclasses import dataclass

from subway.algorithms.contracts import Edge, Vertex
from subway.algorithms.weight import ScalarWeight
from subway.graph.arena import VertexArena


@dataclass(frozen=True)
class Road:
    target: str
    weight: ScalarWeight


class Town:
    def __init__(self, name):
        self.name = name

    def edges(self):
        return []


class Unhashable:
    __hash__ = None  # type: ignore[assignment]

    def edges(self):
        return []


def test_arena_types_satisfy_contracts():
    arena = VertexArena()
    a, b = arena.add_vertices(["A", "B"])
    edge = arena.add_edge(a, b, 2)
    assert isinstance(a, Vertex)
    assert isinstance(edge, Edge)


def test_structural_typing():
    assert isinstance(Town("x"), Vertex)
    assert isinstance(Road("x", ScalarWeight(1)), Edge)


def test_missing_capabilities():
    assert not isinstance(object(), Vertex)
    assert not isinstance(Town("x"), Edge)
    assert not isinstance(Unhashable(), Vertex)
