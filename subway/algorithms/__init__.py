"""Shortest path algorithms and the contracts they operate on."""

from subway.algorithms.contracts import Edge, Vertex
from subway.algorithms.dijkstra import Dijkstra, ShortestPath
from subway.algorithms.frontier import FrontierEntry
from subway.algorithms.weight import ScalarWeight, Weight

__all__ = [
    "Dijkstra",
    "Edge",
    "FrontierEntry",
    "ScalarWeight",
    "ShortestPath",
    "Vertex",
    "Weight",
]
