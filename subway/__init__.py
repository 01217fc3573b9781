"""subway: Dijkstra shortest paths over caller-defined graphs.

Vertices, edges and weights are supplied by the caller through small
capability contracts; the engine indexes a vertex snapshot once and answers
multi-source/multi-sink queries against it.

Example:
    from subway import VertexArena

    arena = VertexArena()
    s, b, c, d = arena.add_vertices("SBCD")
    arena.add_edge(s, b, 24)
    arena.add_edge(s, c, 3)
    arena.add_edge(s, d, 20)
    arena.add_edge(c, d, 12)

    path, weight = arena.engine().find_shortest_path([s], [d])
    # path == (s, c, d), weight == ScalarWeight(15)
"""

from __future__ import annotations

from subway import logging
from subway._version import __version__
from subway.algorithms import (
    Dijkstra,
    Edge,
    FrontierEntry,
    ScalarWeight,
    ShortestPath,
    Vertex,
    Weight,
)
from subway.config import (
    DuplicateVertexPolicy,
    EngineConfig,
    UnknownVertexPolicy,
)
from subway.exceptions import (
    DuplicateVertexError,
    NoPathFoundError,
    SubwayError,
    UnknownVertexError,
)
from subway.graph import ArenaEdge, ArenaVertex, VertexArena, from_networkx

__all__ = [
    "__version__",
    "logging",
    "ArenaEdge",
    "ArenaVertex",
    "Dijkstra",
    "DuplicateVertexError",
    "DuplicateVertexPolicy",
    "Edge",
    "EngineConfig",
    "FrontierEntry",
    "NoPathFoundError",
    "ScalarWeight",
    "ShortestPath",
    "SubwayError",
    "UnknownVertexError",
    "UnknownVertexPolicy",
    "Vertex",
    "VertexArena",
    "Weight",
    "from_networkx",
]
