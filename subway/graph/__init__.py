"""Concrete graph types for the shortest path engine.

This package provides the arena-backed `VertexArena` (`arena`) and the
NetworkX adapter (`convert`).
"""

from subway.graph.arena import ArenaEdge, ArenaVertex, VertexArena
from subway.graph.convert import from_networkx

__all__ = ["ArenaEdge", "ArenaVertex", "VertexArena", "from_networkx"]
