"""Priority frontier for Dijkstra's relaxation loop.

The frontier is a plain ``heapq`` list of ``FrontierEntry`` items. Superseded
entries are never removed eagerly; ``pop_unvisited`` skips them when they
surface (lazy deletion). Order among equal weights depends on heap insertion
order and is not guaranteed.
"""

from __future__ import annotations

from dataclasses import dataclass
from heapq import heappop, heappush
from typing import Generic, List, Optional, Sequence, TypeVar

from subway.algorithms.weight import Weight

W = TypeVar("W", bound=Weight)


@dataclass(frozen=True)
class FrontierEntry(Generic[W]):
    """Tentative weight for a vertex index, min-ordered by weight only."""

    weight: W
    index: int

    def __lt__(self, other: FrontierEntry[W]) -> bool:
        return self.weight < other.weight


def push(frontier: List[FrontierEntry[W]], weight: W, index: int) -> None:
    heappush(frontier, FrontierEntry(weight, index))


def pop_unvisited(
    frontier: List[FrontierEntry[W]], visited: Sequence[bool]
) -> Optional[FrontierEntry[W]]:
    """Pop entries until one refers to an unvisited index.

    Args:
        frontier: Heap of entries, modified in place.
        visited: Visited flag per vertex index.

    Returns:
        The lightest unvisited entry, or None if the frontier is exhausted.
    """
    while frontier:
        entry = heappop(frontier)
        if not visited[entry.index]:
            return entry
    return None
