"""NetworkX graph conversion.

Builds a `VertexArena` from an in-memory NetworkX graph so NetworkX users can
query it with the subway engine.

Example:
    >>> import networkx as nx
    >>> from subway.graph.convert import from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("S", "C", cost=3)
    >>> G.add_edge("C", "D", cost=12)
    >>> arena = from_networkx(G)
    >>> arena.engine().find_shortest_path([arena["S"]], [arena["D"]]).weight
    ScalarWeight(15)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from subway.graph.arena import VertexArena
from subway.logging import get_logger

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any

logger = get_logger(__name__)


def from_networkx(
    G: NxGraph,
    *,
    cost_attr: str = "cost",
    default_cost: Union[int, float] = 1,
    bidirectional: bool = False,
) -> VertexArena:
    """Convert a NetworkX graph into a `VertexArena`.

    Node names become arena vertex names in ``G.nodes`` order. Each NetworkX
    edge becomes one arena edge; parallel edges of multigraphs are kept as
    separate arena edges.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        cost_attr: Edge attribute holding the cost (default: "cost").
        default_cost: Cost used when the attribute is missing (default: 1).
        bidirectional: If True, also add the reverse of every edge. Undirected
            graphs always get both directions.

    Returns:
        A new arena mirroring ``G``.

    Raises:
        ValueError: If an edge cost is negative or NaN.
    """
    arena = VertexArena()
    arena.add_vertices(G.nodes)

    both_ways = bidirectional or not G.is_directed()
    edge_count = 0
    for u, v, data in G.edges(data=True):
        cost = data.get(cost_attr, default_cost)
        arena.add_edge(u, v, cost)
        edge_count += 1
        if both_ways and u != v:
            arena.add_edge(v, u, cost)
            edge_count += 1

    logger.debug(
        "Converted NetworkX graph: %d vertices, %d arena edges",
        len(arena),
        edge_count,
    )
    return arena
