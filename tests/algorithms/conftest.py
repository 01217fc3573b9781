"""Sample graphs shared by the algorithm tests."""

import pytest

from subway.graph.arena import VertexArena


@pytest.fixture
def subway1():
    # Weights:
    #        [24]
    #   S─────────►B
    #   │ \
    #   │  \[20]
    #   │[3]\
    #   ▼    ▼
    #   C───►D
    #    [12]
    arena = VertexArena()
    arena.add_vertices(["S", "B", "C", "D"])
    arena.add_edge("S", "B", 24)
    arena.add_edge("S", "C", 3)
    arena.add_edge("S", "D", 20)
    arena.add_edge("C", "D", 12)
    return arena


@pytest.fixture
def square1():
    # Weights:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►D─────────┘
    arena = VertexArena()
    arena.add_vertices(["A", "B", "C", "D"])
    arena.add_edge("A", "B", 1)
    arena.add_edge("B", "C", 1)
    arena.add_edge("A", "D", 2)
    arena.add_edge("D", "C", 2)
    return arena


@pytest.fixture
def two_islands():
    # A ⇄ B  and  X ⇄ Y, nothing between the pairs
    arena = VertexArena()
    arena.add_vertices(["A", "B", "X", "Y"])
    arena.add_edge("A", "B", 1)
    arena.add_edge("B", "A", 1)
    arena.add_edge("X", "Y", 1)
    arena.add_edge("Y", "X", 1)
    return arena


@pytest.fixture
def line_with_cycle():
    # A -[1]-> B -[1]-> C -[1]-> D, with a back edge C -[0]-> A and a self-loop on B
    arena = VertexArena()
    arena.add_vertices(["A", "B", "C", "D"])
    arena.add_edge("A", "B", 1)
    arena.add_edge("B", "B", 0)
    arena.add_edge("B", "C", 1)
    arena.add_edge("C", "A", 0)
    arena.add_edge("C", "D", 1)
    return arena


@pytest.fixture
def multi_source1():
    # Two origins feeding two sinks:
    #   P -[5]-> M -[1]-> T1
    #   Q -[2]-> M
    #   Q -[9]-> T2
    #   P -[4]-> T2
    arena = VertexArena()
    arena.add_vertices(["P", "Q", "M", "T1", "T2"])
    arena.add_edge("P", "M", 5)
    arena.add_edge("Q", "M", 2)
    arena.add_edge("M", "T1", 1)
    arena.add_edge("Q", "T2", 9)
    arena.add_edge("P", "T2", 4)
    return arena
