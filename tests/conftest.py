# Fixtures shared across the test modules.

import pytest

from common import State
from util import Graph


class Vertex(State):
    """A named state over a plain adjacency dict {name: [(name, cost), ...]}."""

    def __init__(self, adjacency, name):
        self.adjacency = adjacency
        self.name = name

    def successors(self):
        return [Vertex(self.adjacency, to) for to, _ in self.adjacency.get(self.name, [])]

    def cost(self, successor):
        for to, cost in self.adjacency[self.name]:
            if to == successor.name:
                return cost
        raise ValueError(f"No edge from {self.name} to {successor.name}")

    def __eq__(self, other):
        return isinstance(other, Vertex) and self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return self.name


DIAMOND = {
    "A": [("B", 1.0), ("C", 5.0)],
    "B": [("D", 1.0)],
    "C": [("D", 1.0)],
    "D": [],
}


@pytest.fixture
def diamond():
    """A -> B (1) -> D (1) and A -> C (5) -> D (1); returns a name -> Vertex factory."""
    return lambda name: Vertex(DIAMOND, name)


def names(path):
    return [v.name for v in path]


@pytest.fixture
def grid_graph():
    """A 3x3 grid with unit-spaced coordinates and edges costing their length."""
    graph = Graph()
    for y in range(3):
        for x in range(3):
            graph.add_node(y * 3 + x + 1, x, y)
    for y in range(3):
        for x in range(3):
            here = y * 3 + x + 1
            if x < 2:
                graph.add_edge(here, here + 1, 1)
                graph.add_edge(here + 1, here, 1)
            if y < 2:
                graph.add_edge(here, here + 3, 1)
                graph.add_edge(here + 3, here, 1)
    # a long detour shortcut that is never worth taking
    graph.add_edge(1, 9, 10)
    return graph


PROBLEM = """Nodes:
1: (4,1)
2: (2,2)
3: (4,4)
4: (6,3)
5: (5,6)
6: (7,5)
Edges:
(2,1): 4
(3,1): 5
(1,3): 5
(2,3): 4
(3,2): 5
(4,1): 6
(1,4): 6
(4,3): 5
(3,5): 6
(5,3): 6
(4,5): 7
(5,4): 8
(6,3): 7
(3,6): 7
Origin:
2
Destinations:
5; 4
"""


@pytest.fixture
def problem_file(tmp_path):
    path = tmp_path / "problem.txt"
    path.write_text(PROBLEM)
    return path
