import pytest

from weightedgraph.core.graph import WeightedGraph

DENSE = [
    [0, 1, 2, 0, 0],  # vertex 0 with 2 edges of weight 3
    [1, 0, 3, 0, 0],  #    "   1      2 "               4
    [2, 3, 0, 0, 0],  #    "   2      2 "               5
    [0, 0, 1, 0, 0],  #    "   3      1 "               1
    [0, 0, 0, 0, 0],  #    "   4      0 "               0
]

PROBABILITIES = {
    0: {"label": "A", 1: 0.4, 3: 0.6},
    1: {"label": "B", 0: 0.3, 2: 0.7},
    2: {"label": "C", 0: 0.5, 2: 0.5},
    3: {"label": "D", 0: 0.2, 1: 0.8},
}


@pytest.fixture
def dense_matrix():
    return [list(row) for row in DENSE]


@pytest.fixture
def dense_graph(dense_matrix):
    G = WeightedGraph()
    G.populate(dense_matrix)
    return G


@pytest.fixture
def probability_graph():
    G = WeightedGraph()
    G.populate({v: dict(nbrs) for v, nbrs in PROBABILITIES.items()}, "probability")
    return G


@pytest.fixture
def route_graph():
    """Directed A->B(4), A->C(3), B->D(10), C->D(2), D->F(11), E terminal."""
    G = WeightedGraph()
    G.populate(
        {
            "A": {"B": 4, "C": 3},
            "B": {"D": 10},
            "C": {"D": 2},
            "D": {"F": 11},
            "E": 7,
        }
    )
    return G
