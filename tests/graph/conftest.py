"""Shared fixtures for adjacency-list graph tests."""
from __future__ import annotations

import pytest

from adjgraph.adjacency import AdjList

SIX_VERTEX_EDGES = [
    (0, 2), (1, 3), (1, 4), (4, 5), (5, 2), (4, 2), (2, 3), (0, 5),
]

TWO_TRIANGLE_EDGES = [
    (0, 2), (1, 2), (1, 3), (2, 3),
    (4, 5), (5, 6), (6, 4),
]


@pytest.fixture
def empty_digraph() -> AdjList:
    return AdjList(directed=True)


@pytest.fixture
def empty_graph() -> AdjList:
    return AdjList(directed=False)


@pytest.fixture
def six_vertex_digraph() -> AdjList:
    """Directed graph, 6 vertices, 8 edges."""
    g = AdjList(directed=True)
    for x, y in SIX_VERTEX_EDGES:
        g.add_edge(x, y)
    return g


@pytest.fixture
def two_triangles() -> AdjList:
    """
    Undirected: {0, 1, 2, 3} joined through 2, and triangle {4, 5, 6}.
    """
    g = AdjList(directed=False)
    for x, y in TWO_TRIANGLE_EDGES:
        g.add_edge(x, y)
    return g
