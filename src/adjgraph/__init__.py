"""In-memory adjacency-list graphs with components and DOT rendering."""

from adjgraph.adjacency import AdjList, Edge, InvalidVertexError
from adjgraph.components import bfs, component_count, connected_components
from adjgraph.render import to_dot

__all__ = [
    "AdjList",
    "Edge",
    "InvalidVertexError",
    "bfs",
    "component_count",
    "connected_components",
    "to_dot",
]
