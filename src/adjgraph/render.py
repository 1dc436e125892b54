"""Graphviz DOT rendering for AdjList.

Output is one line per physical edge record.  An undirected graph
stores each edge twice, so "a -- b" and "b -- a" both show up:

    graph {
      0 -- 1;
      1 -- 0;
    }

Sources are emitted in ascending order and each source's edges in
list order (newest first).  The text depends only on the graph's
current state, so rendering twice without mutation gives the same
string.
"""
from __future__ import annotations

from adjgraph.adjacency import AdjList


def to_dot(graph: AdjList, *, strict: bool = False) -> str:
    """Build a DOT description of *graph*.

    With strict=True the header gains Graphviz's "strict" qualifier,
    which tells the layout engine to merge parallel edges.  The body
    is the same either way.
    """
    if graph.directed:
        kind, arrow = "digraph", "->"
    else:
        kind, arrow = "graph", "--"
    header = f"strict {kind}" if strict else kind

    parts = [f"{header} {{\n"]
    for src, dest, _weight in graph.edges():
        parts.append(f"  {src} {arrow} {dest};\n")
    parts.append("}")
    return "".join(parts)
