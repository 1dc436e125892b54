"""Connected components via repeated breadth-first search.

The graph is treated as undirected no matter how it was built.  For an
undirected AdjList every edge is already stored in both directions, so
following outgoing records reaches the whole component.

The algorithm:
  1.  Scan vertex indices in ascending order.
  2.  For each index not yet discovered, BFS from it.  Everything the
      search reaches gets the current component number.
  3.  Increment the component number and keep scanning.

Component ids therefore start at 0 and follow the order of each
component's smallest index.  An index with no edges is a singleton.
Runs in O(V + E).
"""
from __future__ import annotations

from collections import deque

from adjgraph.adjacency import AdjList, InvalidVertexError, _check_vertex


def bfs(graph: AdjList, start: int) -> list[int]:
    """Return every index reachable from *start*, in BFS order.

    Each index appears once.  Raises InvalidVertexError if *start* is
    not an integer in the graph's index range.
    """
    _check_vertex(start)
    if start >= graph.capacity:
        raise InvalidVertexError(start)
    return _bfs(graph, start, [False] * graph.capacity)


def _bfs(graph: AdjList, start: int, discovered: list[bool]) -> list[int]:
    # marks into *discovered* in place, so repeated calls share one array
    discovered[start] = True
    q: deque[int] = deque([start])
    order: list[int] = []
    while q:
        v = q.popleft()
        order.append(v)
        for e in graph.incident(v):
            if not discovered[e.dest]:
                discovered[e.dest] = True
                q.append(e.dest)
    return order


def connected_components(graph: AdjList) -> list[int]:
    """Map each index in range(graph.capacity) to its component id."""
    n = graph.capacity
    comps = [0] * n
    discovered = [False] * n
    comp_num = 0
    for v in range(n):
        if discovered[v]:
            continue
        for x in _bfs(graph, v, discovered):
            comps[x] = comp_num
        comp_num += 1
    return comps


def component_count(graph: AdjList) -> int:
    comps = connected_components(graph)
    # ids are dense, so the highest id + 1 is the count
    return max(comps) + 1 if comps else 0
