"""Integer-indexed graph using linked incidence lists.

Vertices are not objects.  A vertex is an index into the ``_heads``
array, and it exists once it has appeared as an endpoint of some edge.
Each slot holds the head of a singly linked chain of Edge records:

    AdjList
      0 -> Edge(1) -> Edge(3)
      1 -> Edge(2) -> Edge(3)
      2 -> Edge(0)

New edges are pushed onto the head of the chain, so walking a slot
visits its edges most-recent-first.  An undirected graph stores every
logical edge {a, b} as two physical records, a -> b and b -> a, and
both count towards edge_count.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

log = logging.getLogger(__name__)


class InvalidVertexError(ValueError):
    """Raised when a vertex index is negative or not an integer."""

    def __init__(self, vertex: object) -> None:
        self.vertex = vertex
        super().__init__(
            f"Invalid vertex {vertex!r}: vertices are non-negative integers"
        )


@dataclass(slots=True)
class Edge:
    """One outgoing edge record in a vertex's incidence list."""
    dest: int
    weight: int = 0        # stored, never used by the algorithms here
    next: Edge | None = None


def _check_vertex(v: object) -> int:
    # bool is an int subclass, but True/False are never meant as vertices
    if isinstance(v, bool) or not isinstance(v, int) or v < 0:
        raise InvalidVertexError(v)
    return v


class AdjList:
    """Adjacency list over vertices 0..N-1.

    The backing arrays grow on demand as edges name larger indices.
    vertex_count and edge_count are running totals, so both are O(1).

    Not thread-safe: callers must serialize mutation.
    """

    __slots__ = ("_heads", "_seen", "_directed", "_edge_count", "_vertex_count")

    def __init__(self, directed: bool = False) -> None:
        self._heads: list[Edge | None] = []
        self._seen: list[bool] = []
        self._directed = directed
        self._edge_count = 0
        self._vertex_count = 0

    # ---- mutation --------------------------------------------------------

    def add_edge(self, x: int, y: int, weight: int = 0) -> None:
        """Add the edge x -> y, and also y -> x when undirected.

        Raises InvalidVertexError if either endpoint is negative.  Both
        endpoints are checked before anything is written.
        """
        _check_vertex(x)
        _check_vertex(y)
        self._insert(x, y, weight)
        if not self._directed:
            self._insert(y, x, weight)

    def _insert(self, x: int, y: int, weight: int) -> None:
        top = max(x, y)
        if top >= len(self._heads):
            self._grow(top)
        self._heads[x] = Edge(y, weight, self._heads[x])
        self._edge_count += 1
        for v in (x, y):
            if not self._seen[v]:
                self._seen[v] = True
                self._vertex_count += 1

    def _grow(self, index: int) -> None:
        """Extend both arrays so *index* is a valid slot."""
        extra = index + 1 - len(self._heads)
        log.debug(
            "growing adjacency arrays from %d to %d slots",
            len(self._heads), index + 1,
        )
        heads_ext: list[Edge | None] = [None] * extra
        seen_ext = [False] * extra
        old_len = len(self._seen)
        self._seen.extend(seen_ext)
        try:
            self._heads.extend(heads_ext)
        except MemoryError:
            # keep len(_heads) == len(_seen)
            del self._seen[old_len:]
            raise

    # ---- queries ---------------------------------------------------------

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        """Physical edge records; an undirected edge counts twice."""
        return self._edge_count

    @property
    def capacity(self) -> int:
        """Number of slots in the backing arrays (the scanned index range)."""
        return len(self._heads)

    def has_vertex(self, v: int) -> bool:
        return 0 <= v < len(self._seen) and self._seen[v]

    def incident(self, v: int) -> Iterator[Edge]:
        """Walk *v*'s edge records head first (newest first)."""
        if not 0 <= v < len(self._heads):
            return
        e = self._heads[v]
        while e is not None:
            yield e
            e = e.next

    def neighbors(self, v: int) -> list[int]:
        return [e.dest for e in self.incident(v)]

    def vertices(self) -> Iterator[int]:
        """Seen vertex indices in ascending order."""
        return (v for v, seen in enumerate(self._seen) if seen)

    def edges(self) -> Iterator[tuple[int, int, int]]:
        """Yield (src, dest, weight) for every stored record."""
        for src in range(len(self._heads)):
            for e in self.incident(src):
                yield src, e.dest, e.weight

    def components(self) -> list[int]:
        """Component id per vertex index; see connected_components()."""
        from adjgraph.components import connected_components

        return connected_components(self)

    def render(self, *, strict: bool = False) -> str:
        """DOT description of the graph; see to_dot()."""
        from adjgraph.render import to_dot

        return to_dot(self, strict=strict)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, v: object) -> bool:
        return (
            isinstance(v, int) and not isinstance(v, bool)
            and self.has_vertex(v)
        )

    def __iter__(self) -> Iterator[int]:
        return self.vertices()

    def __len__(self) -> int:
        return self._vertex_count

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return (
            f"AdjList({kind}, vertices={self._vertex_count}, "
            f"edges={self._edge_count})"
        )
