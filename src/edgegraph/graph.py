from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

MAX_VERTICES = 10000


class GraphError(Exception):
    """Raised when a graph is built or loaded from invalid data."""


class VertexRangeError(GraphError, IndexError):
    """Raised when a vertex id or vertex count falls outside the allowed range."""


class GraphInputError(GraphError, ValueError):
    """Raised when an edge-list stream cannot be parsed."""


class TraversalStrategy(Enum):
    DFS = "dfs"
    BFS = "bfs"


@dataclass(frozen=True)
class Edge:
    to: int
    weight: int = 0


@dataclass
class Vertex:
    in_degree: int = 0
    out_degree: int = 0
    edges: list[Edge] = field(default_factory=list)

    def neighbors(self) -> list[int]:
        return [e.to for e in self.edges]


class Graph:
    """Adjacency-list graph over vertex ids ``1..n``.

    Index 0 of every per-vertex list is allocated but never used, so ids
    can be used directly as indices.  The ``discovered``/``processed``
    markers and ``parent`` pointers are shared by every algorithm and are
    only cleared by :meth:`unvisit`.
    """

    def __init__(self, n: int, directed: bool, max_vertices: int = MAX_VERTICES):
        if n < 0 or n > max_vertices:
            raise VertexRangeError(f"Vertex count {n} out of range [0, {max_vertices}]")
        self.n = n
        self.directed = directed
        self.vertices: list[Vertex] = [Vertex() for _ in range(n + 1)]
        self.discovered: list[bool] = [False] * (n + 1)
        self.processed: list[bool] = [False] * (n + 1)
        self.parent: list[int] = [-1] * (n + 1)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph(n={self.n}, {kind}, edges={self.edge_count()})"

    def is_valid(self, v: int | None) -> bool:
        return v is not None and 1 <= v <= self.n

    def check_vertex(self, v: int) -> None:
        if not self.is_valid(v):
            raise VertexRangeError(f"Vertex {v} out of range [1, {self.n}]")

    def vertex_ids(self) -> range:
        return range(1, self.n + 1)

    def add_edge(self, x: int, y: int, weight: int = 0) -> None:
        """Append the arc ``x -> y``; degrees are only tracked for directed graphs."""
        self.check_vertex(x)
        self.check_vertex(y)
        self.vertices[x].edges.append(Edge(to=y, weight=weight))
        if self.directed:
            self.vertices[x].out_degree += 1
            self.vertices[y].in_degree += 1

    def neighbors(self, v: int) -> list[int]:
        self.check_vertex(v)
        return self.vertices[v].neighbors()

    def edge_count(self) -> int:
        return sum(len(vertex.edges) for vertex in self.vertices)

    def in_degrees(self) -> list[int]:
        return [vertex.in_degree for vertex in self.vertices]

    def unvisit(self) -> None:
        """Clear discovered/processed markers and parent pointers."""
        self.discovered = [False] * (self.n + 1)
        self.processed = [False] * (self.n + 1)
        self.parent = [-1] * (self.n + 1)

    def dfs(self, start: int | None = None) -> Iterator[int]:
        return self._cover(start, self._walk_dfs)

    def bfs(self, start: int | None = None) -> Iterator[int]:
        return self._cover(start, self._walk_bfs)

    def walk(self, root: int, strategy: TraversalStrategy = TraversalStrategy.DFS) -> Iterator[int]:
        """Yield the vertices reachable from *root* that are not yet discovered."""
        self.check_vertex(root)
        if strategy is TraversalStrategy.BFS:
            return self._walk_bfs(root)
        return self._walk_dfs(root)

    def _cover(self, start, walker) -> Iterator[int]:
        if self.is_valid(start):
            yield from walker(start)
        elif start is not None:
            logging.debug(f"Ignoring start vertex {start}: out of range [1, {self.n}]")
        for v in self.vertex_ids():
            if not self.discovered[v]:
                yield from walker(v)

    def _walk_dfs(self, root: int) -> Iterator[int]:
        # Explicit stack of (vertex, remaining neighbors) keeps recursive pre-order.
        if self.discovered[root]:
            return
        self.discovered[root] = True
        yield root
        stack = [(root, iter(self.vertices[root].edges))]
        while stack:
            v, edges = stack[-1]
            for e in edges:
                if not self.discovered[e.to]:
                    self.discovered[e.to] = True
                    yield e.to
                    stack.append((e.to, iter(self.vertices[e.to].edges)))
                    break
            else:
                self.processed[v] = True
                stack.pop()

    def _walk_bfs(self, root: int) -> Iterator[int]:
        if self.discovered[root]:
            return
        self.discovered[root] = True
        q: deque[int] = deque([root])
        while q:
            v = q.popleft()
            yield v
            self.processed[v] = True
            for e in self.vertices[v].edges:
                if not self.discovered[e.to]:
                    self.discovered[e.to] = True
                    q.append(e.to)
