from __future__ import annotations

import logging
from collections import deque

from .graph import Graph, GraphError


def _kahn_order(graph: Graph) -> list[int]:
    """Run Kahn's algorithm on a copy of the in-degrees.

    Vertices are seeded and released in ascending id order so that the
    result is stable across runs.  The graph's own degree counters are
    left untouched.
    """
    indeg = graph.in_degrees()
    q: deque[int] = deque(v for v in graph.vertex_ids() if indeg[v] == 0)
    order: list[int] = []
    while q:
        cur = q.popleft()
        order.append(cur)
        for e in graph.vertices[cur].edges:
            indeg[e.to] -= 1
            if indeg[e.to] == 0:
                q.append(e.to)
    return order


def topological_order(graph: Graph) -> list[int] | None:
    """Return a topological ordering of a directed graph or None on cycle."""
    if not graph.directed:
        raise GraphError("Topological order is only defined for directed graphs")
    order = _kahn_order(graph)
    if len(order) != graph.n:
        return None
    return order


def detect_directed_cycle(graph: Graph) -> bool:
    processed = len(_kahn_order(graph))
    logging.debug(f"Topological pass processed {processed}/{graph.n} vertices")
    return processed != graph.n


def detect_undirected_cycle(graph: Graph, root: int) -> bool:
    """Depth-first search from *root* with parent tracking.

    Reaching an already discovered vertex that is not the current vertex's
    parent closes a cycle.  Parallel edges and self loops count.
    """
    if graph.discovered[root]:
        return False
    graph.discovered[root] = True
    stack = [(root, iter(graph.vertices[root].edges))]
    while stack:
        v, edges = stack[-1]
        for e in edges:
            if not graph.discovered[e.to]:
                graph.parent[e.to] = v
                graph.discovered[e.to] = True
                stack.append((e.to, iter(graph.vertices[e.to].edges)))
                break
            if graph.parent[v] != e.to:
                logging.debug(f"Edge {v} -> {e.to} closes a cycle")
                return True
        else:
            graph.processed[v] = True
            stack.pop()
    return False


def has_cycle(graph: Graph) -> bool:
    """Return True if *graph* contains at least one cycle.

    Clears the traversal markers first.  Directed graphs are checked with a
    topological pass, undirected graphs with a parent-tracking DFS from
    every undiscovered root.
    """
    if graph.n == 0:
        return False
    graph.unvisit()
    if graph.directed:
        return detect_directed_cycle(graph)
    return any(
        detect_undirected_cycle(graph, v) for v in graph.vertex_ids() if not graph.discovered[v]
    )
