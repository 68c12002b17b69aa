from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from .graph import Graph, TraversalStrategy


@dataclass(frozen=True)
class Component:
    index: int
    root: int
    members: list[int]


def find_components(
    graph: Graph, strategy: TraversalStrategy = TraversalStrategy.DFS
) -> list[Component]:
    """Group vertices by reachability from ascending undiscovered roots.

    For an undirected graph these are the connected components.  For a
    directed graph edges are followed forwards only, so a vertex reached
    from an earlier root is never regrouped with a later one; use
    :func:`weak_components` for direction-agnostic grouping.
    """
    graph.unvisit()
    components: list[Component] = []
    for v in graph.vertex_ids():
        if not graph.discovered[v]:
            members = list(graph.walk(v, strategy))
            components.append(Component(index=len(components) + 1, root=v, members=members))
    return components


def weak_components(graph: Graph) -> list[Component]:
    """Weakly connected components, ignoring edge direction.

    Works on an undirected view built from the adjacency lists and leaves
    the graph's traversal markers alone.  Members are listed in BFS order.
    """
    undirected: list[list[int]] = [[] for _ in range(graph.n + 1)]
    for v in graph.vertex_ids():
        for e in graph.vertices[v].edges:
            undirected[v].append(e.to)
            undirected[e.to].append(v)

    seen = [False] * (graph.n + 1)
    components: list[Component] = []
    for root in graph.vertex_ids():
        if seen[root]:
            continue
        seen[root] = True
        q: deque[int] = deque([root])
        members: list[int] = []
        while q:
            cur = q.popleft()
            members.append(cur)
            for nxt in undirected[cur]:
                if not seen[nxt]:
                    seen[nxt] = True
                    q.append(nxt)
        components.append(Component(index=len(components) + 1, root=root, members=members))
    return components
