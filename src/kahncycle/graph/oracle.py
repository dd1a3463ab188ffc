"""Independent cycle search using DFS three-color marking.

The three colors:
  WHITE  -- vertex not yet visited
  GRAY   -- vertex is on the current DFS path
  BLACK  -- vertex fully explored (all descendants visited)

An edge to a GRAY vertex is a back edge and closes a cycle.  This
shares no code with the Kahn-based detector, which makes it a useful
cross-check: both must agree on whether a graph is cyclic, and any
witness the detector reports must pass is_cycle().
"""
from __future__ import annotations

from typing import Sequence

from kahncycle.graph.matrix import AdjacencyMatrix

WHITE, GRAY, BLACK = 0, 1, 2


def find_cycle_dfs(graph: AdjacencyMatrix) -> list[int] | None:
    """Return a closed cycle path [v0, v1, ..., vk, v0], or None.

    Iterative, so deep chains do not hit the recursion limit.
    """
    n = graph.vertex_count
    color = [WHITE] * n
    parent: list[int | None] = [None] * n

    for root in range(n):
        if color[root] != WHITE:
            continue
        color[root] = GRAY
        # each frame is (vertex, index of the next successor to try)
        stack: list[tuple[int, int]] = [(root, 0)]
        while stack:
            node, i = stack[-1]
            succs = graph.successors(node)
            if i == len(succs):
                color[node] = BLACK
                stack.pop()
                continue
            stack[-1] = (node, i + 1)
            succ = succs[i]
            if color[succ] == GRAY:
                # back edge node -> succ; walk parents from node up to succ
                path = [node]
                cur = node
                while cur != succ:
                    cur = parent[cur]  # type: ignore[assignment]
                    path.append(cur)
                path.reverse()
                path.append(succ)
                return path
            if color[succ] == WHITE:
                parent[succ] = node
                color[succ] = GRAY
                stack.append((succ, 0))
    return None


def has_cycle_dfs(graph: AdjacencyMatrix) -> bool:
    return find_cycle_dfs(graph) is not None


def is_cycle(graph: AdjacencyMatrix, vertices: Sequence[int]) -> bool:
    """True iff *vertices* is a non-empty directed cycle in *graph*.

    Consecutive vertices must be joined by an edge, and the last vertex
    must have an edge back to the first.  The closing vertex is not
    repeated in *vertices*.
    """
    if not vertices:
        return False
    n = graph.vertex_count
    if any(not 0 <= v < n for v in vertices):
        return False
    if len(set(vertices)) != len(vertices):
        return False
    k = len(vertices)
    return all(
        graph.has_edge(vertices[i], vertices[(i + 1) % k]) for i in range(k)
    )
