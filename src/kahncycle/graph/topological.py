"""Topological sort on top of the Kahn pass used by detect_cycle.

The order is the one Kahn's algorithm produces with an ascending seed
and a FIFO worklist: zero in-degree vertices first, then vertices whose
only predecessors are those, and so on.  Ties break by vertex index,
so the result is deterministic for a given matrix.
"""
from __future__ import annotations

from kahncycle.graph.cycle_detector import GraphInput, detect_cycle


class CyclicDependencyError(Exception):
    """Raised when topological sort encounters a cycle."""

    def __init__(self, remaining_nodes: list[int], cycle: list[int]) -> None:
        self.remaining_nodes = remaining_nodes
        self.cycle = cycle
        path = " -> ".join(str(v) for v in cycle + cycle[:1])
        super().__init__(
            f"Cycle detected: {len(remaining_nodes)} vertex(es) cannot be "
            f"ordered, e.g. {path}"
        )


def topological_sort(graph: GraphInput) -> list[int]:
    """Return vertices in dependency order (sources first).

    Raises CyclicDependencyError if the graph contains a cycle.
    """
    result = detect_cycle(graph)
    if result.has_cycle:
        raise CyclicDependencyError(
            list(result.remaining), list(result.cycle or ())
        )
    return list(result.order)
