"""Text rendering of matrices and detection results.

Formats AdjacencyMatrix and CycleResult data for terminal output.
Results are rendered as given; nothing here re-runs any graph logic.
"""
from __future__ import annotations

from typing import Iterable

from kahncycle.graph.cycle_detector import CycleResult
from kahncycle.graph.matrix import AdjacencyMatrix

RULE = "-" * 25


def _arrow_path(vertices: Iterable[int]) -> str:
    return " -> ".join(str(v) for v in vertices)


def format_matrix(graph: AdjacencyMatrix) -> str:
    """The matrix as rows of space-separated 0/1 cells under a heading."""
    lines = ["Graph Adjacency Matrix:"]
    lines.extend(" ".join(str(c) for c in row) for row in graph.rows())
    lines.append(RULE)
    return "\n".join(lines)


def format_result(result: CycleResult) -> str:
    """Classification line, plus the closed witness path when cyclic."""
    if result.vertex_count == 0:
        return "Graph is empty."
    if not result.has_cycle:
        return "Result: Graph is ACYCLIC."
    return "\n".join([
        "Result: Graph is CYCLIC.",
        f"Vertices in a cycle: {_arrow_path(result.closed_cycle or ())}",
    ])


def format_order(order: Iterable[int]) -> str:
    return f"Topological order: {_arrow_path(order)}"
