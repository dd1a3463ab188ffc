"""Cycle detection on directed graphs given as adjacency matrices."""

from kahncycle.graph.cycle_detector import (
    Classification,
    CycleResult,
    detect_cycle,
)
from kahncycle.graph.matrix import AdjacencyMatrix, InvalidGraphError
from kahncycle.graph.oracle import find_cycle_dfs, has_cycle_dfs, is_cycle
from kahncycle.graph.topological import (
    CyclicDependencyError,
    topological_sort,
)

__all__ = [
    "AdjacencyMatrix",
    "Classification",
    "CycleResult",
    "CyclicDependencyError",
    "InvalidGraphError",
    "detect_cycle",
    "find_cycle_dfs",
    "has_cycle_dfs",
    "is_cycle",
    "topological_sort",
]
