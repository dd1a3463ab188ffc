"""Cycle detection via Kahn's algorithm plus predecessor tracing.

Kahn's algorithm repeatedly removes vertices whose in-degree is zero.
If every vertex is eventually removed the graph has a topological
order and is acyclic.  Vertices that are never removed still have
incoming edges from other never-removed vertices, so they contain at
least one cycle.

The algorithm:
  1.  Compute the in-degree of every vertex.
  2.  Seed a FIFO worklist with the zero in-degree vertices, ascending.
  3.  Pop u, count it, and for each successor v (ascending): decrement
      in_deg[v], record pred[v] = u, and enqueue v if in_deg[v] hits 0.
  4.  processed == N  ->  acyclic.
  5.  Otherwise trace pred[] backward from the lowest stuck vertex until
      a vertex repeats.  The repeated vertex lies on a cycle; walk pred[]
      once more around the loop and reverse it into edge order.

pred[] is not a spanning forest.  A vertex with several in-edges keeps
only the most recent writer, which is enough to recover *a* cycle but
not any particular one.  Callers must not depend on which witness is
returned when the graph has more than one cycle.

Step 3 never relaxes an edge whose source is stuck, so a stuck vertex
can end the pass with no predecessor (or with one outside the stuck
set).  Before tracing, the stuck subgraph is relaxed once more in the
same ascending order so every stuck vertex points at a stuck
predecessor and the backward walk cannot leave it.
"""
from __future__ import annotations

import enum
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Sequence, Union

from kahncycle.graph.matrix import AdjacencyMatrix

log = logging.getLogger(__name__)

GraphInput = Union[AdjacencyMatrix, Sequence[Sequence[object]]]


class Classification(enum.Enum):
    ACYCLIC = "acyclic"
    CYCLIC = "cyclic"


@dataclass(slots=True, frozen=True)
class CycleResult:
    """Outcome of a single detect_cycle() call."""
    classification: Classification
    vertex_count: int
    cycle: tuple[int, ...] | None = None   # forward order, last -> first closes it
    order: tuple[int, ...] = field(default_factory=tuple)
    remaining: tuple[int, ...] = field(default_factory=tuple)

    @property
    def has_cycle(self) -> bool:
        return self.classification is Classification.CYCLIC

    @property
    def closed_cycle(self) -> tuple[int, ...] | None:
        """The witness with its first vertex repeated at the end."""
        if self.cycle is None:
            return None
        return self.cycle + self.cycle[:1]


@dataclass(slots=True)
class _KahnPass:
    """Per-call working state; never shared between calls."""
    in_deg: list[int]
    pred: list[int | None]
    order: list[int]


def _as_matrix(graph: GraphInput) -> AdjacencyMatrix:
    if isinstance(graph, AdjacencyMatrix):
        return graph
    return AdjacencyMatrix(graph)


def _run_kahn(graph: AdjacencyMatrix) -> _KahnPass:
    n = graph.vertex_count
    state = _KahnPass(
        in_deg=graph.in_degrees(),
        pred=[None] * n,
        order=[],
    )
    in_deg, pred = state.in_deg, state.pred

    q: deque[int] = deque(v for v in range(n) if in_deg[v] == 0)
    while q:
        u = q.popleft()
        state.order.append(u)
        for v in graph.successors(u):
            in_deg[v] -= 1
            pred[v] = u
            if in_deg[v] == 0:
                q.append(v)
    return state


def _trace_witness(graph: AdjacencyMatrix, state: _KahnPass) -> tuple[int, ...]:
    in_deg, pred = state.in_deg, state.pred
    stuck = [v for v in range(graph.vertex_count) if in_deg[v] > 0]

    # relax the residual subgraph so pred[] stays inside it
    for u in stuck:
        for v in graph.successors(u):
            if in_deg[v] > 0:
                pred[v] = u

    seen: set[int] = set()
    current = stuck[0]
    while current not in seen:
        seen.add(current)
        current = pred[current]  # type: ignore[assignment]

    cycle_start = current
    path = [cycle_start]
    current = pred[cycle_start]  # type: ignore[assignment]
    while current != cycle_start:
        path.append(current)
        current = pred[current]  # type: ignore[assignment]
    path.reverse()
    return tuple(path)


def detect_cycle(graph: GraphInput) -> CycleResult:
    """Classify *graph* as acyclic or cyclic and produce a witness cycle.

    *graph* is an AdjacencyMatrix or raw 0/1 rows; raw rows are
    validated first and InvalidGraphError propagates before any work
    is done.

    When cyclic, ``cycle`` lists the witness in edge order: each vertex
    has an edge to the next and the last has an edge to the first.  A
    self-loop yields a one-vertex witness.
    """
    matrix = _as_matrix(graph)
    n = matrix.vertex_count
    if n == 0:
        return CycleResult(Classification.ACYCLIC, vertex_count=0)

    state = _run_kahn(matrix)
    log.debug("kahn pass processed %d of %d vertices", len(state.order), n)

    if len(state.order) == n:
        return CycleResult(
            Classification.ACYCLIC,
            vertex_count=n,
            order=tuple(state.order),
        )

    remaining = tuple(v for v in range(n) if state.in_deg[v] > 0)
    cycle = _trace_witness(matrix, state)
    log.debug("witness cycle %s among %d stuck vertices", cycle, len(remaining))
    return CycleResult(
        Classification.CYCLIC,
        vertex_count=n,
        cycle=cycle,
        order=tuple(state.order),
        remaining=remaining,
    )
