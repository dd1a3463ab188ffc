"""Directed graph stored as a validated square 0/1 adjacency matrix.

Vertices are the integers 0..N-1.  Cell (i, j) is set iff there is an
edge i -> j.  Self-loops are allowed; parallel edges are not
representable, so the graph is never a multigraph.

The matrix is validated once, at construction, and never changes
afterwards.  Successor and predecessor lists are precomputed in
ascending index order so every consumer sees the same edge order that
a row-major scan of the matrix would produce.
"""
from __future__ import annotations

import numbers
from typing import Iterable, Iterator, Mapping, Sequence


class InvalidGraphError(ValueError):
    """Raised when input cannot be interpreted as a square 0/1 matrix."""


def _cell(value: object, row: int, col: int) -> bool:
    # bool is Integral, and so are numpy integer scalars
    if isinstance(value, numbers.Integral) and value in (0, 1):
        return bool(value)
    raise InvalidGraphError(
        f"Cell ({row}, {col}) is {value!r}; expected 0 or 1"
    )


class AdjacencyMatrix:
    """Immutable N x N adjacency matrix of a directed graph.

    Args:
        rows: a sequence of N sequences, each of length N, holding 0/1
            (or False/True) values.

    Raises InvalidGraphError if the rows do not form a square matrix or
    any cell is not 0/1.
    """

    __slots__ = ("_cells", "_succ", "_pred")

    def __init__(self, rows: Iterable[Sequence[object]]) -> None:
        try:
            raw = list(rows)
        except TypeError:
            raise InvalidGraphError(
                f"Expected a sequence of rows, got {type(rows).__name__}"
            ) from None

        n = len(raw)
        cells: list[tuple[bool, ...]] = []
        for i, row in enumerate(raw):
            if isinstance(row, (str, bytes)) or not hasattr(row, "__len__"):
                raise InvalidGraphError(
                    f"Row {i} is {type(row).__name__}, not a sequence"
                )
            if len(row) != n:
                raise InvalidGraphError(
                    f"Matrix is not square: row {i} has {len(row)} "
                    f"column(s), expected {n}"
                )
            cells.append(tuple(_cell(v, i, j) for j, v in enumerate(row)))

        self._cells: tuple[tuple[bool, ...], ...] = tuple(cells)
        self._succ: tuple[tuple[int, ...], ...] = tuple(
            tuple(j for j in range(n) if cells[i][j]) for i in range(n)
        )
        self._pred: tuple[tuple[int, ...], ...] = tuple(
            tuple(i for i in range(n) if cells[i][j]) for j in range(n)
        )

    # ---- alternate constructors -----------------------------------------

    @classmethod
    def from_edges(
        cls, vertex_count: int, edges: Iterable[tuple[int, int]]
    ) -> AdjacencyMatrix:
        """Build a matrix with *vertex_count* vertices from (src, dst) pairs.

        Repeated edges collapse into one.
        """
        if vertex_count < 0:
            raise InvalidGraphError(
                f"Vertex count must be >= 0, got {vertex_count}"
            )
        rows = [[0] * vertex_count for _ in range(vertex_count)]
        for src, dst in edges:
            for v in (src, dst):
                if not isinstance(v, numbers.Integral) or not 0 <= v < vertex_count:
                    raise InvalidGraphError(
                        f"Edge {src!r} -> {dst!r} references a vertex "
                        f"outside 0..{vertex_count - 1}"
                    )
            rows[src][dst] = 1
        return cls(rows)

    @classmethod
    def from_successors(
        cls,
        successors: Mapping[int, Iterable[int]],
        vertex_count: int | None = None,
    ) -> AdjacencyMatrix:
        """Build a matrix from an adjacency list {vertex: successors}.

        When *vertex_count* is omitted it is one past the largest vertex
        mentioned as a key or a successor.
        """
        edges = [(src, dst) for src, dsts in successors.items() for dst in dsts]
        mentioned = [v for edge in edges for v in edge] + list(successors)
        for v in mentioned:
            if not isinstance(v, numbers.Integral):
                raise InvalidGraphError(f"Vertex {v!r} is not an integer index")
        if vertex_count is None:
            vertex_count = max(mentioned) + 1 if mentioned else 0
        return cls.from_edges(vertex_count, edges)

    # ---- queries ---------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return len(self._cells)

    @property
    def edge_count(self) -> int:
        return sum(len(s) for s in self._succ)

    def has_edge(self, src: int, dst: int) -> bool:
        return self._cells[src][dst]

    def successors(self, vertex: int) -> tuple[int, ...]:
        """Targets of edges leaving *vertex*, ascending."""
        return self._succ[vertex]

    def predecessors(self, vertex: int) -> tuple[int, ...]:
        """Sources of edges entering *vertex*, ascending."""
        return self._pred[vertex]

    def in_degrees(self) -> list[int]:
        """A fresh, caller-owned list of in-degrees indexed by vertex."""
        return [len(p) for p in self._pred]

    def edges(self) -> Iterator[tuple[int, int]]:
        for src, dsts in enumerate(self._succ):
            for dst in dsts:
                yield src, dst

    def rows(self) -> list[list[int]]:
        """The matrix as plain 0/1 integer rows."""
        return [[int(c) for c in row] for row in self._cells]

    # ---- dunder ----------------------------------------------------------

    def __len__(self) -> int:
        return self.vertex_count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyMatrix):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return (
            f"AdjacencyMatrix(vertices={self.vertex_count}, "
            f"edges={self.edge_count})"
        )
