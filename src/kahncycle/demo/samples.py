"""Reference graphs shown by ``kahncycle demo``."""
from __future__ import annotations

# 0 -> 1, 1 -> 2, 1 -> 3, 3 -> 1.  The back edge 3 -> 1 closes 1 -> 3 -> 1.
CYCLIC = [
    [0, 1, 0, 0],
    [0, 0, 1, 1],
    [0, 0, 0, 0],
    [0, 1, 0, 0],
]

# diamond: 0 -> {1, 2} -> 3
ACYCLIC = [
    [0, 1, 1, 0],
    [0, 0, 0, 1],
    [0, 0, 0, 1],
    [0, 0, 0, 0],
]

# cycle 0 -> 1 -> 2 -> 0 feeding an acyclic tail 2 -> 3 -> 4
CYCLE_WITH_TAIL = [
    [0, 1, 0, 0, 0],
    [0, 0, 1, 0, 0],
    [1, 0, 0, 1, 0],
    [0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0],
]

SAMPLE_GRAPHS: list[tuple[str, list[list[int]]]] = [
    ("Cyclic Graph", CYCLIC),
    ("Acyclic Graph", ACYCLIC),
    ("A different Cyclic Graph", CYCLE_WITH_TAIL),
]
