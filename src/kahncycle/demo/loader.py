"""Read adjacency matrices from disk.

Two formats:
  .json  -- a JSON array of arrays, e.g. [[0, 1], [0, 0]]
  other  -- plain text, one row per line, cells separated by
            whitespace and/or commas.  Blank lines and anything after
            '#' are ignored, so the output of format_matrix() minus its
            heading and rule loads back unchanged.

Both produce an AdjacencyMatrix; malformed content raises
InvalidGraphError.  I/O failures propagate as OSError.
"""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from kahncycle.graph.matrix import AdjacencyMatrix, InvalidGraphError

log = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s,]+")
# plain ASCII decimal without sign or leading zeros
_CELL = re.compile(r"0|[1-9][0-9]*")


def _parse_text(text: str) -> list[list[int]]:
    rows: list[list[int]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        row = []
        for token in _SEPARATORS.split(line):
            if not token:
                continue
            if not _CELL.fullmatch(token):
                raise InvalidGraphError(
                    f"Line {lineno}: {token!r} is not an integer cell"
                )
            row.append(int(token))
        rows.append(row)
    return rows


def _parse_json(text: str) -> list:
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise InvalidGraphError(f"Invalid JSON: {exc}") from None
    if not isinstance(data, list):
        raise InvalidGraphError(
            f"Expected a JSON array of rows, got {type(data).__name__}"
        )
    return data


def parse_matrix(text: str, fmt: str = "text") -> AdjacencyMatrix:
    """Parse *text* as a "json" or "text" matrix."""
    if fmt == "json":
        rows = _parse_json(text)
    elif fmt == "text":
        rows = _parse_text(text)
    else:
        raise ValueError(f"Unknown matrix format {fmt!r}")
    return AdjacencyMatrix(rows)


def load_matrix(path: str | Path) -> AdjacencyMatrix:
    """Load a matrix file, choosing the format from its suffix."""
    path = Path(path)
    fmt = "json" if path.suffix.lower() == ".json" else "text"
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidGraphError(f"Not UTF-8 text: {exc}") from None
    graph = parse_matrix(text, fmt)
    log.debug("loaded %r from %s (%s)", graph, path, fmt)
    return graph
