"""Shared fixtures for presentation-layer and CLI tests."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from kahncycle.demo.samples import ACYCLIC, CYCLIC


@pytest.fixture
def cyclic_json(tmp_path: Path) -> Path:
    path = tmp_path / "cyclic.json"
    path.write_text(json.dumps(CYCLIC), encoding="utf-8")
    return path


@pytest.fixture
def acyclic_txt(tmp_path: Path) -> Path:
    path = tmp_path / "acyclic.txt"
    path.write_text(
        "# diamond\n" + "\n".join(" ".join(map(str, r)) for r in ACYCLIC) + "\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def ragged_txt(tmp_path: Path) -> Path:
    path = tmp_path / "ragged.txt"
    path.write_text("0 1 0\n0 0\n0 0 0\n", encoding="utf-8")
    return path
