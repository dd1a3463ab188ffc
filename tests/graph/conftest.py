"""Shared fixtures for graph tests."""
from __future__ import annotations

import random

import pytest

from kahncycle.graph.matrix import AdjacencyMatrix

SEED = 42


@pytest.fixture
def empty_graph() -> AdjacencyMatrix:
    return AdjacencyMatrix([])


@pytest.fixture
def linear_graph() -> AdjacencyMatrix:
    """0 -> 1 -> 2 -> 3"""
    return AdjacencyMatrix.from_edges(4, [(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def diamond_graph() -> AdjacencyMatrix:
    """
    0 -> 1 -> 3
    0 -> 2 -> 3
    """
    return AdjacencyMatrix.from_edges(4, [(0, 1), (0, 2), (1, 3), (2, 3)])


@pytest.fixture
def back_edge_graph() -> AdjacencyMatrix:
    """0 -> 1 -> 2, 1 -> 3 -> 1"""
    return AdjacencyMatrix.from_edges(4, [(0, 1), (1, 2), (1, 3), (3, 1)])


@pytest.fixture
def cycle_with_tail() -> AdjacencyMatrix:
    """0 -> 1 -> 2 -> 0, plus 2 -> 3 -> 4"""
    return AdjacencyMatrix.from_edges(
        5, [(0, 1), (2, 0), (1, 2), (2, 3), (3, 4)]
    )


@pytest.fixture
def rng() -> random.Random:
    return random.Random(SEED)


def random_graph(rng: random.Random, n: int, p: float) -> AdjacencyMatrix:
    """Random directed graph; self-loops included with probability p/4."""
    rows = [
        [
            int(rng.random() < (p / 4 if i == j else p))
            for j in range(n)
        ]
        for i in range(n)
    ]
    return AdjacencyMatrix(rows)


@pytest.fixture
def make_random_graph():
    return random_graph
