"""Shared test fixtures."""

from pathlib import Path

import pytest

from breadthwise.graph import Graph

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture()
def square() -> Graph:
    """Undirected 4-cycle 1-2-3-4 with two shortest routes from 1 to 3."""
    return Graph.from_edges([(1, 2), (2, 3), (1, 4), (4, 3)])


@pytest.fixture()
def tree() -> Graph:
    """Undirected tree rooted at 1 with depth 3."""
    return Graph.from_edges([(1, 2), (1, 3), (2, 4), (3, 5), (4, 6)])
