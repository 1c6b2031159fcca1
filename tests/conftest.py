"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import numpy as np
import pytest

from gridpath.graph import GridGraph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def maps_dir(project_root: Path) -> Path:
    """Return the sample maps directory."""
    return project_root / "maps"


@pytest.fixture
def open_grid() -> GridGraph:
    """3x3 grid of open cells."""
    return GridGraph.build([[0, 0, 0], [0, 0, 0], [0, 0, 0]])


@pytest.fixture
def center_blocked_grid() -> GridGraph:
    """3x3 grid with the center cell (1, 1) blocked."""
    return GridGraph.build([[0, 0, 0], [0, 1, 0], [0, 0, 0]])


@pytest.fixture
def walled_grid() -> GridGraph:
    """5x3 grid split by a wall at x = 2; the left side has 6 cells."""
    return GridGraph.build(
        [
            [0, 0, 1, 0, 0],
            [0, 0, 1, 0, 0],
            [0, 0, 1, 0, 0],
        ]
    )


@pytest.fixture
def heavy_detour_grid() -> GridGraph:
    """
    3x2 grid whose direct route crosses heavy terrain at (1, 0).

    Going straight through costs 6.0, going over (1, 1) costs 2.8.
    """
    return GridGraph.build([[0, 4, 0], [0, 0, 0]])


@pytest.fixture
def random_cost_maps() -> list[np.ndarray]:
    """Seeded random cost maps mixing all terrain classes."""
    rng = np.random.default_rng(1234)
    return [
        rng.choice([0, 1, 2, 3, 4], p=[0.55, 0.2, 0.1, 0.1, 0.05], size=(7, 9))
        for _ in range(25)
    ]
