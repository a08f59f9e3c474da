"""Shared test fixtures."""

import numpy as np
import pytest

from HilbertSort import HilbertCurve


# Known curve walks, index order
WALK_2D_1BIT = [[0, 0], [0, 1], [1, 1], [1, 0]]

WALK_2D_2BIT = [
    [0, 0], [1, 0], [1, 1], [0, 1],
    [0, 2], [0, 3], [1, 3], [1, 2],
    [2, 2], [2, 3], [3, 3], [3, 2],
    [3, 1], [2, 1], [2, 0], [3, 0],
]

WALK_3D_1BIT = [
    [0, 0, 0], [0, 0, 1], [0, 1, 1], [0, 1, 0],
    [1, 1, 0], [1, 1, 1], [1, 0, 1], [1, 0, 0],
]


def all_lattice_points(dimension: int, iterations: int) -> np.ndarray:
    """Every point of the lattice as an (n_points, dimension) array."""
    size = 1 << iterations
    grid = np.indices((size,) * dimension).reshape(dimension, -1).T
    return grid.astype(np.uint64)


@pytest.fixture
def curve_3d() -> HilbertCurve:
    return HilbertCurve(3, 10)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)
