"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrices import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def small_invertible():
    """2x2 with det 1 and an integer inverse."""
    return Matrix.from_grid([[2.0, 1.0], [1.0, 1.0]])


@pytest.fixture
def anti_diagonal():
    """Row exchange of the 2x2 identity (det -1)."""
    return Matrix.from_grid([[0.0, 1.0], [1.0, 0.0]])


@pytest.fixture
def singular_3x3():
    """Third row is the sum of the first two; elimination stays exact."""
    return Matrix.from_grid([
        [-1.0, 1.0, 2.0],
        [2.0, 2.0, 0.0],
        [1.0, 3.0, 2.0],
    ])


@pytest.fixture
def wide_2x3():
    """Non-square input for the sentinel cases."""
    return Matrix.from_grid([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


@pytest.fixture
def random_square(rng):
    """Well-conditioned random 5x5 (diagonally shifted normal draws)."""
    data = rng.standard_normal((5, 5)) + 5.0 * np.eye(5)
    return Matrix.from_grid(data)
