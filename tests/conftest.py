"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def tall_matrix():
    """The 3x2 matrix [[1,2],[3,4],[5,6]]; column-major store [1,3,5,2,4,6]."""
    return np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])


@pytest.fixture
def random_tall(rng):
    """Random 7x4 matrix with full column rank."""
    return rng.standard_normal((7, 4))


@pytest.fixture
def collinear_matrix(rng):
    """Matrix with perfect collinearity (rank 2 of 3)."""
    n = 20
    x1 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    return np.column_stack([x1, x2, x1 + x2])
