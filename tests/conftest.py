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
def distinct_3x3():
    """Upper-triangular 3 x 3 with eigenvalues 1, 2, 3."""
    return np.array([
        [1.0, 2.0, 3.0],
        [0.0, 2.0, 4.0],
        [0.0, 0.0, 3.0],
    ])


@pytest.fixture
def symmetric_3x3():
    """Symmetric 3 x 3 with eigenvalues 2 - sqrt(2), 2, 2 + sqrt(2)."""
    return np.array([
        [2.0, -1.0, 0.0],
        [-1.0, 2.0, -1.0],
        [0.0, -1.0, 2.0],
    ])


@pytest.fixture
def double_root_3x3():
    """Diagonalizable 3 x 3 with eigenvalue 2 twice and 5 once."""
    return np.array([
        [3.0, 1.0, 1.0],
        [1.0, 3.0, 1.0],
        [1.0, 1.0, 3.0],
    ])


@pytest.fixture
def jordan_2x2():
    """Defective 2 x 2 Jordan block for eigenvalue 2."""
    return np.array([[2.0, 1.0], [0.0, 2.0]])


@pytest.fixture
def rotation_2x2():
    """90-degree rotation; eigenvalues +-i."""
    return np.array([[0.0, -1.0], [1.0, 0.0]])


@pytest.fixture
def make_symmetric(rng):
    """Factory: random symmetric matrix with the given eigenvalues."""
    def _make(values):
        n = len(values)
        Q, _ = np.linalg.qr(rng.standard_normal((n, n)))
        return Q @ np.diag(values) @ Q.T
    return _make
