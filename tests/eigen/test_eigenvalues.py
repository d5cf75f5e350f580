"""
Tests for closed-form eigenvalues of 2 x 2 and 3 x 3 matrices.

Validates against scipy.linalg.eigvals and det(A - lambda I) = 0.
"""

import numpy as np
import pytest
from scipy import linalg as sp_linalg

from pylinalg.core.exceptions import (
    DimensionError,
    NonRealEigenvaluesError,
    UnsupportedError,
)
from pylinalg.core.compute.precision import CLOSED_FORM
from pylinalg.eigen import EigenDesign, eigenvalues, eigenvalues_2x2, eigenvalues_3x3
from pylinalg.eigen._eigenvalues import characteristic_coefficients_3x3


# ═══════════════════════════════════════════════════════════════════════
# 2 x 2
# ═══════════════════════════════════════════════════════════════════════


class TestEigenvalues2x2:

    def test_diagonal_larger_first(self):
        np.testing.assert_array_equal(eigenvalues([[2.0, 0.0], [0.0, 3.0]]), [3.0, 2.0])

    def test_identity(self):
        np.testing.assert_array_equal(eigenvalues(np.eye(2)), [1.0, 1.0])

    def test_jordan_block(self, jordan_2x2):
        np.testing.assert_array_equal(eigenvalues_2x2(jordan_2x2), [2.0, 2.0])

    def test_rotation_non_real(self, rotation_2x2):
        with pytest.raises(NonRealEigenvaluesError) as exc_info:
            eigenvalues(rotation_2x2)
        assert exc_info.value.dimension == 2
        assert exc_info.value.discriminant == -4.0

    def test_matches_scipy(self, make_symmetric):
        A = make_symmetric([-1.5, 2.0])
        expected = np.sort(sp_linalg.eigvals(A).real)[::-1]
        np.testing.assert_allclose(eigenvalues(A), expected, rtol=CLOSED_FORM.rtol)

    def test_wrong_size_raises(self):
        with pytest.raises(DimensionError, match="2 x 2"):
            eigenvalues_2x2(np.eye(3))


# ═══════════════════════════════════════════════════════════════════════
# 3 x 3
# ═══════════════════════════════════════════════════════════════════════


class TestEigenvalues3x3:

    def test_upper_triangular(self, distinct_3x3):
        np.testing.assert_allclose(eigenvalues(distinct_3x3), [1.0, 2.0, 3.0], rtol=1e-12)

    def test_symmetric(self, symmetric_3x3):
        s = np.sqrt(2.0)
        np.testing.assert_allclose(
            eigenvalues_3x3(symmetric_3x3), [2 - s, 2.0, 2 + s], rtol=1e-12
        )

    def test_double_root(self, double_root_3x3):
        np.testing.assert_array_equal(eigenvalues(double_root_3x3), [2.0, 2.0, 5.0])

    def test_identity(self):
        np.testing.assert_array_equal(eigenvalues(np.eye(3)), [1.0, 1.0, 1.0])

    def test_characteristic_coefficients(self, distinct_3x3):
        trace, minors, det = characteristic_coefficients_3x3(distinct_3x3)
        assert (trace, minors, det) == (6.0, 11.0, 6.0)

    def test_rotation_about_axis_non_real(self):
        A = [[0.0, -1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]]
        with pytest.raises(NonRealEigenvaluesError) as exc_info:
            eigenvalues(A)
        assert exc_info.value.dimension == 3

    @pytest.mark.parametrize("spectrum", [(1.0, 3.0, 6.0), (-2.0, 0.5, 4.0), (-7.0, -1.0, 0.0)])
    def test_matches_scipy(self, make_symmetric, spectrum):
        A = make_symmetric(spectrum)
        expected = np.sort(sp_linalg.eigvals(A).real)
        np.testing.assert_allclose(
            eigenvalues(A), expected, rtol=CLOSED_FORM.rtol, atol=CLOSED_FORM.atol
        )

    def test_characteristic_determinant_vanishes(self, make_symmetric):
        A = make_symmetric((1.0, 3.0, 6.0))
        for lam in eigenvalues(A):
            assert abs(sp_linalg.det(A - lam * np.eye(3))) < 1e-8

    def test_wrong_size_raises(self):
        with pytest.raises(DimensionError, match="3 x 3"):
            eigenvalues_3x3(np.eye(2))


# ═══════════════════════════════════════════════════════════════════════
# Dispatch and validation
# ═══════════════════════════════════════════════════════════════════════


class TestDispatch:

    def test_four_by_four_unsupported(self):
        with pytest.raises(UnsupportedError):
            eigenvalues(np.eye(4))

    def test_one_by_one_unsupported(self):
        with pytest.raises(UnsupportedError):
            eigenvalues([[1.0]])

    def test_non_square_raises(self):
        with pytest.raises(DimensionError):
            eigenvalues([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])

    def test_empty_raises(self):
        with pytest.raises(DimensionError):
            eigenvalues(np.zeros((0, 0)))

    def test_accepts_design(self):
        design = EigenDesign.from_array(np.diag([1.0, 2.0, 3.0]))
        assert design.n == 3
        np.testing.assert_allclose(eigenvalues(design), [1.0, 2.0, 3.0], rtol=1e-12)
