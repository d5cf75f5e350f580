"""
Tests for Gauss-Jordan row reduction.

Validates:
    - Known RREFs of small integer matrices
    - Idempotence: RREF(RREF(A)) == RREF(A)
    - Pivot bookkeeping and solution accessors
    - is_rref() on reduced and unreduced inputs
    - Input validation (empty, 1D, non-finite)
"""

import numpy as np
import pytest

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.compute.precision import CPU_FP64, PRECISION
from pylinalg.elimination import MatrixDesign, RREFSolution, is_rref, rref
from pylinalg.elimination._gauss import gauss_jordan, is_leading


# ═══════════════════════════════════════════════════════════════════════
# Known reductions
# ═══════════════════════════════════════════════════════════════════════


class TestKnownReductions:

    def test_invertible_2x2_reduces_to_identity(self):
        sol = rref([[2.0, 1.0], [1.0, 3.0]])
        np.testing.assert_allclose(sol.rref, np.eye(2), atol=CPU_FP64.atol)
        assert sol.rank == 2

    def test_rank_deficient_3x3(self):
        A = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
        sol = rref(A)
        expected = np.array([[1.0, 0.0, -1.0], [0.0, 1.0, 2.0], [0.0, 0.0, 0.0]])
        np.testing.assert_allclose(sol.rref, expected, atol=CPU_FP64.atol)
        assert sol.rank == 2
        assert sol.pivot_columns == (0, 1)
        assert sol.free_columns == (2,)

    def test_zero_first_column(self):
        sol = rref([[0, 2, 4], [0, 1, 3]])
        expected = np.array([[0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
        np.testing.assert_allclose(sol.rref, expected, atol=CPU_FP64.atol)
        assert sol.pivot_columns == (1, 2)

    def test_row_swap_needed(self):
        sol = rref([[0, 1], [1, 0]])
        np.testing.assert_allclose(sol.rref, np.eye(2), atol=CPU_FP64.atol)

    def test_wide_matrix(self):
        sol = rref([[1, 2, 1, 0], [2, 4, 0, 2]])
        expected = np.array([[1.0, 2.0, 0.0, 1.0], [0.0, 0.0, 1.0, -1.0]])
        np.testing.assert_allclose(sol.rref, expected, atol=CPU_FP64.atol)
        assert sol.rank == 2
        assert sol.full_rank

    def test_zero_matrix(self):
        sol = rref(np.zeros((2, 3)))
        np.testing.assert_array_equal(sol.rref, np.zeros((2, 3)))
        assert sol.rank == 0
        assert sol.pivot_columns == ()

    def test_one_by_one(self):
        sol = rref([[5.0]])
        np.testing.assert_allclose(sol.rref, [[1.0]])
        assert sol.rank == 1

    def test_one_by_one_zero(self):
        sol = rref([[0.0]])
        assert sol.rank == 0

    def test_single_row_scaled(self):
        sol = rref([[0.0, 3.0, 6.0]])
        np.testing.assert_allclose(sol.rref, [[0.0, 1.0, 2.0]])

    def test_input_not_modified(self):
        A = np.array([[2.0, 4.0], [1.0, 3.0]])
        original = A.copy()
        rref(A)
        np.testing.assert_array_equal(A, original)

    def test_tiny_entries_treated_as_zero(self):
        sol = rref([[1e-12, 1.0], [0.0, 1e-12]])
        assert sol.pivot_columns == (1,)


# ═══════════════════════════════════════════════════════════════════════
# Idempotence
# ═══════════════════════════════════════════════════════════════════════


class TestIdempotence:

    @pytest.mark.parametrize("shape", [(2, 2), (3, 3), (3, 5), (5, 3), (4, 4)])
    def test_random(self, rng, shape):
        A = rng.integers(-5, 6, size=shape).astype(float)
        R = rref(A).rref
        np.testing.assert_allclose(rref(R).rref, R, atol=1e-10)

    def test_reduced_matrix_is_rref(self, rng):
        A = rng.standard_normal((4, 6))
        assert is_rref(rref(A).rref)


# ═══════════════════════════════════════════════════════════════════════
# is_rref
# ═══════════════════════════════════════════════════════════════════════


class TestIsRREF:

    def test_identity(self):
        assert is_rref(np.eye(3))

    def test_unreduced(self):
        assert not is_rref([[2.0, 0.0], [0.0, 1.0]])

    def test_rows_out_of_order(self):
        assert not is_rref([[0.0, 1.0], [1.0, 0.0]])

    def test_within_precision(self):
        assert is_rref([[1.0, 1e-12], [0.0, 1.0]])

    def test_difference_of_exactly_precision_is_not_zero(self):
        # 1e-9 is eliminated by row reduction, so A and RREF(A) differ by PRECISION
        A = [[1.0, PRECISION], [0.0, 1.0]]
        np.testing.assert_array_equal(rref(A).rref, np.eye(2))
        assert not is_rref(A)


# ═══════════════════════════════════════════════════════════════════════
# Kernels
# ═══════════════════════════════════════════════════════════════════════


class TestKernels:

    def test_is_leading(self):
        A = np.array([[0.0, 2.0, 1.0], [1.0, 0.0, 0.0]])
        assert is_leading(A, 0, 1)
        assert not is_leading(A, 0, 2)
        assert not is_leading(A, 0, 0)
        assert is_leading(A, 1, 0)

    def test_gauss_jordan_returns_copy(self):
        A = np.array([[2.0, 0.0], [0.0, 2.0]])
        R = gauss_jordan(A)
        assert R is not A
        assert A[0, 0] == 2.0


# ═══════════════════════════════════════════════════════════════════════
# Solution wrapper and validation
# ═══════════════════════════════════════════════════════════════════════


class TestSolution:

    def test_metadata(self):
        sol = rref([[1, 2], [3, 4]])
        assert isinstance(sol, RREFSolution)
        assert sol.backend_name == 'cpu_gauss_jordan'
        assert sol.info['method'] == 'gauss_jordan'
        assert 'elimination' in sol.timing
        assert sol.warnings == ()

    def test_accepts_design(self):
        design = MatrixDesign.from_array([[1, 2], [2, 4]])
        assert rref(design).rank == 1

    def test_from_columns(self):
        design = MatrixDesign.from_columns([np.array([1.0, 0.0, 0.0]), np.array([0.0, 1.0, 0.0])])
        assert design.shape == (3, 2)

    def test_summary_and_repr(self):
        sol = rref([[1, 2, 3], [2, 4, 6]])
        text = sol.summary()
        assert "rank 1" in text
        assert "Free columns: 2, 3" in text
        assert repr(sol) == "RREFSolution(height=2, width=3, rank=1)"


class TestValidation:

    def test_empty_raises(self):
        with pytest.raises(DimensionError):
            rref(np.zeros((0, 3)))

    def test_1d_raises(self):
        with pytest.raises(DimensionError):
            rref([1.0, 2.0])

    def test_nan_raises(self):
        with pytest.raises(ValidationError):
            rref([[1.0, np.nan], [0.0, 1.0]])
