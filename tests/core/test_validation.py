"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object/complex rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d / check_nonempty / check_square /
      check_shape: shape checks
    - check_matrix / check_vector_list: composite validators
"""

import numpy as np
import pytest

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_finite,
    check_matrix,
    check_ndim,
    check_nonempty,
    check_shape,
    check_square,
    check_vector_list,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "v")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0])
        result = check_array(arr, "v")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="v"):
            check_array([1, "a", None], "v")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError):
            check_array(["a", "b"], "v")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array(np.array([1 + 2j]), "v")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "A")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "A")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([[1.0, np.inf]]), "A")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_check_ndim(self):
        check_ndim(np.zeros((2, 2)), 2, "A")
        with pytest.raises(DimensionError, match="expected 1D"):
            check_ndim(np.zeros((2, 2)), 1, "A")

    def test_check_1d_rejects_2d(self):
        with pytest.raises(DimensionError):
            check_1d(np.zeros((2, 2)), "v")

    def test_check_2d_rejects_1d(self):
        with pytest.raises(DimensionError):
            check_2d(np.zeros(3), "A")

    def test_check_nonempty(self):
        with pytest.raises(DimensionError, match="empty"):
            check_nonempty(np.zeros((0, 3)), "A")

    def test_check_square(self):
        check_square(np.zeros((3, 3)), "A")
        with pytest.raises(DimensionError, match="2 x 3"):
            check_square(np.zeros((2, 3)), "A")

    def test_check_shape(self):
        check_shape(np.zeros((2, 2)), (2, 2), "A")
        with pytest.raises(DimensionError, match="must be 2 x 2, got 3 x 3"):
            check_shape(np.zeros((3, 3)), (2, 2), "A")


# ═══════════════════════════════════════════════════════════════════════
# Composite validators
# ═══════════════════════════════════════════════════════════════════════


class TestCheckMatrix:

    def test_valid(self):
        result = check_matrix([[1, 2], [3, 4]], "A")
        assert result.shape == (2, 2)
        assert result.dtype == np.float64

    def test_1d_rejected(self):
        with pytest.raises(DimensionError):
            check_matrix([1, 2, 3], "A")

    def test_empty_rejected(self):
        with pytest.raises(DimensionError):
            check_matrix(np.zeros((0, 0)), "A")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            check_matrix([[1.0, np.nan]], "A")


class TestCheckVectorList:

    def test_valid(self):
        result = check_vector_list([[1, 0], [0, 1]], "vectors")
        assert len(result) == 2
        assert all(v.dtype == np.float64 for v in result)

    def test_empty_list_rejected(self):
        with pytest.raises(ValidationError, match="at least 1"):
            check_vector_list([], "vectors")

    def test_mismatched_dimensions(self):
        with pytest.raises(DimensionError, match="same dimension"):
            check_vector_list([[1, 0], [0, 1, 0]], "vectors")

    def test_empty_vector_rejected(self):
        with pytest.raises(DimensionError):
            check_vector_list([[]], "vectors")

    def test_error_names_entry(self):
        with pytest.raises(DimensionError, match=r"vectors\[1\]"):
            check_vector_list([[1, 0], [[0, 1]]], "vectors")
