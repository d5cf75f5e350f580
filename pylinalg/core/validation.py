"""
Input validation utilities for PyLinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    The returned array never shares memory with the input.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, complex, etc.)
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric or complex dtype {result.dtype}, expected real numeric data"
        )

    return np.array(result, dtype=np.float64, copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional (a vector)."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional (a matrix)."""
    check_ndim(array, 2, name)


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has no zero-length axis.

    An empty matrix (height 0 or width 0) has no RREF, rank or
    determinant.

    Raises:
        DimensionError: If any dimension is zero
    """
    if array.size == 0:
        raise DimensionError(
            f"{name}: must not be empty, got shape {array.shape}"
        )


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        DimensionError: If rows != columns
    """
    n_rows, n_cols = array.shape
    if n_rows != n_cols:
        raise DimensionError(
            f"{name}: must be n x n, got {n_rows} x {n_cols}"
        )


def check_shape(
    array: NDArray[np.floating[Any]],
    shape: tuple[int, ...],
    name: str,
) -> None:
    """
    Verify array has exactly the given shape.

    Raises:
        DimensionError: If shapes differ
    """
    if array.shape != shape:
        expected = " x ".join(str(s) for s in shape)
        actual = " x ".join(str(s) for s in array.shape)
        raise DimensionError(f"{name}: must be {expected}, got {actual}")


def check_matrix(matrix: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert and validate a finite, non-empty 2D matrix.

    Returns:
        Independent float64 copy of the input

    Raises:
        ValidationError: non-numeric or non-finite input
        DimensionError: not 2D, or empty
    """
    arr = check_array(matrix, name)
    check_2d(arr, name)
    check_nonempty(arr, name)
    check_finite(arr, name)
    return arr


def check_vector_list(
    vectors: Sequence[ArrayLike],
    name: str,
) -> list[NDArray[np.floating[Any]]]:
    """
    Validate a list of vectors sharing one dimension.

    Every vector must be 1D, finite, have dimension >= 1, and all vectors
    must have the same dimension.

    Returns:
        List of independent float64 vectors

    Raises:
        ValidationError: If the list is empty or an entry is not numeric/finite
        DimensionError: If a vector is not 1D, empty, or dimensions differ
    """
    if len(vectors) == 0:
        raise ValidationError(f"{name}: requires at least 1 vector, got 0")

    result = []
    for i, v in enumerate(vectors):
        label = f"{name}[{i}]"
        arr = check_array(v, label)
        check_1d(arr, label)
        check_nonempty(arr, label)
        check_finite(arr, label)
        result.append(arr)

    dims = [v.shape[0] for v in result]
    if len(set(dims)) > 1:
        raise DimensionError(
            f"{name}: all vectors must have the same dimension, got {dims}"
        )
    return result
