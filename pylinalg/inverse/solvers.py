"""
Determinant, cofactors, adjugate and inverse.

Validated public wrappers around the cofactor-expansion kernels in
pylinalg.core.compute.linalg.cofactor. Every function returns a fresh
float / array and never modifies its input.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import DimensionError
from pylinalg.core.validation import check_matrix, check_square
from pylinalg.core.compute.linalg.cofactor import (
    det_cpu,
    cofactor_cpu,
    cofactor_matrix_cpu,
    adjugate_cpu,
    inverse_cpu,
)


def _check_square_matrix(A: ArrayLike, name: str, min_size: int = 1) -> NDArray[np.floating[Any]]:
    arr = check_matrix(A, name)
    check_square(arr, name)
    if arr.shape[0] < min_size:
        raise DimensionError(
            f"{name}: must be n x n with n >= {min_size}, got {arr.shape[0]} x {arr.shape[1]}"
        )
    return arr


def det(A: ArrayLike) -> float:
    """
    Determinant by cofactor expansion.

    Parameters
    ----------
    A : array-like
        Square matrix (n x n), n >= 1.

    Raises
    ------
    DimensionError
        If A is not square or is empty.
    """
    return det_cpu(_check_square_matrix(A, 'A'))


def cofactor(A: ArrayLike, i: int, j: int) -> float:
    """
    Cofactor C[i, j] = (-1)^(i+j) det(minor(A, i, j)).

    Parameters
    ----------
    A : array-like
        Square matrix (n x n), n >= 2.
    i, j : int
        0-based row and column.

    Raises
    ------
    DimensionError
        If A is not n x n with n >= 2, or (i, j) is out of range.
    """
    arr = _check_square_matrix(A, 'A', min_size=2)
    n = arr.shape[0]
    if not (0 <= i < n and 0 <= j < n):
        raise DimensionError(f"(i, j) = ({i}, {j}) out of range for {n} x {n} matrix")
    return cofactor_cpu(arr, i, j)


def cofactor_matrix(A: ArrayLike) -> NDArray[np.floating[Any]]:
    """Matrix of cofactors of an n x n matrix, n >= 2."""
    return cofactor_matrix_cpu(_check_square_matrix(A, 'A', min_size=2))


def adjugate(A: ArrayLike) -> NDArray[np.floating[Any]]:
    """Adjugate (transposed cofactor matrix) of an n x n matrix, n >= 2."""
    return adjugate_cpu(_check_square_matrix(A, 'A', min_size=2))


def inverse(A: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Inverse via adj(A) / det(A).

    Parameters
    ----------
    A : array-like
        Square matrix (n x n), n >= 1.

    Raises
    ------
    DimensionError
        If A is not square or is empty.
    SingularMatrixError
        If |det(A)| < PRECISION.
    """
    return inverse_cpu(_check_square_matrix(A, 'A'), matrix_name='A')
