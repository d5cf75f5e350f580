"""
Cofactor-expansion kernels.

Determinant, cofactors, adjugate and inverse of small square matrices by
Laplace expansion. These are exact-arithmetic formulas with no pivoting,
intended for the 2 x 2 and 3 x 3 matrices the eigen routines produce.

Kernels assume a validated, non-empty, square float64 array. Public,
validated entry points live in pylinalg.inverse.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.precision import PRECISION, is_zero
from pylinalg.core.exceptions import SingularMatrixError


def minor_matrix(
    A: NDArray[np.floating[Any]], i: int, j: int
) -> NDArray[np.floating[Any]]:
    """A with row i and column j removed (0-based)."""
    return np.delete(np.delete(A, i, axis=0), j, axis=1)


def det_cpu(A: NDArray[np.floating[Any]]) -> float:
    """
    Determinant by cofactor expansion down the first column.

    Args:
        A: Square matrix (n x n), n >= 1

    Returns:
        det(A)
    """
    n = A.shape[0]
    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])

    total = 0.0
    for i in range(n):
        if A[i, 0] == 0.0:
            continue
        sign = 1.0 if i % 2 == 0 else -1.0
        total += sign * A[i, 0] * det_cpu(minor_matrix(A, i, 0))
    return float(total)


def cofactor_cpu(A: NDArray[np.floating[Any]], i: int, j: int) -> float:
    """Signed cofactor C[i, j] = (-1)^(i+j) det(minor(A, i, j)), 0-based."""
    det = det_cpu(minor_matrix(A, i, j))
    return det if (i + j) % 2 == 0 else -det


def cofactor_matrix_cpu(
    A: NDArray[np.floating[Any]]
) -> NDArray[np.floating[Any]]:
    """Matrix of cofactors C with C[i, j] = cofactor_cpu(A, i, j)."""
    n = A.shape[0]
    C = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            C[i, j] = cofactor_cpu(A, i, j)
    return C


def adjugate_cpu(
    A: NDArray[np.floating[Any]]
) -> NDArray[np.floating[Any]]:
    """Adjugate adj(A) = C^T."""
    return cofactor_matrix_cpu(A).T.copy()


def inverse_cpu(
    A: NDArray[np.floating[Any]],
    matrix_name: str = 'A',
) -> NDArray[np.floating[Any]]:
    """
    Inverse via adj(A) / det(A).

    Args:
        A: Square matrix (n x n), n >= 1
        matrix_name: Name used in the error if A is singular

    Returns:
        A^-1

    Raises:
        SingularMatrixError: If |det(A)| < PRECISION
    """
    det = det_cpu(A)
    if is_zero(det):
        raise SingularMatrixError(
            f"{matrix_name} is not invertible: |det| = {abs(det):.3g} < {PRECISION:g}",
            matrix_name=matrix_name,
            determinant=det,
        )
    if A.shape[0] == 1:
        return np.array([[1.0 / det]])
    return adjugate_cpu(A) / det
