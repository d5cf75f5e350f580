"""
Gauss-Jordan elimination kernels.

Column-major forward elimination to reduced row-echelon form. A row is a
pivot candidate for column j only if its entry in column j is non-zero
AND every entry to the left of it is zero (the "is-leading" test), so
rows already reduced for an earlier column are never picked again.

All zero tests go through the shared PRECISION threshold.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.precision import is_zero, is_nonzero


def is_leading(A: NDArray[np.floating[Any]], row: int, col: int) -> bool:
    """
    True if A[row, col] is the leading (leftmost non-zero) entry of its row.

    Args:
        A: 2D array
        row: Row index (0-based)
        col: Column index (0-based)
    """
    if is_zero(A[row, col]):
        return False
    return all(is_zero(x) for x in A[row, :col])


def gauss_jordan(A: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Reduced row-echelon form of A.

    For each column left to right, the first row at or below the current
    leading-row slot whose entry in that column is leading gets scaled to
    a leading 1, is subtracted from every other row with a non-zero entry
    in the column, and is swapped up into the leading-row slot. Rows that
    never lead stay below as zero rows.

    Args:
        A: Non-empty 2D float64 array. Not modified.

    Returns:
        Independent array holding RREF(A)
    """
    R = np.array(A, dtype=np.float64, copy=True)
    n_rows, n_cols = R.shape
    leading_row = 0

    for col in range(n_cols):
        for j in range(leading_row, n_rows):
            if not is_leading(R, j, col):
                continue
            R[j] = R[j] / R[j, col]
            for k in range(n_rows):
                if k != j and is_nonzero(R[k, col]):
                    R[k] = R[k] - R[k, col] * R[j]
            R[[leading_row, j]] = R[[j, leading_row]]
            leading_row += 1
            break

    return R


def pivot_columns(R: NDArray[np.floating[Any]]) -> tuple[int, ...]:
    """Column index of the leading entry of each non-zero row of an RREF."""
    pivots = []
    n_rows, n_cols = R.shape
    for i in range(n_rows):
        for j in range(n_cols):
            if is_leading(R, i, j):
                pivots.append(j)
                break
    return tuple(pivots)


def count_leading_rows(R: NDArray[np.floating[Any]]) -> int:
    """Number of rows of R that contain a leading entry (the rank of an RREF)."""
    return len(pivot_columns(R))


def rank_of(A: NDArray[np.floating[Any]]) -> int:
    """Rank of a validated matrix via its RREF."""
    return count_leading_rows(gauss_jordan(A))
