"""
Solver dispatch for row reduction.

Provides rref() as the main entry point, plus rank() and is_rref().
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pylinalg.core.result import Result
from pylinalg.core.compute.precision import PRECISION, is_zero
from pylinalg.core.compute.timing import Timer
from pylinalg.elimination.design import MatrixDesign
from pylinalg.elimination.solution import RREFParams, RREFSolution
from pylinalg.elimination._gauss import gauss_jordan, pivot_columns


def _ensure_design(A: ArrayLike | MatrixDesign) -> MatrixDesign:
    """Convert raw array to MatrixDesign if needed."""
    if isinstance(A, MatrixDesign):
        return A
    return MatrixDesign.from_array(A)


def rref(A: ArrayLike | MatrixDesign) -> RREFSolution:
    """
    Reduced row-echelon form by Gauss-Jordan elimination.

    Parameters
    ----------
    A : array-like or MatrixDesign
        Non-empty 2D matrix (m x n).

    Returns
    -------
    RREFSolution with rref, rank and pivot_columns populated.

    Raises
    ------
    DimensionError
        If A is not 2D or is empty.
    ValidationError
        If A is non-numeric or contains NaN/Inf.
    """
    design = _ensure_design(A)

    timer = Timer()
    timer.start()

    with timer.section('elimination'):
        R = gauss_jordan(design.matrix)

    with timer.section('pivots'):
        pivots = pivot_columns(R)

    timer.stop()

    result = Result(
        params=RREFParams(rref=R, rank=len(pivots), pivot_columns=pivots),
        info={'method': 'gauss_jordan', 'precision': PRECISION},
        timing=timer.result(),
        backend_name='cpu_gauss_jordan',
    )
    return RREFSolution(_result=result, _design=design)


def rank(A: ArrayLike | MatrixDesign) -> int:
    """
    Rank of A: number of rows of RREF(A) holding a leading entry.

    Raises
    ------
    DimensionError
        If A is not 2D or is empty.
    """
    return rref(A).rank


def is_rref(A: ArrayLike | MatrixDesign) -> bool:
    """
    True if A already is in reduced row-echelon form.

    A matches when every entry differs from the same entry of its own RREF
    by less than PRECISION.

    Raises
    ------
    DimensionError
        If A is not 2D or is empty.
    """
    design = _ensure_design(A)
    R = gauss_jordan(design.matrix)
    return all(is_zero(x) for x in (design.matrix - R).ravel())
