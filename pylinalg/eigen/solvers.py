"""
Solver dispatch for eigenvalues, eigenvectors and diagonalization.

Public entry points accept an array-like or an EigenDesign. The
size-specific variants (eigenvalues_2x2, diagonalize_3x3, ...) insist on
their size and raise DimensionError otherwise.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.result import Result
from pylinalg.core.exceptions import NotDiagonalizableError
from pylinalg.core.validation import check_matrix, check_shape
from pylinalg.core.compute.precision import PRECISION
from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.linalg.cofactor import inverse_cpu
from pylinalg.eigen.design import EigenDesign
from pylinalg.eigen.solution import (
    EigenSolution, DiagonalizationParams, DiagonalizationSolution,
)
from pylinalg.eigen.backends.cpu import ClosedFormEigenBackend
from pylinalg.eigen import _eigenvalues


def _ensure_design(A: ArrayLike | EigenDesign) -> EigenDesign:
    """Convert raw array to EigenDesign if needed."""
    if isinstance(A, EigenDesign):
        return A
    return EigenDesign.from_array(A)


def _ensure_sized(A: ArrayLike | EigenDesign, n: int) -> EigenDesign:
    if isinstance(A, EigenDesign):
        check_shape(A.matrix, (n, n), 'A')
        return A
    check_shape(check_matrix(A, 'A'), (n, n), 'A')
    return EigenDesign.from_array(A)


# ─── eigenvalues ────────────────────────────────────────────────────────


def eigenvalues(A: ArrayLike | EigenDesign) -> NDArray[np.floating[Any]]:
    """
    Real eigenvalues of a 2 x 2 or 3 x 3 matrix.

    Returns
    -------
    ndarray, shape (n,)
        2 x 2: (+sqrt root, -sqrt root). 3 x 3: ascending.

    Raises
    ------
    DimensionError
        If A is not a non-empty square matrix.
    UnsupportedError
        If A is not 2 x 2 or 3 x 3.
    NonRealEigenvaluesError
        If A has non-real eigenvalues.
    """
    design = _ensure_design(A)
    if design.n == 2:
        values = _eigenvalues.eigenvalues_2x2(design.matrix)
    else:
        values = _eigenvalues.eigenvalues_3x3(design.matrix)
    return np.array(values, dtype=np.float64)


def eigenvalues_2x2(A: ArrayLike | EigenDesign) -> NDArray[np.floating[Any]]:
    """Eigenvalues of a 2 x 2 matrix; see eigenvalues()."""
    return eigenvalues(_ensure_sized(A, 2))


def eigenvalues_3x3(A: ArrayLike | EigenDesign) -> NDArray[np.floating[Any]]:
    """Eigenvalues of a 3 x 3 matrix; see eigenvalues()."""
    return eigenvalues(_ensure_sized(A, 3))


# ─── eigenvectors ───────────────────────────────────────────────────────


def _solve_eigenvectors(design: EigenDesign) -> EigenSolution:
    result = ClosedFormEigenBackend().solve(design)
    return EigenSolution(_result=result, _design=design)


def eigenvectors(A: ArrayLike | EigenDesign) -> EigenSolution:
    """
    Eigenvalues and a maximal set of independent eigenvectors.

    Parameters
    ----------
    A : array-like or EigenDesign
        2 x 2 or 3 x 3 matrix.

    Returns
    -------
    EigenSolution
        count is the number of independent eigenvectors found. It is less
        than n for a defective matrix and 0 when the eigenvalues are
        non-real; both cases are reported in warnings and emitted as a
        RuntimeWarning.

    Raises
    ------
    DimensionError
        If A is not a non-empty square matrix.
    UnsupportedError
        If A is not 2 x 2 or 3 x 3.
    """
    solution = _solve_eigenvectors(_ensure_design(A))
    for msg in solution.warnings:
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
    return solution


def eigenvectors_2x2(A: ArrayLike | EigenDesign) -> EigenSolution:
    """Eigenvectors of a 2 x 2 matrix; see eigenvectors()."""
    solution = _solve_eigenvectors(_ensure_sized(A, 2))
    for msg in solution.warnings:
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
    return solution


def eigenvectors_3x3(A: ArrayLike | EigenDesign) -> EigenSolution:
    """Eigenvectors of a 3 x 3 matrix; see eigenvectors()."""
    solution = _solve_eigenvectors(_ensure_sized(A, 3))
    for msg in solution.warnings:
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
    return solution


# ─── diagonalization ────────────────────────────────────────────────────


def _diagonalize(design: EigenDesign) -> DiagonalizationSolution:
    n = design.n

    timer = Timer()
    timer.start()

    with timer.section('eigenvectors'):
        eig = _solve_eigenvectors(design)

    if eig.count < n:
        raise NotDiagonalizableError(
            f"A is not diagonalizable: {eig.count} independent eigenvectors "
            f"for dimension {n}",
            eigenvalues=tuple(float(x) for x in eig.eigenvalues),
            n_eigenvectors=eig.count,
            dimension=n,
        )

    with timer.section('assemble'):
        P = eig.eigenvectors.copy()
        D = np.diag(eig.eigenvector_eigenvalues)

    with timer.section('inverse'):
        P_inv = inverse_cpu(P, matrix_name='P')

    timer.stop()

    result = Result(
        params=DiagonalizationParams(P=P, D=D, P_inv=P_inv),
        info={
            'method': 'closed_form',
            'dimension': n,
            'cases': eig.info['cases'],
            'precision': PRECISION,
        },
        timing=timer.result(),
        backend_name=eig.backend_name,
    )
    return DiagonalizationSolution(_result=result, _design=design)


def diagonalize(A: ArrayLike | EigenDesign) -> DiagonalizationSolution:
    """
    Diagonalize a 2 x 2 or 3 x 3 matrix as A = P @ D @ P_inv.

    Columns of P are eigenvectors; D holds the matching eigenvalues in the
    same order. P_inv is computed by the cofactor inverse.

    Raises
    ------
    DimensionError
        If A is not a non-empty square matrix.
    UnsupportedError
        If A is not 2 x 2 or 3 x 3.
    NotDiagonalizableError
        If fewer than n independent eigenvectors exist, including the
        non-real case.
    SingularMatrixError
        If rounding leaves P numerically singular.

    Examples
    --------
    >>> sol = diagonalize([[2.0, 0.0], [0.0, 3.0]])
    >>> np.diag(sol.D)
    array([3., 2.])
    """
    return _diagonalize(_ensure_design(A))


def diagonalize_2x2(A: ArrayLike | EigenDesign) -> DiagonalizationSolution:
    """Diagonalize a 2 x 2 matrix; see diagonalize()."""
    return _diagonalize(_ensure_sized(A, 2))


def diagonalize_3x3(A: ArrayLike | EigenDesign) -> DiagonalizationSolution:
    """Diagonalize a 3 x 3 matrix; see diagonalize()."""
    return _diagonalize(_ensure_sized(A, 3))
