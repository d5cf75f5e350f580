"""
Eigenvectors of 2 x 2 and 3 x 3 matrices from the RREF of A - lambda I.

For each distinct eigenvalue the null space of A - lambda I is read off
its reduced row-echelon form. Which RREF coefficient may be used as a
denominator depends on which of them are zero (per PRECISION); those
choices are written as explicit decision tables:

    NullSpace2  2 x 2, first RREF row (r0, r1)
        ZERO_ROW      r0 = r1 = 0      -> e1, e2
        FREE_FIRST    r0 = 0           -> (1, 0)
        PIVOT_FIRST   r0 != 0          -> (-r1/r0, 1)

    Plane3  3 x 3 rank 1, first RREF row (a1, b1, c1)
        PIVOT_FIRST   a1 != 0          -> (-b1/a1, 1, 0), (-c1/a1, 0, 1)
        PIVOT_SECOND  a1 = 0, b1 != 0  -> (1, -a1/b1, 0), (0, -c1/b1, 1)
        PIVOT_THIRD   a1 = b1 = 0      -> (1, 0, 0), (0, 1, 0)

    Line3  3 x 3 rank 2, RREF rows (a1, b1, c1), (0, e1, f1)
        PIVOTS_FIRST_SECOND  a1 != 0, e1 != 0  -> (-c1/a1, -f1/e1, 1)
        PIVOTS_FIRST_THIRD   a1 != 0, e1 = 0   -> (-b1/a1, 1, 0)
        PIVOTS_SECOND_THIRD  a1 = 0            -> (1, 0, 0)

An eigenvalue at which A - lambda I is nonsingular to within PRECISION
contributes no vector (case 'nonsingular'); the shortfall shows up as a
count below n. Before that, a double root that rounding split into two
nearby roots is merged back into their mean (merge_split_double).

Every case taken is recorded so tests can audit branch coverage.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.precision import is_zero, is_nonzero, is_close
from pylinalg.elimination._gauss import gauss_jordan, count_leading_rows
from pylinalg.eigen._eigenvalues import eigenvalues_2x2, eigenvalues_3x3


@dataclass(frozen=True)
class EigenPair:
    """An eigenvector together with its eigenvalue."""
    eigenvalue: float
    vector: NDArray[np.floating[Any]]


@dataclass(frozen=True)
class EigenvectorSet:
    """
    Eigenvectors found for one matrix.

    Attributes
    ----------
    eigenvalues : tuple of float
        All n eigenvalues with algebraic multiplicity, in the order the
        solver processed them (repeated roots first for 3 x 3).
    pairs : tuple of EigenPair
        One entry per eigenvector found, eigenspace by eigenspace.
    cases : tuple of str
        Decision-table cases taken, in order.
    """
    eigenvalues: tuple[float, ...]
    pairs: tuple[EigenPair, ...]
    cases: tuple[str, ...]

    @property
    def count(self) -> int:
        """Sum of the geometric multiplicities found."""
        return len(self.pairs)


class NullSpace2(Enum):
    ZERO_ROW = 'zero_row'
    FREE_FIRST = 'free_first'
    PIVOT_FIRST = 'pivot_first'


class Plane3(Enum):
    PIVOT_FIRST = 'plane_pivot_first'
    PIVOT_SECOND = 'plane_pivot_second'
    PIVOT_THIRD = 'plane_pivot_third'


class Line3(Enum):
    PIVOTS_FIRST_SECOND = 'line_pivots_first_second'
    PIVOTS_FIRST_THIRD = 'line_pivots_first_third'
    PIVOTS_SECOND_THIRD = 'line_pivots_second_third'


Vector = NDArray[np.floating[Any]]


def _vec(*entries: float) -> Vector:
    return np.array(entries, dtype=np.float64)


# ─── 2 x 2 ──────────────────────────────────────────────────────────────


def classify_2x2(R: NDArray[np.floating[Any]]) -> NullSpace2:
    r0, r1 = R[0, 0], R[0, 1]
    if is_zero(r0) and is_zero(r1):
        return NullSpace2.ZERO_ROW
    if is_zero(r0):
        return NullSpace2.FREE_FIRST
    return NullSpace2.PIVOT_FIRST


def _line2_free_first(R: NDArray[np.floating[Any]]) -> Vector:
    return _vec(1.0, 0.0)


def _line2_pivot_first(R: NDArray[np.floating[Any]]) -> Vector:
    return _vec(-R[0, 1] / R[0, 0], 1.0)


LINE_2X2: dict[NullSpace2, Callable[[NDArray[np.floating[Any]]], Vector]] = {
    NullSpace2.FREE_FIRST: _line2_free_first,
    NullSpace2.PIVOT_FIRST: _line2_pivot_first,
}


# ─── 3 x 3 ──────────────────────────────────────────────────────────────


def classify_plane(R: NDArray[np.floating[Any]]) -> Plane3:
    a1, b1 = R[0, 0], R[0, 1]
    if is_nonzero(a1):
        return Plane3.PIVOT_FIRST
    if is_nonzero(b1):
        return Plane3.PIVOT_SECOND
    return Plane3.PIVOT_THIRD


def _plane_pivot_first(R: NDArray[np.floating[Any]]) -> tuple[Vector, Vector]:
    a1, b1, c1 = R[0]
    return _vec(-b1 / a1, 1.0, 0.0), _vec(-c1 / a1, 0.0, 1.0)


def _plane_pivot_second(R: NDArray[np.floating[Any]]) -> tuple[Vector, Vector]:
    a1, b1, c1 = R[0]
    return _vec(1.0, -a1 / b1, 0.0), _vec(0.0, -c1 / b1, 1.0)


def _plane_pivot_third(R: NDArray[np.floating[Any]]) -> tuple[Vector, Vector]:
    return _vec(1.0, 0.0, 0.0), _vec(0.0, 1.0, 0.0)


PLANE_3X3: dict[Plane3, Callable[[NDArray[np.floating[Any]]], tuple[Vector, Vector]]] = {
    Plane3.PIVOT_FIRST: _plane_pivot_first,
    Plane3.PIVOT_SECOND: _plane_pivot_second,
    Plane3.PIVOT_THIRD: _plane_pivot_third,
}


def classify_line(R: NDArray[np.floating[Any]]) -> Line3:
    a1, e1 = R[0, 0], R[1, 1]
    if is_nonzero(a1):
        if is_nonzero(e1):
            return Line3.PIVOTS_FIRST_SECOND
        return Line3.PIVOTS_FIRST_THIRD
    return Line3.PIVOTS_SECOND_THIRD


def _line_pivots_first_second(R: NDArray[np.floating[Any]]) -> Vector:
    a1, c1 = R[0, 0], R[0, 2]
    e1, f1 = R[1, 1], R[1, 2]
    return _vec(-c1 / a1, -f1 / e1, 1.0)


def _line_pivots_first_third(R: NDArray[np.floating[Any]]) -> Vector:
    a1, b1 = R[0, 0], R[0, 1]
    return _vec(-b1 / a1, 1.0, 0.0)


def _line_pivots_second_third(R: NDArray[np.floating[Any]]) -> Vector:
    return _vec(1.0, 0.0, 0.0)


LINE_3X3: dict[Line3, Callable[[NDArray[np.floating[Any]]], Vector]] = {
    Line3.PIVOTS_FIRST_SECOND: _line_pivots_first_second,
    Line3.PIVOTS_FIRST_THIRD: _line_pivots_first_third,
    Line3.PIVOTS_SECOND_THIRD: _line_pivots_second_third,
}


# ─── solvers ────────────────────────────────────────────────────────────


NONSINGULAR = 'nonsingular'


def reduce_shifted(
    A: NDArray[np.floating[Any]], lam: float
) -> tuple[NDArray[np.floating[Any]], int]:
    """RREF of A - lam I and its rank."""
    R = gauss_jordan(A - lam * np.eye(A.shape[0]))
    return R, count_leading_rows(R)


def merge_split_double(
    A: NDArray[np.floating[Any]], roots: tuple[float, ...]
) -> tuple[float, ...]:
    """
    Collapse a double root that rounding split in two.

    A double root of the characteristic polynomial is only determined to
    about the square root of machine epsilon, so the computed pair can
    straddle it by more than PRECISION. A - x I is then nonsingular at
    the computed roots but singular at their mean, which is accurate to
    rounding.

    The closest pair of roots is replaced by its mean when A - x I is
    nonsingular at one of them and singular at the mean. Otherwise the
    roots are returned unchanged. Positions are preserved.
    """
    n = len(roots)
    i, j = min(
        ((i, j) for i in range(n) for j in range(i + 1, n)),
        key=lambda p: abs(roots[p[0]] - roots[p[1]]),
    )
    if is_close(roots[i], roots[j]):
        return tuple(roots)
    if reduce_shifted(A, roots[i])[1] < n and reduce_shifted(A, roots[j])[1] < n:
        return tuple(roots)
    mid = (roots[i] + roots[j]) / 2.0
    if reduce_shifted(A, mid)[1] == n:
        return tuple(roots)
    merged = list(roots)
    merged[i] = merged[j] = mid
    return tuple(merged)


def line_eigenvector_3x3(
    A: NDArray[np.floating[Any]], lam: float, cases: list[str]
) -> Vector | None:
    """
    One eigenvector for lam, or None if A - lam I is nonsingular.

    The Line3 table is read from the first two RREF rows. When the rank
    is below 2 the second row is zero and the vector still satisfies the
    first, so it lies in the null space.
    """
    R, rank = reduce_shifted(A, lam)
    if rank == 3:
        cases.append(NONSINGULAR)
        return None
    case = classify_line(R)
    cases.append(case.value)
    return LINE_3X3[case](R)


def order_for_multiplicity(
    l1: float, l2: float, l3: float
) -> tuple[float, float, float]:
    """
    Move a repeated eigenvalue to the front.

    If l1 = l3 swap l2 and l3; then if l2 = l3 swap l1 and l3. For the
    ascending roots of the cubic this leaves any double root in positions
    1 and 2 and the simple root in position 3.
    """
    if is_close(l1, l3):
        l2, l3 = l3, l2
    if is_close(l2, l3):
        l1, l3 = l3, l1
    return l1, l2, l3


def eigenvectors_2x2(A: NDArray[np.floating[Any]]) -> EigenvectorSet:
    """
    Eigenvectors of a 2 x 2 matrix.

    Raises
    ------
    DimensionError
        If A is not 2 x 2.
    NonRealEigenvaluesError
        If A has non-real eigenvalues.
    """
    return eigenvectors_2x2_for(A, eigenvalues_2x2(A))


def eigenvectors_2x2_for(
    A: NDArray[np.floating[Any]], roots: tuple[float, float]
) -> EigenvectorSet:
    """
    Eigenvectors of a 2 x 2 matrix for the given eigenvalues.

    An eigenvalue at which A - lambda I is nonsingular contributes no
    vector, so the count falls below 2.
    """
    l1, l2 = merge_split_double(A, roots)
    eigenvalues = (l1, l2)
    cases: list[str] = []
    pairs: list[EigenPair] = []

    R, rank = reduce_shifted(A, l1)
    if rank == 2:
        cases.append(NONSINGULAR)
    else:
        case = classify_2x2(R)
        cases.append(case.value)
        if case is NullSpace2.ZERO_ROW:
            # A = l1 I
            pairs = [EigenPair(l1, _vec(1.0, 0.0)), EigenPair(l2, _vec(0.0, 1.0))]
            return EigenvectorSet(eigenvalues, tuple(pairs), tuple(cases))
        pairs.append(EigenPair(l1, LINE_2X2[case](R)))

    if is_close(l1, l2):
        # repeated eigenvalue with a one-dimensional eigenspace
        return EigenvectorSet(eigenvalues, tuple(pairs), tuple(cases))

    # distinct eigenvalues: l2 still gets its own line after a FREE_FIRST row
    R, rank = reduce_shifted(A, l2)
    if rank == 2:
        cases.append(NONSINGULAR)
        return EigenvectorSet(eigenvalues, tuple(pairs), tuple(cases))
    case = classify_2x2(R)
    cases.append(case.value)
    if case is NullSpace2.ZERO_ROW:
        # A = l2 I to within PRECISION; every vector belongs to l2
        pairs = [EigenPair(l2, _vec(1.0, 0.0)), EigenPair(l2, _vec(0.0, 1.0))]
        return EigenvectorSet(eigenvalues, tuple(pairs), tuple(cases))
    pairs.append(EigenPair(l2, LINE_2X2[case](R)))
    return EigenvectorSet(eigenvalues, tuple(pairs), tuple(cases))


def eigenvectors_3x3(A: NDArray[np.floating[Any]]) -> EigenvectorSet:
    """
    Eigenvectors of a 3 x 3 matrix.

    The eigenspace of the (possibly repeated) first eigenvalue is handled
    by the rank of RREF(A - l1 I): rank 0 gives the whole space, rank 1 a
    plane, rank 2 a line. The remaining eigenvalues each give one vector.
    Stops early once every distinct eigenvalue has been used.

    Raises
    ------
    DimensionError
        If A is not 3 x 3.
    NonRealEigenvaluesError
        If A has non-real eigenvalues.
    """
    return eigenvectors_3x3_for(A, eigenvalues_3x3(A))


def eigenvectors_3x3_for(
    A: NDArray[np.floating[Any]], roots: tuple[float, float, float]
) -> EigenvectorSet:
    """
    Eigenvectors of a 3 x 3 matrix for the given ascending eigenvalues.

    An eigenvalue at which A - lambda I is nonsingular contributes no
    vector, so the count falls below 3.
    """
    l1, l2, l3 = order_for_multiplicity(*merge_split_double(A, roots))
    eigenvalues = (l1, l2, l3)
    cases: list[str] = []
    pairs: list[EigenPair] = []

    R, rank = reduce_shifted(A, l1)
    # a rank-1 plane covers l1 and l2 even when they are not close
    l2_done = is_close(l1, l2) or rank == 1

    if rank == 0:
        # A = l1 I
        cases.append('whole_space')
        pairs = [
            EigenPair(l1, _vec(1.0, 0.0, 0.0)),
            EigenPair(l2, _vec(0.0, 1.0, 0.0)),
            EigenPair(l3, _vec(0.0, 0.0, 1.0)),
        ]
        return EigenvectorSet(eigenvalues, tuple(pairs), tuple(cases))

    if rank == 1:
        case = classify_plane(R)
        cases.append(case.value)
        v1, v2 = PLANE_3X3[case](R)
        pairs = [EigenPair(l1, v1), EigenPair(l2, v2)]
        if is_close(l1, l3):
            # triple eigenvalue with a two-dimensional eigenspace
            return EigenvectorSet(eigenvalues, tuple(pairs), tuple(cases))
    else:
        if rank == 3:
            cases.append(NONSINGULAR)
        else:
            case = classify_line(R)
            cases.append(case.value)
            pairs = [EigenPair(l1, LINE_3X3[case](R))]
        if is_close(l2, l3):
            # triple eigenvalue, at most a one-dimensional eigenspace
            return EigenvectorSet(eigenvalues, tuple(pairs), tuple(cases))

    v3 = line_eigenvector_3x3(A, l3, cases)
    if not l2_done:
        v2 = line_eigenvector_3x3(A, l2, cases)
        if v2 is not None:
            pairs.append(EigenPair(l2, v2))
    if v3 is not None:
        pairs.append(EigenPair(l3, v3))
    return EigenvectorSet(eigenvalues, tuple(pairs), tuple(cases))
