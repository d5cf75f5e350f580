"""
Vector-space queries built on row reduction.

Every query turns a list of vectors into the matrix whose columns are
those vectors and reads the answer off its rank or its RREF:

    linearly_independent  rank == number of vectors
    in_span               rank([B]) == rank([B | v])
    find_basis            keep each vector that raises the rank
    coordinates           last column of RREF([B | v])
    change_of_basis       coordinates of each vector of B2 w.r.t. B1
    b_matrix              P^-1 L P with P = [B]
"""

from __future__ import annotations

from typing import Any, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.validation import check_array, check_1d, check_finite, check_matrix, check_square
from pylinalg.core.compute.linalg.cofactor import inverse_cpu
from pylinalg.elimination._gauss import gauss_jordan, rank_of
from pylinalg.vectorspace.design import VectorSetDesign


VectorList = Sequence[ArrayLike] | VectorSetDesign


def _check_vector(v: ArrayLike, dim: int, name: str) -> NDArray[np.floating[Any]]:
    arr = check_array(v, name)
    check_1d(arr, name)
    check_finite(arr, name)
    if arr.shape[0] != dim:
        raise DimensionError(
            f"{name}: must have the same dimension as the vector list ({dim}), "
            f"got {arr.shape[0]}"
        )
    return arr


def linearly_independent(vectors: VectorList) -> bool:
    """
    True if the vectors are linearly independent.

    Parameters
    ----------
    vectors : sequence of array-like
        n >= 1 vectors of equal dimension.

    Raises
    ------
    ValidationError
        If the list is empty.
    DimensionError
        If the vectors have different dimensions.
    """
    design = VectorSetDesign.from_vectors(vectors)
    return rank_of(design.as_matrix()) == design.n


def is_basis(vectors: VectorList, dim: int) -> bool:
    """
    True if the vectors form a basis of R^dim.

    That is: there are exactly dim of them, each of dimension dim, and
    they are linearly independent.
    """
    if dim < 1:
        raise ValidationError(f"dim: must be >= 1, got {dim}")
    design = VectorSetDesign.from_vectors(vectors)
    if design.n != dim or design.dim != dim:
        return False
    return linearly_independent(design)


def in_span(vectors: VectorList, v: ArrayLike) -> bool:
    """
    True if v is a linear combination of the vectors.

    Raises
    ------
    DimensionError
        If v does not have the vectors' dimension.
    """
    design = VectorSetDesign.from_vectors(vectors)
    target = _check_vector(v, design.dim, 'v')
    coefficients = design.as_matrix()
    augmented = np.column_stack([coefficients, target])
    return rank_of(coefficients) == rank_of(augmented)


def find_basis(vectors: VectorList) -> NDArray[np.floating[Any]]:
    """
    Basis for the span of the vectors.

    Walks the list in order and keeps a vector only if it raises the rank
    of the vectors kept so far.

    Returns
    -------
    ndarray, shape (dim, k)
        Kept vectors as columns; k is the dimension of the span. k is 0
        (shape (dim, 0)) when every vector is zero.
    """
    design = VectorSetDesign.from_vectors(vectors)
    kept: list[NDArray[np.floating[Any]]] = []
    for v in design.vectors:
        candidate = np.column_stack(kept + [v])
        if rank_of(candidate) == len(kept) + 1:
            kept.append(v)
    if not kept:
        return np.zeros((design.dim, 0))
    return np.column_stack(kept)


def coordinates(basis: VectorList, v: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Coordinates of v with respect to an ordered basis B.

    Row-reduces [B | v]; the first n entries of the last column are the
    B-coordinates.

    Raises
    ------
    ValidationError
        If the basis vectors are dependent or v is not in their span.
    DimensionError
        If v does not have the basis vectors' dimension.
    """
    design = VectorSetDesign.from_vectors(basis, name='basis')
    target = _check_vector(v, design.dim, 'v')
    if not linearly_independent(design):
        raise ValidationError("basis: vectors are not linearly independent")
    if not in_span(design, target):
        raise ValidationError("v: not in the span of basis")

    R = gauss_jordan(np.column_stack([design.as_matrix(), target]))
    return R[:design.n, design.n].copy()


def change_of_basis(B1: VectorList, B2: VectorList) -> NDArray[np.floating[Any]]:
    """
    Change-of-coordinates matrix from B2 to B1.

    Column i is the B1-coordinate vector of B2[i], so for any x in the
    common span, [x]_B1 = M @ [x]_B2.

    Raises
    ------
    ValidationError
        If either set is dependent, the sets have different sizes, or they
        do not span the same space.
    DimensionError
        If the vectors of B1 and B2 have different dimensions.
    """
    d1 = VectorSetDesign.from_vectors(B1, name='B1')
    d2 = VectorSetDesign.from_vectors(B2, name='B2')
    if d1.n != d2.n:
        raise ValidationError(
            f"B1 and B2 must contain the same number of vectors, got {d1.n} and {d2.n}"
        )
    if not (linearly_independent(d1) and linearly_independent(d2)):
        raise ValidationError("At least one of B1, B2 is not linearly independent")
    if d1.dim != d2.dim:
        raise DimensionError(
            f"B1 and B2 must have the same dimension, got {d1.dim} and {d2.dim}"
        )
    for i, v in enumerate(d2.vectors):
        if not in_span(d1, v):
            raise ValidationError(
                f"B2[{i}] is not in the span of B1; the sets are not bases of the same space"
            )
    return np.column_stack([coordinates(d1, v) for v in d2.vectors])


def b_matrix(basis: VectorList, L: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Matrix of the linear map L with respect to basis B: P^-1 L P.

    Parameters
    ----------
    basis : sequence of array-like
        n vectors of dimension n.
    L : array-like
        Standard matrix of the map, n x n with n >= 1.

    Raises
    ------
    DimensionError
        If L is not square, or basis does not hold n vectors of dimension n.
    SingularMatrixError
        If the basis vectors are dependent.
    """
    L_arr = check_matrix(L, 'L')
    check_square(L_arr, 'L')
    n = L_arr.shape[0]
    design = VectorSetDesign.from_vectors(basis, name='basis')
    if design.dim != n or design.n != n:
        raise DimensionError(
            f"basis: must hold {n} vectors of dimension {n} to match L, "
            f"got {design.n} of dimension {design.dim}"
        )
    P = design.as_matrix()
    P_inv = inverse_cpu(P, matrix_name='basis matrix')
    return P_inv @ L_arr @ P
