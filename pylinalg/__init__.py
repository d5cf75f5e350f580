"""
PyLinalg: exact-algorithm linear algebra for small matrices.

Row reduction, rank, determinants and inverses by cofactors, vector-space
queries, and closed-form eigenvalues, eigenvectors and diagonalization
for 2 x 2 and 3 x 3 matrices.

Submodules:
    elimination: RREF, rank, is_rref
    inverse: Determinant, cofactors, adjugate, inverse
    vectorspace: Independence, span, bases, coordinates
    eigen: Eigenvalues, eigenvectors, diagonalization
"""

__version__ = "0.1.0"

from pylinalg import elimination
from pylinalg import inverse
from pylinalg import vectorspace
from pylinalg import eigen

from pylinalg.elimination import rref, rank, is_rref
from pylinalg.inverse import det, inverse as inv
from pylinalg.vectorspace import (
    linearly_independent,
    is_basis,
    in_span,
    find_basis,
    coordinates,
    change_of_basis,
    b_matrix,
)
from pylinalg.eigen import eigenvalues, eigenvectors, diagonalize

__all__ = [
    "__version__",
    "elimination",
    "inverse",
    "vectorspace",
    "eigen",
    "rref",
    "rank",
    "is_rref",
    "det",
    "inv",
    "linearly_independent",
    "is_basis",
    "in_span",
    "find_basis",
    "coordinates",
    "change_of_basis",
    "b_matrix",
    "eigenvalues",
    "eigenvectors",
    "diagonalize",
]
