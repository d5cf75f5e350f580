"""
Vector-space module.

Linear independence, span membership, basis extraction and coordinate
changes, all computed from the RREF of the matrix whose columns are the
given vectors.

Public API:
    linearly_independent(vectors)  - Whether the vectors are independent
    is_basis(vectors, dim)         - Whether the vectors form a basis of R^dim
    in_span(vectors, v)            - Whether v lies in the span
    find_basis(vectors)            - Basis of the span (as columns)
    coordinates(basis, v)          - B-coordinates of v
    change_of_basis(B1, B2)        - Change-of-coordinates matrix B2 -> B1
    b_matrix(basis, L)             - Matrix of L relative to basis
"""

from pylinalg.vectorspace.design import VectorSetDesign
from pylinalg.vectorspace.solvers import (
    linearly_independent,
    is_basis,
    in_span,
    find_basis,
    coordinates,
    change_of_basis,
    b_matrix,
)

__all__ = [
    "linearly_independent",
    "is_basis",
    "in_span",
    "find_basis",
    "coordinates",
    "change_of_basis",
    "b_matrix",
    "VectorSetDesign",
]
