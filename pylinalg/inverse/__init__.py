"""
Determinant and inverse module.

Public API:
    det(A)              - Determinant
    cofactor(A, i, j)   - Single cofactor
    cofactor_matrix(A)  - Matrix of cofactors
    adjugate(A)         - Adjugate matrix
    inverse(A)          - Inverse (raises SingularMatrixError)
"""

from pylinalg.inverse.solvers import (
    det,
    cofactor,
    cofactor_matrix,
    adjugate,
    inverse,
)

__all__ = [
    "det",
    "cofactor",
    "cofactor_matrix",
    "adjugate",
    "inverse",
]
