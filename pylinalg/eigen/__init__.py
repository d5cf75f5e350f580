"""
Eigen module.

Closed-form eigenvalues (quadratic formula, real-cubic solver) and
eigenvectors read off RREF(A - lambda I), for 2 x 2 and 3 x 3 matrices
with real spectra.

Public API:
    eigenvalues(A)   - Real eigenvalues
    eigenvectors(A)  - Eigenvalues plus independent eigenvectors
    diagonalize(A)   - P, D, P_inv with A = P D P_inv
    solve_monic_cubic(a, b, c) - Real roots of x^3 + a x^2 + b x + c

Size-specific variants (eigenvalues_2x2, eigenvectors_3x3,
diagonalize_2x2, ...) reject other sizes with DimensionError.
"""

from pylinalg.eigen.design import EigenDesign
from pylinalg.eigen.solution import (
    EigenParams,
    EigenSolution,
    DiagonalizationParams,
    DiagonalizationSolution,
)
from pylinalg.eigen._cubic import CubicRoots, solve_monic_cubic
from pylinalg.eigen.solvers import (
    eigenvalues,
    eigenvalues_2x2,
    eigenvalues_3x3,
    eigenvectors,
    eigenvectors_2x2,
    eigenvectors_3x3,
    diagonalize,
    diagonalize_2x2,
    diagonalize_3x3,
)

__all__ = [
    "eigenvalues",
    "eigenvalues_2x2",
    "eigenvalues_3x3",
    "eigenvectors",
    "eigenvectors_2x2",
    "eigenvectors_3x3",
    "diagonalize",
    "diagonalize_2x2",
    "diagonalize_3x3",
    "solve_monic_cubic",
    "CubicRoots",
    "EigenDesign",
    "EigenParams",
    "EigenSolution",
    "DiagonalizationParams",
    "DiagonalizationSolution",
]
