"""
Row reduction module.

Gauss-Jordan elimination to reduced row-echelon form and the rank
computed from it.

Public API:
    rref(A)     - Reduced row-echelon form, rank and pivot columns
    rank(A)     - Rank of A
    is_rref(A)  - Whether A is already in RREF
"""

from pylinalg.elimination.design import MatrixDesign
from pylinalg.elimination.solution import RREFParams, RREFSolution
from pylinalg.elimination.solvers import rref, rank, is_rref

__all__ = [
    "rref",
    "rank",
    "is_rref",
    "MatrixDesign",
    "RREFParams",
    "RREFSolution",
]
