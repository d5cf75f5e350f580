"""
Linear algebra kernels for PyLinalg.

All functions follow these conventions:
    - Inputs are validated float64 NumPy arrays (validation happens in the
      public solvers, not here)
    - Results are freshly allocated arrays
    - Errors are raised immediately with clear messages

Submodules:
    cofactor: Determinant, cofactor, adjugate and inverse by Laplace expansion
"""

from pylinalg.core.compute.linalg.cofactor import (
    minor_matrix,
    det_cpu,
    cofactor_cpu,
    cofactor_matrix_cpu,
    adjugate_cpu,
    inverse_cpu,
)

__all__ = [
    "minor_matrix",
    "det_cpu",
    "cofactor_cpu",
    "cofactor_matrix_cpu",
    "adjugate_cpu",
    "inverse_cpu",
]
