"""
Eigen backends.

Available backends:
    ClosedFormEigenBackend: CPU closed-form eigenvalues and RREF eigenvectors
"""

from pylinalg.eigen.backends.cpu import ClosedFormEigenBackend

__all__ = [
    "ClosedFormEigenBackend",
]
