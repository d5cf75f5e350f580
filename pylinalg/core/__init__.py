"""
Core infrastructure for PyLinalg.

This module provides shared abstractions, utilities, and compute
infrastructure used by all domain modules (elimination, vectorspace,
inverse, eigen).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Precision policy, timing, cofactor kernels
"""

from pylinalg.core.protocols import Backend
from pylinalg.core.result import Result
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    UnsupportedError,
    NonRealEigenvaluesError,
    NumericalError,
    SingularMatrixError,
    NotDiagonalizableError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "UnsupportedError",
    "NonRealEigenvaluesError",
    "NumericalError",
    "SingularMatrixError",
    "NotDiagonalizableError",
]
