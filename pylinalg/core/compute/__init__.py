"""
Shared compute infrastructure for PyLinalg.

This module provides the precision policy, timing utilities and linear
algebra kernels shared across all domain modules.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    precision: The shared PRECISION threshold and tolerance tiers
    timing: Execution timing utilities
    linalg: Cofactor-expansion kernels (determinant, adjugate, inverse)
"""

from pylinalg.core.compute.precision import (
    PRECISION,
    ToleranceTier,
    is_zero,
    is_nonzero,
    is_close,
)
from pylinalg.core.compute.timing import Timer

__all__ = [
    # Precision
    "PRECISION",
    "ToleranceTier",
    "is_zero",
    "is_nonzero",
    "is_close",
    # Timing
    "Timer",
]
