"""
Numerical precision constants and utilities.

PRECISION is the single zero threshold shared by every component:
leading-entry detection in RREF, rank counting, invertibility checks and
the "is this coefficient zero" branching of the eigenvector solver all
read it from here.

Tolerance tiers for comparing computed values against references live
here as well; they are used by the test suite, not by the algorithms.
"""

from dataclasses import dataclass


# Any |x| < PRECISION is treated as zero.
PRECISION: float = 1e-9


def is_zero(x: float, tol: float = PRECISION) -> bool:
    """True if -tol < x < tol."""
    return bool(-tol < x < tol)


def is_nonzero(x: float, tol: float = PRECISION) -> bool:
    """True if x lies outside the open interval (-tol, tol)."""
    return not is_zero(x, tol)


def is_close(a: float, b: float, tol: float = PRECISION) -> bool:
    """
    Check if two scalars agree within the zero threshold.

    Used for deciding whether two eigenvalues are the same root.
    """
    return is_zero(a - b, tol)


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Exact arithmetic paths (RREF of small integer matrices, cofactor inverse)
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision reference',
)

# Identities built from closed-form roots (acos/cbrt lose a few digits)
CLOSED_FORM = ToleranceTier(
    rtol=1e-7,
    atol=1e-8,
    name='closed_form',
    description='Closed-form eigen identities (A v = lambda v, A = P D P^-1)',
)
