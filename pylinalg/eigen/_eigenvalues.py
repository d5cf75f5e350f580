"""
Closed-form eigenvalues of 2 x 2 and 3 x 3 matrices.

2 x 2: the characteristic polynomial l^2 + (-a - d) l + (ad - bc) is
solved with the quadratic formula.

3 x 3: the characteristic polynomial

    l^3 - tr(A) l^2 + m(A) l - det(A)

with m(A) the sum of the 2 x 2 principal minors, is handed to the monic
cubic solver.

Only real spectra are supported; anything else raises
NonRealEigenvaluesError.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import NonRealEigenvaluesError
from pylinalg.core.validation import check_shape
from pylinalg.eigen._cubic import solve_monic_cubic


def characteristic_coefficients_3x3(
    A: NDArray[np.floating[Any]],
) -> tuple[float, float, float]:
    """
    (trace, principal-minor sum, determinant) of a 3 x 3 matrix.
    """
    (a, b, c), (d, e, f), (g, h, i) = A.tolist()
    trace = a + e + i
    minors = (a * e - b * d) + (a * i - c * g) + (e * i - f * h)
    det = (a * e * i) - (a * f * h) - (b * d * i) + (b * f * g) - (c * e * g) + (c * d * h)
    return trace, minors, det


def eigenvalues_2x2(A: NDArray[np.floating[Any]]) -> tuple[float, float]:
    """
    Real eigenvalues of a 2 x 2 matrix.

    Returns
    -------
    (lambda1, lambda2)
        lambda1 takes the +sqrt branch of the quadratic formula, so
        lambda1 >= lambda2.

    Raises
    ------
    DimensionError
        If A is not 2 x 2.
    NonRealEigenvaluesError
        If the discriminant is negative.
    """
    check_shape(A, (2, 2), 'A')
    (a, b), (c, d) = A.tolist()
    linear = -a - d
    constant = a * d - b * c
    disc = linear * linear - 4 * constant
    if disc < 0:
        raise NonRealEigenvaluesError(
            f"A has non-real eigenvalues (discriminant {disc:.6g} < 0); "
            f"only real eigenvalues are supported",
            dimension=2,
            discriminant=disc,
        )
    root = math.sqrt(disc)
    return (-linear + root) / 2, (-linear - root) / 2


def eigenvalues_3x3(A: NDArray[np.floating[Any]]) -> tuple[float, float, float]:
    """
    Real eigenvalues of a 3 x 3 matrix, ascending.

    Raises
    ------
    DimensionError
        If A is not 3 x 3.
    NonRealEigenvaluesError
        If the characteristic cubic has only one real root.
    """
    check_shape(A, (3, 3), 'A')
    trace, minors, det = characteristic_coefficients_3x3(A)
    cubic = solve_monic_cubic(-trace, minors, -det)
    if cubic.count != 3:
        raise NonRealEigenvaluesError(
            "A has non-real eigenvalues (characteristic cubic has one real root); "
            "only real eigenvalues are supported",
            dimension=3,
        )
    l1, l2, l3 = cubic.roots
    return l1, l2, l3
