"""
Closed-form real roots of a monic cubic.

Solves x^3 + a x^2 + b x + c = 0 for its real roots, following the
classic real-cubic solver from the GNU Scientific Library
(gsl_poly_solve_cubic). With

    q = a^2 - 3b,        Q = q / 9
    r = 2a^3 - 9ab + 27c, R = r / 54

the roots fall into four regimes:

    R == 0 and Q == 0        triple root
    729 r^2 == 2916 q^3      double root plus a single root
    R^2 < Q^3                three distinct roots (trigonometric form)
    otherwise                one real root (Cardano)

The double-root test compares the scaled discriminants with exact float
equality, as the reference solver does. A tolerance compare would move
inputs near the degenerate boundary into a different branch, so it is
kept as is.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class CubicRoots:
    """
    Real roots of a monic cubic.

    Attributes
    ----------
    count : int
        Number of real roots reported: 3 (with multiplicity) or 1.
    roots : tuple of float
        The roots. Ascending when count == 3.
    """
    count: int
    roots: tuple[float, ...]


def solve_monic_cubic(a: float, b: float, c: float) -> CubicRoots:
    """
    Real roots of x^3 + a x^2 + b x + c.

    Examples
    --------
    >>> sol = solve_monic_cubic(-6.0, 11.0, -6.0)   # (x-1)(x-2)(x-3)
    >>> sol.count, [round(x, 12) for x in sol.roots]
    (3, [1.0, 2.0, 3.0])
    """
    q = a * a - 3 * b
    r = 2 * a * a * a - 9 * a * b + 27 * c

    Q = q / 9
    R = r / 54

    Q3 = Q * Q * Q
    R2 = R * R

    CR2 = 729 * r * r
    CQ3 = 2916 * q * q * q

    shift = a / 3

    if R == 0 and Q == 0:
        x = -shift
        return CubicRoots(count=3, roots=(x, x, x))

    if CR2 == CQ3:
        # CR2 >= 0 forces Q > 0 here; Q == 0 was handled above.
        sqrt_Q = math.sqrt(Q)
        if R > 0:
            roots = (-2 * sqrt_Q - shift, sqrt_Q - shift, sqrt_Q - shift)
        else:
            roots = (-sqrt_Q - shift, -sqrt_Q - shift, 2 * sqrt_Q - shift)
        return CubicRoots(count=3, roots=roots)

    if R2 < Q3:
        sgn_R = 1.0 if R >= 0 else -1.0
        ratio = sgn_R * math.sqrt(R2 / Q3)
        theta = math.acos(ratio)
        norm = -2 * math.sqrt(Q)
        x0 = norm * math.cos(theta / 3) - shift
        x1 = norm * math.cos((theta + 2.0 * math.pi) / 3) - shift
        x2 = norm * math.cos((theta - 2.0 * math.pi) / 3) - shift
        return CubicRoots(count=3, roots=tuple(sorted((x0, x1, x2))))

    sgn_R = 1.0 if R >= 0 else -1.0
    A = -sgn_R * math.pow(abs(R) + math.sqrt(R2 - Q3), 1.0 / 3.0)
    B = Q / A
    return CubicRoots(count=1, roots=(A + B - shift,))
