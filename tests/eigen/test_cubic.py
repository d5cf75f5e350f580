"""
Tests for the monic real-cubic solver.

Each regime of the solver is exercised with a polynomial whose roots are
known exactly.
"""

import numpy as np
import pytest

from pylinalg.eigen import CubicRoots, solve_monic_cubic


def _poly(roots):
    """Coefficients (a, b, c) of the monic cubic with the given roots."""
    r1, r2, r3 = roots
    a = -(r1 + r2 + r3)
    b = r1 * r2 + r1 * r3 + r2 * r3
    c = -(r1 * r2 * r3)
    return a, b, c


# ═══════════════════════════════════════════════════════════════════════
# Three distinct real roots
# ═══════════════════════════════════════════════════════════════════════


class TestDistinctRoots:

    def test_one_two_three(self):
        sol = solve_monic_cubic(-6.0, 11.0, -6.0)
        assert sol.count == 3
        np.testing.assert_allclose(sol.roots, [1.0, 2.0, 3.0], rtol=1e-12)

    def test_roots_ascending(self):
        sol = solve_monic_cubic(*_poly((5.0, -3.0, 0.5)))
        assert list(sol.roots) == sorted(sol.roots)
        np.testing.assert_allclose(sol.roots, [-3.0, 0.5, 5.0], rtol=1e-10)

    @pytest.mark.parametrize("roots", [(-1.0, 0.0, 1.0), (0.1, 0.2, 0.7), (-10.0, 2.5, 40.0)])
    def test_matches_numpy_roots(self, roots):
        a, b, c = _poly(roots)
        sol = solve_monic_cubic(a, b, c)
        expected = np.sort(np.roots([1.0, a, b, c]).real)
        np.testing.assert_allclose(sol.roots, expected, rtol=1e-9, atol=1e-12)


# ═══════════════════════════════════════════════════════════════════════
# Repeated roots
# ═══════════════════════════════════════════════════════════════════════


class TestRepeatedRoots:

    def test_triple_root(self):
        sol = solve_monic_cubic(-6.0, 12.0, -8.0)   # (x-2)^3
        assert sol == CubicRoots(count=3, roots=(2.0, 2.0, 2.0))

    def test_triple_root_at_zero(self):
        sol = solve_monic_cubic(0.0, 0.0, 0.0)
        assert sol.count == 3
        assert sol.roots == (0.0, 0.0, 0.0)

    def test_double_root_low(self):
        sol = solve_monic_cubic(-6.0, 9.0, -4.0)    # (x-1)^2 (x-4)
        assert sol.count == 3
        assert sol.roots == (1.0, 1.0, 4.0)

    def test_double_root_high(self):
        sol = solve_monic_cubic(0.0, -3.0, 2.0)     # (x+2) (x-1)^2
        assert sol.count == 3
        assert sol.roots == (-2.0, 1.0, 1.0)


# ═══════════════════════════════════════════════════════════════════════
# One real root
# ═══════════════════════════════════════════════════════════════════════


class TestSingleRealRoot:

    def test_x_cubed_minus_one(self):
        sol = solve_monic_cubic(0.0, 0.0, -1.0)
        assert sol.count == 1
        np.testing.assert_allclose(sol.roots, [1.0])

    def test_negative_root(self):
        sol = solve_monic_cubic(0.0, 1.0, 2.0)      # (x+1)(x^2 - x + 2)
        assert sol.count == 1
        np.testing.assert_allclose(sol.roots, [-1.0], rtol=1e-12)

    def test_root_satisfies_polynomial(self):
        a, b, c = 1.0, 2.0, 3.0
        (x,) = solve_monic_cubic(a, b, c).roots
        assert abs(x ** 3 + a * x ** 2 + b * x + c) < 1e-10
