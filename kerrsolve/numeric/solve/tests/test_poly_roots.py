from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose
import pytest

from kerrsolve.numeric.math_ext import csqrt
from kerrsolve.numeric.solve import (cubic_eq, quadratic_eq, quartic_eq,
                                     quartic_eq_c)


# Written by the KerrSolve authors, October 2026.


# ======================================================================

def _by_value_key(z) -> list[complex]:
    return sorted((complex(z_i) for z_i in z),
                  key=lambda z_i: (round(z_i.real, 6), round(z_i.imag, 6)))


def _rel_residual(coeffs, z) -> float:
    """
    Residual of monic polynomial with given coefficients (highest
    power first, leading 1 omitted) at `z`, relative to the magnitude
    of the terms.
    """
    c = np.concatenate(([1.0], coeffs))
    terms = np.abs(c) * np.abs(z) ** np.arange(len(c) - 1, -1, -1)
    return abs(np.polyval(c, z)) / max(terms.sum(), 1e-300)


# ----------------------------------------------------------------------

class TestQuadraticEq(TestCase):
    def test_real_roots(self):
        res = quadratic_eq(0.0, 0.0, -1.0, 0.0)
        self.assertEqual(res.nr, 2)
        self.assertEqual(res.zr.tolist(), [1.0, -1.0])  # '+' root first.
        assert_allclose(res.zi, [0.0, 0.0], atol=1e-15)

        res = quadratic_eq(-3.0, 0.0, 2.0, 0.0)
        assert_allclose(sorted(res.zr), [1.0, 2.0])

    def test_conjugate_pair(self):
        res = quadratic_eq(2.0, 0.0, 5.0, 0.0)
        self.assertEqual(res.nr, 0)
        self.assertEqual(res.zr.tolist(), [-1.0, -1.0])
        self.assertEqual(res.zi.tolist(), [2.0, -2.0])

    def test_repeated_root(self):
        res = quadratic_eq(-2.0, 0.0, 1.0, 0.0)
        self.assertEqual(res.nr, 2)
        self.assertEqual(res.zr.tolist(), [1.0, 1.0])
        self.assertEqual(res.zi.tolist(), [0.0, 0.0])

        res = quadratic_eq(0.0, 0.0, 0.0, 0.0)
        self.assertEqual(res.zr.tolist(), [0.0, 0.0])

    def test_complex_coefficients(self):
        # Roots 1 + 2i and 3 - i.
        p, q = -(4 + 1j), (1 + 2j) * (3 - 1j)
        res = quadratic_eq(p.real, p.imag, q.real, q.imag)
        self.assertEqual(res.nr, 0)
        assert_allclose(_by_value_key(res.z), [1 + 2j, 3 - 1j], atol=1e-12)

        # One real root (2) and one complex root (i).
        p, q = -(2 + 1j), 2j
        res = quadratic_eq(p.real, p.imag, q.real, q.imag)
        self.assertEqual(res.nr, 1)
        assert_allclose(_by_value_key(res.z), [1j, 2], atol=1e-12)

    def test_plus_root_first(self):
        # z[0] - z[1] = sqrt(D) using the canonical branch.
        for p, q in [(3 + 0j, 1 + 0j), (-3 + 0j, 1 + 0j), (1 + 1j, -2 + 3j),
                     (-1 + 2j, 4 - 1j), (0j, 4j)]:
            res = quadratic_eq(p.real, p.imag, q.real, q.imag)
            sqrt_d = csqrt(p * p - 4 * q)
            self.assertAlmostEqual(abs(res.z[0] - res.z[1] - sqrt_d), 0.0,
                                   places=12)
            self.assertAlmostEqual(abs(res.z[0] + res.z[1] + p), 0.0,
                                   places=12)

    def test_cancellation(self):
        # Small root of x^2 + 1e8 x + 1 = 0 is -1e-8 to full precision.
        res = quadratic_eq(1e8, 0.0, 1.0, 0.0)
        self.assertAlmostEqual(res.zr[0] / -1e-8, 1.0, places=12)

    def test_close_roots(self):
        # Roots 1 and 1 + 2e-6 are distinct, not a repeated root.
        res = quadratic_eq(-(2.0 + 2e-6), 0.0, 1.0 + 2e-6, 0.0)
        self.assertEqual(res.nr, 2)
        self.assertGreater(res.zr[0], res.zr[1])
        assert_allclose(res.zr, [1.0 + 2e-6, 1.0], rtol=1e-9)
        self.assertEqual(res.zi.tolist(), [0.0, 0.0])


# ----------------------------------------------------------------------

class TestCubicEq(TestCase):
    def test_three_real_roots(self):
        res = cubic_eq(-6.0, 11.0, -6.0)
        self.assertEqual(res.nr, 3)
        assert_allclose(res.zr, [1.0, 2.0, 3.0], rtol=1e-12)
        self.assertEqual(res.zi.tolist(), [0.0, 0.0, 0.0])

    def test_one_real_root(self):
        res = cubic_eq(0.0, 0.0, -1.0)  # x^3 = 1
        self.assertEqual(res.nr, 1)
        self.assertAlmostEqual(res.zr[0], 1.0, places=14)
        self.assertEqual(res.zi[0], 0.0)
        self.assertGreater(res.zi[1], 0.0)
        self.assertEqual(res.zi[1], -res.zi[2])
        self.assertEqual(res.zr[1], res.zr[2])
        assert_allclose(res.z[1], -0.5 + 0.5j * np.sqrt(3), atol=1e-14)

    def test_repeated_roots(self):
        res = cubic_eq(-6.0, 12.0, -8.0)  # (x - 2)^3
        self.assertEqual(res.nr, 3)
        assert_allclose(res.zr, [2.0, 2.0, 2.0])

        res = cubic_eq(-4.0, 5.0, -2.0)  # (x - 1)^2 (x - 2)
        self.assertEqual(res.nr, 3)
        assert_allclose(res.zr, [1.0, 1.0, 2.0], atol=1e-6)

        res = cubic_eq(0.0, 0.0, 0.0)
        self.assertEqual(res.zr.tolist(), [0.0, 0.0, 0.0])

    def test_depressed_forms(self):
        res = cubic_eq(0.0, -3.0, 0.0)  # x(x^2 - 3)
        assert_allclose(res.zr, [-np.sqrt(3), 0.0, np.sqrt(3)], atol=1e-14)

        res = cubic_eq(0.0, 1.0, 0.0)  # x(x^2 + 1)
        self.assertEqual(res.nr, 1)
        assert_allclose(_by_value_key(res.z), [-1j, 0.0, 1j], atol=1e-14)

    def test_small_scale(self):
        # Complex pair with a small imaginary part, all roots ~1e-6.
        z = 1e-6 * np.array([-1.0, 2.0 + 0.01j, 2.0 - 0.01j])
        res = cubic_eq(*np.poly(z)[1:].real)
        self.assertEqual(res.nr, 1)
        assert_allclose(res.z, z, atol=1e-14)

    def test_residual(self):
        rng = np.random.default_rng(20261019)
        for coeffs in rng.uniform(-10.0, 10.0, size=(100, 3)):
            res = cubic_eq(*coeffs)
            self.assertEqual(len(res.z), 3)
            for z in res.z:
                self.assertLess(_rel_residual(coeffs, z), 1e-9)


# ----------------------------------------------------------------------

# Coefficients of quartics with known roots.
_quartic_known = [
    # (a3, a2, a1, a0), nr, roots in sort_mix order.
    ((-10.0, 35.0, -50.0, 24.0), 4, [1, 2, 3, 4]),
    ((0.0, -5.0, 0.0, 4.0), 4, [-2, -1, 1, 2]),
    ((1.0, -1.0, 1.0, -2.0), 2, [-2, 1, 1j, -1j]),
    ((2.0, 6.0, 2.0, 5.0), 0, [-1 + 2j, -1 - 2j, 1j, -1j]),
    ((0.0, 0.0, 0.0, -16.0), 2, [-2, 2, 2j, -2j]),
    ((-4.0, 6.0, -4.0, 1.0), 4, [1, 1, 1, 1]),
    ((-6.0, 13.0, -12.0, 4.0), 4, [1, 1, 2, 2]),
    ((0.0, 0.0, 0.0, 0.0), 4, [0, 0, 0, 0]),
    ((0.0, 2.0, 0.0, 1.0), 0, [1j, 1j, -1j, -1j]),
]


@pytest.mark.parametrize("coeffs, nr, roots", _quartic_known)
def test_quartic_known_roots(coeffs, nr, roots):
    res = quartic_eq(*coeffs)
    assert res.nr == nr
    assert len(res.zr) == len(res.zi) == 4
    assert_allclose(res.z, np.array(roots, dtype=complex), atol=1e-7)


@pytest.mark.parametrize("coeffs, nr, roots", _quartic_known)
def test_quartic_c_matches(coeffs, nr, roots):
    res_c = quartic_eq_c(*coeffs)
    res = quartic_eq(*coeffs)
    assert res_c.nr == res.nr
    assert_allclose([res_c.z1, res_c.z2, res_c.z3, res_c.z4], res.z)
    assert all(isinstance(z, complex) for z in res_c[1:])


def test_quartic_residual():
    """
    Every quartic gives four roots that satisfy the equation and complex
    roots always appear as conjugate pairs.
    """
    rng = np.random.default_rng(42)
    for coeffs in rng.uniform(-10.0, 10.0, size=(200, 4)):
        res = quartic_eq(*coeffs)
        assert len(res.z) == 4
        assert res.nr in (0, 2, 4)

        for z in res.z:
            assert _rel_residual(coeffs, z) < 1e-6

        # Complex roots follow the real roots as (+, -) conjugate pairs.
        for i in range(res.nr, 4, 2):
            assert res.zi[i] > 0.0
            assert res.z[i + 1] == pytest.approx(np.conj(res.z[i]),
                                                 rel=1e-6, abs=1e-9)


def test_quartic_real_roots_ascending():
    res = quartic_eq(-10.0, 35.0, -50.0, 24.0)
    assert np.all(np.diff(res.zr[:res.nr]) >= 0.0)
    assert_allclose(res.real_roots(), [1.0, 2.0, 3.0, 4.0])


def test_quartic_scaled():
    # Roots spread over several orders of magnitude.
    roots = [0.01, 0.5, 20.0, 300.0]
    c = np.poly(roots)
    res = quartic_eq(*c[1:])
    assert res.nr == 4
    assert_allclose(res.zr, roots, rtol=1e-6)


@pytest.mark.parametrize("scale", [2.0 ** -20, 2.0 ** -10, 2.0 ** 10])
@pytest.mark.parametrize("coeffs, nr, roots", _quartic_known)
def test_quartic_known_roots_scaled(coeffs, nr, roots, scale):
    """Scaling x -> x * scale gives the same roots times `scale`."""
    a3, a2, a1, a0 = coeffs
    res = quartic_eq(a3 * scale, a2 * scale ** 2, a1 * scale ** 3,
                     a0 * scale ** 4)
    assert res.nr == nr
    assert_allclose(res.z / scale, np.array(roots, dtype=complex),
                    atol=1e-7)


@pytest.mark.parametrize("roots, nr", [
    ([-0.00211555, 0.00017444, -0.00071545 + 2.65e-5j,
      -0.00071545 - 2.65e-5j], 2),
    ([-6e-7, 1e-7, 2e-7, 3e-7], 4),
])
def test_quartic_small_roots(roots, nr):
    roots = np.array(roots, dtype=complex)
    res = quartic_eq(*np.poly(roots)[1:].real)
    assert res.nr == nr
    assert_allclose(res.z, roots, atol=1e-6 * np.max(np.abs(roots)))


def test_quartic_residual_scaled():
    """Roots of any overall size are found with the correct count."""
    rng = np.random.default_rng(1019)
    for _ in range(300):
        scale = 10.0 ** rng.uniform(-3.0, 3.0)
        n_real = rng.choice([0, 2, 4])
        x = rng.uniform(-1.0, 1.0, size=4)
        y = rng.uniform(0.05, 1.0, size=2)

        roots = list(x[:n_real])
        for i in range((4 - n_real) // 2):
            z = complex(x[n_real + 2 * i], y[i])
            roots += [z, z.conjugate()]
        coeffs = np.poly(scale * np.array(roots))[1:].real

        res = quartic_eq(*coeffs)
        assert res.nr == n_real
        for z in res.z:
            assert _rel_residual(coeffs, z) < 1e-6
