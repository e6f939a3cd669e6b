import cmath

import numpy as np
from numpy.testing import assert_allclose
import pytest

from kerrsolve.numeric import cbrt, csqrt, split_complex


# ======================================================================

@pytest.mark.parametrize("z", [4 + 0j, complex(-4.0, 0.0),
                               complex(-4.0, -0.0), 3 + 4j, 3 - 4j,
                               -3 + 4j, -3 - 4j, 1e-300 + 1j, -1e20 + 1j,
                               0j])
def test_csqrt(z):
    w = csqrt(z)
    assert w * w == pytest.approx(z, rel=1e-14, abs=1e-300)

    # Canonical branch.
    assert w.real >= 0.0
    if w.real == 0.0:
        assert w.imag >= 0.0


def test_csqrt_negative_real_axis():
    # cmath follows the sign of a zero imaginary part, csqrt does not.
    assert cmath.sqrt(complex(-1.0, -0.0)) == -1j
    assert csqrt(complex(-1.0, -0.0)) == 1j
    assert csqrt(complex(-1.0, 0.0)) == 1j


def test_csqrt_conjugate():
    for z in [2 + 3j, -5 + 0.1j, -1e-8 + 1j]:
        assert csqrt(z.conjugate()) == csqrt(z).conjugate()


def test_cbrt():
    assert cbrt(27.0) == pytest.approx(3.0)
    assert cbrt(-8.0) == pytest.approx(-2.0)
    assert cbrt(0.0) == 0.0
    assert isinstance(cbrt(2.0), float)


def test_split_complex():
    zr, zi = split_complex([1 + 2j, 3, -1j])
    assert_allclose(zr, [1.0, 3.0, 0.0])
    assert_allclose(zi, [2.0, 0.0, -1.0])
    assert zr.dtype == zi.dtype == np.float64
