"""
Math Extensions (:mod:`kerrsolve.numeric.math_ext`)
===================================================

.. currentmodule:: kerrsolve.numeric.math_ext

Complex arithmetic helpers used by the polynomial solvers, where the
branch conventions of NumPy / `cmath` are not suitable.
"""
from __future__ import annotations

from collections.abc import Iterable

import numpy as np

# Written by the KerrSolve authors, October 2026.


# ======================================================================

def cbrt(x: float) -> float:
    """
    Real cube root of `x`, with the same sign as `x` (i.e.
    ``cbrt(-8.0) == -2.0``).
    """
    return float(np.cbrt(x))


def csqrt(z: complex) -> complex:
    r"""
    Square root of complex number `z` using a canonical branch: the
    result always has :math:`\Re(\sqrt{z}) \geq 0`, and when the real
    part is zero the imaginary part is non-negative.

    This differs from `cmath.sqrt` and `numpy.sqrt` on the negative
    real axis, where those functions follow the sign of a signed zero
    imaginary part (e.g. ``cmath.sqrt(complex(-1, -0.0)) == -1j``).  A
    fixed branch gives identical root ordering regardless of how a
    zero imaginary part was reached.

    Examples
    --------
    >>> csqrt(complex(-4.0, -0.0))
    2j
    >>> csqrt(3 + 4j)
    (2+1j)
    """
    zr, zi = float(z.real), float(z.imag)
    if zi == 0.0:
        if zr >= 0.0:
            return complex(np.sqrt(zr), 0.0)
        return complex(0.0, np.sqrt(-zr))

    # Half-angle form, avoids cancellation when |zr| >> |zi|.
    w = np.sqrt(0.5 * (abs(zr) + np.hypot(zr, zi)))
    if zr >= 0.0:
        return complex(w, 0.5 * zi / w)
    return complex(0.5 * abs(zi) / w, np.copysign(w, zi))


def split_complex(z: Iterable[complex]) -> tuple[np.ndarray, np.ndarray]:
    """
    Split a sequence of complex values into separate arrays of real and
    imaginary parts.
    """
    z = np.asarray(list(z), dtype=complex)
    return z.real.copy(), z.imag.copy()
