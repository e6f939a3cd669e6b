"""
Deterministic ordering and classification of polynomial roots.  Code
that uses the roots physically (e.g. picking the turning points of a
photon orbit) depends on a fixed arrangement, so every function here
gives the same order for the same input, including for equal or
repeated roots.

Each function returns a status equal to the number of real roots, as
judged by `tolerance.is_real` relative to the largest root in the set.
For a root pair this distinguishes two real roots (2) from a complex
conjugate pair (0).
"""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike

from kerrsolve.numeric.solve.tolerance import is_real, root_scale

# Written by the KerrSolve authors, October 2026.


# ======================================================================

def sort_roots_re(*r: float) -> tuple[float, ...]:
    """
    Sort between one and four real values into non-decreasing order.

    Examples
    --------
    >>> sort_roots_re(3.0, -1.0, 2.0, -1.0)
    (-1.0, -1.0, 2.0, 3.0)
    """
    if not 1 <= len(r) <= 4:
        raise ValueError(f"Expected 1 to 4 values, got {len(r)}.")
    return tuple(sorted(float(x) for x in r))


# ----------------------------------------------------------------------

def _sort_key(z: complex, real_sign: float,
              scale: float) -> tuple[int, float, float]:
    # Real roots first, then complex roots by real part with the positive
    # imaginary part ahead of its conjugate.
    if is_real(z, scale=scale):
        return 0, real_sign * z.real, 0.0
    return 1, z.real, -z.imag


def _sort_complex(z: Sequence[complex],
                  real_sign: float) -> tuple[int, list[complex]]:
    scale = root_scale(z)
    z_sorted = sorted(z, key=lambda z_i: _sort_key(z_i, real_sign, scale))
    return sum(is_real(z_i, scale=scale) for z_i in z_sorted), z_sorted


def _sort_parts(zr: ArrayLike, zi: ArrayLike,
                real_sign: float) -> tuple[int, np.ndarray, np.ndarray]:
    zr, zi = np.asarray(zr, dtype=float), np.asarray(zi, dtype=float)
    if zr.shape != zi.shape or zr.ndim != 1 or not 2 <= zr.size <= 4:
        raise ValueError("Require 2 to 4 roots with matching real and "
                         "imaginary parts.")

    status, z = _sort_complex([complex(x, y) for x, y in zip(zr, zi)],
                              real_sign)
    z = np.array(z, dtype=complex)
    return status, z.real.copy(), z.imag.copy()


def sort_mix(zr: ArrayLike,
             zi: ArrayLike) -> tuple[int, np.ndarray, np.ndarray]:
    """
    Reorder a set of two to four roots given as real and imaginary
    parts.  Real roots are placed first in ascending order, followed by
    complex roots ordered by real part, each with the positive imaginary
    part ahead of its conjugate.

    Parameters
    ----------
    zr, zi : array_like
        Real and imaginary parts of the roots.

    Returns
    -------
    status : int
        Number of real roots.
    zr, zi : ndarray
        Reordered real and imaginary parts.

    Raises
    ------
    ValueError
        If the number of roots is not 2 to 4, or `zr` and `zi` differ in
        length.

    Examples
    --------
    >>> status, zr, zi = sort_mix([1.0, 3.0], [2.0, 0.0])
    >>> status, zr.tolist(), zi.tolist()
    (1, [3.0, 1.0], [0.0, 2.0])
    """
    return _sort_parts(zr, zi, +1.0)


def sort_mix2(zr: ArrayLike,
              zi: ArrayLike) -> tuple[int, np.ndarray, np.ndarray]:
    """
    As for `sort_mix`, except real roots are placed in *descending*
    order, so that the outermost real root (e.g. the outer turning
    point of an orbit) is always first.  Complex roots follow in the same
    order as `sort_mix`.

    Examples
    --------
    >>> status, zr, zi = sort_mix2([1.0, 3.0, 2.0, 2.0], [0.0, 0.0, 1.0, -1.0])
    >>> status, zr.tolist(), zi.tolist()
    (2, [3.0, 1.0, 2.0, 2.0], [0.0, 0.0, 1.0, -1.0])
    """
    return _sort_parts(zr, zi, -1.0)


# ----------------------------------------------------------------------

def sort_roots(z1: complex, z2: complex, z3: complex,
               z4: complex) -> tuple[int, tuple[complex, ...]]:
    """
    Arrange four complex roots (e.g. from `quartic_eq_c`) in canonical
    order: real roots first in ascending order, then complex roots
    ordered by real part with the positive imaginary part ahead of its
    conjugate.

    Returns
    -------
    status : int
        Number of real roots (0, 2 or 4 for real coefficient quartics).
    z : tuple[complex, complex, complex, complex]
        Reordered roots.

    Examples
    --------
    >>> sort_roots(1 - 1j, 2 + 0j, 1 + 1j, -1 + 0j)
    (2, ((-1+0j), (2+0j), (1+1j), (1-1j)))
    """
    status, z = _sort_complex([complex(z_i) for z_i in (z1, z2, z3, z4)],
                              +1.0)
    return status, tuple(z)
