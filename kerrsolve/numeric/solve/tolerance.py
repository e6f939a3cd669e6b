"""
Numerical tolerances shared by the polynomial solvers and root sorting
routines.  Keeping these in one place means the same boundary (e.g.
what counts as a repeated root or a real root) is used everywhere.  All
tests are relative, so results do not depend on the overall scale of
the coefficients.
"""
from __future__ import annotations

import numpy as np

# Written by the KerrSolve authors, October 2026.

# ======================================================================

REAL_ROOT_TOL = 1e-7
"""A root `z` is treated as real when ``|z.imag| <= REAL_ROOT_TOL *
scale``, where `scale` is the magnitude of the largest root in the same
set (or ``|z|`` for a single value)."""

REPEATED_ROOT_TOL = 1e-12
"""Relative size of a discriminant (compared with the magnitude of the
terms it is formed from) at or below which it is treated as zero, i.e.
the equation has a repeated root."""

ROUNDOFF_TOL = 4.0 * np.finfo(float).eps
"""Relative size at or below which a quantity is indistinguishable from
rounding error."""


# ----------------------------------------------------------------------

def is_real(z: complex, tol: float = REAL_ROOT_TOL,
            scale: float = None) -> bool:
    """
    Returns ``True`` if the imaginary part of `z` is negligible relative
    to `scale`.  If `scale` is not given, ``|z|`` is used.
    """
    if scale is None:
        scale = abs(z)
    return abs(z.imag) <= tol * scale


def root_scale(z) -> float:
    """Magnitude of the largest value in `z`, for use with `is_real`."""
    return max((abs(z_i) for z_i in z), default=0.0)


def is_negligible(value: float, scale: float,
                  tol: float = REPEATED_ROOT_TOL) -> bool:
    """
    Returns ``True`` if `value` is zero to within `tol` relative to
    `scale`.  An exact zero is always negligible, including when `scale`
    is zero.
    """
    return np.abs(value) <= tol * np.abs(scale)
