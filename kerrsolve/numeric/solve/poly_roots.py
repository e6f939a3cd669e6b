"""
Closed-form solvers for quadratic, cubic and quartic equations.  Every
solver returns a complete set of roots (counting multiplicity) for any
finite input; repeated roots and other degenerate cases are handled as
ordinary branches and never raise.
"""
from __future__ import annotations

from typing import NamedTuple

import numpy as np

from kerrsolve.numeric.math_ext import cbrt, csqrt, split_complex
from kerrsolve.numeric.solve.sort_roots import sort_mix, sort_roots
from kerrsolve.numeric.solve.tolerance import (is_negligible, is_real,
                                               REPEATED_ROOT_TOL,
                                               root_scale, ROUNDOFF_TOL)

# Written by the KerrSolve authors, October 2026.

_SQRT3_2 = 0.5 * np.sqrt(3.0)


# ======================================================================

class RootSet(NamedTuple):
    """
    Roots of a polynomial equation, counting multiplicity, split into
    real and imaginary parts.

    Attributes
    ----------
    nr : int
        Number of real roots.  For quadratics this follows
        `tolerance.is_real` relative to the largest root; for cubics it is
        set by the solution branch taken (3 or 1).
    zr, zi : ndarray[float]
        Real and imaginary parts of the roots.  The length equals the
        degree of the polynomial.
    """
    nr: int
    zr: np.ndarray
    zi: np.ndarray

    @property
    def z(self) -> np.ndarray:
        """Roots as a complex array."""
        return self.zr + 1j * self.zi

    def real_roots(self) -> np.ndarray:
        """Sorted real parts of those roots classified as real."""
        scale = root_scale(self.z)
        mask = np.array([is_real(complex(x, y), scale=scale)
                         for x, y in zip(self.zr, self.zi)], dtype=bool)
        return np.sort(self.zr[mask])


class ComplexRootSet(NamedTuple):
    """
    The four roots of a quartic equation as complex values, along with
    the number of real roots `nr`.
    """
    nr: int
    z1: complex
    z2: complex
    z3: complex
    z4: complex


def _make_rootset(z: list[complex]) -> RootSet:
    zr, zi = split_complex(z)
    scale = root_scale(z)
    nr = sum(is_real(z_i, scale=scale) for z_i in z)
    return RootSet(nr, zr, zi)


# ======================================================================

def quadratic_eq(pr: float, pi: float, qr: float, qi: float) -> RootSet:
    r"""
    Roots of the quadratic equation :math:`z^2 + pz + q = 0` with
    complex coefficients :math:`p = p_r + ip_i` and :math:`q = q_r +
    iq_i`.

    The roots are :math:`z = (-p \pm \sqrt{D})/2` with :math:`D = p^2 -
    4q`, where :math:`\sqrt{D}` uses the canonical branch of
    `math_ext.csqrt`.  The '+' root is always placed first.  Internally
    the larger magnitude root is computed first and the other follows
    from :math:`z_1 z_2 = q`, avoiding cancellation [1]_.

    Parameters
    ----------
    pr, pi : float
        Real and imaginary parts of the linear coefficient `p`.
    qr, qi : float
        Real and imaginary parts of the constant coefficient `q`.

    Returns
    -------
    RootSet
        Two roots.  If the discriminant is zero to within rounding error
        (repeated root) both roots are exactly :math:`-p/2`.  For real coefficients and
        :math:`D < 0` the roots are an exact conjugate pair.

    References
    ----------
    .. [1] Press, W. H.; Flannery, B. P.; Teukolsky, S. A.; and
           Vetterling, W. T. *Numerical Recipes: The Art of Scientific
           Computing*, 3rd ed. Cambridge, England: Cambridge University
           Press, pp. 227, 2007. Section 5.6: "Quadratic and Cubic
           Equations".

    Examples
    --------
    >>> quadratic_eq(0.0, 0.0, -1.0, 0.0).zr
    array([ 1., -1.])
    >>> quadratic_eq(2.0, 0.0, 5.0, 0.0).z
    array([-1.+2.j, -1.-2.j])
    """
    p, q = complex(pr, pi), complex(qr, qi)
    d = p * p - 4.0 * q

    # Repeated root, when D is lost in rounding.
    if is_negligible(abs(d), max(abs(p) ** 2, 4.0 * abs(q)), ROUNDOFF_TOL):
        z = -0.5 * p
        return _make_rootset([z, z])

    # Real coefficients with complex roots give an exact conjugate pair.
    if pi == 0.0 and qi == 0.0 and d.real < 0.0:
        h = 0.5 * np.sqrt(-d.real)
        return _make_rootset([complex(-0.5 * pr, h), complex(-0.5 * pr, -h)])

    s = csqrt(d)
    sgn = +1.0 if (p.conjugate() * s).real >= 0.0 else -1.0
    w = -0.5 * (p + sgn * s)  # |w| >= |s|/2 > 0.
    if sgn > 0:
        z_plus, z_minus = q / w, w
    else:
        z_plus, z_minus = w, q / w

    return _make_rootset([z_plus, z_minus])


# ----------------------------------------------------------------------

def cubic_eq(p: float, q: float, r: float) -> RootSet:
    r"""
    Roots of the cubic equation :math:`x^3 + px^2 + qx + r = 0` with
    real coefficients.

    The equation is first reduced to the depressed form :math:`t^3 + at
    + b = 0` using :math:`x = t - p/3`, and the sign of :math:`\Delta =
    (b/2)^2 + (a/3)^3` then selects the method:

    - :math:`\Delta > 0`: One real root and a complex conjugate pair,
      using Cardano's formula.  The cube root is taken of whichever
      radicand avoids cancellation.
    - :math:`\Delta \leq 0`: Three real roots using the trigonometric
      (Viète) form.  :math:`\Delta` values that are negligible compared
      to the terms forming it are also sent here, so that repeated roots
      never need a complex cube root.  The `acos` argument is clipped to
      [-1, 1].

    Parameters
    ----------
    p, q, r : float
        Coefficients of the equation.

    Returns
    -------
    RootSet
        Three roots.  If all roots are real (``nr == 3``) they are in
        ascending order.  Otherwise the real root is first followed by
        the conjugate pair, with ``zi[1] > 0`` and ``zi[2] == -zi[1]``.

    Examples
    --------
    >>> [f"{x:.6f}" for x in cubic_eq(-6.0, 11.0, -6.0).zr]
    ['1.000000', '2.000000', '3.000000']
    """
    shift = p / 3.0
    a = q - p * shift
    b = 2.0 * shift ** 3 - q * shift + r
    half_b, third_a = 0.5 * b, a / 3.0
    disc = half_b ** 2 + third_a ** 3

    if a == 0.0 and b == 0.0:
        # Triple root.
        x = -shift
        return RootSet(3, np.full(3, x), np.zeros(3))

    if a < 0.0 and (disc <= 0.0 or
                    is_negligible(disc, max(half_b ** 2,
                                            abs(third_a) ** 3))):
        # Three real roots (trigonometric form).
        m = 2.0 * np.sqrt(-third_a)
        c = np.clip(-4.0 * b / m ** 3, -1.0, 1.0)
        θ = np.arccos(c) / 3.0
        t = m * np.cos(θ - 2.0 * np.pi * np.arange(3) / 3.0)
        return RootSet(3, np.sort(t) - shift, np.zeros(3))

    # One real root, one conjugate pair (Cardano).
    sign_b = +1.0 if b >= 0.0 else -1.0
    u = -sign_b * cbrt(abs(half_b) + np.sqrt(disc))
    v = -third_a / u
    re = -0.5 * (u + v) - shift
    im = _SQRT3_2 * abs(u - v)
    zr, zi = split_complex([complex(u + v - shift, 0.0), complex(re, im),
                            complex(re, -im)])
    return RootSet(1, zr, zi)


# ----------------------------------------------------------------------

def _quartic_roots(a3: float, a2: float, a1: float,
                   a0: float) -> list[complex]:
    # Depressed quartic y^4 + p*y^2 + q*y + r = 0, with x = y - a3/4.
    shift = 0.25 * a3
    a3_sq = a3 * a3
    p = a2 - 0.375 * a3_sq
    q = a1 - 0.5 * a2 * a3 + 0.125 * a3_sq * a3
    r = (a0 - 0.25 * a1 * a3 + 0.0625 * a2 * a3_sq -
         3.0 * a3_sq * a3_sq / 256.0)

    if is_negligible(q, max(abs(p) ** 1.5, abs(r) ** 0.75)):
        # Biquadratic, solve directly for y^2.
        y = []
        for y_sq in quadratic_eq(p, 0.0, r, 0.0).z:
            y_i = csqrt(complex(y_sq))
            y += [y_i, -y_i]
        return [y_i - shift for y_i in y]

    # Resolvent cubic.  Use its largest real root: this maximises 2m - p
    # which is the square of the linear factor coefficient and is used
    # as a divisor below.  The real root is known from the branch taken
    # by cubic_eq, not from the size of the imaginary parts.
    res = cubic_eq(-0.5 * p, -r, 0.5 * p * r - 0.125 * q * q)
    m = res.zr.max() if res.nr == 3 else res.zr[0]
    s2 = max(2.0 * m - p, 0.0)

    # Factor as (y^2 + s*y + m - t) * (y^2 - s*y + m + t).
    if s2 > REPEATED_ROOT_TOL * max(abs(p), abs(m)):
        s = np.sqrt(s2)
        t = complex(0.5 * q / s)
    else:
        s = 0.0  # Biquadratic; m^2 - r may be negative.
        t = csqrt(m * m - r)

    c1, c2 = m - t, m + t
    y = [*quadratic_eq(s, 0.0, c1.real, c1.imag).z,
         *quadratic_eq(-s, 0.0, c2.real, c2.imag).z]
    return [complex(y_i) - shift for y_i in y]


def quartic_eq(a3: float, a2: float, a1: float, a0: float) -> RootSet:
    r"""
    Roots of the quartic equation :math:`x^4 + a_3x^3 + a_2x^2 + a_1x +
    a_0 = 0` with real coefficients, using Ferrari's method.

    Notes
    -----
    - The quartic is depressed to :math:`y^4 + py^2 + qy + r = 0` using
      :math:`x = y - a_3/4`.
    - If `q` is negligible the equation is biquadratic and is solved
      directly as a quadratic in :math:`y^2`.  Repeated roots are then
      exact, which is not the case when using the resolvent.
    - The resolvent cubic :math:`m^3 - (p/2)m^2 - rm + (pr/2 - q^2/8) =
      0` is solved with `cubic_eq`, and its largest real root is
      selected.  This root always satisfies :math:`2m - p \geq 0` and
      gives the best conditioned factorisation.
    - The depressed quartic is factored into :math:`(y^2 + sy + m - t)
      (y^2 - sy + m + t)` where :math:`s = \sqrt{2m - p}` and
      :math:`t = q / 2s`.  If :math:`2m - p` is negligible (biquadratic
      case) then :math:`s = 0` and :math:`t = \sqrt{m^2 - r}` which may
      be complex.  Each factor is solved with `quadratic_eq`.
    - Highly degenerate equations (e.g. repeated roots) still return
      four values, possibly with small numerical scatter.

    Parameters
    ----------
    a3, a2, a1, a0 : float
        Coefficients of the equation.

    Returns
    -------
    RootSet
        Four roots, ordered by `sort_mix`: real roots first in
        ascending order, then complex roots.

    Examples
    --------
    Equation :math:`(x^2 - 1)(x^2 - 4) = 0`:

    >>> [f"{x:.6f}" for x in quartic_eq(0.0, -5.0, 0.0, 4.0).zr]
    ['-2.000000', '-1.000000', '1.000000', '2.000000']
    """
    zr, zi = split_complex(_quartic_roots(a3, a2, a1, a0))
    return RootSet(*sort_mix(zr, zi))


def quartic_eq_c(a3: float, a2: float, a1: float,
                 a0: float) -> ComplexRootSet:
    """
    Same as `quartic_eq` but the roots are returned as complex values
    ordered by `sort_roots` (real roots first, ascending).

    Returns
    -------
    ComplexRootSet
        Number of real roots and the four roots `z1` ... `z4`.
    """
    nr, z = sort_roots(*_quartic_roots(a3, a2, a1, a0))
    return ComplexRootSet(nr, *z)
