"""
Radial structure of a relativistic thin accretion disk as given by
Novikov & Thorne (1973) and Page & Thorne (1974).

The disk is described by an immutable `DiskNT` value.  To change a
parameter create a new disk, e.g. ``dataclasses.replace(disk,
mdot=0.2)``.  Radii are in units of the gravitational radius
:math:`r_g = GM/c^2`.
"""
from __future__ import annotations

import warnings
from dataclasses import dataclass, replace
from functools import cached_property

import numpy as np
from scipy.integrate import quad

from kerrsolve.constants import (flux_scale_nt, grav_radius, L_Edd,
                                 Mdot_Edd)
from kerrsolve.numeric.solve import bisect_root, cubic_eq

# Written by the KerrSolve authors, October 2026.


# ============================================================================

@dataclass(frozen=True, kw_only=True)
class DiskNT:
    # noinspection PyUnresolvedReferences
    """
    Relativistic (Novikov-Thorne) model of a geometrically thin,
    optically thick accretion disk around a Kerr black hole.

    Parameters
    ----------
    M : float, default = 10.0
        Mass of the central black hole [M_sun] (> 0).
    a : float, default = 0.0
        Spin of the central black hole (-1 < a < 1).  Negative values
        give a counter-rotating disk.
    mdot : float, default = 0.1
        Mass accretion rate in Eddington units (>= 0), i.e. relative to
        `Mdot_Edd` for the given mass.  Use `from_luminosity` to specify
        the disk luminosity instead.
    alpha : float, default = 0.1
        Viscosity parameter (> 0).

    Attributes
    ----------
    r_ms : float
        Radius of the disk inner edge [r_g].  See `r_min`.
    """
    M: float = 10.0
    a: float = 0.0
    mdot: float = 0.1
    alpha: float = 0.1

    def __post_init__(self):
        if self.M <= 0.0:
            raise ValueError(f"Require M > 0, got M = {self.M}.")
        if not -1.0 < self.a < 1.0:
            raise ValueError(f"Require -1 < a < 1, got a = {self.a}.")
        if self.mdot < 0.0:
            raise ValueError(f"Require mdot >= 0, got mdot = {self.mdot}.")
        if self.alpha <= 0.0:
            raise ValueError(f"Require alpha > 0, got alpha = "
                             f"{self.alpha}.")

    # -- Construction --------------------------------------------------

    @classmethod
    def from_luminosity(cls, L: float, *, M: float = 10.0, a: float = 0.0,
                        alpha: float = 0.1, xtol: float = 1e-6) -> DiskNT:
        """
        Create a disk with the accretion rate set so that its total
        luminosity (see `luminosity`) matches `L` [L_Edd].  If no
        matching accretion rate is found a `RuntimeWarning` is issued and
        ``mdot = 0`` is used.  See `mdot_for_luminosity` for details.
        """
        return cls(M=M, a=a, alpha=alpha,
                   mdot=mdot_for_luminosity(L, M=M, a=a, alpha=alpha,
                                            xtol=xtol))

    # -- Radial Structure ----------------------------------------------

    @cached_property
    def r_ms(self) -> float:
        return self.r_min()

    def r_min(self) -> float:
        """
        Minimum radius of the disk (disk inner edge) [r_g].  This is the
        radius of the marginally stable orbit (ISCO), where there is zero
        torque in the fluid, plus a small offset (0.001) so that the
        functions of the model are well defined there.
        """
        a = self.a
        z1 = 1.0 + (1.0 - a * a) ** (1 / 3) * ((1.0 + a) ** (1 / 3) +
                                               (1.0 - a) ** (1 / 3))
        z2 = np.sqrt(3.0 * a * a + z1 * z1)
        sga = +1.0 if a >= 0.0 else -1.0
        r0 = 3.0 + z2 - sga * np.sqrt((3.0 - z1) * (3.0 + z1 + 2.0 * z2))
        return float(r0) + 1e-3

    @cached_property
    def _x_roots(self) -> tuple[float, float, float]:
        # Roots of x^3 - 3x + 2a = 0 (all real for |a| < 1).
        return tuple(float(x) for x in cubic_eq(0.0, -3.0, 2.0 * self.a).zr)

    def _flux_integral(self, x: float) -> float:
        # Bracketed term of PT74 eq. 15n.
        a, x0 = self.a, np.sqrt(self.r_ms)
        f = x - x0 - 1.5 * a * np.log(x / x0)
        xr = self._x_roots
        for i in range(3):
            x_i, x_j, x_k = xr[i], xr[(i + 1) % 3], xr[(i + 2) % 3]
            if abs(x_i) < 1e-12:
                continue  # Term -> 0 as x_i -> 0 (i.e. a = 0).
            f -= (3.0 * (x_i - a) ** 2 / (x_i * (x_i - x_j) * (x_i - x_k)) *
                  np.log((x - x_i) / (x0 - x_i)))
        return f

    def flux(self, r: float) -> float:
        """
        Local flux from one side of the disk [erg cm-2 s-1], as measured
        by an observer at rest with respect to the fluid.  Based on Page &
        Thorne (1974) and zero at or inside `r_ms`.

        Parameters
        ----------
        r : float
            Radius of emission [r_g].
        """
        if r <= self.r_ms:
            return 0.0
        a, x = self.a, np.sqrt(r)
        F = (1.0 / (4.0 * np.pi * r) * 1.5 / (x * x * (x ** 3 - 3.0 * x +
                                                      2.0 * a)) *
             self._flux_integral(x))

        # Scale F ~ mdot/m to the actual black hole mass / accretion rate.
        return float(flux_scale_nt * F * self.mdot / self.M)

    def luminosity(self, r_max: float = 1e5) -> float:
        r"""
        Total luminosity from both sides of the disk, in units of the
        Eddington luminosity for mass `M`.  The local flux is transformed
        to the coordinate frame, but other relativistic effects (e.g.
        light bending) are ignored:

        .. math:: L = 2 \cdot 2\pi \int_{r_{ms}}^{r_{max}} F(r) (-U_t)
           r\,dr

        The integration is performed in :math:`\log r`.

        Parameters
        ----------
        r_max : float, default = 1e5
            Outer radius of the integration [r_g].
        """
        L, _ = quad(_dL_dlogr, np.log(self.r_ms), np.log(r_max),
                    args=(self,), epsrel=1e-5, limit=200)
        L *= (self.M * grav_radius) ** 2  # -> [erg s-1]
        return L / (L_Edd * self.M)

    def sigma(self, r: float) -> float:
        """
        Midplane column density [g cm-2], i.e. the fluid density
        integrated from the midplane to the disk surface.  Covers the
        inner (radiation pressure dominated) and middle zones.  Zero
        inside `r_ms`.

        Parameters
        ----------
        r : float
            Radius (measured in equatorial plane) [r_g].
        """
        if r < self.r_ms:
            return 0.0
        a, m, alpha = self.a, self.M, self.alpha
        x = np.sqrt(r)

        xA = 1.0 + a ** 2 / r ** 2 + 2.0 * a ** 2 / r ** 3
        xB = 1.0 + a / x ** 3
        xC = 1.0 - 3.0 / x ** 2 + 2.0 * a / x ** 3
        xD = 1.0 - 2.0 / r + a ** 2 / r ** 2
        xE = (1.0 + 4.0 * a ** 2 / r ** 2 - 4.0 * a ** 2 / r ** 3 +
              3.0 * a ** 4 / r ** 4)
        xL = xB / np.sqrt(xC) / x * self._flux_integral(x)

        xMdot = self.mdot * m * Mdot_Edd / 1e17
        r_im = (40.0 * (alpha ** (2 / 21) / (m / 3.0) ** (2 / 3) *
                        xMdot ** (16 / 20)) *
                xA ** (20 / 21) * xB ** (-36 / 21) * xD ** (-8 / 21) *
                xE ** (-10 / 21) * xL ** (16 / 21))

        if r < r_im:
            Σ = (20.0 * (m / 3.0) / xMdot / alpha * r ** 1.5 / xA ** 2 *
                 xB ** 3 * np.sqrt(xC) * xE / xL)
        else:
            Σ = (5e4 * (m / 3.0) ** (-2 / 5) * xMdot ** (3 / 5) *
                 alpha ** (-4 / 5) * r ** (-3 / 5) * xB ** (-4 / 5) *
                 np.sqrt(xC) * xD ** (-4 / 5) * xL ** (3 / 5))
        return float(Σ)

    def ell(self, r: float) -> float:
        """
        Specific angular momentum of the fluid [geometrised units].
        Radii inside `r_ms` use the value at `r_ms`.
        """
        a = self.a
        r = max(self.r_ms, r)
        x = np.sqrt(r)
        return float((r * r - 2.0 * a * x + a * a) / (x * r - 2.0 * x + a))

    # -- Thin Disk Geometry --------------------------------------------

    def vr(self, r: float) -> float:
        """Bulk radial velocity of the fluid, always zero for a thin disk."""
        return 0.0

    def h(self, r: float) -> float:
        """
        Height of the disk surface above the midplane [r_g].  The thin disk
        is taken to be razor thin so this is always zero.
        """
        return 0.0

    def dhdr(self, r: float) -> float:
        """Surface profile :math:`dH/dR`, always zero for a thin disk."""
        return 0.0


# ----------------------------------------------------------------------------

def _dL_dlogr(log_r: float, disk: DiskNT) -> float:
    # Integrand of DiskNT.luminosity; the extra r comes from d(log r).
    r, a = np.exp(log_r), disk.a
    gtt = -1.0 + 2.0 / r
    gtf = -2.0 * a / r
    gff = r * r + a * a + 2.0 * a * a / r
    Ω = 1.0 / (a + r ** 1.5)
    U_t = (np.sqrt(-1.0 / (gtt + 2.0 * Ω * gtf + Ω * Ω * gff)) *
           (gtt + Ω * gtf))
    return 2.0 * np.pi * r * 2.0 * (-U_t) * disk.flux(r) * r


def _luminosity_residual(mdot: float, L0: float, disk: DiskNT) -> float:
    return L0 - replace(disk, mdot=mdot).luminosity()


def mdot_for_luminosity(L0: float, *, M: float = 10.0, a: float = 0.0,
                        alpha: float = 0.1,
                        mdot_range: tuple[float, float] = (0.0, 100.0),
                        xtol: float = 1e-6) -> float:
    """
    Find the accretion rate of a `DiskNT` such that its total luminosity
    equals `L0`, by bisection of the accretion rate within `mdot_range`.

    Parameters
    ----------
    L0 : float
        Target luminosity [L_Edd].
    M, a, alpha : float
        Black hole mass, spin and viscosity parameter of the disk.  See
        `DiskNT`.
    mdot_range : tuple[float, float], default = (0, 100)
        Interval of accretion rates searched [Mdot_Edd].
    xtol : float, default = 1e-6
        Required accuracy of the accretion rate.

    Returns
    -------
    float
        Accretion rate [Mdot_Edd].  If `L0` cannot be reached within
        `mdot_range` (or the search does not converge) a
        `RuntimeWarning` is issued and ``0.0`` is returned.
    """
    disk = DiskNT(M=M, a=a, alpha=alpha, mdot=0.0)
    res = bisect_root(_luminosity_residual, *mdot_range, xtol,
                      func_args=(L0, disk))
    if not res.converged:
        warnings.warn(f"No accretion rate found for L = {L0} "
                      f"({res.status.name}), using mdot = 0.",
                      RuntimeWarning)
        return 0.0

    return float(res.x)
