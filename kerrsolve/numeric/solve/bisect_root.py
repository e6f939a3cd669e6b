from collections.abc import Callable
from enum import IntEnum
from typing import NamedTuple

import numpy as np

from kerrsolve.numeric.solve.exception import SolverError


# Written by the KerrSolve authors, October 2026.


# ======================================================================

class BisectStatus(IntEnum):
    """Outcome of `bisect_root`."""
    CONVERGED = 0
    NO_SIGN_CHANGE = 1
    MAX_ITERATIONS = 2


_STATUS_DETAILS = {
    BisectStatus.NO_SIGN_CHANGE: "f(x_a) and f(x_b) have the same sign.",
    BisectStatus.MAX_ITERATIONS: "Reached maxits."}


class BisectResult(NamedTuple):
    """
    Result of `bisect_root`.  Unpacks as ``status, x, its``.

    Attributes
    ----------
    status : BisectStatus
        Convergence status.  If this is not ``CONVERGED`` the value of
        `x` is not a valid root.
    x : float
        Best estimate of the root.  This is `NaN` if the starting
        interval did not bracket a sign change.
    its : int
        Number of iterations performed.
    """
    status: BisectStatus
    x: float
    its: int

    @property
    def converged(self) -> bool:
        return self.status == BisectStatus.CONVERGED


# ----------------------------------------------------------------------

def bisect_root(func: Callable[..., float], x_a: float, x_b: float,
                xtol: float = 1e-6, *, func_args=(), ftol: float = None,
                maxits: int = 100, disp: bool = False,
                verbose: bool = False) -> BisectResult:
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in
    [x_a, x_b]` by the bisection method.  For bisection to work
    :math:`f(x)` must be continuous and change sign across the interval,
    i.e. ``func(x_a)`` and ``func(x_b)`` must have opposite sign.

    Failure is reported through the returned status rather than by
    raising (unless ``disp=True``), so the caller must check
    `BisectResult.status` before using `x`.

    Examples
    --------
    >>> res = bisect_root(lambda x: x**3 - 2, 0.0, 2.0, xtol=1e-9)
    >>> res.status.name, f"{res.x:.6f}"
    ('CONVERGED', '1.259921')
    >>> bisect_root(lambda x: x**2 + 1, -1.0, 1.0).status.name
    'NO_SIGN_CHANGE'

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function which we are searching for root.
    x_a, x_b : float
        Each end of the search interval, in any order.
    xtol : float, default = 1e-6
        End search when the remaining interval half-width is less than
        `xtol`.
    func_args : tuple, optional
        Extra arguments passed to `func` after `x`.  Use this to supply
        any fixed parameters of the function instead of a closure.
    ftol : float, optional
        If given, also end search when :math:`|f(x)| < f_{tol}`.
    maxits : int, default = 100
        Maximum number of iterations.
    disp : bool, default = False
        If `True`, raise `SolverError` on failure instead of returning
        the failure status.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    BisectResult
        ``(status, x, its)``.

    Raises
    ------
    ValueError
        If `xtol` or `maxits` are not positive.
    SolverError
        Only if ``disp=True`` and no root was found.  The exception has
        attributes `flag` (the `BisectStatus`), `x` and `its`.
    """
    if xtol <= 0:
        raise ValueError(f"xtol too small ({xtol} <= 0).")
    if maxits < 1:
        raise ValueError("maxits must be greater than 0.")

    if verbose:
        print(f"Bisecting Root:")

    f_a, f_b = func(x_a, *func_args), func(x_b, *func_args)

    if f_a == 0.0:
        return BisectResult(BisectStatus.CONVERGED, x_a, 0)
    if f_b == 0.0:
        return BisectResult(BisectStatus.CONVERGED, x_b, 0)

    if np.sign(f_a) == np.sign(f_b):
        return _fail(BisectStatus.NO_SIGN_CHANGE, np.nan, 0, disp)

    # Orient the search so that f(x_lo) < 0 and step towards f > 0.
    if f_a < 0.0:
        x_lo, dx = x_a, x_b - x_a
    else:
        x_lo, dx = x_b, x_a - x_b

    x_m = x_lo
    for it in range(1, maxits + 1):
        dx *= 0.5
        x_m = x_lo + dx
        f_m = func(x_m, *func_args)

        if verbose:
            print(f"... Iteration {it}: x = {x_m}, f = {f_m}, "
                  f"|dx| = {abs(dx)}")

        if f_m <= 0.0:
            x_lo = x_m

        # Check stopping criteria.
        if (abs(dx) < xtol or f_m == 0.0 or
                (ftol is not None and abs(f_m) < ftol)):
            if verbose:
                print(f"... Converged.")
            return BisectResult(BisectStatus.CONVERGED, x_m, it)

    return _fail(BisectStatus.MAX_ITERATIONS, x_m, maxits, disp)


def _fail(status: BisectStatus, x: float, its: int,
          disp: bool) -> BisectResult:
    if disp:
        raise SolverError("bisect_root() failed to converge:",
                          flag=status, details=_STATUS_DETAILS[status],
                          x=x, its=its)
    return BisectResult(status, x, its)


def solve(f: Callable[..., float], a: float, b: float, tol: float = 1e-6,
          *args) -> BisectResult:
    """
    Shorthand for ``bisect_root(f, a, b, xtol=tol, func_args=args)``.
    """
    return bisect_root(f, a, b, xtol=tol, func_args=args)
