"""
========================================
Solvers (:mod:`kerrsolve.numeric.solve`)
========================================

.. currentmodule:: kerrsolve.numeric.solve

Functions for finding solutions to polynomial and scalar equations.
These are included when not already covered by NumPy / SciPy or when
a fixed, reproducible root ordering is required.

Functions
---------

.. autosummary::
    :toctree:

    bisect_root
    solve
    quadratic_eq
    cubic_eq
    quartic_eq
    quartic_eq_c
    sort_roots_re
    sort_mix
    sort_mix2
    sort_roots

Classes
-------

.. autosummary::
    :toctree:

    BisectResult
    BisectStatus
    ComplexRootSet
    RootSet

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError

"""

from .exception import SolverError
from .bisect_root import bisect_root, solve, BisectResult, BisectStatus
from .poly_roots import (quadratic_eq, cubic_eq, quartic_eq, quartic_eq_c,
                         RootSet, ComplexRootSet)
from .sort_roots import sort_roots_re, sort_mix, sort_mix2, sort_roots
from .tolerance import (REAL_ROOT_TOL, REPEATED_ROOT_TOL, ROUNDOFF_TOL,
                        is_real)
