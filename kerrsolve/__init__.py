"""
.. This module acts as the top-level API documentation.

.. module: kerrsolve

Numerical solvers used for black-hole ray tracing and accretion disk
modelling.

.. autosummary::
    :toctree: generated/

    numeric
    disk
    constants

"""

__version__ = "0.1.0"

import sys

# Written by the KerrSolve authors, October 2026.

# ======================================================================

assert sys.version_info >= (3, 10)
