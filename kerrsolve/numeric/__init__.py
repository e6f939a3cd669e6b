"""
Numeric (:mod:`kerrsolve.numeric`)
==================================

.. currentmodule:: kerrsolve.numeric

Core numeric functions used throughout KerrSolve.

.. autosummary::
    :toctree:

    solve
    math_ext

"""
from .math_ext import cbrt, csqrt, split_complex
