"""
Accretion Disks (:mod:`kerrsolve.disk`)
=======================================

.. currentmodule:: kerrsolve.disk

Radial structure of accretion disk models.

.. autosummary::
    :toctree:

    DiskNT
    mdot_for_luminosity
"""

from .nt import DiskNT, mdot_for_luminosity
