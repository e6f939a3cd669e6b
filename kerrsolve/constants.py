"""
Physical Constants (:mod:`kerrsolve.constants`)
===============================================

.. currentmodule:: kerrsolve.constants

Physical constants used by the disk models.  All values are in CGS
units unless noted otherwise.  Quantities that scale with the black
hole mass are given for one solar mass.
"""

# Written by the KerrSolve authors, October 2026.

# ======================================================================

grav_radius = 1.476625e5  # GM_sun/c^2 [cm]

L_Edd = 1.2566e38  # Eddington luminosity per solar mass [erg s-1]
Mdot_Edd = 2.225475942e18  # Eddington accretion rate per M_sun [g s-1]

# Flux scale of a Novikov-Thorne disk, i.e. Mdot_Edd * c^2 / grav_radius^2
# [erg cm-2 s-1].  Multiply by mdot/m to get the physical
# flux for a black hole of mass m [M_sun] and accretion rate mdot
# [Mdot_Edd].
flux_scale_nt = 9.1721376255e28
