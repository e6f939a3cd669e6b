#!usr/bin/env python3

# Examples of solving and ordering the roots of polynomial equations.
# Written by the KerrSolve authors, October 2026.

from kerrsolve.numeric.solve import (cubic_eq, quartic_eq, quartic_eq_c,
                                     sort_mix2)

# Cubic with three real roots (1, 2, 3) and with a complex pair.
for coeffs in [(-6.0, 11.0, -6.0), (0.0, 0.0, -1.0)]:
    nr, zr, zi = cubic_eq(*coeffs)
    print(f"Cubic {coeffs}: {nr} real root(s)")
    for x, y in zip(zr, zi):
        print(f"    {x:+.8f} {y:+.8f}j")

# Quartic (x - 1)(x + 2)(x^2 + 1) = x^4 + x^3 - x^2 + x - 2.
res = quartic_eq(1.0, -1.0, 1.0, -2.0)
print(f"\nQuartic: {res.nr} real roots, z = {res.z}")

# Same roots as complex values.
nr, *z = quartic_eq_c(1.0, -1.0, 1.0, -2.0)
print(f"Quartic (complex): {nr} real roots, z = {z}")

# Outermost real root first, e.g. for a radial turning point.
status, zr, zi = sort_mix2(res.zr, res.zi)
print(f"Outer turning point: r = {zr[0]:.6f} ({status} real roots)")
