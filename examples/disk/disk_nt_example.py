#!usr/bin/env python3

# Example of the radial structure of a Novikov-Thorne thin disk, with
# the accretion rate set by the required disk luminosity.
# Written by the KerrSolve authors, October 2026.

import matplotlib.pyplot as plt
import numpy as np

from kerrsolve.disk import DiskNT

L_target = 0.3  # [L_Edd]

fig, (ax_F, ax_Σ) = plt.subplots(1, 2, figsize=(10, 4))

for a in [-0.5, 0.0, 0.5, 0.9]:
    disk = DiskNT.from_luminosity(L_target, M=10.0, a=a, alpha=0.1)
    print(f"a = {a:+.2f}: r_ms = {disk.r_ms:.4f}, mdot = {disk.mdot:.6f}, "
          f"L = {disk.luminosity():.6f}")

    r = disk.r_ms * np.geomspace(1.001, 500.0, 200)
    ax_F.loglog(r, [disk.flux(r_i) for r_i in r], label=f"a = {a:+.2f}")
    ax_Σ.loglog(r, [disk.sigma(r_i) for r_i in r], label=f"a = {a:+.2f}")

ax_F.set_xlabel("r [GM/c²]")
ax_F.set_ylabel("F [erg cm⁻² s⁻¹]")
ax_Σ.set_xlabel("r [GM/c²]")
ax_Σ.set_ylabel("Σ [g cm⁻²]")
ax_F.legend()
ax_F.grid(True, which='both', alpha=0.3)
ax_Σ.grid(True, which='both', alpha=0.3)
fig.suptitle(f"Novikov-Thorne disk, L = {L_target} L_Edd")
plt.tight_layout()
plt.show()
