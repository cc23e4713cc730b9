# -*- coding: utf-8 -*-
"""Проверка коэффициента смешения cellCoBlended на одномерной сетке."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
import matplotlib.pyplot as plt

from dimensions import DIM_DENSITY, DIM_FLUX, DIM_MASS_FLUX
from fields import SurfaceField, VolField
from interpolation import blending_ramp, resolve_scheme
from mesh import LineGeometry, Time, line_mesh
from utils.helpers import ensure_directory

OUT_DIR = ensure_directory(Path("results") / "checks")

CO1, CO2 = 0.5, 2.0

# 1) Кривая bf(Co)
co = np.linspace(0.0, 3.0, 301)
plt.figure(figsize=(6, 4))
plt.plot(co, blending_ramp(co, CO1, CO2), lw=2)
plt.axvline(CO1, color="g", ls="--", label="Co1")
plt.axvline(CO2, color="r", ls="--", label="Co2")
plt.xlabel("Co"); plt.ylabel("bf")
plt.title("Коэффициент смешения cellCoBlended")
plt.grid(alpha=0.3); plt.legend()
plt.tight_layout(); plt.savefig(OUT_DIR / "blending_ramp.png", dpi=140); plt.show()

# 2) Объёмный и массовый поток дают одинаковый bf
mesh = line_mesh(LineGeometry(n_cells=2, length=2.0), time=Time(0.1))
rho = mesh.register_object(VolField.uniform(mesh, "rho", 1.2, DIM_DENSITY))
phi_v = SurfaceField(mesh, "phi", [4.0], DIM_FLUX)
phi_m = SurfaceField(mesh, "rhoPhi", [4.0 * 1.2], DIM_MASS_FLUX)
T = VolField.uniform(mesh, "T", 300.0)

spec = f"cellCoBlended {CO1:g} linear {CO2:g} upwind"
bf_v = resolve_scheme(mesh, spec, face_flux=phi_v).blending_factor(T)
bf_m = resolve_scheme(mesh, spec, face_flux=phi_m).blending_factor(T)

print("=" * 60)
print("Co ячеек (V=1, Δt=0.1, φ=4): ожидается 0.2")
print(f"bf (объёмный поток): {bf_v.internal}")
print(f"bf (массовый поток): {bf_m.internal}")
print(f"Совпадают: {np.allclose(bf_v.field, bf_m.field)}")
print("=" * 60)
