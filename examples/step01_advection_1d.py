# -*- coding: utf-8 -*-
"""
ШАГ 01: перенос ступеньки в одномерном канале.

Сравнение upwind, LUST и cellCoBlended (LUST при малых Co, upwind при больших)
при явной схеме по времени T^{n+1} = T^n - Δt·div(φ, T).
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
import matplotlib.pyplot as plt

from dimensions import DIM_FLUX
from fields import SurfaceField, VolField
from fvc import div
from mesh import FvSchemes, LineGeometry, Time, line_mesh
from utils.helpers import ensure_directory
from utils.logging_config import setup_logging

OUT_DIR = ensure_directory(Path("results") / "step01_advection_1d")
setup_logging()

N, L, U = 100, 1.0, 1.0
CO_TARGET = 0.4
dt = CO_TARGET * (L / N) / U
T_END = 0.4

SCHEMES = {
    "upwind": "Gauss upwind",
    "LUST": "Gauss LUST grad(T)",
    "cellCoBlended": "Gauss cellCoBlended 0.2 LUST grad(T) 0.8 upwind",
}


def run(div_spec: str):
    schemes = FvSchemes({
        "interpolationSchemes": {"default": "linear"},
        "divSchemes": {"div(phi,T)": div_spec},
    })
    mesh = line_mesh(LineGeometry(n_cells=N, length=L), time=Time(dt, end_time=T_END),
                     schemes=schemes)
    phi = SurfaceField.from_face_values(mesh, "phi", U * mesh.Sf[:, 0], DIM_FLUX)
    T = VolField(mesh, "T", np.where(mesh.C[:, 0] < 0.1, 1.0, 0.0),
                 patch_types={"inlet": "fixedValue", "outlet": "zeroGradient"},
                 fixed_values={"inlet": 1.0})

    while mesh.time.run():
        mesh.time.increment()
        T.internal -= dt * div(phi, T).internal
        T.correct_boundary_conditions()
    return T.internal.copy(), mesh.C[:, 0]


print("=" * 70)
print(f"ШАГ 01: перенос ступеньки, N={N}, Co={CO_TARGET}, t={T_END} с")
print("=" * 70)

plt.figure(figsize=(7, 4))
x = None
for label, spec in SCHEMES.items():
    T, x = run(spec)
    print(f"{label:>14s}: min T = {T.min():+.4f}, max T = {T.max():+.4f}")
    plt.plot(x, T, lw=1.8, label=label)

exact = np.where(x < 0.1 + U * T_END, 1.0, 0.0)
plt.plot(x, exact, "k--", lw=1.0, label="точное")
plt.xlabel("x, м"); plt.ylabel("T")
plt.title("Перенос ступеньки: сравнение схем")
plt.grid(alpha=0.3); plt.legend()
plt.tight_layout(); plt.savefig(OUT_DIR / "step_profiles.png", dpi=140); plt.show()

print(f"Сохранено в: {OUT_DIR}")
