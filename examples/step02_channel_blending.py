# -*- coding: utf-8 -*-
"""
ШАГ 02: канал со сдвиговым профилем скорости (конфиг config/case.yaml).

Скорость растёт от нижней стенки к верхней, поэтому число Куранта
ячеек меняется по высоте и cellCoBlended переходит от первой схемы
ко второй. Поля Co и TBlendingFactor пишутся в CSV.
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
import matplotlib.pyplot as plt

from dimensions import DIM_DENSITY, DIM_FLUX, DIM_MASS_FLUX, parse_dimensioned
from fields import SurfaceField, VolField
from fvc import div
from interpolation import log_blending_factor, resolve_scheme
from mesh import BoxGeometry, FvSchemes, Time, box_mesh
from utils.field_writer import write_blending_fields, write_field
from utils.helpers import ensure_directory, load_config
from utils.logging_config import setup_logging_from_config

CONFIG = Path(__file__).parent.parent / "config" / "case.yaml"
cfg = load_config(CONFIG)
setup_logging_from_config(cfg)

m, t, flow, out = cfg["mesh"], cfg["time"], cfg["flow"], cfg["output"]
OUT_DIR = ensure_directory(Path("results") / "step02_channel_blending")
CASE_DIR = Path(out["case_dir"])

geom = BoxGeometry(nx=m["nx"], ny=m["ny"], lx=m["lx"], ly=m["ly"], depth=m["depth"])
mesh = box_mesh(geom, time=Time(t["delta_t"], end_time=t["end_time"]),
                schemes=FvSchemes(cfg["fvSchemes"], source=str(CONFIG)))

# сдвиговый профиль: u(y) = u0 * 2 y / ly
u0 = np.asarray(flow["velocity"], dtype=float)
U_faces = np.outer(2.0 * mesh.Cf[:, 1] / geom.ly, u0)
phi_values = np.einsum("ij,ij->i", mesh.Sf, U_faces)

rho0 = parse_dimensioned("rho", flow["rho"])
if rho0.dimensions != DIM_DENSITY:
    raise ValueError(f"flow.rho: ожидалась размерность {DIM_DENSITY}, получено {rho0.dimensions}")

if flow["mass_flux"]:
    rho = VolField.uniform(mesh, "rho", rho0.value, DIM_DENSITY)
    mesh.register_object(rho)
    phi = SurfaceField.from_face_values(mesh, "phi", rho0.value * phi_values, DIM_MASS_FLUX)
else:
    phi = SurfaceField.from_face_values(mesh, "phi", phi_values, DIM_FLUX)
mesh.register_object(phi)

T = VolField(mesh, "T", np.zeros(mesh.n_cells),
             patch_types={"left": "fixedValue", "right": "zeroGradient",
                          "bottom": "zeroGradient", "top": "zeroGradient"},
             fixed_values={"left": 1.0})

print("=" * 70)
print("ШАГ 02: канал, cellCoBlended по числу Куранта ячейки")
print(mesh.info())
print("=" * 70)

dt = mesh.time.delta_t_value()
step = 0
while mesh.time.run():
    mesh.time.increment()
    step += 1
    if flow["mass_flux"]:
        T.internal -= dt * div(phi, T).internal / rho0.value
    else:
        T.internal -= dt * div(phi, T).internal
    T.correct_boundary_conditions()
    if step % out["write_interval"] == 0:
        write_field(T, CASE_DIR)

# схема из записи divSchemes, построенная с потоком phi
stream = mesh.schemes.div_scheme("div(phi,T)")
stream.read_word()  # Gauss
scheme = resolve_scheme(mesh, stream, face_flux=phi)
stats = log_blending_factor(scheme, T)
write_blending_fields(scheme, T, CASE_DIR)

Co = scheme.courant_number()
bf = scheme.blending_factor(T)

nx, ny = geom.nx, geom.ny
X = mesh.C[:, 0].reshape(ny, nx)
Y = mesh.C[:, 1].reshape(ny, nx)

fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(11, 3.8))
im = ax1.contourf(X, Y, T.internal.reshape(ny, nx), 20, cmap="viridis")
plt.colorbar(im, ax=ax1, label="T")
ax1.set_xlabel("x, м"); ax1.set_ylabel("y, м"); ax1.set_title("T при t = end_time")

ax2.plot(Co.internal.reshape(ny, nx)[:, 0], Y[:, 0], "o-", label="Co ячеек")
ax2.axvline(scheme.co1, color="g", ls="--", label="Co1")
ax2.axvline(scheme.co2, color="r", ls="--", label="Co2")
ax2.set_xlabel("Co"); ax2.set_ylabel("y, м"); ax2.set_title("Число Куранта по высоте")
ax2.grid(alpha=0.3); ax2.legend()
plt.tight_layout(); plt.savefig(OUT_DIR / "channel_T_Co.png", dpi=140); plt.show()

print(f"bf: min={stats['min']:.3f}, max={stats['max']:.3f}, mean={stats['mean']:.3f}")
print(f"Сохранено в: {OUT_DIR} и {CASE_DIR}")
