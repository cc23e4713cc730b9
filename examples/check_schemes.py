# -*- coding: utf-8 -*-
"""Проверка всех зарегистрированных схем на линейном поле."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np

from dimensions import DIM_FLUX
from fields import SurfaceField, VolField
from interpolation import resolve_scheme, scheme_registry
from mesh import BoxGeometry, Time, box_mesh

mesh = box_mesh(BoxGeometry(nx=8, ny=4, lx=1.0, ly=0.5), time=Time(0.05))
phi = mesh.register_object(
    SurfaceField.from_face_values(mesh, "phi", mesh.Sf @ np.array([1.0, 0.5]), DIM_FLUX)
)
# линейное поле: схемы второго порядка должны воспроизводить его точно
T = VolField(mesh, "T", 2.0 * mesh.C[:, 0] + mesh.C[:, 1],
             patch_types={p.name: "calculated" for p in mesh.patches})
T.boundary[:] = 2.0 * mesh.Cf[mesh.n_internal_faces:, 0] + mesh.Cf[mesh.n_internal_faces:, 1]
exact = 2.0 * mesh.Cf[:mesh.n_internal_faces, 0] + mesh.Cf[:mesh.n_internal_faces, 1]

SPECS = [
    "linear", "midPoint", "reverseLinear", "upwind phi", "downwind phi",
    "localMax", "localMin", "linearUpwind phi grad(T)", "LUST phi grad(T)",
    "CoBlended 0.5 linear 1 upwind phi phi",
    "cellCoBlended 0.5 LUST phi grad(T) 1 upwind phi phi",
]

print("=" * 70)
print(f"Зарегистрированные схемы: {', '.join(scheme_registry.names())}")
print("=" * 70)
for spec in SPECS:
    scheme = resolve_scheme(mesh, spec)
    Tf = scheme.interpolate(T)
    err = np.max(np.abs(Tf.internal - exact))
    print(f"{spec:>46s}: corrected={scheme.corrected()!s:5s}  max|T_f - T_exact| = {err:.3e}")
