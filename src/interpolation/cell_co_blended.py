"""
Схема cellCoBlended: смешение двух схем по числу Куранта ячейки.

Число Куранта ячейки
    Co = 0.5 Δt Σ_f |φ_f| / V
интерполируется на грани (запись ``interpolate(Co)`` таблицы
interpolationSchemes) и задаёт коэффициент смешения.
При Co ≤ Co1 работает только первая схема, при Co ≥ Co2 только вторая.

Пример записи divSchemes::

    div(phi,U)  Gauss cellCoBlended 1 LUST grad(U) 10 linearUpwind grad(U);
"""
from __future__ import annotations

import numpy as np

from dimensions import DIMLESS
from fields import SurfaceField, VolField
from fvc.surface_integrate import surface_sum
from interpolation.courant_blended import CourantBlendedScheme
from interpolation.scheme_registry import register_scheme
from interpolation.surface_interpolate import interpolate


@register_scheme("cellCoBlended")
class CellCoBlended(CourantBlendedScheme):
    """Смешение scheme1 (малые Co) и scheme2 (большие Co) по числу Куранта ячейки."""

    def courant_number(self) -> VolField:
        """
        Число Куранта ячеек Co = 0.5 Δt Σ_f |φ_f| / V.

        Граничные значения экстраполируются из ячеек-владельцев.
        """
        mesh = self.mesh
        co = VolField(mesh, "Co", np.zeros(mesh.n_cells), DIMLESS,
                      patch_types={p.name: "extrapolatedCalculated" for p in mesh.patches})
        sum_phi = surface_sum(self.volumetric_flux().mag())
        co.internal[:] = sum_phi.internal / mesh.V * (0.5 * mesh.time.delta_t_value())
        co.correct_boundary_conditions()
        return co

    def face_courant_number(self) -> SurfaceField:
        """Число Куранта на гранях (интерполяция Co по ``interpolate(Co)``)."""
        return interpolate(self.courant_number())
