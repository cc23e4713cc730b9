"""
Схемы localMax / localMin: большее (меньшее) из значений соседних ячеек.

Весов у этих схем нет, определена только интерполяция.
"""
from __future__ import annotations

from typing import Callable

import numpy as np

from fields import SurfaceField, VolField
from interpolation.scheme_registry import register_scheme
from interpolation.surface_interpolation_scheme import SurfaceInterpolationScheme


class _LocalExtremum(SurfaceInterpolationScheme):
    select: Callable = None

    def weights(self, vf: VolField) -> SurfaceField:
        raise NotImplementedError(f"Схема {self.type_name} не задаёт веса")

    def interpolate(self, vf: VolField) -> SurfaceField:
        mesh = vf.mesh
        internal = self.select(vf.internal[mesh.internal_owner],
                               vf.internal[mesh.neighbour])
        return SurfaceField(mesh, f"{self.type_name}({vf.name})", internal,
                            vf.dimensions, vf.boundary.copy())


@register_scheme("localMax")
class LocalMax(_LocalExtremum):
    select = staticmethod(np.maximum)


@register_scheme("localMin")
class LocalMin(_LocalExtremum):
    select = staticmethod(np.minimum)
