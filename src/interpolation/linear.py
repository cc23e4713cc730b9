"""Схемы с геометрическими весами: linear, midPoint, reverseLinear."""
from __future__ import annotations

import numpy as np

from fields import SurfaceField, VolField
from interpolation.scheme_registry import register_scheme
from interpolation.surface_interpolation_scheme import SurfaceInterpolationScheme


@register_scheme("linear")
class Linear(SurfaceInterpolationScheme):
    """Линейная интерполяция по расстояниям до центров ячеек."""

    def weights(self, vf: VolField) -> SurfaceField:
        return self._weights_field(self.mesh.weights[:self.mesh.n_internal_faces])


@register_scheme("midPoint")
class MidPoint(SurfaceInterpolationScheme):
    """Среднее арифметическое соседних ячеек (w = 0.5)."""

    def weights(self, vf: VolField) -> SurfaceField:
        return self._weights_field(np.full(self.mesh.n_internal_faces, 0.5))


@register_scheme("reverseLinear")
class ReverseLinear(SurfaceInterpolationScheme):
    """Линейные веса, поменянные местами: больший вес у дальней ячейки."""

    def weights(self, vf: VolField) -> SurfaceField:
        return self._weights_field(1.0 - self.mesh.weights[:self.mesh.n_internal_faces])
