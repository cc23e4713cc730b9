"""
Базовая схема интерполяции из центров ячеек на грани.

Схема задаёт веса w (доля значения владельца на грани):
    φ_f = w φ_P + (1 - w) φ_N,
и, при необходимости, явную поправку, добавляемую к φ_f.
На граничных гранях берутся граничные значения поля.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from dimensions import DIMLESS
from fields import SurfaceField, VolField


class SurfaceInterpolationScheme(ABC):
    """
    Интерфейс схемы: weights, interpolate, corrected, correction.

    Схема неизменяема после построения и не копируется
    (поддерево вложенных схем может быть большим).
    """

    type_name: str = "surfaceInterpolationScheme"

    def __init__(self, mesh):
        self._mesh = mesh

    @property
    def mesh(self):
        return self._mesh

    # ---- построение из спецификации ----
    @classmethod
    def from_stream(cls, mesh, stream) -> "SurfaceInterpolationScheme":
        """Построить схему из оставшихся токенов (форма «сетка»)."""
        return cls(mesh)

    @classmethod
    def from_flux_stream(cls, mesh, face_flux: SurfaceField,
                         stream) -> "SurfaceInterpolationScheme":
        """Построить схему с заданным потоком (форма «сетка + поток»)."""
        return cls.from_stream(mesh, stream)

    def __copy__(self):
        raise TypeError(f"Схема {self.type_name} не копируется")

    def __deepcopy__(self, memo):
        raise TypeError(f"Схема {self.type_name} не копируется")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    # ---- интерфейс ----
    @abstractmethod
    def weights(self, vf: VolField) -> SurfaceField:
        """Веса интерполяции на гранях."""

    def corrected(self) -> bool:
        """True, если схема добавляет явную поправку."""
        return False

    def correction(self, vf: VolField) -> Optional[SurfaceField]:
        """Явная поправка; None, если схема без поправки."""
        return None

    def interpolate(self, vf: VolField) -> SurfaceField:
        """Значения на гранях с учётом поправки."""
        result = self.interpolate_with_weights(vf, self.weights(vf))
        if self.corrected():
            result = result + self.correction(vf)
            result.name = f"interpolate({vf.name})"
        return result

    # ---- общие операции ----
    @staticmethod
    def interpolate_with_weights(vf: VolField, weights: SurfaceField) -> SurfaceField:
        """φ_f = w φ_P + (1 - w) φ_N на внутренних гранях."""
        mesh = vf.mesh
        w = weights.internal
        if not vf.is_scalar():
            w = w[:, None]
        phi_P = vf.internal[mesh.internal_owner]
        phi_N = vf.internal[mesh.neighbour]
        internal = w * phi_P + (1.0 - w) * phi_N
        return SurfaceField(mesh, f"interpolate({vf.name})", internal,
                            vf.dimensions, vf.boundary.copy())

    def _weights_field(self, internal: np.ndarray,
                       boundary: Optional[np.ndarray] = None) -> SurfaceField:
        """Поле весов; на границе по умолчанию 1."""
        if boundary is None:
            boundary = np.ones(self._mesh.n_boundary_faces)
        return SurfaceField(self._mesh, f"{self.type_name}Weights", internal,
                            DIMLESS, boundary)
