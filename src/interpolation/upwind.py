"""
Схемы, зависящие от направления потока: upwind, downwind,
linearUpwind и LUST.

В форме «сетка» имя потока читается из спецификации (``upwind phi``)
и поток ищется в реестре сетки; в форме «сетка + поток» поток задан
вызывающим (``Gauss upwind`` в divSchemes).
"""
from __future__ import annotations

import logging

import numpy as np

from fields import SurfaceField, VolField
from fvc.gradient import check_grad_scheme, grad
from interpolation.scheme_registry import register_scheme
from interpolation.surface_interpolation_scheme import SurfaceInterpolationScheme

logger = logging.getLogger(__name__)


def lookup_flux(mesh, stream) -> SurfaceField:
    """Прочитать имя потока из спецификации и найти его в реестре сетки."""
    return mesh.lookup_object(stream.read_word(), SurfaceField)


@register_scheme("upwind")
class Upwind(SurfaceInterpolationScheme):
    """
    Значение из ячейки против потока: w = 1 при φ ≥ 0, иначе 0.

    Параметры
    ---------
    mesh : FvMesh
        Сетка
    face_flux : SurfaceField
        Поток через грани, задающий направление
    """

    def __init__(self, mesh, face_flux: SurfaceField):
        super().__init__(mesh)
        self._face_flux = face_flux

    @property
    def face_flux(self) -> SurfaceField:
        return self._face_flux

    @classmethod
    def from_stream(cls, mesh, stream):
        return cls(mesh, lookup_flux(mesh, stream))

    @classmethod
    def from_flux_stream(cls, mesh, face_flux, stream):
        return cls(mesh, face_flux)

    def _pos0(self):
        flux = self._face_flux
        return ((flux.internal >= 0).astype(float),
                (flux.boundary >= 0).astype(float))

    def weights(self, vf: VolField) -> SurfaceField:
        internal, boundary = self._pos0()
        return self._weights_field(internal, boundary)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._face_flux.name})"


@register_scheme("downwind")
class Downwind(Upwind):
    """Значение из ячейки по потоку: w = 0 при φ ≥ 0, иначе 1."""

    def weights(self, vf: VolField) -> SurfaceField:
        internal, boundary = self._pos0()
        return self._weights_field(1.0 - internal, 1.0 - boundary)


@register_scheme("linearUpwind")
class LinearUpwind(Upwind):
    """
    Upwind с явной поправкой второго порядка:
        φ_f = φ_U + (Cf - C_U)·(∇φ)_U,
    где U — ячейка против потока.

    Параметры
    ---------
    mesh : FvMesh
        Сетка
    face_flux : SurfaceField
        Поток через грани
    grad_scheme_name : str
        Ключ таблицы gradSchemes для градиента (например, ``grad(T)``)
    """

    def __init__(self, mesh, face_flux: SurfaceField, grad_scheme_name: str):
        super().__init__(mesh, face_flux)
        check_grad_scheme(mesh, grad_scheme_name)
        self.grad_scheme_name = grad_scheme_name

    @classmethod
    def from_stream(cls, mesh, stream):
        face_flux = lookup_flux(mesh, stream)
        return cls(mesh, face_flux, stream.read_word())

    @classmethod
    def from_flux_stream(cls, mesh, face_flux, stream):
        return cls(mesh, face_flux, stream.read_word())

    def corrected(self) -> bool:
        return True

    def _upwind_cells(self) -> np.ndarray:
        mesh = self.mesh
        return np.where(self._face_flux.internal >= 0,
                        mesh.internal_owner, mesh.neighbour)

    def correction(self, vf: VolField) -> SurfaceField:
        mesh = self.mesh
        ni = mesh.n_internal_faces
        cells = self._upwind_cells()
        d = mesh.Cf[:ni] - mesh.C[cells]

        if vf.is_scalar():
            grad_vf = grad(vf).internal
            internal = np.einsum("ij,ij->i", d, grad_vf[cells])
        else:
            internal = np.column_stack([
                np.einsum("ij,ij->i", d, grad(vf.component(i)).internal[cells])
                for i in range(vf.n_components)
            ])
        # поправка только на внутренних гранях
        boundary = np.zeros_like(vf.boundary)
        return SurfaceField(mesh, f"{self.type_name}Correction({vf.name})",
                            internal, vf.dimensions, boundary)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._face_flux.name}, {self.grad_scheme_name})"


@register_scheme("LUST")
class LUST(LinearUpwind):
    """Смесь 75% linear и 25% linearUpwind."""

    LINEAR_FRACTION = 0.75

    def weights(self, vf: VolField) -> SurfaceField:
        f = self.LINEAR_FRACTION
        ni = self.mesh.n_internal_faces
        lin = self.mesh.weights
        upwind_w = super().weights(vf)
        return self._weights_field(f * lin[:ni] + (1.0 - f) * upwind_w.internal,
                                   f * lin[ni:] + (1.0 - f) * upwind_w.boundary)

    def correction(self, vf: VolField) -> SurfaceField:
        result = (1.0 - self.LINEAR_FRACTION) * super().correction(vf)
        result.name = f"LUSTCorrection({vf.name})"
        return result
