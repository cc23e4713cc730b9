"""
Суммирование полей на гранях по ячейкам.

- ``surface_sum``: Σ_f ssf_f по всем граням ячейки (внутренняя грань
  входит в обе смежные ячейки с одним знаком, граничная — во владельца);
- ``surface_integrate``: (Σ_f ±ssf_f) / V — поток наружу из ячейки на
  единицу объёма (для соседа знак внутренней грани меняется).
"""
from __future__ import annotations

import numpy as np

from dimensions import DIM_VOLUME
from fields import SurfaceField, VolField


def _face_sum(ssf: SurfaceField, neighbour_sign: float) -> np.ndarray:
    values = ssf.field
    return np.asarray(ssf.mesh.incidence(neighbour_sign) @ values).reshape(
        (ssf.mesh.n_cells,) + values.shape[1:]
    )


def _extrapolated(mesh, name, internal, dimensions) -> VolField:
    return VolField(mesh, name, internal, dimensions,
                    patch_types={p.name: "extrapolatedCalculated" for p in mesh.patches})


def surface_sum(ssf: SurfaceField) -> VolField:
    """
    Сумма значений по граням каждой ячейки.

    Параметры
    ---------
    ssf : SurfaceField
        Поле на гранях (скалярное или векторное)

    Возвращает
    ----------
    VolField
        Поле в ячейках той же размерности с экстраполированными
        граничными значениями
    """
    return _extrapolated(ssf.mesh, f"surfaceSum({ssf.name})",
                         _face_sum(ssf, 1.0), ssf.dimensions)


def surface_integrate(ssf: SurfaceField) -> VolField:
    """
    Дискретная дивергенция потока: (Σ_f ±ssf_f) / V.

    Возвращает
    ----------
    VolField
        Поле размерности [ssf]/[объём]
    """
    mesh = ssf.mesh
    total = _face_sum(ssf, -1.0)
    V = mesh.V if total.ndim == 1 else mesh.V[:, None]
    return _extrapolated(mesh, f"surfaceIntegrate({ssf.name})", total / V,
                         ssf.dimensions / DIM_VOLUME)
