"""Градиент по Гауссу с линейной интерполяцией на грани."""
from __future__ import annotations

import numpy as np

from dimensions import DIM_LENGTH
from fields import SurfaceField, VolField
from fvc.surface_integrate import surface_integrate
from utils.errors import ConfigurationError
from utils.token_stream import TokenStream

SUPPORTED_GRAD_SCHEMES = ("Gauss linear",)


def check_grad_scheme(mesh, name: str) -> str:
    """
    Проверить запись ``gradSchemes`` для ``name``.

    Поддерживается только ``Gauss linear``.
    """
    stream: TokenStream = mesh.schemes.grad_scheme(name)
    spec = stream.remaining()
    if spec not in SUPPORTED_GRAD_SCHEMES:
        raise ConfigurationError(
            f"Схема градиента '{spec}' для {name} не поддерживается; "
            f"допустимые: {', '.join(SUPPORTED_GRAD_SCHEMES)}",
            stream.location(),
        )
    return spec


def grad(vf: VolField) -> VolField:
    """
    Градиент скалярного поля: (1/V) Σ_f Sf φ_f.

    Значения на внутренних гранях — линейная интерполяция с весами сетки,
    на граничных — граничные значения поля.

    Возвращает
    ----------
    VolField
        Векторное поле (n_cells, dim)
    """
    if not vf.is_scalar():
        raise ValueError(f"grad: поле '{vf.name}' не скалярное, "
                         f"берите градиент по компонентам")
    mesh = vf.mesh
    ni = mesh.n_internal_faces
    w = mesh.weights[:ni]
    phi_f = w * vf.internal[mesh.internal_owner] + (1.0 - w) * vf.internal[mesh.neighbour]
    phi_all = np.concatenate([phi_f, vf.boundary])
    flux = SurfaceField.from_face_values(mesh, f"Sf*{vf.name}",
                                         mesh.Sf * phi_all[:, None],
                                         vf.dimensions * DIM_LENGTH ** 2)
    result = surface_integrate(flux)
    result.name = f"grad({vf.name})"
    return result
