"""Явная конвективная дивергенция div(φ, ψ) по записи divSchemes."""
from __future__ import annotations

import logging
from typing import Optional

from fields import SurfaceField, VolField
from fvc.surface_integrate import surface_integrate
from interpolation.scheme_registry import resolve_scheme
from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


def div(flux: SurfaceField, vf: VolField, name: Optional[str] = None) -> VolField:
    """
    Конвективный член (1/V) Σ_f φ_f ψ_f.

    Запись ``div(<flux>,<vf>)`` таблицы divSchemes должна иметь вид
    ``Gauss <схема интерполяции>``; схема строится с потоком ``flux``.

    Параметры
    ---------
    flux : SurfaceField
        Поток через грани
    vf : VolField
        Переносимое поле
    name : str, optional
        Ключ таблицы (по умолчанию ``div(<flux.name>,<vf.name>)``)
    """
    mesh = vf.mesh
    name = name or f"div({flux.name},{vf.name})"
    stream = mesh.schemes.div_scheme(name)
    location = stream.location()
    kind = stream.read_word()
    if kind != "Gauss":
        raise ConfigurationError(
            f"Схема дивергенции '{kind}' для {name} не поддерживается, ожидалось Gauss",
            location,
        )
    scheme = resolve_scheme(mesh, stream, face_flux=flux)
    logger.debug(f"{name}: {scheme!r}")

    result = surface_integrate(flux * scheme.interpolate(vf))
    result.name = name
    return result
