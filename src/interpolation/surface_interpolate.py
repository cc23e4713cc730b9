"""Интерполяция поля на грани по таблице interpolationSchemes сетки."""
from __future__ import annotations

from typing import Optional

from fields import SurfaceField, VolField
from interpolation.scheme_registry import resolve_scheme


def scheme_for(vf: VolField, scheme_name: Optional[str] = None, face_flux=None):
    """Схема из записи ``interpolate(<имя поля>)`` (или ``scheme_name``)."""
    name = scheme_name or f"interpolate({vf.name})"
    stream = vf.mesh.schemes.interpolation_scheme(name)
    return resolve_scheme(vf.mesh, stream, face_flux=face_flux)


def interpolate(vf: VolField, scheme_name: Optional[str] = None,
                face_flux=None) -> SurfaceField:
    """
    Значения поля на гранях по схеме из таблицы сетки.

    Параметры
    ---------
    vf : VolField
        Поле в ячейках
    scheme_name : str, optional
        Ключ таблицы (по умолчанию ``interpolate(<vf.name>)``)
    face_flux : SurfaceField, optional
        Поток для схем, которым он нужен

    Возвращает
    ----------
    SurfaceField
        Поле на гранях
    """
    return scheme_for(vf, scheme_name, face_flux).interpolate(vf)
