"""
Схемы интерполяции из центров ячеек на грани.

Импорт пакета регистрирует все схемы в ``scheme_registry``.
"""
from interpolation.scheme_registry import (SchemeRegistry, register_scheme,
                                           resolve_scheme, scheme_registry)
from interpolation.surface_interpolation_scheme import SurfaceInterpolationScheme
from interpolation.blended_scheme_base import BlendedSchemeBase
from interpolation.surface_interpolate import interpolate, scheme_for
from interpolation.linear import Linear, MidPoint, ReverseLinear
from interpolation.local_max_min import LocalMax, LocalMin
from interpolation.upwind import Downwind, LinearUpwind, LUST, Upwind
from interpolation.blending import blending_ramp
from interpolation.courant_blended import CourantBlendedScheme
from interpolation.cell_co_blended import CellCoBlended
from interpolation.co_blended import CoBlended
from interpolation.diagnostics import blending_statistics, log_blending_factor

__all__ = [
    "SchemeRegistry", "register_scheme", "resolve_scheme", "scheme_registry",
    "SurfaceInterpolationScheme", "BlendedSchemeBase",
    "interpolate", "scheme_for",
    "Linear", "MidPoint", "ReverseLinear", "LocalMax", "LocalMin",
    "Upwind", "Downwind", "LinearUpwind", "LUST",
    "blending_ramp", "CourantBlendedScheme", "CellCoBlended", "CoBlended",
    "blending_statistics", "log_blending_factor",
]
