# src/dimensions/__init__.py
"""Размерности и размерные величины."""

from .dimension_set import (
    DimensionSet,
    DIMLESS,
    DIM_MASS,
    DIM_LENGTH,
    DIM_TIME,
    DIM_TEMPERATURE,
    DIM_MOLES,
    DIM_CURRENT,
    DIM_LUMINOUS_INTENSITY,
    DIM_AREA,
    DIM_VOLUME,
    DIM_VELOCITY,
    DIM_ACCELERATION,
    DIM_DENSITY,
    DIM_FORCE,
    DIM_PRESSURE,
    DIM_VISCOSITY,
    DIM_FLUX,
    DIM_MASS_FLUX,
)
from .dimensioned import DimensionedScalar, dimensionless
from .units import add_unit, parse_dimensioned, parse_dimensions, unit_set

__all__ = [
    "DimensionSet", "DimensionedScalar", "dimensionless",
    "add_unit", "parse_dimensioned", "parse_dimensions", "unit_set",
    "DIMLESS", "DIM_MASS", "DIM_LENGTH", "DIM_TIME", "DIM_TEMPERATURE",
    "DIM_MOLES", "DIM_CURRENT", "DIM_LUMINOUS_INTENSITY", "DIM_AREA",
    "DIM_VOLUME", "DIM_VELOCITY", "DIM_ACCELERATION", "DIM_DENSITY",
    "DIM_FORCE", "DIM_PRESSURE", "DIM_VISCOSITY", "DIM_FLUX", "DIM_MASS_FLUX",
]
