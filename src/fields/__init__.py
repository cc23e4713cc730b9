# src/fields/__init__.py
"""Поля в центрах ячеек и на гранях."""

from .geometric_field import GeometricField, VolField, SurfaceField, PATCH_TYPES

__all__ = ["GeometricField", "VolField", "SurfaceField", "PATCH_TYPES"]
