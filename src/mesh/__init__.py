# src/mesh/__init__.py
"""Сетка, время, реестр объектов и таблицы схем."""

from .time import Time
from .object_registry import ObjectRegistry
from .fv_schemes import FvSchemes
from .fv_mesh import FvMesh, Patch
from .block_mesh import LineGeometry, BoxGeometry, line_mesh, box_mesh

__all__ = [
    "Time", "ObjectRegistry", "FvSchemes", "FvMesh", "Patch",
    "LineGeometry", "BoxGeometry", "line_mesh", "box_mesh",
]
