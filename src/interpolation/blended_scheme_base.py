"""Общий интерфейс схем, смешивающих две схемы интерполяции."""
from __future__ import annotations

from abc import ABC, abstractmethod

from fields import SurfaceField, VolField


class BlendedSchemeBase(ABC):
    """
    Схема-смесь: bf·scheme1 + (1 - bf)·scheme2.

    Коэффициент смешения bf ∈ [0, 1] задаётся на каждой грани.
    """

    @abstractmethod
    def blending_factor(self, vf: VolField) -> SurfaceField:
        """Безразмерный коэффициент смешения на гранях."""
