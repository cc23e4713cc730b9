"""
Общая часть схем, смешивающих две схемы по числу Куранта.

Коэффициент смешения на грани
    bf = 1 - clip((Co_f - Co1)/(Co2 - Co1), 0, 1),
результат
    φ_f = bf·scheme1 + (1 - bf)·scheme2.

Наследники определяют только способ получения числа Куранта на гранях
``face_courant_number``: cellCoBlended интерполирует число Куранта ячеек,
CoBlended вычисляет его прямо на гранях.

Массовый поток (кг/с) переводится в объёмный делением на
интерполированную плотность ``rho``.
"""
from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Callable, Optional, Union

from dimensions import DIM_FLUX, DIM_MASS_FLUX, DIMLESS
from fields import SurfaceField, VolField
from interpolation.blended_scheme_base import BlendedSchemeBase
from interpolation.blending import blending_ramp
from interpolation.scheme_registry import scheme_registry
from interpolation.surface_interpolate import interpolate
from interpolation.surface_interpolation_scheme import SurfaceInterpolationScheme
from interpolation.upwind import lookup_flux
from utils.errors import ConfigurationError, DimensionalConsistencyError

logger = logging.getLogger(__name__)

DensitySource = Union[VolField, Callable[[], VolField]]

# имя поля плотности в реестре сетки, если плотность не передана явно
DENSITY_NAME = "rho"


class CourantBlendedScheme(SurfaceInterpolationScheme, BlendedSchemeBase):
    """
    Смешение scheme1 (малые Co) и scheme2 (большие Co) по числу Куранта.

    Параметры
    ---------
    mesh : FvMesh
        Сетка
    co1 : float
        Число Куранта, ниже которого используется только scheme1
    scheme1 : SurfaceInterpolationScheme
        Схема для малых чисел Куранта
    co2 : float
        Число Куранта, выше которого используется только scheme2
    scheme2 : SurfaceInterpolationScheme
        Схема для больших чисел Куранта
    face_flux : SurfaceField
        Объёмный (м³/с) или массовый (кг/с) поток через грани
    rho : VolField или callable, optional
        Плотность для массового потока; по умолчанию поле ``rho``
        из реестра сетки
    location : str, optional
        Место спецификации для сообщений об ошибках
    """

    def __init__(self, mesh, co1: float, scheme1: SurfaceInterpolationScheme,
                 co2: float, scheme2: SurfaceInterpolationScheme,
                 face_flux: SurfaceField, rho: Optional[DensitySource] = None,
                 location: Optional[str] = None):
        super().__init__(mesh)
        co1, co2 = float(co1), float(co2)
        if not (0.0 <= co1 < co2):
            raise ConfigurationError(
                f"{type(self).type_name}: коэффициенты должны удовлетворять "
                f"0 <= Co1 < Co2, получено Co1 = {co1:g}, Co2 = {co2:g}",
                location,
            )
        self._co1 = co1
        self._co2 = co2
        self._scheme1 = scheme1
        self._scheme2 = scheme2
        self._face_flux = face_flux
        self._rho = rho

    # ---- построение из спецификации ----
    @classmethod
    def _read(cls, mesh, stream, face_flux):
        location = stream.location()
        co1 = stream.read_scalar()
        scheme1 = scheme_registry.resolve(mesh, stream, face_flux=face_flux)
        co2 = stream.read_scalar()
        scheme2 = scheme_registry.resolve(mesh, stream, face_flux=face_flux)
        return location, co1, scheme1, co2, scheme2

    @classmethod
    def from_stream(cls, mesh, stream):
        location, co1, scheme1, co2, scheme2 = cls._read(mesh, stream, None)
        face_flux = lookup_flux(mesh, stream)
        return cls(mesh, co1, scheme1, co2, scheme2, face_flux, location=location)

    @classmethod
    def from_flux_stream(cls, mesh, face_flux, stream):
        location, co1, scheme1, co2, scheme2 = cls._read(mesh, stream, face_flux)
        return cls(mesh, co1, scheme1, co2, scheme2, face_flux, location=location)

    # ---- свойства ----
    @property
    def co1(self) -> float:
        return self._co1

    @property
    def co2(self) -> float:
        return self._co2

    @property
    def scheme1(self) -> SurfaceInterpolationScheme:
        return self._scheme1

    @property
    def scheme2(self) -> SurfaceInterpolationScheme:
        return self._scheme2

    @property
    def face_flux(self) -> SurfaceField:
        return self._face_flux

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self._co1:g}, {self._scheme1!r}, "
                f"{self._co2:g}, {self._scheme2!r}, {self._face_flux.name})")

    # ---- поток ----
    def _density(self) -> VolField:
        if self._rho is None:
            return self.mesh.lookup_object(DENSITY_NAME, VolField)
        if isinstance(self._rho, VolField):
            return self._rho
        return self._rho()

    def volumetric_flux(self) -> SurfaceField:
        """
        Объёмный поток через грани.

        Массовый поток делится на плотность, интерполированную на грани
        по записи ``interpolate(rho)``.
        """
        flux = self._face_flux
        if flux.dimensions == DIM_MASS_FLUX:
            return flux / interpolate(self._density())
        if flux.dimensions != DIM_FLUX:
            raise DimensionalConsistencyError(
                f"{type(self).type_name}: поток '{flux.name}' имеет размерность "
                f"{flux.dimensions} ({flux.dimensions.describe()}), ожидался "
                f"объёмный {DIM_FLUX} или массовый {DIM_MASS_FLUX}"
            )
        return flux

    @abstractmethod
    def face_courant_number(self) -> SurfaceField:
        """Безразмерное число Куранта на гранях."""

    # ---- смешение ----
    def blending_factor(self, vf: VolField) -> SurfaceField:
        """
        Коэффициент смешения на гранях.

        Возвращает
        ----------
        SurfaceField
            Безразмерное поле ``<vf.name>BlendingFactor`` со значениями в [0, 1]
        """
        co_f = self.face_courant_number()
        bf = SurfaceField(self.mesh, f"{vf.name}BlendingFactor",
                          blending_ramp(co_f.internal, self._co1, self._co2),
                          DIMLESS,
                          blending_ramp(co_f.boundary, self._co1, self._co2))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"{type(self).type_name}({vf.name}): bf в "
                         f"[{bf.min():.4g}, {bf.max():.4g}], "
                         f"Co_f в [{co_f.min():.4g}, {co_f.max():.4g}]")
        return bf

    def weights(self, vf: VolField) -> SurfaceField:
        bf = self.blending_factor(vf)
        result = bf * self._scheme1.weights(vf) + (1.0 - bf) * self._scheme2.weights(vf)
        result.name = f"{type(self).type_name}Weights({vf.name})"
        return result

    def interpolate(self, vf: VolField) -> SurfaceField:
        bf = self.blending_factor(vf)
        result = (bf * self._scheme1.interpolate(vf)
                  + (1.0 - bf) * self._scheme2.interpolate(vf))
        result.name = f"{type(self).type_name}({vf.name})"
        return result

    def corrected(self) -> bool:
        return self._scheme1.corrected() or self._scheme2.corrected()

    def correction(self, vf: VolField) -> Optional[SurfaceField]:
        """
        Явная поправка смеси: bf·corr1 + (1 - bf)·corr2.

        Если поправка есть только у одной схемы, берётся её часть;
        если ни у одной, возвращается None.
        """
        c1 = self._scheme1.corrected()
        c2 = self._scheme2.corrected()
        if not (c1 or c2):
            return None

        bf = self.blending_factor(vf)
        if c1 and c2:
            result = (bf * self._scheme1.correction(vf)
                      + (1.0 - bf) * self._scheme2.correction(vf))
        elif c1:
            result = bf * self._scheme1.correction(vf)
        else:
            result = (1.0 - bf) * self._scheme2.correction(vf)
        result.name = f"{type(self).type_name}Correction({vf.name})"
        return result
