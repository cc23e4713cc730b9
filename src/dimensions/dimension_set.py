"""
Наборы размерностей: показатели степени по семи базовым единицам СИ.

Порядок: масса, длина, время, температура, количество вещества,
сила тока, сила света.
"""
from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Tuple

from utils.errors import DimensionalConsistencyError

BASE_UNITS = ("kg", "m", "s", "K", "mol", "A", "cd")


@dataclass(frozen=True)
class DimensionSet:
    """Набор показателей степени базовых размерностей (неизменяемый)."""

    mass: float = 0.0
    length: float = 0.0
    time: float = 0.0
    temperature: float = 0.0
    moles: float = 0.0
    current: float = 0.0
    luminous_intensity: float = 0.0

    @classmethod
    def from_exponents(cls, exponents) -> "DimensionSet":
        """
        Создать набор из последовательности показателей.

        Допускается 5 показателей (без тока и силы света) или все 7.
        """
        exponents = [float(e) for e in exponents]
        if len(exponents) not in (5, 7):
            raise ValueError(
                f"Ожидалось 5 или 7 показателей размерности, получено {len(exponents)}"
            )
        return cls(*exponents)

    @property
    def exponents(self) -> Tuple[float, ...]:
        return astuple(self)

    def dimensionless(self) -> bool:
        return all(e == 0 for e in self.exponents)

    def __mul__(self, other: "DimensionSet") -> "DimensionSet":
        if not isinstance(other, DimensionSet):
            return NotImplemented
        return DimensionSet(*(a + b for a, b in zip(self.exponents, other.exponents)))

    def __truediv__(self, other: "DimensionSet") -> "DimensionSet":
        if not isinstance(other, DimensionSet):
            return NotImplemented
        return DimensionSet(*(a - b for a, b in zip(self.exponents, other.exponents)))

    def __pow__(self, power: float) -> "DimensionSet":
        return DimensionSet(*(a * power for a in self.exponents))

    def __add__(self, other: "DimensionSet") -> "DimensionSet":
        return check_compatible(self, other, "+")

    def __sub__(self, other: "DimensionSet") -> "DimensionSet":
        return check_compatible(self, other, "-")

    def __str__(self) -> str:
        return "[" + " ".join(f"{e:g}" for e in self.exponents) + "]"

    def describe(self) -> str:
        """Запись в единицах СИ, например ``m^3 s^-1``."""
        parts = []
        for unit, e in zip(BASE_UNITS, self.exponents):
            if e == 1:
                parts.append(unit)
            elif e != 0:
                parts.append(f"{unit}^{e:g}")
        return " ".join(parts) or "-"


def check_compatible(a: DimensionSet, b: DimensionSet, operation: str) -> DimensionSet:
    """
    Размерность результата сложения/вычитания.

    Наборы должны совпадать; безразмерный операнд принимает размерность
    другого операнда.
    """
    if a == b or b.dimensionless():
        return a
    if a.dimensionless():
        return b
    raise DimensionalConsistencyError(
        f"Несовместимые размерности в операции '{operation}': {a} и {b}"
    )


DIMLESS = DimensionSet()

DIM_MASS = DimensionSet(mass=1)
DIM_LENGTH = DimensionSet(length=1)
DIM_TIME = DimensionSet(time=1)
DIM_TEMPERATURE = DimensionSet(temperature=1)
DIM_MOLES = DimensionSet(moles=1)
DIM_CURRENT = DimensionSet(current=1)
DIM_LUMINOUS_INTENSITY = DimensionSet(luminous_intensity=1)

DIM_AREA = DIM_LENGTH ** 2
DIM_VOLUME = DIM_LENGTH ** 3
DIM_VELOCITY = DIM_LENGTH / DIM_TIME
DIM_ACCELERATION = DIM_VELOCITY / DIM_TIME
DIM_DENSITY = DIM_MASS / DIM_VOLUME
DIM_FORCE = DIM_MASS * DIM_ACCELERATION
DIM_PRESSURE = DIM_FORCE / DIM_AREA
DIM_VISCOSITY = DIM_AREA / DIM_TIME

# Объёмный (м³/с) и массовый (кг/с) поток через грань
DIM_FLUX = DIM_AREA * DIM_VELOCITY
DIM_MASS_FLUX = DIM_DENSITY * DIM_FLUX
