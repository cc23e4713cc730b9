"""Размерные величины: значение + набор размерностей."""
from __future__ import annotations

from typing import Union

import numpy as np

from dimensions.dimension_set import DIMLESS, DimensionSet, check_compatible


class DimensionedScalar:
    """
    Неизменяемая размерная величина.

    Параметры
    ---------
    name : str
        Имя величины
    dimensions : DimensionSet
        Размерность
    value : float или np.ndarray
        Значение (скаляр или тензор)
    """

    __slots__ = ("_name", "_dimensions", "_value")

    def __init__(self, name: str, dimensions: DimensionSet,
                 value: Union[float, np.ndarray]):
        self._name = name
        self._dimensions = dimensions
        if np.isscalar(value):
            self._value = float(value)
        else:
            arr = np.array(value, dtype=float)
            arr.setflags(write=False)
            self._value = arr

    @property
    def name(self) -> str:
        return self._name

    @property
    def dimensions(self) -> DimensionSet:
        return self._dimensions

    @property
    def value(self) -> Union[float, np.ndarray]:
        return self._value

    def __repr__(self) -> str:
        return f"DimensionedScalar({self._name!r}, {self._dimensions}, {self._value!r})"

    @staticmethod
    def _split(other):
        if isinstance(other, DimensionedScalar):
            return other.name, other.dimensions, other.value
        return str(other), DIMLESS, other

    def __add__(self, other) -> "DimensionedScalar":
        name, dims, value = self._split(other)
        return DimensionedScalar(f"({self._name}+{name})",
                                 check_compatible(self._dimensions, dims, "+"),
                                 self._value + value)

    __radd__ = __add__

    def __sub__(self, other) -> "DimensionedScalar":
        name, dims, value = self._split(other)
        return DimensionedScalar(f"({self._name}-{name})",
                                 check_compatible(self._dimensions, dims, "-"),
                                 self._value - value)

    def __rsub__(self, other) -> "DimensionedScalar":
        name, dims, value = self._split(other)
        return DimensionedScalar(f"({name}-{self._name})",
                                 check_compatible(dims, self._dimensions, "-"),
                                 value - self._value)

    def __mul__(self, other) -> "DimensionedScalar":
        name, dims, value = self._split(other)
        return DimensionedScalar(f"({self._name}*{name})",
                                 self._dimensions * dims, self._value * value)

    __rmul__ = __mul__

    def __truediv__(self, other) -> "DimensionedScalar":
        name, dims, value = self._split(other)
        return DimensionedScalar(f"({self._name}|{name})",
                                 self._dimensions / dims, self._value / value)

    def __rtruediv__(self, other) -> "DimensionedScalar":
        name, dims, value = self._split(other)
        return DimensionedScalar(f"({name}|{self._name})",
                                 dims / self._dimensions, value / self._value)

    def __neg__(self) -> "DimensionedScalar":
        return DimensionedScalar(f"-{self._name}", self._dimensions, -self._value)

    def __pow__(self, power: float) -> "DimensionedScalar":
        return DimensionedScalar(f"pow({self._name},{power:g})",
                                 self._dimensions ** power, self._value ** power)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DimensionedScalar):
            return NotImplemented
        return (self._dimensions == other._dimensions
                and np.array_equal(self._value, other._value))

    def __hash__(self):
        return hash(self._dimensions)


def dimensionless(value: float, name: str = "") -> DimensionedScalar:
    """Безразмерная величина."""
    return DimensionedScalar(name or f"{value:g}", DIMLESS, value)
