"""
Геометрические поля: значения в центрах ячеек (VolField) и на гранях
(SurfaceField) с размерностью и граничными значениями.

Значения — numpy-массивы формы (n,) для скаляров или (n, k) для векторов.
Арифметика проверяет размерности; обычные числа считаются безразмерными.
Скалярное поле, умноженное на векторное, масштабирует каждый компонент.
"""
from __future__ import annotations

import operator
from typing import Callable, Dict, Optional, Tuple, Union

import numpy as np

from dimensions import DIMLESS, DimensionedScalar, DimensionSet
from dimensions.dimension_set import check_compatible

Number = Union[int, float]

PATCH_TYPES = ("calculated", "extrapolatedCalculated", "zeroGradient", "fixedValue")


def _broadcast(a: np.ndarray, b, b_is_constant: bool) -> Tuple[np.ndarray, np.ndarray]:
    """Согласовать скалярные и векторные значения."""
    a = np.asarray(a)
    b = np.asarray(b)
    if b_is_constant:
        if a.ndim == 1 and b.ndim == 1:
            return a[:, None], b
        return a, b
    if a.ndim == 1 and b.ndim == 2:
        return a[:, None], b
    if a.ndim == 2 and b.ndim == 1:
        return a, b[:, None]
    return a, b


class GeometricField:
    """
    Общая часть полей: имя, размерность, сетка, внутренние и граничные значения.

    Параметры
    ---------
    mesh : FvMesh
        Сетка (поле её не владеет)
    name : str
        Имя поля
    internal : np.ndarray
        Внутренние значения
    dimensions : DimensionSet
        Размерность
    boundary : np.ndarray
        Значения на граничных гранях (n_boundary_faces, ...)
    """

    # numpy-скаляры слева передают операцию полю
    __array_ufunc__ = None

    def __init__(self, mesh, name: str, internal: np.ndarray,
                 dimensions: DimensionSet, boundary: np.ndarray):
        self.mesh = mesh
        self.name = name
        self.dimensions = dimensions
        self.internal = np.array(internal, dtype=float)
        self.boundary = np.array(boundary, dtype=float)

        n = self._internal_size()
        if self.internal.shape[:1] != (n,) or self.internal.ndim > 2:
            raise ValueError(f"Поле '{name}': ожидалось {n} внутренних значений, "
                             f"получена форма {self.internal.shape}")
        expected = (mesh.n_boundary_faces,) + self.internal.shape[1:]
        if self.boundary.shape != expected:
            raise ValueError(f"Поле '{name}': граничные значения формы "
                             f"{self.boundary.shape}, ожидалось {expected}")

    def _internal_size(self) -> int:
        raise NotImplementedError

    # ------------------------------------------------------------------ #
    @property
    def n_components(self) -> int:
        return 1 if self.internal.ndim == 1 else self.internal.shape[1]

    def is_scalar(self) -> bool:
        return self.internal.ndim == 1

    def boundary_values(self, patch_name: str) -> np.ndarray:
        """Значения на гранях патча (вид, не копия)."""
        return self.boundary[self.mesh.boundary_slice(self.mesh.patch(patch_name))]

    def min(self) -> float:
        return float(np.min(np.concatenate([self.internal.ravel(), self.boundary.ravel()])))

    def max(self) -> float:
        return float(np.max(np.concatenate([self.internal.ravel(), self.boundary.ravel()])))

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.name!r}, {self.dimensions}, "
                f"n={self.internal.shape[0]}, ncmpt={self.n_components})")

    # ------------------------------------------------------------------ #
    def _new(self, name: str, internal: np.ndarray, dimensions: DimensionSet,
             boundary: np.ndarray) -> "GeometricField":
        raise NotImplementedError

    def copy(self, name: Optional[str] = None) -> "GeometricField":
        return self._new(name or self.name, self.internal.copy(), self.dimensions,
                         self.boundary.copy())

    def _operand(self, other):
        """(внутренние, граничные, размерность, имя, константа?) операнда."""
        if isinstance(other, GeometricField):
            if type(other) is not type(self):
                raise TypeError(f"Нельзя комбинировать {type(self).__name__} "
                                f"и {type(other).__name__}")
            if other.mesh is not self.mesh:
                raise ValueError("Поля определены на разных сетках")
            return other.internal, other.boundary, other.dimensions, other.name, False
        if isinstance(other, DimensionedScalar):
            return other.value, other.value, other.dimensions, other.name, True
        if np.isscalar(other):
            return float(other), float(other), DIMLESS, f"{other:g}", True
        return NotImplemented

    def _binary(self, other, op: Callable, dims_op: Callable, symbol: str,
                reflected: bool = False):
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        o_int, o_bnd, o_dims, o_name, constant = operand

        a_int, b_int = _broadcast(self.internal, o_int, constant)
        a_bnd, b_bnd = _broadcast(self.boundary, o_bnd, constant)
        if reflected:
            internal, boundary = op(b_int, a_int), op(b_bnd, a_bnd)
            dims = dims_op(o_dims, self.dimensions)
            name = f"({o_name}{symbol}{self.name})"
        else:
            internal, boundary = op(a_int, b_int), op(a_bnd, b_bnd)
            dims = dims_op(self.dimensions, o_dims)
            name = f"({self.name}{symbol}{o_name})"
        return self._new(name, internal, dims, boundary)

    def __add__(self, other):
        return self._binary(other, operator.add,
                            lambda a, b: check_compatible(a, b, "+"), "+")

    def __radd__(self, other):
        return self._binary(other, operator.add,
                            lambda a, b: check_compatible(a, b, "+"), "+", True)

    def __sub__(self, other):
        return self._binary(other, operator.sub,
                            lambda a, b: check_compatible(a, b, "-"), "-")

    def __rsub__(self, other):
        return self._binary(other, operator.sub,
                            lambda a, b: check_compatible(a, b, "-"), "-", True)

    def __mul__(self, other):
        return self._binary(other, operator.mul, operator.mul, "*")

    def __rmul__(self, other):
        return self._binary(other, operator.mul, operator.mul, "*", True)

    def __truediv__(self, other):
        return self._binary(other, operator.truediv, operator.truediv, "|")

    def __rtruediv__(self, other):
        return self._binary(other, operator.truediv, operator.truediv, "|", True)

    def __neg__(self):
        return self._new(f"-{self.name}", -self.internal, self.dimensions, -self.boundary)

    def mag(self) -> "GeometricField":
        """Модуль (для векторов — евклидова норма)."""
        if self.is_scalar():
            internal, boundary = np.abs(self.internal), np.abs(self.boundary)
        else:
            internal = np.linalg.norm(self.internal, axis=1)
            boundary = np.linalg.norm(self.boundary, axis=1)
        return self._new(f"mag({self.name})", internal, self.dimensions, boundary)

    def clip(self, lower: Number, upper: Number) -> "GeometricField":
        """Ограничить значения диапазоном [lower, upper]."""
        return self._new(f"clip({self.name})", np.clip(self.internal, lower, upper),
                         self.dimensions, np.clip(self.boundary, lower, upper))

    def component(self, i: int) -> "GeometricField":
        if self.is_scalar():
            raise ValueError(f"Поле '{self.name}' скалярное")
        return self._new(f"{self.name}.component({i})", self.internal[:, i],
                         self.dimensions, self.boundary[:, i])


class VolField(GeometricField):
    """
    Поле в центрах ячеек с граничными значениями на патчах.

    Параметры
    ---------
    mesh : FvMesh
        Сетка
    name : str
        Имя поля
    internal : array_like
        Значения в ячейках (n_cells,) или (n_cells, k)
    dimensions : DimensionSet
        Размерность
    boundary : array_like, optional
        Граничные значения; по умолчанию — значения в ячейках-владельцах
    patch_types : dict, optional
        Тип граничного условия по имени патча (по умолчанию 'calculated')
    fixed_values : dict, optional
        Значения для патчей типа 'fixedValue'
    """

    def __init__(self, mesh, name: str, internal, dimensions: DimensionSet = DIMLESS,
                 boundary=None, patch_types: Optional[Dict[str, str]] = None,
                 fixed_values: Optional[Dict[str, Union[float, np.ndarray]]] = None):
        internal = np.array(internal, dtype=float)
        if boundary is None:
            if internal.shape[:1] != (mesh.n_cells,):
                raise ValueError(f"Поле '{name}': ожидалось {mesh.n_cells} значений, "
                                 f"получена форма {internal.shape}")
            boundary = internal[mesh.boundary_owner]
        super().__init__(mesh, name, internal, dimensions, boundary)

        self.patch_types = {p.name: "calculated" for p in mesh.patches}
        for patch_name, ptype in (patch_types or {}).items():
            mesh.patch(patch_name)
            if ptype not in PATCH_TYPES:
                raise ValueError(f"Неизвестный тип граничного условия '{ptype}'; "
                                 f"допустимые: {', '.join(PATCH_TYPES)}")
            self.patch_types[patch_name] = ptype
        self.fixed_values = dict(fixed_values or {})
        for patch_name, ptype in self.patch_types.items():
            if ptype == "fixedValue" and patch_name not in self.fixed_values:
                raise ValueError(f"Поле '{name}': для патча '{patch_name}' типа "
                                 f"fixedValue не задано значение")
        self.correct_boundary_conditions()

    def _internal_size(self) -> int:
        return self.mesh.n_cells

    def _new(self, name, internal, dimensions, boundary) -> "VolField":
        return VolField(self.mesh, name, internal, dimensions, boundary)

    def copy(self, name: Optional[str] = None) -> "VolField":
        return VolField(self.mesh, name or self.name, self.internal.copy(),
                        self.dimensions, self.boundary.copy(),
                        patch_types=self.patch_types, fixed_values=self.fixed_values)

    @classmethod
    def uniform(cls, mesh, name: str, value, dimensions: DimensionSet = DIMLESS,
                patch_type: str = "calculated") -> "VolField":
        """Однородное поле."""
        value = np.asarray(value, dtype=float)
        internal = np.tile(value, (mesh.n_cells,) + (1,) * value.ndim)
        return cls(mesh, name, internal, dimensions,
                   patch_types={p.name: patch_type for p in mesh.patches})

    def correct_boundary_conditions(self):
        """
        Обновить граничные значения по типам патчей.

        extrapolatedCalculated и zeroGradient берут значение из ячейки-владельца,
        fixedValue — заданное значение, calculated не изменяется.
        """
        owner = self.mesh.boundary_owner
        for patch in self.mesh.patches:
            ptype = self.patch_types[patch.name]
            sl = self.mesh.boundary_slice(patch)
            if ptype in ("extrapolatedCalculated", "zeroGradient"):
                self.boundary[sl] = self.internal[owner[sl]]
            elif ptype == "fixedValue":
                self.boundary[sl] = self.fixed_values[patch.name]


class SurfaceField(GeometricField):
    """
    Поле на гранях: значения на внутренних гранях и на граничных гранях.

    Параметры
    ---------
    mesh : FvMesh
        Сетка
    name : str
        Имя поля
    internal : array_like
        Значения на внутренних гранях (n_internal_faces,) или (n_internal_faces, k)
    dimensions : DimensionSet
        Размерность
    boundary : array_like, optional
        Значения на граничных гранях (по умолчанию нули)
    """

    def __init__(self, mesh, name: str, internal, dimensions: DimensionSet = DIMLESS,
                 boundary=None):
        internal = np.array(internal, dtype=float)
        if boundary is None:
            boundary = np.zeros((mesh.n_boundary_faces,) + internal.shape[1:])
        super().__init__(mesh, name, internal, dimensions, boundary)

    def _internal_size(self) -> int:
        return self.mesh.n_internal_faces

    def _new(self, name, internal, dimensions, boundary) -> "SurfaceField":
        return SurfaceField(self.mesh, name, internal, dimensions, boundary)

    @classmethod
    def from_face_values(cls, mesh, name: str, values,
                         dimensions: DimensionSet = DIMLESS) -> "SurfaceField":
        """Создать поле из массива значений на всех гранях (n_faces, ...)."""
        values = np.asarray(values, dtype=float)
        if values.shape[:1] != (mesh.n_faces,):
            raise ValueError(f"Ожидалось {mesh.n_faces} значений на гранях, "
                             f"получена форма {values.shape}")
        ni = mesh.n_internal_faces
        return cls(mesh, name, values[:ni], dimensions, values[ni:])

    @classmethod
    def uniform(cls, mesh, name: str, value,
                dimensions: DimensionSet = DIMLESS) -> "SurfaceField":
        value = np.asarray(value, dtype=float)
        values = np.tile(value, (mesh.n_faces,) + (1,) * value.ndim)
        return cls.from_face_values(mesh, name, values, dimensions)

    @property
    def field(self) -> np.ndarray:
        """Значения на всех гранях в глобальной нумерации."""
        return np.concatenate([self.internal, self.boundary])
