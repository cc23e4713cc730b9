"""
Конечно-объёмная сетка с адресацией грань → ячейка (owner/neighbour).

Соглашения:
- сначала идут внутренние грани (0..n_internal_faces-1), затем граничные,
  сгруппированные по патчам;
- вектор площади грани Sf направлен от owner к neighbour
  (на границе — наружу);
- массивы граничных значений полей имеют длину n_boundary_faces и
  индексируются как ``face - n_internal_faces``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np
import scipy.sparse as sp

from mesh.fv_schemes import FvSchemes
from mesh.object_registry import ObjectRegistry
from mesh.time import Time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Patch:
    """Граничный патч: непрерывный диапазон граничных граней."""

    name: str
    start: int   # индекс первой грани в глобальной нумерации
    size: int

    @property
    def faces(self) -> slice:
        return slice(self.start, self.start + self.size)


class FvMesh(ObjectRegistry):
    """
    Сетка конечных объёмов.

    Параметры
    ---------
    owner : array_like, (n_faces,)
        Ячейка-владелец каждой грани
    neighbour : array_like, (n_internal_faces,)
        Соседняя ячейка внутренних граней
    cell_volumes : array_like, (n_cells,)
        Объёмы ячеек V
    face_area_vectors : array_like, (n_faces, dim)
        Векторы площадей граней Sf
    cell_centres : array_like, (n_cells, dim)
        Центры ячеек C
    face_centres : array_like, (n_faces, dim)
        Центры граней Cf
    patches : iterable of Patch
        Граничные патчи, покрывающие все граничные грани подряд
    time : Time, optional
        Время (по умолчанию шаг 1)
    schemes : FvSchemes, optional
        Таблицы схем (по умолчанию linear / Gauss linear)
    """

    def __init__(self, owner, neighbour, cell_volumes, face_area_vectors,
                 cell_centres, face_centres, patches: Iterable[Patch],
                 time: Optional[Time] = None,
                 schemes: Optional[FvSchemes] = None,
                 name: str = "region0"):
        super().__init__()
        self.name = name
        self.owner = np.asarray(owner, dtype=np.int64)
        self.neighbour = np.asarray(neighbour, dtype=np.int64)
        self.V = np.asarray(cell_volumes, dtype=float)
        self.Sf = np.atleast_2d(np.asarray(face_area_vectors, dtype=float))
        self.C = np.atleast_2d(np.asarray(cell_centres, dtype=float))
        self.Cf = np.atleast_2d(np.asarray(face_centres, dtype=float))
        self.patches: List[Patch] = list(patches)
        self.time = time if time is not None else Time(1.0)
        self.schemes = schemes if schemes is not None else FvSchemes()

        self._validate()

        self._incidence = {}

        self.magSf = np.linalg.norm(self.Sf, axis=1)
        self._make_weights()
        self._make_delta_coeffs()

        logger.info(f"Создана сетка '{self.name}': {self.n_cells} ячеек, "
                    f"{self.n_internal_faces} внутренних и "
                    f"{self.n_boundary_faces} граничных граней, "
                    f"{len(self.patches)} патчей")

    @property
    def n_cells(self) -> int:
        return self.V.shape[0]

    @property
    def n_faces(self) -> int:
        return self.owner.shape[0]

    @property
    def n_internal_faces(self) -> int:
        return self.neighbour.shape[0]

    @property
    def n_boundary_faces(self) -> int:
        return self.n_faces - self.n_internal_faces

    @property
    def dim(self) -> int:
        return self.Sf.shape[1]

    @property
    def internal_owner(self) -> np.ndarray:
        return self.owner[:self.n_internal_faces]

    @property
    def boundary_owner(self) -> np.ndarray:
        return self.owner[self.n_internal_faces:]

    def patch(self, name: str) -> Patch:
        for p in self.patches:
            if p.name == name:
                return p
        raise KeyError(f"Патч '{name}' не найден; патчи: "
                       f"{', '.join(p.name for p in self.patches)}")

    def boundary_slice(self, patch: Patch) -> slice:
        """Срез патча в массиве граничных значений."""
        start = patch.start - self.n_internal_faces
        return slice(start, start + patch.size)

    def _validate(self):
        n_cells = self.V.shape[0]
        n_faces = self.owner.shape[0]
        n_internal = self.neighbour.shape[0]

        if self.V.ndim != 1 or n_cells == 0:
            raise ValueError("Объёмы ячеек должны быть непустым одномерным массивом")
        if np.any(self.V <= 0):
            raise ValueError("Объёмы ячеек должны быть положительными")
        if n_internal > n_faces:
            raise ValueError(f"neighbour ({n_internal}) длиннее owner ({n_faces})")
        if self.Sf.shape[0] != n_faces or self.Cf.shape[0] != n_faces:
            raise ValueError(f"Sf {self.Sf.shape} и Cf {self.Cf.shape} "
                             f"не согласованы с числом граней {n_faces}")
        if self.C.shape != (n_cells, self.Sf.shape[1]):
            raise ValueError(f"Неверный размер центров ячеек: {self.C.shape}")
        for addr, label in ((self.owner, "owner"), (self.neighbour, "neighbour")):
            if addr.size and (addr.min() < 0 or addr.max() >= n_cells):
                raise ValueError(f"Индексы {label} вне диапазона [0, {n_cells})")

        expected = n_internal
        for p in self.patches:
            if p.start != expected or p.size < 0:
                raise ValueError(f"Патч '{p.name}' начинается с {p.start}, "
                                 f"ожидалось {expected}")
            expected += p.size
        if expected != n_faces:
            raise ValueError(f"Патчи покрывают грани до {expected}, всего граней {n_faces}")

    def _make_weights(self):
        """Геометрические веса линейной интерполяции (вес owner)."""
        ni = self.n_internal_faces
        own = self.internal_owner
        nei = self.neighbour
        Sf = self.Sf[:ni]
        ofd = np.abs(np.einsum("ij,ij->i", Sf, self.Cf[:ni] - self.C[own]))
        nfd = np.abs(np.einsum("ij,ij->i", Sf, self.C[nei] - self.Cf[:ni]))
        self.weights = np.ones(self.n_faces)
        self.weights[:ni] = nfd / np.maximum(ofd + nfd, 1e-300)

    def _make_delta_coeffs(self):
        """Обратные расстояния между центрами (на границе — до центра грани)."""
        ni = self.n_internal_faces
        delta = np.empty_like(self.Cf)
        delta[:ni] = self.C[self.neighbour] - self.C[self.internal_owner]
        delta[ni:] = self.Cf[ni:] - self.C[self.boundary_owner]
        self.delta = delta
        self.delta_coeffs = 1.0 / np.maximum(np.linalg.norm(delta, axis=1), 1e-300)

    def incidence(self, neighbour_sign: float = 1.0) -> sp.csr_matrix:
        """
        Разреженная матрица грань → ячейка (n_cells, n_faces).

        Каждая грань входит в строку владельца с коэффициентом 1, внутренняя
        грань — ещё и в строку соседа с коэффициентом ``neighbour_sign``
        (1 — сумма по граням, -1 — поток наружу из ячейки).
        """
        key = float(neighbour_sign)
        if key not in self._incidence:
            ni = self.n_internal_faces
            rows = np.concatenate([self.owner, self.neighbour])
            cols = np.concatenate([np.arange(self.n_faces), np.arange(ni)])
            data = np.concatenate([np.ones(self.n_faces), np.full(ni, key)])
            self._incidence[key] = sp.csr_matrix(
                (data, (rows, cols)), shape=(self.n_cells, self.n_faces)
            )
        return self._incidence[key]

    def info(self) -> str:
        """Сводка по сетке."""
        info = [
            f"Сетка '{self.name}' ({self.dim}D)",
            f"Ячеек: {self.n_cells}",
            f"Внутренних граней: {self.n_internal_faces}",
            f"Граничных граней: {self.n_boundary_faces}",
            f"Патчи: {', '.join(f'{p.name}({p.size})' for p in self.patches)}",
            f"Минимальный объём: {self.V.min():.6e} м³",
            f"Максимальный объём: {self.V.max():.6e} м³",
        ]
        return "\n".join(info)
