"""
Генераторы простых равномерных сеток в форме FvMesh.

- ``line_mesh``: одномерная цепочка ячеек (патчи inlet/outlet);
- ``box_mesh``: двумерная декартова сетка (патчи left/right/bottom/top),
  ячейка (i, j) имеет номер ``i + nx*j``.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional
import logging

from mesh.fv_mesh import FvMesh, Patch
from mesh.fv_schemes import FvSchemes
from mesh.time import Time

logger = logging.getLogger(__name__)


@dataclass
class LineGeometry:
    """Параметры одномерной сетки."""

    n_cells: int         # Количество ячеек
    length: float        # Длина (м)
    area: float = 1.0    # Площадь поперечного сечения (м²)

    def __post_init__(self):
        """Валидация параметров после инициализации."""
        if self.n_cells <= 0:
            raise ValueError("Количество ячеек должно быть положительным")
        if self.length <= 0 or self.area <= 0:
            raise ValueError("Длина и площадь сечения должны быть положительными")


@dataclass
class BoxGeometry:
    """Параметры двумерной декартовой сетки."""

    nx: int              # Количество ячеек по x
    ny: int              # Количество ячеек по y
    lx: float            # Размер области по x (м)
    ly: float            # Размер области по y (м)
    depth: float = 1.0   # Толщина слоя (м)

    def __post_init__(self):
        """Валидация параметров после инициализации."""
        if self.nx <= 0 or self.ny <= 0:
            raise ValueError("Количество ячеек должно быть положительным")
        if self.lx <= 0 or self.ly <= 0 or self.depth <= 0:
            raise ValueError("Размеры области должны быть положительными")


def line_mesh(geometry: LineGeometry, time: Optional[Time] = None,
              schemes: Optional[FvSchemes] = None) -> FvMesh:
    """
    Построить одномерную сетку.

    Параметры
    ---------
    geometry : LineGeometry
        Геометрия
    time : Time, optional
        Время
    schemes : FvSchemes, optional
        Таблицы схем

    Возвращает
    ----------
    FvMesh
        Сетка с патчами 'inlet' (x=0) и 'outlet' (x=length)
    """
    n = geometry.n_cells
    dx = geometry.length / n
    A = geometry.area

    x_faces = np.linspace(0.0, geometry.length, n + 1)
    x_centers = 0.5 * (x_faces[:-1] + x_faces[1:])

    # внутренние грани, затем inlet и outlet
    owner = np.concatenate([np.arange(n - 1), [0, n - 1]])
    neighbour = np.arange(1, n)
    Sf = np.concatenate([np.full(n - 1, A), [-A, A]])[:, None]
    Cf = np.concatenate([x_faces[1:-1], [0.0, geometry.length]])[:, None]

    patches = [Patch("inlet", n - 1, 1), Patch("outlet", n, 1)]

    logger.debug(f"Одномерная сетка: n={n}, dx={dx:.4g} м, A={A:.4g} м²")
    return FvMesh(owner, neighbour, np.full(n, dx * A), Sf,
                  x_centers[:, None], Cf, patches, time=time, schemes=schemes,
                  name="line")


def box_mesh(geometry: BoxGeometry, time: Optional[Time] = None,
             schemes: Optional[FvSchemes] = None) -> FvMesh:
    """
    Построить двумерную декартову сетку.

    Возвращает
    ----------
    FvMesh
        Сетка с патчами 'left', 'right', 'bottom', 'top'
    """
    nx, ny = geometry.nx, geometry.ny
    dx = geometry.lx / nx
    dy = geometry.ly / ny
    ax = dy * geometry.depth   # площадь грани с нормалью x
    ay = dx * geometry.depth   # площадь грани с нормалью y

    def cell(i, j):
        return i + nx * j

    # Индексы ячеек (nx, ny)
    I, J = np.meshgrid(np.arange(nx), np.arange(ny), indexing='ij')

    owners, neighbours, areas, centres = [], [], [], []

    # Внутренние грани с нормалью x
    i, j = I[:-1, :].ravel(order='F'), J[:-1, :].ravel(order='F')
    owners.append(cell(i, j))
    neighbours.append(cell(i + 1, j))
    areas.append(np.column_stack([np.full(i.size, ax), np.zeros(i.size)]))
    centres.append(np.column_stack([(i + 1) * dx, (j + 0.5) * dy]))

    # Внутренние грани с нормалью y
    i, j = I[:, :-1].ravel(order='F'), J[:, :-1].ravel(order='F')
    owners.append(cell(i, j))
    neighbours.append(cell(i, j + 1))
    areas.append(np.column_stack([np.zeros(i.size), np.full(i.size, ay)]))
    centres.append(np.column_stack([(i + 0.5) * dx, (j + 1) * dy]))

    n_internal = sum(o.size for o in owners)

    # Граничные патчи
    jj = np.arange(ny)
    ii = np.arange(nx)
    boundary = [
        ("left", cell(0, jj), (-ax, 0.0), np.column_stack([np.zeros(ny), (jj + 0.5) * dy])),
        ("right", cell(nx - 1, jj), (ax, 0.0),
         np.column_stack([np.full(ny, geometry.lx), (jj + 0.5) * dy])),
        ("bottom", cell(ii, 0), (0.0, -ay), np.column_stack([(ii + 0.5) * dx, np.zeros(nx)])),
        ("top", cell(ii, ny - 1), (0.0, ay),
         np.column_stack([(ii + 0.5) * dx, np.full(nx, geometry.ly)])),
    ]

    patches = []
    start = n_internal
    for name, own, normal, cf in boundary:
        owners.append(own)
        areas.append(np.tile(normal, (own.size, 1)))
        centres.append(cf)
        patches.append(Patch(name, start, own.size))
        start += own.size

    C = np.column_stack([(I.ravel(order='F') + 0.5) * dx, (J.ravel(order='F') + 0.5) * dy])

    logger.debug(f"Декартова сетка {nx}x{ny}: dx={dx:.4g} м, dy={dy:.4g} м")
    return FvMesh(np.concatenate(owners), np.concatenate(neighbours),
                  np.full(nx * ny, dx * dy * geometry.depth),
                  np.vstack(areas), C, np.vstack(centres), patches,
                  time=time, schemes=schemes, name="box")
