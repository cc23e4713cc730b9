"""
Запись полей в CSV (pandas).

Файл ``<case>/<time>/<field>.csv`` содержит строки внутренних значений
(region = internal) и граничных значений по патчам (region = имя патча).
Скаляр — колонка ``value``, вектор — ``value_0 .. value_{k-1}``.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

import numpy as np
import pandas as pd

from fields import GeometricField
from interpolation import CellCoBlended, CourantBlendedScheme
from utils.helpers import time_directory

logger = logging.getLogger(__name__)


def field_table(field: GeometricField) -> pd.DataFrame:
    """Таблица значений поля: region, index, value[_i]."""
    mesh = field.mesh
    frames = []

    def frame(region: str, values: np.ndarray) -> pd.DataFrame:
        values = values.reshape(values.shape[0], field.n_components)
        if values.shape[1] == 1 and field.is_scalar():
            data = {"value": values[:, 0]}
        else:
            data = {f"value_{i}": values[:, i] for i in range(values.shape[1])}
        df = pd.DataFrame(data)
        df.insert(0, "index", np.arange(values.shape[0]))
        df.insert(0, "region", region)
        return df

    frames.append(frame("internal", field.internal))
    for patch in mesh.patches:
        frames.append(frame(patch.name, field.boundary[mesh.boundary_slice(patch)]))
    return pd.concat(frames, ignore_index=True)


def write_field(field: GeometricField, case_dir: Union[str, Path]) -> Path:
    """
    Записать поле в каталог текущего момента времени.

    Параметры
    ---------
    field : VolField или SurfaceField
        Поле
    case_dir : str или Path
        Каталог случая

    Возвращает
    ----------
    Path
        Путь к записанному файлу
    """
    path = time_directory(case_dir, field.mesh.time.name) / f"{field.name}.csv"
    field_table(field).to_csv(path, index=False)
    logger.info(f"Записано поле {field.name} {field.dimensions} -> {path}")
    return path


def read_field_table(path: Union[str, Path]) -> pd.DataFrame:
    """Прочитать таблицу, записанную ``write_field``."""
    return pd.read_csv(path)


def write_blending_fields(scheme, vf, case_dir: Union[str, Path]) -> List[Path]:
    """
    Записать поля диагностики смешанной схемы: число Куранта
    (ячеек для cellCoBlended, граней для CoBlended) и коэффициент смешения.
    """
    paths = []
    if isinstance(scheme, CellCoBlended):
        paths.append(write_field(scheme.courant_number(), case_dir))
    elif isinstance(scheme, CourantBlendedScheme):
        co = scheme.face_courant_number()
        co.name = "Cof"
        paths.append(write_field(co, case_dir))
    paths.append(write_field(scheme.blending_factor(vf), case_dir))
    return paths
