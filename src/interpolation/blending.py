"""Линейный переход коэффициента смешения по числу Куранта."""
from __future__ import annotations

import numpy as np
from numba import njit


@njit(cache=True)
def _ramp_kernel(co, co1, co2, out):
    inv_span = 1.0 / (co2 - co1)
    for i in range(co.shape[0]):
        x = (co[i] - co1) * inv_span
        if x < 0.0:
            x = 0.0
        elif x > 1.0:
            x = 1.0
        out[i] = 1.0 - x


def blending_ramp(co, co1: float, co2: float) -> np.ndarray:
    """
    Коэффициент смешения по числу Куранта на грани:
        bf = 1 - clip((Co - Co1)/(Co2 - Co1), 0, 1).

    bf = 1 при Co ≤ Co1 (первая схема), bf = 0 при Co ≥ Co2 (вторая).

    Параметры
    ---------
    co : array_like
        Числа Куранта (любой формы)
    co1, co2 : float
        Границы перехода, co1 < co2

    Возвращает
    ----------
    np.ndarray
        Коэффициенты в [0, 1] той же формы
    """
    co = np.ascontiguousarray(co, dtype=np.float64)
    out = np.empty_like(co)
    _ramp_kernel(co.reshape(-1), float(co1), float(co2), out.reshape(-1))
    return out
