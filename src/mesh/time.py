"""Время расчёта: текущее значение и шаг."""
from __future__ import annotations

from typing import Optional

from dimensions import DIM_TIME, DimensionedScalar


class Time:
    """
    Текущее время и шаг по времени.

    Параметры
    ---------
    delta_t : float
        Шаг по времени (с), > 0
    start_time : float
        Начальное время (с)
    end_time : float, optional
        Конечное время (с); нужно только для ``run()``
    """

    def __init__(self, delta_t: float, start_time: float = 0.0,
                 end_time: Optional[float] = None):
        self._delta_t = 0.0
        self.set_delta_t(delta_t)
        self.value = float(start_time)
        self.end_time = end_time
        self.time_index = 0

    @property
    def name(self) -> str:
        """Имя временного слоя (каталог вывода)."""
        return f"{self.value:g}"

    @property
    def delta_t(self) -> DimensionedScalar:
        return DimensionedScalar("deltaT", DIM_TIME, self._delta_t)

    def delta_t_value(self) -> float:
        return self._delta_t

    def set_delta_t(self, delta_t: float):
        if not delta_t > 0:
            raise ValueError(f"Шаг по времени должен быть положительным: {delta_t}")
        self._delta_t = float(delta_t)

    def increment(self):
        """Перейти на следующий шаг."""
        self.value += self._delta_t
        self.time_index += 1

    def run(self) -> bool:
        """True, пока не достигнуто конечное время."""
        if self.end_time is None:
            raise ValueError("Конечное время не задано")
        return self.value < self.end_time - 0.5 * self._delta_t
