"""Исключения фреймворка схем интерполяции."""
from __future__ import annotations

from typing import Iterable, Optional


class ConfigurationError(ValueError):
    """
    Ошибка конфигурации: неверные или отсутствующие токены,
    неизвестное имя схемы, недопустимые коэффициенты.
    """

    def __init__(self, message: str, location: Optional[str] = None):
        self.location = location
        if location:
            message = f"{message} ({location})"
        super().__init__(message)


class DimensionalConsistencyError(ValueError):
    """Несовпадение размерностей в арифметике полей или у потока."""


class FieldLookupError(LookupError):
    """Объект с заданным именем не зарегистрирован в реестре сетки."""

    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"Объект '{name}' не найден в реестре; "
            f"доступные: {', '.join(self.available) or '(пусто)'}"
        )
