"""Реестр именованных объектов сетки (поля, потоки)."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Type

from utils.errors import FieldLookupError


class ObjectRegistry:
    """Отображение имя → объект."""

    def __init__(self):
        self._objects: Dict[str, Any] = {}

    def register_object(self, obj: Any, name: Optional[str] = None) -> Any:
        """Зарегистрировать объект под его именем (или под ``name``)."""
        key = name if name is not None else obj.name
        self._objects[key] = obj
        return obj

    def check_out(self, name: str):
        self._objects.pop(name, None)

    def found_object(self, name: str, kind: Optional[Type] = None) -> bool:
        obj = self._objects.get(name)
        if obj is None:
            return False
        return kind is None or isinstance(obj, kind)

    def lookup_object(self, name: str, kind: Optional[Type] = None) -> Any:
        """
        Найти объект по имени.

        Параметры
        ---------
        name : str
            Имя объекта
        kind : type, optional
            Ожидаемый тип объекта

        Возвращает
        ----------
        Any
            Зарегистрированный объект
        """
        if name not in self._objects:
            raise FieldLookupError(name, self._objects)
        obj = self._objects[name]
        if kind is not None and not isinstance(obj, kind):
            raise FieldLookupError(
                name,
                [n for n, o in self._objects.items() if isinstance(o, kind)],
            )
        return obj

    def names(self) -> List[str]:
        return sorted(self._objects)
