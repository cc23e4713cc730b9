"""
Реестр схем интерполяции на грани: имя → класс схемы.

Схемы регистрируются декоратором::

    @register_scheme("linear")
    class Linear(SurfaceInterpolationScheme):
        ...

и создаются по спецификации из потока токенов::

    scheme = scheme_registry.resolve(mesh, TokenStream("upwind phi"))
    scheme = scheme_registry.resolve(mesh, TokenStream("linearUpwind grad(T)"),
                                     face_flux=phi)
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Type, Union

from utils.errors import ConfigurationError
from utils.token_stream import TokenStream

logger = logging.getLogger(__name__)


class SchemeRegistry:
    """Таблица конструкторов схем, выбираемых по имени во время выполнения."""

    def __init__(self, kind: str):
        self.kind = kind
        self._constructors: Dict[str, Type] = {}

    def register(self, name: str) -> Callable[[Type], Type]:
        """Декоратор регистрации класса схемы под именем ``name``."""
        def decorator(cls: Type) -> Type:
            if name in self._constructors and self._constructors[name] is not cls:
                raise ValueError(f"Схема '{name}' уже зарегистрирована в {self.kind}")
            cls.type_name = name
            self._constructors[name] = cls
            return cls
        return decorator

    def names(self) -> List[str]:
        return sorted(self._constructors)

    def __contains__(self, name: str) -> bool:
        return name in self._constructors

    def resolve(self, mesh, stream: Union[TokenStream, str], face_flux=None):
        """
        Создать схему по спецификации.

        Имя типа читается из потока, остальные токены передаются
        конструктору схемы (вложенные схемы читают свои токены сами).

        Параметры
        ---------
        mesh : FvMesh
            Сетка
        stream : TokenStream или str
            Спецификация ``<имя> <параметры...>``
        face_flux : SurfaceField, optional
            Поток через грани; если задан, схема строится в форме
            «сетка + поток» и не читает имя потока из спецификации

        Возвращает
        ----------
        SurfaceInterpolationScheme
            Новая схема
        """
        if isinstance(stream, str):
            stream = TokenStream(stream)
        if stream.eof():
            raise ConfigurationError(
                f"Пустая спецификация: ожидалось имя схемы {self.kind}",
                stream.location(),
            )

        location = stream.location()
        name = stream.read_word()
        cls = self._constructors.get(name)
        if cls is None:
            raise ConfigurationError(
                f"Неизвестная схема {self.kind} '{name}'; "
                f"допустимые: {', '.join(self.names())}",
                location,
            )

        logger.debug(f"Выбрана схема {self.kind} '{name}' "
                     f"(параметры: '{stream.remaining()}')")
        if face_flux is None:
            return cls.from_stream(mesh, stream)
        return cls.from_flux_stream(mesh, face_flux, stream)


scheme_registry = SchemeRegistry("surfaceInterpolationScheme")
register_scheme = scheme_registry.register


def resolve_scheme(mesh, stream: Union[TokenStream, str], face_flux=None,
                   registry: Optional[SchemeRegistry] = None):
    """Создать схему и проверить, что спецификация прочитана полностью."""
    if isinstance(stream, str):
        stream = TokenStream(stream)
    scheme = (registry or scheme_registry).resolve(mesh, stream, face_flux=face_flux)
    stream.check_eof()
    return scheme
