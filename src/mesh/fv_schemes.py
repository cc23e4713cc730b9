"""
Словарь схем дискретизации (аналог fvSchemes).

Пример YAML::

    interpolationSchemes:
      default: linear
      interpolate(Co): localMax
    divSchemes:
      default: none
      div(phi,T): Gauss cellCoBlended 1 LUST grad(T) 10 upwind
    gradSchemes:
      default: Gauss linear
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from utils.errors import ConfigurationError
from utils.helpers import load_config, merge_configs
from utils.token_stream import TokenStream

logger = logging.getLogger(__name__)

DEFAULT_SCHEMES: Dict[str, Dict[str, str]] = {
    "interpolationSchemes": {"default": "linear"},
    "divSchemes": {"default": "none"},
    "gradSchemes": {"default": "Gauss linear"},
}


class FvSchemes:
    """
    Таблицы схем: ``interpolationSchemes``, ``divSchemes``, ``gradSchemes``.

    Ключ ``default`` задаёт схему для имён, отсутствующих в таблице;
    значение ``none`` означает отсутствие схемы по умолчанию.
    """

    TABLES = ("interpolationSchemes", "divSchemes", "gradSchemes")

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 source: str = "fvSchemes"):
        config = merge_configs(DEFAULT_SCHEMES, config or {})
        unknown = set(config) - set(self.TABLES)
        if unknown:
            raise ConfigurationError(
                f"Неизвестные таблицы схем: {', '.join(sorted(unknown))}", source
            )
        self.source = source
        self._tables = {
            table: {str(k): str(v) for k, v in (config.get(table) or {}).items()}
            for table in self.TABLES
        }

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "FvSchemes":
        """Загрузить схемы из YAML-файла."""
        cfg = load_config(path) or {}
        return cls(cfg.get("fvSchemes", cfg), source=str(path))

    def table(self, table: str) -> Dict[str, str]:
        return dict(self._tables[table])

    def set_scheme(self, table: str, name: str, spec: str):
        """Задать/переопределить запись таблицы."""
        if table not in self._tables:
            raise ConfigurationError(f"Неизвестная таблица схем '{table}'", self.source)
        self._tables[table][name] = spec

    def _lookup(self, table: str, name: str) -> TokenStream:
        entries = self._tables[table]
        if name in entries:
            spec = entries[name]
        else:
            spec = entries.get("default", "none")
            if spec.strip() == "none":
                raise ConfigurationError(
                    f"Схема '{name}' не задана в {table}, и значения по умолчанию нет",
                    self.source,
                )
        logger.debug(f"{table}[{name}] -> {spec}")
        return TokenStream(spec, source=f"{self.source}/{table}/{name}")

    def interpolation_scheme(self, name: str) -> TokenStream:
        return self._lookup("interpolationSchemes", name)

    def div_scheme(self, name: str) -> TokenStream:
        return self._lookup("divSchemes", name)

    def grad_scheme(self, name: str) -> TokenStream:
        return self._lookup("gradSchemes", name)
