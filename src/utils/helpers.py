"""Вспомогательные функции: конфиги YAML, каталоги случая."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

import yaml


# ------------------------- Работа с конфигами/файлами ------------------------- #
def load_config(config_file: Union[str, Path]) -> Dict[str, Any]:
    """
    Загрузить YAML-конфиг (пустой файл даёт пустой словарь).
    """
    with open(config_file, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
    """
    Глубокое объединение нескольких словарей-конфигов.
    Поздние значения перекрывают ранние, вложенные dict'ы мёржатся.
    """
    def _deep_update(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
        out = dict(a)
        for k, v in b.items():
            if k in out and isinstance(out[k], dict) and isinstance(v, dict):
                out[k] = _deep_update(out[k], v)
            else:
                out[k] = v
        return out

    merged: Dict[str, Any] = {}
    for cfg in configs:
        merged = _deep_update(merged, cfg)
    return merged


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Убедиться, что директория существует; создать при необходимости.
    """
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def time_directory(case_dir: Union[str, Path], time_name: str) -> Path:
    """Каталог момента времени ``<case>/<time>`` (создаётся при необходимости)."""
    return ensure_directory(Path(case_dir) / time_name)
