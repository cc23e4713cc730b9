"""Настройка логирования (цвет в консоли опционально, файл — по желанию)."""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

# colorlog не обязателен
try:
    import colorlog  # type: ignore
    _HAS_COLORLOG = True
except ImportError:
    _HAS_COLORLOG = False

CONSOLE_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s %(name)s: %(message)s"


def default_logfile(log_dir: Union[str, Path] = "logs") -> Path:
    """
    Вернуть путь к файлу логов вида logs/run_YYYYmmdd_HHMMSS.log.
    Директория создаётся при необходимости.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return log_dir / f"run_{stamp}.log"


def _console_formatter() -> logging.Formatter:
    if not _HAS_COLORLOG:
        return logging.Formatter(CONSOLE_FORMAT)
    return colorlog.ColoredFormatter(
        "%(log_color)s%(levelname)-8s%(reset)s %(cyan)s%(name)s%(reset)s: %(message)s",
        reset=True,
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
        style="%",
    )


def setup_logging(
    log_level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    logger_name: str = "",  # "" = корневой логгер
    propagate: bool = False,
) -> logging.Logger:
    """
    Настроить логирование.

    log_level  — уровень логов (logging.INFO или имя уровня 'DEBUG' и т.д.)
    log_file   — путь к .log файлу; если None — файл не создаётся;
                 если строка 'auto' — создаётся в ./logs/run_*.log
    logger_name — имя логгера (по умолчанию корневой)
    propagate — прокидывать сообщения вверх по иерархии
    """
    if isinstance(log_level, str):
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Неизвестный уровень логирования: {log_level}")
        log_level = level

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)
    logger.propagate = propagate

    # удалить старые хендлеры, чтобы не дублировать вывод при повторном вызове
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    # ---- консоль ----
    console = logging.StreamHandler()
    console.setFormatter(_console_formatter())
    logger.addHandler(console)

    # ---- файл (опционально) ----
    if log_file is not None:
        path = default_logfile() if str(log_file) == "auto" else Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def setup_logging_from_config(cfg: Dict[str, Any], logger_name: str = "") -> logging.Logger:
    """
    Настроить логирование по секции ``logging`` конфига::

        logging:
          level: DEBUG
          file: auto
    """
    section = cfg.get("logging") or {}
    return setup_logging(
        log_level=section.get("level", logging.INFO),
        log_file=section.get("file"),
        logger_name=logger_name,
    )
