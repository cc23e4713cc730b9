# src/utils/__init__.py
"""Вспомогательные модули: конфигурация, логирование, ошибки, вывод полей."""
