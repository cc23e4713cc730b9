"""
Таблица единиц измерения и разбор записи размерностей.

Размерность в конфигурации задаётся в квадратных скобках либо
показателями степени ``[0 3 -1 0 0 0 0]``, либо через единицы
``[kg/m^3]``, ``[mm]``, ``[m^3/s]``. Во втором случае возвращается также
множитель перевода в СИ.
"""
from __future__ import annotations

import re
from typing import Dict, Tuple

from dimensions.dimension_set import (
    DIMLESS,
    DIM_CURRENT,
    DIM_FORCE,
    DIM_LENGTH,
    DIM_LUMINOUS_INTENSITY,
    DIM_MASS,
    DIM_MOLES,
    DIM_PRESSURE,
    DIM_TEMPERATURE,
    DIM_TIME,
    DIM_VOLUME,
    DimensionSet,
)
from dimensions.dimensioned import DimensionedScalar
from utils.errors import ConfigurationError

_UNITS: Dict[str, DimensionedScalar] = {}

_TERM_RE = re.compile(r"([A-Za-z%]+)(?:\^([+-]?\d+(?:\.\d+)?))?|([*/])|(\d+(?:\.\d+)?)")


def add_unit(unit: DimensionedScalar):
    """Добавить единицу в таблицу (значение — множитель перевода в СИ)."""
    _UNITS[unit.name] = unit


def unit_set() -> Dict[str, DimensionedScalar]:
    """Копия таблицы единиц."""
    return dict(_UNITS)


for _unit in (
    DimensionedScalar("kg", DIM_MASS, 1.0),
    DimensionedScalar("g", DIM_MASS, 1e-3),
    DimensionedScalar("m", DIM_LENGTH, 1.0),
    DimensionedScalar("cm", DIM_LENGTH, 1e-2),
    DimensionedScalar("mm", DIM_LENGTH, 1e-3),
    DimensionedScalar("s", DIM_TIME, 1.0),
    DimensionedScalar("ms", DIM_TIME, 1e-3),
    DimensionedScalar("min", DIM_TIME, 60.0),
    DimensionedScalar("h", DIM_TIME, 3600.0),
    DimensionedScalar("K", DIM_TEMPERATURE, 1.0),
    DimensionedScalar("mol", DIM_MOLES, 1.0),
    DimensionedScalar("A", DIM_CURRENT, 1.0),
    DimensionedScalar("cd", DIM_LUMINOUS_INTENSITY, 1.0),
    DimensionedScalar("N", DIM_FORCE, 1.0),
    DimensionedScalar("Pa", DIM_PRESSURE, 1.0),
    DimensionedScalar("J", DIM_FORCE * DIM_LENGTH, 1.0),
    DimensionedScalar("W", DIM_FORCE * DIM_LENGTH / DIM_TIME, 1.0),
    DimensionedScalar("l", DIM_VOLUME, 1e-3),
    DimensionedScalar("%", DIMLESS, 1e-2),
):
    add_unit(_unit)


def _parse_unit_expression(text: str) -> Tuple[DimensionSet, float]:
    dims = DIMLESS
    factor = 1.0
    divide = False
    pos = 0
    for match in _TERM_RE.finditer(text):
        if text[pos:match.start()].strip():
            raise ConfigurationError(f"Неверная запись единиц: '[{text}]'")
        pos = match.end()
        name, power, op, number = match.groups()
        if op:
            divide = op == "/"
            continue
        if number:
            # "1/s"
            term_dims, term_factor = DIMLESS, float(number)
        else:
            if name not in _UNITS:
                raise ConfigurationError(
                    f"Неизвестная единица '{name}'; доступные: {', '.join(sorted(_UNITS))}"
                )
            p = float(power) if power else 1.0
            unit = _UNITS[name]
            term_dims, term_factor = unit.dimensions ** p, unit.value ** p
        if divide:
            dims, factor = dims / term_dims, factor / term_factor
        else:
            dims, factor = dims * term_dims, factor * term_factor
        divide = False
    if text[pos:].strip():
        raise ConfigurationError(f"Неверная запись единиц: '[{text}]'")
    return dims, factor


def parse_dimensions(text: str) -> Tuple[DimensionSet, float]:
    """
    Разобрать запись размерности.

    Параметры
    ---------
    text : str
        ``"[0 3 -1 0 0 0 0]"``, ``"[kg/m^3]"`` и т.п.

    Возвращает
    ----------
    tuple
        (DimensionSet, множитель перевода в СИ)
    """
    body = text.strip()
    if not (body.startswith("[") and body.endswith("]")):
        raise ConfigurationError(f"Размерность должна быть в скобках []: '{text}'")
    body = body[1:-1].strip()
    if not body:
        return DIMLESS, 1.0

    parts = body.split()
    try:
        exponents = [float(p) for p in parts]
    except ValueError:
        return _parse_unit_expression(body)

    try:
        return DimensionSet.from_exponents(exponents), 1.0
    except ValueError as err:
        raise ConfigurationError(str(err)) from err


def parse_dimensioned(name: str, entry) -> DimensionedScalar:
    """
    Прочитать размерную величину из конфигурации.

    Запись ``"1000 [kg/m^3]"`` или ``"1e-3 [0 3 -1 0 0 0 0]"``; значение
    переводится в СИ. Число без скобок считается безразмерным.

    Параметры
    ---------
    name : str
        Имя величины
    entry : str или float
        Запись из конфигурации

    Возвращает
    ----------
    DimensionedScalar
    """
    if isinstance(entry, (int, float)) and not isinstance(entry, bool):
        return DimensionedScalar(name, DIMLESS, float(entry))

    text = str(entry).strip()
    value_text, bracket, dims_text = text.partition("[")
    try:
        value = float(value_text)
    except ValueError as err:
        raise ConfigurationError(f"{name}: неверное значение в записи '{text}'") from err
    if not bracket:
        return DimensionedScalar(name, DIMLESS, value)
    dims, factor = parse_dimensions("[" + dims_text)
    return DimensionedScalar(name, dims, value * factor)
