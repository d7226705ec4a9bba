"""Convert values between units of the same category.

Linear categories scale through their base unit; temperature routes every
pair through Celsius. Values may be scalars or array-likes: scalar input
returns a ``float`` and array input returns a ``numpy.ndarray``.

Out-of-range inputs (negative lengths, temperatures below absolute zero)
are converted mechanically and never rejected.
"""

from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Callable, Mapping, Optional

import numpy as np

from .errors import MissingArgumentError, ParseError, UnknownCategoryError
from .units import (
    UNIT_PAIR_CATEGORIES,
    UNIT_TABLES,
    normalize_unit_name,
    temperature_scale,
)

logger = logging.getLogger(__name__)


def parse_value(text: object) -> float:
    """Parse a command-line numeric argument.

    Args:
        text: Raw argument, for example ``"2"`` or ``"-40.5"``.

    Returns:
        float: The parsed value.

    Raises:
        ParseError: If ``text`` is not a number or is NaN/infinite.
    """
    try:
        value = float(text)
    except (TypeError, ValueError):
        raise ParseError(text) from None
    if not math.isfinite(value):
        raise ParseError(text)
    return value


def _as_result(values):
    if np.ndim(values) == 0:
        return float(values)
    return values


def _convert_linear(category: str, value, from_unit, to_unit):
    table = UNIT_TABLES[category]
    source = table.resolve(from_unit)
    target = table.resolve(to_unit)
    values = np.asarray(value, dtype=float)
    if source == target:
        return _as_result(values)
    return _as_result(values * table.factors[source] / table.factors[target])


def convert_length(value, from_unit, to_unit):
    """Convert between meters, feet, inches and kilometers."""
    return _convert_linear("length", value, from_unit, to_unit)


def convert_mass(value, from_unit, to_unit):
    """Convert between kg, lb and oz."""
    return _convert_linear("mass", value, from_unit, to_unit)


def convert_datarate(value, from_unit, to_unit):
    """Convert between bps and mbps (decimal megabits)."""
    return _convert_linear("datarate", value, from_unit, to_unit)


def convert_area(value, from_unit, to_unit):
    return _convert_linear("area", value, from_unit, to_unit)


def convert_volume(value, from_unit, to_unit):
    return _convert_linear("volume", value, from_unit, to_unit)


def convert_speed(value, from_unit, to_unit):
    return _convert_linear("speed", value, from_unit, to_unit)


def convert_pressure(value, from_unit, to_unit):
    return _convert_linear("pressure", value, from_unit, to_unit)


def convert_temperature(value, from_unit, to_unit):
    """Convert between Celsius (``c``), Fahrenheit (``f``) and Kelvin (``k``).

    Every pair goes through Celsius:

    - ``C = (F - 32) * 5 / 9`` and ``F = C * 9 / 5 + 32``
    - ``C = K - 273.15`` and ``K = C + 273.15``

    Args:
        value: Temperature or array of temperatures in ``from_unit``.
        from_unit (str): Source scale, case-insensitive.
        to_unit (str): Target scale, case-insensitive.

    Returns:
        float | numpy.ndarray: Temperature in ``to_unit``.

    Raises:
        UnknownUnitError: If either scale is not ``c``, ``f`` or ``k``.
    """
    source = temperature_scale(from_unit)
    target = temperature_scale(to_unit)
    values = np.asarray(value, dtype=float)
    if source is target:
        return _as_result(values)
    celsius = (values - source.offset) * source.numerator / source.denominator
    return _as_result(celsius * target.denominator / target.numerator + target.offset)


CONVERTERS: Mapping[str, Callable] = MappingProxyType(
    {
        "length": convert_length,
        "temperature": convert_temperature,
        "mass": convert_mass,
        "datarate": convert_datarate,
        "area": convert_area,
        "volume": convert_volume,
        "speed": convert_speed,
        "pressure": convert_pressure,
    }
)


def convert(
    category: str,
    value,
    from_unit: Optional[str] = None,
    to_unit: Optional[str] = None,
):
    """Convert ``value`` between two units of a unit-pair category.

    Args:
        category (str): One of ``UNIT_PAIR_CATEGORIES``.
        value: Scalar or array-like input value.
        from_unit (str, optional): Source unit name.
        to_unit (str, optional): Target unit name.

    Returns:
        float | numpy.ndarray: Converted value.

    Raises:
        UnknownCategoryError: If ``category`` has no converter.
        MissingArgumentError: If either unit is missing.
        UnknownUnitError: If either unit is not part of the category.
    """
    name = normalize_unit_name(category)
    if name not in CONVERTERS:
        raise UnknownCategoryError(category, UNIT_PAIR_CATEGORIES)

    missing = [
        flag
        for flag, unit in (("--from", from_unit), ("--to", to_unit))
        if unit is None or not str(unit).strip()
    ]
    if missing:
        raise MissingArgumentError(name, ", ".join(missing))

    logger.debug("Converting %s %s from %s to %s", name, value, from_unit, to_unit)
    return CONVERTERS[name](value, from_unit, to_unit)
