"""Centralized unit tables.

Each unit-pair category stores, for every unit, how many base units one unit
is worth, so any two members convert as ``value * factor(from) / factor(to)``.
Temperature is affine and keeps a separate table of Celsius scales.

The same tables drive conversion, the ``--help`` text and the ``units``
listing, so the supported units can never drift between them.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

import pandas as pd

from .errors import UnknownCategoryError, UnknownUnitError

FEET_IN_METER: float = 3.28084
INCHES_IN_METER: float = 39.3701
METERS_IN_KILOMETER: float = 1000.0
LB_IN_KG: float = 2.20462
OZ_IN_KG: float = 35.274
BPS_IN_MBPS: float = 1_000_000.0
SQFT_IN_SQM: float = 10.7639
SQM_IN_ACRE: float = 4046.85642
SQM_IN_HECTARE: float = 10000.0
ML_IN_LITER: float = 1000.0
LITERS_IN_CUBIC_METER: float = 1000.0
CUBIC_INCHES_IN_LITER: float = 61.0237
LITERS_IN_GALLON: float = 3.78541
KPH_IN_MPS: float = 3.6
MPS_IN_MPH: float = 0.44704
MPS_IN_KNOT: float = 0.514444
PA_IN_BAR: float = 100000.0
PA_IN_ATM: float = 101325.0
PA_IN_PSI: float = 6894.76
KELVIN_OFFSET: float = 273.15


def normalize_unit_name(unit: object) -> str:
    """Return the canonical (stripped, lowercase) spelling of a unit name."""
    return str(unit).strip().lower()


@dataclass(frozen=True)
class UnitTable:
    """Multiplicative units of one category.

    Attributes:
        category: Category tag, for example ``"length"``.
        base: Unit every factor is expressed in.
        factors: Read-only mapping of unit name to base units per unit.
    """

    category: str
    base: str
    factors: Mapping[str, float]

    @property
    def units(self) -> Tuple[str, ...]:
        return tuple(self.factors)

    def resolve(self, unit: object) -> str:
        name = normalize_unit_name(unit)
        if name not in self.factors:
            raise UnknownUnitError(self.category, unit, self.units)
        return name

    def factor(self, unit: object) -> float:
        return self.factors[self.resolve(unit)]


@dataclass(frozen=True)
class TemperatureScale:
    """Affine map of a temperature scale onto Celsius.

    ``celsius = (value - offset) * numerator / denominator`` and, in the other
    direction, ``value = celsius * denominator / numerator + offset``. The
    ratio is held as two integer-valued floats so Fahrenheit evaluates exactly
    as ``C * 9 / 5 + 32``.
    """

    symbol: str
    offset: float
    numerator: float = 1.0
    denominator: float = 1.0

    @property
    def scale(self) -> float:
        return self.numerator / self.denominator


def _table(category: str, base: str, factors: dict) -> UnitTable:
    return UnitTable(category=category, base=base, factors=MappingProxyType(factors))


UNIT_TABLES: Mapping[str, UnitTable] = MappingProxyType(
    {
        "length": _table(
            "length",
            "meters",
            {
                "meters": 1.0,
                "feet": 1.0 / FEET_IN_METER,
                "inches": 1.0 / INCHES_IN_METER,
                "kilometers": METERS_IN_KILOMETER,
            },
        ),
        "mass": _table(
            "mass",
            "kg",
            {
                "kg": 1.0,
                "lb": 1.0 / LB_IN_KG,
                "oz": 1.0 / OZ_IN_KG,
            },
        ),
        "datarate": _table(
            "datarate",
            "bps",
            {
                "bps": 1.0,
                "mbps": BPS_IN_MBPS,
            },
        ),
        "area": _table(
            "area",
            "sqm",
            {
                "sqm": 1.0,
                "sqft": 1.0 / SQFT_IN_SQM,
                "acres": SQM_IN_ACRE,
                "hectares": SQM_IN_HECTARE,
            },
        ),
        "volume": _table(
            "volume",
            "liters",
            {
                "liters": 1.0,
                "milliliters": 1.0 / ML_IN_LITER,
                "cubic_meters": LITERS_IN_CUBIC_METER,
                "cubic_inches": 1.0 / CUBIC_INCHES_IN_LITER,
                "gallons": LITERS_IN_GALLON,
            },
        ),
        "speed": _table(
            "speed",
            "mps",
            {
                "mps": 1.0,
                "kph": 1.0 / KPH_IN_MPS,
                "mph": MPS_IN_MPH,
                "knots": MPS_IN_KNOT,
            },
        ),
        "pressure": _table(
            "pressure",
            "pa",
            {
                "pa": 1.0,
                "bar": PA_IN_BAR,
                "atm": PA_IN_ATM,
                "psi": PA_IN_PSI,
            },
        ),
    }
)

TEMPERATURE_SCALES: Mapping[str, TemperatureScale] = MappingProxyType(
    {
        "c": TemperatureScale(symbol="C", offset=0.0),
        "f": TemperatureScale(symbol="F", offset=32.0, numerator=5.0, denominator=9.0),
        "k": TemperatureScale(symbol="K", offset=KELVIN_OFFSET),
    }
)

UNIT_PAIR_CATEGORIES: Tuple[str, ...] = (
    "length",
    "temperature",
    "mass",
    "datarate",
    "area",
    "volume",
    "speed",
    "pressure",
)
CATEGORIES: Tuple[str, ...] = ("bytes", "time") + UNIT_PAIR_CATEGORIES


def supported_units(category: str) -> Tuple[str, ...]:
    """Return the canonical unit names accepted for a unit-pair category.

    Raises:
        UnknownCategoryError: If ``category`` has no unit table.
    """
    name = normalize_unit_name(category)
    if name == "temperature":
        return tuple(TEMPERATURE_SCALES)
    if name not in UNIT_TABLES:
        raise UnknownCategoryError(category, UNIT_PAIR_CATEGORIES)
    return UNIT_TABLES[name].units


def temperature_scale(unit: object) -> TemperatureScale:
    name = normalize_unit_name(unit)
    if name not in TEMPERATURE_SCALES:
        raise UnknownUnitError("temperature", unit, tuple(TEMPERATURE_SCALES))
    return TEMPERATURE_SCALES[name]


def resolve_unit(category: str, unit: object) -> str:
    """Return the canonical name of ``unit`` within ``category``.

    Raises:
        UnknownUnitError: If the unit does not belong to the category.
    """
    if normalize_unit_name(category) == "temperature":
        temperature_scale(unit)
        return normalize_unit_name(unit)
    supported_units(category)
    return UNIT_TABLES[normalize_unit_name(category)].resolve(unit)


def units_table(category: Optional[str] = None) -> pd.DataFrame:
    """Tabulate supported units and their mapping onto each base unit.

    Args:
        category (str, optional): Restrict the table to one unit-pair category.
            All unit-pair categories are listed when omitted.

    Returns:
        pandas.DataFrame: One row per unit with columns ``Category``, ``Unit``,
        ``Base Unit``, ``Scale`` and ``Offset`` such that
        ``base = (value - Offset) * Scale``. Multiplicative units have a zero
        offset; temperature rows map onto Celsius.

    Raises:
        UnknownCategoryError: If ``category`` is not a unit-pair category.
    """
    if category is None:
        categories = UNIT_PAIR_CATEGORIES
    else:
        supported_units(category)
        categories = (normalize_unit_name(category),)

    rows = []
    for name in categories:
        if name == "temperature":
            for unit, scale in TEMPERATURE_SCALES.items():
                rows.append((name, unit, "c", scale.scale, scale.offset))
            continue
        table = UNIT_TABLES[name]
        for unit, factor in table.factors.items():
            rows.append((name, unit, table.base, factor, 0.0))

    return pd.DataFrame(
        rows, columns=["Category", "Unit", "Base Unit", "Scale", "Offset"]
    )
