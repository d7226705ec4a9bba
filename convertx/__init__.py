"""
A multi-purpose unit-conversion package and command-line tool.

Converts values between units of length, temperature, mass, data rate, area,
volume, speed and pressure, and renders byte counts and durations in
human-readable form.

Modules:
    - units: Immutable unit tables and unit-name resolution.
    - conversions: Linear and affine converters plus category dispatch.
    - humanize: Byte-count and duration conversions.
    - output: Result-line formatting.
    - cli: Argument parsing and the ``convertx`` entry point.
"""

__version__ = "1.0.0"

from .conversions import (
    CONVERTERS,
    convert,
    convert_area,
    convert_datarate,
    convert_length,
    convert_mass,
    convert_pressure,
    convert_speed,
    convert_temperature,
    convert_volume,
    parse_value,
)
from .errors import (
    ConversionError,
    MissingArgumentError,
    ParseError,
    UnknownCategoryError,
    UnknownUnitError,
)
from .humanize import (
    bytes_to_human_readable,
    bytes_to_megabytes,
    convert_bytes,
    convert_time,
    convert_time_human_readable,
)
from .units import CATEGORIES, UNIT_PAIR_CATEGORIES, supported_units, units_table

__all__ = [
    # Conversions
    "CONVERTERS",
    "convert",
    "convert_area",
    "convert_datarate",
    "convert_length",
    "convert_mass",
    "convert_pressure",
    "convert_speed",
    "convert_temperature",
    "convert_volume",
    "parse_value",
    # Bytes and time
    "bytes_to_human_readable",
    "bytes_to_megabytes",
    "convert_bytes",
    "convert_time",
    "convert_time_human_readable",
    # Units
    "CATEGORIES",
    "UNIT_PAIR_CATEGORIES",
    "supported_units",
    "units_table",
    # Errors
    "ConversionError",
    "MissingArgumentError",
    "ParseError",
    "UnknownCategoryError",
    "UnknownUnitError",
]
