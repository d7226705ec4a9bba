"""Render conversion results as single output lines.

All formatting is fixed-point with a dot decimal separator; the locale is
never consulted.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .units import temperature_scale


@dataclass(frozen=True)
class OutputFormat:
    """Decimal places used when printing results.

    Attributes:
        linear_decimals: Places for unit-pair categories other than temperature.
        temperature_decimals: Places for temperatures.
        bytes_decimals: Places for megabytes and human-readable sizes.
    """

    linear_decimals: int = 4
    temperature_decimals: int = 2
    bytes_decimals: int = 2

    def with_precision(self, decimals: int) -> "OutputFormat":
        if decimals < 0:
            raise ValueError(f"decimals must be >= 0, got {decimals!r}")
        return replace(
            self,
            linear_decimals=decimals,
            temperature_decimals=decimals,
            bytes_decimals=decimals,
        )


DEFAULT_FORMAT = OutputFormat()


def format_count(value: float) -> str:
    """Format a byte or second count, dropping ``.0`` for whole numbers."""
    value = float(value)
    if value.is_integer():
        return f"{value:.0f}"
    return f"{value:.6f}".rstrip("0").rstrip(".")


def format_conversion(
    value: float,
    from_unit: str,
    result: float,
    to_unit: str,
    fmt: OutputFormat = DEFAULT_FORMAT,
) -> str:
    """Return e.g. ``"1.0000 kilometers = 1000.0000 meters"``."""
    d = fmt.linear_decimals
    return f"{value:.{d}f} {from_unit} = {result:.{d}f} {to_unit}"


def format_temperature(
    value: float,
    from_unit: str,
    result: float,
    to_unit: str,
    fmt: OutputFormat = DEFAULT_FORMAT,
) -> str:
    """Return e.g. ``"32.00°F = 0.00°C"``."""
    d = fmt.temperature_decimals
    source = temperature_scale(from_unit).symbol
    target = temperature_scale(to_unit).symbol
    return f"{value:.{d}f}°{source} = {result:.{d}f}°{target}"


def format_megabytes(
    num_bytes: float, megabytes: float, fmt: OutputFormat = DEFAULT_FORMAT
) -> str:
    return f"{format_count(num_bytes)} bytes = {megabytes:.{fmt.bytes_decimals}f} MB"


def format_human_bytes(num_bytes: float, text: str) -> str:
    return f"{format_count(num_bytes)} bytes = {text}"


def format_duration(seconds: float, text: str) -> str:
    return f"{format_count(seconds)} seconds = {text}"
