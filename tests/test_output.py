"""Tests for result-line formatting."""

import pytest

from convertx.output import (
    DEFAULT_FORMAT,
    OutputFormat,
    format_conversion,
    format_count,
    format_duration,
    format_human_bytes,
    format_megabytes,
    format_temperature,
)


def test_format_conversion_uses_four_decimals():
    assert (
        format_conversion(1.0, "kilometers", 1000.0, "meters")
        == "1.0000 kilometers = 1000.0000 meters"
    )


def test_format_temperature_uses_symbols():
    assert format_temperature(32.0, "f", 0.0, "c") == "32.00°F = 0.00°C"
    assert format_temperature(0.0, "C", 273.15, "K") == "0.00°C = 273.15°K"


def test_format_byte_and_time_lines():
    assert format_megabytes(1048576.0, 1.0) == "1048576 bytes = 1.00 MB"
    assert format_human_bytes(1536.0, "1.50 KB") == "1536 bytes = 1.50 KB"
    assert format_duration(3661.0, "1h 1m 1s") == "3661 seconds = 1h 1m 1s"


def test_format_count():
    assert format_count(1048576.0) == "1048576"
    assert format_count(1.5) == "1.5"
    assert format_count(0.00001) == "0.00001"
    assert format_count(-2.25) == "-2.25"


def test_with_precision_overrides_every_category():
    fmt = DEFAULT_FORMAT.with_precision(1)
    assert fmt == OutputFormat(1, 1, 1)
    assert format_conversion(2.0, "meters", 6.56168, "feet", fmt) == "2.0 meters = 6.6 feet"
    assert format_megabytes(1048576.0, 1.0, fmt) == "1048576 bytes = 1.0 MB"
    with pytest.raises(ValueError):
        DEFAULT_FORMAT.with_precision(-1)
