"""Tests for byte-count and duration conversions."""

import pytest

from convertx.errors import ConversionError, MissingArgumentError
from convertx.humanize import (
    bytes_to_human_readable,
    bytes_to_megabytes,
    convert_bytes,
    convert_time,
    convert_time_human_readable,
)


def test_bytes_to_megabytes_uses_binary_megabytes():
    assert convert_bytes(1048576, "megabytes") == 1.0
    assert bytes_to_megabytes(2097152) == 2.0
    assert bytes_to_megabytes(1_000_000) < 1.0


@pytest.mark.parametrize(
    "num_bytes,expected",
    [
        (0, "0.00 B"),
        (1023, "1023.00 B"),
        (1024, "1.00 KB"),
        (1536, "1.50 KB"),
        (1048576, "1.00 MB"),
        (1048575, "1.00 MB"),
        (1023.999, "1.00 KB"),
        (3 * 1024**3, "3.00 GB"),
        (1024**4, "1.00 TB"),
        (1024**5, "1.00 PB"),
        (1024**6, "1024.00 PB"),
        (-2048, "-2.00 KB"),
    ],
)
def test_bytes_to_human_readable(num_bytes, expected):
    assert bytes_to_human_readable(num_bytes) == expected


def test_bytes_to_human_readable_decimals():
    assert bytes_to_human_readable(3 * 1024, decimals=0) == "3 KB"
    assert bytes_to_human_readable(1536, decimals=3) == "1.500 KB"


def test_convert_bytes_modes():
    assert convert_bytes(1048576, "human-readable") == "1.00 MB"
    assert convert_bytes(1048576, "Human_Readable") == "1.00 MB"
    with pytest.raises(MissingArgumentError, match="missing required output mode"):
        convert_bytes(1024, None)
    with pytest.raises(ConversionError, match="unsupported bytes mode"):
        convert_bytes(1024, "gigabytes")


@pytest.mark.parametrize(
    "seconds,expected",
    [
        (0, "0s"),
        (59, "59s"),
        (61, "1m 1s"),
        (3600, "1h"),
        (3661, "1h 1m 1s"),
        (4000, "1h 6m 40s"),
        (86400, "1d"),
        (90061, "1d 1h 1m 1s"),
        (61.5, "1m 1.5s"),
        (0.001, "0.001s"),
        (0.00001, "0s"),
        (-90, "-1m 30s"),
    ],
)
def test_convert_time_human_readable(seconds, expected):
    assert convert_time_human_readable(seconds) == expected


def test_convert_time_requires_mode():
    assert convert_time(3661, "human-readable") == "1h 1m 1s"
    with pytest.raises(MissingArgumentError, match="--human-readable"):
        convert_time(3661, None)
    with pytest.raises(ConversionError, match="unsupported time mode"):
        convert_time(3661, "minutes")


def test_rounding_up_to_1024_moves_to_next_unit():
    assert bytes_to_human_readable(1048575) == "1.00 MB"
    assert bytes_to_human_readable(1048575, decimals=4) == "1023.9990 KB"
