"""Byte-count and duration conversions, including human-readable modes."""

from __future__ import annotations

import logging
from typing import Optional, Union

from .errors import ConversionError, MissingArgumentError

logger = logging.getLogger(__name__)

BYTES_IN_KIBIBYTE: float = 1024.0
BYTES_IN_MEBIBYTE: float = BYTES_IN_KIBIBYTE * BYTES_IN_KIBIBYTE
BYTE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")

MODE_MEGABYTES = "megabytes"
MODE_HUMAN_READABLE = "human-readable"
BYTE_MODES = (MODE_MEGABYTES, MODE_HUMAN_READABLE)
TIME_MODES = (MODE_HUMAN_READABLE,)

SECONDS_IN_MINUTE = 60
MINUTES_IN_HOUR = 60
HOURS_IN_DAY = 24


def _normalize_mode(mode: str) -> str:
    return str(mode).strip().lower().replace("_", "-")


def bytes_to_megabytes(num_bytes: float) -> float:
    """Convert a byte count to binary megabytes (MiB, 1 048 576 bytes)."""
    return float(num_bytes) / BYTES_IN_MEBIBYTE


def bytes_to_human_readable(num_bytes: float, decimals: int = 2) -> str:
    """Format a byte count with the largest fitting 1024-based unit.

    Args:
        num_bytes (float): Byte count. Negative counts keep their sign and are
            scaled by magnitude.
        decimals (int): Decimal places in the formatted number.

    Returns:
        str: For example ``"1023.00 B"``, ``"1.00 KB"`` or ``"1.50 MB"``.
        Magnitudes below 1 stay in bytes and PB is the largest unit used.
        A value that would round up to 1024 moves to the next unit, so
        1048575 bytes reads ``"1.00 MB"`` rather than ``"1024.00 KB"``.
    """
    n = float(num_bytes)
    idx = 0
    last = len(BYTE_UNITS) - 1
    while abs(round(n, decimals)) >= BYTES_IN_KIBIBYTE and idx < last:
        n /= BYTES_IN_KIBIBYTE
        idx += 1
    return f"{n:.{decimals}f} {BYTE_UNITS[idx]}"


def convert_bytes(
    value: float, mode: Optional[str], decimals: int = 2
) -> Union[float, str]:
    """Convert a byte count in ``megabytes`` or ``human-readable`` mode.

    Returns:
        float | str: Megabytes as a float, or the human-readable string.

    Raises:
        MissingArgumentError: If no mode is given.
        ConversionError: If the mode is not recognised.
    """
    if mode is None:
        raise MissingArgumentError(
            "bytes", "--megabytes or --human-readable", what="output mode"
        )
    name = _normalize_mode(mode)
    logger.debug("Converting %s bytes (%s)", value, name)
    if name == MODE_MEGABYTES:
        return bytes_to_megabytes(value)
    if name == MODE_HUMAN_READABLE:
        return bytes_to_human_readable(value, decimals=decimals)
    raise ConversionError(
        f"unsupported bytes mode {mode!r} (choose from: {', '.join(BYTE_MODES)})"
    )


def _format_seconds(seconds: float) -> str:
    if float(seconds).is_integer():
        return str(int(seconds))
    return f"{seconds:.3f}".rstrip("0").rstrip(".")


def convert_time_human_readable(seconds: float) -> str:
    """Format a number of seconds as a compact duration.

    Zero components are omitted, so ``4000`` gives ``"1h 6m 40s"`` and ``86400``
    gives ``"1d"``. A zero duration is ``"0s"``. Fractional seconds are kept to
    the millisecond and negative durations are prefixed with ``-``.
    """
    total = round(abs(float(seconds)), 3)
    sign = "-" if float(seconds) < 0 and total > 0 else ""

    whole = int(total)
    fraction = round(total - whole, 3)
    minutes, secs = divmod(whole, SECONDS_IN_MINUTE)
    hours, minutes = divmod(minutes, MINUTES_IN_HOUR)
    days, hours = divmod(hours, HOURS_IN_DAY)

    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    remainder = secs + fraction
    if remainder or not parts:
        parts.append(f"{_format_seconds(remainder)}s")
    return sign + " ".join(parts)


def convert_time(value: float, mode: Optional[str]) -> str:
    """Convert a number of seconds in ``human-readable`` mode."""
    if mode is None:
        raise MissingArgumentError("time", "--human-readable", what="output mode")
    name = _normalize_mode(mode)
    if name != MODE_HUMAN_READABLE:
        raise ConversionError(
            f"unsupported time mode {mode!r} (choose from: {', '.join(TIME_MODES)})"
        )
    logger.debug("Converting %s seconds (%s)", value, name)
    return convert_time_human_readable(value)
