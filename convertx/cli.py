"""Command-line entry point for convertx.

Examples::

    convertx length 1 --from kilometers --to feet
    convertx temperature 100 --from F --to C
    convertx bytes 1048576 --megabytes
    convertx time 3661 --human-readable
    convertx units pressure
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Sequence

from . import __version__
from .conversions import convert, parse_value
from .errors import ConversionError, ParseError
from .humanize import (
    MODE_HUMAN_READABLE,
    MODE_MEGABYTES,
    convert_bytes,
    convert_time,
)
from .output import (
    DEFAULT_FORMAT,
    OutputFormat,
    format_conversion,
    format_duration,
    format_human_bytes,
    format_megabytes,
    format_temperature,
)
from .units import UNIT_PAIR_CATEGORIES, resolve_unit, supported_units, units_table

logger = logging.getLogger(__name__)

# Plain, decimal and exponent forms; none of the options look like this.
_NEGATIVE_NUMBER = re.compile(
    r"^-\d+$|^-\d*\.\d+$|^-(\d+\.?\d*|\.\d+)[eE][-+]?\d+$"
)

_CATEGORY_HELP = {
    "length": "Convert length units.",
    "temperature": "Convert temperature units.",
    "mass": "Convert mass/weight units.",
    "datarate": "Convert data rate units.",
    "area": "Convert area units.",
    "volume": "Convert volume units.",
    "speed": "Convert speed units.",
    "pressure": "Convert pressure units.",
}


def _value_argument(text: str) -> float:
    try:
        return parse_value(text)
    except ParseError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _precision_argument(text: str) -> int:
    try:
        decimals = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid precision: {text!r}") from None
    if decimals < 0:
        raise argparse.ArgumentTypeError(f"precision must be >= 0, got {decimals}")
    return decimals


def _units_epilog() -> str:
    lines = ["supported units:"]
    for category in UNIT_PAIR_CATEGORIES:
        lines.append(f"  {category:<12} {', '.join(supported_units(category))}")
    return "\n".join(lines)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reads tokens such as ``-1e3`` as negative values.

    Subcommand parsers inherit this class through ``add_subparsers``.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._negative_number_matcher = _NEGATIVE_NUMBER


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser with one subcommand per category."""
    parser = _ArgumentParser(
        prog="convertx",
        description="Multi-purpose unit converter CLI.",
        epilog=_units_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    parser.add_argument(
        "--precision",
        type=_precision_argument,
        default=None,
        metavar="N",
        help="Decimal places for every numeric result (default: 4, 2 for "
        "temperature and bytes).",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="SUBCOMMAND")
    subparsers.required = True

    bytes_parser = subparsers.add_parser(
        "bytes",
        help="Convert byte values (e.g., bytes to MB or human readable).",
        description="Convert a byte count to megabytes or a human-readable size.",
    )
    bytes_parser.add_argument(
        "value", type=_value_argument, help="Number of bytes to convert."
    )
    bytes_parser.add_argument(
        "-m", "--megabytes", action="store_true", help="Convert bytes to megabytes."
    )
    bytes_parser.add_argument(
        "-r",
        "--human-readable",
        action="store_true",
        help='Convert bytes to a human-readable string (e.g., "1.00 MB").',
    )
    bytes_parser.set_defaults(command_parser=bytes_parser)

    time_parser = subparsers.add_parser(
        "time",
        help="Convert time (seconds) to a human-readable format.",
        description="Convert a number of seconds to a human-readable duration.",
    )
    time_parser.add_argument(
        "value", type=_value_argument, help="Seconds to convert."
    )
    time_parser.add_argument(
        "-r",
        "--human-readable",
        action="store_true",
        help='Convert to human-readable format (e.g., "1h 13m 5s").',
    )
    time_parser.set_defaults(command_parser=time_parser)

    for category in UNIT_PAIR_CATEGORIES:
        units = ", ".join(supported_units(category))
        sub = subparsers.add_parser(
            category,
            help=_CATEGORY_HELP[category],
            description=_CATEGORY_HELP[category],
            epilog=f"supported units: {units} (case-insensitive)",
        )
        sub.add_argument("value", type=_value_argument, help="Value to convert.")
        sub.add_argument(
            "-f",
            "--from",
            dest="from_unit",
            metavar="UNIT",
            help=f"Source unit ({units}).",
        )
        sub.add_argument(
            "-t",
            "--to",
            dest="to_unit",
            metavar="UNIT",
            help=f"Target unit ({units}).",
        )
        sub.set_defaults(command_parser=sub)

    units_parser = subparsers.add_parser(
        "units",
        help="List supported units.",
        description="List supported units and their scale onto each base unit.",
    )
    units_parser.add_argument(
        "category",
        nargs="?",
        choices=UNIT_PAIR_CATEGORIES,
        help="Only list this category.",
    )
    units_parser.set_defaults(command_parser=units_parser)
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _run(args: argparse.Namespace, fmt: OutputFormat) -> str:
    """Perform the requested conversion and return the line to print."""
    if args.command == "units":
        return units_table(args.category).to_string(index=False)

    if args.command == "bytes":
        if args.megabytes:
            mode = MODE_MEGABYTES
        elif args.human_readable:
            mode = MODE_HUMAN_READABLE
        else:
            mode = None
        result = convert_bytes(args.value, mode, decimals=fmt.bytes_decimals)
        if mode == MODE_MEGABYTES:
            return format_megabytes(args.value, result, fmt)
        return format_human_bytes(args.value, result)

    if args.command == "time":
        mode = MODE_HUMAN_READABLE if args.human_readable else None
        return format_duration(args.value, convert_time(args.value, mode))

    result = convert(args.command, args.value, args.from_unit, args.to_unit)
    if args.command == "temperature":
        return format_temperature(
            args.value, args.from_unit, result, args.to_unit, fmt
        )
    return format_conversion(
        args.value,
        resolve_unit(args.command, args.from_unit),
        result,
        resolve_unit(args.command, args.to_unit),
        fmt,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint; conversion errors exit with argparse's usage status."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    fmt = DEFAULT_FORMAT
    if args.precision is not None:
        fmt = DEFAULT_FORMAT.with_precision(args.precision)

    try:
        line = _run(args, fmt)
    except ConversionError as exc:
        logger.debug("Rejected %s request: %s", args.command, exc)
        args.command_parser.error(str(exc))
    print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
