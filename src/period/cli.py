from __future__ import annotations

import argparse
import sys
from datetime import datetime
from typing import Callable, Sequence

from period import relative
from period.config.settings import get_settings
from period.errors import NegativeValueError
from period.formatting import to_date_string, to_iso8601, to_long_date, to_rfc2822
from period.humanize import humanize
from period.utils.logging import LoggingOptions, configure_logging, get_logger

UNITS: tuple[str, ...] = (
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
    "months",
    "years",
)

FORMATTERS: dict[str, Callable[[datetime], str]] = {
    "date": to_date_string,
    "long": to_long_date,
    "iso8601": to_iso8601,
    "rfc2822": to_rfc2822,
}


def _instant(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"not an ISO-8601 timestamp: {value!r}"
        ) from exc


def _unit(value: str) -> str:
    unit = value.lower()
    if not unit.endswith("s"):
        unit = f"{unit}s"
    if unit not in UNITS:
        raise argparse.ArgumentTypeError(
            f"unknown unit {value!r}, expected one of: {', '.join(UNITS)}"
        )
    return unit


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="period",
        description="Relative dates and human-readable time phrases.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    phrase = commands.add_parser("humanize", help="Describe an instant relative to now")
    phrase.add_argument("instant", type=_instant)
    phrase.add_argument("--now", type=_instant, default=None, help="Reference instant")

    for name, direction in (("ago", "ago"), ("from-now", "from_now")):
        shift = commands.add_parser(name, help=f"Print the instant N units {name}")
        shift.add_argument("count", type=int)
        shift.add_argument("unit", type=_unit)
        shift.add_argument(
            "--now", type=_instant, default=None, help="Reference instant"
        )
        shift.set_defaults(direction=direction)

    fmt = commands.add_parser("format", help="Format an instant")
    fmt.add_argument("instant", type=_instant)
    fmt.add_argument("--style", choices=sorted(FORMATTERS), default="iso8601")

    return parser


def _shift(count: int, unit: str, direction: str, reference: datetime | None) -> str:
    if unit in {"seconds", "minutes", "hours"}:
        name = f"{unit}_{direction}"
    else:
        name = f"{unit}_{direction}_datetime"
    helper: Callable[..., datetime] = getattr(relative, name)
    return to_iso8601(helper(count, reference=reference))


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    options = LoggingOptions.from_settings(get_settings())
    options.debug = args.debug
    configure_logging(options)
    logger = get_logger(__name__)
    logger.debug("Running command", command=args.command)

    try:
        if args.command == "humanize":
            output = humanize(args.instant, now=args.now)
        elif args.command in {"ago", "from-now"}:
            output = _shift(args.count, args.unit, args.direction, args.now)
        else:
            output = FORMATTERS[args.style](args.instant)
    except NegativeValueError as exc:
        print(f"period: error: {exc}", file=sys.stderr)
        return 1
    except OverflowError as exc:
        parser.error(f"result out of range: {exc}")

    print(output)
    return 0


__all__ = ["build_parser", "main"]
