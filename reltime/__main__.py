"""Command line: format a relative time phrase.

Usage:
    python -m reltime -3 day --locale uk        # 3 дні тому
    python -m reltime 1.5 hour --unrounded       # 1 hour from now
    python -m reltime --at 2030-01-01T00:00:00Z
    python -m reltime --at 2024-01-01 --reference 2024-01-04T05:00 --precise
"""

import argparse
import logging
import sys
from fractions import Fraction

from dateutil.parser import isoparse

from reltime.config import settings
from reltime.errors import ReltimeError
from reltime.services.formatter import DurationFormatter

logger = logging.getLogger(__name__)

_LOG_FORMATS = {
    "text": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    "json": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="reltime", description="Localized relative time phrases")
    parser.add_argument("quantity", nargs="?", help="signed unit count, negative = past")
    parser.add_argument("unit", nargs="?", help="now, second, minute, hour, day, week, month, year, ...")
    parser.add_argument("--at", help="ISO 8601 timestamp to describe instead of quantity/unit")
    parser.add_argument("--reference", help="ISO 8601 reference timestamp (default: now)")
    parser.add_argument("--precise", action="store_true", help="list every unit: 3 days 4 hours ago")
    parser.add_argument("--locale", "-l", default=settings.default_locale)
    parser.add_argument("--unrounded", action="store_true")
    parser.add_argument("--tolerance", type=int, default=settings.rounding_tolerance)
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=_LOG_FORMATS.get(settings.log_format, _LOG_FORMATS["text"]),
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        formatter = DurationFormatter(tolerance=args.tolerance, default_locale=args.locale)
        if args.at:
            reference = isoparse(args.reference) if args.reference else None
            text = formatter.format_datetime(
                isoparse(args.at),
                reference,
                rounded=not args.unrounded,
                precise=args.precise,
            )
        else:
            if args.quantity is None or args.unit is None:
                parser.error("quantity and unit are required unless --at is given")
            text = formatter.format(
                Fraction(args.quantity), args.unit, rounded=not args.unrounded
            )
    except (ReltimeError, ValueError, TypeError) as exc:
        logger.error("%s", exc)
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
