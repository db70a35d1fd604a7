from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from datetime import date, datetime
from typing import List

from ._exceptions import WorktimeError
from .config import WorktimeConfig, load_config

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


def _parse_start(value: str) -> datetime:
    try:
        return datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid start date {value!r} (expected YYYY-MM-DD HH:MM:SS)"
        )


def _parse_holiday(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid holiday {value!r} (expected YYYY-MM-DD)"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="worktime",
        description="Calculate a project's end date from its start date and planned working hours",
    )
    parser.add_argument(
        "start",
        nargs="?",
        type=_parse_start,
        default=datetime(2017, 7, 24, 9, 0, 0),
        help="Start date (YYYY-MM-DD HH:MM:SS)",
    )
    parser.add_argument(
        "hours", nargs="?", type=int, default=40, help="Planned working hours"
    )
    parser.add_argument("--config", help="Path to a JSON policy configuration")
    parser.add_argument("--start-hour", type=int, help="Hour the shift starts")
    parser.add_argument("--end-hour", type=int, help="Hour the shift ends")
    parser.add_argument(
        "--weekmask", help="Working weekdays, e.g. 1111100 or 'Mon Tue Wed Thu Fri'"
    )
    parser.add_argument(
        "--holiday",
        action="append",
        type=_parse_holiday,
        default=[],
        help="Non-working date (YYYY-MM-DD); may be repeated",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: List[str] | None = None) -> int:
    """Entry point for command line usage.  Prints the end date to stdout."""

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else WorktimeConfig()
        overrides = {
            "start_hour": args.start_hour,
            "end_hour": args.end_hour,
            "weekmask": args.weekmask,
        }
        config = dataclasses.replace(
            config, **{k: v for k, v in overrides.items() if v is not None}
        )
        if args.holiday:
            config = dataclasses.replace(
                config, holidays=config.holidays + tuple(args.holiday)
            )
        logger.debug("Using %s", config)

        end_date = config.calculator().calculate(args.start, args.hours)
    except WorktimeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(end_date.strftime(DATE_FORMAT))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
