#!/usr/bin/env python3
"""
CLI for querying public holidays through the same client the API uses.

Usage:
    public-holidays list [--year 2024] [--country NL]
    public-holidays today [--country NL]
    public-holidays next [--country NL]

Results are printed to stdout as JSON. An unsupported country or year
exits with status 2.
"""

import argparse
import json
import sys
from typing import List, Optional

from app.core.config import SUPPORTED_COUNTRY, SUPPORTED_YEAR
from app.core.logging_config import setup_logging, get_logger
from app.services import public_holidays_service
from app.services.helpers import InvalidInputError

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="public-holidays",
        description="Query public holidays from the upstream holiday API"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="Public holidays for a year")
    list_parser.add_argument(
        "--year", "-y",
        type=int,
        default=SUPPORTED_YEAR,
        help=f"Year (default: {SUPPORTED_YEAR})"
    )

    country_parsers = [
        list_parser,
        subparsers.add_parser("today", help="Is today a public holiday"),
        subparsers.add_parser("next", help="Upcoming public holidays"),
    ]
    for sub in country_parsers:
        sub.add_argument(
            "--country", "-c",
            default=SUPPORTED_COUNTRY,
            help=f"Country code (default: {SUPPORTED_COUNTRY})"
        )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)

    try:
        if args.command == "list":
            holidays = public_holidays_service.get_list_of_public_holidays(args.year, args.country)
            result = [h.model_dump() for h in holidays]
        elif args.command == "today":
            result = {
                "country": args.country,
                "isPublicHoliday": public_holidays_service.check_if_today_is_public_holiday(args.country),
            }
        else:
            holidays = public_holidays_service.get_next_public_holidays(args.country)
            result = [h.model_dump() for h in holidays]
    except InvalidInputError as e:
        logger.error("%s", e)
        return 2

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
