"""
Main script to find the next collection - can be used from cron or a shell prompt
"""

import argparse
import datetime
import json
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from bindays import config
from bindays.common.logging_utils import setup_logging
from bindays.scanner.core.errors import NextUpcomingError
from bindays.scanner.core.gateway import create_xlsx_input_gateway
from bindays.scanner.core.models import (
    StreetName,
    WorkSheetsSearchDirectory,
    create_current_date,
)


def run_scanner(
    street_name: str,
    search_directory: Path,
    today: datetime.date | None = None,
    recursive: bool = False,
    as_json: bool = False,
) -> int:
    """Run the scanner with given parameters

    Args:
        street_name: Exact text of the street cell
        search_directory: Directory holding the xlsx schedules
        today: Date to search from (defaults to the system clock)
        recursive: If True, also search subdirectories
        as_json: Print the result as JSON instead of text
    """
    logger = logging.getLogger(__name__)
    logger.info("Scanner started (street=%r, directory=%s, recursive=%s)", street_name, search_directory, recursive)

    gateway = create_xlsx_input_gateway(
        create_current_date(today),
        StreetName(street_name),
        WorkSheetsSearchDirectory(Path(search_directory)),
        recursive=recursive,
    )

    try:
        service = gateway.next_upcoming()
    except NextUpcomingError as e:
        logger.error("Search failed (%s): %s", e.cause.value, e.message)
        if as_json:
            print(json.dumps({"error": e.cause.value, "message": e.message}))
        else:
            print(f"Could not search {search_directory}: {e.message}")
        return 1

    if as_json:
        print(json.dumps(service.to_dict() if service else None))
    elif service is None:
        print(f"No upcoming collection found for {street_name}")
    else:
        print(f"Next collection for {street_name}: {service.service_type.value} on {service.date:%A %d %B %Y}")
    return 0


def parse_date(value: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid date {value!r}, expected YYYY-MM-DD") from e


def main(argv: list[str] | None = None) -> int:
    """Main scanner function (CLI entry point)"""
    parser = argparse.ArgumentParser(description='Next refuse/recycling collection for a street')
    parser.add_argument('--street', type=str, default=config.STREET_NAME,
                        help='Street name exactly as written in the schedules (default: $STREET_NAME)')
    parser.add_argument('--directory', type=Path, default=Path(config.SEARCH_DIRECTORY),
                        help='Directory holding the xlsx schedules (default: $SEARCH_DIRECTORY)')
    parser.add_argument('--today', type=parse_date, default=None,
                        help='Search as if today were this date (YYYY-MM-DD). Default: system clock')
    parser.add_argument('--recursive', action='store_true', default=config.SEARCH_RECURSIVE,
                        help='Also search subdirectories')
    parser.add_argument('--json', action='store_true',
                        help='Print the result as JSON')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Override LOG_LEVEL')
    args = parser.parse_args(argv)

    if not args.street:
        parser.error('a street name is required (--street or $STREET_NAME)')

    setup_logging(args.log_level)

    return run_scanner(
        street_name=args.street,
        search_directory=args.directory,
        today=args.today,
        recursive=args.recursive,
        as_json=args.json,
    )


if __name__ == '__main__':
    sys.exit(main())
