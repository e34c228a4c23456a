"""
Scanner module - Finds the earliest collection for a street in a sheet or workbook

Sheet layout handled:
- A cell holding exactly the street name; cells to its right name the service
  ("Refuse", "Recycling", ...)
- A row of "day month-name" cells ("21 July"), column-aligned with the street row

The street row and the date row are located independently, they need not be
the same row.
"""
import datetime
import logging
from typing import Optional

from bindays.scanner.core.errors import NextUpcomingError
from bindays.scanner.core.grid import Sheet, Workbook, first_cell_that
from bindays.scanner.core.models import ServiceDetails, earlier_of
from bindays.scanner.core.parser import cell_contains_date, parse_cell_date, parse_service_type

logger = logging.getLogger(__name__)


def get_next_upcoming_entry(
    sheet: Sheet, street_name: str, current_date: datetime.date
) -> Optional[ServiceDetails]:
    """
    Extract the earliest collection for a street from one sheet

    Args:
        sheet: Sheet to scan
        street_name: Exact text of the street cell
        current_date: Today; supplies the year for day-month cells

    Returns:
        Earliest entry, or None if the street cell has nothing to its right

    Raises:
        NextUpcomingError: NO_ANCHOR_FOUND if the street or any date cell is missing,
            PARSE_FAILURE if any date cell paired with the street row is not a date
    """
    street_name_cell = first_cell_that(sheet, lambda cell: cell.text == street_name)
    first_date_cell = first_cell_that(sheet, lambda cell: cell_contains_date(cell.text, current_date))

    street_row = sheet.row(street_name_cell.row)
    date_row = sheet.row(first_date_cell.row)

    earliest = None
    for column in range(street_name_cell.column + 1, street_row.last_cell_num):
        # One bad date cell rejects the whole row
        cell_date = parse_cell_date(date_row.text_at(column), current_date)
        candidate = ServiceDetails(cell_date, parse_service_type(street_row.text_at(column)))
        earliest = earlier_of(earliest, candidate)

    return earliest


def get_workbook_next_upcoming_entry(
    workbook: Workbook, street_name: str, current_date: datetime.date
) -> Optional[ServiceDetails]:
    """Earliest entry across all sheets; sheets that fail to scan are skipped."""
    earliest = None
    for sheet in workbook.sheets():
        try:
            entry = get_next_upcoming_entry(sheet, street_name, current_date)
        except NextUpcomingError as e:
            logger.debug(f"Sheet {sheet.name!r} skipped ({e.cause.value}): {e.message}")
            continue
        earliest = earlier_of(earliest, entry)
    return earliest
