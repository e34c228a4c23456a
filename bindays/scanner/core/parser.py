"""
Parser module - Turns the text of a schedule cell into a date or a service type
Cells carry day and month only ("21 July"), the year comes from "today"
"""
import datetime

from bindays.scanner.core.errors import ErrorCause, NextUpcomingError
from bindays.scanner.core.models import ServiceType

# Day, full English month name, year: "21 July 2024"
XLSX_DATE_FORMAT = "%d %B %Y"
RECYCLING_DISCRIMINATOR = "recycling"


def postfix_with_current_year(text: str, current_date: datetime.date) -> str:
    return f"{text} {current_date.year}"


def parse_cell_date(text: str, current_date: datetime.date) -> datetime.date:
    """
    Parse a day-and-month cell into a full date

    Args:
        text: Cell text such as "3 June"
        current_date: Today; only its year is used

    Returns:
        The date in the current year

    Raises:
        NextUpcomingError: PARSE_FAILURE when the text does not match "day month-name"
    """
    try:
        return datetime.datetime.strptime(
            postfix_with_current_year(text, current_date), XLSX_DATE_FORMAT
        ).date()
    except (TypeError, ValueError) as e:
        raise NextUpcomingError(ErrorCause.PARSE_FAILURE, f"Not a date: {text!r}") from e


def cell_contains_date(text: str, current_date: datetime.date) -> bool:
    try:
        parse_cell_date(text, current_date)
    except NextUpcomingError:
        return False
    return True


def parse_service_type(text: str) -> ServiceType:
    """Anything that does not mention recycling is a refuse collection."""
    if RECYCLING_DISCRIMINATOR in text.lower():
        return ServiceType.RECYCLING
    return ServiceType.REFUSE
