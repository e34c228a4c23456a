"""
Core scanner modules
"""

from bindays.scanner.core.errors import ErrorCause, NextUpcomingError
from bindays.scanner.core.finder import list_workbooks
from bindays.scanner.core.gateway import XlsxInputGateway, create_xlsx_input_gateway
from bindays.scanner.core.grid import first_cell_that
from bindays.scanner.core.models import (
    CurrentDate,
    ServiceDetails,
    ServiceType,
    StreetName,
    WorkSheetsSearchDirectory,
    create_current_date,
)
from bindays.scanner.core.parser import cell_contains_date, parse_cell_date, parse_service_type
from bindays.scanner.core.scanner import (
    get_next_upcoming_entry,
    get_workbook_next_upcoming_entry,
)
from bindays.scanner.core.xlsx import open_workbook

__all__ = [
    "ErrorCause",
    "NextUpcomingError",
    "list_workbooks",
    "XlsxInputGateway",
    "create_xlsx_input_gateway",
    "first_cell_that",
    "CurrentDate",
    "ServiceDetails",
    "ServiceType",
    "StreetName",
    "WorkSheetsSearchDirectory",
    "create_current_date",
    "cell_contains_date",
    "parse_cell_date",
    "parse_service_type",
    "get_next_upcoming_entry",
    "get_workbook_next_upcoming_entry",
    "open_workbook",
]
