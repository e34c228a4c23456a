"""
Gateway module - Next upcoming collection across every xlsx file in a directory
"""
import logging
from pathlib import Path
from typing import Callable, ContextManager, Optional

from bindays.scanner.core.errors import NextUpcomingError
from bindays.scanner.core.finder import list_workbooks
from bindays.scanner.core.grid import Workbook
from bindays.scanner.core.models import (
    CurrentDate,
    ServiceDetails,
    StreetName,
    WorkSheetsSearchDirectory,
    earlier_of,
)
from bindays.scanner.core.scanner import get_workbook_next_upcoming_entry
from bindays.scanner.core.xlsx import open_workbook

logger = logging.getLogger(__name__)

WorkbookLoader = Callable[[Path], ContextManager[Workbook]]


class XlsxInputGateway:
    def __init__(
        self,
        current_date: CurrentDate,
        street_name: StreetName,
        search_directory: WorkSheetsSearchDirectory,
        recursive: bool = False,
        loader: WorkbookLoader = open_workbook,
    ):
        self.current_date = current_date
        self.street_name = street_name
        self.search_directory = search_directory
        self.recursive = recursive
        self._loader = loader

    def next_upcoming(self) -> Optional[ServiceDetails]:
        """
        Find the soonest collection for the street across all workbooks

        Workbooks that cannot be opened are skipped, each one is closed before
        the next is opened.

        Returns:
            Earliest entry found, or None if no workbook mentions the street

        Raises:
            NextUpcomingError: LISTING_FAILURE if the search directory cannot be listed
        """
        today = self.current_date.local_date
        workbook_files = list_workbooks(self.search_directory.path, recursive=self.recursive)
        logger.info(
            f"Searching {len(workbook_files)} workbooks for {self.street_name.text!r} (year {today.year})"
        )

        earliest = None
        for workbook_file in workbook_files:
            try:
                with self._loader(workbook_file) as workbook:
                    entry = get_workbook_next_upcoming_entry(workbook, self.street_name.text, today)
            except NextUpcomingError as e:
                logger.warning(f"Skipping {workbook_file.name} ({e.cause.value}): {e.message}")
                continue
            if entry is not None:
                logger.debug(f"{workbook_file.name}: {entry.service_type.value} on {entry.date}")
            earliest = earlier_of(earliest, entry)

        logger.info(f"Next upcoming: {earliest.to_dict() if earliest else None}")
        return earliest


def create_xlsx_input_gateway(
    current_date: CurrentDate,
    street_name: StreetName,
    search_directory: WorkSheetsSearchDirectory,
    recursive: bool = False,
) -> XlsxInputGateway:
    return XlsxInputGateway(current_date, street_name, search_directory, recursive=recursive)
