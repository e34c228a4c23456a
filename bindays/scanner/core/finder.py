"""
Finder module - Lists the xlsx schedules under a search directory
"""
import logging
from pathlib import Path
from typing import List

from bindays.scanner.core.errors import ErrorCause, NextUpcomingError

logger = logging.getLogger(__name__)

XLSX_EXTENSION = "xlsx"


def is_xlsx(path: Path) -> bool:
    # A bare ".xlsx" has no suffix in pathlib but still counts
    return path.name.lower().endswith(f".{XLSX_EXTENSION}")


def list_workbooks(search_directory: Path, recursive: bool = False) -> List[Path]:
    """
    List xlsx files in a directory

    Args:
        search_directory: Directory to search
        recursive: If True, also search every subdirectory. Default: only the directory itself

    Returns:
        Paths of matching files, sorted

    Raises:
        NextUpcomingError: LISTING_FAILURE if the directory is missing or unreadable
    """
    search_directory = Path(search_directory)
    try:
        if not search_directory.is_dir():
            raise NextUpcomingError(ErrorCause.LISTING_FAILURE, f"Not a directory: {search_directory}")
        entries = search_directory.rglob("*") if recursive else search_directory.iterdir()
        workbooks = sorted(path for path in entries if is_xlsx(path) and path.is_file())
    except OSError as e:
        raise NextUpcomingError(
            ErrorCause.LISTING_FAILURE, f"Failed to list {search_directory}: {e}"
        ) from e

    logger.debug(f"Found {len(workbooks)} xlsx files in {search_directory} (recursive={recursive})")
    return workbooks
