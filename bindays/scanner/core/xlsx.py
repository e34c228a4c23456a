"""
Xlsx module - Opens xlsx files as grid workbooks

Decoding is done by pandas with the openpyxl engine (read-only, cached values).
Every cell is read as text; empty cells become empty strings.
"""
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

import pandas as pd

from bindays.scanner.core.errors import ErrorCause, NextUpcomingError
from bindays.scanner.core.grid import GridSheet, Row

logger = logging.getLogger(__name__)


class XlsxSheet:
    """Sheet decoded on first access, so one broken sheet does not spoil the workbook."""

    def __init__(self, excel_file: pd.ExcelFile, name: str):
        self.name = name
        self._excel_file = excel_file
        self._grid: Optional[GridSheet] = None

    def _load(self) -> GridSheet:
        if self._grid is None:
            try:
                df = self._excel_file.parse(
                    sheet_name=self.name, header=None, dtype=str, keep_default_na=False
                )
            except Exception as e:
                raise NextUpcomingError(
                    ErrorCause.LOAD_FAILURE, f"Failed to read sheet {self.name!r}: {e}"
                ) from e
            grid: List[List[str]] = [
                ["" if pd.isna(value) else str(value) for value in row]
                for row in df.values.tolist()
            ]
            logger.debug(f"Loaded sheet {self.name!r}: {len(grid)} rows")
            self._grid = GridSheet(self.name, grid)
        return self._grid

    def rows(self) -> Iterator[Row]:
        return self._load().rows()

    def row(self, index: int) -> Row:
        return self._load().row(index)


class XlsxWorkbook:
    def __init__(self, excel_file: pd.ExcelFile):
        self._excel_file = excel_file

    def sheets(self) -> Iterator[XlsxSheet]:
        for name in self._excel_file.sheet_names:
            yield XlsxSheet(self._excel_file, name)


@contextmanager
def open_workbook(file_path: Path) -> Iterator[XlsxWorkbook]:
    """
    Open an xlsx file for the duration of a with-block

    The underlying file handle is released when the block exits, whatever the outcome.

    Raises:
        NextUpcomingError: LOAD_FAILURE if the file cannot be opened as xlsx
    """
    try:
        excel_file = pd.ExcelFile(file_path, engine="openpyxl")
    except Exception as e:
        raise NextUpcomingError(ErrorCause.LOAD_FAILURE, f"Failed to read xlsx {file_path}: {e}") from e

    with excel_file:
        yield XlsxWorkbook(excel_file)
