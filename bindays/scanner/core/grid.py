"""
Grid module - Library-independent view of a workbook

A workbook is an ordered sequence of sheets, a sheet an ordered sequence of
rows, a row a sequence of cells addressed by column index. Empty cells are
represented by empty text and are never visited by the cell search.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Protocol, Sequence

from bindays.scanner.core.errors import ErrorCause, NextUpcomingError


@dataclass(frozen=True)
class Cell:
    row: int
    column: int
    text: str


class Row:
    def __init__(self, index: int, texts: Sequence[str]):
        self.index = index
        self._texts = list(texts)

    @property
    def last_cell_num(self) -> int:
        """Index of the last populated column plus one (0 for an empty row)."""
        for column in range(len(self._texts) - 1, -1, -1):
            if self._texts[column] != "":
                return column + 1
        return 0

    def text_at(self, column: int) -> str:
        if 0 <= column < len(self._texts):
            return self._texts[column]
        return ""

    def cells(self) -> Iterator[Cell]:
        for column, text in enumerate(self._texts):
            if text != "":
                yield Cell(self.index, column, text)


class Sheet(Protocol):
    name: str

    def rows(self) -> Iterator[Row]:
        ...

    def row(self, index: int) -> Row:
        ...


class Workbook(Protocol):
    def sheets(self) -> Iterator[Sheet]:
        ...


class GridSheet:
    """Sheet backed by a list of rows of cell text."""

    def __init__(self, name: str, grid: Iterable[Sequence[str]]):
        self.name = name
        self._rows: List[Row] = [Row(index, texts) for index, texts in enumerate(grid)]

    def rows(self) -> Iterator[Row]:
        return iter(self._rows)

    def row(self, index: int) -> Row:
        return self._rows[index]


def first_cell_that(sheet: Sheet, predicate: Callable[[Cell], bool]) -> Cell:
    """
    Find the first populated cell, row by row and left to right, matching predicate

    Raises:
        NextUpcomingError: NO_ANCHOR_FOUND if no cell matches
    """
    found = next(
        (cell for row in sheet.rows() for cell in row.cells() if predicate(cell)),
        None,
    )
    if found is None:
        raise NextUpcomingError(ErrorCause.NO_ANCHOR_FOUND, f"No matching cell in sheet {sheet.name!r}")
    return found
