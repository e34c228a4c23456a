"""
Pytest fixtures for testing
"""
import pytest
from datetime import date
from pathlib import Path
import sys

from openpyxl import Workbook

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


# Street row and date row of a typical schedule sheet, street cell at (row 2, col 0)
THE_MALL_ROWS = [
    ["Collection calendar"],
    [None, "21 July", "28 July", "4 August"],
    ["The Mall", "Refuse", "Recycling", "Refuse"],
]


@pytest.fixture
def today():
    """A "today" in 2024, before any of the sample collections"""
    return date(2024, 7, 1)


@pytest.fixture
def the_mall_rows():
    return [list(row) for row in THE_MALL_ROWS]


@pytest.fixture
def schedules_dir(tmp_path):
    """Empty directory to put xlsx schedules in"""
    path = tmp_path / "schedules"
    path.mkdir()
    return path


@pytest.fixture
def write_xlsx(schedules_dir):
    """
    Factory writing an xlsx file into schedules_dir

    Usage: write_xlsx("name.xlsx", {"Sheet title": [[cell, ...], ...], ...})
    None leaves a cell empty.
    """
    def _write(name: str, sheets: dict) -> Path:
        wb = Workbook()
        wb.remove(wb.active)
        for title, rows in sheets.items():
            ws = wb.create_sheet(title)
            for row in rows:
                ws.append(row)
        path = schedules_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(path)
        return path

    return _write
