"""
End-to-end tests: xlsx files in a directory -> next upcoming collection
"""
from contextlib import contextmanager
from datetime import date

import os

import pytest

from bindays.scanner.core.errors import ErrorCause, NextUpcomingError
from bindays.scanner.core.gateway import XlsxInputGateway, create_xlsx_input_gateway
from bindays.scanner.core.grid import GridSheet
from bindays.scanner.core.models import (
    CurrentDate,
    ServiceDetails,
    ServiceType,
    StreetName,
    WorkSheetsSearchDirectory,
)


@pytest.fixture
def make_gateway(schedules_dir, today):
    def _make(street="The Mall", directory=None, **kwargs):
        return XlsxInputGateway(
            CurrentDate(today),
            StreetName(street),
            WorkSheetsSearchDirectory(directory or schedules_dir),
            **kwargs,
        )

    return _make


class TestNextUpcoming:
    """Test XlsxInputGateway.next_upcoming"""

    def test_single_sheet(self, write_xlsx, the_mall_rows, make_gateway):
        """One document, one sheet, street cell at (2, 0)"""
        write_xlsx("2024.xlsx", {"July": the_mall_rows})
        assert make_gateway().next_upcoming() == ServiceDetails(date(2024, 7, 21), ServiceType.REFUSE)

    def test_malformed_date_only_match(self, write_xlsx, the_mall_rows, make_gateway):
        the_mall_rows[1][1] = "not a date"
        write_xlsx("2024.xlsx", {"July": the_mall_rows})
        assert make_gateway().next_upcoming() is None

    def test_earliest_across_documents(self, write_xlsx, make_gateway):
        write_xlsx("a.xlsx", {"Sheet1": [[None, "4 August"], ["The Mall", "Refuse"]]})
        write_xlsx("b.xlsx", {"Sheet1": [[None, "28 July"], ["The Mall", "Recycling"]]})
        assert make_gateway().next_upcoming() == ServiceDetails(date(2024, 7, 28), ServiceType.RECYCLING)

    def test_missing_directory_is_fatal(self, tmp_path, make_gateway):
        with pytest.raises(NextUpcomingError) as exc_info:
            make_gateway(directory=tmp_path / "missing").next_upcoming()
        assert exc_info.value.cause == ErrorCause.LISTING_FAILURE

    def test_overlong_directory_name_is_fatal(self, tmp_path, make_gateway):
        with pytest.raises(NextUpcomingError) as exc_info:
            make_gateway(directory=tmp_path / ("x" * 300)).next_upcoming()
        assert exc_info.value.cause == ErrorCause.LISTING_FAILURE

    @pytest.mark.skipif(os.geteuid() == 0, reason="root ignores directory permissions")
    def test_unreadable_directory_is_fatal(self, tmp_path, make_gateway):
        parent = tmp_path / "locked"
        (parent / "schedules").mkdir(parents=True)
        parent.chmod(0o000)
        try:
            with pytest.raises(NextUpcomingError) as exc_info:
                make_gateway(directory=parent / "schedules").next_upcoming()
        finally:
            parent.chmod(0o700)
        assert exc_info.value.cause == ErrorCause.LISTING_FAILURE

    def test_street_not_found(self, write_xlsx, the_mall_rows, make_gateway):
        write_xlsx("2024.xlsx", {"July": the_mall_rows})
        assert make_gateway(street="High Street").next_upcoming() is None

    def test_empty_directory(self, make_gateway):
        assert make_gateway().next_upcoming() is None

    def test_unreadable_document_skipped(self, schedules_dir, write_xlsx, the_mall_rows, make_gateway):
        (schedules_dir / "a-corrupt.xlsx").write_bytes(b"garbage")
        write_xlsx("b.xlsx", {"July": the_mall_rows})
        assert make_gateway().next_upcoming() == ServiceDetails(date(2024, 7, 21), ServiceType.REFUSE)

    def test_malformed_sheet_does_not_affect_others(self, write_xlsx, the_mall_rows, make_gateway):
        write_xlsx("a.xlsx", {
            "June": [[None, "1 July", "tbc"], ["The Mall", "Refuse", "Recycling"]],
            "July": the_mall_rows,
        })
        write_xlsx("b.xlsx", {"August": [[None, "11 August"], ["The Mall", "Recycling"]]})
        assert make_gateway().next_upcoming() == ServiceDetails(date(2024, 7, 21), ServiceType.REFUSE)

    def test_tie_keeps_first_document(self, write_xlsx, make_gateway):
        write_xlsx("a.xlsx", {"Sheet1": [[None, "21 July"], ["The Mall", "Recycling"]]})
        write_xlsx("b.xlsx", {"Sheet1": [[None, "21 July"], ["The Mall", "Refuse"]]})
        assert make_gateway().next_upcoming().service_type == ServiceType.RECYCLING

    def test_subdirectories_ignored_by_default(self, write_xlsx, make_gateway):
        write_xlsx("archive/old.xlsx", {"Sheet1": [[None, "1 July"], ["The Mall", "Refuse"]]})
        assert make_gateway().next_upcoming() is None

    def test_recursive(self, write_xlsx, make_gateway):
        write_xlsx("archive/old.xlsx", {"Sheet1": [[None, "1 July"], ["The Mall", "Refuse"]]})
        assert make_gateway(recursive=True).next_upcoming() == ServiceDetails(
            date(2024, 7, 1), ServiceType.REFUSE
        )

    def test_each_document_closed_before_next(self, schedules_dir, make_gateway):
        for name in ["a.xlsx", "b.xlsx", "c.xlsx"]:
            (schedules_dir / name).write_bytes(b"")
        events = []

        class FakeWorkbook:
            def __init__(self, name):
                self.name = name

            def sheets(self):
                if self.name == "b.xlsx":
                    raise NextUpcomingError(ErrorCause.LOAD_FAILURE, "decoder crashed")
                yield GridSheet(self.name, [["", "21 July"], ["The Mall", "Refuse"]])

        @contextmanager
        def loader(path):
            events.append(f"open {path.name}")
            try:
                yield FakeWorkbook(path.name)
            finally:
                events.append(f"close {path.name}")

        assert make_gateway(loader=loader).next_upcoming() == ServiceDetails(date(2024, 7, 21), ServiceType.REFUSE)
        assert events == [
            "open a.xlsx", "close a.xlsx",
            "open b.xlsx", "close b.xlsx",
            "open c.xlsx", "close c.xlsx",
        ]

    def test_calls_are_independent(self, schedules_dir, write_xlsx, the_mall_rows, make_gateway):
        gateway = make_gateway()
        assert gateway.next_upcoming() is None
        write_xlsx("2024.xlsx", {"July": the_mall_rows})
        assert gateway.next_upcoming() == ServiceDetails(date(2024, 7, 21), ServiceType.REFUSE)


def test_create_xlsx_input_gateway(tmp_path):
    gateway = create_xlsx_input_gateway(
        CurrentDate(date(2024, 1, 1)), StreetName("The Mall"), WorkSheetsSearchDirectory(tmp_path)
    )
    assert isinstance(gateway, XlsxInputGateway)
    assert gateway.recursive is False
