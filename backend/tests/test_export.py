"""Tests for the CSV export service."""

from datetime import date

import pytest

from fitlog.core.errors import NothingToExportError
from fitlog.models.workout import WorkoutRecord
from fitlog.services.external import CSV_HEADER, ExportService


def _record(id: int, day: str, type: str, duration: int, calories: int) -> WorkoutRecord:
    return WorkoutRecord(id=id, date=date.fromisoformat(day), type=type, duration=duration, calories=calories)


def test_export_single_record_is_two_lines() -> None:
    csv = ExportService().export_to_csv([_record(1, "2024-01-01", "Running", 30, 300)])

    assert csv.splitlines() == [
        "Date,Exercise Type,Duration (min),Calories",
        "2024-01-01,Running,30,300",
    ]


def test_export_keeps_in_memory_order() -> None:
    records = [
        _record(1, "2024-01-05", "Yoga", 45, 150),
        _record(2, "2024-01-02", "Swim", 30, 250),
    ]

    lines = ExportService().export_to_csv(records).splitlines()

    assert lines[0] == CSV_HEADER
    assert lines[1:] == ["2024-01-05,Yoga,45,150", "2024-01-02,Swim,30,250"]


def test_export_does_not_quote_commas() -> None:
    csv = ExportService().export_to_csv([_record(1, "2024-01-01", "Run, easy", 30, 300)])

    assert csv.splitlines()[1] == "2024-01-01,Run, easy,30,300"


def test_export_empty_list_raises() -> None:
    with pytest.raises(NothingToExportError):
        ExportService().export_to_csv([])


def test_csv_file_metadata() -> None:
    service = ExportService(filename_prefix="log-")

    export = service.build_csv_file([_record(1, "2024-01-01", "Run", 10, 90)], date(2024, 3, 9))

    assert export.filename == "log-2024-03-09.csv"
    assert export.content_type == "text/csv"
    assert export.content.endswith("2024-01-01,Run,10,90\n")
