"""
Export Service - Export workout records to downloadable files.

Currently supports:
- CSV (comma separated, one row per workout)
"""
from dataclasses import dataclass
from datetime import date
from io import StringIO
from typing import Sequence

from fitlog.core.config import settings
from fitlog.core.errors import NothingToExportError
from fitlog.core.logging import get_logger
from fitlog.models.workout import WorkoutRecord

logger = get_logger(__name__)

CSV_HEADER = "Date,Exercise Type,Duration (min),Calories"


@dataclass(frozen=True)
class ExportFile:
    """A rendered export ready to be sent as a download."""
    filename: str
    content_type: str
    content: str


class ExportService:
    """
    Service for exporting workout records to various formats.
    """

    def __init__(self, filename_prefix: str | None = None):
        self.filename_prefix = filename_prefix or settings.EXPORT_FILENAME_PREFIX

    def export_to_csv(self, records: Sequence[WorkoutRecord]) -> str:
        """
        Export records to CSV text.

        Fields are written as-is: a comma inside an exercise type is not
        quoted and will shift that row's columns.

        Args:
            records: Workouts in their stored order

        Returns:
            CSV formatted string

        Raises:
            NothingToExportError: if records is empty
        """
        if not records:
            raise NothingToExportError()

        output = StringIO()
        output.write(f"{CSV_HEADER}\n")

        for r in records:
            output.write(f"{r.date.isoformat()},{r.type},{r.duration},{r.calories}\n")

        result = output.getvalue()
        output.close()

        logger.info("Exported workouts to CSV", rows=len(records))

        return result

    def build_csv_file(self, records: Sequence[WorkoutRecord], today: date) -> ExportFile:
        """Render records into a named CSV download."""
        return ExportFile(
            filename=self.get_csv_filename(today),
            content_type=self.get_csv_content_type(),
            content=self.export_to_csv(records),
        )

    def get_csv_content_type(self) -> str:
        """Get the content type for CSV files."""
        return "text/csv"

    def get_csv_filename(self, today: date) -> str:
        """Generate filename for CSV export."""
        return f"{self.filename_prefix}{today.isoformat()}.csv"
