"""
External Services - File export.

Services:
- ExportService: Workout export (CSV)
"""
from fitlog.services.external.export import CSV_HEADER, ExportFile, ExportService

__all__ = [
    "CSV_HEADER",
    "ExportFile",
    "ExportService",
]
