"""
Services module - Application business logic layer.

Modules:
- analytics: Pure aggregation over the workout list
- presentation: Dashboard panels and chart configurations
- external: File export
- store: JSON persistence over a storage port
- tracker: The session that owns records and goals
"""
# Main exports for convenience
from fitlog.services.ports import (
    ConfirmationPort,
    MemoryStorage,
    StaticConfirmation,
    StoragePort,
)
from fitlog.services.store import DatabaseStorage, GoalStore, RecordStore, create_storage
from fitlog.services.tracker import MonotonicIdGenerator, TrackerSession

__all__ = [
    "ConfirmationPort",
    "MemoryStorage",
    "StaticConfirmation",
    "StoragePort",
    "DatabaseStorage",
    "GoalStore",
    "RecordStore",
    "create_storage",
    "MonotonicIdGenerator",
    "TrackerSession",
]
