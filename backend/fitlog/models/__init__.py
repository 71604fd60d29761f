from fitlog.models.slot import StorageSlot
from fitlog.models.workout import GoalConfig, WorkoutDraft, WorkoutRecord

__all__ = [
    "StorageSlot",
    "GoalConfig",
    "WorkoutDraft",
    "WorkoutRecord",
]
