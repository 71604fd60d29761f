"""
Error types for the tracker.

User-facing errors carry the notice text shown to the user.
"""


class FitLogError(Exception):
    """Base class for tracker errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class NothingToExportError(FitLogError):
    """Raised when an export is requested with no workouts logged."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "No workouts to export!")


class UnknownStorageBackendError(FitLogError):
    """Raised when STORAGE_BACKEND names a backend that does not exist."""

    def __init__(self, backend: str):
        self.backend = backend
        super().__init__(f"Unknown storage backend: {backend}")
