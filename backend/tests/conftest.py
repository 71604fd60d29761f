"""Root conftest for all tests.

Shared fixtures: a fixed "today", in-memory storage, a tracker session
wired to both, and record builders.
"""

from collections.abc import Callable
from datetime import date, timedelta

import pytest

from fitlog.core.config import Settings
from fitlog.models.workout import WorkoutRecord
from fitlog.services.ports import MemoryStorage
from fitlog.services.tracker import MonotonicIdGenerator, TrackerSession

# A Wednesday; the week starts on Monday 2024-01-08
TODAY = date(2024, 1, 10)
CLOCK_MS = 1704888000000


@pytest.fixture
def today() -> date:
    """Fixed current date for all date arithmetic."""
    return TODAY


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the stock defaults and in-memory storage."""
    return Settings(STORAGE_BACKEND="memory")


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def tracker(storage: MemoryStorage, test_settings: Settings, today: date) -> TrackerSession:
    """A loaded tracker on empty in-memory storage with a frozen clock."""
    session = TrackerSession(
        storage,
        test_settings,
        today=lambda: today,
        ids=MonotonicIdGenerator(clock_ms=lambda: CLOCK_MS),
    )
    session.load()
    return session


@pytest.fixture
def make_record(today: date) -> Callable[..., WorkoutRecord]:
    """Build a record dated `days_ago` days before today."""
    counter = {"next": 1}

    def _make(
        type: str = "Running",
        duration: int = 30,
        calories: int = 300,
        days_ago: int = 0,
        record_id: int | None = None,
    ) -> WorkoutRecord:
        if record_id is None:
            record_id = counter["next"]
            counter["next"] += 1
        return WorkoutRecord(
            id=record_id,
            type=type,
            duration=duration,
            calories=calories,
            date=today - timedelta(days=days_ago),
        )

    return _make
