"""Tests for the tracker session.

Tests cover:
- Creating, deleting and persisting workouts
- The confirmation gate on deletion
- Goal updates and the re-rendered dashboard
- Id generation
"""

import json
from datetime import date

import pytest

from fitlog.core.config import Settings
from fitlog.core.errors import NothingToExportError
from fitlog.models.workout import GoalConfig, WorkoutDraft
from fitlog.services.ports import MemoryStorage, StaticConfirmation
from fitlog.services.store import GOALS_KEY, WORKOUTS_KEY, RecordStore
from fitlog.services.tracker import DELETE_PROMPT, MonotonicIdGenerator, TrackerSession


def _draft(type: str = "Running", duration: int = 30, calories: int = 300, day: date | None = None) -> WorkoutDraft:
    return WorkoutDraft(type=type, duration=duration, calories=calories, date=day)


def test_load_empty_storage_uses_defaults(tracker: TrackerSession) -> None:
    assert tracker.records == []
    assert tracker.goals == GoalConfig(time=150, calories=2000)


def test_add_workout_defaults_date_to_today(tracker: TrackerSession, storage: MemoryStorage, today: date) -> None:
    record = tracker.add_workout(_draft())

    assert record.date == today
    assert tracker.records == [record]
    assert RecordStore(storage).load() == [record]


def test_add_workout_keeps_explicit_date(tracker: TrackerSession) -> None:
    record = tracker.add_workout(_draft(day=date(2023, 12, 25)))

    assert record.date == date(2023, 12, 25)


def test_ids_are_unique_and_increasing(tracker: TrackerSession) -> None:
    first = tracker.add_workout(_draft())
    second = tracker.add_workout(_draft())
    third = tracker.add_workout(_draft())

    assert first.id < second.id < third.id


def test_id_generator_follows_clock_and_never_repeats() -> None:
    ticks = iter([100, 100, 250, 90])
    ids = MonotonicIdGenerator(clock_ms=lambda: next(ticks))

    assert [ids.next_id() for _ in range(4)] == [100, 101, 250, 251]


def test_loaded_ids_are_not_reused(storage: MemoryStorage, test_settings: Settings, today: date, make_record) -> None:
    RecordStore(storage).save([make_record(record_id=5000)])
    session = TrackerSession(
        storage,
        test_settings,
        today=lambda: today,
        ids=MonotonicIdGenerator(clock_ms=lambda: 10),
    )
    session.load()

    assert session.add_workout(_draft()).id == 5001


def test_delete_removes_only_matching_record(tracker: TrackerSession) -> None:
    first = tracker.add_workout(_draft(type="A", duration=10))
    second = tracker.add_workout(_draft(type="B", duration=20))
    third = tracker.add_workout(_draft(type="C", duration=30))
    confirmation = StaticConfirmation(True)

    assert tracker.delete_workout(second.id, confirmation) is True

    assert tracker.records == [first, third]
    assert confirmation.prompts == [DELETE_PROMPT]


def test_delete_unknown_id_is_noop(tracker: TrackerSession, storage: MemoryStorage) -> None:
    tracker.add_workout(_draft())
    before = storage.get_item(WORKOUTS_KEY)

    assert tracker.delete_workout(123, StaticConfirmation(True)) is False

    assert len(tracker.records) == 1
    assert storage.get_item(WORKOUTS_KEY) == before


def test_delete_declined_keeps_record(tracker: TrackerSession) -> None:
    record = tracker.add_workout(_draft())

    assert tracker.delete_workout(record.id, StaticConfirmation(False)) is False

    assert tracker.records == [record]


def test_delete_is_persisted(tracker: TrackerSession, storage: MemoryStorage) -> None:
    record = tracker.add_workout(_draft())

    tracker.delete_workout(record.id, StaticConfirmation(True))

    assert json.loads(storage.get_item(WORKOUTS_KEY)) == []


def test_update_goals_persists_and_rerenders(tracker: TrackerSession, storage: MemoryStorage) -> None:
    tracker.add_workout(_draft(duration=50, calories=500))

    tracker.update_goals(GoalConfig(time=100, calories=1000))
    dashboard = tracker.render(trigger="goals")

    assert json.loads(storage.get_item(GOALS_KEY)) == {"time": 100, "calories": 1000}
    assert dashboard.progress.time.percentLabel == "50%"
    assert dashboard.progress.calories.percentLabel == "50%"


def test_render_reflects_every_change(tracker: TrackerSession) -> None:
    assert tracker.render().stats.totalWorkouts == 0

    record = tracker.add_workout(_draft(duration=1200, calories=1500))
    dashboard = tracker.render(trigger="add")
    assert dashboard.stats.totalWorkouts == 1
    assert dashboard.stats.totalTime == "1,200"
    assert dashboard.stats.currentStreak == 1

    tracker.delete_workout(record.id, StaticConfirmation(True))
    dashboard = tracker.render(trigger="delete")
    assert dashboard.stats.totalWorkouts == 0
    assert dashboard.log.emptyMessage is not None


def test_state_survives_reload(tracker: TrackerSession, storage: MemoryStorage, test_settings: Settings, today: date) -> None:
    tracker.add_workout(_draft(type="Swim"))
    tracker.update_goals(GoalConfig(time=90, calories=900))

    reloaded = TrackerSession(storage, test_settings, today=lambda: today)
    reloaded.load()

    assert [r.type for r in reloaded.records] == ["Swim"]
    assert reloaded.goals == GoalConfig(time=90, calories=900)


def test_export_empty_raises(tracker: TrackerSession) -> None:
    with pytest.raises(NothingToExportError) as exc_info:
        tracker.export()

    assert exc_info.value.message == "No workouts to export!"


def test_export_uses_today_in_filename(tracker: TrackerSession) -> None:
    tracker.add_workout(_draft(day=date(2024, 1, 1)))

    export = tracker.export()

    assert export.filename == "fitness-tracker-2024-01-10.csv"
    assert export.content == "Date,Exercise Type,Duration (min),Calories\n2024-01-01,Running,30,300\n"
