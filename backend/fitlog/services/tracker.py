"""
Tracker Session - Owns the workout list and goals for the running app.

All changes go through this class:
    mutate state -> persist -> render()

render() always recomputes from the full list; there is no cached
aggregate to invalidate.
"""
import time
from datetime import date
from threading import Lock
from typing import Callable, List, Optional

from fitlog.core.config import Settings, settings as default_settings
from fitlog.core.logging import get_logger, track_render
from fitlog.models.workout import GoalConfig, WorkoutDraft, WorkoutRecord
from fitlog.services.external.export import ExportFile, ExportService
from fitlog.services.ports import ConfirmationPort, StoragePort
from fitlog.services.presentation.views import Dashboard, render_dashboard
from fitlog.services.store import GoalStore, RecordStore

logger = get_logger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this workout?"


def _epoch_ms() -> int:
    return int(time.time() * 1000)


class MonotonicIdGenerator:
    """
    Issues creation-timestamp ids that never repeat or go backwards.

    Two records created in the same millisecond get consecutive ids.
    """

    def __init__(self, clock_ms: Callable[[], int] = _epoch_ms, last_id: int = 0):
        self._clock_ms = clock_ms
        self._last_id = last_id

    def observe(self, existing_id: int) -> None:
        """Make sure future ids are greater than an id already in use."""
        self._last_id = max(self._last_id, existing_id)

    def next_id(self) -> int:
        candidate = self._clock_ms()
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate


class TrackerSession:
    """
    Single controller for records and goals.

    Usage:
        session = TrackerSession(MemoryStorage())
        session.load()
        session.add_workout(WorkoutDraft(type="Running", duration=30, calories=300))
        dashboard = session.render(trigger="add")
    """

    def __init__(
        self,
        storage: StoragePort,
        config: Settings = default_settings,
        today: Callable[[], date] = date.today,
        ids: Optional[MonotonicIdGenerator] = None,
        export_service: Optional[ExportService] = None,
    ):
        self.config = config
        self.record_store = RecordStore(storage)
        self.goal_store = GoalStore(storage, config)
        self.export_service = export_service or ExportService(config.EXPORT_FILENAME_PREFIX)
        self._today = today
        self._ids = ids or MonotonicIdGenerator()
        self._lock = Lock()

        self.records: List[WorkoutRecord] = []
        self.goals: GoalConfig = self.goal_store.defaults()

    def today(self) -> date:
        return self._today()

    # ========================================
    # State Changes
    # ========================================

    def load(self) -> None:
        """Read records and goals from storage, falling back to defaults."""
        with self._lock:
            self.records = self.record_store.load()
            self.goals = self.goal_store.load()

            for record in self.records:
                self._ids.observe(record.id)

        logger.info(
            "Tracker state loaded",
            record_count=len(self.records),
            time_goal=self.goals.weekly_time_target,
            calorie_goal=self.goals.weekly_calorie_target
        )

    def add_workout(self, draft: WorkoutDraft) -> WorkoutRecord:
        """Create a record from user input and persist the list."""
        with self._lock:
            record = WorkoutRecord(
                id=self._ids.next_id(),
                type=draft.type,
                duration=draft.duration,
                calories=draft.calories,
                date=draft.date or self.today(),
            )
            self.records.append(record)
            self.record_store.save(self.records)

        logger.info("Workout created", record_id=record.id, duration=record.duration)

        return record

    def delete_workout(self, record_id: int, confirmation: ConfirmationPort) -> bool:
        """
        Delete the record with record_id after the user confirms.

        Returns:
            True if a record was removed; False if the user declined or
            no record has that id
        """
        if not confirmation.confirm(DELETE_PROMPT):
            logger.info("Workout deletion declined", record_id=record_id)
            return False

        with self._lock:
            remaining = [r for r in self.records if r.id != record_id]
            removed = len(remaining) != len(self.records)

            if removed:
                self.records = remaining
                self.record_store.save(self.records)

        if removed:
            logger.info("Workout deleted", record_id=record_id)
        else:
            logger.info("Workout not found for deletion", record_id=record_id)

        return removed

    def update_goals(self, goals: GoalConfig) -> GoalConfig:
        """Replace both weekly targets and persist them."""
        with self._lock:
            self.goals = goals
            self.goal_store.save(goals)

        logger.info(
            "Goals updated",
            time_goal=goals.weekly_time_target,
            calorie_goal=goals.weekly_calorie_target
        )

        return goals

    # ========================================
    # Derived Output
    # ========================================

    def export(self) -> ExportFile:
        """Render the current records as a CSV download."""
        with self._lock:
            records = list(self.records)

        return self.export_service.build_csv_file(records, self.today())

    def render(self, trigger: str = "load") -> Dashboard:
        """Recompute all aggregates and render every panel."""
        with self._lock:
            records = list(self.records)
            goals = self.goals

        with track_render(logger, trigger, len(records)) as render:
            dashboard = render_dashboard(
                records,
                goals,
                self.today(),
                log_limit=self.config.RECENT_LOG_LIMIT,
                chart_days=self.config.CHART_DAYS,
            )
            render.add_panel("stats", dashboard.stats)
            render.add_panel("progress", dashboard.progress)
            render.add_panel("log", dashboard.log)
            render.add_panel("charts", dashboard.charts)

        return dashboard
