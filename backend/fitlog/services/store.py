"""
Record and Goal stores - JSON persistence over a StoragePort.
"""
import json
from datetime import datetime
from typing import Any, List, Optional

from pydantic import ValidationError
from sqlalchemy.orm import sessionmaker

from fitlog.core.config import Settings, settings as default_settings
from fitlog.core.database import SessionLocal
from fitlog.core.errors import UnknownStorageBackendError
from fitlog.core.logging import get_logger
from fitlog.models.slot import StorageSlot
from fitlog.models.workout import GoalConfig, WorkoutRecord
from fitlog.services.ports import MemoryStorage, StoragePort

logger = get_logger(__name__)

WORKOUTS_KEY = "workouts"
GOALS_KEY = "goals"


class DatabaseStorage(StoragePort):
    """
    Key-value storage backed by the storage_slots table.

    Each call runs in its own session and commits before returning.
    """

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self.session_factory = session_factory

    def get_item(self, key: str) -> Optional[str]:
        with self.session_factory() as db:
            slot = db.get(StorageSlot, key)
            return slot.value if slot else None

    def set_item(self, key: str, value: str) -> None:
        with self.session_factory() as db:
            slot = db.get(StorageSlot, key)

            if slot:
                slot.value = value
                slot.updated_at = datetime.utcnow()
            else:
                db.add(StorageSlot(key=key, value=value))

            db.commit()

        logger.debug("Stored slot", key=key, size=len(value))

    def remove_item(self, key: str) -> None:
        with self.session_factory() as db:
            slot = db.get(StorageSlot, key)
            if slot:
                db.delete(slot)
                db.commit()


def create_storage(config: Settings = default_settings) -> StoragePort:
    """Build the storage backend named by STORAGE_BACKEND."""
    backend = config.STORAGE_BACKEND.lower()

    if backend == "database":
        return DatabaseStorage()
    if backend == "memory":
        return MemoryStorage()

    raise UnknownStorageBackendError(config.STORAGE_BACKEND)


def _read_json(storage: StoragePort, key: str) -> Any:
    """Read and decode a slot. Missing or undecodable slots read as None."""
    raw = storage.get_item(key)
    if raw is None:
        return None

    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Corrupt slot ignored", key=key)
        return None


class RecordStore:
    """
    Persists the ordered workout list under the "workouts" key.

    Entries that fail validation are dropped on load; a slot that is not
    a JSON array loads as an empty list.
    """

    def __init__(self, storage: StoragePort):
        self.storage = storage

    def load(self) -> List[WorkoutRecord]:
        data = _read_json(self.storage, WORKOUTS_KEY)
        if data is None:
            return []

        if not isinstance(data, list):
            logger.warning("Workouts slot is not a list", found=type(data).__name__)
            return []

        records: List[WorkoutRecord] = []
        for index, item in enumerate(data):
            try:
                records.append(WorkoutRecord.model_validate(item))
            except ValidationError as e:
                logger.warning(
                    "Invalid workout entry dropped",
                    index=index,
                    error_count=e.error_count()
                )

        return records

    def save(self, records: List[WorkoutRecord]) -> None:
        payload = [r.to_storage() for r in records]
        self.storage.set_item(WORKOUTS_KEY, json.dumps(payload))


class GoalStore:
    """Persists the goal config under the "goals" key."""

    def __init__(self, storage: StoragePort, config: Settings = default_settings):
        self.storage = storage
        self.config = config

    def defaults(self) -> GoalConfig:
        return GoalConfig(
            weekly_time_target=self.config.DEFAULT_TIME_GOAL,
            weekly_calorie_target=self.config.DEFAULT_CALORIE_GOAL,
        )

    def load(self) -> GoalConfig:
        data = _read_json(self.storage, GOALS_KEY)
        if not data:
            return self.defaults()

        try:
            return GoalConfig.model_validate(data)
        except ValidationError:
            logger.warning("Invalid goals slot, using defaults")
            return self.defaults()

    def save(self, goals: GoalConfig) -> None:
        self.storage.set_item(GOALS_KEY, json.dumps(goals.to_storage()))
