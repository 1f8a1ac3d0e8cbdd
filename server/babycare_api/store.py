"""In-memory record store for baby-care entities.

Every entity table is a ``RecordStore`` keyed by a generated id. State lives
for the lifetime of the process only; nothing is persisted across restarts.
"""
import logging
import math
import threading
import uuid
from datetime import datetime, timedelta
from typing import Any, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel

from .config import get_settings
from .models import Feeding, Meal, Note, SleepSession, Task, User

log = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# Assigned at creation; updates never touch them.
PROTECTED_FIELDS = frozenset({"id", "user_id", "created_at"})


def merge_fields(record: T, changes: Mapping[str, Any]) -> T:
    """Overwrite only the fields present in ``changes``; everything else keeps its value.

    Protected and unknown keys are ignored. The merged result is validated
    against the record's own model, so a change that leaves the record in an
    invalid state raises ``pydantic.ValidationError``.
    """
    data = record.model_dump()
    for key, value in changes.items():
        if key in PROTECTED_FIELDS or key not in data:
            continue
        data[key] = value
    return type(record).model_validate(data)


def sleep_duration_minutes(start: datetime, end: datetime) -> int:
    """Whole minutes between two timestamps, rounding halves up."""
    millis = (end - start) // timedelta(milliseconds=1)
    return math.floor(millis / 60000 + 0.5)


class RecordStore(Generic[T]):
    """Thread-safe in-memory table of one record type.

    Records are kept in insertion order keyed by id. ``order_field`` names the
    timestamp used for most-recent-first listings; ``date_field`` names the
    field whose calendar day is matched by the ``date`` filter (either a
    ``YYYY-MM-DD`` string or a datetime).
    """

    def __init__(self, model: type[T], name: str, order_field: str, date_field: str):
        self.model = model
        self.name = name
        self.order_field = order_field
        self.date_field = date_field
        self._records: dict[str, T] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _day_of(self, record: T) -> str:
        value = getattr(record, self.date_field)
        if isinstance(value, datetime):
            return value.date().isoformat()
        return value

    def _after_write(self, record: T) -> T:
        """Hook for derived fields, applied after every create and update."""
        return record

    def list(self, user_id: str, date: Optional[str] = None, limit: Optional[int] = None) -> list[T]:
        """Records owned by ``user_id``, most recent first.

        Args:
            user_id: Owning user.
            date: Optional ``YYYY-MM-DD`` calendar day to match exactly.
            limit: Optional maximum number of records, applied after filtering.

        Returns:
            List of matching records.
        """
        with self._lock:
            records = [r for r in self._records.values() if r.user_id == user_id]

        if date:
            records = [r for r in records if self._day_of(r) == date]

        records.sort(key=lambda r: getattr(r, self.order_field), reverse=True)

        if limit:
            records = records[:limit]
        return records

    def get(self, record_id: str) -> Optional[T]:
        with self._lock:
            return self._records.get(record_id)

    def create(self, user_id: str, payload: BaseModel) -> T:
        """Store a new record built from a creation payload."""
        record = self.model.model_validate(
            {
                **payload.model_dump(),
                "id": str(uuid.uuid4()),
                "user_id": user_id,
                "created_at": datetime.now(),
            }
        )
        record = self._after_write(record)

        with self._lock:
            self._records[record.id] = record

        log.debug("Created %s %s for user %s", self.name, record.id, user_id)
        return record

    def update(self, record_id: str, changes: Mapping[str, Any]) -> Optional[T]:
        """Apply a partial update. Returns None when the id is unknown."""
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                log.info("Update of unknown %s %s", self.name, record_id)
                return None

            updated = self._after_write(merge_fields(current, changes))
            self._records[record_id] = updated

        log.debug("Updated %s %s fields=%s", self.name, record_id, sorted(changes))
        return updated

    def delete(self, record_id: str) -> bool:
        with self._lock:
            existed = self._records.pop(record_id, None) is not None

        if existed:
            log.debug("Deleted %s %s", self.name, record_id)
        else:
            log.info("Delete of unknown %s %s", self.name, record_id)
        return existed

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


class SleepSessionStore(RecordStore[SleepSession]):
    """Sleep sessions derive their duration once both ends are known."""

    def _after_write(self, record: SleepSession) -> SleepSession:
        # Computed once: an existing duration is never recalculated.
        if record.start_time and record.end_time and not record.duration:
            minutes = sleep_duration_minutes(record.start_time, record.end_time)
            return record.model_copy(update={"duration": minutes})
        return record


class BabyCareStorage:
    """All entity tables for the running process, plus the caregiver accounts."""

    def __init__(self, settings=None):
        self.settings = settings or get_settings()
        self._users: dict[str, User] = {}
        self._users_lock = threading.Lock()

        self.feedings = RecordStore(Feeding, "feeding", order_field="datetime", date_field="datetime")
        self.sleep_sessions = SleepSessionStore(
            SleepSession, "sleep session", order_field="start_time", date_field="start_time"
        )
        self.meals = RecordStore(Meal, "meal", order_field="created_at", date_field="date")
        self.tasks = RecordStore(Task, "task", order_field="created_at", date_field="date")
        self.notes = RecordStore(Note, "note", order_field="datetime", date_field="datetime")

        self._seed_default_user()

    def _seed_default_user(self) -> None:
        user = User(
            id=self.settings.default_user_id,
            username=self.settings.default_username,
            password=self.settings.default_password,
        )
        with self._users_lock:
            self._users[user.id] = user

    # Users

    def get_user(self, user_id: str) -> Optional[User]:
        with self._users_lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._users_lock:
            return next((u for u in self._users.values() if u.username == username), None)

    def create_user(self, username: str, password: str) -> User:
        user = User(id=str(uuid.uuid4()), username=username, password=password)
        with self._users_lock:
            self._users[user.id] = user
        log.info("Created user %s (%s)", user.id, username)
        return user

    def clear(self) -> None:
        """Drop every record and reset accounts to the seed user."""
        for table in (self.feedings, self.sleep_sessions, self.meals, self.tasks, self.notes):
            table.clear()
        with self._users_lock:
            self._users.clear()
        self._seed_default_user()


# Singleton instance
storage = BabyCareStorage()
