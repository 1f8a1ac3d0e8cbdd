"""Sleep session data models."""
from typing import Literal, Optional

from .base import CamelModel, LocalDateTime, StoredRecord

SleepQuality = Literal["excellent", "good", "fair", "poor"]


class SleepSessionCreate(CamelModel):
    """Payload for starting (or logging a finished) sleep session."""

    start_time: LocalDateTime
    end_time: Optional[LocalDateTime] = None
    quality: Optional[SleepQuality] = None
    notes: Optional[str] = None


class SleepSession(StoredRecord, SleepSessionCreate):
    """Stored sleep session; duration is derived in minutes once both ends are known."""

    duration: Optional[int] = None


class SleepSessionUpdate(CamelModel):
    start_time: Optional[LocalDateTime] = None
    end_time: Optional[LocalDateTime] = None
    duration: Optional[int] = None
    quality: Optional[SleepQuality] = None
    notes: Optional[str] = None
