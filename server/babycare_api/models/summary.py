"""Dashboard and weekly progress aggregate models."""
from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel
from .note import Note


class DailySummary(CamelModel):
    """Today-at-a-glance numbers for the dashboard."""

    date: str
    feedings_count: int = 0
    last_feeding_at: Optional[datetime] = None
    next_feeding_in_hours: int = 0
    sleep_sessions_count: int = 0
    total_sleep_minutes: int = 0
    ongoing_sleep_sessions: int = 0
    tasks_completed: int = 0
    tasks_total: int = 0
    recent_notes: list[Note] = Field(default_factory=list)


class DayProgress(CamelModel):
    """One day of the weekly progress chart."""

    date: str
    weekday: str
    feedings: int = 0
    sleep_hours: float = 0.0
    meals: int = 0


class WeeklySummary(CamelModel):
    """Seven-day progress ending at ``end``."""

    start: str
    end: str
    days: list[DayProgress]
    total_feedings: int = 0
    total_sleep_hours: float = 0.0
    total_meals: int = 0
    avg_feedings_per_day: float = 0.0
    feeding_types: dict[str, int] = Field(default_factory=dict)
