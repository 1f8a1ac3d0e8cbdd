"""Dashboard aggregates computed from stored records.

These are plain functions over record lists so they can be exercised
without a running API; the summary routes feed them from the store.
"""
import math
from collections import Counter
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from ..models import (
    DailySummary,
    DayProgress,
    Feeding,
    Meal,
    Note,
    SleepSession,
    Task,
    WeeklySummary,
)

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
WEEK_DAYS = 7


def hours_until_next_feeding(
    last_feeding_at: Optional[datetime],
    now: datetime,
    interval_hours: int = 3,
) -> int:
    """Whole hours (rounded up) until the next feeding is due.

    Args:
        last_feeding_at: Time of the most recent feeding, if any.
        now: Reference time.
        interval_hours: Expected gap between feedings.

    Returns:
        Hours remaining, never negative; 0 when nothing has been logged.
    """
    if last_feeding_at is None:
        return 0
    remaining = timedelta(hours=interval_hours) - (now - last_feeding_at)
    return max(0, math.ceil(remaining / timedelta(hours=1)))


def build_daily_summary(
    day: date,
    feedings: list[Feeding],
    sleep_sessions: list[SleepSession],
    tasks: list[Task],
    recent_notes: list[Note],
    now: datetime,
    latest_feeding: Optional[Feeding] = None,
    ongoing_sleep: Iterable[SleepSession] = (),
    interval_hours: int = 3,
) -> DailySummary:
    """Summarize one day for the dashboard.

    ``feedings``, ``sleep_sessions`` and ``tasks`` are the records of ``day``.
    ``latest_feeding`` is the most recent feeding overall, which may belong to
    an earlier day; it falls back to the newest of ``feedings``.
    """
    if latest_feeding is None and feedings:
        latest_feeding = max(feedings, key=lambda f: f.datetime)
    last_feeding_at = latest_feeding.datetime if latest_feeding else None

    return DailySummary(
        date=day.isoformat(),
        feedings_count=len(feedings),
        last_feeding_at=last_feeding_at,
        next_feeding_in_hours=hours_until_next_feeding(last_feeding_at, now, interval_hours),
        sleep_sessions_count=len(sleep_sessions),
        total_sleep_minutes=sum(s.duration or 0 for s in sleep_sessions),
        ongoing_sleep_sessions=sum(1 for s in ongoing_sleep if s.end_time is None),
        tasks_completed=sum(1 for t in tasks if t.completed),
        tasks_total=len(tasks),
        recent_notes=recent_notes,
    )


def build_weekly_summary(
    end: date,
    feedings: list[Feeding],
    sleep_sessions: list[SleepSession],
    meals: list[Meal],
) -> WeeklySummary:
    """Per-day counts for the seven days ending at ``end`` (inclusive)."""
    start = end - timedelta(days=WEEK_DAYS - 1)
    window = [start + timedelta(days=i) for i in range(WEEK_DAYS)]
    keys = {d.isoformat() for d in window}

    feedings_by_day = Counter(f.datetime.date().isoformat() for f in feedings)
    meals_by_day = Counter(m.date for m in meals)
    sleep_minutes_by_day: Counter = Counter()
    for session in sleep_sessions:
        # Unfinished sessions have no duration and do not count yet
        if session.duration:
            sleep_minutes_by_day[session.start_time.date().isoformat()] += session.duration

    days = [
        DayProgress(
            date=d.isoformat(),
            weekday=WEEKDAY_LABELS[d.weekday()],
            feedings=feedings_by_day[d.isoformat()],
            sleep_hours=round(sleep_minutes_by_day[d.isoformat()] / 60, 2),
            meals=meals_by_day[d.isoformat()],
        )
        for d in window
    ]

    feeding_types = Counter(
        f.type for f in feedings if f.datetime.date().isoformat() in keys
    )
    total_feedings = sum(day.feedings for day in days)

    return WeeklySummary(
        start=start.isoformat(),
        end=end.isoformat(),
        days=days,
        total_feedings=total_feedings,
        total_sleep_hours=round(sum(day.sleep_hours for day in days), 2),
        total_meals=sum(day.meals for day in days),
        avg_feedings_per_day=round(total_feedings / WEEK_DAYS, 2),
        feeding_types=dict(feeding_types),
    )
