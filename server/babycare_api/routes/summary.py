"""Dashboard summary API routes."""
from datetime import date as date_type, datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config import Settings, get_settings
from ..dependencies import get_current_user_id, get_storage
from ..models.base import DATE_PATTERN
from ..models.summary import DailySummary, WeeklySummary
from ..services.summaries import build_daily_summary, build_weekly_summary
from ..store import BabyCareStorage

router = APIRouter(prefix="/api/summary", tags=["Summary"])


def _parse_day(value: Optional[str], today: date_type) -> date_type:
    """Parse a YYYY-MM-DD query value, defaulting to today."""
    if not value:
        return today
    try:
        return date_type.fromisoformat(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid date: {value}") from exc


@router.get("/daily", response_model=DailySummary)
async def get_daily_summary(
    date: Optional[str] = Query(default=None, pattern=DATE_PATTERN, description="YYYY-MM-DD, defaults to today"),
    db: BabyCareStorage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
    settings: Settings = Depends(get_settings),
):
    """
    Today-at-a-glance: feedings, next feeding estimate, sleep, tasks and
    the most recent notes.
    """
    now = datetime.now()
    day = _parse_day(date, now.date())
    key = day.isoformat()

    latest = db.feedings.list(user_id, limit=1)

    return build_daily_summary(
        day,
        feedings=db.feedings.list(user_id, date=key),
        sleep_sessions=db.sleep_sessions.list(user_id, date=key),
        tasks=db.tasks.list(user_id, date=key),
        recent_notes=db.notes.list(user_id, limit=settings.recent_notes_limit),
        now=now,
        latest_feeding=latest[0] if latest else None,
        ongoing_sleep=db.sleep_sessions.list(user_id),
        interval_hours=settings.feeding_interval_hours,
    )


@router.get("/weekly", response_model=WeeklySummary)
async def get_weekly_summary(
    end: Optional[str] = Query(default=None, pattern=DATE_PATTERN, description="Last day of the week, defaults to today"),
    db: BabyCareStorage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """Seven-day progress: feedings, sleep hours and meals per day."""
    end_day = _parse_day(end, datetime.now().date())
    return build_weekly_summary(
        end_day,
        feedings=db.feedings.list(user_id),
        sleep_sessions=db.sleep_sessions.list(user_id),
        meals=db.meals.list(user_id),
    )
