"""Sleep session API routes."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from ..dependencies import get_current_user_id, get_storage
from ..models.base import DATE_PATTERN
from ..models.sleep import SleepSession, SleepSessionCreate, SleepSessionUpdate
from ..store import BabyCareStorage

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sleep", tags=["Sleep"])


@router.get("", response_model=list[SleepSession])
async def list_sleep_sessions(
    date: Optional[str] = Query(default=None, pattern=DATE_PATTERN, description="YYYY-MM-DD"),
    db: BabyCareStorage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """Get sleep sessions by start time, most recent first.

    With ``date``, only sessions that started on that day are returned.
    """
    try:
        return db.sleep_sessions.list(user_id, date=date)
    except Exception as exc:
        log.exception("Failed to fetch sleep sessions")
        raise HTTPException(status_code=500, detail="Failed to fetch sleep sessions") from exc


@router.post("", response_model=SleepSession)
async def create_sleep_session(
    payload: SleepSessionCreate,
    db: BabyCareStorage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """Start a sleep session, or log a finished one when ``endTime`` is given."""
    return db.sleep_sessions.create(user_id, payload)


@router.put("/{session_id}", response_model=SleepSession)
async def update_sleep_session(
    session_id: str,
    payload: SleepSessionUpdate,
    db: BabyCareStorage = Depends(get_storage),
):
    """Update a sleep session; setting ``endTime`` finishes it and fills in the duration."""
    try:
        session = db.sleep_sessions.update(session_id, payload.model_dump(exclude_unset=True))
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail="Failed to update sleep session") from exc

    if session is None:
        raise HTTPException(status_code=404, detail="Sleep session not found")
    return session


@router.delete("/{session_id}")
async def delete_sleep_session(session_id: str, db: BabyCareStorage = Depends(get_storage)):
    try:
        deleted = db.sleep_sessions.delete(session_id)
    except Exception as exc:
        log.exception("Failed to delete sleep session %s", session_id)
        raise HTTPException(status_code=400, detail="Failed to delete sleep session") from exc

    if not deleted:
        raise HTTPException(status_code=404, detail="Sleep session not found")
    return {"success": True}
