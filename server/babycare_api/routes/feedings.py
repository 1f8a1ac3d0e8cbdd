"""Feeding API routes."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from ..dependencies import get_current_user_id, get_storage
from ..models.base import DATE_PATTERN
from ..models.feeding import Feeding, FeedingCreate, FeedingUpdate
from ..store import BabyCareStorage

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/feedings", tags=["Feedings"])


@router.get("", response_model=list[Feeding])
async def list_feedings(
    date: Optional[str] = Query(default=None, pattern=DATE_PATTERN, description="YYYY-MM-DD"),
    db: BabyCareStorage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """Get feedings, most recent first, optionally restricted to one calendar day."""
    try:
        return db.feedings.list(user_id, date=date)
    except Exception as exc:
        log.exception("Failed to fetch feedings")
        raise HTTPException(status_code=500, detail="Failed to fetch feedings") from exc


@router.post("", response_model=Feeding)
async def create_feeding(
    payload: FeedingCreate,
    db: BabyCareStorage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """Log a feeding for the current caregiver."""
    return db.feedings.create(user_id, payload)


@router.put("/{feeding_id}", response_model=Feeding)
async def update_feeding(
    feeding_id: str,
    payload: FeedingUpdate,
    db: BabyCareStorage = Depends(get_storage),
):
    """Update only the fields present in the request body."""
    try:
        feeding = db.feedings.update(feeding_id, payload.model_dump(exclude_unset=True))
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail="Failed to update feeding") from exc

    if feeding is None:
        raise HTTPException(status_code=404, detail="Feeding not found")
    return feeding


@router.delete("/{feeding_id}")
async def delete_feeding(feeding_id: str, db: BabyCareStorage = Depends(get_storage)):
    try:
        deleted = db.feedings.delete(feeding_id)
    except Exception as exc:
        log.exception("Failed to delete feeding %s", feeding_id)
        raise HTTPException(status_code=400, detail="Failed to delete feeding") from exc

    if not deleted:
        raise HTTPException(status_code=404, detail="Feeding not found")
    return {"success": True}
