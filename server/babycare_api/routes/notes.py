"""Note API routes."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from ..dependencies import get_current_user_id, get_storage
from ..models.base import DATE_PATTERN
from ..models.note import Note, NoteCreate, NoteUpdate
from ..store import BabyCareStorage

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notes", tags=["Notes"])


@router.get("", response_model=list[Note])
async def list_notes(
    date: Optional[str] = Query(default=None, pattern=DATE_PATTERN, description="YYYY-MM-DD"),
    limit: Optional[int] = Query(default=None, ge=1, description="Maximum number of notes"),
    db: BabyCareStorage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """Get notes, most recent first. ``limit`` is applied after the date filter."""
    try:
        return db.notes.list(user_id, date=date, limit=limit)
    except Exception as exc:
        log.exception("Failed to fetch notes")
        raise HTTPException(status_code=500, detail="Failed to fetch notes") from exc


@router.post("", response_model=Note)
async def create_note(
    payload: NoteCreate,
    db: BabyCareStorage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    return db.notes.create(user_id, payload)


@router.put("/{note_id}", response_model=Note)
async def update_note(
    note_id: str,
    payload: NoteUpdate,
    db: BabyCareStorage = Depends(get_storage),
):
    try:
        note = db.notes.update(note_id, payload.model_dump(exclude_unset=True))
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail="Failed to update note") from exc

    if note is None:
        raise HTTPException(status_code=404, detail="Note not found")
    return note


@router.delete("/{note_id}")
async def delete_note(note_id: str, db: BabyCareStorage = Depends(get_storage)):
    try:
        deleted = db.notes.delete(note_id)
    except Exception as exc:
        log.exception("Failed to delete note %s", note_id)
        raise HTTPException(status_code=400, detail="Failed to delete note") from exc

    if not deleted:
        raise HTTPException(status_code=404, detail="Note not found")
    return {"success": True}
