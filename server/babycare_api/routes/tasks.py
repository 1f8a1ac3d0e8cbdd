"""Daily task API routes."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from ..dependencies import get_current_user_id, get_storage
from ..models.base import DATE_PATTERN
from ..models.task import Task, TaskCreate, TaskUpdate
from ..store import BabyCareStorage

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


@router.get("", response_model=list[Task])
async def list_tasks(
    date: Optional[str] = Query(default=None, pattern=DATE_PATTERN, description="YYYY-MM-DD"),
    db: BabyCareStorage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """Get care tasks, newest first, optionally for a single day."""
    try:
        return db.tasks.list(user_id, date=date)
    except Exception as exc:
        log.exception("Failed to fetch tasks")
        raise HTTPException(status_code=500, detail="Failed to fetch tasks") from exc


@router.post("", response_model=Task)
async def create_task(
    payload: TaskCreate,
    db: BabyCareStorage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    return db.tasks.create(user_id, payload)


@router.put("/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    payload: TaskUpdate,
    db: BabyCareStorage = Depends(get_storage),
):
    """Update a task, e.g. ``{"completed": true}`` to tick it off."""
    try:
        task = db.tasks.update(task_id, payload.model_dump(exclude_unset=True))
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail="Failed to update task") from exc

    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.delete("/{task_id}")
async def delete_task(task_id: str, db: BabyCareStorage = Depends(get_storage)):
    try:
        deleted = db.tasks.delete(task_id)
    except Exception as exc:
        log.exception("Failed to delete task %s", task_id)
        raise HTTPException(status_code=400, detail="Failed to delete task") from exc

    if not deleted:
        raise HTTPException(status_code=404, detail="Task not found")
    return {"success": True}
