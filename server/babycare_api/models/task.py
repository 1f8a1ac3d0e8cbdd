"""Daily task data models."""
from typing import Literal, Optional

from .base import CamelModel, DateStr, StoredRecord

TaskCategory = Literal["diaper", "bath", "appointment", "vaccine", "other"]
TaskPriority = Literal["low", "medium", "high"]


class TaskCreate(CamelModel):
    """Payload for scheduling a care task."""

    date: DateStr
    title: str
    description: Optional[str] = None
    completed: bool = False
    category: TaskCategory
    priority: TaskPriority = "medium"


class Task(StoredRecord, TaskCreate):
    """Stored task record."""


class TaskUpdate(CamelModel):
    date: Optional[DateStr] = None
    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None
    category: Optional[TaskCategory] = None
    priority: Optional[TaskPriority] = None
