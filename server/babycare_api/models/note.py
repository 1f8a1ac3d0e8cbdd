"""Free-form note data models."""
from typing import Literal, Optional

from .base import CamelModel, LocalDateTime, StoredRecord

NoteCategory = Literal["milestone", "concern", "general", "medical"]


class NoteCreate(CamelModel):
    datetime: LocalDateTime
    title: Optional[str] = None
    content: str
    category: NoteCategory = "general"


class Note(StoredRecord, NoteCreate):
    """Stored note record."""


class NoteUpdate(CamelModel):
    datetime: Optional[LocalDateTime] = None
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[NoteCategory] = None
