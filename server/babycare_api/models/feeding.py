"""Feeding data models."""
from typing import Literal, Optional

from .base import CamelModel, LocalDateTime, StoredRecord

FeedingType = Literal["breast", "formula", "mixed"]
FeedingSide = Literal["left", "right", "both"]


class FeedingCreate(CamelModel):
    """Payload for logging a feeding."""

    datetime: LocalDateTime
    type: FeedingType
    quantity: Optional[int] = None  # ml
    duration: Optional[int] = None  # minutes
    side: Optional[FeedingSide] = None
    notes: Optional[str] = None


class Feeding(StoredRecord, FeedingCreate):
    """Stored feeding record."""


class FeedingUpdate(CamelModel):
    """Partial feeding update. The feeding type is fixed at creation."""

    datetime: Optional[LocalDateTime] = None
    quantity: Optional[int] = None
    duration: Optional[int] = None
    side: Optional[FeedingSide] = None
    notes: Optional[str] = None
