"""Meal plan data models."""
from typing import Literal, Optional

from .base import CamelModel, DateStr, StoredRecord

MealType = Literal["breakfast", "lunch", "afternoon_snack", "dinner"]


class MealCreate(CamelModel):
    """Planned meal for a day slot. Several meals may share a slot."""

    date: DateStr
    meal_type: MealType
    description: str
    notes: Optional[str] = None


class Meal(StoredRecord, MealCreate):
    """Stored meal record."""


class MealUpdate(CamelModel):
    date: Optional[DateStr] = None
    meal_type: Optional[MealType] = None
    description: Optional[str] = None
    notes: Optional[str] = None
