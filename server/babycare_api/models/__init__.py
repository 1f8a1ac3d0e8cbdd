"""Pydantic models for baby-care records and summaries."""
from .feeding import Feeding, FeedingCreate, FeedingUpdate
from .sleep import SleepSession, SleepSessionCreate, SleepSessionUpdate
from .meal import Meal, MealCreate, MealUpdate
from .task import Task, TaskCreate, TaskUpdate
from .note import Note, NoteCreate, NoteUpdate
from .user import User, UserPublic
from .summary import DailySummary, DayProgress, WeeklySummary

__all__ = [
    "Feeding",
    "FeedingCreate",
    "FeedingUpdate",
    "SleepSession",
    "SleepSessionCreate",
    "SleepSessionUpdate",
    "Meal",
    "MealCreate",
    "MealUpdate",
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "Note",
    "NoteCreate",
    "NoteUpdate",
    "User",
    "UserPublic",
    "DailySummary",
    "DayProgress",
    "WeeklySummary",
]
