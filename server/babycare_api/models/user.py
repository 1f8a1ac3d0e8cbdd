"""Caregiver account models."""
from pydantic import BaseModel


class User(BaseModel):
    """Stored caregiver account."""

    id: str
    username: str
    password: str


class UserPublic(BaseModel):
    """Caregiver account as exposed over the API."""

    id: str
    username: str
