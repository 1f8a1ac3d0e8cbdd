"""Shared pydantic building blocks for baby-care records."""
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def to_local_naive(value: datetime) -> datetime:
    """Convert offset-aware timestamps to naive server-local time."""
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value


# Timestamps are stored naive in server-local time so calendar-day filters
# match what the caregiver sees on the wall clock.
LocalDateTime = Annotated[datetime, AfterValidator(to_local_naive)]

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

DateStr = Annotated[str, Field(pattern=DATE_PATTERN, description="YYYY-MM-DD")]


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, accepting either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StoredRecord(CamelModel):
    """Fields assigned by the store when a record is created."""

    id: str
    user_id: str
    created_at: datetime
