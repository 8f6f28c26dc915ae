"""Pydantic schemas for API request/response validation.

Field names on the wire are camelCase; Python code uses the snake_case
attribute names.
"""

from pydantic import BaseModel, Field, field_serializer, field_validator
from typing import Any, Dict, Optional
from datetime import date, datetime, timezone

from fitness_tracker.models.training import ActivityType


# Training timestamps are accepted without a zone and emitted as UTC with millis
TIMESTAMP_INPUT_FORMAT = "%Y-%m-%dT%H:%M:%S"
TIMESTAMP_OUTPUT_FORMAT = "%Y-%m-%dT%H:%M:%S.%f+00:00"


def parse_timestamp(value: Any) -> Any:
    """Parse a wire timestamp into a naive UTC datetime."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, str):
        for fmt in (TIMESTAMP_INPUT_FORMAT, TIMESTAMP_OUTPUT_FORMAT):
            try:
                return datetime.strptime(value, fmt)
            except ValueError:
                continue
        raise ValueError(
            f"Invalid timestamp '{value}', expected yyyy-MM-dd'T'HH:mm:ss"
        )
    return value


def format_timestamp(value: datetime) -> str:
    """Render a naive UTC datetime as ``yyyy-MM-dd'T'HH:mm:ss.SSS+00:00``."""
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}+00:00"


# ============== User Schemas ==============

class UserDto(BaseModel):
    id: Optional[int] = None
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    birthdate: date
    email: str = Field(..., min_length=1)

    class Config:
        from_attributes = True
        populate_by_name = True


class UserSimpleDto(BaseModel):
    """Lightweight listing entry."""
    id: Optional[int] = None
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")

    class Config:
        from_attributes = True
        populate_by_name = True


class UserEmailDto(BaseModel):
    """Result entry of an email search."""
    id: Optional[int] = None
    email: str

    class Config:
        from_attributes = True
        populate_by_name = True


class UserPatch(BaseModel):
    """Update payload for an existing user.

    Shares the field names of ``UserDto`` but every field is optional.
    Pydantic records which fields the client actually sent, so a field
    left out of the body is never mistaken for one that was supplied.
    A supplied ``null`` leaves the stored value untouched as well, since
    none of the user columns may be cleared. ``id`` is accepted for
    compatibility with full ``UserDto`` bodies and ignored; the path
    identifies the user.
    """
    id: Optional[int] = None
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    birthdate: Optional[date] = None
    email: Optional[str] = Field(None, min_length=1)

    class Config:
        populate_by_name = True

    def changes(self) -> Dict[str, Any]:
        """Return the supplied, non-null attribute values keyed by column name."""
        return {
            name: getattr(self, name)
            for name in ("birthdate", "first_name", "email", "last_name")
            if name in self.model_fields_set and getattr(self, name) is not None
        }


# ============== Training Schemas ==============

class TrainingTimes(BaseModel):
    """Start/end timestamps shared by the training schemas."""
    start_time: datetime = Field(..., alias="startTime")
    end_time: datetime = Field(..., alias="endTime")

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def parse_times(cls, value):
        return parse_timestamp(value)

    @field_serializer("start_time", "end_time")
    def serialize_times(self, value: datetime) -> str:
        return format_timestamp(value)


class SimpleTrainingDto(TrainingTimes):
    """Training creation payload referencing its owner by id."""
    user_id: int = Field(..., alias="userId")
    activity_type: ActivityType = Field(..., alias="activityType")
    distance: float = Field(0, ge=0)
    average_speed: float = Field(0, ge=0, alias="averageSpeed")

    class Config:
        populate_by_name = True


class TrainingDto(TrainingTimes):
    id: Optional[int] = None
    user: UserDto
    activity_type: ActivityType = Field(..., alias="activityType")
    distance: float = Field(0, ge=0)
    average_speed: float = Field(0, ge=0, alias="averageSpeed")

    class Config:
        from_attributes = True
        populate_by_name = True
