"""Record shapes for the Supabase tables this app reads and writes."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class BackendError(Exception):
    """A hosted-backend call failed; the message is safe to show to the user."""


class Mood(str, Enum):
    GREAT = "great"
    GOOD = "good"
    OKAY = "okay"
    LOW = "low"
    DIFFICULT = "difficult"


class Record(BaseModel):
    # Tables may carry columns the app does not use.
    model_config = ConfigDict(extra="ignore")


class AuthSession(Record):
    user_id: str
    email: str | None = None
    access_token: str = ""
    refresh_token: str = ""


class Profile(Record):
    id: str | None = None
    user_id: str
    full_name: str | None = None
    created_at: datetime | None = None


class MoodEntry(Record):
    id: str | None = None
    user_id: str
    mood: Mood
    notes: str | None = None
    created_at: datetime


class MoodCheckIn(Record):
    """Just the timestamp of a mood_entries row."""

    created_at: datetime


class JournalEntry(Record):
    id: str
    user_id: str
    title: str
    content: str
    mood: Mood | None = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime | None = None

    @field_validator("mood", mode="before")
    @classmethod
    def blank_mood_is_none(cls, v):
        return v or None

    @field_validator("tags", mode="before")
    @classmethod
    def null_tags_are_empty(cls, v):
        return v or []


class CounselorBooking(Record):
    id: str | None = None
    user_id: str
    counselor_name: str
    appointment_date: date
    appointment_time: str = Field(pattern=r"^\d{2}:\d{2}(:\d{2})?$")
    notes: str | None = None
    status: str = "scheduled"
    created_at: datetime | None = None

    @field_validator("appointment_time")
    @classmethod
    def trim_seconds(cls, v: str) -> str:
        # Postgres `time` columns come back as HH:MM:SS.
        return v[:5]


def parse_rows(model: type[Record], rows: list | None) -> list:
    """Validate raw rows into model instances, raising BackendError on a malformed row."""
    try:
        return [model.model_validate(row) for row in (rows or [])]
    except ValidationError as e:
        raise BackendError(f"Unexpected data from server for {model.__name__}: {e.error_count()} invalid field(s)") from e
