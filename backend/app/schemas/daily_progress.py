from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.config import settings
from app.core.constants import MAX_DAILY_FLASHCARDS, MAX_DAILY_HOURS
from app.core.time_utils import parse_date_key


class DailyProgressBase(BaseModel):
    flashcards_done: int = Field(0, ge=0, le=MAX_DAILY_FLASHCARDS)
    hours_studied: float = Field(0, ge=0, le=MAX_DAILY_HOURS)  # e.g. 3.5
    percent_complete: int = Field(0, ge=0, le=100)


class DailyProgressUpsert(DailyProgressBase):
    """Body of POST /daily-progress; `date` is the selected day, 'YYYY-MM-DD'."""

    date: date

    model_config = ConfigDict(extra="ignore")

    @field_validator("date", mode="before")
    @classmethod
    def _to_calendar_date(cls, v):
        return parse_date_key(v, settings.timezone)


class DailyProgressRead(DailyProgressBase):
    id: int
    date: date
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DailyDraftRead(DailyProgressBase):
    """Form values for one day; `saved` is False when nothing is stored yet."""

    date: date
    saved: bool

    model_config = ConfigDict(from_attributes=True)
