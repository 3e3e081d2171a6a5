from datetime import date

from pydantic import BaseModel, ConfigDict

from app.schemas.daily_progress import DailyProgressRead


class ChallengeTargetsRead(BaseModel):
    total_days: int
    flashcard_target: int
    hours_target: float

    model_config = ConfigDict(from_attributes=True)


class ChallengeSummaryRead(BaseModel):
    total_flashcards: int
    total_hours: float
    current_percent: int
    days_completed: int
    days_remaining: int
    flashcards_still_needed: int
    hours_still_needed: float
    required_daily_flashcards: int
    required_daily_hours: float
    flashcards_percent: float
    hours_percent: float
    challenge_complete: bool

    model_config = ConfigDict(from_attributes=True)


class ChartPointRead(BaseModel):
    date: date
    label: str  # e.g. "Jan 5"
    flashcards_done: int
    hours_studied: float
    percent_complete: int

    model_config = ConfigDict(from_attributes=True)


class DashboardRead(BaseModel):
    summary: ChallengeSummaryRead
    targets: ChallengeTargetsRead
    chart: list[ChartPointRead]
    recent: list[DailyProgressRead]
