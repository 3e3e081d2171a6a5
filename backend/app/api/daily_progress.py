import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.time_utils import date_from_storage, parse_date_key, resolve_tz, utc_midnight
from app.db import get_db
from app.models.daily_progress import DailyProgress
from app.schemas.daily_progress import DailyDraftRead, DailyProgressRead, DailyProgressUpsert
from app.schemas.summary import (
    ChallengeSummaryRead,
    ChallengeTargetsRead,
    ChartPointRead,
    DashboardRead,
)
from app.services.aggregation import (
    ChallengeTargets,
    DailyEntry,
    chart_points,
    draft_for_date,
    recent_activity,
    summarize,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/daily-progress", tags=["daily-progress"])


def _failure(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": message})


def current_targets() -> ChallengeTargets:
    return ChallengeTargets(
        total_days=settings.challenge_days,
        flashcard_target=settings.flashcard_target,
        hours_target=settings.hours_target,
    )


def to_read(row: DailyProgress) -> DailyProgressRead:
    return DailyProgressRead(
        id=row.id,
        date=date_from_storage(row.date),
        flashcards_done=row.flashcards_done,
        hours_studied=float(row.hours_studied),
        percent_complete=row.percent_complete,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_entry(row: DailyProgress) -> DailyEntry:
    return DailyEntry(
        date=date_from_storage(row.date),
        flashcards_done=row.flashcards_done,
        hours_studied=float(row.hours_studied),
        percent_complete=row.percent_complete,
    )


def load_history(db: Session) -> list[DailyProgress]:
    return db.query(DailyProgress).order_by(DailyProgress.date).all()


@router.get("", response_model=list[DailyProgressRead])
def list_daily_progress(db: Session = Depends(get_db)):
    """All daily entries, oldest first."""
    try:
        rows = load_history(db)
    except SQLAlchemyError:
        logger.exception("Error fetching daily progress")
        return _failure("Failed to fetch daily progress")
    return [to_read(r) for r in rows]


@router.post("", response_model=DailyProgressRead)
def upsert_daily_progress(payload: DailyProgressUpsert, db: Session = Depends(get_db)):
    """Create or overwrite the entry for `payload.date`."""
    key = utc_midnight(payload.date)
    try:
        row = db.query(DailyProgress).filter(DailyProgress.date == key).first()
        if not row:
            row = DailyProgress(
                date=key,
                flashcards_done=payload.flashcards_done,
                hours_studied=payload.hours_studied,
                percent_complete=payload.percent_complete,
            )
            db.add(row)
        else:
            row.flashcards_done = payload.flashcards_done
            row.hours_studied = payload.hours_studied
            row.percent_complete = payload.percent_complete
        db.commit()
        db.refresh(row)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error updating daily progress for %s", payload.date)
        return _failure("Failed to update daily progress")

    logger.info(
        "Saved progress for %s: %d cards, %.1fh, %d%%",
        payload.date,
        payload.flashcards_done,
        payload.hours_studied,
        payload.percent_complete,
    )
    return to_read(row)


@router.get("/summary", response_model=DashboardRead)
def get_summary(db: Session = Depends(get_db)):
    """Totals, projections and chart series recomputed from the full history."""
    try:
        rows = load_history(db)
    except SQLAlchemyError:
        logger.exception("Error building progress summary")
        return _failure("Failed to fetch daily progress")

    entries = [to_entry(r) for r in rows]
    targets = current_targets()
    summary = summarize(entries, targets)
    by_date = {e.date: r for e, r in zip(entries, rows)}

    return DashboardRead(
        summary=ChallengeSummaryRead.model_validate(summary),
        targets=ChallengeTargetsRead.model_validate(targets),
        chart=[ChartPointRead.model_validate(p) for p in chart_points(entries)],
        recent=[to_read(by_date[e.date]) for e in recent_activity(entries)],
    )


@router.get("/draft", response_model=DailyDraftRead)
def get_draft(
    day: Optional[str] = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    """Form values for the selected day (defaults to today)."""
    try:
        selected = (
            parse_date_key(day, settings.timezone)
            if day
            else datetime.now(resolve_tz(settings.timezone)).date()
        )
    except ValueError:
        logger.exception("Error parsing draft date %r", day)
        return _failure("Failed to fetch daily progress")

    try:
        rows = load_history(db)
    except SQLAlchemyError:
        logger.exception("Error loading draft for %s", selected)
        return _failure("Failed to fetch daily progress")

    return DailyDraftRead.model_validate(draft_for_date([to_entry(r) for r in rows], selected))
