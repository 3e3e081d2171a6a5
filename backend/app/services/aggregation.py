"""Challenge aggregation and projection.

Everything here is pure: callers load the full daily history, hand it in,
and get an immutable snapshot back. Nothing is cached between loads.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Sequence

from app.core.constants import (
    CHALLENGE_DAYS,
    FLASHCARD_TARGET,
    HOURS_TARGET,
    RECENT_ACTIVITY_LIMIT,
)
from app.core.time_utils import short_label


@dataclass(frozen=True)
class DailyEntry:
    date: date
    flashcards_done: int = 0
    hours_studied: float = 0.0
    percent_complete: int = 0


@dataclass(frozen=True)
class ChallengeTargets:
    total_days: int = CHALLENGE_DAYS
    flashcard_target: int = FLASHCARD_TARGET
    hours_target: float = HOURS_TARGET


@dataclass(frozen=True)
class ChallengeSummary:
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

    @property
    def challenge_complete(self) -> bool:
        return self.days_remaining == 0


@dataclass(frozen=True)
class ChartPoint:
    date: date
    label: str
    flashcards_done: int
    hours_studied: float
    percent_complete: int


@dataclass(frozen=True)
class DailyDraft:
    date: date
    flashcards_done: int
    hours_studied: float
    percent_complete: int
    saved: bool


def round1(x: float) -> float:
    """Round half-up to one decimal place, e.g. 4.25 -> 4.3."""
    return float(Decimal(x).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def percent_of_target(total: float, target: float) -> float:
    """Progress toward `target` as a percentage, clamped to 100."""
    if target <= 0:
        return 100.0
    return min(total / target * 100, 100.0)


def current_percent(entries: Iterable[DailyEntry]) -> int:
    # Ratchet: highest snapshot wins regardless of entry order
    return max((e.percent_complete for e in entries), default=0)


def days_remaining(days_completed: int, total_days: int = CHALLENGE_DAYS) -> int:
    return max(0, total_days - days_completed)


def required_daily_flashcards(still_needed: int, remaining_days: int) -> int:
    if remaining_days <= 0:
        return 0
    return math.ceil(still_needed / remaining_days)


def required_daily_hours(still_needed: float, remaining_days: int) -> float:
    if remaining_days <= 0:
        return 0.0
    return round1(still_needed / remaining_days)


def summarize(
    entries: Sequence[DailyEntry],
    targets: Optional[ChallengeTargets] = None,
) -> ChallengeSummary:
    """Compute totals, completion percentages and the per-day pace needed
    to finish the challenge from the remaining days.

    `days_completed` is a plain row count; skipped calendar days are not
    detected and simply leave more days in the denominator.
    """
    targets = targets or ChallengeTargets()

    total_flashcards = sum(e.flashcards_done for e in entries)
    total_hours = float(sum(e.hours_studied for e in entries))
    completed = len(entries)
    remaining = days_remaining(completed, targets.total_days)

    flashcards_needed = max(0, targets.flashcard_target - total_flashcards)
    hours_needed = max(0.0, targets.hours_target - total_hours)

    return ChallengeSummary(
        total_flashcards=total_flashcards,
        total_hours=total_hours,
        current_percent=current_percent(entries),
        days_completed=completed,
        days_remaining=remaining,
        flashcards_still_needed=flashcards_needed,
        hours_still_needed=hours_needed,
        required_daily_flashcards=required_daily_flashcards(flashcards_needed, remaining),
        required_daily_hours=required_daily_hours(hours_needed, remaining),
        flashcards_percent=percent_of_target(total_flashcards, targets.flashcard_target),
        hours_percent=percent_of_target(total_hours, targets.hours_target),
    )


def chart_points(entries: Sequence[DailyEntry]) -> list[ChartPoint]:
    """One point per entry, ordered by date."""
    return [
        ChartPoint(
            date=e.date,
            label=short_label(e.date),
            flashcards_done=e.flashcards_done,
            hours_studied=e.hours_studied,
            percent_complete=e.percent_complete,
        )
        for e in sorted(entries, key=lambda e: e.date)
    ]


def recent_activity(
    entries: Sequence[DailyEntry], limit: int = RECENT_ACTIVITY_LIMIT
) -> list[DailyEntry]:
    """Latest `limit` entries, newest first."""
    return sorted(entries, key=lambda e: e.date, reverse=True)[:limit]


def draft_for_date(entries: Sequence[DailyEntry], day: date) -> DailyDraft:
    """Form values for `day`: the saved entry, or an empty day that carries
    the current percent forward."""
    for e in entries:
        if e.date == day:
            return DailyDraft(
                date=day,
                flashcards_done=e.flashcards_done,
                hours_studied=e.hours_studied,
                percent_complete=e.percent_complete,
                saved=True,
            )
    return DailyDraft(
        date=day,
        flashcards_done=0,
        hours_studied=0.0,
        percent_complete=current_percent(entries),
        saved=False,
    )
