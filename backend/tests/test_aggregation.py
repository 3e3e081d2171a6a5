from datetime import date, timedelta

from app.services.aggregation import (
    ChallengeTargets,
    DailyEntry,
    chart_points,
    current_percent,
    draft_for_date,
    percent_of_target,
    recent_activity,
    round1,
    summarize,
)


def make_days(n: int, start: date = date(2025, 1, 1), **fields) -> list[DailyEntry]:
    return [DailyEntry(date=start + timedelta(days=i), **fields) for i in range(n)]


def test_two_day_history():
    entries = [
        DailyEntry(date=date(2025, 1, 1), flashcards_done=30, hours_studied=4, percent_complete=5),
        DailyEntry(date=date(2025, 1, 2), flashcards_done=25, hours_studied=3.5, percent_complete=10),
    ]
    s = summarize(entries)
    assert s.total_flashcards == 55
    assert s.total_hours == 7.5
    assert s.current_percent == 10
    assert s.days_completed == 2
    assert s.days_remaining == 18
    assert s.flashcards_still_needed == 519
    assert s.required_daily_flashcards == 29  # ceil(519 / 18)
    assert s.hours_still_needed == 72.5
    assert s.required_daily_hours == 4.0  # 72.5 / 18 = 4.03
    assert not s.challenge_complete


def test_empty_history():
    s = summarize([])
    assert s.total_flashcards == 0
    assert s.total_hours == 0
    assert s.current_percent == 0
    assert s.days_completed == 0
    assert s.days_remaining == 20
    assert s.required_daily_flashcards == 29  # ceil(574 / 20)
    assert s.required_daily_hours == 4.0
    assert s.flashcards_percent == 0
    assert s.hours_percent == 0


def test_full_challenge_requires_nothing_more():
    s = summarize(make_days(20, flashcards_done=1, hours_studied=0.5))
    assert s.days_remaining == 0
    assert s.challenge_complete
    # deficit remains but no per-day requirement once days run out
    assert s.flashcards_still_needed == 554
    assert s.required_daily_flashcards == 0
    assert s.required_daily_hours == 0


def test_days_remaining_never_negative():
    s = summarize(make_days(25))
    assert s.days_completed == 25
    assert s.days_remaining == 0


def test_overshoot_clamps_needed_and_percent():
    s = summarize(make_days(10, flashcards_done=60, hours_studied=9))
    assert s.flashcards_still_needed == 0
    assert s.hours_still_needed == 0
    assert s.required_daily_flashcards == 0
    assert s.flashcards_percent == 100
    assert s.hours_percent == 100


def test_percent_is_a_ratchet():
    high_first = [
        DailyEntry(date=date(2025, 1, 1), percent_complete=40),
        DailyEntry(date=date(2025, 1, 2), percent_complete=15),
    ]
    assert current_percent(high_first) == 40
    assert current_percent(list(reversed(high_first))) == 40
    assert current_percent([]) == 0


def test_percent_of_target():
    assert percent_of_target(287, 574) == 50.0
    assert percent_of_target(600, 574) == 100
    assert percent_of_target(0, 80) == 0
    assert percent_of_target(5, 0) == 100


def test_round1_is_half_up():
    assert round1(4.25) == 4.3
    assert round1(4.0277) == 4.0


def test_custom_targets():
    targets = ChallengeTargets(total_days=10, flashcard_target=100, hours_target=20)
    s = summarize(make_days(2, flashcards_done=10, hours_studied=2), targets)
    assert s.days_remaining == 8
    assert s.required_daily_flashcards == 10
    assert s.required_daily_hours == 2.0
    assert s.flashcards_percent == 20.0


def test_skipped_days_only_count_rows():
    entries = [
        DailyEntry(date=date(2025, 1, 1), flashcards_done=30),
        DailyEntry(date=date(2025, 1, 9), flashcards_done=30),
    ]
    assert summarize(entries).days_remaining == 18


def test_chart_points_sorted_with_labels():
    entries = [
        DailyEntry(date=date(2025, 1, 3), flashcards_done=3),
        DailyEntry(date=date(2025, 1, 1), flashcards_done=1),
    ]
    points = chart_points(entries)
    assert [p.label for p in points] == ["Jan 1", "Jan 3"]
    assert [p.flashcards_done for p in points] == [1, 3]


def test_recent_activity_newest_first():
    entries = make_days(10)
    recent = recent_activity(entries)
    assert len(recent) == 8
    assert recent[0].date == date(2025, 1, 10)
    assert recent[-1].date == date(2025, 1, 3)


def test_draft_uses_saved_entry():
    entries = [DailyEntry(date=date(2025, 1, 2), flashcards_done=12, hours_studied=1.5, percent_complete=20)]
    draft = draft_for_date(entries, date(2025, 1, 2))
    assert draft.saved
    assert draft.flashcards_done == 12
    assert draft.hours_studied == 1.5


def test_draft_for_new_day_carries_percent_forward():
    entries = [
        DailyEntry(date=date(2025, 1, 1), percent_complete=35),
        DailyEntry(date=date(2025, 1, 2), percent_complete=20),
    ]
    draft = draft_for_date(entries, date(2025, 1, 3))
    assert not draft.saved
    assert draft.flashcards_done == 0
    assert draft.hours_studied == 0
    assert draft.percent_complete == 35
