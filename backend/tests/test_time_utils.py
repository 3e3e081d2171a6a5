from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from app.core.time_utils import date_from_storage, parse_date_key, short_label, utc_midnight


def test_parse_plain_date_string():
    assert parse_date_key("2025-01-05") == date(2025, 1, 5)


def test_parse_naive_datetime_keeps_local_calendar_day():
    # late evening local time must not roll into the next day
    assert parse_date_key("2025-01-05T23:30:00") == date(2025, 1, 5)
    assert parse_date_key(datetime(2025, 1, 5, 23, 59)) == date(2025, 1, 5)


def test_parse_aware_datetime_uses_configured_zone():
    ts = datetime(2025, 1, 6, 3, 0, tzinfo=timezone.utc)
    assert parse_date_key(ts, "America/Los_Angeles") == date(2025, 1, 5)
    assert parse_date_key("2025-01-06T03:00:00Z", "America/Los_Angeles") == date(2025, 1, 5)
    assert parse_date_key(ts, "Asia/Tokyo") == date(2025, 1, 6)


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_date_key("05/01/2025")
    with pytest.raises(ValueError):
        parse_date_key("")


def test_utc_midnight_anchor():
    key = utc_midnight(date(2025, 1, 5))
    assert key == datetime(2025, 1, 5, tzinfo=timezone.utc)
    assert key.tzinfo is timezone.utc


def test_storage_roundtrip_west_of_utc():
    key = utc_midnight(date(2025, 1, 5))
    # the same instant seen from New York is Jan 4, 19:00
    seen_in_ny = key.astimezone(ZoneInfo("America/New_York"))
    assert seen_in_ny.day == 4
    assert date_from_storage(seen_in_ny) == date(2025, 1, 5)


def test_storage_naive_value_treated_as_utc():
    assert date_from_storage(datetime(2025, 3, 9, 0, 0)) == date(2025, 3, 9)


def test_short_label():
    assert short_label(date(2025, 1, 5)) == "Jan 5"
    assert short_label(date(2025, 11, 23)) == "Nov 23"
