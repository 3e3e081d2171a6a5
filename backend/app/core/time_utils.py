from datetime import date, datetime, timezone


def resolve_tz(tz_name: str | None = None):
    """Return the tzinfo for `tz_name`.

    - 'local' or None: system local timezone.
    - IANA name (e.g., 'America/New_York'): that zone, falling back to local
      when the name is unknown.
    """
    if tz_name and tz_name != "local":
        try:
            from zoneinfo import ZoneInfo
            return ZoneInfo(tz_name)
        except Exception:
            pass
    return datetime.now().astimezone().tzinfo


def parse_date_key(value, tz_name: str | None = None) -> date:
    """Reduce a selected day to its local calendar date.

    Accepts:
      - 'YYYY-MM-DD' strings (taken as-is)
      - ISO datetime strings, e.g. '2025-01-05T23:30:00' or with an offset
      - date / datetime objects

    Naive datetimes are already local wall-clock time, so only their
    calendar components are kept. Aware datetimes are first moved into
    `tz_name` (system tz when 'local').
    """
    if isinstance(value, str):
        s = value.strip()
        if s == "":
            raise ValueError("date must not be empty")
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            value = date.fromisoformat(s) if len(s) == 10 else datetime.fromisoformat(s)
        except ValueError:
            raise ValueError("date must be in YYYY-MM-DD format")

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(resolve_tz(tz_name))
        return date(value.year, value.month, value.day)
    if isinstance(value, date):
        return value
    raise ValueError(f"Unsupported date value: {value!r}")


def utc_midnight(d: date) -> datetime:
    """Storage key for a calendar date: midnight UTC of that same date."""
    return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)


def date_from_storage(instant) -> date:
    """Recover the calendar date from a stored UTC-midnight instant.

    Uses the UTC components directly; the value is never converted into a
    display timezone, which would shift the day west of UTC. Naive values
    (SQLite drops tzinfo) are treated as UTC.
    """
    if isinstance(instant, datetime):
        if instant.tzinfo is not None:
            instant = instant.astimezone(timezone.utc)
        return date(instant.year, instant.month, instant.day)
    if isinstance(instant, date):
        return instant
    raise ValueError(f"Unsupported stored date: {instant!r}")


def short_label(d: date) -> str:
    """Chart label, e.g. date(2025, 1, 5) -> 'Jan 5'."""
    return f"{d.strftime('%b')} {d.day}"
