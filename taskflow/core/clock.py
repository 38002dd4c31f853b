"""UTC time helpers for task timestamps."""

from datetime import UTC, datetime, timedelta


_MIN_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Normalize a timestamp to UTC.

    Naive timestamps are taken to already be UTC and are re-tagged; aware
    timestamps are converted.
    """
    if value is None:
        return None
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def next_update_time(previous: datetime) -> datetime:
    """Return the current UTC time, strictly later than ``previous``."""
    now = utc_now()
    floor = ensure_utc(previous)
    if now <= floor:
        return floor + _MIN_TICK
    return now
