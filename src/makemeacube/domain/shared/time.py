"""Clock helpers. Every timestamp in the domain is an aware UTC datetime."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def as_utc(moment: datetime) -> datetime:
    """Naive values (SQLite drops the offset) are read as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)
