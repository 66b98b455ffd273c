from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def date_key(dt: datetime) -> str:
    """Calendar key used for same-day comparisons; time of day is ignored."""
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"


def to_utc_naive(dt: datetime) -> datetime:
    """Aware datetimes are converted to UTC and stripped; naive ones are taken as UTC already."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)
