"""Calendar-aligned date buckets.

Buckets compare calendar fields (day, month, year) in the display timezone,
never raw multiples of 24 hours: an item from 23:00 two days ago is not
"yesterday" even though it is less than 48h old.
"""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from portal.components.filtering.models import DateBucket


def resolve_timezone(name: str | None) -> ZoneInfo | timezone:
    if not name or name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def local_date(timestamp_ms: int, tz) -> date:
    """Calendar date of an epoch-ms timestamp in ``tz``."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=tz).date()


def reference_date(now: datetime, tz) -> date:
    """Calendar date of the evaluation instant. Naive instants are taken as ``tz`` local time."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=tz)
    return now.astimezone(tz).date()


def _previous_month(day: date) -> tuple[int, int]:
    if day.month == 1:
        return day.year - 1, 12
    return day.year, day.month - 1


def in_bucket(item_day: date, bucket: DateBucket, today: date) -> bool:
    """Whether ``item_day`` falls into ``bucket`` relative to ``today``."""
    if bucket is DateBucket.today:
        return item_day == today
    if bucket is DateBucket.yesterday:
        return item_day == today - timedelta(days=1)
    if bucket is DateBucket.this_month:
        return (item_day.year, item_day.month) == (today.year, today.month)
    if bucket is DateBucket.last_month:
        return (item_day.year, item_day.month) == _previous_month(today)
    if bucket is DateBucket.this_year:
        return item_day.year == today.year
    if bucket is DateBucket.last_year:
        return item_day.year == today.year - 1
    raise ValueError(f"Unknown date bucket: {bucket!r}")


def buckets_for(item_day: date, today: date) -> list[DateBucket]:
    """Every bucket an item day belongs to, in display order."""
    return [bucket for bucket in DateBucket if in_bucket(item_day, bucket, today)]
