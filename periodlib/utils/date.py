from typing import Optional, Union
from datetime import datetime, date, time
from dateutil.relativedelta import relativedelta
from pandas import NaT, Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, date, datetime or Timestamp to a calendar date.
    Accepts 'YYYY-MM-DD', 'YYYYMMDD' and ISO 8601 datetime strings.
    """
    if isinstance(date_like, datetime):
        return to_datetime(date_like).date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like.strip(), fmt).date()
            except ValueError:
                continue
        try:
            return to_datetime(datetime.fromisoformat(date_like.strip())).date()
        except ValueError:
            raise ValueError(f"Unsupported date string format: {date_like!r}") from None
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def to_datetime(instant: DateLike) -> datetime:
    """
    Convert an instant to a naive local datetime.

    Aware datetimes are converted to local wall-clock time, plain dates map to
    local midnight and strings must be ISO 8601.
    """
    if isinstance(instant, Timestamp):
        instant = instant.to_pydatetime()
    if isinstance(instant, datetime):
        if instant.tzinfo is not None:
            return instant.astimezone().replace(tzinfo=None)
        return instant
    if isinstance(instant, date):
        return at_local_midnight(instant)
    if isinstance(instant, str):
        try:
            return to_datetime(datetime.fromisoformat(instant.strip()))
        except ValueError:
            return at_local_midnight(to_date(instant))
    raise TypeError(f"Unsupported type for instant: {type(instant)}")


def parse_reference_date(value: object) -> Optional[date]:
    """
    Parse a persisted reference date, returning None when it is not a valid
    calendar date. Only the date part counts; no time zone is applied.
    """
    if value is None or value is NaT:
        return None
    if isinstance(value, (Timestamp, datetime)):
        return to_date(value)
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value.strip(), DATE_FMT).date()
    except ValueError:
        return None


def add_days(dt: date, days: int) -> date:
    """Step a calendar date by whole days (negative steps go back)."""
    return dt + relativedelta(days=days)


def at_local_midnight(dt: date) -> datetime:
    """Naive local datetime at 00:00 of the given calendar date."""
    return datetime.combine(dt, time.min)


def datetime_to_str(datetime_date: DateLike) -> str:
    """
    Format a date-like into 'YYYY-MM-DD' string.
    """
    return to_date(datetime_date).strftime(DATE_FMT)
