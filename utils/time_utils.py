"""Timestamp conversion and time span formatting utilities."""

import math
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional, Union

from dateutil import tz

from config import config

# Milliseconds since the Unix epoch; NaN marks an unparseable date
Timestamp = float
DateLike = Union[datetime, date, int, float]

INVALID_TIMESTAMP: Timestamp = float("nan")

_EPOCH = datetime(1970, 1, 1, tzinfo=tz.UTC)
_MILLISECOND = timedelta(milliseconds=1)


def is_invalid_timestamp(value) -> bool:
    """Return True if value is the invalid-date sentinel."""
    return isinstance(value, float) and math.isnan(value)


def to_timestamp(moment: datetime) -> Timestamp:
    """
    Convert a datetime into milliseconds since the Unix epoch.

    Naive datetimes are interpreted in config.local_tz. Sub-millisecond
    precision is floored away.

    Args:
        moment: Datetime to convert

    Returns:
        Milliseconds since the epoch as a float
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=config.local_tz)
    return float((moment - _EPOCH) // _MILLISECOND)


def _from_timestamp(value: Union[int, float], zone: tzinfo) -> Optional[datetime]:
    # NaN and timestamps outside datetime's years 1..9999 have no calendar fields
    if is_invalid_timestamp(value):
        return None
    try:
        return (_EPOCH + timedelta(milliseconds=value)).astimezone(zone)
    except OverflowError:
        return None


def _check_date_like(value) -> None:
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool) or not isinstance(value, (datetime, date, int, float)):
        raise TypeError(
            f"expected datetime, date or millisecond timestamp, got {type(value).__name__}"
        )


def to_local_datetime(value: DateLike) -> Optional[datetime]:
    """
    Resolve a date/time value into a datetime carrying local calendar fields.

    Datetimes are returned unchanged, dates become midnight of that day and
    timestamps are converted into config.local_tz.

    Args:
        value: datetime, date or millisecond timestamp

    Returns:
        Datetime, or None for the invalid-date sentinel or a timestamp
        outside the years 1 to 9999
    """
    _check_date_like(value)
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    return _from_timestamp(value, config.local_tz)


def to_utc_datetime(value: DateLike) -> Optional[datetime]:
    """
    Resolve a date/time value into an aware UTC datetime.

    Naive datetimes and plain dates are taken to already be in UTC.

    Args:
        value: datetime, date or millisecond timestamp

    Returns:
        UTC datetime, or None for the invalid-date sentinel or a timestamp
        outside the years 1 to 9999
    """
    _check_date_like(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=tz.UTC)
        return value.astimezone(tz.UTC)
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=tz.UTC)
    return _from_timestamp(value, tz.UTC)


def format_time_span(date1: DateLike, date2: DateLike) -> str:
    """
    Format the span between two dates as "HH:mm:ss.sss".

    Each field is the absolute difference of the matching clock field of the
    two dates, computed on its own. Nothing borrows or carries between
    fields, so 10:59 against 11:00 gives "01:59:00.000".

    Args:
        date1: First date/time value
        date2: Second date/time value

    Returns:
        Zero-padded span string, or "NaN:NaN:NaN.NaN" for an invalid date
    """
    first = to_local_datetime(date1)
    second = to_local_datetime(date2)
    if first is None or second is None:
        return "NaN:NaN:NaN.NaN"

    hours = abs(first.hour - second.hour)
    minutes = abs(first.minute - second.minute)
    seconds = abs(first.second - second.second)
    millis = abs(first.microsecond // 1000 - second.microsecond // 1000)

    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"
