"""Conversions between date values, timestamps and display strings."""

from datetime import timedelta

from datecalc.parsing import EPOCH, to_datetime, to_local, to_utc
from datecalc.types import DAY_NAMES, DateLike

_ONE_MS = timedelta(milliseconds=1)


def date_to_timestamp(date: DateLike) -> int:
    """Return milliseconds elapsed since 1970-01-01T00:00:00Z.

    Naive values are read as UTC.

    Example:
        date_to_timestamp("04 Dec 1995 00:12:00 UTC")  # 818035920000
    """
    return (to_utc(date) - EPOCH) // _ONE_MS


def get_time(date: DateLike) -> str:
    """Return the local time of date as 'hh:mm:ss'."""
    dt = to_local(date)
    return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"


def get_day_name(date: DateLike) -> str:
    """Return the English weekday name of the value's own calendar day."""
    return DAY_NAMES[to_datetime(date).weekday()]


def format_date(date: DateLike) -> str:
    """Format date in UTC as 'M/D/YYYY, h:mm:ss AM/PM'.

    Month, day and hour are not padded. Hour 0 reads as 12 AM and hour 12
    as 12 PM.

    Example:
        format_date("2010-12-15T22:59:00.000Z")  # '12/15/2010, 10:59:00 PM'
    """
    dt = to_utc(date)
    meridiem = "PM" if dt.hour >= 12 else "AM"
    hour = dt.hour % 12 or 12
    return (
        f"{dt.month}/{dt.day}/{dt.year}, "
        f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
    )
