"""Coercion of user-supplied date values into datetime objects."""

from datetime import date, datetime, timedelta, timezone
from typing import Any

import pandas as pd

from datecalc.config import get_datecalc_config
from datecalc.validation import DateParseError, ValidationError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_DAY = timedelta(days=1)

DMY_FORMAT = "%d-%m-%Y"


def to_datetime(value: Any) -> datetime:
    """Coerce a string, date, datetime or pandas Timestamp to a datetime.

    Strings are parsed with pandas, which accepts ISO 8601 as well as looser
    forms such as '04 Dec 1995 00:12:00 UTC'. Date-only values become
    midnight. Timezone information present in the input is kept.

    Raises:
        DateParseError: If a string cannot be parsed
        ValidationError: If the value has an unsupported type
    """
    if value is pd.NaT:
        raise DateParseError("Cannot use NaT as a date")
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        return _parse_string(value)
    raise ValidationError(f"Unsupported date type: {type(value)}")


def _parse_string(value: str) -> datetime:
    try:
        ts = pd.Timestamp(value.strip())
    except (ValueError, TypeError, OverflowError) as exc:
        raise DateParseError(f"Cannot parse date string {value!r}") from exc
    if ts is pd.NaT:
        raise DateParseError(f"Cannot parse date string {value!r}")
    return ts.to_pydatetime()


def to_utc(value: Any) -> datetime:
    """Coerce to an aware UTC datetime. Naive values are read as UTC."""
    dt = to_datetime(value)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_local(value: Any) -> datetime:
    """Coerce to local wall-clock time.

    Naive values are taken as already local. Aware values are converted to
    the configured local timezone (the system zone when unset).
    """
    dt = to_datetime(value)
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(get_datecalc_config().local_timezone)


def to_midnight(value: Any) -> datetime:
    """Coerce to a naive datetime at 00:00 of the value's own calendar day."""
    dt = to_datetime(value)
    return datetime(dt.year, dt.month, dt.day)


def parse_dmy(value: str) -> datetime:
    """Parse a 'DD-MM-YYYY' string to a naive midnight datetime."""
    if not isinstance(value, str):
        raise ValidationError(f"Expected a 'DD-MM-YYYY' string; got {value!r}")
    try:
        return datetime.strptime(value.strip(), DMY_FORMAT)
    except ValueError as exc:
        raise DateParseError(f"Cannot parse {value!r} as DD-MM-YYYY") from exc


def format_dmy(dt: datetime) -> str:
    """Format a datetime as 'DD-MM-YYYY'."""
    return f"{dt.day:02d}-{dt.month:02d}-{dt.year:04d}"
