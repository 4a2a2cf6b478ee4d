"""Counting and classification of days, weeks, quarters and years."""

import calendar as _stdcalendar
import math
from datetime import datetime, timedelta
from typing import Any, Mapping

from datecalc.calendar import WeekendCalendar
from datecalc.config import get_datecalc_config
from datecalc.parsing import ONE_DAY, to_datetime, to_midnight, to_utc
from datecalc.types import DateLike, DatePeriod
from datecalc.validation import validate_month, validate_year

_ONE_WEEK = timedelta(weeks=1)


def get_count_days_in_month(month: int, year: int) -> int:
    """Number of days in a 1-based month of year, leap-year aware."""
    validate_month(month)
    validate_year(year)
    return _stdcalendar.monthrange(year, month)[1]


def get_count_days_on_period(date_start: DateLike, date_end: DateLike) -> int:
    """Inclusive day count between two instants.

    Computed as floor((end - start) / 1 day) + 1 on UTC-normalised values,
    so a reversed period gives zero or a negative count.
    """
    return (to_utc(date_end) - to_utc(date_start)) // ONE_DAY + 1


def is_date_in_period(date: DateLike, period: "DatePeriod | Mapping[str, Any]") -> bool:
    """True if start <= date <= end, compared by calendar day only."""
    period = DatePeriod.coerce(period)
    day = to_midnight(date)
    return to_midnight(period.start) <= day <= to_midnight(period.end)


def get_count_weekends_in_month(month: int, year: int) -> int:
    """Number of Saturdays and Sundays in a 1-based month of year."""
    last_day = get_count_days_in_month(month, year)
    first = datetime(year, month, 1)
    last = first.replace(day=last_day)
    return sum(1 for _ in WeekendCalendar().dt_range(first, last))


def get_week_number_by_date(date: DateLike) -> int:
    """Week of the year, counting 7-day blocks from December 31 of the prior year.

    Time of day counts: any time after midnight on the last day of a block
    rolls into the next week number.
    """
    dt = to_datetime(date).replace(tzinfo=None)
    elapsed = dt - datetime(dt.year, 1, 1) + ONE_DAY
    return math.ceil(elapsed / _ONE_WEEK)


def get_quarter(date: DateLike) -> int:
    """Quarter of the year (1-4)."""
    return (to_datetime(date).month - 1) // 3 + 1


def is_leap_year(date: DateLike) -> bool:
    """Whether the year of date is a leap year.

    By default only divisibility by 4 is checked, so 1900 counts as a leap
    year. Set `gregorian_leap_years` via configure_datecalc to apply the
    century and 400-year exceptions.
    """
    year = to_datetime(date).year
    if get_datecalc_config().gregorian_leap_years:
        return _stdcalendar.isleap(year)
    return year % 4 == 0
