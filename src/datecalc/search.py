"""Forward searches for the next matching day."""

from datetime import MAXYEAR, datetime

from datecalc.calendar import WeekdayCalendar
from datecalc.logging import get_logger
from datecalc.parsing import to_datetime
from datecalc.types import FRIDAY, DateLike

_log = get_logger(__name__)

_FRIDAYS = WeekdayCalendar((FRIDAY,))


def _one_year_later(dt: datetime) -> datetime:
    if dt.year >= MAXYEAR:
        return datetime.max.replace(tzinfo=dt.tzinfo)
    try:
        return dt.replace(year=dt.year + 1)
    except ValueError:
        # Feb 29 has no counterpart in the following year
        return dt.replace(year=dt.year + 1, day=28)


def get_next_friday(date: DateLike) -> datetime:
    """Return the first Friday strictly after date.

    Time of day and tzinfo are kept, so a Friday input yields the Friday
    one week later.
    """
    return _FRIDAYS.dt_offset(to_datetime(date), 1)


def get_next_friday_the_13th(date: DateLike) -> datetime | None:
    """Return the next Friday the 13th on or after date, at midnight.

    The search covers the days from date up to the same day one year later.
    Returns None when no Friday the 13th falls inside that window.
    """
    dt = to_datetime(date)
    start = dt.replace(hour=0, minute=0, second=0, microsecond=0)
    end = _one_year_later(start)
    for day in _FRIDAYS.dt_range(start, end):
        if day.day == 13:
            return day
    _log.debug(
        "friday_13th_not_found",
        start=start.isoformat(),
        end=end.isoformat(),
    )
    return None
