"""Work schedule generation over a day range."""

from typing import Any, Mapping

from datecalc.calendar import WorkCycleCalendar
from datecalc.logging import get_logger
from datecalc.parsing import format_dmy, parse_dmy
from datecalc.types import DatePeriod, WorkSchedulePattern

_log = get_logger(__name__)


def get_work_schedule(
    period: "DatePeriod | Mapping[str, Any]",
    count_work_days: int,
    count_off_days: int,
) -> list[str]:
    """Generate the working days of a repeating work/off cycle.

    The cycle starts on the first day of the period with a work day. Both
    ends of the period are inclusive.

    Args:
        period: Start and end dates in 'DD-MM-YYYY' format, as a DatePeriod
            or a {"start": ..., "end": ...} mapping.
        count_work_days: Consecutive working days per cycle.
        count_off_days: Consecutive days off per cycle.

    Returns:
        Worked days in 'DD-MM-YYYY' format, in calendar order.

    Example:
        get_work_schedule({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3)
        # ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']
    """
    period = DatePeriod.coerce(period)
    pattern = WorkSchedulePattern(count_work_days, count_off_days)
    start = parse_dmy(period.start)
    end = parse_dmy(period.end)

    calendar = WorkCycleCalendar(pattern, anchor=start)
    schedule = [format_dmy(day) for day in calendar.dt_range(start, end)]
    _log.debug(
        "work_schedule_built",
        start=period.start,
        end=period.end,
        work_days=pattern.work_days,
        off_days=pattern.off_days,
        days_scheduled=len(schedule),
    )
    return schedule
