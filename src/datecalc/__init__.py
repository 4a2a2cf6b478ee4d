"""datecalc - Calendar arithmetic helpers over dates and day ranges."""

from datecalc.calendar import (
    Calendar,
    WeekdayCalendar,
    WeekendCalendar,
    WorkCycleCalendar,
)
from datecalc.config import (
    DatecalcConfig,
    configure_datecalc,
    get_datecalc_config,
    reset_datecalc_config,
)
from datecalc.conversion import (
    date_to_timestamp,
    format_date,
    get_day_name,
    get_time,
)
from datecalc.counting import (
    get_count_days_in_month,
    get_count_days_on_period,
    get_count_weekends_in_month,
    get_quarter,
    get_week_number_by_date,
    is_date_in_period,
    is_leap_year,
)
from datecalc.logging import configure_logging, get_logger
from datecalc.schedule import get_work_schedule
from datecalc.search import get_next_friday, get_next_friday_the_13th
from datecalc.types import (
    FRIDAY,
    MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    TUESDAY,
    WEDNESDAY,
    DatePeriod,
    WorkSchedulePattern,
)
from datecalc.validation import DateParseError, ValidationError

__all__ = [
    # Date helpers
    "date_to_timestamp",
    "get_time",
    "get_day_name",
    "get_next_friday",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "is_date_in_period",
    "format_date",
    "get_count_weekends_in_month",
    "get_week_number_by_date",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_work_schedule",
    "is_leap_year",
    # Types
    "DatePeriod",
    "WorkSchedulePattern",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
    # Calendar
    "Calendar",
    "WeekdayCalendar",
    "WeekendCalendar",
    "WorkCycleCalendar",
    # Errors
    "ValidationError",
    "DateParseError",
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "DatecalcConfig",
    "configure_datecalc",
    "get_datecalc_config",
    "reset_datecalc_config",
]
__version__ = "0.1.0"
