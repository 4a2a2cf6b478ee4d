"""Value types shared by the datecalc helpers."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, NamedTuple, Union

from datecalc.validation import ValidationError, validate_day_count

DateLike = Union[str, date, datetime]

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

DAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class DatePeriod(NamedTuple):
    """Inclusive date range. Ordering of start and end is not enforced."""

    start: Any
    end: Any

    @classmethod
    def coerce(cls, period: "DatePeriod | Mapping[str, Any] | tuple") -> "DatePeriod":
        """Build a DatePeriod from a DatePeriod, a {start, end} mapping or a pair."""
        if isinstance(period, cls):
            return period
        if isinstance(period, Mapping):
            try:
                return cls(start=period["start"], end=period["end"])
            except KeyError as exc:
                raise ValidationError(f"Period mapping missing {exc.args[0]!r}") from exc
        if isinstance(period, tuple) and len(period) == 2:
            return cls(*period)
        raise ValidationError(f"Unsupported period type: {type(period)}")


@dataclass(frozen=True)
class WorkSchedulePattern:
    """Repeating cycle of work_days on followed by off_days off."""

    work_days: int
    off_days: int

    def __post_init__(self) -> None:
        validate_day_count("work_days", self.work_days)
        validate_day_count("off_days", self.off_days)

    @property
    def cycle_length(self) -> int:
        return self.work_days + self.off_days

    def is_work_day(self, offset: int) -> bool:
        """Whether the day `offset` days after the cycle anchor is worked."""
        return offset % self.cycle_length < self.work_days
