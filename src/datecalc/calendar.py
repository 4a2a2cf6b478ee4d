"""Calendar implementations used to walk and shift day ranges."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Iterable, Iterator

from datecalc.types import SATURDAY, SUNDAY, WorkSchedulePattern
from datecalc.validation import ValidationError


class Calendar(ABC):
    """Abstract base class for calendars.

    A calendar decides which days are valid. Ranges and offsets step one
    day at a time and always produce new datetime values; time-of-day and
    tzinfo of the starting value are carried along unchanged.
    """

    @abstractmethod
    def is_valid_dt(self, dt: datetime) -> bool:
        """Whether dt falls on a valid day of this calendar."""
        pass

    def dt_range(self, start_dt: datetime, end_dt: datetime) -> Iterator[datetime]:
        """Generate valid dates in range [start_dt, end_dt].

        The step count is fixed up front so no day past end_dt is ever
        computed; ranges ending on 9999-12-31 stay in bounds.
        """
        span = (end_dt - start_dt).days
        for offset in range(span + 1):
            current = start_dt + timedelta(days=offset)
            if self.is_valid_dt(current):
                yield current

    def dt_offset(self, dt: datetime, periods: int) -> datetime:
        """Shift datetime by N valid days. dt itself need not be valid."""
        if periods == 0:
            return dt
        direction = 1 if periods > 0 else -1
        remaining = abs(periods)
        current = dt
        while remaining > 0:
            current += timedelta(days=direction)
            if self.is_valid_dt(current):
                remaining -= 1
        return current


class WeekdayCalendar(Calendar):
    """Calendar restricted to a fixed set of weekdays (Mon=0 .. Sun=6)."""

    def __init__(self, weekdays: Iterable[int]) -> None:
        self._weekdays = frozenset(weekdays)
        if not self._weekdays:
            raise ValidationError("WeekdayCalendar needs at least one weekday")
        bad = [d for d in self._weekdays if d not in range(7)]
        if bad:
            raise ValidationError(f"Weekdays must be in 0..6; got {sorted(bad)}")

    @property
    def weekdays(self) -> frozenset[int]:
        return self._weekdays

    def is_valid_dt(self, dt: datetime) -> bool:
        return dt.weekday() in self._weekdays

    def __repr__(self) -> str:
        return f"WeekdayCalendar(weekdays={sorted(self._weekdays)})"


class WeekendCalendar(WeekdayCalendar):
    """Saturdays and Sundays only."""

    def __init__(self) -> None:
        super().__init__((SATURDAY, SUNDAY))


class WorkCycleCalendar(Calendar):
    """Days worked under a repeating work/off cycle.

    The cycle starts on `anchor` with the first work day. Days before the
    anchor follow the same cycle run backwards.
    """

    def __init__(self, pattern: WorkSchedulePattern, anchor: datetime) -> None:
        self._pattern = pattern
        self._anchor = datetime(anchor.year, anchor.month, anchor.day)

    @property
    def pattern(self) -> WorkSchedulePattern:
        return self._pattern

    @property
    def anchor(self) -> datetime:
        return self._anchor

    def is_valid_dt(self, dt: datetime) -> bool:
        offset = (datetime(dt.year, dt.month, dt.day) - self._anchor).days
        return self._pattern.is_work_day(offset)

    def __repr__(self) -> str:
        return (
            f"WorkCycleCalendar(work_days={self._pattern.work_days}, "
            f"off_days={self._pattern.off_days}, "
            f"anchor={self._anchor.date().isoformat()})"
        )
