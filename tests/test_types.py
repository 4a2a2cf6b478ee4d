"""Tests for value types."""

import dataclasses
import typing
from datetime import date, datetime

import pandas as pd
import pytest

import datecalc
from datecalc import DatePeriod, ValidationError, WorkSchedulePattern
from datecalc.types import DateLike


class TestDatePeriod:
    """Test DatePeriod coercion."""

    def test_from_mapping(self):
        """Mappings with start and end are accepted."""
        period = DatePeriod.coerce({"start": "a", "end": "b"})

        assert period == DatePeriod(start="a", end="b")

    def test_from_pair(self):
        """Plain pairs are accepted."""
        assert DatePeriod.coerce(("a", "b")) == DatePeriod("a", "b")

    def test_passthrough(self):
        """An existing DatePeriod is returned unchanged."""
        period = DatePeriod("a", "b")

        assert DatePeriod.coerce(period) is period

    def test_unsupported_type(self):
        """Other types raise ValidationError."""
        with pytest.raises(ValidationError, match="Unsupported period"):
            DatePeriod.coerce("2024-01-01")


class TestWorkSchedulePattern:
    """Test WorkSchedulePattern."""

    def test_cycle_length(self):
        """Cycle length is work plus off days."""
        assert WorkSchedulePattern(2, 5).cycle_length == 7

    def test_is_work_day(self):
        """The first work_days offsets of each cycle are worked."""
        pattern = WorkSchedulePattern(2, 1)

        assert [pattern.is_work_day(i) for i in range(6)] == [
            True, True, False, True, True, False,
        ]

    def test_frozen(self):
        """Patterns are immutable."""
        pattern = WorkSchedulePattern(1, 1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            pattern.work_days = 3

    def test_bool_rejected(self):
        """Booleans are not day counts."""
        with pytest.raises(ValidationError, match="integer"):
            WorkSchedulePattern(True, 1)


class TestDateLike:
    """Test the DateLike alias used by the public helpers."""

    @pytest.mark.parametrize(
        "func",
        [
            datecalc.date_to_timestamp,
            datecalc.get_time,
            datecalc.get_day_name,
            datecalc.format_date,
            datecalc.get_next_friday,
            datecalc.get_next_friday_the_13th,
            datecalc.get_week_number_by_date,
            datecalc.get_quarter,
            datecalc.is_leap_year,
        ],
    )
    def test_public_helpers_accept_date_like(self, func):
        """Single-date helpers annotate their argument as DateLike."""
        assert typing.get_type_hints(func)["date"] == DateLike

    def test_covers_strings_dates_and_timestamps(self):
        """Strings, dates and datetimes (so pandas Timestamps too) are members."""
        assert set(typing.get_args(DateLike)) == {str, date, datetime}
        assert issubclass(pd.Timestamp, datetime)
