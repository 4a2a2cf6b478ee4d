"""Input validation for datecalc."""

from typing import Any


class ValidationError(Exception):
    """Raised when an input falls outside the documented domain."""
    pass


class DateParseError(ValidationError):
    """Raised when a date string cannot be parsed."""
    pass


def validate_month(month: Any) -> int:
    """Validate a 1-based month number.

    Raises:
        ValidationError: If month is not an integer in 1..12
    """
    if isinstance(month, bool) or not isinstance(month, int):
        raise ValidationError(f"Month must be an integer; got {month!r}")
    if not 1 <= month <= 12:
        raise ValidationError(f"Month must be in 1..12; got {month}")
    return month


def validate_year(year: Any) -> int:
    """Validate a proleptic Gregorian year supported by datetime."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise ValidationError(f"Year must be an integer; got {year!r}")
    if not 1 <= year <= 9999:
        raise ValidationError(f"Year must be in 1..9999; got {year}")
    return year


def validate_day_count(name: str, value: Any) -> int:
    """Validate a positive day count (work or off days)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer; got {value!r}")
    if value < 1:
        raise ValidationError(f"{name} must be positive; got {value}")
    return value
