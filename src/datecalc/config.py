"""Module-level configuration for datecalc defaults."""

import threading
from dataclasses import dataclass
from datetime import tzinfo


@dataclass
class DatecalcConfig:
    """Configuration for datecalc defaults."""

    gregorian_leap_years: bool = False  # False = divisible-by-4 rule only
    local_timezone: tzinfo | None = None  # None = system local zone


# Module-level singleton
_datecalc_config: DatecalcConfig | None = None
_config_lock = threading.Lock()

_UNSET = object()


def get_datecalc_config() -> DatecalcConfig:
    """Get the global datecalc configuration singleton."""
    global _datecalc_config
    if _datecalc_config is None:
        with _config_lock:
            if _datecalc_config is None:
                _datecalc_config = DatecalcConfig()
    return _datecalc_config


def configure_datecalc(
    gregorian_leap_years: bool | None = None,
    local_timezone: "tzinfo | None | object" = _UNSET,
) -> None:
    """Configure datecalc defaults.

    Args:
        gregorian_leap_years: Apply the full Gregorian rule (century years
            must be divisible by 400) in is_leap_year. None leaves the
            current setting untouched.
        local_timezone: Zone that aware datetimes are converted to before
            reading local time fields. Pass None to fall back to the
            system local zone. Omit to leave the current setting untouched.

    Example:
        from datetime import timezone
        from datecalc import configure_datecalc

        configure_datecalc(gregorian_leap_years=True, local_timezone=timezone.utc)
    """
    config = get_datecalc_config()
    with _config_lock:
        if gregorian_leap_years is not None:
            config.gregorian_leap_years = gregorian_leap_years
        if local_timezone is not _UNSET:
            config.local_timezone = local_timezone


def reset_datecalc_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _datecalc_config
    with _config_lock:
        _datecalc_config = DatecalcConfig()
