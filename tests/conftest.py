"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from datecalc.config import reset_datecalc_config


@pytest.fixture(autouse=True)
def reset_config_for_all_tests():
    """Reset the config singleton and structlog before and after each test.

    Both are module-level state that persists across tests. This fixture
    ensures each test starts with default leap-year rules, the system local
    zone and unconfigured logging.
    """
    reset_datecalc_config()
    structlog.reset_defaults()
    yield
    reset_datecalc_config()
    structlog.reset_defaults()
