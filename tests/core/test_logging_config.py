from __future__ import annotations

import logging

import pytest
import structlog

from jobeligibility.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    structlog.reset_defaults()


def test_repeated_configuration_updates_level():
    configure_logging("DEBUG")
    configure_logging("WARNING")

    assert logging.getLogger().level == logging.WARNING
    assert structlog.get_config()["cache_logger_on_first_use"] is False
    assert structlog.get_config()["wrapper_class"] is structlog.make_filtering_bound_logger(
        logging.WARNING
    )
