import logging

import pytest

from makemehired.utils.logger import get_logger


@pytest.mark.unit
def test_get_logger_attaches_single_handler():
    logger = get_logger("makemehired.tests.single")
    get_logger("makemehired.tests.single")
    assert len(logger.handlers) == 1


@pytest.mark.unit
@pytest.mark.parametrize(
    "level, expected",
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR), ("nonsense", logging.INFO)],
)
def test_get_logger_level(level, expected):
    logger = get_logger(f"makemehired.tests.level.{level}", level)
    assert logger.level == expected
