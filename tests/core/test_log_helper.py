import logging

import pytest

from cbuild.core import configure_logging, warn


@pytest.fixture
def cbuild_logger():
    logger = logging.getLogger("cbuild")
    level = logger.level
    yield logger
    logger.setLevel(level)


def test_configure_logging(cbuild_logger):
    configure_logging("debug")

    assert cbuild_logger.level == logging.DEBUG


def test_warn(caplog):
    warn("progress record skipped")
    warn("other logger", logging.getLogger("cbuild.tests"))

    assert [record.name for record in caplog.records] == [
        "cbuild",
        "cbuild.tests",
    ]
    assert all(record.levelno == logging.WARNING for record in caplog.records)
