# tests/unit/test_logging.py
"""Tests for navm logging setup."""

import io
import logging

import pytest

from navm.logging import configure_logging, get_logger
from navm.logging.tags import CMD


@pytest.fixture
def navm_logger():
    logger = logging.getLogger("navm")
    saved = (list(logger.handlers), logger.level)
    for handler in saved[0]:
        logger.removeHandler(handler)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in saved[0]:
        logger.addHandler(handler)
    logger.setLevel(saved[1])


def test_configure_once(navm_logger):
    stream = io.StringIO()
    configure_logging("DEBUG", stream=stream)
    configure_logging("WARNING", stream=stream)

    assert len(navm_logger.handlers) == 1
    assert navm_logger.level == logging.WARNING


def test_module_loggers_inherit(navm_logger):
    stream = io.StringIO()
    configure_logging(logging.DEBUG, stream=stream)

    get_logger("navm.cmd.parser").debug(f"{CMD} Parsed 'SAV'")

    assert "[DEBUG] navm.cmd.parser: [CMD] Parsed 'SAV'" in stream.getvalue()


def test_unknown_level(navm_logger):
    with pytest.raises(ValueError):
        configure_logging("LOUD")
