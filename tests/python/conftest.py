"""
Pytest configuration and fixtures for marc21 tests.
"""

import logging

import pytest
import structlog


@pytest.fixture
def sample_leader_bytes():
    """A full 24-byte leader as it appears at the start of a record."""
    return b"00827nam a2200253 a 4500"


@pytest.fixture
def restore_logging():
    """Restore root, marc21 and structlog logging state after a test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    marc21_logger = logging.getLogger("marc21")
    marc21_handlers = marc21_logger.handlers[:]
    marc21_level = marc21_logger.level
    marc21_propagate = marc21_logger.propagate
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    marc21_logger.handlers = marc21_handlers
    marc21_logger.setLevel(marc21_level)
    marc21_logger.propagate = marc21_propagate
    structlog.reset_defaults()
