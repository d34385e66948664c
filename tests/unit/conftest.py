"""Shared fixtures for unit tests."""

import pytest
from loguru import logger


@pytest.fixture
def log_records():
    """Collect (level, message) pairs emitted through loguru during a test."""
    records = []
    handler_id = logger.add(
        lambda message: records.append(
            (message.record["level"].name, message.record["message"])
        ),
        level="DEBUG",
    )
    yield records
    logger.remove(handler_id)
