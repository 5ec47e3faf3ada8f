"""
Shared pytest fixtures.

- Sample record lists
- A loguru sink capturing recordkit log messages
"""

import pytest
from loguru import logger


@pytest.fixture
def people():
    """Records with a duplicated id to exercise first-match lookups."""
    return [
        {"id": 1, "name": "ada", "team": "core"},
        {"id": 2, "name": "bob", "team": "web"},
        {"id": 2, "name": "cy", "team": "core"},
        {"id": 3, "name": "dee"},
    ]


@pytest.fixture
def log_messages():
    """Collect recordkit log messages for the duration of a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    logger.enable("recordkit")
    yield messages
    logger.disable("recordkit")
    logger.remove(handler_id)
