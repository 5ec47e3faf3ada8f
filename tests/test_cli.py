"""Tests for the command line interface."""

import pytest
from loguru import logger

from recordkit.cli import Commands


@pytest.fixture
def cli_messages():
    """Build the CLI, then capture what it logs."""
    commands = Commands(verbose=True)
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield commands, messages
    logger.remove(handler_id)
    logger.disable("recordkit")


def test_ordinal():
    assert Commands().ordinal(22) == "22nd"
    logger.disable("recordkit")


def test_demo(cli_messages):
    commands, messages = cli_messages
    commands.demo(count=3)
    assert "Populated 3 records" in messages
    assert "2: is your 2nd favourite uncle" in messages
    assert "Record with index 2: {'index': 2, 'label': 'is your 2nd favourite uncle'}" in messages


def test_demo_empty(cli_messages):
    commands, messages = cli_messages
    commands.demo(count=0)
    assert "Last record: None" in messages
