"""
Pytest configuration and shared fixtures for chat thread tests.

WHAT: Centralized test configuration with component markers
WHY: Enable test organization, filtering, and shared sample data
HOW: Define pytest markers and message fixtures
"""

import pytest

from chat_threads.core.config import settings
from chat_threads.models.message import Message, parse_messages
from tests.fixtures.sample_messages import SAMPLE_CHAT


def pytest_configure(config):
    """Register custom markers for test groups."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (isolated component tests)"
    )
    config.addinivalue_line(
        "markers", "threads: Thread builder and thread model tests"
    )
    config.addinivalue_line(
        "markers", "filters: Sender/range filters, context lookup, and rendering"
    )


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """
    Pin settings that change output between machines.
    
    WHAT: Reset sort order and display timezone for every test
    WHY: A developer's .env must not change test results
    HOW: monkeypatch the settings singleton, restored after each test
    """
    monkeypatch.setattr(settings, "DEFAULT_SORT_ORDER", "asc")
    monkeypatch.setattr(settings, "DISPLAY_TIMEZONE", "UTC")
    yield


@pytest.fixture
def sample_chat():
    """The full sample chat as validated Messages, in dataset order."""
    return parse_messages(SAMPLE_CHAT)


@pytest.fixture
def make_message():
    """Factory for one-off messages with sensible defaults."""
    def _make(msg_id, parent_id=None, ts=1000, sender="Buyer", text=None):
        return Message(
            id=msg_id,
            parent_id=parent_id,
            sender=sender,
            timestamp=ts,
            text=text if text is not None else f"message {msg_id}",
        )
    return _make
