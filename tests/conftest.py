"""
Pytest configuration for reduxproxy tests.

Provides a recording sink that applies a transition like a minimal store, and
resets the process-wide dispatch context and saga registry between tests.
"""

from typing import Any

import pytest

from reduxproxy import MISSING, Message, clear_saga_handlers, default_context, register_sink


class RecordingSink:
    """Sink that records messages and, when given a reducer, folds them into state."""

    def __init__(self, reducer: Any = None) -> None:
        self.reducer = reducer
        self.messages: list[Message] = []
        self.state: Any = reducer(MISSING, None) if reducer is not None else None

    def dispatch(self, message: Message) -> Message:
        self.messages.append(message)
        if self.reducer is not None:
            self.state = self.reducer(self.state, message)
        return message

    @property
    def tags(self) -> list[str]:
        return [message.tag for message in self.messages]


@pytest.fixture(autouse=True)
def _reset_global_state():
    yield
    default_context().shutdown()
    clear_saga_handlers()


@pytest.fixture
def sink() -> RecordingSink:
    recording = RecordingSink()
    register_sink(recording)
    return recording


@pytest.fixture
def make_sink():
    """Factory for unregistered recording sinks."""
    return RecordingSink
