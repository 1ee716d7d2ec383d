"""
Dispatch context: where facade messages are delivered.

A ``DispatchContext`` holds at most one active sink. Facades keep a reference
to the context, never to the sink itself, so the sink current at call time is
the one that receives the message. The process-wide default context backs
``register_sink`` for applications that bootstrap a single store.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any

from reduxproxy.config import DEBUG_DISPATCH, truncate_repr
from reduxproxy.errors import SinkNotRegisteredError
from reduxproxy.types import Message, Sink

logger = logging.getLogger(__name__)


class ContextState(Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    SHUT_DOWN = "shut_down"


def dispatch_via(sink: Sink, message: Message) -> Any:
    """Hand ``message`` to the sink's own dispatch and return its result."""
    return sink.dispatch(message)


class DispatchContext:
    """Holds the active sink and delivers messages to it."""

    def __init__(self, sink: Sink | None = None) -> None:
        self._lock = threading.Lock()
        self._sink: Sink | None = None
        self._state = ContextState.UNINITIALIZED
        if sink is not None:
            self.bind(sink)

    @property
    def state(self) -> ContextState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is ContextState.ACTIVE

    @property
    def sink(self) -> Sink | None:
        return self._sink

    def bind(self, sink: Sink) -> None:
        """Make ``sink`` the active sink. A previously bound sink is replaced."""
        if not callable(getattr(sink, "dispatch", None)):
            raise TypeError(f"Sink must provide a dispatch() method, got {type(sink).__name__}")
        with self._lock:
            if self._sink is not None and self._sink is not sink:
                logger.debug(
                    "replacing sink %s with %s", type(self._sink).__name__, type(sink).__name__
                )
            self._sink = sink
            self._state = ContextState.ACTIVE

    def rebind(self, sink: Sink) -> None:
        """Swap the sink of an already active context."""
        if not self.is_active:
            raise RuntimeError(f"Cannot rebind a dispatch context in state {self._state.value}")
        self.bind(sink)

    def shutdown(self) -> None:
        with self._lock:
            self._sink = None
            self._state = ContextState.SHUT_DOWN

    def dispatch(self, message: Message) -> Any:
        with self._lock:
            sink = self._sink
        if sink is None:
            raise SinkNotRegisteredError(message.tag)
        if DEBUG_DISPATCH:
            logger.debug("dispatch %s payload=%s", message.tag, truncate_repr(message.payload))
        else:
            logger.debug("dispatch %s", message.tag)
        return dispatch_via(sink, message)

    def __repr__(self) -> str:
        return f"DispatchContext(state={self._state.value}, sink={type(self._sink).__name__})"


_DEFAULT_CONTEXT = DispatchContext()


def default_context() -> DispatchContext:
    """The process-wide context used by facades built without one."""
    return _DEFAULT_CONTEXT


def register_sink(sink: Sink) -> None:
    """Bind ``sink`` to the default context; the last registration wins."""
    _DEFAULT_CONTEXT.bind(sink)


__all__ = [
    "ContextState",
    "DispatchContext",
    "default_context",
    "dispatch_via",
    "register_sink",
]
