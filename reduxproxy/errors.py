from __future__ import annotations

from typing import Any


class ReduxProxyError(Exception):
    """Base class for errors raised by reduxproxy."""


class SinkNotRegisteredError(ReduxProxyError, RuntimeError):
    """Raised when a message is dispatched before any sink is bound."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(
            f"No active sink to deliver {tag!r}\n"
            "Hint: call `register_sink(store)` during bootstrap, before any facade is used"
        )


class HandlerDefinitionError(ReduxProxyError, TypeError):
    """Raised when a handler cannot be classified."""


class ReservedNameError(HandlerDefinitionError):
    """Raised when a handler or operation name collides with a reserved token."""

    def __init__(self, name: Any, token: str) -> None:
        self.name = name
        self.token = token
        super().__init__(f"Name {name!r} contains the reserved token {token!r}")


__all__ = [
    "HandlerDefinitionError",
    "ReduxProxyError",
    "ReservedNameError",
    "SinkNotRegisteredError",
]
