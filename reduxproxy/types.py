"""
Core types for the reduxproxy system.

This module contains the foundational types with zero internal dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Final, Protocol, TypeVar, runtime_checkable

S = TypeVar("S")


class _Sentinel:
    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __reduce__(self) -> str:
        return self._name


# Transition-table value meaning "the payload becomes the new state".
REPLACE_STATE: Final = _Sentinel("REPLACE_STATE")

# Stand-in for "no state yet"; the transition falls back to the handler default.
MISSING: Final = _Sentinel("MISSING")


class OperationKind(Enum):
    """How a handler operation reaches the state."""

    PURE = "pure"
    DEFERRED = "deferred"


@dataclass(frozen=True)
class Message:
    """A dispatched message: ``tag`` names the operation, ``payload`` carries data."""

    tag: str
    payload: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.tag, str):
            raise TypeError(f"Message tag must be a str, got {type(self.tag).__name__}")
        if not self.tag:
            raise ValueError("Message tag must not be empty")

    @classmethod
    def coerce(cls, message: Message | Mapping[str, Any]) -> Message:
        """Accept either a ``Message`` or a ``{"tag": ..., "payload": ...}`` mapping."""
        if isinstance(message, Message):
            return message
        if isinstance(message, Mapping):
            return cls(message["tag"], message.get("payload"))
        return cls(message.tag, getattr(message, "payload", None))


@runtime_checkable
class Sink(Protocol):
    """The external store/message bus messages are delivered to."""

    def dispatch(self, message: Message) -> Any: ...


class Handler:
    """
    Convenience base class for handlers.

    Subclasses set ``default`` to the initial state and define operations as
    methods. Plain methods become state transitions called as
    ``method(state, payload)``; generator methods (or methods marked with
    ``@deferred``) become deferred operations.

    ``namespace`` overrides the tag prefix, which is the class name otherwise.
    """

    default: Any = None
    namespace: ClassVar[str | None] = None

    def __init__(self) -> None:
        self.action_names: dict[str, str] = {}


__all__ = [
    "Handler",
    "MISSING",
    "Message",
    "OperationKind",
    "REPLACE_STATE",
    "S",
    "Sink",
]
