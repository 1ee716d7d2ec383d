"""
Process-wide registry of handlers that own deferred operations.

The side-effect runner reads this registry to learn which handlers need a
subscription loop and which operation serves a given deferred tag.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from reduxproxy.tags import from_deferred_tag, qualify

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_saga_handlers: list[Any] = []
# handler id -> names of its deferred operations
_deferred_names: dict[int, tuple[str, ...]] = {}


def add_saga_handler(handler: Any, deferred_names: tuple[str, ...] = ()) -> None:
    """
    Register ``handler``.

    Registering the same object again keeps its position and the deferred
    names already recorded; new names are appended.
    """
    with _lock:
        key = id(handler)
        if key not in _deferred_names:
            _saga_handlers.append(handler)
            _deferred_names[key] = tuple(dict.fromkeys(deferred_names))
            logger.debug("registered saga handler %s", type(handler).__name__)
            return
        known = _deferred_names[key]
        _deferred_names[key] = known + tuple(
            name for name in dict.fromkeys(deferred_names) if name not in known
        )


def saga_handlers() -> tuple[Any, ...]:
    """Snapshot of registered handlers in registration order."""
    with _lock:
        return tuple(_saga_handlers)


def deferred_names_of(handler: Any) -> tuple[str, ...]:
    with _lock:
        return _deferred_names.get(id(handler), ())


def deferred_operation_for(tag: str) -> Callable[..., Any] | None:
    """
    Find the deferred operation serving ``tag``.

    ``tag`` may carry the deferred suffix or not. Returns the operation bound
    to its handler, or ``None`` when no registered handler declares it.
    """
    from reduxproxy.classifier import handler_identity

    plain = from_deferred_tag(tag)
    for handler in saga_handlers():
        identity = handler_identity(handler)
        for name in deferred_names_of(handler):
            if qualify(identity, name) == plain:
                return getattr(handler, name)
    return None


def clear_saga_handlers() -> None:
    with _lock:
        _saga_handlers.clear()
        _deferred_names.clear()


__all__ = [
    "add_saga_handler",
    "clear_saga_handlers",
    "deferred_names_of",
    "deferred_operation_for",
    "saga_handlers",
]
