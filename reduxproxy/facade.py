"""
Facade generation.

``create_facade`` builds, per handler, a class with one forwarding method for
each operation. Calling a forwarding method never runs the operation: it
dispatches a message whose tag names it, and the sink decides what happens.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from reduxproxy.classifier import classify
from reduxproxy.sink import DispatchContext, default_context
from reduxproxy.tags import qualify, to_deferred_tag
from reduxproxy.types import Message

logger = logging.getLogger(__name__)

H = TypeVar("H")


class Facade:
    """Base class of generated facades. Attribute writes are ignored."""

    __slots__ = ("_handler", "_identity", "_context", "_pure_by_default")

    def __init__(
        self,
        handler: Any,
        identity: str,
        context: DispatchContext,
        pure_by_default: bool,
    ) -> None:
        object.__setattr__(self, "_handler", handler)
        object.__setattr__(self, "_identity", identity)
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "_pure_by_default", pure_by_default)

    def _is_pure(self, name: str) -> bool:
        if self._pure_by_default:
            return True
        # setters paired with a getter dispatch straight to the reducer
        action_names = getattr(self._handler, "action_names", None) or {}
        return name in action_names.values()

    def _dispatch(self, name: str, payload: Any) -> Any:
        tag = qualify(self._identity, name)
        if not self._is_pure(name):
            tag = to_deferred_tag(tag)
        return self._context.dispatch(Message(tag, payload))

    def __setattr__(self, name: str, value: Any) -> None:
        logger.debug("ignoring write of %r on %s facade", name, self._identity)

    def __delattr__(self, name: str) -> None:
        logger.debug("ignoring delete of %r on %s facade", name, self._identity)

    def __repr__(self) -> str:
        return f"<{self._identity} facade>"


def _forwarder(owner: str, name: str) -> Callable[..., Any]:
    def forward(self: Facade, payload: Any = None, *_: Any) -> Any:
        return self._dispatch(name, payload)

    forward.__name__ = name
    forward.__qualname__ = f"{owner}.{name}"
    forward.__doc__ = f"Dispatch a message for {name!r}; the first argument is the payload."
    return forward


def create_facade(
    handler: H,
    pure_by_default: bool = False,
    context: DispatchContext | None = None,
) -> H:
    """
    Wrap ``handler`` so its operations dispatch messages instead of running.

    With ``pure_by_default`` every call dispatches the plain transition tag.
    Otherwise calls dispatch the deferred tag, except setters paired with a
    getter (see ``handler.action_names``), which dispatch the plain tag.

    Messages go to ``context``, or the process-wide default context.
    """
    classification = classify(handler)
    identity = classification.identity
    names = list(classification.operations)

    class_name = f"{identity}Facade"
    namespace: dict[str, Any] = {"__slots__": (), "__module__": __name__}
    for name in names:
        namespace[name] = _forwarder(class_name, name)
    facade_class = type(class_name, (Facade,), namespace)

    if context is None:
        context = default_context()
    logger.debug("created facade for %s with %d operations", identity, len(names))
    return facade_class(handler, identity, context, pure_by_default)  # type: ignore[return-value]


def facade_handler(facade: Facade) -> Any:
    """Return the handler wrapped by ``facade``."""
    return object.__getattribute__(facade, "_handler")


__all__ = ["Facade", "create_facade", "facade_handler"]
