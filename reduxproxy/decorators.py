"""Decorators declaring how a handler operation is dispatched."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import TypeVar

from reduxproxy.types import OperationKind

F = TypeVar("F", bound=Callable[..., object])

KIND_ATTRIBUTE = "__reduxproxy_kind__"


def transition(func: F) -> F:
    """Mark ``func`` as a pure state transition ``(state, payload) -> state``."""

    setattr(func, KIND_ATTRIBUTE, OperationKind.PURE)
    return func


def deferred(func: F) -> F:
    """Mark ``func`` as a deferred operation.

    Deferred operations never touch the state directly. Their messages are
    tagged with the deferred suffix and left to the side-effect runner, which
    is expected to dispatch a transition once its work is done. Generator
    functions are treated as deferred without this decorator.
    """

    setattr(func, KIND_ATTRIBUTE, OperationKind.DEFERRED)
    return func


def declared_kind(func: object) -> OperationKind | None:
    """Return the kind set by ``@transition``/``@deferred``, if any."""
    target = inspect.unwrap(func) if callable(func) else func
    kind = getattr(func, KIND_ATTRIBUTE, None) or getattr(target, KIND_ATTRIBUTE, None)
    return kind if isinstance(kind, OperationKind) else None


def is_generator_shaped(func: object) -> bool:
    target = inspect.unwrap(func) if callable(func) else func
    return inspect.isgeneratorfunction(target) or inspect.isasyncgenfunction(target)


__all__ = [
    "KIND_ATTRIBUTE",
    "declared_kind",
    "deferred",
    "is_generator_shaped",
    "transition",
]
