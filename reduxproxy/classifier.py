"""
Operation classification for handlers.

A handler is any object with a ``default`` attribute. Its public attributes
(instance attributes and those defined along its class hierarchy) are sorted
into pure transitions, deferred operations and constants. The result feeds
both the reducer synthesizer and the facade generator.
"""

from __future__ import annotations

import inspect
import logging
import threading
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from frozendict import frozendict

from reduxproxy.decorators import declared_kind, is_generator_shaped
from reduxproxy.errors import HandlerDefinitionError, ReservedNameError
from reduxproxy.naming import getter_name_for
from reduxproxy.registry import add_saga_handler
from reduxproxy.tags import DEFERRED_SUFFIX, NAMESPACE_SEPARATOR, qualify
from reduxproxy.types import Handler, OperationKind

logger = logging.getLogger(__name__)

RESERVED_FIELDS = frozenset({"default", "action_names"})

# Only a str (or None) value here is the tag namespace; anything else is an operation.
NAMESPACE_FIELD = "namespace"

# Serialises writes to ``action_names`` across concurrent classifications.
_action_names_lock = threading.Lock()


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one handler."""

    identity: str
    # qualified tag -> bound transition, REPLACE_STATE or constant
    entries: frozendict[str, Any]
    # operation name -> kind, for every dispatchable name
    operations: frozendict[str, OperationKind]

    @property
    def deferred(self) -> tuple[str, ...]:
        return tuple(
            name for name, kind in self.operations.items() if kind is OperationKind.DEFERRED
        )

    @property
    def transitions(self) -> tuple[str, ...]:
        return tuple(
            name for name, kind in self.operations.items() if kind is OperationKind.PURE
        )


def handler_identity(handler: Any) -> str:
    """Namespace prefixing every tag produced for ``handler``."""
    cls = type(handler)
    namespace = getattr(cls, NAMESPACE_FIELD, None)
    if isinstance(namespace, str) and namespace:
        identity = namespace
    else:
        if not isinstance(namespace, (str, type(None))):
            logger.debug(
                "%s.%s is not a str, using the class name as namespace",
                cls.__name__,
                NAMESPACE_FIELD,
            )
        identity = cls.__name__
    if DEFERRED_SUFFIX in identity:
        raise ReservedNameError(identity, DEFERRED_SUFFIX)
    if NAMESPACE_SEPARATOR in identity:
        raise ReservedNameError(identity, NAMESPACE_SEPARATOR)
    return identity


def _is_operation_name(name: str, value: Any) -> bool:
    if name == NAMESPACE_FIELD and (value is None or isinstance(value, str)):
        return False
    return not name.startswith("_") and name not in RESERVED_FIELDS


def _candidate_names(handler: Any) -> Iterator[tuple[str, Any, bool]]:
    """Yield ``(name, raw_value, from_instance)``; instance attributes shadow class ones."""
    seen: set[str] = set()
    for name, value in getattr(handler, "__dict__", {}).items():
        if _is_operation_name(name, value):
            seen.add(name)
            yield name, value, True
    for klass in type(handler).__mro__:
        if klass is Handler or klass is object:
            continue
        for name, value in vars(klass).items():
            if name in seen or not _is_operation_name(name, value):
                continue
            seen.add(name)
            yield name, value, False


def _kind_of(identity: str, name: str, operation: Any) -> OperationKind:
    declared = declared_kind(operation)
    generator_shaped = is_generator_shaped(operation)
    if declared is OperationKind.PURE and generator_shaped:
        raise HandlerDefinitionError(
            f"{identity}.{name} is declared @transition but is a generator function"
        )
    if declared is not None:
        return declared
    return OperationKind.DEFERRED if generator_shaped else OperationKind.PURE


def _ensure_action_names(handler: Any) -> dict[str, str]:
    with _action_names_lock:
        action_names = getattr(handler, "action_names", None)
        if action_names is None:
            action_names = {}
            handler.action_names = action_names
        return action_names


def _record_setters(
    action_names: dict[str, str],
    setters: list[str],
    operations: dict[str, OperationKind],
) -> None:
    # getters must be classified operations, so reserved and private names never pair
    pairs = []
    for name in setters:
        getter = getter_name_for(name)
        if getter is not None and getter in operations:
            pairs.append((getter, name))
    if not pairs:
        return
    with _action_names_lock:
        for getter, name in pairs:
            action_names.setdefault(getter, name)


def classify(handler: Any) -> Classification:
    """
    Classify the operations of ``handler``.

    Side effects: ``handler.action_names`` gains ``getter -> setter`` pairs,
    and handlers owning deferred operations are added to the saga registry.
    """
    if not hasattr(handler, "default"):
        raise HandlerDefinitionError(
            f"{type(handler).__name__} has no 'default' attribute to use as initial state"
        )
    identity = handler_identity(handler)
    action_names = _ensure_action_names(handler)

    entries: dict[str, Any] = {}
    operations: dict[str, OperationKind] = {}
    table_names: list[str] = []

    for name, raw, from_instance in _candidate_names(handler):
        if DEFERRED_SUFFIX in name:
            raise ReservedNameError(name, DEFERRED_SUFFIX)
        if raw is None:
            logger.debug("%s.%s is None, skipping", identity, name)
            continue
        if not from_instance and (inspect.isclass(raw) or isinstance(raw, property)):
            logger.debug("%s.%s is not an operation, skipping", identity, name)
            continue

        value = getattr(handler, name)
        if value is None:
            logger.debug("%s.%s resolved to None, skipping", identity, name)
            continue

        if callable(value):
            kind = _kind_of(identity, name, value)
            operations[name] = kind
            if kind is OperationKind.DEFERRED:
                logger.debug("%s.%s is deferred", identity, name)
                continue
        else:
            operations[name] = OperationKind.PURE

        entries[qualify(identity, name)] = value
        table_names.append(name)

    _record_setters(action_names, table_names, operations)
    classification = Classification(
        identity=identity,
        entries=frozendict(entries),
        operations=frozendict(operations),
    )
    if classification.deferred:
        add_saga_handler(handler, classification.deferred)
    logger.debug(
        "classified %s: %d transitions, %d deferred",
        identity,
        len(classification.transitions),
        len(classification.deferred),
    )
    return classification


__all__ = ["Classification", "RESERVED_FIELDS", "classify", "handler_identity"]
