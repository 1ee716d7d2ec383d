"""
Reducer synthesis.

``create_reducer`` turns a handler into a pure ``(state, message) -> state``
callable that a store can plug into its reduction loop.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic

from frozendict import frozendict

from reduxproxy.classifier import classify
from reduxproxy.config import DEBUG_DISPATCH, truncate_repr
from reduxproxy.tags import is_deferred_tag
from reduxproxy.types import MISSING, REPLACE_STATE, Message, S

logger = logging.getLogger(__name__)

_ABSENT = object()


@dataclass(frozen=True)
class Transition(Generic[S]):
    """
    State transition synthesized from a handler.

    Calling ``transition(state, message)`` applies, in order:

    - deferred tags leave the state untouched;
    - unknown tags leave the state untouched (other handlers may share the sink);
    - ``REPLACE_STATE`` entries return the payload as the new state;
    - callable entries return ``entry(state, payload)``;
    - any other entry is returned as the new state.

    ``state`` defaults to ``MISSING``, which stands for the handler default.
    """

    identity: str
    table: frozendict[str, Any]
    default: S

    def __call__(self, state: S | Any = MISSING, message: Message | Mapping[str, Any] | None = None) -> S:
        if state is MISSING:
            state = self.default
        if message is None:
            return state
        message = Message.coerce(message)
        tag = message.tag

        if is_deferred_tag(tag):
            return state

        entry = self.table.get(tag, _ABSENT)
        if entry is _ABSENT:
            return state

        if DEBUG_DISPATCH:
            logger.debug("%s reducing %s payload=%s", self.identity, tag, truncate_repr(message.payload))
        if entry is REPLACE_STATE:
            return message.payload
        if callable(entry):
            return entry(state, message.payload)
        return entry

    def handles(self, tag: str) -> bool:
        return tag in self.table


def create_reducer(handler: Any) -> Transition[Any]:
    """Classify ``handler`` and build its transition function."""

    classification = classify(handler)
    logger.debug("creating reducer for %s", classification.identity)
    return Transition(
        identity=classification.identity,
        table=classification.entries,
        default=handler.default,
    )


@dataclass(frozen=True)
class CombinedTransition:
    """Keyed state where each key is driven by its own transition."""

    transitions: frozendict[str, Transition[Any]]

    def __call__(
        self,
        state: Mapping[str, Any] | Any = MISSING,
        message: Message | Mapping[str, Any] | None = None,
    ) -> frozendict[str, Any]:
        previous: Mapping[str, Any] = {} if state is MISSING or state is None else state
        changed = False
        next_state: dict[str, Any] = {}
        for key, transition in self.transitions.items():
            before = previous.get(key, MISSING)
            after = transition(before, message)
            next_state[key] = after
            if before is not after:
                changed = True
        if not changed and isinstance(previous, frozendict) and len(previous) == len(next_state):
            return previous
        return frozendict(next_state)


def combine_reducers(**transitions: Transition[Any]) -> CombinedTransition:
    """Combine several handlers' transitions into one keyed-state transition."""
    if not transitions:
        raise ValueError("combine_reducers requires at least one transition")
    return CombinedTransition(frozendict(transitions))


__all__ = ["CombinedTransition", "Transition", "combine_reducers", "create_reducer"]
