"""
reduxproxy - Reducers and dispatching facades synthesized from handler objects.

A handler bundles a default state with named operations. ``create_reducer``
turns it into a ``(state, message) -> state`` transition for a store, and
``create_facade`` wraps it so calling an operation dispatches a message to the
registered sink. Generator operations are deferred: their messages carry the
``__SAGA`` suffix and are left to a side-effect runner.

Example:
    >>> from reduxproxy import Handler, create_facade, create_reducer, register_sink
    >>>
    >>> class Counter(Handler):
    ...     default = 0
    ...
    ...     def set_count(self, state, payload):
    ...         return payload
    ...
    ...     def count(self, state, payload):
    ...         return state
    >>>
    >>> reducer = create_reducer(Counter())
    >>> register_sink(store)  # any object with a dispatch(message) method
    >>> create_facade(Counter()).set_count(5)
"""

from reduxproxy.classifier import Classification, classify, handler_identity
from reduxproxy.decorators import deferred, transition
from reduxproxy.errors import (
    HandlerDefinitionError,
    ReduxProxyError,
    ReservedNameError,
    SinkNotRegisteredError,
)
from reduxproxy.facade import Facade, create_facade, facade_handler
from reduxproxy.naming import getter_name_for
from reduxproxy.reducer import CombinedTransition, Transition, combine_reducers, create_reducer
from reduxproxy.registry import (
    add_saga_handler,
    clear_saga_handlers,
    deferred_operation_for,
    saga_handlers,
)
from reduxproxy.sink import (
    ContextState,
    DispatchContext,
    default_context,
    dispatch_via,
    register_sink,
)
from reduxproxy.tags import (
    DEFERRED_SUFFIX,
    Tag,
    from_deferred_tag,
    is_deferred_tag,
    qualify,
    to_deferred_tag,
)
from reduxproxy.types import MISSING, REPLACE_STATE, Handler, Message, OperationKind, Sink

__version__ = "0.1.0"

__all__ = [
    "Classification",
    "CombinedTransition",
    "ContextState",
    "DEFERRED_SUFFIX",
    "DispatchContext",
    "Facade",
    "Handler",
    "HandlerDefinitionError",
    "MISSING",
    "Message",
    "OperationKind",
    "REPLACE_STATE",
    "ReduxProxyError",
    "ReservedNameError",
    "Sink",
    "SinkNotRegisteredError",
    "Tag",
    "Transition",
    "add_saga_handler",
    "classify",
    "clear_saga_handlers",
    "combine_reducers",
    "create_facade",
    "create_reducer",
    "default_context",
    "deferred",
    "deferred_operation_for",
    "dispatch_via",
    "facade_handler",
    "from_deferred_tag",
    "getter_name_for",
    "handler_identity",
    "is_deferred_tag",
    "qualify",
    "register_sink",
    "saga_handlers",
    "to_deferred_tag",
    "transition",
]
