"""Behaviour of synthesized transition functions."""

import pytest
from frozendict import frozendict

from reduxproxy import (
    MISSING,
    REPLACE_STATE,
    Handler,
    Message,
    combine_reducers,
    create_reducer,
    saga_handlers,
)


class H(Handler):
    default = 0
    reset = REPLACE_STATE
    frozen = "constant-state"

    def setCount(self, state, payload):
        return payload

    def count(self, state, payload):
        return state

    def add(self, state, payload):
        return state + payload

    def fetchData(self, payload):
        yield payload


@pytest.fixture
def reducer():
    return create_reducer(H())


def test_missing_state_uses_handler_default(reducer):
    assert reducer(MISSING, Message("H.unknown")) == 0
    assert reducer() == 0


def test_transition_function_applies_payload(reducer):
    assert reducer(0, Message("H.setCount", 5)) == 5
    assert reducer(2, Message("H.add", 3)) == 5


def test_unknown_tag_leaves_state_unchanged(reducer):
    state = object()
    assert reducer(state, Message("H.unknown", 1)) is state
    assert reducer(state, Message("Other.setCount", 1)) is state


def test_replace_state_returns_payload_verbatim(reducer):
    payload = {"x": 1}
    assert reducer({"y": 2}, Message("H.reset", payload)) is payload


def test_constant_entry_becomes_state(reducer):
    assert reducer(10, Message("H.frozen", "ignored")) == "constant-state"


def test_deferred_tags_never_change_state(reducer):
    assert reducer(7, Message("H.setCount__SAGA", 5)) == 7
    assert reducer(7, Message("H.fetchData__SAGA", None)) == 7


def test_generator_operation_is_not_in_table(reducer):
    assert not reducer.handles("H.fetchData")
    assert reducer(3, Message("H.fetchData", None)) == 3
    assert [type(handler) for handler in saga_handlers()] == [H]


def test_mapping_messages_are_accepted(reducer):
    assert reducer(0, {"tag": "H.setCount", "payload": 9}) == 9
    assert reducer(0, {"tag": "H.reset", "payload": [1]}) == [1]


def test_table_is_immutable(reducer):
    assert isinstance(reducer.table, frozendict)
    with pytest.raises(TypeError):
        reducer.table["H.extra"] = 1


def test_exceptions_from_transitions_propagate():
    class Failing(Handler):
        default = 0

        def explode(self, state, payload):
            raise ZeroDivisionError("boom")

    reducer = create_reducer(Failing())
    with pytest.raises(ZeroDivisionError):
        reducer(0, Message("Failing.explode"))


def test_message_rejects_empty_tag():
    with pytest.raises(ValueError):
        Message("")


def test_combine_reducers_routes_by_tag():
    class Todos(Handler):
        default = ()

        def add(self, state, payload):
            return (*state, payload)

    combined = combine_reducers(counter=create_reducer(H()), todos=create_reducer(Todos()))

    state = combined(MISSING, Message("H.setCount", 2))
    assert state == {"counter": 2, "todos": ()}

    state = combined(state, Message("Todos.add", "write tests"))
    assert state == {"counter": 2, "todos": ("write tests",)}

    unchanged = combined(state, Message("Nobody.add", 1))
    assert unchanged is state


def test_combine_reducers_requires_transitions():
    with pytest.raises(ValueError):
        combine_reducers()
