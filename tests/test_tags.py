import pytest

from reduxproxy import (
    DEFERRED_SUFFIX,
    OperationKind,
    Tag,
    from_deferred_tag,
    is_deferred_tag,
    qualify,
    to_deferred_tag,
)


def test_to_deferred_tag_appends_suffix():
    assert to_deferred_tag("Counter.load") == "Counter.load__SAGA"
    assert DEFERRED_SUFFIX == "__SAGA"


@pytest.mark.parametrize("tag", ["Counter.load", "A.b", "Todo.setItems", "x"])
def test_from_deferred_tag_reverses_to_deferred_tag(tag):
    assert from_deferred_tag(to_deferred_tag(tag)) == tag


def test_from_deferred_tag_without_suffix_is_noop():
    assert from_deferred_tag("Counter.load") == "Counter.load"
    assert from_deferred_tag(from_deferred_tag("Counter.load__SAGA")) == "Counter.load"


def test_from_deferred_tag_only_strips_trailing_suffix():
    assert from_deferred_tag("Counter.__SAGA_x") == "Counter.__SAGA_x"


def test_is_deferred_tag():
    assert is_deferred_tag("Counter.load__SAGA")
    assert not is_deferred_tag("Counter.load")


def test_qualify_joins_namespace_and_operation():
    assert qualify("Counter", "setCount") == "Counter.setCount"


def test_structured_tag_encodes_kind():
    pure = Tag("Counter", "set_count")
    deferred = Tag("Counter", "load", OperationKind.DEFERRED)

    assert pure.encode() == "Counter.set_count"
    assert deferred.encode() == "Counter.load__SAGA"
    assert str(deferred) == "Counter.load__SAGA"
    assert deferred.as_transition() == Tag("Counter", "load")


def test_structured_tag_parse():
    assert Tag.parse("Counter.load__SAGA") == Tag("Counter", "load", OperationKind.DEFERRED)
    assert Tag.parse("Counter.set_count") == Tag("Counter", "set_count")
    # only the first separator splits the namespace
    assert Tag.parse("Counter.a.b").operation == "a.b"


@pytest.mark.parametrize("text", ["Counter", ".load", "Counter.", "__SAGA"])
def test_structured_tag_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        Tag.parse(text)
