"""
Message tag encoding.

A tag is ``"<namespace>.<operation>"``. Tags of deferred operations carry
``DEFERRED_SUFFIX`` at the end so reducers can ignore them while the
side-effect runner picks them up.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Final

from reduxproxy.types import OperationKind

DEFERRED_SUFFIX: Final = "__SAGA"

NAMESPACE_SEPARATOR: Final = "."


def qualify(namespace: str, operation: str) -> str:
    """Join a handler namespace and an operation name into a tag."""
    return f"{namespace}{NAMESPACE_SEPARATOR}{operation}"


def to_deferred_tag(tag: str) -> str:
    """Mark ``tag`` as belonging to a deferred operation."""
    return f"{tag}{DEFERRED_SUFFIX}"


def from_deferred_tag(tag: str) -> str:
    """Strip the deferred marker; tags without one come back unchanged."""
    return tag.removesuffix(DEFERRED_SUFFIX)


def is_deferred_tag(tag: str) -> bool:
    return tag.endswith(DEFERRED_SUFFIX)


@dataclass(frozen=True)
class Tag:
    """Structured form of a wire tag."""

    namespace: str
    operation: str
    kind: OperationKind = OperationKind.PURE

    def encode(self) -> str:
        tag = qualify(self.namespace, self.operation)
        if self.kind is OperationKind.DEFERRED:
            return to_deferred_tag(tag)
        return tag

    def as_transition(self) -> Tag:
        return replace(self, kind=OperationKind.PURE)

    @classmethod
    def parse(cls, text: str) -> Tag:
        """
        Parse a wire tag.

        The namespace is everything before the first separator. A trailing
        ``DEFERRED_SUFFIX`` always reads as the deferred marker, so an
        operation whose own name ends with it cannot be told apart.
        """
        kind = OperationKind.DEFERRED if is_deferred_tag(text) else OperationKind.PURE
        namespace, sep, operation = from_deferred_tag(text).partition(NAMESPACE_SEPARATOR)
        if not sep or not namespace or not operation:
            raise ValueError(f"Tag {text!r} is not of the form '<namespace>.<operation>'")
        return cls(namespace, operation, kind)

    def __str__(self) -> str:
        return self.encode()


__all__ = [
    "DEFERRED_SUFFIX",
    "NAMESPACE_SEPARATOR",
    "Tag",
    "from_deferred_tag",
    "is_deferred_tag",
    "qualify",
    "to_deferred_tag",
]
