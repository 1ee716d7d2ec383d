"""Setter/getter naming convention."""

from __future__ import annotations

SETTER_PREFIX = "set"


def getter_name_for(setter_name: str) -> str | None:
    """
    Derive the getter name paired with ``setter_name``.

    ``setCount`` gives ``count`` and ``set_count`` gives ``count``. Names that
    do not follow either convention (``settle``, ``set``, ``set_``) give
    ``None``; the pairing is simply not made.
    """
    if not setter_name.startswith(SETTER_PREFIX):
        return None
    rest = setter_name[len(SETTER_PREFIX):]
    if rest.startswith("_"):
        rest = rest[1:]
        if not rest or not rest.isidentifier() or rest.startswith("_"):
            return None
        return rest
    if not rest or not rest[0].isupper():
        return None
    return rest[0].lower() + rest[1:]


__all__ = ["SETTER_PREFIX", "getter_name_for"]
