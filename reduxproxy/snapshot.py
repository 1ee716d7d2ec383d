"""Describe classified handlers as JSON for tooling and debugging."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from reduxproxy.classifier import classify
from reduxproxy.config import truncate_repr
from reduxproxy.tags import qualify, to_deferred_tag
from reduxproxy.types import REPLACE_STATE, OperationKind


def _entry_kind(value: Any) -> str:
    if value is REPLACE_STATE:
        return "replace_state"
    if callable(value):
        return "transition"
    return "constant"


def build_handler_snapshot(handler: Any) -> dict[str, Any]:
    """Build a JSON-compatible description of ``handler``'s classification.

    The snapshot lists every operation with the tag a facade call would
    dispatch (both with and without ``pure_by_default``), the transition
    table entries, and the getter/setter pairs.
    """
    classification = classify(handler)
    identity = classification.identity
    paired_setters = set(handler.action_names.values())

    operations = []
    for name, kind in classification.operations.items():
        tag = qualify(identity, name)
        operations.append(
            {
                "name": name,
                "kind": kind.value,
                "tag": tag,
                "facade_tag": tag if name in paired_setters else to_deferred_tag(tag),
                "in_table": kind is OperationKind.PURE,
            }
        )

    return {
        "identity": identity,
        "default": truncate_repr(handler.default),
        "operations": operations,
        "table": {
            tag: _entry_kind(value) for tag, value in classification.entries.items()
        },
        "action_names": dict(handler.action_names),
    }


def write_handler_snapshot(handlers: list[Any], path: str | Path) -> Path:
    """Write snapshots of ``handlers`` to ``path`` as a JSON list."""
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    payload = [build_handler_snapshot(handler) for handler in handlers]
    output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.info("Handler snapshot saved to {}", output)
    return output


__all__ = ["build_handler_snapshot", "write_handler_snapshot"]
