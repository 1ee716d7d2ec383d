"""
Runtime configuration for the reduxproxy package.

Settings are read once from the environment at import time.
"""

import os

# Environment variable to control verbose dispatch logging
DEBUG_DISPATCH = os.environ.get("REDUXPROXY_DEBUG", "").lower() in ("1", "true", "yes")

# Default limit for truncating payload reprs in log records.
DEFAULT_REPR_LIMIT = 200


def _read_repr_limit() -> int:
    raw = os.environ.get("REDUXPROXY_REPR_LIMIT", "")
    try:
        limit = int(raw)
    except ValueError:
        return DEFAULT_REPR_LIMIT
    return limit if limit > 0 else DEFAULT_REPR_LIMIT


REPR_LIMIT = _read_repr_limit()


def truncate_repr(obj: object, limit: int | None = None) -> str:
    """Return ``repr(obj)`` cut down to ``limit`` characters."""
    if limit is None:
        limit = REPR_LIMIT
    try:
        text = repr(obj)
    except Exception as repr_error:  # pragma: no cover - broken __repr__
        return f"<repr failed: {repr_error!r}>"
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... [truncated {len(text) - limit} chars]"


__all__ = ["DEBUG_DISPATCH", "DEFAULT_REPR_LIMIT", "REPR_LIMIT", "truncate_repr"]
