"""Helpers for safe debug logging.

Entropy blocks are raw random bytes and derived sequences can be long.
This module turns them into short summaries before they reach DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset({"entropy", "raw_bytes", "random_bytes"})


def redact_for_log(value: Any, *, max_items: int = 8, _depth: int = 0) -> Any:
    """Return a log-safe copy of *value*.

    Byte blobs become ``<bytes:Nb>``, sequences longer than *max_items*
    are cut, and values under entropy-carrying keys are replaced.
    """
    if _depth > 20:
        return "<max-depth>"

    if value is None or isinstance(value, (str, int, float, bool)):
        return value

    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if key.lower() in _SENSITIVE_VALUE_KEYS:
                redacted[key] = "<redacted>"
            else:
                redacted[key] = redact_for_log(v, max_items=max_items, _depth=_depth + 1)
        return redacted

    if isinstance(value, Sequence):
        items = [redact_for_log(v, max_items=max_items, _depth=_depth + 1) for v in value[:max_items]]
        if len(value) > max_items:
            items.append(f"…<{len(value) - max_items} more>")
        return items

    return repr(value)
