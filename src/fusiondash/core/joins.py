"""Join helpers shared by every composer."""

from __future__ import annotations

import json
from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
D = TypeVar("D")


def group_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items by ``key`` into an insertion-ordered multi-map.

    Every item lands in exactly one group, groups appear in the order their
    key is first seen, and items keep their relative order within a group.
    The input is not modified.
    """
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def index_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, T]:
    """Build a 1:1 lookup map; later items win on duplicate keys."""
    return {key(item): item for item in items}


def parse_json(value: Any, default: D) -> D:
    """Parse a structured column that may be stored as JSON text.

    Already-structured values pass through unchanged. Empty, malformed, or
    wrongly-shaped values (an object where a list was expected, say) yield
    ``default``. Never raises.
    """
    if value is None:
        return default
    if isinstance(value, str):
        if not value.strip():
            return default
        try:
            value = json.loads(value)
        except ValueError:
            return default
    if default is not None and not isinstance(value, type(default)):
        return default
    return value
