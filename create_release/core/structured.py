"""Helpers for narrowing untyped JSON payloads.

The GitHub API answers with arbitrary JSON; these helpers validate the shape
at the boundary and give static type checkers something to work with.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    """Return obj as StrDict if it matches, else None."""
    if is_str_dict(obj):
        return obj
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a non-empty string value from a mapping, stripping whitespace."""
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_scalar(table: Mapping[str, object], key: str) -> str | int | None:
    """Get a string or integer value as-is (bools are rejected)."""
    value = table.get(key)
    if isinstance(value, bool):
        return None
    if isinstance(value, (str, int)):
        return value
    return None
