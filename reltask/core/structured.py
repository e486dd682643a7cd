"""Helpers for safely reading parsed TOML.

They provide runtime validation and static type narrowing at the boundary
where untyped configuration enters the program.
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
    """Get a string value from a mapping, stripping whitespace.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys) from a mapping."""
    value = table.get(key)
    return as_str_dict(value)


def get_argv(table: Mapping[str, object], key: str) -> tuple[str, ...] | None:
    """Get a command prefix (non-empty list of non-empty strings).

    Entries are kept exactly as written; an argv element may legitimately
    contain spaces. Returns None when the value is missing or malformed.
    """
    value = table.get(key)
    if not isinstance(value, list) or not value:
        return None
    items = cast(list[object], value)
    argv: list[str] = []
    for item in items:
        if not isinstance(item, str) or not item:
            return None
        argv.append(item)
    return tuple(argv)
