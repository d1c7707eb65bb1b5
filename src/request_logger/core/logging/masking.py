# src/request_logger/core/logging/masking.py
"""
Masking object dumper.

Turns arbitrary structured values (dicts, lists, pydantic models, dataclasses)
into JSON strings with sensitive text fields replaced by a sentinel.

Field names are path expressions in the usual dotted/bracket notation:

    "password"           -> matches any key named `password`, at any depth
    "user.password"      -> matches `password` directly under a `user` key
    "items[0].token"     -> matches `token` in the first element of `items`

A value is masked when the path leading to it *ends with* the segments of one
of the configured expressions, so a single-segment name behaves as "match the
last path segment only". Matching is case-sensitive, which is why the default
set lists both `password` and `Password`.

Only `str` values are replaced. A sensitive key holding a number, a list or a
nested mapping is left as is (nested mappings are still walked).

The input object is never mutated: we deep-copy it first and mask the copy.
"""

import copy
import dataclasses
import json
import re
from typing import Any, Iterable

from pydantic import BaseModel

from request_logger.exceptions import SerializationFailure

MASK_VALUE = "****"
DEFAULT_MASK_FIELDS: tuple[str, ...] = ("password", "Password", "UserKey")

# "a.b[0]['c']" -> ["a", "b", "0", "c"]
_PATH_SEGMENT = re.compile(r"""[^.\[\]'"]+""")


def parse_path(expression: str) -> tuple[str, ...]:
    """Split a dotted/bracket path expression into its segments."""
    return tuple(_PATH_SEGMENT.findall(expression))


def should_mask(path: tuple[str, ...], field_paths: Iterable[tuple[str, ...]]) -> bool:
    """
    Return True if `path` ends with the segments of any configured field path.
    """
    for field_path in field_paths:
        size = len(field_path)
        if size and len(path) >= size and path[-size:] == field_path:
            return True
    return False


def _mask_children(items: Iterable[tuple[Any, Any]], path: tuple[str, ...],
                   field_paths: list[tuple[str, ...]], mask_value: str,
                   active: set[int]) -> list[tuple[Any, Any]]:
    masked = []
    for key, value in items:
        child_path = path + (str(key),)
        value = _mask_node(value, child_path, field_paths, mask_value, active)
        if isinstance(value, str) and should_mask(child_path, field_paths):
            value = mask_value
        masked.append((key, value))
    return masked


def _mask_node(node: Any, path: tuple[str, ...], field_paths: list[tuple[str, ...]],
               mask_value: str, active: set[int]) -> Any:
    # Containers are rebuilt per path, so a subtree shared by two keys is checked
    # under both. `active` holds the containers on the current path only; a cycle
    # is left in place for json.dumps to reject.
    if isinstance(node, BaseModel):
        node = node.model_dump(mode="json")
    elif dataclasses.is_dataclass(node) and not isinstance(node, type):
        node = dataclasses.asdict(node)
    elif isinstance(node, tuple):
        node = list(node)

    if not isinstance(node, (dict, list)):
        return node
    if id(node) in active:
        return node

    active.add(id(node))
    try:
        if isinstance(node, dict):
            return dict(_mask_children(node.items(), path, field_paths, mask_value, active))
        return [value for _, value in _mask_children(enumerate(node), path, field_paths, mask_value, active)]
    finally:
        active.discard(id(node))


def mask_object(obj: Any, fields: Iterable[str] = DEFAULT_MASK_FIELDS, mask_value: str = MASK_VALUE) -> Any:
    """
    Return a deep copy of `obj` with sensitive text fields replaced by `mask_value`.

    Args:
        obj: any value; non-container values are returned as a copy unchanged.
        fields: path expressions identifying sensitive fields (see module docstring).
        mask_value: sentinel written in place of matching string values.

    Non-existent paths are skipped silently.
    """
    cloned = copy.deepcopy(obj)
    field_paths = [p for p in (parse_path(f) for f in fields) if p]
    return _mask_node(cloned, (), field_paths, mask_value, set())


def dump_object(obj: Any, fields: Iterable[str] = DEFAULT_MASK_FIELDS, mask_value: str = MASK_VALUE) -> str:
    """
    Serialize the masked form of `obj` to JSON.

    Raises:
        SerializationFailure: if the value cannot be copied or encoded
            (circular references, unsupported types, excessive nesting).
    """
    try:
        return json.dumps(mask_object(obj, fields, mask_value), ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationFailure(f"Unable to serialize {type(obj).__name__}: {exc}") from exc


__all__ = [
    "MASK_VALUE",
    "DEFAULT_MASK_FIELDS",
    "parse_path",
    "should_mask",
    "mask_object",
    "dump_object",
]
