"""Typed, step-by-step navigation of JSON documents.

Each helper checks one step of a field path and raises ``SchemaError`` naming
the full path as soon as a field is absent or of the wrong type, instead of
failing later on a ``None``.
"""

from __future__ import annotations

from typing import Any, TypeVar, cast

from cwget.errors import SchemaError

T = TypeVar("T")

_TYPE_NAMES: dict[type, str] = {
    dict: "object",
    list: "array",
    str: "string",
    int: "integer",
    bool: "boolean",
}


def _describe(value: object) -> str:
    if value is None:
        return "null"
    return _TYPE_NAMES.get(type(value), type(value).__name__)


def expect(value: object, expected: type[T], path: str) -> T:
    """Check that ``value`` has the ``expected`` JSON type.

    Booleans are never accepted where an integer is expected.

    Raises:
        SchemaError: If the type does not match
    """
    if expected is int and isinstance(value, bool):
        raise SchemaError(path, "expected integer, got boolean")
    if not isinstance(value, expected):
        raise SchemaError(
            path, f"expected {_TYPE_NAMES.get(expected, expected.__name__)}, got {_describe(value)}"
        )
    return value


def step(node: object, key: str | int, path: str) -> tuple[Any, str]:
    """Descend one level into an object (``str`` key) or array (``int`` key).

    Args:
        node: Current node
        key: Field name or array index
        path: Path of ``node``, used in error messages

    Returns:
        The child node and its path

    Raises:
        SchemaError: If ``node`` has the wrong shape or lacks ``key``
    """
    if isinstance(key, int):
        items = expect(node, list, path)
        child_path = f"{path}[{key}]"
        if key >= len(items):
            raise SchemaError(child_path, "index out of range")
        return items[key], child_path

    fields = cast(dict[str, Any], expect(node, dict, path))
    child_path = f"{path}.{key}"
    if key not in fields:
        raise SchemaError(child_path, "missing field")
    return fields[key], child_path


def walk(node: object, keys: list[str | int], path: str = "$") -> tuple[Any, str]:
    """Follow a whole field path, one validated step at a time."""
    for key in keys:
        node, path = step(node, key, path)
    return node, path


def get_typed(node: object, keys: list[str | int], expected: type[T], path: str = "$") -> T:
    """Follow ``keys`` from ``node`` and check the type of the value found."""
    value, value_path = walk(node, keys, path)
    return expect(value, expected, value_path)


def get_optional_str(fields: dict[str, Any], key: str, path: str) -> str | None:
    """Read a field that may be missing or null, but is a string otherwise."""
    value = fields.get(key)
    if value is None:
        return None
    child_path = f"{path}.{key}"
    return expect(value, str, child_path)
