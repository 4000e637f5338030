"""Array, folding, sorting and object field library functions."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from .values import JsonnetError, compare, equals, type_name


def _identity(x: Any) -> Any:
    return x


def _expect(value: Any, kind: str) -> Any:
    if type_name(value) != kind:
        raise JsonnetError(f"Unexpected type {type_name(value)}, expected {kind}")
    return value


def _function(value: Any) -> Callable[..., Any]:
    return _expect(value, "function")


def _integer(value: Any) -> int:
    number = float(_expect(value, "number"))
    if not number.is_integer():
        raise JsonnetError(f"Expected an integer, got {number!r}")
    return int(number)


def make_array(size: Any, func: Any) -> list[Any]:
    """``[func(0), ..., func(size - 1)]``; a negative size gives an empty array."""
    count = _integer(size)
    fn = _function(func)
    return [fn(index) for index in range(count)]


def flat_map(func: Any, items: Any) -> Any:
    """Map over an array or a string and concatenate the results."""
    fn = _function(func)
    kind = type_name(items)
    if kind == "array":
        result: list[Any] = []
        for item in items:
            result.extend(_expect(fn(item), "array"))
        return result
    if kind == "string":
        return "".join(_expect(fn(c), "string") for c in items)
    raise JsonnetError(f"std.flatMap second param must be array / string, got {kind}")


def filter_items(func: Any, items: Any) -> list[Any]:
    """Elements of ``items`` for which ``func`` returns true."""
    _expect(items, "array")
    fn = _function(func)
    return [item for item in items if _expect(fn(item), "boolean")]


def _fold_elements(items: Any, name: str) -> list[Any]:
    kind = type_name(items)
    if kind == "string":
        return list(items)
    if kind == "array":
        return list(items)
    raise JsonnetError(f"{name} second parameter should be string or array, got {kind}")


def foldl(func: Any, items: Any, init: Any) -> Any:
    """Fold from the left, calling ``func(acc, element)``."""
    fn = _function(func)
    acc = init
    for element in _fold_elements(items, "foldl"):
        acc = fn(acc, element)
    return acc


def foldr(func: Any, items: Any, init: Any) -> Any:
    """Fold from the right, calling ``func(element, acc)``."""
    fn = _function(func)
    acc = init
    for element in reversed(_fold_elements(items, "foldr")):
        acc = fn(element, acc)
    return acc


def reverse(items: Any) -> list[Any]:
    """The array in reverse order."""
    return list(reversed(_expect(items, "array")))


def sort_values(items: Any, key_f: Any = _identity) -> list[Any]:
    """Stable sort of an array by the keys ``key_f`` gives its elements."""
    _expect(items, "array")
    fn = _function(key_f)
    keyed = [(fn(item), item) for item in items]
    keyed.sort(key=functools.cmp_to_key(lambda a, b: compare(a[0], b[0])))
    return [item for _, item in keyed]


def min_array(items: Any, key_f: Any = _identity) -> Any:
    """The smallest key that ``key_f`` gives an element of the array."""
    _expect(items, "array")
    fn = _function(key_f)
    if not items:
        raise JsonnetError("Expected at least one element in array. Got none")
    smallest = fn(items[0])
    for item in items[1:]:
        current = fn(item)
        if compare(smallest, current) > 0:
            smallest = current
    return smallest


def inclusive_range(start: Any, stop: Any) -> list[int]:
    """The integers from ``start`` to ``stop``, both included."""
    first = _integer(start)
    last = _integer(stop)
    return list(range(first, last + 1))


def sum_values(items: Any) -> float:
    """The sum of an array of numbers."""
    total = 0.0
    for item in _expect(items, "array"):
        total += float(_expect(item, "number"))
    return total


def contains(items: Any, elem: Any) -> bool:
    """Whether some element of the array equals ``elem``."""
    return any(equals(item, elem) for item in _expect(items, "array"))


def object_fields(obj: Any) -> list[str]:
    """The object's field names in sorted order."""
    return sorted(_expect(obj, "object"))


def object_has(obj: Any, name: Any) -> bool:
    """Whether the object has a field called ``name``."""
    _expect(obj, "object")
    return _expect(name, "string") in obj


def encode_utf8(s: Any) -> list[int]:
    """The UTF-8 bytes of a string."""
    return list(_expect(s, "string").encode("utf-8"))


def decode_utf8(items: Any) -> str:
    """Decode an array of byte values as UTF-8; bad sequences become U+FFFD."""
    buffer = bytearray()
    for item in _expect(items, "array"):
        value = _integer(item)
        if value < 0 or value > 255:
            raise JsonnetError(f"Bytes must be integers in range [0, 255], got {value}")
        buffer.append(value)
    return bytes(buffer).decode("utf-8", errors="replace")


__all__ = [
    "make_array",
    "flat_map",
    "filter_items",
    "foldl",
    "foldr",
    "reverse",
    "sort_values",
    "min_array",
    "inclusive_range",
    "sum_values",
    "contains",
    "object_fields",
    "object_has",
    "encode_utf8",
    "decode_utf8",
]