"""The value model and the core operators on values.

Values are plain Python objects: ``None`` is null, ``bool`` a boolean,
``int``/``float`` a number, ``str`` a string, ``list``/``tuple`` an array,
``dict`` an object and any callable a function.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping, Sequence
from typing import Any


class JsonnetError(Exception):
    """A runtime error raised while evaluating a builtin."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def type_name(value: Any) -> str:
    """The name of the value's type, as ``std.type`` reports it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if _is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if _is_array(value):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    if callable(value):
        return "function"
    raise TypeError(f"not a value: {value!r}")


def _type_error(value: Any, expected: str | None = None) -> JsonnetError:
    if expected is None:
        return JsonnetError(f"Unexpected type {type_name(value)}")
    return JsonnetError(f"Unexpected type {type_name(value)}, expected {expected}")


def _require(value: Any, expected: str) -> None:
    if type_name(value) != expected:
        raise _type_error(value, expected)


def check_number(x: float) -> float:
    """Return ``x`` as a float, raising for NaN and infinities."""
    x = float(x)
    if math.isnan(x):
        raise JsonnetError("Not a number")
    if math.isinf(x):
        raise JsonnetError("Overflow")
    return x


def _unparse_number(x: float) -> str:
    x = float(x)
    if x == math.floor(x):
        return "%.0f" % x
    return "%.17g" % x


_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape_string(s: str) -> str:
    parts = ['"']
    for c in s:
        code = ord(c)
        if c in _ESCAPES:
            parts.append(_ESCAPES[c])
        elif code < 0x20 or 0x7F <= code <= 0x9F:
            parts.append("\\u%04x" % code)
        else:
            parts.append(c)
    parts.append('"')
    return "".join(parts)


def _manifest_inline(value: Any) -> str:
    kind = type_name(value)
    if kind == "null":
        return "null"
    if kind == "boolean":
        return "true" if value else "false"
    if kind == "number":
        return _unparse_number(value)
    if kind == "string":
        return _escape_string(value)
    if kind == "function":
        raise JsonnetError("Couldn't manifest function as JSON")
    if kind == "array":
        if not value:
            return "[ ]"
        return "[" + ", ".join(_manifest_inline(item) for item in value) + "]"
    if not value:
        return "{ }"
    fields = (
        f"{_escape_string(key)}: {_manifest_inline(value[key])}"
        for key in sorted(value)
    )
    return "{" + ", ".join(fields) + "}"


def to_string(value: Any) -> str:
    """Strings unchanged; anything else manifested as single-line JSON."""
    if isinstance(value, str):
        return value
    return _manifest_inline(value)


def plus(x: Any, y: Any) -> Any:
    """The ``+`` operator."""
    if isinstance(y, str):
        return to_string(x) + y
    kind = type_name(x)
    if kind == "number":
        _require(y, "number")
        return check_number(x + y)
    if kind == "string":
        return x + to_string(y)
    if kind == "object":
        _require(y, "object")
        merged = dict(x)
        merged.update(y)
        return merged
    if kind == "array":
        _require(y, "array")
        return list(x) + list(y)
    raise _type_error(x)


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare(x: Any, y: Any) -> int:
    """Three-way comparison of numbers, strings or arrays: -1, 0 or 1."""
    kind = type_name(x)
    if kind == "number":
        _require(y, "number")
        return _sign(float(x), float(y))
    if kind == "string":
        _require(y, "string")
        return _sign(x, y)
    if kind == "array":
        _require(y, "array")
        for left, right in zip(x, y):
            result = compare(left, right)
            if result != 0:
                return result
        return _sign(len(x), len(y))
    raise _type_error(x)


def less(x: Any, y: Any) -> bool:
    return compare(x, y) == -1


def greater(x: Any, y: Any) -> bool:
    return compare(x, y) == 1


def less_eq(x: Any, y: Any) -> bool:
    return compare(x, y) <= 0


def greater_eq(x: Any, y: Any) -> bool:
    return compare(x, y) >= 0


def equals(x: Any, y: Any) -> bool:
    """Deep structural equality; functions cannot be compared."""
    kind = type_name(x)
    if kind != type_name(y):
        return False
    if kind == "null":
        return True
    if kind in ("boolean", "string"):
        return x == y
    if kind == "number":
        return float(x) == float(y)
    if kind == "array":
        return len(x) == len(y) and all(equals(a, b) for a, b in zip(x, y))
    if kind == "object":
        keys = sorted(x)
        if keys != sorted(y):
            return False
        return all(equals(x[key], y[key]) for key in keys)
    raise JsonnetError("Cannot test equality of functions")


def primitive_equals(x: Any, y: Any) -> bool:
    """Equality restricted to null, booleans, numbers and strings."""
    kind = type_name(x)
    if kind != type_name(y):
        return False
    if kind == "function":
        raise JsonnetError("Cannot test equality of functions")
    if kind in ("array", "object"):
        raise JsonnetError(f"primitiveEquals operates on primitive types, got {kind}")
    return equals(x, y)


__all__ = [
    "JsonnetError",
    "type_name",
    "check_number",
    "equals",
    "primitive_equals",
    "compare",
    "to_string",
    "plus",
    "less",
    "greater",
    "less_eq",
    "greater_eq",
]

# Keep the abstract collection names referenced for readers of the signature.
_VALUE_SHAPES = (Sequence, Mapping, Callable)