"""Manifesting values as JSON and TOML text, and parsing JSON into values."""

from __future__ import annotations

import json
import math
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from .values import JsonnetError, type_name

_TOML_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_JSON_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

_BARE_KEY_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
)


def _format_path(path: list[str]) -> str:
    return "[" + " ".join(path) + "]"


def _expect_string(value: Any) -> str:
    if type_name(value) != "string":
        raise JsonnetError(f"Unexpected type {type_name(value)}, expected string")
    return value


def _kind(value: Any) -> str:
    try:
        return type_name(value)
    except TypeError:
        return type(value).__name__


def _unparse_number(x: float) -> str:
    x = float(x)
    if x == math.floor(x):
        return "%.0f" % x
    return "%.17g" % x


def _plain_number(x: float) -> str:
    """Shortest round-tripping decimal, never in exponent notation."""
    x = float(x)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    return format(Decimal(repr(x)).normalize(), "f")


def _json_string(s: str) -> str:
    parts = ['"']
    for c in s:
        if c in _JSON_ESCAPES:
            parts.append(_JSON_ESCAPES[c])
        elif ord(c) < 0x20:
            parts.append("\\u%04x" % ord(c))
        else:
            parts.append(c)
    parts.append('"')
    return "".join(parts)


def toml_encode_string(s: str) -> str:
    """Quote ``s`` as a TOML basic string."""
    parts = ['"']
    for c in s:
        code = ord(c)
        if c in _TOML_ESCAPES:
            parts.append(_TOML_ESCAPES[c])
        elif code < 32 or 127 <= code <= 159:
            parts.append("\\u%04x" % code)
        else:
            parts.append(c)
    parts.append('"')
    return "".join(parts)


def toml_encode_key(s: str) -> str:
    """A bare key when allowed, otherwise a quoted one; empty keys become ``''``."""
    if not s:
        return "''"
    if all(c in _BARE_KEY_CHARS for c in s):
        return s
    return toml_encode_string(s)


def _toml_is_section(value: Any) -> bool:
    kind = _kind(value)
    if kind == "object":
        return True
    if kind == "array":
        return bool(value) and all(_kind(item) == "object" for item in value)
    return False


def _toml_render_value(
    value: Any, sindent: str, path: list[str], inline: bool, cindent: str
) -> str:
    kind = _kind(value)
    if kind == "null":
        raise JsonnetError(f'Tried to manifest "null" at {_format_path(path)}')
    if kind == "boolean":
        return "true" if value else "false"
    if kind == "number":
        return _unparse_number(value)
    if kind == "string":
        return toml_encode_string(value)
    if kind == "function":
        raise JsonnetError(f"Tried to manifest function at {_format_path(path)}")
    if kind == "array":
        if not value:
            return "[]"
        new_indent, separator = ("", " ") if inline else (cindent + sindent, "\n")
        rendered = (
            new_indent
            + _toml_render_value(item, sindent, path + [str(j)], True, "")
            for j, item in enumerate(value)
        )
        result = "[" + separator + ("," + separator).join(rendered) + separator
        if inline:
            result += cindent
        return result + "]"
    if kind == "object":
        fields = ", ".join(
            toml_encode_key(name)
            + " = "
            + _toml_render_value(value[name], sindent, path + [name], True, "")
            for name in sorted(value)
        )
        return "{ " + fields + " }"
    raise JsonnetError(f"Unknown object type {kind} at {_format_path(path)}")


def _section_header(path: list[str]) -> str:
    return ".".join(toml_encode_key(element) for element in path)


def _toml_render_table_array(
    value: list[Any],
    sindent: str,
    path: list[str],
    indexed_path: list[str],
    cindent: str,
) -> str:
    sections = []
    for j, item in enumerate(value):
        if _kind(item) != "object":
            raise JsonnetError(f"invalid type for section: {_kind(item)}")
        section = cindent + "[[" + _section_header(path) + "]]"
        if item:
            section += "\n"
        section += _toml_table_internal(
            item, sindent, path, indexed_path + [str(j)], cindent + sindent
        )
        sections.append(section)
    return "\n\n".join(sections)


def _toml_render_table(
    value: dict[str, Any],
    sindent: str,
    path: list[str],
    indexed_path: list[str],
    cindent: str,
) -> str:
    result = cindent + "[" + _section_header(path) + "]"
    if value:
        result += "\n"
    return result + _toml_table_internal(
        value, sindent, path, indexed_path, cindent + sindent
    )


def _toml_table_internal(
    value: dict[str, Any],
    sindent: str,
    path: list[str],
    indexed_path: list[str],
    cindent: str,
) -> str:
    fields: list[str] = []
    sections = [""]
    for name in sorted(value):
        field_value = value[name]
        child_indexed = indexed_path + [name]
        if _toml_is_section(field_value):
            child_path = path + [name]
            if _kind(field_value) == "object":
                sections.append(
                    _toml_render_table(
                        field_value, sindent, child_path, child_indexed, cindent
                    )
                )
            else:
                sections.append(
                    _toml_render_table_array(
                        field_value, sindent, child_path, child_indexed, cindent
                    )
                )
        else:
            rendered = _toml_render_value(field_value, sindent, child_indexed, False, "")
            fields.extend((toml_encode_key(name) + " = " + rendered).split("\n"))
    prefix = cindent if fields else ""
    return prefix + ("\n" + cindent).join(fields) + "\n\n".join(sections)


def manifest_toml_ex(value: Any, indent: Any) -> str:
    """Render an object as TOML, indenting nested tables by ``indent``."""
    sindent = _expect_string(indent)
    if _kind(value) != "object":
        raise JsonnetError(f"TOML body must be an object. Got {_kind(value)}")
    return _toml_table_internal(value, sindent, [], [], "")


def manifest_json_ex(
    value: Any, indent: Any, newline: Any = "\n", key_val_sep: Any = ": "
) -> str:
    """Render a value as JSON with the given indent, newline and key separator."""
    sindent = _expect_string(indent)
    nl = _expect_string(newline)
    kv_sep = _expect_string(key_val_sep)

    def render(item: Any, path: list[str], cindent: str) -> str:
        kind = _kind(item)
        if kind == "null":
            return "null"
        if kind == "string":
            return _json_string(item)
        if kind == "number":
            return _plain_number(item)
        if kind == "boolean":
            return "true" if item else "false"
        if kind == "function":
            raise JsonnetError(f"tried to manifest function at {_format_path(path)}")
        new_indent = cindent + sindent
        if kind == "array":
            lines = (
                new_indent + render(element, path + [str(j)], new_indent)
                for j, element in enumerate(item)
            )
            return "[" + nl + ("," + nl).join(lines) + nl + cindent + "]"
        if kind == "object":
            lines = (
                new_indent
                + _json_string(name)
                + kv_sep
                + render(item[name], path + [name], new_indent)
                for name in sorted(item)
            )
            return "{" + nl + ("," + nl).join(lines) + nl + cindent + "}"
        raise JsonnetError(f"unknown type to marshal to JSON: {kind}")

    return render(value, [], "")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid character '{name[0]}' looking for beginning of value")


def _finite_float(text: str) -> float:
    number = float(text)
    if math.isinf(number):
        raise ValueError(f"number {text} is out of range")
    return number


def parse_json(s: Any) -> Any:
    """Parse JSON text; all numbers become floats."""
    text = _expect_string(s)
    parse_number: Callable[[str], float] = _finite_float
    try:
        return json.loads(
            text,
            parse_int=parse_number,
            parse_float=parse_number,
            parse_constant=_reject_constant,
        )
    except ValueError as exc:
        raise JsonnetError(f"failed to parse JSON: {exc}") from None


__all__ = [
    "toml_encode_string",
    "toml_encode_key",
    "manifest_toml_ex",
    "manifest_json_ex",
    "parse_json",
]