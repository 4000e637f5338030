# jsonnetkit

Building blocks for a Jsonnet evaluator, in plain Python with no dependencies
outside the standard library.

- `jsonnetkit.location`: `Source`, `Location` and `LocationRange`, with
  `build_source`, `get_snippet`, `line_beginning`, `line_ending`,
  `location_before`, `location_range_between` and
  `make_location_range_message` for diagnostics.
- `jsonnetkit.fodder`: the whitespace and comment "fodder" kept next to tokens
  (`FodderKind`, `FodderElement`, `make_fodder_element`, `fodder_append`,
  `fodder_concat`, `fodder_move_front`, `ensure_clean_newline`,
  `count_newlines` and friends), so that source can be reformatted faithfully.
- `jsonnetkit.values`: Jsonnet value semantics on Python data (`None`, `bool`,
  numbers, `str`, `list`/`tuple`, `dict`, callables): `type_name`, `equals`,
  `primitive_equals`, `compare`, `less`, `greater`, `less_eq`, `greater_eq`,
  `plus`, `to_string` and `check_number`. Errors are raised as `JsonnetError`.
- `jsonnetkit.arrays`: array and object builtins: `make_array`, `flat_map`,
  `filter_items`, `foldl`, `foldr`, `reverse`, `sort_values`, `min_array`,
  `inclusive_range`, `sum_values`, `contains`, `object_fields`, `object_has`,
  `encode_utf8` and `decode_utf8`.
- `jsonnetkit.manifest`: `manifest_json_ex`, `manifest_toml_ex`,
  `toml_encode_string`, `toml_encode_key` and `parse_json`.

## Installation

```
pip install jsonnetkit
```

## Examples

```python
from jsonnetkit.values import plus, equals, JsonnetError
from jsonnetkit.arrays import foldl, min_array, sort_values
from jsonnetkit.manifest import manifest_json_ex, manifest_toml_ex, parse_json
from jsonnetkit.location import Location, LocationRange, build_source, get_snippet

plus("a", 1.0)                          # "a1"
plus({"x": 1.0}, {"y": 2.0})            # {"x": 1.0, "y": 2.0}
equals([1.0, "b"], [1.0, "b"])          # True
foldl(lambda acc, x: acc + x, [1.0, 2.0, 3.0], 0.0)   # 6.0
sort_values([3.0, 1.0, 2.0])            # [1.0, 2.0, 3.0]
parse_json('{"n": 1}')                  # {"n": 1.0}

try:
    min_array([])
except JsonnetError as err:
    print(err)                          # Expected at least one element in array. Got none

print(manifest_json_ex({"a": [1.0, 2.0]}, "  "))
# {
#   "a": [
#     1,
#     2
#   ]
# }

print(manifest_toml_ex({"server": {"port": 8080.0}}, "  "))

src = build_source("example.jsonnet", "local x = 1;\nx + 1\n")
loc = LocationRange(file=src, begin=Location(1, 7), end=Location(1, 8))
str(loc)                                # "example.jsonnet:1:7-8"
get_snippet(loc)                        # "x"
```

## What this package does not do

It has no lexer, parser or evaluator, so it cannot run Jsonnet programs, and it
ships no command-line tool. Arithmetic, bitwise, math and string builtins
(division, shifts, `substr`, base64 and the like) are not included; only the
operators and builtins listed above are provided.

## Running the tests

```
pip install -e ".[test]"
pytest
```