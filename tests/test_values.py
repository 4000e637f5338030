import json
import math

import pytest

from jsonnetkit.values import (
    JsonnetError,
    check_number,
    compare,
    equals,
    greater,
    greater_eq,
    less,
    less_eq,
    plus,
    primitive_equals,
    to_string,
    type_name,
)


def _fn(x):
    return x


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "null"),
        (True, "boolean"),
        (False, "boolean"),
        (3, "number"),
        (2.5, "number"),
        ("s", "string"),
        ([1], "array"),
        ({"a": 1}, "object"),
        (_fn, "function"),
    ],
)
def test_type_name(value, expected):
    assert type_name(value) == expected


def test_check_number_passes_finite():
    assert check_number(2.5) == 2.5


def test_check_number_nan():
    with pytest.raises(JsonnetError, match="Not a number"):
        check_number(math.nan)


def test_check_number_overflow():
    with pytest.raises(JsonnetError, match="Overflow"):
        check_number(math.inf)


def test_equals_deep_structures():
    a = {"x": [1, {"y": "z"}], "n": None}
    b = {"n": None, "x": [1.0, {"y": "z"}]}
    assert equals(a, b) is True
    assert equals(a, {"x": [1, {"y": "w"}], "n": None}) is False


def test_equals_type_mismatch_is_false():
    assert equals(1, "1") is False
    assert equals(True, 1) is False
    assert equals(None, False) is False


def test_equals_different_keys():
    assert equals({"a": 1}, {"b": 1}) is False
    assert equals([1, 2], [1, 2, 3]) is False


def test_equals_functions_raise():
    with pytest.raises(JsonnetError, match="Cannot test equality of functions"):
        equals(_fn, _fn)


def test_primitive_equals_rejects_arrays():
    with pytest.raises(JsonnetError, match="primitiveEquals operates on primitive types, got array"):
        primitive_equals([1], [1])


def test_primitive_equals_scalars():
    assert primitive_equals("a", "a") is True
    assert primitive_equals(None, None) is True
    assert primitive_equals(1, "a") is False


@pytest.mark.parametrize("a, b", [(1, 2), ("a", "b"), ([1], [1, 0]), ([1, 2], [2])])
def test_compare_orderings(a, b):
    assert compare(a, b) == -1
    assert compare(b, a) == 1
    assert compare(a, a) == 0
    assert less(a, b) and greater(b, a)
    assert less_eq(a, a) and greater_eq(a, a)
    assert not less(b, a)


def test_compare_mixed_types_raises():
    with pytest.raises(JsonnetError, match="Unexpected type string, expected number"):
        compare(1, "a")


def test_compare_objects_raises():
    with pytest.raises(JsonnetError, match="Unexpected type object"):
        compare({}, {})


def test_to_string_keeps_strings():
    assert to_string("hello") == "hello"


def test_to_string_round_trips_json():
    value = {"b": [1, 2.5, None, True], "a": {"c": "q\"uote\n"}}
    assert json.loads(to_string(value)) == value


def test_to_string_pinned_values():
    assert to_string([]) == "[ ]"
    assert to_string({}) == "{ }"
    assert to_string(1.0) == "1"


def test_to_string_function_raises():
    with pytest.raises(JsonnetError):
        to_string([_fn])


def test_plus_strings_and_numbers():
    assert plus("a", "b") == "ab"
    assert plus("a", [1]) == "a" + to_string([1])
    assert plus({"k": 1}, "x") == to_string({"k": 1}) + "x"
    assert plus(1.5, 2.5) == 4.0


def test_plus_overflow():
    with pytest.raises(JsonnetError, match="Overflow"):
        plus(1e308, 1e308)


def test_plus_arrays_and_objects():
    assert plus([1], [2, 3]) == [1, 2, 3]
    assert plus({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}


def test_plus_object_with_number_raises():
    with pytest.raises(JsonnetError, match="expected object"):
        plus({}, 1)


def test_plus_number_with_array_raises():
    with pytest.raises(JsonnetError, match="expected number"):
        plus(1, [])


def test_plus_null_raises():
    with pytest.raises(JsonnetError, match="Unexpected type null"):
        plus(None, 1)