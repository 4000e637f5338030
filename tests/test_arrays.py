import pytest

from jsonnetkit.arrays import (
    contains,
    decode_utf8,
    encode_utf8,
    filter_items,
    flat_map,
    foldl,
    foldr,
    inclusive_range,
    make_array,
    min_array,
    object_fields,
    object_has,
    reverse,
    sort_values,
    sum_values,
)
from jsonnetkit.values import JsonnetError


def test_make_array_calls_function_with_indices():
    assert make_array(4, lambda i: i) == [0, 1, 2, 3]


def test_make_array_negative_size_is_empty():
    assert make_array(-3, lambda i: i) == []


def test_make_array_rejects_non_integer_size():
    with pytest.raises(JsonnetError):
        make_array(1.5, lambda i: i)


def test_make_array_rejects_non_function():
    with pytest.raises(JsonnetError, match="expected function"):
        make_array(2, "x")


def test_flat_map_array_concatenates():
    items = [1, 2, 3]
    result = flat_map(lambda x: [x, x], items)
    assert len(result) == 2 * len(items)
    assert result[::2] == items


def test_flat_map_string():
    assert flat_map(lambda c: c + c, "ab") == "aabb"


def test_flat_map_requires_array_result():
    with pytest.raises(JsonnetError):
        flat_map(lambda x: x, [1])


def test_flat_map_bad_container():
    with pytest.raises(
        JsonnetError, match="std.flatMap second param must be array / string, got number"
    ):
        flat_map(lambda x: [x], 5)


def test_filter_items_keeps_matching():
    items = list(range(10))
    result = filter_items(lambda x: x % 2 == 0, items)
    assert all(x % 2 == 0 for x in result)
    assert [x for x in items if x not in result] == [x for x in items if x % 2]


def test_filter_items_requires_boolean():
    with pytest.raises(JsonnetError, match="expected boolean"):
        filter_items(lambda x: 1, [1])


def test_foldl_order():
    items = ["a", "b", "c"]
    assert foldl(lambda acc, x: acc + x, items, "") == "".join(items)


def test_foldr_order():
    items = ["a", "b", "c"]
    assert foldr(lambda x, acc: acc + x, items, "") == "".join(reversed(items))


def test_fold_over_string_characters():
    assert foldl(lambda acc, c: [*acc, c], "xyz", []) == list("xyz")


def test_fold_empty_returns_init():
    assert foldl(lambda a, b: a + b, [], 7) == 7
    assert foldr(lambda a, b: a + b, [], 7) == 7


def test_fold_bad_container_messages():
    with pytest.raises(JsonnetError, match="foldl second parameter should be string or array, got object"):
        foldl(lambda a, b: a, {}, 0)
    with pytest.raises(JsonnetError, match="foldr second parameter should be string or array, got null"):
        foldr(lambda a, b: a, None, 0)


def test_reverse_round_trip():
    items = [3, "a", None, [1]]
    assert reverse(reverse(items)) == items
    assert reverse(items)[0] == items[-1]


def test_reverse_rejects_string():
    with pytest.raises(JsonnetError):
        reverse("abc")


def test_sort_values_sorted_permutation():
    items = [5, 3, 9, 1, 3]
    result = sort_values(items)
    assert result == sorted(items)


def test_sort_values_is_stable_with_key():
    items = [("b", 1), ("a", 2), ("c", 1), ("d", 2)]
    result = sort_values(items, lambda p: p[1])
    assert [p for p in result if p[1] == 1] == [("b", 1), ("c", 1)]
    assert [p for p in result if p[1] == 2] == [("a", 2), ("d", 2)]


def test_sort_values_incomparable_raises():
    with pytest.raises(JsonnetError):
        sort_values([1, "a"])


def test_min_array_returns_key():
    assert min_array([4, 2, 8]) == 2
    assert min_array(["bb", "a", "ccc"], lambda s: len(s)) == 1


def test_min_array_empty():
    with pytest.raises(JsonnetError, match="Expected at least one element in array. Got none"):
        min_array([])


def test_inclusive_range():
    result = inclusive_range(2, 6)
    assert result[0] == 2 and result[-1] == 6
    assert len(result) == 5


def test_inclusive_range_rejects_fraction():
    with pytest.raises(JsonnetError):
        inclusive_range(0.5, 3)


def test_sum_values():
    items = [1, 2.5, -4]
    assert sum_values(items) == float(sum(items))
    assert sum_values([]) == 0.0


def test_sum_values_rejects_non_number():
    with pytest.raises(JsonnetError, match="expected number"):
        sum_values([1, "2"])


def test_contains_uses_deep_equality():
    assert contains([{"a": [1]}, 2], {"a": [1.0]})
    assert not contains([1, 2], 3)


def test_object_fields_sorted():
    obj = {"z": 1, "a": 2, "m": 3}
    assert object_fields(obj) == sorted(obj)


def test_object_fields_rejects_array():
    with pytest.raises(JsonnetError, match="expected object"):
        object_fields([])


def test_object_has():
    assert object_has({"x": None}, "x")
    assert not object_has({"x": None}, "y")
    with pytest.raises(JsonnetError):
        object_has({"x": 1}, 1)


def test_utf8_round_trip():
    text = "héllo ☃"
    encoded = encode_utf8(text)
    assert encoded == list(text.encode("utf-8"))
    assert decode_utf8(encoded) == text


def test_decode_utf8_out_of_range():
    with pytest.raises(JsonnetError, match=r"Bytes must be integers in range \[0, 255\], got 256"):
        decode_utf8([256])


def test_decode_utf8_invalid_sequence_is_replaced():
    assert decode_utf8([0xFF]) == "\ufffd"