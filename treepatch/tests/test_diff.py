# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

import random

import pytest

from treepatch import diff, patch, get, considered_equal
from treepatch.patch_format import op_add, op_remove, op_replace
from treepatch.values import MAX_DEPTH
from treepatch.diffing.generic import diff_values

from .utils import (
    check_diff_and_patch, check_symmetric_diff_and_patch,
    check_reversed_diff_and_patch,
)


@pytest.mark.parametrize("value", [
    None, True, 0, 1.5, "", "foo",
    [], {}, [1, [2, [3]]], {"a": {"b": [1, {"c": None}]}},
    {"0": "a", "1": "b"}, {"0": "a", "2": "c"},
])
def test_diff_identical_is_empty(value):
    assert diff(value, value) == []


def test_diff_empty_collections():
    assert diff({}, []) == []
    assert diff([], {}) == []
    assert diff({"a": []}, {"a": {}}) == []


def test_diff_scalars():
    assert diff(1, 2) == [op_replace("", 2)]
    assert diff("a", None) == [op_replace("", None)]
    # Leaf comparison is strict
    assert diff(1, 1.0) == [op_replace("", 1.0)]
    assert diff(1, True) == [op_replace("", True)]
    assert diff(0, False) == [op_replace("", False)]


def test_diff_scalar_against_collection():
    assert diff(1, [1]) == [op_replace("", [1])]
    assert diff({"a": 1}, "a") == [op_replace("", "a")]
    assert diff(0, {"a": 1}) == [op_replace("", {"a": 1})]
    assert diff(None, []) == [op_replace("", [])]


def test_diff_array_against_object():
    assert diff([1, 2], {"a": 1}) == [op_replace("", {"a": 1})]
    assert diff({"a": 1}, [1, 2]) == [op_replace("", [1, 2])]


def test_diff_object_members():
    d = diff({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert sorted(d, key=lambda e: e["path"]) == [
        op_remove("/a"),
        op_replace("/b", 3),
        op_add("/c", 4),
    ]
    check_diff_and_patch({"a": 1, "b": 2}, {"b": 3, "c": 4})


def test_diff_from_empty_object_replaces():
    assert diff({}, {"a": 1, "b": 2}) == [op_replace("", {"a": 1, "b": 2})]
    assert diff([], {"a": 1}) == [op_replace("", {"a": 1})]


def test_diff_to_empty_removes_members():
    d = diff({"a": 1, "b": 2}, {})
    assert sorted(d, key=lambda e: e["path"]) == [op_remove("/a"), op_remove("/b")]
    check_diff_and_patch({"a": 1, "b": 2}, [])


def test_diff_escapes_keys():
    d = diff({"a/b": 1, "m~n": 2}, {"a/b": 3})
    assert sorted(d, key=lambda e: e["path"]) == [
        op_replace("/a~1b", 3),
        op_remove("/m~0n"),
    ]


def test_diff_path_prefix():
    assert diff(1, 2, path="/x") == [op_replace("/x", 2)]
    assert diff({"a": 1}, {"a": 2}, path="/x/0") == [op_replace("/x/0/a", 2)]


def test_diff_entries_have_attribute_access():
    e, = diff({"a": 1}, {"a": 2})
    assert e.op == "replace"
    assert e.path == "/a"
    assert e.value == 2


def test_diff_array_growing():
    assert diff([1], [1, 2, 3]) == [op_add("/1", 2), op_add("/2", 3)]
    assert diff([], ["a"]) == [op_add("/0", "a")]
    check_diff_and_patch([1], [1, 2, 3])


def test_diff_array_shrinking_removes_at_new_length():
    d = diff([1, 2, 3, 4], [1])
    assert d == [op_remove("/1"), op_remove("/1"), op_remove("/1")]
    assert patch([1, 2, 3, 4], d) == [1]
    assert patch([1, 2, 3, 4], d[::-1]) == [1]


def test_diff_array_items_in_place():
    d = diff(["a", "b", "c"], ["a", "x", "c"])
    assert d == [op_replace("/1", "x")]
    d = diff([{"a": 1}, {"b": 2}], [{"a": 1}, {"b": 3}])
    assert d == [op_replace("/1/b", 3)]


def test_diff_array_insert_in_middle():
    a = {"foo": ["bar", "baz"]}
    b = {"foo": ["bar", "qux", "baz"]}
    assert diff(a, b) == [op_replace("/foo/1", "qux"), op_add("/foo/2", "baz")]
    check_symmetric_diff_and_patch(a, b)


def test_diff_array_like_objects():
    a = {"0": "a", "1": "b"}
    b = ["a", "x", "b"]
    check_symmetric_diff_and_patch(a, b)
    assert diff(a, ["a", "b"]) == []


def test_diff_gappy_objects_replace_whole():
    a = {"0": "a", "2": "c"}
    assert diff(a, {"0": "a", "3": "c"}) == [op_replace("", {"0": "a", "3": "c"})]
    assert diff(a, {"2": "c", "0": "a"}) == []
    assert diff({"x": a}, {"x": {}}) == [op_replace("/x", {})]
    check_symmetric_diff_and_patch(a, ["a", "b", "c"])


def test_diff_mixed_integer_and_string_keys():
    a = {"1": "b", "0": "a", "x": 1}
    check_diff_and_patch(a, {})
    check_diff_and_patch(a, {"0": "z", "y": 2})
    check_diff_and_patch({"q": 1}, {"y": 2, "0": "c", "1": "d"})
    check_diff_and_patch({"x": 1, "0": "p"}, {"y": 2, "0": "q", "1": "r"})


def test_diff_integer_keyed_objects_replace_whole_when_keys_change():
    a = {"a": "x", "0": {"b": 1}, "1": None}
    b = {"c/d": []}
    assert diff(a, b) == [op_replace("", b)]
    assert diff({"x": 1, "0": "p"}, {"0": "q", "x": 1}) == [op_replace("/0", "q")]
    assert diff({"0": "a", "2": "c"}, {"0": "a", "2": "d"}) == [op_replace("/2", "d")]
    for a, b in [
            ({"a": "x", "0": {"b": 1}, "1": None}, {"c/d": []}),
            ({"1": "b", "0": "a", "x": 1}, {}),
            ({"1": "b", "0": "a", "x": 1}, {"0": "z", "y": 2}),
            ({"q": 1}, {"y": 2, "0": "c", "1": "d"}),
            ({"x": 1, "0": "p"}, {"x": 2, "0": "q"}),
            ({"k": {"0": "a", "y": 1}}, {"k": {"0": "a"}}),
            ]:
        check_symmetric_diff_and_patch(a, b)
        check_reversed_diff_and_patch(a, b)
        check_reversed_diff_and_patch(b, a)


def test_diff_nested():
    a = {"a": [{"b": [1, 2]}, {"c": 3}], "d": "x"}
    b = {"a": [{"b": [1, 2, 3]}, {"c": {"e": 4}}]}
    d = diff(a, b)
    assert sorted(d, key=lambda e: e["path"]) == [
        op_add("/a/0/b/2", 3),
        op_replace("/a/1/c", {"e": 4}),
        op_remove("/d"),
    ]
    check_symmetric_diff_and_patch(a, b)
    check_reversed_diff_and_patch(a, b)


def test_diff_validates_against_schema(patch_validator):
    a = {"a": [1, 2, {"b": None}], "c/d": "e", "f": {"g": True}}
    b = {"a": [1, {"b": None}], "c/d": "f", "h": []}
    d = diff(a, b)
    patch_validator.validate(d)


def _nested_lists(leaf, depth):
    value = leaf
    for i in range(depth):
        value = [value]
    return value


def test_diff_deep_nesting_is_total():
    a = _nested_lists(0, MAX_DEPTH + 50)
    b = _nested_lists(1, MAX_DEPTH + 50)
    d = diff(a, b)
    assert len(d) == 1
    e = d[0]
    assert e.op == "replace"
    assert e.path == "/0" * MAX_DEPTH
    result = patch(a, d)
    assert get(result, e.path) is e.value

    assert diff(a, a) == []
    assert diff(a, _nested_lists(0, MAX_DEPTH + 50)) == []
    # Too deep to even compare below the cutoff
    deeper = _nested_lists(0, MAX_DEPTH + 10)
    assert diff_values("", deeper, deeper, MAX_DEPTH) == []
    assert diff_values("", deeper, _nested_lists(0, MAX_DEPTH + 10), MAX_DEPTH) == [
        op_replace("", deeper)]


def _random_value(rng, depth=0):
    kind = rng.randint(0, 9 if depth < 3 else 4)
    if kind == 0:
        return None
    elif kind == 1:
        return rng.choice([True, False])
    elif kind == 2:
        return rng.randint(0, 3)
    elif kind == 3:
        return rng.choice(["", "a", "b", "1"])
    elif kind == 4:
        return rng.choice([[], {}])
    elif kind < 7:
        return [_random_value(rng, depth + 1) for i in range(rng.randint(0, 4))]
    else:
        keys = rng.sample(["a", "b", "c/d", "e~f", "0", "1", "2"], rng.randint(1, 4))
        return dict((key, _random_value(rng, depth + 1)) for key in keys)


def _mutate(rng, value, depth=0):
    "Return a value resembling value, with a few random changes."
    if isinstance(value, list) and value and rng.random() < 0.8:
        value = [_mutate(rng, v, depth + 1) for v in value]
        if rng.random() < 0.3:
            del value[rng.randrange(len(value))]
        if rng.random() < 0.3:
            value.insert(rng.randint(0, len(value)), _random_value(rng, depth + 1))
        return value
    if isinstance(value, dict) and value and rng.random() < 0.8:
        value = dict((k, _mutate(rng, v, depth + 1)) for k, v in value.items())
        if rng.random() < 0.3:
            del value[rng.choice(sorted(value))]
        if rng.random() < 0.3:
            value[rng.choice(["a", "z", "0", "5"])] = _random_value(rng, depth + 1)
        return value
    if rng.random() < 0.3:
        return _random_value(rng, depth)
    return value


def test_diff_and_patch_random_documents(slow):
    rng = random.Random(1234)
    for i in range(2000):
        a = _random_value(rng)
        b = _mutate(rng, a)
        check_symmetric_diff_and_patch(a, b)
        assert diff(a, a) == []
        assert considered_equal(patch(a, []), a)
