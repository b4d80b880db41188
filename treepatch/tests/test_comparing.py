# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

from treepatch import considered_equal
from treepatch.diffing.comparing import identical_scalars


def test_scalars():
    assert considered_equal(1, 1)
    assert considered_equal(1, 1.0)
    assert considered_equal("a", "a")
    assert considered_equal(None, None)
    assert considered_equal(True, True)
    assert not considered_equal(1, "1")
    assert not considered_equal(True, 1)
    assert not considered_equal(False, 0)
    assert not considered_equal(None, 0)
    assert not considered_equal(None, "")
    assert not considered_equal("", [])


def test_object_member_order_does_not_matter():
    assert considered_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})
    assert considered_equal(
        {"x": [{"a": 1, "b": 2}]}, {"x": [{"b": 2, "a": 1}]})


def test_array_order_matters():
    assert considered_equal([1, 2], [1, 2])
    assert not considered_equal([1, 2], [2, 1])
    assert not considered_equal([1], [1, 1])


def test_empty_object_equals_empty_array():
    assert considered_equal({}, [])
    assert considered_equal({"a": {}}, {"a": []})


def test_array_like_objects_equal_arrays():
    assert considered_equal({"0": "a", "1": "b"}, ["a", "b"])
    assert considered_equal({"1": "b", "0": "a"}, ["a", "b"])
    assert not considered_equal({"0": "a", "2": "b"}, ["a", "b"])
    assert not considered_equal({"a": 1}, [1])


def test_identical_scalars_is_strict():
    assert identical_scalars(1, 1)
    assert identical_scalars("a", "a")
    assert identical_scalars(None, None)
    assert not identical_scalars(1, 1.0)
    assert not identical_scalars(1, True)
    assert not identical_scalars(0, False)
