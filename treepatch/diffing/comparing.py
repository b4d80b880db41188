# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

from ..values import is_collection, is_associative, as_list, iter_items, check_depth

__all__ = ["canonical", "considered_equal", "identical_scalars"]


def canonical(value, depth=0):
    """Return a hashable canonical form of a JSON-like value.

    Object members are sorted by key, since member order is not
    significant.  Arrays keep their order.  Scalars are tagged with
    their JSON type so that True and 1 differ, while 1 and 1.0 do not.
    """
    check_depth(depth)
    if is_associative(value):
        return ("object", tuple(sorted(
            (key, canonical(child, depth + 1)) for key, child in iter_items(value))))
    elif is_collection(value):
        return ("array", tuple(canonical(child, depth + 1) for child in as_list(value)))
    elif value is None:
        return ("null",)
    elif isinstance(value, bool):
        return ("boolean", value)
    elif isinstance(value, (int, float)):
        return ("number", value)
    else:
        return ("string", value)


def considered_equal(a, b):
    "Per http://tools.ietf.org/html/rfc6902#section-4.6"
    return canonical(a) == canonical(b)


def identical_scalars(a, b):
    "Strict comparison of two leaf values: types must match as well."
    return type(a) is type(b) and a == b
