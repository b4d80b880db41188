# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

"""Value model helpers.

Documents are plain decoded JSON: None, bool, int, float, str, list and
dict.  Whether a collection behaves like an array or like an object is
decided from its current keys by `is_associative`, never from its Python
type alone.  Empty collections are array-like, and a dict whose keys are
exactly "0".."n-1" is array-like too.
"""

import re

from .errors import NestingTooDeep


__all__ = [
    "is_collection", "is_associative", "is_integer_key",
    "as_list", "iter_items", "has_key", "get_child", "with_child",
    "collapse_singletons", "MAX_DEPTH", "check_depth",
]


# Maximum nesting followed by any recursive walk
MAX_DEPTH = 200

# Canonical decimal spelling of an integer, e.g. "0", "12", "-3" but not "01"
_r_integer_key = re.compile(r"^(0|-?[1-9][0-9]*)$")


def check_depth(depth):
    if depth > MAX_DEPTH:
        raise NestingTooDeep(
            "Nesting deeper than {} levels".format(MAX_DEPTH))


def is_collection(x):
    return isinstance(x, (list, dict))


def is_integer_key(key):
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    return isinstance(key, str) and _r_integer_key.match(key) is not None


def is_associative(x):
    """Test whether a collection looks like an object rather than an array.

    Non-collections and empty collections are not associative.  A dict
    is associative if it has any non-integer key, or if its integer
    keys are not exactly 0..len-1 (e.g. {"0": "a", "2": "c"}).
    """
    if not isinstance(x, dict) or not x:
        return False
    indices = set()
    for key in x:
        if not is_integer_key(key):
            return True
        indices.add(int(key))
    return indices != set(range(len(x)))


def as_list(c):
    """Return the elements of an array-like collection in index order."""
    if isinstance(c, list):
        return c
    return [c[str(i)] for i in range(len(c))]


def iter_items(c):
    """Yield (key, value) pairs of a collection, keys always as strings."""
    if isinstance(c, list):
        for i, value in enumerate(c):
            yield str(i), value
    else:
        for key, value in c.items():
            yield key, value


def _list_index(c, key):
    if isinstance(key, str) and _r_integer_key.match(key) and not key.startswith('-'):
        i = int(key)
        if i < len(c):
            return i
    return None


def has_key(c, key):
    if isinstance(c, list):
        return _list_index(c, key) is not None
    if isinstance(c, dict):
        return key in c
    return False


def get_child(c, key):
    """Look up a child by pointer token. Raises KeyError if absent."""
    if isinstance(c, list):
        i = _list_index(c, key)
        if i is None:
            raise KeyError(key)
        return c[i]
    return c[key]


def with_child(c, key, value):
    """Return a shallow copy of collection c with child key set to value."""
    if isinstance(c, list):
        newobj = list(c)
        newobj[_list_index(c, key)] = value
    else:
        newobj = dict(c)
        newobj[key] = value
    return newobj


def _is_singleton(x):
    if isinstance(x, list):
        return len(x) == 1
    return isinstance(x, dict) and len(x) == 1 and "0" in x


def collapse_singletons(value, depth=0):
    """Turn every 1-length array into its only element, bottom-up.

    This mirrors the way simplexml style converters represent elements
    that occur only once.  Unchanged subtrees are returned as-is.
    """
    check_depth(depth)
    while _is_singleton(value):
        value = value[0] if isinstance(value, list) else value["0"]
    if not is_collection(value):
        return value

    changed = False
    items = []
    for key, child in iter_items(value):
        newchild = collapse_singletons(child, depth + 1)
        changed = changed or newchild is not child
        items.append((key, newchild))
    if not changed:
        return value
    if isinstance(value, list):
        return [child for _, child in items]
    return dict(items)
