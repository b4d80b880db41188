# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

from .. import log
from .. import values
from ..patch_format import op_add, op_remove, op_replace
from ..pointer import join_pointer
from ..errors import NestingTooDeep
from ..values import (
    is_collection, is_associative, is_integer_key, as_list, iter_items, has_key, get_child,
)

from .comparing import considered_equal, identical_scalars

__all__ = ["diff"]


def _is_array(x):
    return is_collection(x) and not is_associative(x)


def _has_integer_keys(x):
    return is_associative(x) and any(is_integer_key(key) for key in x)


def _may_change_shape(a, b):
    """Whether adding and removing keys on the way from a to b may turn
    an object into an array partway through, e.g. {"0": 1, "2": 3}.
    """
    if not (_has_integer_keys(a) or _has_integer_keys(b)):
        return False
    return not (is_associative(a) and is_associative(b) and set(a) == set(b))


def _equal_or_replace(path, a, b):
    try:
        equal = considered_equal(a, b)
    except NestingTooDeep:
        # Too deep to compare, only the very same value counts as equal
        equal = a is b
    if equal:
        return []
    return [op_replace(path, b)]


def diff_values(path, a, b, depth=0):
    """Dispatch to a recursive diff_assoc or diff_array call if needed,
    or emit a patch entry to replace the current value.
    """
    if is_collection(a) and is_collection(b):
        if depth >= values.MAX_DEPTH:
            # Too deep to recurse safely, compare the subtrees as a whole
            return _equal_or_replace(path, a, b)

        if _may_change_shape(a, b):
            return _equal_or_replace(path, a, b)

        # Handle the {}-looks-like-[] case, when one side is associative
        if (not a or not b) and (is_associative(a) or is_associative(b)):
            return diff_assoc(path, a, b, depth)
        if is_associative(a) and is_associative(b):
            return diff_assoc(path, a, b, depth)
        if _is_array(a) and _is_array(b):
            return diff_array(path, a, b, depth)
        # Array vs object, both non-empty: they can't be equal
        return [op_replace(path, b)]

    if is_collection(a) or is_collection(b) or not identical_scalars(a, b):
        return [op_replace(path, b)]
    return []


def diff_assoc(path, src, dst, depth=0):
    """Walk object-like collections src and dst, returning a list of patch entries."""
    if not src and dst:
        return [op_replace(path, dst)]

    result = []
    for key, value in iter_items(src):
        subpath = join_pointer(path, key)
        if not has_key(dst, key):
            result.append(op_remove(subpath))
        else:
            result.extend(diff_values(subpath, value, get_child(dst, key), depth + 1))
    for key, value in iter_items(dst):
        if not has_key(src, key):
            result.append(op_add(join_pointer(path, key), value))
    return result


def diff_array(path, src, dst, depth=0):
    """Walk array-like collections src and dst, returning a list of patch entries.

    Indices are walked backwards, starting with the longest.  Trailing
    elements of src are all removed at index len(dst), which stays the
    first index past the new end however the removals are ordered.
    """
    src = as_list(src)
    dst = as_list(dst)
    lsrc = len(src)
    ldst = len(dst)

    result = []
    for i in range(max(lsrc, ldst) - 1, -1, -1):
        subpath = join_pointer(path, i)
        if i < lsrc and i < ldst:
            result.extend(diff_values(subpath, src[i], dst[i], depth + 1))
        elif i < ldst:
            result.append(op_add(subpath, dst[i]))
        else:
            result.append(op_remove(join_pointer(path, ldst)))
    return result


def diff(a, b, path=""):
    """Compute a list of json-patch entries transforming a into b.

    Applying the returned entries in order with `patch` reproduces b
    (up to `considered_equal`).  Never raises.
    """
    d = diff_values(path, a, b)
    d.reverse()
    log.debug("diff produced %d patch entries", len(d))
    return d
