# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

import json

from . import log
from .diffing.comparing import considered_equal
from .errors import (
    PathNotFound, InvalidKeyForContainer, OutOfBounds, InvalidRootOperation, TestFailed,
)
from .patch_format import PatchOp, as_patch_list, validate_patch_entry
from .pointer import is_index
from .resolving import get_tokens
from .values import (
    is_collection, is_associative, as_list, has_key, get_child, with_child,
    collapse_singletons, check_depth,
)


__all__ = ["patch", "apply_patch_entry"]


# Tokens after which simplexml mode treats a leaf as a 1-length array
_array_position_parts = ("0", "1", "-")


def _is_array(x):
    return is_collection(x) and not is_associative(x)


def _as_valuelist(value):
    if isinstance(value, list):
        return value
    if isinstance(value, dict):
        return list(value.values())
    return [value]


def _dumps(value):
    try:
        return json.dumps(value, sort_keys=True)
    except (TypeError, ValueError):
        return repr(value)


def patch_array(doc, op, part, value):
    """Apply op at index part of the array-like collection doc.

    Returns a new list; doc itself is left untouched.
    """
    index = len(doc) if part == "-" else int(part)
    newobj = list(as_list(doc))
    if op == PatchOp.ADD:
        newobj.insert(index, value)
    elif op == PatchOp.APPEND:
        newobj[index:index] = _as_valuelist(value)
    elif op == PatchOp.REPLACE:
        newobj[index:index + 1] = [value]
    else:
        del newobj[index]
    return newobj


def patch_object(doc, op, part, value, pointer):
    """Apply op at key part of doc, treating doc as an object.

    Returns a new dict; doc itself is left untouched.
    """
    newobj = dict(doc) if isinstance(doc, dict) else {}
    if op in (PatchOp.ADD, PatchOp.APPEND):
        newobj[part] = value
    elif not has_key(doc, part):
        raise PathNotFound("{} target {!r} not set".format(op, pointer))
    elif op == PatchOp.REPLACE:
        newobj[part] = value
    else:
        del newobj[part]
    return newobj


def do_op(doc, op, parts, value, simplexml=False, pointer="", depth=0):
    """Apply a single op to the given document and return the result.

    Works recursively, rebuilding only the collections on the way down
    to the target.  Everything else is shared with doc.
    """
    check_depth(depth)

    # Special-case toplevel
    if not parts:
        if op in (PatchOp.ADD, PatchOp.REPLACE):
            return value
        if op == PatchOp.REMOVE:
            raise InvalidRootOperation("Can't remove whole document")
        raise InvalidRootOperation("{!r} can't operate on whole document".format(op))

    part = parts[0]
    rest = parts[1:]

    # Recur until we get to the target
    if rest:
        if not is_collection(doc) or not has_key(doc, part):
            raise PathNotFound("Path {!r} not found".format(pointer))
        child = get_child(doc, part)
        # Make scalar leaves look like 1-length arrays in simplexml mode
        if (simplexml and rest[0] in _array_position_parts
                and is_associative(doc) and not _is_array(child)):
            child = [child]
        newchild = do_op(child, op, rest, value, simplexml, pointer, depth + 1)
        return with_child(doc, part, newchild)

    # At target
    if not is_collection(doc):
        raise PathNotFound(
            "Target of {!r} must be an array or an object".format(pointer))

    # N.B. empty collections are not associative
    if not is_associative(doc):
        if (doc and not is_index(part)
                and not (part == "-" and op in (PatchOp.ADD, PatchOp.APPEND))):
            raise InvalidKeyForContainer(
                "Non-array key {!r} used on array at {!r}".format(part, pointer))
        if is_index(part):
            index = int(part)
            if index > len(doc) or (op == PatchOp.REMOVE and index >= len(doc)):
                raise OutOfBounds(
                    "Can't operate outside of array bounds at {!r}".format(pointer))
        if is_index(part) or (part == "-" and op in (PatchOp.ADD, PatchOp.APPEND)):
            return patch_array(doc, op, part, value)

    return patch_object(doc, op, part, value, pointer)


def _test(doc, parts, value, simplexml, pointer):
    "Implements the 'test' op."
    found = get_tokens(doc, parts, simplexml, pointer)
    if not considered_equal(found, value):
        raise TestFailed(
            "test target value different - expected {}, found {}".format(
                _dumps(value), _dumps(found)))


def apply_patch_entry(doc, e, simplexml=False):
    """Apply a single patch entry to doc and return the result.

    Unlike `patch`, singletons are not collapsed afterwards in simplexml
    mode, so entries can be replayed one at a time.
    """
    op, parts, from_parts = validate_patch_entry(e)
    path = e["path"]
    log.debug("Applying %s at %r", op, path)

    if op in (PatchOp.ADD, PatchOp.APPEND, PatchOp.REPLACE):
        doc = do_op(doc, op, parts, e["value"], simplexml, path)
    elif op == PatchOp.REMOVE:
        doc = do_op(doc, op, parts, None, simplexml, path)
    elif op == PatchOp.TEST:
        _test(doc, parts, e["value"], simplexml, path)
    elif op == PatchOp.COPY:
        value = get_tokens(doc, from_parts, simplexml, e["from"])
        doc = do_op(doc, PatchOp.ADD, parts, value, simplexml, path)
    elif op == PatchOp.MOVE:
        value = get_tokens(doc, from_parts, simplexml, e["from"])
        doc = do_op(doc, PatchOp.REMOVE, from_parts, None, simplexml, e["from"])
        doc = do_op(doc, PatchOp.ADD, parts, value, simplexml, path)
    return doc


def patch(doc, patches, simplexml=False):
    """Compute a new document from doc and a list of json-patch entries.

    A single patch entry may be passed instead of a list.  Entries are
    applied in order; the first failing entry raises a PatchError and
    doc is never modified.

    With simplexml enabled, scalar leaves act as 1-length arrays while
    patching, and 1-length arrays are collapsed to their only element
    in the result.
    """
    for e in as_patch_list(patches):
        doc = apply_patch_entry(doc, e, simplexml)

    if simplexml:
        doc = collapse_singletons(doc)
    return doc
