# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

import json

from .errors import MissingField, UnrecognizedOp
from .pointer import decompose_pointer


class PatchEntry(dict):
    """For internal usage in treepatch library.

    Minimal class providing attribute access to patch entry keys.
    Since 'from' is a keyword, the source pointer of move and copy
    is available as `from_`.

    Entries stay plain dicts, so a list of them is a valid JSON Patch
    document as soon as it is serialized.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        if name == "from_":
            name = "from"
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        if name == "from_":
            name = "from"
        self[name] = value


class PatchOp:
    "Collection of valid values for the op field in patch entries."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"
    APPEND = "append"

    ALL = (ADD, REMOVE, REPLACE, MOVE, COPY, TEST, APPEND)

    # Ops that carry a 'value' and ops that carry a 'from' pointer
    WITH_VALUE = (ADD, REPLACE, TEST, APPEND)
    WITH_FROM = (MOVE, COPY)


def op_add(path, value):
    "Create a patch entry to add value at path."
    return PatchEntry(op=PatchOp.ADD, path=path, value=value)

def op_remove(path):
    "Create a patch entry to remove the value at path."
    return PatchEntry(op=PatchOp.REMOVE, path=path)

def op_replace(path, value):
    "Create a patch entry to replace the value at path with given value."
    return PatchEntry(op=PatchOp.REPLACE, path=path, value=value)

def op_move(from_path, path):
    "Create a patch entry to move the value at from_path to path."
    entry = PatchEntry(op=PatchOp.MOVE, path=path)
    entry["from"] = from_path
    return entry

def op_copy(from_path, path):
    "Create a patch entry to copy the value at from_path to path."
    entry = PatchEntry(op=PatchOp.COPY, path=path)
    entry["from"] = from_path
    return entry

def op_test(path, value):
    "Create a patch entry checking that the value at path equals value."
    return PatchEntry(op=PatchOp.TEST, path=path, value=value)

def op_append(path, valuelist):
    "Create a patch entry to splice the values in valuelist in before path."
    return PatchEntry(op=PatchOp.APPEND, path=path, value=valuelist)


def _describe(e):
    try:
        return json.dumps(e, sort_keys=True)
    except (TypeError, ValueError):
        return repr(e)


def as_patch_list(patches):
    """Accept a single operation in place of a list of operations.

    An empty object stands for an empty list, as {} and [] do everywhere.
    """
    if isinstance(patches, dict):
        return [patches] if patches else []
    return list(patches)


def validate_patch_entry(e):
    """Check that e is a well formed patch entry.

    Returns a tuple (op, path parts, from parts) with both pointers
    decomposed, from parts being None for ops without a 'from'.

    Raises MissingField, UnrecognizedOp or MalformedPointer if not well
    formed.
    """
    if not isinstance(e, dict):
        raise MissingField("Patch entry {} is not an object".format(_describe(e)))
    op = e.get("op")
    if not op:
        raise MissingField("'op' missing in {}".format(_describe(e)))
    if not isinstance(e.get("path"), str):
        raise MissingField("'path' missing in {}".format(_describe(e)))
    if op not in PatchOp.ALL:
        raise UnrecognizedOp("Unrecognized op {!r} in {}".format(op, _describe(e)))

    parts = decompose_pointer(e["path"])
    from_parts = None
    if op in PatchOp.WITH_VALUE and "value" not in e:
        raise MissingField("'value' missing in {}".format(_describe(e)))
    if op in PatchOp.WITH_FROM:
        if "from" not in e:
            raise MissingField("'from' missing in {}".format(_describe(e)))
        from_parts = decompose_pointer(e["from"])
    return op, parts, from_parts


def is_valid_patch(patches):
    """Checks whether a patch (list of patch entries) is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        for e in as_patch_list(patches):
            validate_patch_entry(e)
    except ValueError:
        return False
    return True


def to_patch_entries(patches):
    "Convert plain dicts from json.load into PatchEntry objects with attribute access."
    return [PatchEntry(e) if isinstance(e, dict) else e for e in as_patch_list(patches)]
