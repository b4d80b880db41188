# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

from .errors import PathNotFound
from .pointer import decompose_pointer, compose_pointer
from .values import is_collection, is_associative, has_key, get_child, check_depth


__all__ = ["get", "get_tokens"]


def _is_array(x):
    return is_collection(x) and not is_associative(x)


def get_tokens(doc, parts, simplexml=False, pointer=None, depth=0):
    """Follow already decomposed pointer tokens into doc.

    With simplexml enabled, a scalar (or object) leaf of an object can
    be addressed as a 1-length array, i.e. '/foo/0' finds doc['foo'].
    """
    check_depth(depth)
    if not parts:
        return doc
    if pointer is None:
        pointer = compose_pointer(parts)

    part = parts[0]
    rest = parts[1:]
    if not is_collection(doc) or not has_key(doc, part):
        raise PathNotFound("Path {!r} not found".format(pointer))
    child = get_child(doc, part)
    if simplexml and rest and rest[0] == "0" and is_associative(doc) and not _is_array(child):
        return get_tokens([child], rest, simplexml, pointer, depth + 1)
    return get_tokens(child, rest, simplexml, pointer, depth + 1)


def get(doc, pointer, simplexml=False):
    """Follow a json-pointer address into a JSON document and return
    the designated value.

    The empty pointer returns doc itself.
    """
    parts = decompose_pointer(pointer)
    return get_tokens(doc, parts, simplexml, pointer)
