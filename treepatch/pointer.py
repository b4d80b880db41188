# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

"""JSON pointers (RFC 6901) as strings and as lists of unescaped tokens."""

import re

from .errors import MalformedPointer


__all__ = [
    "decompose_pointer", "compose_pointer", "join_pointer",
    "escape_pointer_part", "unescape_pointer_part", "is_index",
]


_r_is_index = re.compile(r"^(0|[1-9][0-9]*)$")


def is_index(part):
    "Only 0 or a counting number without leading zeros; '1e0' is excluded."
    return isinstance(part, str) and _r_is_index.match(part) is not None


def escape_pointer_part(part):
    "Escape a single token: '~' becomes '~0', then '/' becomes '~1'."
    return str(part).replace("~", "~0").replace("/", "~1")


def unescape_pointer_part(part):
    # '~1' must go first, or '~01' would decode to '/' instead of '~1'
    return part.replace("~1", "/").replace("~0", "~")


def decompose_pointer(pointer):
    """Split a pointer like '/foo/0/a~1b' into ['foo', '0', 'a/b'].

    The empty pointer refers to the whole document and gives [].
    """
    if not isinstance(pointer, str):
        raise MalformedPointer("pointer must be a string, got {!r}".format(pointer))
    if pointer == "":
        return []
    if not pointer.startswith("/"):
        raise MalformedPointer("path must start with / in {!r}".format(pointer))
    return [unescape_pointer_part(part) for part in pointer.split("/")[1:]]


def compose_pointer(parts):
    "Join tokens like ['foo', 0, 'a/b'] into '/foo/0/a~1b'."
    return "".join("/" + escape_pointer_part(part) for part in parts)


def join_pointer(pointer, part):
    return pointer + "/" + escape_pointer_part(part)
