# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

"""Errors raised while resolving pointers and applying patches.

Every error aborts the enclosing call; nothing is partially applied.
`diff` never raises any of these.
"""

__all__ = [
    "PatchError",
    "MalformedPointer",
    "MissingField",
    "UnrecognizedOp",
    "PathNotFound",
    "InvalidKeyForContainer",
    "OutOfBounds",
    "InvalidRootOperation",
    "TestFailed",
    "NestingTooDeep",
    "format_error",
]


class PatchError(ValueError):
    """Base class for all treepatch errors."""
    pass


class MalformedPointer(PatchError):
    """Pointer string is non-empty and does not start with '/'."""
    pass


class MissingField(PatchError):
    """A required field ('op', 'path', 'value' or 'from') is absent."""
    pass


class UnrecognizedOp(PatchError):
    pass


class PathNotFound(PatchError):
    """A pointer step or a replace/remove target does not exist."""
    pass


class InvalidKeyForContainer(PatchError):
    """A non-index token was used on an array."""
    pass


class OutOfBounds(PatchError):
    pass


class InvalidRootOperation(PatchError):
    """remove or append aimed at the whole document, or a move out of it."""
    pass


class TestFailed(PatchError):
    # Keep pytest from collecting this as a test class
    __test__ = False


class NestingTooDeep(PatchError):
    """Document or pointer nesting exceeds values.MAX_DEPTH."""
    pass


def format_error(e):
    """Return a short message like 'PathNotFound: detail'."""
    name = e.__class__.__name__
    msg = str(e).strip()
    return "{}: {}".format(name, msg) if msg else name
