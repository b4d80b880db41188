# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, considered_equal
from .errors import (
    PatchError, MalformedPointer, MissingField, UnrecognizedOp, PathNotFound,
    InvalidKeyForContainer, OutOfBounds, InvalidRootOperation, TestFailed,
    NestingTooDeep,
)
from .patching import patch
from .pointer import compose_pointer, decompose_pointer, escape_pointer_part
from .resolving import get


__all__ = [
    "__version__",
    "get", "diff", "patch", "considered_equal",
    "compose_pointer", "decompose_pointer", "escape_pointer_part",
    "PatchError", "MalformedPointer", "MissingField", "UnrecognizedOp",
    "PathNotFound", "InvalidKeyForContainer", "OutOfBounds",
    "InvalidRootOperation", "TestFailed", "NestingTooDeep",
    ]
