# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import json
import locale
import os
import sys

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def read_json(f):
    """Read and return a decoded JSON document from filename

    Parameters:
        f:  The filename to read from, or a file-like object.
            The null filename ("/dev/null" on *nix, "nul" on Windows)
            reads as an empty document.
    """
    if f == EXPLICIT_MISSING_FILE:
        return {}
    if isinstance(f, str):
        with io.open(f, encoding='utf8') as fo:
            return json.load(fo)
    return json.load(f)


def write_json(value, f, indent=2):
    """Write value as JSON to filename f, or to a file-like object."""
    if isinstance(f, str):
        with io.open(f, 'w', encoding='utf8') as fo:
            write_json(value, fo, indent)
        return
    if indent is None:
        json.dump(value, f)
    else:
        json.dump(value, f, indent=indent, separators=(",", ": "))
    f.write("\n")


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        # if error-handler is strict, switch to replace
        if errors == 'strict' or errors.startswith('surrogate'):
            bin_stream = stream.buffer
            new_stream = codecs.getwriter(enc)(bin_stream, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """

    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
