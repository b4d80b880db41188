# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from . import log
from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args, add_output_args,
    add_simplexml_args, json_indent_from_args,
    )
from .errors import PatchError, format_error
from .patching import patch
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = "Apply a JSON Patch, e.g. from tpdiff, to a JSON document."


def main_patch(args):
    doc_filename = args.doc
    patch_filename = args.patch
    output_filename = args.output

    for fn in (doc_filename, patch_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    before = read_json(doc_filename)
    patches = read_json(patch_filename)

    try:
        after = patch(before, patches, simplexml=args.simplexml)
    except PatchError as e:
        log.error("Could not apply %s: %s", patch_filename, format_error(e))
        return 1

    write_json(after, output_filename or sys.stdout, indent=json_indent_from_args(args))
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the tppatch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        add_help=True,
        )
    add_generic_args(parser)
    add_output_args(parser)
    add_simplexml_args(parser)
    add_filename_args(parser, ["doc", "patch"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
