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
from .resolving import get
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = "Print the value a JSON pointer designates in a JSON document."


def main_get(args):
    if not os.path.exists(args.doc) and args.doc != EXPLICIT_MISSING_FILE:
        print("Missing file {}".format(args.doc))
        return 1

    doc = read_json(args.doc)
    try:
        value = get(doc, args.pointer, simplexml=args.simplexml)
    except PatchError as e:
        log.error("%s", format_error(e))
        return 1

    write_json(value, sys.stdout, indent=json_indent_from_args(args))
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the tpget command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_output_args(parser)
    add_simplexml_args(parser)
    add_filename_args(parser, ["doc"])
    parser.add_argument(
        "pointer",
        help="the JSON pointer, e.g. /foo/0; an empty string selects "
             "the whole document.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_get(arguments)


if __name__ == "__main__":
    sys.exit(main())
