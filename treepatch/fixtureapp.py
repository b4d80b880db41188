# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

"""Run JSON fixture files through patch and diff.

A fixture file holds a list of records like

    { "comment": "basic simplexml array promotion",
      "doc": { "foo": 1 },
      "patch": [ { "op": "add", "path": "/foo/1", "value": 2 } ],
      "expected": { "foo": [1, 2] } }

Records may carry "error" (the patch must fail) instead of
"expected", and "disabled": true to be skipped.  Records without
"doc" and "patch" are comments and always pass.
"""

import os
import sys

from . import log
from .args import (
    ConfigBackedParser, add_generic_args, add_output_args, add_simplexml_args,
    prettyprint_config_from_args,
    )
from .diffing import diff, considered_equal
from .errors import PatchError, format_error
from .patching import patch
from .prettyprint import pretty_print_record, pretty_print_patch, PrettyPrintConfig
from .utils import read_json, setup_std_streams


_description = "Check JSON fixture files of patch records against treepatch."

# Sentinel to allow None as a found value
Missing = object()


class FixtureRunner(object):
    """Runs fixture records and reports failures to config.out.

    Keeps counts of passed, failed and skipped records.
    """

    def __init__(self, simplexml=False, check_diff=True, verbose=False, config=None):
        self.simplexml = simplexml
        self.check_diff = check_diff
        self.verbose = verbose
        self.config = config or PrettyPrintConfig(use_color=False)
        self.passed = 0
        self.failed = 0
        self.skipped = 0

    def _write(self, text):
        self.config.out.write(text)

    def _fail(self, message, record, found=Missing, diffed=None):
        self._write("%s\n" % message)
        pretty_print_record(record, self.config)
        if diffed is not None:
            a, d = diffed
            self._write("diff:\n")
            pretty_print_patch(a, d, self.config)
        if found is not Missing:
            self._write("found: %r\n" % (found,))
        self._write("\n")
        return False

    def run_patch(self, record):
        """Apply the record's patch and compare with its expectations."""
        # Allow 'comment-only' test records
        if "doc" not in record or "patch" not in record:
            return True
        try:
            patched = patch(record["doc"], record["patch"], self.simplexml)
        except PatchError as e:
            if "error" not in record:
                return self._fail("test failed with exception: %s" % format_error(e), record)
            if self.verbose:
                self._write("OK: %s\ncaught:   %s\nexpected: %s\n\n" % (
                    record.get("comment", ""), format_error(e), record["error"]))
            return True

        if "error" in record:
            return self._fail("test failed: expected error didn't occur", record, found=patched)

        if "expected" in record and not considered_equal(patched, record["expected"]):
            return self._fail("test failed:", record, found=patched)

        if self.verbose and "comment" in record:
            self._write("OK: %s\n\n" % record["comment"])
        return True

    def _check_diff_direction(self, a, b, record, reverse):
        d = diff(a, b)
        try:
            patched = patch(a, d[::-1] if reverse else d)
        except PatchError as e:
            patched = e
        if isinstance(patched, PatchError) or not considered_equal(patched, b):
            label = "reverse diff test failed:" if reverse else "diff test failed:"
            return self._fail(label, record, found=patched, diffed=(a, d))
        return True

    def run_diff(self, record):
        """Check that diff(doc, expected) patches doc into expected and back.

        The reversed patch list is checked going from expected back to
        doc, which only works out while no array in doc is more than one
        item longer than its counterpart in expected.  Objects with
        integer keys are replaced whole when their keys change, so
        they never change shape halfway.
        """
        if "doc" not in record or "expected" not in record:
            return True
        forward = self._check_diff_direction(record["doc"], record["expected"], record, False)
        backward = self._check_diff_direction(record["expected"], record["doc"], record, True)
        return forward and backward

    def run_record(self, record):
        if record.get("disabled"):
            self.skipped += 1
            return True
        ok = self.run_patch(record)
        if not self.simplexml and self.check_diff:
            ok = self.run_diff(record) and ok
        if ok:
            self.passed += 1
        else:
            self.failed += 1
        return ok

    def run_file(self, filename):
        records = read_json(filename)
        if not isinstance(records, list):
            raise ValueError("Fixture file %s must hold a list of records" % filename)
        log.debug("Running %d fixture records from %s", len(records), filename)
        success = True
        for record in records:
            if not self.run_record(record):
                success = False
        return success


def main_fixtures(args):
    for fn in args.files:
        if not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1

    # This printer is to keep the unit tests passing,
    # some tests capture output with capsys which doesn't
    # pick up on sys.stdout.write()
    class Printer:
        def write(self, text):
            print(text, end="")

    runner = FixtureRunner(
        simplexml=args.simplexml,
        check_diff=args.check_diff,
        verbose=args.verbose,
        config=prettyprint_config_from_args(args, out=Printer(), simplexml=args.simplexml),
    )
    success = True
    for fn in args.files:
        if not runner.run_file(fn):
            success = False
    log.info("%d passed, %d failed, %d skipped",
             runner.passed, runner.failed, runner.skipped)
    return 0 if success else 1


def _build_arg_parser(prog=None):
    """Creates an argument parser for the tpfixtures command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_output_args(parser)
    add_simplexml_args(parser)
    parser.add_argument(
        'files',
        nargs='+',
        help="fixture files, each a JSON list of records.")
    parser.add_argument(
        '--no-diff',
        dest='check_diff',
        action='store_false',
        default=True,
        help="only check patch records, not diff round trips.")
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        default=False,
        help="report passing records as well as failures.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_fixtures(arguments)


if __name__ == "__main__":
    sys.exit(main())
