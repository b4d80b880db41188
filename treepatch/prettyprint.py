# -*- coding: utf-8 -*-

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import json
import os
import pprint
import sys

import colorama

from .errors import PatchError
from .patch_format import PatchOp
from .patching import apply_patch_entry
from .resolving import get


# Indentation offset in pretty-print
IND = "  "

# Max line width used some placed in pretty-print
MAXWIDTH = 78

PATCH_ENTRY_END = '\n'

ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            simplexml=False,
            ):
        self.out = out
        self.use_color = use_color
        self.simplexml = simplexml

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if os.path.exists(filename):
        t = os.path.getmtime(filename)
        dt = datetime.datetime.fromtimestamp(t)
        return dt.isoformat(str(" "))
    else:
        return "(no timestamp)"


def format_value(v):
    "Format simple value for printing. Uses pprint for anything but strings."
    if not isinstance(v, str):
        return pprint.pformat(v)
    return v


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed.

    Calls out to generic formatters based on value
    type for dicts, lists, and multiline strings.
    Uses format_value for simple values.
    """
    if isinstance(value, dict) and value:
        pretty_print_dict(value, (), prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        pretty_print_multiline(format_value(value), prefix, config)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_patch_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path or '/', config.RESET))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict) and v:
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    elif isinstance(v, list) and v:
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = pprint.pformat(li)
    if len(listr) < MAXWIDTH - len(prefix) and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("item[%d]" % k, v, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        v = d[k]
        pretty_print_item(k, v, prefix, config)


def _lookup(doc, pointer, config):
    try:
        return True, get(doc, pointer, config.simplexml)
    except PatchError:
        return False, None


def pretty_print_patch_entry(doc, e, config=DefaultConfig):
    """Pretty-print a single patch entry against the document it applies to.

    Old values of removed and replaced entries are looked up in doc.
    """
    op = e["op"]
    path = e["path"]

    if op == PatchOp.ADD:
        pretty_print_patch_action("added", path, config)
        pretty_print_value(e["value"], config.ADD, config)

    elif op == PatchOp.APPEND:
        pretty_print_patch_action("appended before", path, config)
        pretty_print_value(e["value"], config.ADD, config)

    elif op == PatchOp.REMOVE:
        pretty_print_patch_action("deleted", path, config)
        found, aval = _lookup(doc, path, config)
        if found:
            pretty_print_value(aval, config.REMOVE, config)

    elif op == PatchOp.REPLACE:
        bval = e["value"]
        found, aval = _lookup(doc, path, config)
        if found and type(aval) is not type(bval):
            typechange = " (type changed from %s to %s)" % (
                aval.__class__.__name__, bval.__class__.__name__)
        else:
            typechange = ""
        pretty_print_patch_action("replaced" + typechange, path, config)
        if found:
            pretty_print_value(aval, config.REMOVE, config)
        pretty_print_value(bval, config.ADD, config)

    elif op in (PatchOp.MOVE, PatchOp.COPY):
        verb = "moved" if op == PatchOp.MOVE else "copied"
        pretty_print_patch_action("%s from %s to" % (verb, e["from"] or '/'), path, config)

    elif op == PatchOp.TEST:
        pretty_print_patch_action("tested", path, config)
        pretty_print_value(e["value"], config.KEEP, config)

    else:
        pretty_print_patch_action("unknown op %r at" % (op,), path, config)

    config.out.write(PATCH_ENTRY_END + config.RESET)


def pretty_print_patch(doc, patches, config=DefaultConfig):
    """Pretty-print a list of patch entries.

    Entries are replayed on a copy-on-write basis while printing, so
    old values shown for later entries are the ones they will see.
    """
    for e in patches:
        pretty_print_patch_entry(doc, e, config)
        try:
            doc = apply_patch_entry(doc, e, config.simplexml)
        except PatchError:
            # Nothing sensible to show for old values past a failing entry
            doc = None


json_diff_header = """\
tpdiff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_json_diff(afn, bfn, a, di, config=DefaultConfig):
    """Pretty-print a diff between two JSON documents

    Parameters
    ----------

    afn: str
        Filename of a, the base document
    bfn: str
        Filename of b, the updated document
    a: object
        The base document
    di: list
        The patch entries describing the transformation from a to b
    config: PrettyPrintConfig
        Config object determining what gets printed and where
    """
    if di:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(json_diff_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        pretty_print_patch(a, di, config)


_record_keys = ('comment', 'doc', 'patch', 'expected', 'error')

def pretty_print_record(record, config=DefaultConfig):
    "Print the interesting fields of a fixture record, one JSON value per line."
    lines = []
    for key in _record_keys:
        if key in record:
            lines.append('"%s": %s' % (key, json.dumps(record[key])))
    config.out.write("{ " + ",\n  ".join(lines) + " }\n")
