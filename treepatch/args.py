# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import init_logging, set_treepatch_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_treepatch_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_treepatch_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        pretty_print_dict(
            {
                header: modify_config_for_print(config),
            },
            config=PrettyPrintConfig(out=sys.stderr)
        )
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all treepatch commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_simplexml_args(parser):
    """Adds the switches for simplexml compatibility mode.
    """
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        '-x', '--simplexml',
        dest='simplexml',
        action='store_true',
        default=False,
        help="treat scalar leaves as 1-length arrays while patching, and "
             "collapse 1-length arrays in the result.")
    group.add_argument(
        '--no-simplexml',
        dest='simplexml',
        action='store_false',
        help="disable simplexml compatibility mode, even if configured.")


def add_output_args(parser):
    """Adds optional arguments for controlling how results are printed.
    """
    parser.add_argument(
        '--indent',
        type=int,
        default=2,
        help="indentation of JSON output; -1 gives compact output.")
    parser.add_argument(
        '--no-color',
        dest='color',
        action="store_false",
        default=True,
        help="prevent use of ANSI color code escapes for text output")


filename_help = {
    "doc":      "The JSON document filename.",
    "base":     "The base JSON document filename.",
    "remote":   "The remote modified JSON document filename.",
    "patch":    "The patch filename, a JSON Patch document as output from tpdiff.",
    }


def add_filename_args(parser, names):
    """Add positional filename arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def json_indent_from_args(arguments):
    indent = getattr(arguments, 'indent', 2)
    return None if indent is None or indent < 0 else indent


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'color', True),
        **kwargs
    )
