"""Configuration of the treepatch apps.

Each app (tpdiff, tppatch, tpget, tpfixtures) has a configurable class
below, named after the section it reads from treepatch_config.json.
Files in the working directory take precedence over those on the
jupyter config path, e.g.:

    {"Patch": {"simplexml": true, "indent": -1}}

Command line arguments override whatever the files set.
"""

import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Integer, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


class TreepatchConfigurable(HasTraits):
    "Base of the per-app sections; only traits tagged config=True are read."

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    """Merge defaults and treepatch_config.json sections for an app.

    Sections are applied in reverse method resolution order, so the
    section named after the app itself (e.g. Patch for tppatch) wins.
    """
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    for c in _load_config_files('treepatch_config', path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, TreepatchConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(TreepatchConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Output(Global):

    indent = Integer(
        2,
        help="indentation used when writing JSON output; -1 for compact output.",
    ).tag(config=True)

    color = Bool(
        True,
        help="whether to use ANSI colors when printing to the terminal.",
    ).tag(config=True)


class _Compat(TreepatchConfigurable):

    simplexml = Bool(
        False,
        help="treat scalar leaves as 1-length arrays while patching, and "
             "collapse 1-length arrays in the result, as produced by "
             "simplexml style XML converters.",
    ).tag(config=True)


class Diff(_Output):
    pass


class Patch(_Output, _Compat):
    pass


class Get(_Output, _Compat):
    pass


class Fixtures(Global, _Compat):

    verbose = Bool(
        False,
        help="report passing fixture records as well as failures.",
    ).tag(config=True)

    check_diff = Bool(
        True,
        help="also check that diff(doc, expected) patches doc into expected, "
             "in both list orders.",
    ).tag(config=True)


entrypoint_configurables = {
    'tpdiff': Diff,
    'tppatch': Patch,
    'tpget': Get,
    'tpfixtures': Fixtures,
}
