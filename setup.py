#!/usr/bin/env python
# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

TREEPATCH_PATH = HERE / "treepatch"


def get_version(path):
    """Read __version__ from a _version.py file without importing it."""
    with open(path, encoding="utf8") as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    return match.group(1)


VERSION = get_version(TREEPATCH_PATH / '_version.py')

LONG_DESCRIPTION = """\
Diff and patch JSON-like documents with JSON Patch (RFC 6902) and
JSON Pointer (RFC 6901), plus an 'append' operation and a compatibility
mode for documents converted from XML in the simplexml style.
"""


if __name__ == '__main__':
    setup(
      name="treepatch",
      version=VERSION,
      description="Diff and patch JSON-like documents with JSON Patch",
      long_description=LONG_DESCRIPTION,
      license="BSD",
      python_requires=">=3.7",
      packages=find_packages(include=["treepatch", "treepatch.*"]),
      package_data={
          "treepatch": ["patch_format.schema.json"],
          "treepatch.tests": ["files/*.json"],
      },
      install_requires=[
          "colorama",
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
              "jsonschema",
          ],
      },
      entry_points={
          "console_scripts": [
              "treepatch = treepatch.__main__:main_dispatch",
              "tpdiff = treepatch.diffapp:main",
              "tppatch = treepatch.patchapp:main",
              "tpget = treepatch.getapp:main",
              "tpfixtures = treepatch.fixtureapp:main",
          ],
      },
      )
