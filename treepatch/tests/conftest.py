# -*- coding: utf-8 -*-

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

import glob
import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


def _fixture_file_names():
    return sorted(
        os.path.basename(fn)
        for fn in glob.glob(pjoin(testspath(), "files", "*_tests.json")))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture(params=_fixture_file_names())
def fixture_file(request, filespath):
    return os.path.join(filespath, request.param)


@fixture
def json_schema_patch(request):
    schema_path = os.path.join(schema_dir, 'patch_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def patch_validator(request, json_schema_patch):
    return Validator(json_schema_patch)
