# -*- coding: utf-8 -*-

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

from treepatch import patch, diff, considered_equal
from treepatch.patch_format import is_valid_patch


def check_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b."
    d = diff(a, b)
    assert is_valid_patch(d)
    assert considered_equal(patch(a, d), b)
    return d


def check_symmetric_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)


def check_reversed_diff_and_patch(a, b):
    """Check that patch(a, diff(a,b)) reproduces b with the entries
    applied in reverse order too.

    Only expected to hold while no array in b is more than one item
    longer than its counterpart in a.
    """
    d = diff(a, b)
    assert considered_equal(patch(a, d[::-1]), b)
