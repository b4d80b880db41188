# coding: utf-8

# Copyright (c) treepatch Development Team.
# Distributed under the terms of the Modified BSD License.

from .generic import diff
from .comparing import considered_equal

__all__ = ["diff", "considered_equal"]
