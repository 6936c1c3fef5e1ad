#
# Copyright (C) 2012 - 2017 Satoru SATOH <ssato@redhat.com>
# License: GPLv3+
#
"""Cache results of single-argument functions.

>>> import icacher
>>> adder = icacher.ICacher(lambda args: args[0] + args[1], capacity=1)
>>> adder.with_arg((20, 30))
50
"""
from icacher.cacher import ICacher
from icacher.decorators import memoize, memoize_with
from icacher.locked import LockedICacher

__version__ = "0.2.0"
__all__ = ["ICacher", "LockedICacher", "memoize", "memoize_with"]

# vim:sw=4:ts=4:et:
