#
# Copyright (C) 2015 Satoru SATOH <ssato@redhat.com>
# License: GPLv3+
#
"""Memoization decorators
"""
import functools

import icacher.cacher
import icacher.locked


def memoize_with(capacity=None, locked=False):
    """
    Make up a memoization decorator.

    :param capacity: Capacity hint passed to the cacher
    :param locked:
        Use :class:`icacher.locked.LockedICacher` instead of
        :class:`icacher.cacher.ICacher` if True

    >>> @memoize_with(capacity=16, locked=True)
    ... def double(x):
    ...     return x * 2
    >>> double(4), double.is_cached(4), double.capacity
    (8, True, 16)
    """
    cls = icacher.locked.LockedICacher if locked else icacher.cacher.ICacher

    def decorator(fnc):
        """Decorator"""
        decorated = cls(fnc, capacity=capacity)
        functools.update_wrapper(decorated, fnc, updated=())
        return decorated

    return decorator


def memoize(fnc):
    """
    memoization decorator for single-argument functions.

    The decorated one is a :class:`icacher.cacher.ICacher` so that its cache
    can be managed with `reset`, `remove_cache` and so on.

    >>> @memoize
    ... def square(x):
    ...     '''Square of x.'''
    ...     return x * x
    >>> square(3)
    9
    >>> square.__name__, square.__doc__, square.is_cached(3)
    ('square', 'Square of x.', True)
    """
    return memoize_with()(fnc)

# vim:sw=4:ts=4:et:
