#
# Copyright (C) 2012 - 2017 Satoru SATOH <ssato@redhat.com>
# License: GPLv3+
#
"""Memoizing wrapper of single-argument functions.

:class:`ICacher` holds a function and a dict mapping arguments already
passed to it to the results it returned, so that the function runs at most
once per distinct argument until the cache is invalidated.

The wrapped function must be deterministic and free of side effects: a cached
result stands in for every later call with the same argument. This is not
checked at runtime.

Functions taking several arguments are cached by passing them as a tuple:

>>> adder = ICacher(lambda args: args[0] + args[1])
>>> adder.with_arg((20, 30))
50
>>> adder.is_cached((20, 30))
True
>>> adder.remove_cache((20, 30))
50
>>> adder.is_cached((20, 30))
False
"""
import logging


LOG = logging.getLogger(__name__)

# Capacity hint used when none is given; see :func:`icacher.config.setup`.
DEFAULT_CAPACITY = 0


def _ensure_callable(fnc):
    """
    :param fnc: Object to check
    :raises: ValueError if `fnc` is not callable

    >>> _ensure_callable(None)
    Traceback (most recent call last):
    ValueError: Given object is not callable!: None
    """
    if not callable(fnc):
        raise ValueError("Given object is not callable!: %r" % fnc)

    return fnc


def check_capacity(capacity):
    """
    :param capacity: Capacity hint, an int or a str of digits
    :return: Capacity hint as an int
    :raises: ValueError if `capacity` is not a non-negative integer

    >>> check_capacity("16")
    16
    >>> check_capacity(-1)
    Traceback (most recent call last):
    ValueError: Invalid capacity: -1
    >>> check_capacity(1.5)
    Traceback (most recent call last):
    ValueError: Invalid capacity: 1.5
    """
    try:
        val = int(capacity)
    except (TypeError, ValueError):
        raise ValueError("Invalid capacity: %r" % capacity)

    if val < 0 or val != float(capacity):
        raise ValueError("Invalid capacity: %r" % capacity)

    return val


class ICacher(object):
    """Function cacher.

    Not thread-safe; see :class:`icacher.locked.LockedICacher`.
    """

    def __init__(self, fnc, capacity=None):
        """
        :param fnc: Single-argument callable to cache results of
        :param capacity:
            How many distinct arguments are expected. It is only a hint and
            the cache grows beyond it if needed. Python dicts cannot reserve
            room in advance so it is just kept as `capacity` attribute.
        """
        if capacity is None:
            capacity = DEFAULT_CAPACITY

        self._fnc = _ensure_callable(fnc)
        self._values = {}
        self.capacity = check_capacity(capacity)

    @property
    def fnc(self):
        """The callable results are computed with."""
        return self._fnc

    def with_arg(self, arg):
        """
        Return the cached result for `arg` or compute, cache and return it.

        Exceptions raised by the callable propagate and nothing is cached for
        `arg` in that case.

        :param arg: Argument, must be hashable
        :return: Result of the callable for `arg`

        >>> calls = []
        >>> cacher = ICacher(lambda x: calls.append(x) or x * 2)
        >>> (cacher.with_arg(3), cacher.with_arg(3), calls)
        (6, 6, [3])
        """
        try:
            val = self._values[arg]
            LOG.debug("Cache hit: %r", arg)
            return val
        except KeyError:
            pass

        LOG.debug("Cache miss: %r", arg)
        val = self._fnc(arg)
        self._values[arg] = val

        return val

    def __call__(self, arg):
        return self.with_arg(arg)

    def void(self, arg):
        """Same as :meth:`with_arg` but returns nothing, to prime the cache.
        """
        self.with_arg(arg)

    def is_cached(self, arg):
        """
        :param arg: Argument
        :return: True if the result for `arg` is cached
        """
        return arg in self._values

    def __contains__(self, arg):
        return self.is_cached(arg)

    def __len__(self):
        return len(self._values)

    def remove_cache(self, arg, default=None):
        """
        Remove the cached result for `arg` and return it.

        :param arg: Argument
        :param default: Returned instead if no result for `arg` is cached
        """
        if arg not in self._values:
            return default

        LOG.debug("Remove the cache: %r", arg)
        return self._values.pop(arg)

    def reset(self):
        """Clear all of the cached results.
        """
        LOG.debug("Reset the cache of %d entries", len(self._values))
        self._values.clear()

    def to_unchanged(self, fnc):
        """
        Replace the callable but keep the results cached so far.

        Results computed with the previous callable are still returned for the
        arguments they were cached for. Use :meth:`to` unless that is what you
        want.

        :param fnc: New single-argument callable
        """
        _ensure_callable(fnc)
        LOG.debug("Switch the callable: %r -> %r", self._fnc, fnc)
        self._fnc = fnc

    def to(self, fnc):
        """
        Replace the callable and clear the cache.

        :param fnc: New single-argument callable
        """
        self.to_unchanged(fnc)
        self.reset()

    def cache_if(self, pred, arg):
        """
        Cache the result for `arg` only if `pred()` is true.

        `pred` is not evaluated if the result for `arg` is cached already.

        :param pred: Callable taking no arguments
        :param arg: Argument
        :return: True if a new result was computed and cached

        >>> cacher = ICacher(lambda x: x + 1)
        >>> cacher.cache_if(lambda: False, 1)
        False
        >>> cacher.cache_if(lambda: True, 1)
        True
        >>> cacher.cache_if(lambda: True, 1)
        False
        """
        if self.is_cached(arg) or not pred():
            return False

        self.void(arg)
        return True

    def cache_not_if(self, pred, arg):
        """
        Reciprocal of :meth:`cache_if`; cache the result for `arg` only if
        `pred()` is false.

        :param pred: Callable taking no arguments
        :param arg: Argument
        :return: True if a new result was computed and cached
        """
        if self.is_cached(arg) or pred():
            return False

        self.void(arg)
        return True

    def __copy__(self):
        other = self.__class__.__new__(self.__class__)
        other.__dict__.update(self.__dict__)
        other._values = self._values.copy()  # pylint: disable=protected-access
        return other

    def copy(self):
        """
        :return: A new cacher with the same callable and a copy of the cache

        >>> cacher = ICacher(str)
        >>> cacher.void(1)
        >>> other = cacher.copy()
        >>> other.reset()
        >>> (cacher.is_cached(1), other.is_cached(1))
        (True, False)
        """
        return self.__copy__()

    def __repr__(self):
        return "<%s fnc=%r cached=%d>" % (self.__class__.__name__, self._fnc,
                                          len(self._values))

# vim:sw=4:ts=4:et:
