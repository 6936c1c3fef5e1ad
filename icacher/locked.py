#
# Copyright (C) 2015 - 2017 Satoru SATOH <ssato@redhat.com>
# License: GPLv3+
#
"""Function cacher which may be shared among threads.
"""
import threading

import icacher.cacher


class LockedICacher(icacher.cacher.ICacher):
    """
    :class:`icacher.cacher.ICacher` serializing every operation with a lock.

    The lock is held while the callable computes a result on a cache miss, so
    that it runs at most once per argument even if several threads ask for the
    same one at once. The callable must not wait on other threads using the
    same cacher.
    """

    def __init__(self, fnc, capacity=None):
        super(LockedICacher, self).__init__(fnc, capacity=capacity)
        self._lock = threading.RLock()

    def with_arg(self, arg):
        with self._lock:
            return super(LockedICacher, self).with_arg(arg)

    def is_cached(self, arg):
        with self._lock:
            return super(LockedICacher, self).is_cached(arg)

    def __len__(self):
        with self._lock:
            return super(LockedICacher, self).__len__()

    def remove_cache(self, arg, default=None):
        with self._lock:
            return super(LockedICacher, self).remove_cache(arg, default)

    def reset(self):
        with self._lock:
            super(LockedICacher, self).reset()

    def to_unchanged(self, fnc):
        with self._lock:
            super(LockedICacher, self).to_unchanged(fnc)

    def to(self, fnc):
        with self._lock:
            super(LockedICacher, self).to(fnc)

    def cache_if(self, pred, arg):
        with self._lock:
            return super(LockedICacher, self).cache_if(pred, arg)

    def cache_not_if(self, pred, arg):
        with self._lock:
            return super(LockedICacher, self).cache_not_if(pred, arg)

    def __copy__(self):
        with self._lock:
            other = super(LockedICacher, self).__copy__()

        other._lock = threading.RLock()  # pylint: disable=protected-access
        return other

# vim:sw=4:ts=4:et:
