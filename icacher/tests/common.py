#
# Copyright (C) 2011 - 2017 Satoru SATOH <ssato at redhat.com>
#
# pylint: disable=missing-docstring
import json
import os.path
import shutil
import tempfile
import unittest


def setup_workdir():
    """
    >>> workdir = setup_workdir()
    >>> assert workdir != '.'
    >>> assert workdir != '/'
    >>> os.path.exists(workdir)
    True
    >>> os.rmdir(workdir)
    """
    return tempfile.mkdtemp(prefix="python-icacher-tests-")


def cleanup_workdir(workdir):
    """
    >>> workdir = setup_workdir()
    >>> os.path.exists(workdir)
    True
    >>> with open(os.path.join(workdir, "workdir.stamp"), 'w') as out:
    ...     _ = out.write("OK!\\n")
    >>> cleanup_workdir(workdir)
    >>> os.path.exists(workdir)
    False
    """
    assert workdir != '/'
    assert workdir != '.'

    shutil.rmtree(workdir)


def dump_json(obj, path):
    with open(path, 'w') as out:
        json.dump(obj, out)


class Counter(object):
    """Callable counting how many times it was called.

    >>> fnc = Counter(lambda x: x + 1)
    >>> fnc(1), fnc(1), fnc.ncalls, fnc.args
    (2, 2, 2, [1, 1])
    """

    def __init__(self, fnc):
        self.fnc = fnc
        self.args = []

    @property
    def ncalls(self):
        return len(self.args)

    def __call__(self, arg):
        self.args.append(arg)
        return self.fnc(arg)


def add(args):
    (lhs, rhs) = args
    return lhs + rhs


def must_not_be_called(*args):
    raise AssertionError("Must not be called: %r" % (args, ))


class TestsWithWorkdir(unittest.TestCase):

    def setUp(self):
        self.workdir = setup_workdir()

    def tearDown(self):
        cleanup_workdir(self.workdir)

# vim:sw=4:ts=4:et:
