#
# Copyright (C) 2015 - 2017 Satoru SATOH <ssato at redhat.com>
# License: GPLv3+
#
# pylint: disable=missing-docstring,invalid-name
import logging
import unittest

import icacher.globals as TT


class Test(unittest.TestCase):

    def test_10_get_logger(self):
        logger = TT.get_logger("icacher.tests.globals", level=logging.INFO)
        self.assertEqual(logger.name, "icacher.tests.globals")
        self.assertEqual(logger.level, logging.INFO)
        self.assertEqual(len(logger.handlers), 1)

        fmt = logger.handlers[0].formatter._fmt  # pylint: disable=W0212
        self.assertEqual(fmt, TT.LOGGING_FORMAT)

    def test_20_get_logger__twice(self):
        TT.get_logger("icacher.tests.globals2")
        logger = TT.get_logger("icacher.tests.globals2", level=logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.handlers[0].level, logging.DEBUG)

# vim:sw=4:ts=4:et:
